"""
Exceptions raised while extracting player statistics.
"""

from typing import Optional


class SaveFieldError(ValueError):
    """A field in a save file holds a value that cannot be aggregated."""

    def __init__(self, message: str, path: Optional[str] = None, section: Optional[str] = None,
                 key: Optional[str] = None, value: Optional[str] = None) -> None:
        self.path = path
        self.section = section
        self.key = key
        self.value = value
        super().__init__(message)

    def with_location(self, path: str, section: str, key: str) -> "SaveFieldError":
        """Return a copy of this error that names the file and field it came from."""
        return SaveFieldError(
            f"{path}: [{section}] {key}: {self}",
            path=path,
            section=section,
            key=key,
            value=self.value,
        )
