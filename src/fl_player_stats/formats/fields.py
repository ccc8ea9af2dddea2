"""
Field values produced by the ini readers.

A key that never appears is ``ABSENT``, a key that appears once is a
``Scalar`` and a key that repeats within a section is a ``ValueList`` that
keeps the values in file order. Consumers match on the type instead of
probing whether a value happens to be a list.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple, Union


class Absent:
    """Marker for a key that does not occur in its section."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True)
class Scalar:
    value: str

    def __iter__(self) -> Iterator[str]:
        yield self.value


@dataclass(frozen=True)
class ValueList:
    values: Tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


FieldValue = Union[Absent, Scalar, ValueList]


def first_value(field: FieldValue):
    """Return the first raw value of a field, or None when it is absent."""
    if isinstance(field, Scalar):
        return field.value
    if isinstance(field, ValueList):
        return field.values[0] if field.values else None
    return None


class Section:
    """An ordered group of key/value fields from one ``[Name]`` block."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._fields: Dict[str, FieldValue] = {}

    def add(self, key: str, value: str) -> None:
        """Add one occurrence of ``key``; a repeated key turns into a ValueList."""
        current = self._fields.get(key, ABSENT)
        if isinstance(current, Scalar):
            self._fields[key] = ValueList((current.value, value))
        elif isinstance(current, ValueList):
            self._fields[key] = ValueList(current.values + (value,))
        else:
            self._fields[key] = Scalar(value)

    def get(self, key: str) -> FieldValue:
        return self._fields.get(key, ABSENT)

    def text(self, key: str):
        """Return the raw string of a single-valued field or None."""
        return first_value(self.get(key))

    def keys(self):
        return self._fields.keys()

    def items(self):
        return self._fields.items()

    def __contains__(self, key: str) -> bool:
        return key in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Section({self.name!r}, {len(self._fields)} fields)"


IniDocument = Dict[str, Section]
