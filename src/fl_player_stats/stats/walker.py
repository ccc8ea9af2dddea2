"""
Save file discovery.
"""

import os
from typing import List

SAVE_FILE_SUFFIX = 'fl'


def find_save_files(directory: str, suffix: str = SAVE_FILE_SUFFIX) -> List[str]:
    """
    Recursively collect every file under ``directory`` whose name ends with ``suffix``.

    The match is a plain case-sensitive suffix check, so ``name.fl`` and
    ``restart.fl`` match while ``name.FL`` does not. Symlinked directories
    are not followed.

    Args:
        directory: The root directory to search.
        suffix: File name suffix to match.

    Returns:
        File paths in depth-first order.

    Raises:
        OSError: If the directory or any subdirectory cannot be listed.
    """
    save_files = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                save_files.extend(find_save_files(entry.path, suffix))
            elif entry.name.endswith(suffix):
                save_files.append(entry.path)
    return save_files
