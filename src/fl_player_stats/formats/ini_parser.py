"""
Freelancer INI Reader

Turns the text of a Freelancer ini or save file into a mapping of section
names to ``Section`` objects. Sections sharing a name are merged and keys
that repeat inside a section are kept as an ordered ``ValueList``.
A ; or # ends a value unless it sits inside a quoted string.
"""

import logging
import re
from typing import Optional

from .fields import IniDocument, Section

logger = logging.getLogger(__name__)

SECTION_PATTERN = re.compile(r'^\[(?P<name>[^\]]*)\]')
COMMENT_PREFIXES = (';', '#')
ROOT_SECTION = ""


def _strip_comment(value: str) -> str:
    """Cut a value at the first ; or # that is not inside a leading quoted string."""
    value = value.strip()
    start = 0
    if value[:1] in ('"', "'"):
        closing = value.find(value[0], 1)
        if closing != -1:
            start = closing + 1
    for index in range(start, len(value)):
        if value[index] in COMMENT_PREFIXES:
            return value[:index].rstrip()
    return value


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_ini(text: str) -> IniDocument:
    """
    Parse ini text into sections.

    Args:
        text: The raw file contents.

    Returns:
        Dictionary of section name to Section. Keys that occur before the
        first section header are stored under the "" section. A document
        with no keys and no section headers yields an empty dictionary.
    """
    document: IniDocument = {}
    current: Optional[Section] = None

    if text.startswith('\ufeff'):
        text = text[1:]

    for line_num, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        section_match = SECTION_PATTERN.match(line)
        if section_match:
            name = section_match.group('name').strip()
            current = document.get(name)
            if current is None:
                current = Section(name)
                document[name] = current
            continue

        if current is None:
            logger.debug(f"Line {line_num}: key outside of any section")
            current = document.setdefault(ROOT_SECTION, Section(ROOT_SECTION))

        if '=' in line:
            key, value = line.split('=', 1)
        else:
            key, value = _strip_comment(line), ''

        key = key.strip()
        if not key:
            logger.debug(f"Line {line_num}: ignoring entry without a key")
            continue

        current.add(key, _unquote(_strip_comment(value)))

    return document
