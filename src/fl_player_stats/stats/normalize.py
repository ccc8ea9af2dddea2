"""
Normalizing fields that may be absent, a single value or a list.

Visited-location fields are counted, ``id, count`` pair fields such as
``rm_completed`` and ``ship_type_killed`` are summed over their count
component.
"""

import re

from ..errors import SaveFieldError
from ..formats.fields import FieldValue, Scalar, ValueList

LEADING_INT = re.compile(r'\s*([+-]?\d+)')
PAIR_SEPARATOR = ','


def parse_int(text: str) -> int:
    """
    Parse the leading integer of a value, ignoring anything that follows.

    Raises:
        SaveFieldError: If the value does not start with an integer.
    """
    match = LEADING_INT.match(text)
    if not match:
        raise SaveFieldError(f"Expected an integer, got {text!r}", value=text)
    return int(match.group(1))


def pair_count(entry: str) -> int:
    """
    Return the count component of an ``id, count`` pair.

    Raises:
        SaveFieldError: If the entry has no comma or the count is not numeric.
    """
    parts = entry.split(PAIR_SEPARATOR)
    if len(parts) < 2:
        raise SaveFieldError(f"Expected an 'id, count' pair, got {entry!r}", value=entry)
    try:
        return parse_int(parts[1])
    except SaveFieldError:
        raise SaveFieldError(f"Pair {entry!r} has a non-numeric count", value=entry) from None


def count_values(field: FieldValue) -> int:
    """Return 0 for an absent field, 1 for a single value and the length of a list."""
    if isinstance(field, ValueList):
        return len(field)
    if isinstance(field, Scalar):
        return 1
    return 0


def sum_pair_counts(field: FieldValue) -> int:
    """Sum the count component of every ``id, count`` entry of a field; absent fields sum to 0."""
    if isinstance(field, (Scalar, ValueList)):
        return sum(pair_count(entry) for entry in field)
    return 0
