"""
Character name encoding used by Freelancer save files.

The ``name`` field stores the UTF-16 code units of the display name as
consecutive four digit hex groups, e.g. ``00480069`` for "Hi".
"""

import re
import struct

CHUNK_SIZE = 4
PLACEHOLDER_UNIT = 0xFFFD
HEX_CHUNK = re.compile(r'[0-9A-Fa-f]{1,4}')


def decode_name(encoded: str) -> str:
    """
    Decode a hex encoded character name.

    A trailing group shorter than four digits is decoded as it is. A group
    that is not valid hex becomes U+FFFD instead of failing the whole name.
    Surrogate pairs are joined into a single character.

    Args:
        encoded: The raw value of the ``name`` field.

    Returns:
        The display name.
    """
    units = []
    for start in range(0, len(encoded), CHUNK_SIZE):
        chunk = encoded[start:start + CHUNK_SIZE]
        if HEX_CHUNK.fullmatch(chunk):
            units.append(int(chunk, 16))
        else:
            units.append(PLACEHOLDER_UNIT)

    raw = struct.pack(f'<{len(units)}H', *units)
    return raw.decode('utf-16-le', errors='surrogatepass')


def encode_name(name: str) -> str:
    """Encode a display name the way the game writes it to the ``name`` field."""
    raw = name.encode('utf-16-be', errors='surrogatepass')
    return raw.hex()
