"""
Freelancer nickname hash.

The game refers to archetypes, bases and systems by a 32-bit hash of their
lower-cased nickname. Save files store these hashes (for example
``ship_archetype``), so resolving them means hashing every known nickname.
"""

LOGICAL_BITS = 30
PHYSICAL_BITS = 32
POLYNOMIAL = 0xA001 << (LOGICAL_BITS - 16)


def _build_table():
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


HASH_TABLE = _build_table()


def flhash(nickname: str) -> int:
    """
    Compute the Freelancer id hash of a nickname.

    Args:
        nickname: The nickname, compared case-insensitively.

    Returns:
        The unsigned 32-bit hash.
    """
    value = 0
    for byte in nickname.lower().encode('latin-1', errors='replace'):
        value = (value >> 8) ^ HASH_TABLE[(value ^ byte) & 0xFF]

    value = int.from_bytes(value.to_bytes(4, 'little'), 'big')
    return (value >> (PHYSICAL_BITS - LOGICAL_BITS)) | 0x80000000


def to_unsigned(value: int) -> int:
    """Normalize a hash that was written as a signed 32-bit integer."""
    return value & 0xFFFFFFFF
