"""
Binary INI (BINI) decoder.

Most ini files shipped in a Freelancer DATA directory are stored in the
compiled BINI format rather than as text. The layout is little-endian:

    header   "BINI", uint32 version, uint32 string table offset
    section  uint16 name offset, uint16 entry count
    entry    uint16 name offset, uint8 value count
    value    uint8 type, 4 bytes payload (1 int32, 2 float32, 3 string offset)

Names and string values point into a table of NUL-terminated strings at the
end of the file. Decoded values are rendered as text so the result has the
same shape as ``parse_ini``.
"""

import struct
from typing import Tuple

from .fields import IniDocument, Section

BINI_MAGIC = b"BINI"
HEADER_SIZE = 12

VALUE_INT = 1
VALUE_FLOAT = 2
VALUE_STRING = 3


def is_bini(data: bytes) -> bool:
    return data[:4] == BINI_MAGIC


def _read_string(data: bytes, table_offset: int, offset: int) -> str:
    start = table_offset + offset
    end = data.find(b"\x00", start)
    if end == -1:
        end = len(data)
    return data[start:end].decode('latin-1')


def _format_float(value: float) -> str:
    text = f"{value:.6f}".rstrip('0')
    return text + '0' if text.endswith('.') else text


def _read_value(data: bytes, offset: int, table_offset: int) -> Tuple[str, int]:
    value_type = data[offset]
    payload = data[offset + 1:offset + 5]
    if value_type == VALUE_INT:
        text = str(struct.unpack('<i', payload)[0])
    elif value_type == VALUE_FLOAT:
        text = _format_float(struct.unpack('<f', payload)[0])
    elif value_type == VALUE_STRING:
        text = _read_string(data, table_offset, struct.unpack('<i', payload)[0])
    else:
        raise ValueError(f"Unknown BINI value type {value_type} at offset {offset}")
    return text, offset + 5


def parse_bini(data: bytes) -> IniDocument:
    """
    Decode a BINI file into sections.

    Args:
        data: The complete file contents.

    Returns:
        Dictionary of section name to Section.

    Raises:
        ValueError: If the data is not BINI or is truncated.
    """
    if not is_bini(data):
        raise ValueError("Not a BINI file")

    try:
        _version, table_offset = struct.unpack_from('<II', data, 4)
        document: IniDocument = {}
        offset = HEADER_SIZE

        while offset < table_offset:
            name_offset, entry_count = struct.unpack_from('<HH', data, offset)
            offset += 4
            name = _read_string(data, table_offset, name_offset)
            section = document.get(name)
            if section is None:
                section = Section(name)
                document[name] = section

            for _ in range(entry_count):
                key_offset, value_count = struct.unpack_from('<HB', data, offset)
                offset += 3
                key = _read_string(data, table_offset, key_offset)
                values = []
                for _ in range(value_count):
                    text, offset = _read_value(data, offset, table_offset)
                    values.append(text)
                section.add(key, ', '.join(values))
    except (struct.error, IndexError) as e:
        raise ValueError(f"Truncated BINI data: {e}")

    return document
