"""
Freelancer File Formats

Readers for the text ini format, compiled BINI files and FLS1 encrypted saves.
All of them produce a dictionary of ``Section`` objects whose fields are
``ABSENT``, ``Scalar`` or ``ValueList``.
"""

from .fields import ABSENT, Absent, FieldValue, IniDocument, Scalar, Section, ValueList, first_value
from .ini_parser import parse_ini
from .bini import is_bini, parse_bini
from .flcodec import decode_save_bytes, decrypt_fls1, encrypt_fls1, read_save_file

__all__ = [
    'ABSENT',
    'Absent',
    'FieldValue',
    'IniDocument',
    'Scalar',
    'Section',
    'ValueList',
    'first_value',
    'parse_ini',
    'is_bini',
    'parse_bini',
    'decode_save_bytes',
    'decrypt_fls1',
    'encrypt_fls1',
    'read_save_file',
]
