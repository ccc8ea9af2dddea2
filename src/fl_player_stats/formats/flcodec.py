"""
Reading Freelancer save files.

Server-side account saves are plain text, single-player saves are
obfuscated with the "Gene" cipher and start with the ``FLS1`` header.
Both are handed to the text ini reader after decoding.
"""

import logging
from pathlib import Path
from typing import Union

from .fields import IniDocument
from .ini_parser import parse_ini

logger = logging.getLogger(__name__)

FLS1_MAGIC = b"FLS1"
GENE_KEY = b"Gene"


def _gene_cipher(data: bytes) -> bytes:
    return bytes(
        byte ^ (((GENE_KEY[i % 4] + i) % 256) | 0x80)
        for i, byte in enumerate(data)
    )


def decrypt_fls1(data: bytes) -> bytes:
    """Return the plain text bytes of a save; data without the FLS1 header is returned unchanged."""
    if not data.startswith(FLS1_MAGIC):
        return data
    return _gene_cipher(data[len(FLS1_MAGIC):])


def encrypt_fls1(data: bytes) -> bytes:
    """Obfuscate plain save text the way the game writes single-player saves."""
    return FLS1_MAGIC + _gene_cipher(data)


def decode_save_bytes(data: bytes) -> str:
    """Decode raw save file bytes into text."""
    return decrypt_fls1(data).decode('utf-8', errors='replace')


def read_save_file(path: Union[str, Path]) -> IniDocument:
    """
    Read and parse one save file.

    Args:
        path: Path to the .fl file.

    Returns:
        The parsed sections. An empty file gives an empty dictionary.

    Raises:
        OSError: If the file cannot be read.
    """
    data = Path(path).read_bytes()
    if data.startswith(FLS1_MAGIC):
        logger.debug(f"Decrypting FLS1 save: {path}")
    return parse_ini(decode_save_bytes(data))
