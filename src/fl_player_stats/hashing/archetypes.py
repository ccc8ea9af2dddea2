"""
Archetype Lookup

Maps the numeric archetype ids found in save files back to nicknames by
hashing every nickname declared in a Freelancer installation's ini files.
The lookup is built once and handed to the extractor.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from ..formats.bini import is_bini, parse_bini
from ..formats.fields import IniDocument, Scalar, ValueList
from ..formats.ini_parser import parse_ini
from .flhash import flhash, to_unsigned

logger = logging.getLogger(__name__)

NICKNAME_KEY = 'nickname'
INI_EXTENSION = '.ini'
DATA_DIR_NAMES = ('DATA', 'Data', 'data')


class ArchetypeLookup:
    """
    Resolves Freelancer id hashes to nicknames.

    Attributes:
        install_dir (Optional[Path]): The install directory that was scanned.
        data_dir (Optional[Path]): The directory the ini files were read from.
    """

    def __init__(self, install_dir: Optional[Union[str, Path]] = None,
                 nicknames: Optional[Iterable[str]] = None) -> None:
        """
        Build the lookup table.

        Args:
            install_dir: Freelancer install directory, or its DATA directory.
                When None, only ``nicknames`` are registered.
            nicknames: Extra nicknames to register.

        Raises:
            FileNotFoundError: If install_dir does not exist.
        """
        self._names: Dict[int, str] = {}
        self.install_dir = None
        self.data_dir = None

        if install_dir is not None:
            self.install_dir = Path(install_dir)
            if not self.install_dir.is_dir():
                raise FileNotFoundError(f"Freelancer install directory not found: {self.install_dir}")
            self.data_dir = self._find_data_dir(self.install_dir)
            self._scan(self.data_dir)

        for nickname in nicknames or ():
            self.register(nickname)

    @staticmethod
    def _find_data_dir(install_dir: Path) -> Path:
        for name in DATA_DIR_NAMES:
            candidate = install_dir / name
            if candidate.is_dir():
                return candidate
        return install_dir

    def _scan(self, data_dir: Path) -> None:
        file_count = 0
        for root, _dirs, files in os.walk(data_dir):
            for file_name in files:
                if not file_name.lower().endswith(INI_EXTENSION):
                    continue
                file_path = Path(root) / file_name
                try:
                    document = self._read_ini(file_path)
                except ValueError as e:
                    logger.warning(f"Skipping unreadable ini file {file_path}: {e}")
                    continue
                self._register_document(document)
                file_count += 1

        logger.info(f"Loaded {len(self._names)} nicknames from {file_count} ini files in {data_dir}")

    @staticmethod
    def _read_ini(file_path: Path) -> IniDocument:
        data = file_path.read_bytes()
        if is_bini(data):
            return parse_bini(data)
        return parse_ini(data.decode('latin-1'))

    def _register_document(self, document: IniDocument) -> None:
        for section in document.values():
            field = section.get(NICKNAME_KEY)
            if isinstance(field, (Scalar, ValueList)):
                for nickname in field:
                    self.register(nickname)

    def register(self, nickname: str) -> int:
        """
        Add a nickname to the table.

        Args:
            nickname: The nickname to register.

        Returns:
            The hash the nickname was stored under.
        """
        nickname = nickname.strip()
        key = flhash(nickname)
        self._names.setdefault(key, nickname)
        return key

    def resolve(self, numeric_id: Union[int, str, None]) -> Optional[str]:
        """
        Resolve an archetype id to its nickname.

        Args:
            numeric_id: The id as stored in a save file, either an int or a
                numeric string. Signed 32-bit forms are accepted.

        Returns:
            The nickname, or None if the id is unknown or not numeric.
        """
        if numeric_id is None:
            return None
        if isinstance(numeric_id, str):
            try:
                numeric_id = int(float(numeric_id.strip()))
            except (ValueError, OverflowError):
                logger.debug(f"Archetype id is not numeric: {numeric_id!r}")
                return None

        name = self._names.get(to_unsigned(numeric_id))
        if name is None:
            logger.debug(f"Unknown archetype id: {numeric_id}")
        return name

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, numeric_id: int) -> bool:
        return to_unsigned(numeric_id) in self._names
