"""
Player records built from parsed save files.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ..errors import SaveFieldError
from ..formats.fields import IniDocument, Section
from ..hashing.archetypes import ArchetypeLookup
from .decoder import decode_name
from .filters import RangeFilter
from .normalize import count_values, parse_int, sum_pair_counts

logger = logging.getLogger(__name__)

IDENTITY_SECTION = 'Player'
STATISTICS_SECTION = 'mPlayer'

DEFAULT_BASE = 'In Space'
DEFAULT_FACTION = 'Freelancer'


@dataclass
class PlayerRecord:
    """Statistics for one character save file."""
    lastseen: datetime
    created: datetime
    path: Optional[str] = None
    name: Optional[str] = None
    system: Optional[str] = None
    rank: Optional[int] = None
    pvpkills: Optional[int] = None
    money: Optional[int] = None
    shiparch: Optional[str] = None
    base: Optional[str] = None
    faction: Optional[str] = None
    time_played: float = 0
    bases_visited: int = 0
    systems_visited: int = 0
    holes_visited: int = 0
    missions: int = 0
    kills: int = 0


def file_timestamps(path: str) -> Tuple[datetime, datetime]:
    """
    Return the (last seen, created) timestamps of a save file.

    Last seen is the modification time. Created is the birth time where the
    platform records one and the inode change time otherwise.
    """
    stat = os.stat(path)
    created = getattr(stat, 'st_birthtime', stat.st_ctime)
    return datetime.fromtimestamp(stat.st_mtime), datetime.fromtimestamp(created)


def _int_field(section: Section, key: str) -> int:
    text = section.text(key)
    if text is None:
        return 0
    return parse_int(text)


def _float_field(section: Section, key: str) -> float:
    text = section.text(key)
    if text is None or not text.strip():
        return 0
    try:
        return float(text)
    except ValueError:
        raise SaveFieldError(f"Expected a number, got {text!r}", value=text) from None


def _count_field(section: Section, key: str) -> int:
    return count_values(section.get(key))


def _sum_field(section: Section, key: str) -> int:
    return sum_pair_counts(section.get(key))


def _read(section: Section, key: str, reader):
    try:
        return reader(section, key)
    except SaveFieldError as e:
        raise SaveFieldError(str(e), section=section.name, key=key, value=e.value) from None


def _apply_identity(record: PlayerRecord, section: Section, lookup: ArchetypeLookup) -> None:
    name = section.text('name')
    record.name = decode_name(name) if name is not None else None
    record.system = section.text('system')
    record.rank = _read(section, 'rank', _int_field)
    record.pvpkills = _read(section, 'num_kills', _int_field)
    record.money = _read(section, 'money', _int_field)
    record.shiparch = lookup.resolve(section.text('ship_archetype'))
    record.base = section.text('base') or DEFAULT_BASE
    record.faction = section.text('rep_group') or DEFAULT_FACTION


def _apply_statistics(record: PlayerRecord, section: Section) -> None:
    record.time_played = _read(section, 'total_time_played', _float_field)
    record.bases_visited = _read(section, 'base_visited', _count_field)
    record.systems_visited = _read(section, 'sys_visited', _count_field)
    record.holes_visited = _read(section, 'holes_visited', _count_field)
    record.missions = _read(section, 'rm_completed', _sum_field)
    record.kills = _read(section, 'ship_type_killed', _sum_field)


def build_player_record(path: str, document: IniDocument, lookup: ArchetypeLookup,
                        range_filter: Optional[RangeFilter] = None) -> Optional[PlayerRecord]:
    """
    Build the record for one parsed save file.

    Args:
        path: Path of the save file, used for its timestamps.
        document: The parsed sections of the file.
        lookup: Archetype lookup used to name the player's ship.
        range_filter: Optional recency window, checked before any field is read.

    Returns:
        The record, or None if the file is empty or outside the range window.

    Raises:
        SaveFieldError: If a numeric or pair field is malformed. The error
            names the file, section and key.
        OSError: If the file timestamps cannot be read.
    """
    if not document:
        logger.debug(f"Skipping empty save file: {path}")
        return None

    lastseen, created = file_timestamps(path)

    if range_filter is not None and range_filter.excludes(lastseen, created):
        logger.debug(f"Skipping save file outside the {range_filter.range_days} day window: {path}")
        return None

    record = PlayerRecord(lastseen=lastseen, created=created, path=path)

    try:
        identity = document.get(IDENTITY_SECTION)
        if identity is not None:
            _apply_identity(record, identity, lookup)

        statistics = document.get(STATISTICS_SECTION)
        if statistics is not None:
            _apply_statistics(record, statistics)
    except SaveFieldError as e:
        raise e.with_location(path, e.section, e.key) from e

    return record
