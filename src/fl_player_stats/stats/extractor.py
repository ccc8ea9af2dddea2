"""
Player Stats Extractor

Walks a directory of Freelancer account saves, builds one PlayerRecord per
non-empty character file and sorts the result on request.
"""

import logging
from typing import List, Optional, Union

from ..formats.flcodec import read_save_file
from ..hashing.archetypes import ArchetypeLookup
from .filters import RANGE_LAST_SEEN, RangeFilter
from .records import PlayerRecord, build_player_record
from .sorting import sort_players
from .walker import find_save_files

logger = logging.getLogger(__name__)


class PlayerStatsExtractor:
    """
    Extracts per-player statistics from save files.

    Both public methods return the extractor so calls can be chained:

        extractor.parse_player_files(save_dir, 7).sort_player_files('Rank', 'Desc').players

    Attributes:
        lookup (ArchetypeLookup): Resolves ship archetype ids to nicknames.
        players (List[PlayerRecord]): Records from the last extraction run.
    """

    def __init__(self, lookup: ArchetypeLookup) -> None:
        """
        Initialize the extractor.

        Args:
            lookup: An archetype lookup built from the Freelancer install directory.
        """
        self.lookup = lookup
        self.players: List[PlayerRecord] = []

    def parse_player_files(self, save_location: str, range: Optional[Union[int, str]] = None,
                           range_type: str = RANGE_LAST_SEEN) -> "PlayerStatsExtractor":
        """
        Read every save file under save_location into self.players.

        Args:
            save_location: Root directory of the account saves.
            range: Optional number of days; only files whose chosen timestamp
                is within that many days of now are kept.
            range_type: 'LastSeen' or 'Created'.

        Returns:
            The extractor, for chaining.

        Raises:
            OSError: If the directory or a save file cannot be read.
            SaveFieldError: If a save file contains a malformed numeric field.
            ValueError: If range or range_type are invalid.
        """
        range_filter = RangeFilter(range, range_type)
        self.players = []

        save_files = find_save_files(save_location)
        logger.info(f"Found {len(save_files)} save files in {save_location}")

        skipped = 0
        for save_file in save_files:
            document = read_save_file(save_file)
            record = build_player_record(save_file, document, self.lookup, range_filter)
            if record is None:
                skipped += 1
                continue
            self.players.append(record)

        logger.info(f"Built {len(self.players)} player records ({skipped} skipped)")
        return self

    def sort_player_files(self, sort: Optional[str], direction: Optional[str] = None) -> "PlayerStatsExtractor":
        """
        Sort the extracted records in place.

        Args:
            sort: 'Name', 'Rank' or 'LastSeen'. Other values keep the current order.
            direction: 'Desc' to reverse the sorted list.

        Returns:
            The extractor, for chaining.
        """
        sort_players(self.players, sort, direction)
        return self
