"""
Freelancer Player Statistics

Discovery, decoding, aggregation, filtering and sorting of per-character
statistics read from account save files.
"""

from .decoder import decode_name, encode_name
from .extractor import PlayerStatsExtractor
from .filters import RANGE_CREATED, RANGE_LAST_SEEN, RANGE_TYPES, RangeFilter
from .normalize import count_values, pair_count, parse_int, sum_pair_counts
from .records import PlayerRecord, build_player_record
from .sorting import DIRECTION_ASC, DIRECTION_DESC, SORT_FIELDS, SORT_LAST_SEEN, SORT_NAME, SORT_RANK, sort_players
from .walker import find_save_files

__all__ = [
    'decode_name',
    'encode_name',
    'PlayerStatsExtractor',
    'RANGE_CREATED',
    'RANGE_LAST_SEEN',
    'RANGE_TYPES',
    'RangeFilter',
    'count_values',
    'pair_count',
    'parse_int',
    'sum_pair_counts',
    'PlayerRecord',
    'build_player_record',
    'DIRECTION_ASC',
    'DIRECTION_DESC',
    'SORT_FIELDS',
    'SORT_LAST_SEEN',
    'SORT_NAME',
    'SORT_RANK',
    'sort_players',
    'find_save_files',
]
