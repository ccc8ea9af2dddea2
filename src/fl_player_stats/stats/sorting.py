"""
Ordering of player records for reports.
"""

import logging
from typing import List, Optional

from .records import PlayerRecord

logger = logging.getLogger(__name__)

SORT_NAME = 'Name'
SORT_RANK = 'Rank'
SORT_LAST_SEEN = 'LastSeen'
SORT_FIELDS = (SORT_NAME, SORT_RANK, SORT_LAST_SEEN)

DIRECTION_ASC = 'Asc'
DIRECTION_DESC = 'Desc'
DIRECTIONS = (DIRECTION_ASC, DIRECTION_DESC)


def _name_key(record: PlayerRecord):
    return (record.name or '').casefold()


def _rank_key(record: PlayerRecord):
    return int(record.rank or 0)


def _last_seen_key(record: PlayerRecord):
    return record.lastseen


SORT_KEYS = {
    SORT_NAME: _name_key,
    SORT_RANK: _rank_key,
    SORT_LAST_SEEN: _last_seen_key,
}


def sort_players(players: List[PlayerRecord], sort: Optional[str], direction: Optional[str] = None) -> List[PlayerRecord]:
    """
    Sort player records in place.

    The ascending sort is stable. 'Desc' reverses the list after sorting, so
    records with equal keys also end up in reverse order. An unknown sort
    field leaves the order untouched, but 'Desc' still reverses it.

    Args:
        players: The records to sort.
        sort: 'Name', 'Rank' or 'LastSeen'.
        direction: 'Desc' for descending, anything else for ascending.

    Returns:
        The same list, for chaining.
    """
    key = SORT_KEYS.get(sort)
    if key is not None:
        players.sort(key=key)
    else:
        logger.debug(f"Unknown sort field {sort!r}, keeping current order")

    if direction == DIRECTION_DESC:
        players.reverse()

    return players
