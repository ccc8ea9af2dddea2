"""
Recency window applied while save files are being read.
"""

from datetime import datetime, timedelta
from typing import Optional, Union

RANGE_LAST_SEEN = 'LastSeen'
RANGE_CREATED = 'Created'
RANGE_TYPES = (RANGE_LAST_SEEN, RANGE_CREATED)


class RangeFilter:
    """
    Keeps only save files whose chosen timestamp lies within the last N days.

    The cutoff is fixed when the filter is created, so every file of one
    extraction run is measured against the same instant. A timestamp equal
    to the cutoff is kept.

    'Created' reads the file birth time where the platform records one. On
    Linux that is not available and the inode change time is used instead,
    which moves on every write or chmod, so a Created window there behaves
    much like a LastSeen window.

    Attributes:
        range_days (Optional[int]): Window size in days; None or 0 disables filtering.
        range_type (str): Which timestamp to check, 'LastSeen' or 'Created'.
        cutoff (Optional[datetime]): Oldest accepted timestamp, None when disabled.
    """

    def __init__(self, range_days: Optional[Union[int, str]] = None, range_type: str = RANGE_LAST_SEEN,
                 now: Optional[datetime] = None) -> None:
        """
        Initialize the filter.

        Args:
            range_days: Number of days to look back. Numeric strings are accepted.
            range_type: 'LastSeen' (file modification time) or 'Created' (file birth
                time, inode change time on Linux).
            now: Reference instant, defaults to the current local time.

        Raises:
            ValueError: If range_type is unknown or range_days is negative or not a number.
        """
        if range_type not in RANGE_TYPES:
            raise ValueError(f"Invalid range type: {range_type}. Use {', '.join(RANGE_TYPES)}.")

        if range_days is not None:
            range_days = int(range_days)
            if range_days < 0:
                raise ValueError(f"Range must be a positive number of days, got {range_days}")

        self.range_days = range_days or None
        self.range_type = range_type
        self.cutoff = None
        if self.range_days:
            self.cutoff = (now or datetime.now()) - timedelta(days=self.range_days)

    @property
    def active(self) -> bool:
        return self.cutoff is not None

    def excludes(self, lastseen: datetime, created: datetime) -> bool:
        """
        Check whether a file falls outside the window.

        Args:
            lastseen: File modification time.
            created: File creation time.

        Returns:
            True if the file should be skipped.
        """
        if not self.active:
            return False
        timestamp = lastseen if self.range_type == RANGE_LAST_SEEN else created
        return timestamp < self.cutoff

    def __repr__(self) -> str:
        return f"RangeFilter(range_days={self.range_days!r}, range_type={self.range_type!r})"
