"""Constants used throughout Caltime.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import datetime, timezone

# Millisecond conversion factors
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR

MINUTES_PER_DAY: int = 1_440

# Limits of representable instants, stored in UTC
EARLIEST_INSTANT: datetime = datetime.min.replace(tzinfo=timezone.utc)
LATEST_INSTANT: datetime = datetime.max.replace(tzinfo=timezone.utc)

__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MINUTES_PER_DAY",
    "EARLIEST_INSTANT",
    "LATEST_INSTANT",
]
