"""DurationPolicy enumeration for span measurement."""

from __future__ import annotations

from enum import IntEnum


class DurationPolicy(IntEnum):
    """How measure_spans counts the time covered by a set of spans.

    RAW_MSECS sums exact durations in milliseconds. The natural policies
    count distinct civil units (seconds, minutes, hours or days) that the
    spans touch, aligned to unit boundaries in a timezone.

    Examples:
        >>> DurationPolicy.NATURAL_MINS.is_natural
        True
    """

    RAW_MSECS = 0
    NATURAL_SECS = 1
    NATURAL_MINS = 2
    NATURAL_HOURS = 3
    NATURAL_DAYS = 4

    @property
    def is_natural(self) -> bool:
        """True for every policy except RAW_MSECS."""
        return self is not DurationPolicy.RAW_MSECS


__all__ = ["DurationPolicy"]
