"""TimeSpan class representing a slice of clock time within one day.

A TimeSpan is a time-of-day start plus a duration. It never crosses
midnight: the start offset plus the duration is at most 24 hours.
"""

from __future__ import annotations

from datetime import time

from caltime._internal.constants import (
    MINUTES_PER_DAY,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from caltime._internal.validation import validate_range
from caltime.errors import InvalidArgumentRangeError, InvalidArgumentTypeError


def _require_time_span(name: str, value: object) -> TimeSpan:
    if not isinstance(value, TimeSpan):
        raise InvalidArgumentTypeError(
            f"{name} must be a TimeSpan, got {type(value).__name__}"
        )
    return value


class TimeSpan:
    """A span of clock time within a single civil day.

    The span covers [begin, end) where begin is the time of day given by
    hour, minute, second and millisecond, and end is begin plus the
    duration. End is exclusive.

    Two TimeSpans are equal only when every component matches. A span of
    90 minutes is therefore not equal to one of 89 minutes and 60 seconds,
    though the latter cannot be built since seconds are limited to 0-59.

    Attributes:
        hour: Start hour (0-23).
        minute: Start minute (0-59).
        second: Start second (0-59).
        millisecond: Start millisecond (0-999).
        duration_mins: Whole minutes of duration (0-1440).
        duration_secs: Extra seconds of duration (0-59).
        duration_ms: Extra milliseconds of duration (0-999).

    Examples:
        >>> evening = TimeSpan(16, 0, 0, 0, 360)
        >>> str(evening)
        '16:00:00.000-22:00:00.000'
        >>> evening.total_duration()
        21600000
    """

    __slots__ = (
        "_hour",
        "_minute",
        "_second",
        "_millisecond",
        "_duration_mins",
        "_duration_secs",
        "_duration_ms",
    )

    @validate_range(
        hour=(0, 23),
        minute=(0, 59),
        second=(0, 59),
        millisecond=(0, 999),
        duration_mins=(0, MINUTES_PER_DAY),
        duration_secs=(0, 59),
        duration_ms=(0, 999),
    )
    def __init__(
        self,
        hour: int,
        minute: int,
        second: int,
        millisecond: int,
        duration_mins: int,
        duration_secs: int = 0,
        duration_ms: int = 0,
    ) -> None:
        """Create a TimeSpan.

        Raises:
            InvalidArgumentTypeError: If any component is not an integer.
            InvalidArgumentRangeError: If a component is out of range, or
                the span would run past midnight.
        """
        self._hour = hour
        self._minute = minute
        self._second = second
        self._millisecond = millisecond
        self._duration_mins = duration_mins
        self._duration_secs = duration_secs
        self._duration_ms = duration_ms

        if self.end_ms > MS_PER_DAY:
            raise InvalidArgumentRangeError(
                f"time span {self._format_offset(self.begin_ms)} plus "
                f"{self.total_duration()} ms runs past midnight"
            )

    @classmethod
    def _from_offsets(cls, begin_ms: int, end_ms: int) -> TimeSpan:
        """Internal factory from millisecond offsets since midnight.

        This bypasses validation; callers guarantee
        0 <= begin_ms <= end_ms <= 24h and begin_ms < 24h.
        """
        instance = object.__new__(cls)
        instance._hour, rest = divmod(begin_ms, MS_PER_HOUR)
        instance._minute, rest = divmod(rest, MS_PER_MINUTE)
        instance._second, instance._millisecond = divmod(rest, MS_PER_SECOND)
        duration = end_ms - begin_ms
        instance._duration_mins, rest = divmod(duration, MS_PER_MINUTE)
        instance._duration_secs, instance._duration_ms = divmod(rest, MS_PER_SECOND)
        return instance

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def hour(self) -> int:
        """Start hour (0-23)."""
        return self._hour

    @property
    def minute(self) -> int:
        """Start minute (0-59)."""
        return self._minute

    @property
    def second(self) -> int:
        """Start second (0-59)."""
        return self._second

    @property
    def millisecond(self) -> int:
        """Start millisecond (0-999)."""
        return self._millisecond

    @property
    def duration_mins(self) -> int:
        """Whole minutes of the duration."""
        return self._duration_mins

    @property
    def duration_secs(self) -> int:
        """Seconds of the duration beyond the whole minutes (0-59)."""
        return self._duration_secs

    @property
    def duration_ms(self) -> int:
        """Milliseconds of the duration beyond the whole seconds (0-999)."""
        return self._duration_ms

    @property
    def begin_ms(self) -> int:
        """Start of the span in milliseconds since midnight."""
        return (
            self._hour * MS_PER_HOUR
            + self._minute * MS_PER_MINUTE
            + self._second * MS_PER_SECOND
            + self._millisecond
        )

    @property
    def end_ms(self) -> int:
        """Exclusive end of the span in milliseconds since midnight."""
        return self.begin_ms + self.total_duration()

    @property
    def begin_time(self) -> time:
        """Start of the span as a datetime.time."""
        return time(self._hour, self._minute, self._second, self._millisecond * 1000)

    def total_duration(self) -> int:
        """Return the duration in milliseconds."""
        return (
            self._duration_mins * MS_PER_MINUTE
            + self._duration_secs * MS_PER_SECOND
            + self._duration_ms
        )

    # -------------------------------------------------------------------------
    # Interval algebra
    # -------------------------------------------------------------------------

    def is_intersecting(self, other: object) -> bool:
        """Check whether two spans share any time.

        Spans that only touch do not intersect because end is exclusive.
        A non-TimeSpan argument never intersects.
        """
        if not isinstance(other, TimeSpan):
            return False
        if self.is_equal(other):
            return True
        return not (self.end_ms <= other.begin_ms or self.begin_ms >= other.end_ms)

    def intersect(self, other: TimeSpan) -> TimeSpan | None:
        """Return the overlap of two spans, or None if they do not intersect.

        Raises:
            InvalidArgumentTypeError: If other is not a TimeSpan.
        """
        other = _require_time_span("other", other)
        if not self.is_intersecting(other):
            return None
        return TimeSpan._from_offsets(
            max(self.begin_ms, other.begin_ms), min(self.end_ms, other.end_ms)
        )

    def union(self, other: TimeSpan) -> TimeSpan | None:
        """Return the span covering both spans, or None if they do not intersect.

        Raises:
            InvalidArgumentTypeError: If other is not a TimeSpan.
        """
        other = _require_time_span("other", other)
        if not self.is_intersecting(other):
            return None
        return TimeSpan._from_offsets(
            min(self.begin_ms, other.begin_ms), max(self.end_ms, other.end_ms)
        )

    def subtract(self, other: TimeSpan) -> list[TimeSpan] | None:
        """Remove a span that lies entirely within this one.

        Returns:
            The remainders in time order: none when the spans are equal,
            one when a boundary coincides, two when other is strictly
            inside. None when other is not contained in this span.

        Raises:
            InvalidArgumentTypeError: If other is not a TimeSpan.
        """
        other = _require_time_span("other", other)
        if not (self.begin_ms <= other.begin_ms and other.end_ms <= self.end_ms):
            return None
        return self._remainders(other)

    def difference(self, other: TimeSpan) -> list[TimeSpan]:
        """Return the parts of this span not covered by other.

        Unlike subtract this accepts any relationship between the spans:
        disjoint spans give [self], a covering span gives [].

        Raises:
            InvalidArgumentTypeError: If other is not a TimeSpan.
        """
        other = _require_time_span("other", other)
        if not self.is_intersecting(other):
            return [self]
        return self._remainders(other)

    def _remainders(self, other: TimeSpan) -> list[TimeSpan]:
        # An empty span removes nothing.
        if other.total_duration() == 0:
            return [self] if self.total_duration() > 0 else []
        result: list[TimeSpan] = []
        if self.begin_ms < other.begin_ms:
            result.append(TimeSpan._from_offsets(self.begin_ms, other.begin_ms))
        if other.end_ms < self.end_ms:
            result.append(TimeSpan._from_offsets(other.end_ms, self.end_ms))
        return result

    def contains(self, other: TimeSpan | time) -> bool:
        """Check whether a time of day or a whole span lies inside this span.

        Raises:
            InvalidArgumentTypeError: If other is neither a TimeSpan nor a time.
        """
        if isinstance(other, time):
            offset = (
                other.hour * MS_PER_HOUR
                + other.minute * MS_PER_MINUTE
                + other.second * MS_PER_SECOND
                + other.microsecond // 1000
            )
            return self.begin_ms <= offset < self.end_ms
        other = _require_time_span("other", other)
        return self.begin_ms <= other.begin_ms and other.end_ms <= self.end_ms

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (TimeSpan, time)):
            return False
        return self.contains(item)

    def is_equal(self, other: object) -> bool:
        """Exact component equality. A non-TimeSpan is never equal."""
        if not isinstance(other, TimeSpan):
            return False
        return self._key() == other._key()

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self._hour,
            self._minute,
            self._second,
            self._millisecond,
            self._duration_mins,
            self._duration_secs,
            self._duration_ms,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @staticmethod
    def _format_offset(offset_ms: int) -> str:
        hours, rest = divmod(offset_ms, MS_PER_HOUR)
        minutes, rest = divmod(rest, MS_PER_MINUTE)
        seconds, millis = divmod(rest, MS_PER_SECOND)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"

    def __repr__(self) -> str:
        return (
            f"TimeSpan({self._hour}, {self._minute}, {self._second}, "
            f"{self._millisecond}, {self._duration_mins}, "
            f"{self._duration_secs}, {self._duration_ms})"
        )

    def __str__(self) -> str:
        return (
            f"{self._format_offset(self.begin_ms)}-"
            f"{self._format_offset(self.end_ms)}"
        )


def time_span(
    hour: int,
    minute: int,
    second: int,
    millisecond: int,
    duration_mins: int,
    duration_secs: int = 0,
    duration_ms: int = 0,
) -> TimeSpan:
    """Create a TimeSpan. See TimeSpan for argument details."""
    return TimeSpan(
        hour, minute, second, millisecond, duration_mins, duration_secs, duration_ms
    )


__all__ = ["TimeSpan", "time_span"]
