"""DateSpan class representing a span of absolute time.

A DateSpan is an instant plus a duration, covering [begin, end) with an
exclusive end. It is the operand of all interval algebra and of the
collection operations in caltime.arithmetic.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from caltime._internal.constants import MS_PER_MINUTE, MS_PER_SECOND
from caltime._internal.validation import require_instant, validate_range
from caltime.errors import (
    ConflictingArgumentsError,
    InvalidArgumentRangeError,
    InvalidArgumentTypeError,
)


def _require_date_span(name: str, value: object) -> DateSpan:
    if not isinstance(value, DateSpan):
        raise InvalidArgumentTypeError(
            f"{name} must be a DateSpan, got {type(value).__name__}"
        )
    return value


def _split_duration(total_ms: int) -> tuple[int, int, int]:
    minutes, rest = divmod(total_ms, MS_PER_MINUTE)
    seconds, millis = divmod(rest, MS_PER_SECOND)
    return minutes, seconds, millis


class DateSpan:
    """A span of absolute time, [begin, end).

    A DateSpan is built either from a begin and an end instant, or from a
    begin instant and a duration given as minutes, seconds and
    milliseconds. Exactly one of the two forms must be used.

    Instants must be timezone-aware; they are stored in UTC. Durations
    have millisecond precision: a duration derived from (begin, end) is
    truncated to whole milliseconds.

    Two DateSpans are equal only when begin and every duration component
    match.

    Attributes:
        begin: Inclusive start instant, in UTC.
        end: Exclusive end instant, in UTC.
        duration_mins: Whole minutes of duration (>= 0).
        duration_secs: Extra seconds of duration (0-59).
        duration_ms: Extra milliseconds of duration (0-999).

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2017, 7, 16, 12, tzinfo=timezone.utc)
        >>> span = DateSpan(start, duration_mins=90)
        >>> span.end
        datetime.datetime(2017, 7, 16, 13, 30, tzinfo=datetime.timezone.utc)

        >>> DateSpan(start, span.end) == span
        True
    """

    __slots__ = ("_begin", "_end", "_duration_mins", "_duration_secs", "_duration_ms")

    @validate_range(
        duration_mins=(0, None),
        duration_secs=(0, 59),
        duration_ms=(0, 999),
    )
    def __init__(
        self,
        begin: datetime,
        end: datetime | None = None,
        duration_mins: int | None = None,
        duration_secs: int | None = None,
        duration_ms: int | None = None,
    ) -> None:
        """Create a DateSpan from (begin, end) or from (begin, duration).

        Args:
            begin: Inclusive start instant.
            end: Exclusive end instant, or None to use the duration.
            duration_mins: Whole minutes of duration.
            duration_secs: Extra seconds of duration (0-59).
            duration_ms: Extra milliseconds of duration (0-999).

        Raises:
            InvalidArgumentTypeError: If an instant is not an aware datetime
                or a duration component is not an integer.
            InvalidArgumentRangeError: If a component is out of range, end
                is before begin, or end is not representable.
            ConflictingArgumentsError: If both end and a non-zero duration
                are given, or neither.
        """
        begin = require_instant("begin", begin)
        durations = (duration_mins, duration_secs, duration_ms)

        if end is not None:
            if any(d for d in durations):
                raise ConflictingArgumentsError(
                    "pass either end or a duration to DateSpan, not both"
                )
            end = require_instant("end", end)
            if end < begin:
                raise InvalidArgumentRangeError(
                    f"end must not be before begin: got begin={begin.isoformat()}, "
                    f"end={end.isoformat()}"
                )
            total_ms = (end - begin) // timedelta(milliseconds=1)
            self._init(begin, *_split_duration(total_ms))
            return

        if all(d is None for d in durations):
            raise ConflictingArgumentsError(
                "DateSpan needs either an end or a duration"
            )
        self._init(begin, duration_mins or 0, duration_secs or 0, duration_ms or 0)

    def _init(self, begin: datetime, minutes: int, seconds: int, millis: int) -> None:
        self._begin = begin
        self._duration_mins = minutes
        self._duration_secs = seconds
        self._duration_ms = millis
        try:
            self._end = begin + timedelta(milliseconds=self.total_duration())
        except OverflowError:
            raise InvalidArgumentRangeError(
                f"a duration of {self.total_duration()} ms from "
                f"{begin.isoformat()} ends past the latest representable instant"
            ) from None

    @classmethod
    def _from_bounds(cls, begin: datetime, end: datetime) -> DateSpan:
        """Internal factory from two UTC instants with begin <= end.

        This bypasses argument validation.
        """
        instance = object.__new__(cls)
        total_ms = (end - begin) // timedelta(milliseconds=1)
        instance._begin = begin
        instance._duration_mins, instance._duration_secs, instance._duration_ms = (
            _split_duration(total_ms)
        )
        instance._end = begin + timedelta(milliseconds=total_ms)
        return instance

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def begin(self) -> datetime:
        """Inclusive start instant, in UTC."""
        return self._begin

    @property
    def end(self) -> datetime:
        """Exclusive end instant, in UTC."""
        return self._end

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

    def total_duration(self) -> int:
        """Return the duration in milliseconds.

        Examples:
            >>> from datetime import datetime, timezone
            >>> start = datetime(2017, 7, 16, tzinfo=timezone.utc)
            >>> DateSpan(start, duration_mins=1, duration_secs=2).total_duration()
            62000
        """
        return (
            self._duration_mins * MS_PER_MINUTE
            + self._duration_secs * MS_PER_SECOND
            + self._duration_ms
        )

    def duration(self) -> timedelta:
        """Return the duration as a timedelta."""
        return self._end - self._begin

    # -------------------------------------------------------------------------
    # Interval algebra
    # -------------------------------------------------------------------------

    def is_intersecting(self, other: object) -> bool:
        """Check whether two spans share any instant.

        Spans that only touch do not intersect because end is exclusive.
        A span always intersects itself, even when empty. A non-DateSpan
        argument never intersects.

        Examples:
            >>> from datetime import datetime, timezone
            >>> noon = datetime(2017, 7, 16, 12, tzinfo=timezone.utc)
            >>> morning = DateSpan(noon - timedelta(hours=2), noon)
            >>> morning.is_intersecting(DateSpan(noon, duration_mins=60))
            False
        """
        if not isinstance(other, DateSpan):
            return False
        if self.is_equal(other):
            return True
        return not (self._end <= other._begin or self._begin >= other._end)

    def intersect(self, other: DateSpan) -> DateSpan | None:
        """Return the overlap of two spans, or None if they do not intersect.

        Raises:
            InvalidArgumentTypeError: If other is not a DateSpan.
        """
        other = _require_date_span("other", other)
        if not self.is_intersecting(other):
            return None
        return DateSpan._from_bounds(
            max(self._begin, other._begin), min(self._end, other._end)
        )

    def union(self, other: DateSpan) -> DateSpan | None:
        """Return the span covering both spans, or None if they do not intersect.

        Disjoint spans have no single covering span; use merge_spans for
        collections that may contain gaps.

        Raises:
            InvalidArgumentTypeError: If other is not a DateSpan.
        """
        other = _require_date_span("other", other)
        if not self.is_intersecting(other):
            return None
        return DateSpan._from_bounds(
            min(self._begin, other._begin), max(self._end, other._end)
        )

    def subtract(self, other: DateSpan) -> list[DateSpan] | None:
        """Remove a span that lies entirely within this one.

        Args:
            other: The span to remove. It must be contained in this span.

        Returns:
            The remainders in time order: none when the spans are equal,
            one when a boundary coincides, two when other is strictly
            inside. None when other is not contained in this span, even if
            the two partially overlap.

        Raises:
            InvalidArgumentTypeError: If other is not a DateSpan.

        Examples:
            >>> from datetime import datetime, timezone
            >>> start = datetime(2017, 7, 16, tzinfo=timezone.utc)
            >>> day = DateSpan(start, duration_mins=1440)
            >>> [str(s) for s in day.subtract(DateSpan(start, duration_mins=60))]
            ['2017-07-16T01:00:00.000Z/2017-07-17T00:00:00.000Z']
        """
        other = _require_date_span("other", other)
        if not self.contains(other):
            return None
        return self._remainders(other)

    def difference(self, other: DateSpan) -> list[DateSpan]:
        """Return the parts of this span not covered by other.

        This is the total form of subtract: disjoint spans give [self],
        a covering span gives [], partial overlaps give the uncovered part.

        Raises:
            InvalidArgumentTypeError: If other is not a DateSpan.
        """
        other = _require_date_span("other", other)
        if not self.is_intersecting(other):
            return [self]
        return self._remainders(other)

    def _remainders(self, other: DateSpan) -> list[DateSpan]:
        # An empty span removes nothing.
        if other._begin == other._end:
            return [self] if self._begin < self._end else []
        result: list[DateSpan] = []
        if self._begin < other._begin:
            result.append(DateSpan._from_bounds(self._begin, other._begin))
        if other._end < self._end:
            result.append(DateSpan._from_bounds(other._end, self._end))
        return result

    def contains(self, other: DateSpan | datetime) -> bool:
        """Check whether an instant or a whole span lies inside this span.

        An instant equal to end is outside the span.

        Raises:
            InvalidArgumentTypeError: If other is neither a DateSpan nor an
                aware datetime.
        """
        if isinstance(other, DateSpan):
            return self._begin <= other._begin and other._end <= self._end
        instant = require_instant("other", other)
        return self._begin <= instant < self._end

    def __contains__(self, item: object) -> bool:
        if isinstance(item, DateSpan):
            return self.contains(item)
        if isinstance(item, datetime) and item.utcoffset() is not None:
            return self.contains(item)
        return False

    def is_equal(self, other: object) -> bool:
        """Exact component equality. A non-DateSpan is never equal."""
        if not isinstance(other, DateSpan):
            return False
        return self._key() == other._key()

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[datetime, int, int, int]:
        return (
            self._begin,
            self._duration_mins,
            self._duration_secs,
            self._duration_ms,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateSpan):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DateSpan({self._begin!r}, duration_mins={self._duration_mins}, "
            f"duration_secs={self._duration_secs}, duration_ms={self._duration_ms})"
        )

    @staticmethod
    def _format_instant(instant: datetime) -> str:
        return (
            f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}T"
            f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}."
            f"{instant.microsecond // 1000:03d}Z"
        )

    def __str__(self) -> str:
        return f"{self._format_instant(self._begin)}/{self._format_instant(self._end)}"


def date_span(
    begin: datetime,
    end: datetime | None = None,
    duration_mins: int | None = None,
    duration_secs: int | None = None,
    duration_ms: int | None = None,
) -> DateSpan:
    """Create a DateSpan. See DateSpan for argument details."""
    return DateSpan(begin, end, duration_mins, duration_secs, duration_ms)


__all__ = ["DateSpan", "date_span"]
