"""TimeRule class projecting a TimeSpan onto the civil calendar.

A TimeRule combines a TimeSpan with a constraint that selects civil days
in a timezone: a weekday or weekday range, a day of the month, or the
first to fifth or last occurrence of a weekday in the month. Generating a
rule over a query window walks the window one civil day at a time and
emits one DateSpan per matching day.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from caltime._internal.calendar import nth_weekday_of_month, sunday_based_weekday
from caltime._internal.constants import EARLIEST_INSTANT, LATEST_INSTANT
from caltime._internal.validation import coerce_enum, require_instant, require_int
from caltime.core.datespan import DateSpan
from caltime.core.timespan import TimeSpan
from caltime.errors import InvalidArgumentRangeError, InvalidArgumentTypeError
from caltime.units.constraint import Constraint
from caltime.units.timezone import TimeZone
from caltime.units.weekday import Weekday, WeekdayRange

logger = logging.getLogger(__name__)

DaySelector = int | Weekday | WeekdayRange


class TimeRule:
    """A recurring TimeSpan on civil days selected by a constraint.

    The rule is active only within [begin, end); by default that window
    covers every representable instant. Rules are immutable and can be
    generated over any number of query windows.

    Attributes:
        time_span: Time of day and duration of each occurrence.
        constraint: How days are selected.
        day: Weekday, WeekdayRange or day-of-month number, depending on
            the constraint.
        timezone: Zone whose civil days the rule follows.
        begin: Start of the active window (inclusive).
        end: End of the active window (exclusive).

    Examples:
        >>> from datetime import datetime, timezone
        >>> rule = TimeRule(
        ...     TimeSpan(16, 0, 0, 0, 360),
        ...     Constraint.DAY_OF_WEEK,
        ...     Weekday.SATURDAY,
        ...     "Etc/UTC",
        ... )
        >>> spans = rule.generate(
        ...     datetime(2017, 7, 15, 12, tzinfo=timezone.utc),
        ...     datetime(2017, 7, 16, 13, tzinfo=timezone.utc),
        ... )
        >>> [str(s) for s in spans]
        ['2017-07-15T16:00:00.000Z/2017-07-15T22:00:00.000Z']
    """

    __slots__ = ("_time_span", "_constraint", "_day", "_timezone", "_begin", "_end")

    def __init__(
        self,
        time_span: TimeSpan,
        constraint: Constraint | int,
        day: DaySelector,
        timezone: TimeZone | str,
        begin: datetime | None = None,
        end: datetime | None = None,
    ) -> None:
        """Create a TimeRule.

        Args:
            time_span: Time of day and duration of each occurrence.
            constraint: A Constraint or its integer code.
            day: For DAY_OF_WEEK a Weekday or WeekdayRange; for
                DAY_OF_MONTH a day number 1-31; otherwise a Weekday.
            timezone: A TimeZone or an IANA identifier.
            begin: Start of the active window, or None for no lower bound.
            end: End of the active window, or None for no upper bound.

        Raises:
            InvalidArgumentTypeError: If an argument has the wrong type.
            InvalidArgumentRangeError: If a code or day selector is out of
                range for the constraint, or begin is after end.
            UnresolvableTimezoneError: If the timezone cannot be resolved.
        """
        if not isinstance(time_span, TimeSpan):
            raise InvalidArgumentTypeError(
                f"time_span must be a TimeSpan, got {type(time_span).__name__}"
            )
        self._time_span = time_span
        self._constraint = coerce_enum(Constraint, "constraint", constraint)
        self._day = self._check_day(self._constraint, day)
        if not isinstance(timezone, TimeZone):
            timezone = TimeZone(timezone)
        self._timezone = timezone

        self._begin = (
            EARLIEST_INSTANT if begin is None else require_instant("begin", begin)
        )
        self._end = LATEST_INSTANT if end is None else require_instant("end", end)
        if self._begin > self._end:
            raise InvalidArgumentRangeError(
                f"rule begin {self._begin.isoformat()} is after "
                f"end {self._end.isoformat()}"
            )

    @staticmethod
    def _check_day(constraint: Constraint, day: object) -> DaySelector:
        require_int("day", day)
        if constraint is Constraint.DAY_OF_MONTH:
            if not 1 <= day <= 31:
                raise InvalidArgumentRangeError(
                    f"day of month must be between 1 and 31, got {day}"
                )
            return day
        if 0 <= day <= 6:
            return Weekday(day)
        if constraint is Constraint.DAY_OF_WEEK:
            try:
                return WeekdayRange(day)
            except ValueError:
                raise InvalidArgumentRangeError(
                    f"day must be a Weekday or WeekdayRange code, got {day}"
                ) from None
        raise InvalidArgumentRangeError(
            f"{constraint.name} needs a single weekday between 0 and 6, got {day}"
        )

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def time_span(self) -> TimeSpan:
        """Clock-time slice placed on each matching day."""
        return self._time_span

    @property
    def constraint(self) -> Constraint:
        """How day is interpreted."""
        return self._constraint

    @property
    def day(self) -> DaySelector:
        """Day of month, Weekday or WeekdayRange selected by the rule."""
        return self._day

    @property
    def timezone(self) -> TimeZone:
        """Zone whose civil calendar the rule follows."""
        return self._timezone

    @property
    def begin(self) -> datetime:
        """Start of the active window, in UTC."""
        return self._begin

    @property
    def end(self) -> datetime:
        """Exclusive end of the active window, in UTC."""
        return self._end

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate(self, begin: datetime, end: datetime) -> list[DateSpan]:
        """Produce the rule's DateSpans within a query window.

        The window is clamped to the rule's active window and walked one
        civil day at a time. On each matching day the TimeSpan is placed
        on that civil date and clipped to the part of the day inside the
        window, so no span ever covers two civil days.

        Args:
            begin: Start of the query window (inclusive).
            end: End of the query window (exclusive).

        Returns:
            The spans in time order. Empty when the clamped window is empty.

        Raises:
            InvalidArgumentTypeError: If begin or end is not an aware datetime.
            InvalidArgumentRangeError: If begin is after end.
        """
        begin = require_instant("begin", begin)
        end = require_instant("end", end)
        if begin > end:
            raise InvalidArgumentRangeError(
                f"query begin {begin.isoformat()} is after end {end.isoformat()}"
            )

        window_begin = max(begin, self._begin)
        window_end = min(end, self._end)
        if window_begin >= window_end:
            return []

        logger.debug(
            "Generating %s over %s to %s",
            self,
            window_begin.isoformat(),
            window_end.isoformat(),
        )

        spans: list[DateSpan] = []
        month_days: dict[tuple[int, int], int | None] = {}
        cursor = window_begin
        while cursor < window_end:
            day_end = min(self._timezone.next_midnight(cursor), window_end)
            civil_date = self._timezone.to_civil(cursor).date()
            if self._matches(civil_date, month_days):
                day_span = DateSpan._from_bounds(cursor, day_end)
                span = self._place(civil_date).intersect(day_span)
                if span is not None:
                    spans.append(span)
            cursor = day_end

        logger.debug("Generated %d spans for %s", len(spans), self)
        return spans

    def _matches(
        self, civil_date: date, month_days: dict[tuple[int, int], int | None]
    ) -> bool:
        if self._constraint is Constraint.DAY_OF_WEEK:
            weekday = sunday_based_weekday(civil_date)
            if isinstance(self._day, WeekdayRange):
                return self._day.includes(weekday)
            return weekday == self._day
        if self._constraint is Constraint.DAY_OF_MONTH:
            return civil_date.day == self._day

        key = (civil_date.year, civil_date.month)
        if key not in month_days:
            month_days[key] = nth_weekday_of_month(
                self._constraint.occurrence, self._day, *key
            )
        return civil_date.day == month_days[key]

    def _place(self, civil_date: date) -> DateSpan:
        ts = self._time_span
        start = self._timezone.from_civil(
            civil_date.year,
            civil_date.month,
            civil_date.day,
            ts.hour,
            ts.minute,
            ts.second,
            ts.millisecond,
        )
        return DateSpan._from_bounds(
            start, start + timedelta(milliseconds=ts.total_duration())
        )

    # -------------------------------------------------------------------------
    # Comparison and representation
    # -------------------------------------------------------------------------

    def _key(self) -> tuple[object, ...]:
        return (
            self._time_span,
            self._constraint,
            self._day,
            self._timezone,
            self._begin,
            self._end,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeRule):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"TimeRule({self._time_span!r}, {self._constraint.name}, "
            f"{self._day!r}, {self._timezone.name!r})"
        )

    def __str__(self) -> str:
        day = self._day
        if isinstance(day, (Weekday, WeekdayRange)):
            day = day.name
        return (
            f"{self._time_span} {self._constraint.name}={day} "
            f"in {self._timezone.name}"
        )


def time_rule(
    time_span: TimeSpan,
    constraint: Constraint | int,
    day: DaySelector,
    timezone: TimeZone | str,
    begin: datetime | None = None,
    end: datetime | None = None,
) -> TimeRule:
    """Create a TimeRule. See TimeRule for argument details."""
    return TimeRule(time_span, constraint, day, timezone, begin, end)


__all__ = ["TimeRule", "time_rule"]
