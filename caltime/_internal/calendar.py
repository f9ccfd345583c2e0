"""Calendar arithmetic for month-relative weekday rules.

This module answers questions like "which day of July 2017 is the last
Wednesday?" using dateutil's relativedelta for the month and weekday
stepping.

This module is not part of the public API.
"""

from __future__ import annotations

from datetime import date

from dateutil.relativedelta import relativedelta, weekdays

from caltime.errors import InternalArithmeticError

# Occurrence number meaning "last in the month"
LAST = -1


def to_dateutil_weekday(weekday: int) -> int:
    """Convert a Sunday-based weekday (0-6) to dateutil's Monday-based index."""
    return (weekday - 1) % 7


def sunday_based_weekday(day: date) -> int:
    """Return the weekday of a date with Sunday = 0."""
    return day.isoweekday() % 7


def nth_weekday_of_month(
    occurrence: int, weekday: int, year: int, month: int
) -> int | None:
    """Find the day of month of the Nth occurrence of a weekday.

    Args:
        occurrence: 1 to 5 for the first to fifth occurrence, or LAST.
        weekday: Target weekday, Sunday = 0.
        year: Civil year.
        month: Civil month (1-12).

    Returns:
        The day of month, or None when the month has no such occurrence
        (a fifth Tuesday in a month with four).

    Raises:
        InternalArithmeticError: If the computed date is not the requested
            weekday inside the requested month.

    Examples:
        >>> nth_weekday_of_month(LAST, 3, 2017, 7)
        26
        >>> nth_weekday_of_month(1, 0, 2017, 7)
        2
    """
    target = weekdays[to_dateutil_weekday(weekday)]
    first = date(year, month, 1)

    if occurrence == LAST:
        next_month = first + relativedelta(months=1)
        result = next_month + relativedelta(weekday=target(-1))
        if result >= next_month:
            result -= relativedelta(weeks=1)
    else:
        result = first + relativedelta(weekday=target(+1))
        result += relativedelta(weeks=occurrence - 1)
        if occurrence == 5 and (result.year, result.month) != (year, month):
            return None

    if (result.year, result.month) != (year, month) or (
        sunday_based_weekday(result) != weekday
    ):
        raise InternalArithmeticError(
            f"occurrence {occurrence} of weekday {weekday} in {year}-{month:02d} "
            f"resolved to {result.isoformat()}"
        )
    return result.day


__all__ = [
    "LAST",
    "to_dateutil_weekday",
    "sunday_based_weekday",
    "nth_weekday_of_month",
]
