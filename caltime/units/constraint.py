"""Constraint enumeration for recurrence rules."""

from __future__ import annotations

from enum import IntEnum


class Constraint(IntEnum):
    """How a TimeRule decides which civil days it applies to.

    DAY_OF_WEEK takes a Weekday or a WeekdayRange selector, DAY_OF_MONTH
    takes a day number 1-31, and the month-relative constraints take a
    single Weekday.

    Examples:
        >>> Constraint.LAST_OF_MONTH.is_month_relative
        True
        >>> Constraint.THIRD_OF_MONTH.occurrence
        3
    """

    DAY_OF_WEEK = 0
    DAY_OF_MONTH = 1
    FIRST_OF_MONTH = 2
    SECOND_OF_MONTH = 3
    THIRD_OF_MONTH = 4
    FOURTH_OF_MONTH = 5
    FIFTH_OF_MONTH = 6
    LAST_OF_MONTH = 7

    @property
    def is_month_relative(self) -> bool:
        """True for the first-to-fifth and last-of-month constraints."""
        return self >= Constraint.FIRST_OF_MONTH

    @property
    def occurrence(self) -> int | None:
        """Occurrence number within the month: 1-5, -1 for last, else None."""
        if self is Constraint.LAST_OF_MONTH:
            return -1
        if self.is_month_relative:
            return self - Constraint.FIRST_OF_MONTH + 1
        return None


__all__ = ["Constraint"]
