"""Weekday and weekday-range enumerations.

Weekday codes count from Sunday = 0. WeekdayRange codes name the fixed
sets of days accepted by a day-of-week rule; several of them wrap across
the Saturday/Sunday boundary, so each is backed by an explicit day set.
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, Sunday = 0.

    Examples:
        >>> Weekday.SATURDAY
        <Weekday.SATURDAY: 6>
        >>> Weekday(0).name
        'SUNDAY'
    """

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class WeekdayRange(IntEnum):
    """Composite weekday selectors for day-of-week rules.

    The codes start at 100 so that they can never be confused with a
    single Weekday code.

    Examples:
        >>> Weekday.SUNDAY in WeekdayRange.SAT_WED.days
        True
        >>> Weekday.FRIDAY in WeekdayRange.BRUNEI.days
        False
    """

    MON_FRI = 100
    SUN_THURS = 101
    MON_SAT = 102
    MON_SUN = 103
    SUN_FRI = 104
    SAT_WED = 105
    SAT_THURS = 106
    BRUNEI = 107
    SAT_SUN = 108
    FRI_SAT = 109
    THURS_FRI = 110
    BRUNEI_WEEKEND = 111

    @property
    def days(self) -> frozenset[Weekday]:
        """The set of weekdays this range selects."""
        return _RANGE_DAYS[self]

    def includes(self, weekday: int) -> bool:
        """Return True if the given weekday code is part of this range."""
        return weekday in _RANGE_DAYS[self]


_W = Weekday
_RANGE_DAYS: dict[WeekdayRange, frozenset[Weekday]] = {
    WeekdayRange.MON_FRI: frozenset(
        {_W.MONDAY, _W.TUESDAY, _W.WEDNESDAY, _W.THURSDAY, _W.FRIDAY}
    ),
    WeekdayRange.SUN_THURS: frozenset(
        {_W.SUNDAY, _W.MONDAY, _W.TUESDAY, _W.WEDNESDAY, _W.THURSDAY}
    ),
    WeekdayRange.MON_SAT: frozenset(
        {_W.MONDAY, _W.TUESDAY, _W.WEDNESDAY, _W.THURSDAY, _W.FRIDAY, _W.SATURDAY}
    ),
    WeekdayRange.MON_SUN: frozenset(_W),
    WeekdayRange.SUN_FRI: frozenset(
        {_W.SUNDAY, _W.MONDAY, _W.TUESDAY, _W.WEDNESDAY, _W.THURSDAY, _W.FRIDAY}
    ),
    WeekdayRange.SAT_WED: frozenset(
        {_W.SATURDAY, _W.SUNDAY, _W.MONDAY, _W.TUESDAY, _W.WEDNESDAY}
    ),
    WeekdayRange.SAT_THURS: frozenset(set(_W) - {_W.FRIDAY}),
    WeekdayRange.BRUNEI: frozenset(
        {_W.MONDAY, _W.TUESDAY, _W.WEDNESDAY, _W.THURSDAY, _W.SATURDAY}
    ),
    WeekdayRange.SAT_SUN: frozenset({_W.SATURDAY, _W.SUNDAY}),
    WeekdayRange.FRI_SAT: frozenset({_W.FRIDAY, _W.SATURDAY}),
    WeekdayRange.THURS_FRI: frozenset({_W.THURSDAY, _W.FRIDAY}),
    WeekdayRange.BRUNEI_WEEKEND: frozenset({_W.FRIDAY, _W.SUNDAY}),
}


__all__ = ["Weekday", "WeekdayRange"]
