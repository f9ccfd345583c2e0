"""Enumerations and timezone support.

This module provides:
    - Weekday: Day of the week, Sunday = 0
    - WeekdayRange: Composite weekday selectors (MON_FRI, SAT_SUN, ...)
    - Constraint: How a recurrence rule selects civil days
    - DurationPolicy: How span collections are measured
    - TimeZone: IANA timezone with civil-day arithmetic
"""

from __future__ import annotations

from caltime.units.constraint import Constraint
from caltime.units.policy import DurationPolicy
from caltime.units.timezone import TimeZone
from caltime.units.weekday import Weekday, WeekdayRange

__all__: list[str] = [
    "Constraint",
    "DurationPolicy",
    "TimeZone",
    "Weekday",
    "WeekdayRange",
]
