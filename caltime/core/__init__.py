"""Core span and rule types.

This module provides:
    - TimeSpan: A slice of clock time within one civil day
    - DateSpan: A slice of absolute time, [begin, end)
    - TimeRule: A TimeSpan recurring on civil days selected by a constraint
"""

from __future__ import annotations

from caltime.core.datespan import DateSpan, date_span
from caltime.core.timerule import TimeRule, time_rule
from caltime.core.timespan import TimeSpan, time_span

__all__: list[str] = [
    "DateSpan",
    "TimeRule",
    "TimeSpan",
    "date_span",
    "time_rule",
    "time_span",
]
