"""Caltime: interval algebra and recurrence rules over civil time.

Caltime represents slices of clock time within a day, slices of absolute
time, and rules that project the former onto the civil calendar of an
IANA timezone. It also provides set operations over span collections.

Core Types:
    TimeSpan: Clock time within one civil day (start plus duration)
    DateSpan: Absolute time span [begin, end)
    TimeRule: A TimeSpan recurring on days selected by a constraint

Units:
    Weekday: Day of the week, Sunday = 0
    WeekdayRange: Composite weekday selectors such as MON_FRI
    Constraint: Day-selection constraint for TimeRule
    DurationPolicy: Counting policy for measure_spans
    TimeZone: IANA timezone with civil-day arithmetic

Collection Functions:
    merge_spans, sort_spans, intersect_spans, measure_spans
    merge_time_spans, sort_time_spans

Exceptions:
    CaltimeError: Base exception
    InvalidArgumentTypeError: Wrong kind of value
    InvalidArgumentRangeError: Value out of range
    ConflictingArgumentsError: Both or neither of end and a duration
    UnresolvableTimezoneError: Unknown IANA zone
    InternalArithmeticError: Calendar post-condition failure

Example:
    >>> from datetime import datetime, timezone
    >>> from caltime import Constraint, TimeRule, TimeSpan, Weekday
    >>> rule = TimeRule(TimeSpan(9, 0, 0, 0, 480), Constraint.DAY_OF_WEEK,
    ...                 Weekday.MONDAY, "Europe/London")
    >>> week = rule.generate(datetime(2024, 1, 1, tzinfo=timezone.utc),
    ...                      datetime(2024, 1, 8, tzinfo=timezone.utc))
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from caltime.core.datespan import DateSpan, date_span
from caltime.core.timerule import TimeRule, time_rule
from caltime.core.timespan import TimeSpan, time_span

# Units
from caltime.units.constraint import Constraint
from caltime.units.policy import DurationPolicy
from caltime.units.timezone import TimeZone
from caltime.units.weekday import Weekday, WeekdayRange

# Collection functions
from caltime.arithmetic.span_ops import (
    intersect_spans,
    measure_spans,
    merge_spans,
    merge_time_spans,
    sort_spans,
    sort_time_spans,
)

# Exceptions
from caltime.errors import (
    CaltimeError,
    ConflictingArgumentsError,
    InternalArithmeticError,
    InvalidArgumentRangeError,
    InvalidArgumentTypeError,
    UnresolvableTimezoneError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateSpan",
    "TimeRule",
    "TimeSpan",
    "date_span",
    "time_rule",
    "time_span",
    # Units
    "Constraint",
    "DurationPolicy",
    "TimeZone",
    "Weekday",
    "WeekdayRange",
    # Collection functions
    "intersect_spans",
    "measure_spans",
    "merge_spans",
    "merge_time_spans",
    "sort_spans",
    "sort_time_spans",
    # Exceptions
    "CaltimeError",
    "ConflictingArgumentsError",
    "InternalArithmeticError",
    "InvalidArgumentRangeError",
    "InvalidArgumentTypeError",
    "UnresolvableTimezoneError",
]
