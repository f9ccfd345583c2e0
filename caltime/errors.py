"""Caltime exception hierarchy.

All Caltime-specific exceptions inherit from CaltimeError. Each one also
derives from the closest builtin exception so callers can catch either.
"""

from __future__ import annotations


class CaltimeError(Exception):
    """Base exception for all Caltime errors."""

    pass


class InvalidArgumentTypeError(CaltimeError, TypeError):
    """A value of the wrong kind was supplied.

    Examples:
        - A naive datetime where an aware instant is required
        - A float where an integer field is required
        - A TimeSpan passed where a DateSpan is expected
    """

    pass


class InvalidArgumentRangeError(CaltimeError, ValueError):
    """A value lies outside its documented legal interval.

    Examples:
        - Hour value outside 0-23
        - Day-of-month selector outside 1-31
        - A query window whose begin is after its end
    """

    pass


class ConflictingArgumentsError(CaltimeError, ValueError):
    """Mutually exclusive arguments were combined, or none was given.

    Raised when a DateSpan is built from both an end instant and a
    duration, or from neither.
    """

    pass


class UnresolvableTimezoneError(CaltimeError, ValueError):
    """An IANA timezone identifier could not be resolved.

    Examples:
        - Empty identifier
        - Unknown zone such as "Mars/Olympus_Mons"
    """

    pass


class InternalArithmeticError(CaltimeError, ArithmeticError):
    """A calendar calculation failed its own post-condition.

    This indicates a defect in Caltime rather than bad input.
    """

    pass


__all__ = [
    "CaltimeError",
    "InvalidArgumentTypeError",
    "InvalidArgumentRangeError",
    "ConflictingArgumentsError",
    "UnresolvableTimezoneError",
    "InternalArithmeticError",
]
