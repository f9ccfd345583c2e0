"""Validation utilities for Caltime.

This module provides the validation decorator and helpers that every
public constructor and operation uses to check its arguments.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from datetime import datetime, timezone
from enum import IntEnum
from typing import Callable, ParamSpec, TypeVar

from caltime.errors import InvalidArgumentRangeError, InvalidArgumentTypeError

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E", bound=IntEnum)


def require_int(name: str, value: object) -> int:
    """Check that a value is a plain integer.

    Booleans are rejected even though bool subclasses int.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentTypeError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentTypeError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return value


def validate_range(
    **limits: tuple[int, int | None],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that integer parameters are within ranges.

    Each named parameter must be an integer in [min, max]. An upper bound
    of None leaves the range open above. Arguments passed as None are
    skipped so that optional parameters can share the decorator.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both bounds are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23))
        ... def at(hour: int) -> int:
        ...     return hour

        >>> at(24)
        Traceback (most recent call last):
        ...
        InvalidArgumentRangeError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is None:
                    continue
                require_int(param_name, value)
                if max_val is None:
                    if value < min_val:
                        raise InvalidArgumentRangeError(
                            f"{param_name} must be at least {min_val}, got {value}"
                        )
                elif value < min_val or value > max_val:
                    raise InvalidArgumentRangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def require_instant(name: str, value: object) -> datetime:
    """Check that a value is a timezone-aware datetime and normalise it.

    Args:
        name: Parameter name used in the error message.
        value: The value to check.

    Returns:
        The same instant expressed in UTC.

    Raises:
        InvalidArgumentTypeError: If value is not a datetime, or is naive.
    """
    if not isinstance(value, datetime):
        raise InvalidArgumentTypeError(
            f"{name} must be a datetime, got {type(value).__name__}"
        )
    if value.tzinfo is None or value.utcoffset() is None:
        raise InvalidArgumentTypeError(
            f"{name} must be timezone-aware, got naive datetime {value!r}"
        )
    return value.astimezone(timezone.utc)


def coerce_enum(enum_cls: type[E], name: str, value: object) -> E:
    """Convert an integer code into a member of an IntEnum.

    Args:
        enum_cls: The enumeration to look the code up in.
        name: Parameter name used in the error message.
        value: An enum member or a plain integer code.

    Returns:
        The matching enum member.

    Raises:
        InvalidArgumentTypeError: If value is not an integer.
        InvalidArgumentRangeError: If no member has that code.
    """
    if isinstance(value, enum_cls):
        return value
    require_int(name, value)
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidArgumentRangeError(
            f"{name} is not a valid {enum_cls.__name__} code: {value}"
        ) from None


__all__ = [
    "require_int",
    "validate_range",
    "require_instant",
    "coerce_enum",
]
