"""Validation utilities for Chronon.

This module provides validation decorators and utilities for
ensuring temporal values are within valid ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar, ParamSpec

from chronon._internal.constants import (
    MAX_EPOCH_DAY,
    MAX_SAFE_INTEGER,
    MAX_YEAR,
    MIN_EPOCH_DAY,
    MIN_SAFE_INTEGER,
    MIN_YEAR,
)
from chronon.errors import RangeError, ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def is_safe_integer(value: Any) -> bool:
    """Check if a value is an integer exactly representable as a double.

    Booleans and floats are never safe integers, even when the float
    holds an integral value.

    Args:
        value: The value to check.

    Returns:
        True if value is an int within [MIN_SAFE_INTEGER, MAX_SAFE_INTEGER].

    Examples:
        >>> is_safe_integer(2**53 - 1)
        True
        >>> is_safe_integer(2**53)
        False
        >>> is_safe_integer(1.5)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def validate_safe_integers(
    *names: str,
    message: str,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that named parameters are safe integers.

    Args:
        *names: Parameter names to check.
        message: Message of the ValidationError raised on failure.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_safe_integers("millis", message="bad millis")
        ... def shift(millis: int) -> int:
        ...     return millis

        >>> shift(1.5)
        Traceback (most recent call last):
        ...
        ValidationError: bad millis
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for name in names:
                if not is_safe_integer(bound.arguments[name]):
                    raise ValidationError(message)

            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_year(year: int) -> None:
    """Validate that a year is a safe integer within the supported range.

    Args:
        year: The year to validate.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if not is_safe_integer(year) or year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"Year must be a safe integer between {MIN_YEAR} and {MAX_YEAR}."
        )


def validate_month(month: int) -> None:
    """Validate that a month is an integer within 1-12.

    Args:
        month: The month to validate.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if not is_safe_integer(month) or month < 1 or month > 12:
        raise ValidationError("Month must be an integer between 1 and 12.")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from chronon._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if not is_safe_integer(day) or day < 1 or day > max_day:
        raise ValidationError(f"Day must be an integer between 1 and {max_day}.")


def validate_epoch_day(epoch_day: int) -> None:
    """Validate that an epoch day lies between LocalDate.MIN and LocalDate.MAX.

    Args:
        epoch_day: Days since 1970-01-01.

    Raises:
        RangeError: If epoch_day is outside [MIN_EPOCH_DAY, MAX_EPOCH_DAY].
    """
    if epoch_day < MIN_EPOCH_DAY or epoch_day > MAX_EPOCH_DAY:
        raise RangeError(
            f"The day {epoch_day} is out of the range "
            f"[{MIN_EPOCH_DAY} - {MAX_EPOCH_DAY}]."
        )


def validate_field(name: str, value: int, upper: int) -> None:
    """Validate a time-of-day field against [0, upper].

    Args:
        name: Capitalized field label used in the message.
        value: The field value.
        upper: Inclusive upper bound.

    Raises:
        ValidationError: If value is not an integer in [0, upper].
    """
    if not is_safe_integer(value) or value < 0 or value > upper:
        raise ValidationError(f"{name} must be an integer between 0 and {upper}.")


__all__ = [
    "is_safe_integer",
    "validate_safe_integers",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_epoch_day",
    "validate_field",
]
