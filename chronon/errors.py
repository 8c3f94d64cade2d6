"""Chronon exception hierarchy.

All Chronon-specific exceptions inherit from ChrononError.
"""

from __future__ import annotations


class ChrononError(Exception):
    """Base exception for all Chronon errors."""

    pass


class ValidationError(ChrononError):
    """Invalid input values.

    Raised when a field is outside its valid bounds or an input that
    must be a safe integer is not one.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - A fractional or infinite timestamp
    """

    pass


class RangeError(ValidationError):
    """Normalized value outside the supported range.

    Raised when a value passes input validation but the normalized
    result lies outside a type's bounds. The message names the offending
    value and the closed bound.

    Examples:
        - Epoch day outside [MIN_EPOCH_DAY, MAX_EPOCH_DAY]
        - Epoch second outside the instant timeline
        - Second of day outside [0, 86399]
    """

    pass


class InvalidIntervalError(ValidationError):
    """Interval bounds in the wrong order.

    Raised when an InstantRange is built with a start that is not
    strictly before its end.
    """

    pass


class ParseError(ChrononError):
    """Failed to parse string representation.

    Raised when a string does not match the date, time or instant
    grammar.

    Examples:
        - Slash-separated date
        - Instant without the trailing Z
        - Fraction without seconds
    """

    pass


class OverflowError(ChrononError):
    """Exact integer arithmetic left the safe-integer range.

    Raised when an operand or the mathematically exact result of a
    checked operation is not a safe integer.

    Examples:
        - Adding MAX_SAFE_INTEGER seconds to a positive instant
        - Multiplying MAX_SAFE_INTEGER weeks by seven
    """

    pass


__all__ = [
    "ChrononError",
    "ValidationError",
    "RangeError",
    "InvalidIntervalError",
    "ParseError",
    "OverflowError",
]
