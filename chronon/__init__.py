"""Chronon: immutable date and time value objects.

Chronon provides a UTC instant with nanosecond precision, a calendar
date and a time of day, built on overflow-checked integer arithmetic
that stays within the safe-integer range [-(2**53 - 1), 2**53 - 1].

Core Types:
    LocalDate: Calendar date (year, month, day)
    LocalTime: Time of day (hour, minute, second, nano)
    Instant: Point on the UTC timeline (epoch second, nano)
    InstantRange: Span between two instants [start, end)

Clocks:
    Clock: Source of the current instant
    FixedClock, OffsetClock, SystemClock, TickClock

Format Functions:
    parse_iso8601: Parse ISO 8601 date/time/instant string
    format_iso8601: Format temporal object as ISO 8601 string

Exceptions:
    ChrononError: Base exception
    ValidationError: Invalid input values
    RangeError: Normalized value out of range
    InvalidIntervalError: InstantRange bounds out of order
    ParseError: Failed to parse string
    OverflowError: Arithmetic left the safe-integer range

Example:
    >>> from chronon import Instant
    >>> instant = Instant.parse("2015-08-30T12:34:56.155Z")
    >>> str(instant.plus_days(1))
    '2015-08-31T12:34:56.155Z'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from chronon.core.instant import Instant
from chronon.core.instant_range import InstantRange
from chronon.core.local_date import LocalDate
from chronon.core.local_time import LocalTime

# Clocks
from chronon.clock import (
    Clock,
    FixedClock,
    OffsetClock,
    SystemClock,
    TickClock,
    get_default_clock,
    set_default_clock,
    use_clock,
)

# Exceptions
from chronon.errors import (
    ChrononError,
    InvalidIntervalError,
    OverflowError,
    ParseError,
    RangeError,
    ValidationError,
)

# Format functions
from chronon.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Instant",
    "InstantRange",
    "LocalDate",
    "LocalTime",
    # Clocks
    "Clock",
    "FixedClock",
    "OffsetClock",
    "SystemClock",
    "TickClock",
    "get_default_clock",
    "set_default_clock",
    "use_clock",
    # Exceptions
    "ChrononError",
    "ValidationError",
    "RangeError",
    "InvalidIntervalError",
    "ParseError",
    "OverflowError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
