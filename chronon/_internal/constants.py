"""Internal constants for Chronon.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Safe-integer bounds (integers exactly representable as IEEE-754 doubles)
MAX_SAFE_INTEGER: int = 2**53 - 1
MIN_SAFE_INTEGER: int = -MAX_SAFE_INTEGER

# Time unit conversions
NANOS_PER_MICRO: int = 1_000
NANOS_PER_MILLI: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

MICROS_PER_SECOND: int = 1_000_000
MICROS_PER_DAY: int = 86_400_000_000
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_DAY: int = 86_400_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MINUTES_PER_DAY: int = 1_440
HOURS_PER_DAY: int = 24

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Year limits
MIN_YEAR: int = -999_999
MAX_YEAR: int = 999_999

# Epoch day bounds: -999999-01-01 and +999999-12-31
MIN_EPOCH_DAY: int = -365_961_662
MAX_EPOCH_DAY: int = 364_522_971

# Epoch second bounds: -999999-01-01T00:00:00Z and +999999-12-31T23:59:59Z
MIN_EPOCH_SECOND: int = MIN_EPOCH_DAY * SECONDS_PER_DAY  # -31_619_087_596_800
MAX_EPOCH_SECOND: int = (MAX_EPOCH_DAY + 1) * SECONDS_PER_DAY - 1  # 31_494_784_780_799

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a full 400-year Gregorian cycle
DAYS_PER_CYCLE: int = 146_097

# Days from 0000-03-01 to 1970-01-01
DAYS_0000_03_01_TO_1970: int = 719_468


__all__ = [
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "NANOS_PER_MICRO",
    "NANOS_PER_MILLI",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MICROS_PER_SECOND",
    "MICROS_PER_DAY",
    "MILLIS_PER_SECOND",
    "MILLIS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_DAY",
    "HOURS_PER_DAY",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
    "MIN_EPOCH_SECOND",
    "MAX_EPOCH_SECOND",
    "DAYS_IN_MONTH",
    "DAYS_PER_CYCLE",
    "DAYS_0000_03_01_TO_1970",
]
