"""Calendar utilities for Chronon.

This module provides internal functions for proleptic Gregorian
calendar calculations: leap year logic, month lengths and the
conversion between (year, month, day) and epoch days.

Epoch day 0 = 1970-01-01.

Both conversions are closed-form. Dates are shifted so that the year
starts on March 1st, which puts the leap day at the end of the year and
lets a 400-year era of 146097 days be split with plain arithmetic.

This module is not part of the public API.
"""

from __future__ import annotations

from chronon._internal.constants import (
    DAYS_0000_03_01_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    The arguments are assumed to form a valid date.

    Args:
        year: The year (can be zero or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The epoch day.

    Examples:
        >>> to_epoch_day(1970, 1, 1)
        0
        >>> to_epoch_day(2015, 8, 31)
        16678
        >>> to_epoch_day(1969, 12, 31)
        -1
    """
    # January and February belong to the previous March-based year
    if month <= 2:
        year -= 1

    # Python's // floors toward negative infinity, which is what we need
    era = year // 400
    year_of_era = year - era * 400  # [0, 399]

    shifted_month = month - 3 if month > 2 else month + 9  # March = 0
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1  # [0, 365]
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )  # [0, 146096]

    return era * DAYS_PER_CYCLE + day_of_era - DAYS_0000_03_01_TO_1970


def epoch_day_to_date(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day.

    Inverse of to_epoch_day.

    Args:
        epoch_day: The epoch day.

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> epoch_day_to_date(0)
        (1970, 1, 1)
        >>> epoch_day_to_date(16678)
        (2015, 8, 31)
    """
    shifted = epoch_day + DAYS_0000_03_01_TO_1970

    era = shifted // DAYS_PER_CYCLE
    day_of_era = shifted - era * DAYS_PER_CYCLE  # [0, 146096]
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365  # [0, 399]
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )  # [0, 365]

    shifted_month = (5 * day_of_year + 2) // 153  # March = 0
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9

    year = year_of_era + era * 400
    if month <= 2:
        year += 1

    return (year, month, day)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "to_epoch_day",
    "epoch_day_to_date",
]
