"""ISO 8601 formatting and parsing.

This module holds the grammars shared by the value types and the
public helpers that dispatch on them.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a temporal object.
    format_iso8601: Format a temporal object as an ISO 8601 string.

Grammars (every group has a fixed length; nothing is optional unless
shown in brackets):

Dates:
    - YYYY-MM-DD
    - +YYYY[YY]-MM-DD, -YYYY[YY]-MM-DD (a sign is required past 4 digits)

Times:
    - HH:MM
    - HH:MM:SS
    - HH:MM:SS.f (fractional seconds, 1-9 digits)

Instants (UTC only):
    - <date>THH[:MM[:SS[.f]]]Z

Examples:
    >>> from chronon.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2015-08-30")
    LocalDate(2015, 8, 30)

    >>> format_iso8601(parse_iso8601("2015-08-30T12Z"))
    '2015-08-30T12:00:00Z'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from chronon.errors import ParseError

if TYPE_CHECKING:
    from chronon.core.instant import Instant
    from chronon.core.local_date import LocalDate
    from chronon.core.local_time import LocalTime

# Type alias for temporal objects
TemporalType = Union["LocalDate", "LocalTime", "Instant"]

_YEAR = r"(?P<year>[+-][0-9]{4,6}|[0-9]{4})"
_DATE = _YEAR + r"-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
_FRACTION = r"(?:\.(?P<fraction>[0-9]{1,9}))?"

DATE_PATTERN = re.compile(_DATE)
TIME_PATTERN = re.compile(
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})"
    r"(?::(?P<second>[0-9]{2})" + _FRACTION + r")?"
)
INSTANT_PATTERN = re.compile(
    _DATE
    + r"T(?P<hour>[0-9]{2})"
    + r"(?::(?P<minute>[0-9]{2})(?::(?P<second>[0-9]{2})"
    + _FRACTION
    + r")?)?Z"
)


def _match(pattern: re.Pattern[str], s: object) -> re.Match[str] | None:
    if not isinstance(s, str):
        return None
    return pattern.fullmatch(s)


def _parse_fraction(frac_str: str | None) -> int:
    """Right-pad a 1-9 digit fraction to nanoseconds.

    Examples:
        >>> _parse_fraction("1")
        100000000
        >>> _parse_fraction("123456789")
        123456789
    """
    if not frac_str:
        return 0
    return int(frac_str.ljust(9, "0"))


def parse_date_fields(s: str) -> tuple[int, int, int]:
    """Split a YYYY-MM-DD string into year, month and day.

    Field values are not validated here.

    Raises:
        ParseError: If the string does not match the date grammar.
    """
    match = _match(DATE_PATTERN, s)
    if match is None:
        raise ParseError(f"Invalid ISO-8601 date string: {s}")

    return (int(match["year"]), int(match["month"]), int(match["day"]))


def parse_time_fields(s: str) -> tuple[int, int, int, int]:
    """Split an HH:MM[:SS[.f]] string into hour, minute, second and nano.

    Raises:
        ParseError: If the string does not match the time grammar.
    """
    match = _match(TIME_PATTERN, s)
    if match is None:
        raise ParseError(f"Invalid ISO-8601 time string: {s}")

    return (
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
        _parse_fraction(match["fraction"]),
    )


def parse_instant_fields(s: str) -> tuple[int, int, int, int, int, int, int]:
    """Split a UTC date-time string into its seven fields.

    Returns:
        Tuple of (year, month, day, hour, minute, second, nano).

    Raises:
        ParseError: If the string does not match the instant grammar.
    """
    match = _match(INSTANT_PATTERN, s)
    if match is None:
        raise ParseError(f'Unrecognized UTC ISO-8601 date-time string "{s}".')

    return (
        int(match["year"]),
        int(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"] or 0),
        int(match["second"] or 0),
        _parse_fraction(match["fraction"]),
    )


def format_year(year: int) -> str:
    """Format a year so that the date grammar reads it back.

    Examples:
        >>> format_year(2015)
        '2015'
        >>> format_year(-44)
        '-0044'
        >>> format_year(12345)
        '+12345'
    """
    if year < 0:
        return f"-{-year:04d}"
    if year > 9999:
        return f"+{year}"
    return f"{year:04d}"


def format_date(year: int, month: int, day: int) -> str:
    """Format a date as YYYY-MM-DD."""
    return f"{format_year(year)}-{month:02d}-{day:02d}"


def format_fraction(nano: int) -> str:
    """Format a nano-of-second as the shortest 3, 6 or 9 digit fraction.

    Returns an empty string when nano is zero.

    Examples:
        >>> format_fraction(0)
        ''
        >>> format_fraction(100_000_000)
        '.100'
        >>> format_fraction(100_100_000)
        '.100100'
        >>> format_fraction(100_100_100)
        '.100100100'
    """
    if nano == 0:
        return ""

    digits = f"{nano:09d}".rstrip("0")
    scale = (len(digits) + 2) // 3 * 3
    return "." + digits.ljust(scale, "0")


def parse_iso8601(s: str) -> TemporalType:
    """Parse an ISO 8601 string into a temporal object.

    Detection rules:
        - Ends with 'Z' -> Instant
        - Contains ':' -> LocalTime
        - Otherwise -> LocalDate

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        A LocalDate, LocalTime, or Instant depending on the input format.

    Raises:
        ParseError: If the string does not match the detected grammar.
        ValidationError: If the parsed components are invalid.

    Examples:
        >>> parse_iso8601("14:30:45")
        LocalTime(14, 30, 45, 0)
    """
    # Import here to avoid circular imports
    from chronon.core.instant import Instant
    from chronon.core.local_date import LocalDate
    from chronon.core.local_time import LocalTime

    if not isinstance(s, str) or not s:
        raise ParseError(f"cannot determine ISO 8601 format for: {s!r}")

    if s.endswith("Z"):
        return Instant.parse(s)
    if ":" in s:
        return LocalTime.parse(s)
    return LocalDate.parse(s)


def format_iso8601(value: TemporalType) -> str:
    """Format a temporal object as an ISO 8601 string.

    Args:
        value: A LocalDate, LocalTime, or Instant to format.

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If value is not a supported temporal type.
    """
    # Import here to avoid circular imports
    from chronon.core.instant import Instant
    from chronon.core.local_date import LocalDate
    from chronon.core.local_time import LocalTime

    if isinstance(value, (Instant, LocalDate, LocalTime)):
        return value.to_iso_format()
    raise TypeError(
        f"expected LocalDate, LocalTime, or Instant, got {type(value).__name__}"
    )


__all__ = [
    "parse_iso8601",
    "format_iso8601",
    "parse_date_fields",
    "parse_time_fields",
    "parse_instant_fields",
    "format_year",
    "format_date",
    "format_fraction",
]
