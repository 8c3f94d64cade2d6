"""LocalDate class representing a calendar date.

This module provides the LocalDate class for representing calendar
dates in the proleptic Gregorian calendar, from -999999-01-01 to
+999999-12-31.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chronon._internal.calendar import (
    days_in_month,
    epoch_day_to_date,
    is_leap_year,
    to_epoch_day,
)
from chronon._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR
from chronon._internal.safe_math import add_exact, multiply_exact, subtract_exact
from chronon._internal.validation import (
    is_safe_integer,
    validate_day,
    validate_epoch_day,
    validate_month,
    validate_year,
)
from chronon.errors import ChrononError, ValidationError
from chronon.format.iso8601 import format_date, parse_date_fields

if TYPE_CHECKING:
    import datetime


class LocalDate:
    """A calendar date without a time of day or a time zone.

    LocalDate uses the proleptic Gregorian calendar, which means the
    Gregorian rules are extended to dates before its adoption in 1582.
    Years use astronomical numbering, so year 0 exists and equals 1 BCE.

    Attributes:
        year: The year (-999999 to 999999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = LocalDate(2015, 8, 31)
        >>> d.to_epoch_day()
        16678

        >>> LocalDate(2016, 2, 29).plus_years(1)
        LocalDate(2017, 2, 28)

        >>> str(LocalDate(-44, 3, 15))
        '-0044-03-15'
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: LocalDate
    MAX: LocalDate

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month, and day.

        Args:
            year: The year (-999999 to 999999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalDate(2015, 2, 29)
            Traceback (most recent call last):
            ...
            ValidationError: Day must be an integer between 1 and 28.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _create(cls, year: int, month: int, day: int) -> LocalDate:
        """Build a LocalDate from fields that are already known to be valid."""
        result = object.__new__(cls)
        result._year = year
        result._month = month
        result._day = day
        return result

    @classmethod
    def of(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a LocalDate from year, month, and day.

        Same as calling the constructor.
        """
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from a count of days since 1970-01-01.

        Args:
            epoch_day: The epoch day.

        Returns:
            The corresponding LocalDate.

        Raises:
            ValidationError: If epoch_day is not a safe integer.
            RangeError: If epoch_day is outside the supported range.

        Examples:
            >>> LocalDate.of_epoch_day(16678)
            LocalDate(2015, 8, 31)
        """
        if not is_safe_integer(epoch_day):
            raise ValidationError("The epoch day must be a safe integer.")
        validate_epoch_day(epoch_day)

        year, month, day = epoch_day_to_date(epoch_day)
        return cls._create(year, month, day)

    @classmethod
    def parse(cls, s: str) -> LocalDate:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Years outside 0000-9999 carry a sign: -0044-03-15, +10000-01-01.

        Args:
            s: The ISO 8601 date string.

        Returns:
            The parsed LocalDate.

        Raises:
            ParseError: If the string is not a YYYY-MM-DD date.
            ValidationError: If the date components are invalid.

        Examples:
            >>> LocalDate.parse("2015-08-30")
            LocalDate(2015, 8, 30)

            >>> LocalDate.parse("2015/08/30")
            Traceback (most recent call last):
            ...
            ParseError: Invalid ISO-8601 date string: 2015/08/30
        """
        year, month, day = parse_date_fields(s)
        return cls(year, month, day)

    @classmethod
    def is_valid(cls, s: Any) -> bool:
        """Return True if s parses as a LocalDate.

        Examples:
            >>> LocalDate.is_valid("2016-02-29")
            True
            >>> LocalDate.is_valid("2015-02-29")
            False
        """
        try:
            cls.parse(s)
        except ChrononError:
            return False
        return True

    @classmethod
    def from_native(cls, value: datetime.date) -> LocalDate:
        """Create a LocalDate from a datetime.date or datetime.datetime.

        Aware datetimes are converted to the local time zone first.

        Args:
            value: The native date or datetime.

        Returns:
            The LocalDate of the value's local calendar day.
        """
        # Import here to avoid circular imports
        from chronon.convert.native import local_date_fields

        return cls(*local_date_fields(value))

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year.

        Examples:
            >>> LocalDate(2016, 1, 1).is_leap_year
            True
            >>> LocalDate(1900, 1, 1).is_leap_year
            False
        """
        return is_leap_year(self._year)

    @property
    def length_of_month(self) -> int:
        """Return the number of days in this date's month.

        Examples:
            >>> LocalDate(2016, 2, 10).length_of_month
            29
        """
        return days_in_month(self._year, self._month)

    def to_epoch_day(self) -> int:
        """Return the number of days since 1970-01-01.

        Examples:
            >>> LocalDate(1970, 1, 1).to_epoch_day()
            0
            >>> LocalDate(1969, 12, 31).to_epoch_day()
            -1
        """
        return to_epoch_day(self._year, self._month, self._day)

    def _with_year_month(self, year: int, month: int) -> LocalDate:
        # Clamp the day to the target month: Feb 29 -> Feb 28 and so on
        day = min(self._day, days_in_month(year, month))
        return LocalDate._create(year, month, day)

    def plus_years(self, years: int) -> LocalDate:
        """Return a copy of this date with the given years added.

        If the day is invalid in the resulting year (Feb 29 in a non-leap
        year), it is clamped to the last day of the month.

        Args:
            years: Number of years to add (can be negative).

        Returns:
            A new LocalDate, or this date if years is 0.

        Raises:
            OverflowError: If the year arithmetic leaves the safe integers.
            ValidationError: If the resulting year is out of range.

        Examples:
            >>> LocalDate(2016, 2, 29).plus_years(1)
            LocalDate(2017, 2, 28)
        """
        if years == 0:
            return self
        year = add_exact(self._year, years)
        validate_year(year)
        return self._with_year_month(year, self._month)

    def minus_years(self, years: int) -> LocalDate:
        """Return a copy of this date with the given years subtracted.

        Examples:
            >>> LocalDate(2016, 2, 29).minus_years(4)
            LocalDate(2012, 2, 29)
        """
        if years == 0:
            return self
        year = subtract_exact(self._year, years)
        validate_year(year)
        return self._with_year_month(year, self._month)

    def plus_months(self, months: int) -> LocalDate:
        """Return a copy of this date with the given months added.

        The day is clamped to the length of the resulting month. Amounts
        too large for the calendar surface as a year ValidationError.

        Args:
            months: Number of months to add (can be negative).

        Returns:
            A new LocalDate, or this date if months is 0.

        Raises:
            ValidationError: If the resulting year is out of range.

        Examples:
            >>> LocalDate(2016, 1, 31).plus_months(1)
            LocalDate(2016, 2, 29)

            >>> LocalDate(2016, 1, 15).plus_months(-13)
            LocalDate(2014, 12, 15)
        """
        if months == 0:
            return self

        total_months = self._year * MONTHS_PER_YEAR + (self._month - 1) + months
        year = total_months // MONTHS_PER_YEAR
        validate_year(year)
        month = total_months % MONTHS_PER_YEAR + 1

        return self._with_year_month(year, month)

    def minus_months(self, months: int) -> LocalDate:
        """Return a copy of this date with the given months subtracted."""
        if months == 0:
            return self
        return self.plus_months(-months)

    def plus_weeks(self, weeks: int) -> LocalDate:
        """Return a copy of this date with the given weeks added.

        Examples:
            >>> LocalDate(2015, 8, 31).plus_weeks(1)
            LocalDate(2015, 9, 7)
        """
        if weeks == 0:
            return self
        return self.plus_days(multiply_exact(weeks, DAYS_PER_WEEK))

    def minus_weeks(self, weeks: int) -> LocalDate:
        """Return a copy of this date with the given weeks subtracted."""
        if weeks == 0:
            return self
        return self.minus_days(multiply_exact(weeks, DAYS_PER_WEEK))

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy of this date with the given days added.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new LocalDate, or this date if days is 0.

        Raises:
            OverflowError: If the epoch day arithmetic leaves the safe integers.
            RangeError: If the resulting epoch day is out of range.

        Examples:
            >>> LocalDate(2015, 8, 31).plus_days(1)
            LocalDate(2015, 9, 1)

            >>> LocalDate(2016, 3, 1).plus_days(-1)
            LocalDate(2016, 2, 29)
        """
        if days == 0:
            return self
        return LocalDate.of_epoch_day(add_exact(self.to_epoch_day(), days))

    def minus_days(self, days: int) -> LocalDate:
        """Return a copy of this date with the given days subtracted."""
        if days == 0:
            return self
        return LocalDate.of_epoch_day(subtract_exact(self.to_epoch_day(), days))

    def compare(self, other: LocalDate) -> int:
        """Compare this date with another.

        Returns:
            -1, 0 or 1 as this date is before, equal to or after other.

        Raises:
            TypeError: If other is not a LocalDate.
        """
        if not isinstance(other, LocalDate):
            raise TypeError(f"expected LocalDate, got {type(other).__name__}")
        mine = self._key()
        theirs = other._key()
        return (mine > theirs) - (mine < theirs)

    def is_after(self, other: LocalDate) -> bool:
        """Return True if this date is strictly after other."""
        return self.compare(other) > 0

    def is_before(self, other: LocalDate) -> bool:
        """Return True if this date is strictly before other."""
        return self.compare(other) < 0

    def is_after_or_equal(self, other: LocalDate) -> bool:
        """Return True if this date is after or equal to other."""
        return self.compare(other) >= 0

    def is_before_or_equal(self, other: LocalDate) -> bool:
        """Return True if this date is before or equal to other."""
        return self.compare(other) <= 0

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> LocalDate(2015, 8, 30).to_iso_format()
            '2015-08-30'

            >>> LocalDate(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        return format_date(self._year, self._month, self._day)

    def to_json(self) -> str:
        """Return the JSON form of this date, its ISO 8601 string."""
        return self.to_iso_format()

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Examples:
            >>> LocalDate(2015, 8, 30) == LocalDate.parse("2015-08-30")
            True
        """
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'LocalDate(2015, 8, 30)'.
        """
        return f"LocalDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


LocalDate.MIN = LocalDate._create(-999999, 1, 1)
LocalDate.MAX = LocalDate._create(999999, 12, 31)


__all__ = ["LocalDate"]
