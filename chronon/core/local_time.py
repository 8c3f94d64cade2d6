"""LocalTime class representing a time of day.

This module provides the LocalTime class for representing time-of-day
values with nanosecond precision. Arithmetic wraps around midnight.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chronon._internal.constants import (
    HOURS_PER_DAY,
    MICROS_PER_DAY,
    MILLIS_PER_DAY,
    MINUTES_PER_DAY,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from chronon._internal.safe_math import floor_mod, multiply_exact
from chronon._internal.validation import is_safe_integer, validate_field
from chronon.errors import ChrononError, RangeError
from chronon.format.iso8601 import format_fraction, parse_time_fields

if TYPE_CHECKING:
    import datetime


class LocalTime:
    """A time of day with nanosecond precision.

    LocalTime represents the time portion of a day, from midnight
    (00:00) to just before the next midnight (23:59:59.999999999). It has
    no date and no time zone, so adding time silently drops the day
    rollover.

    The value is kept as a single count of nanoseconds since midnight.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        nano: The nanosecond of second (0-999999999).

    Examples:
        >>> t = LocalTime(12, 34, 56, 789_000_000)
        >>> str(t)
        '12:34:56.789'

        >>> LocalTime(23, 30).plus_hours(1)
        LocalTime(0, 30, 0, 0)
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        hour: int,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> None:
        """Create a LocalTime from component parts.

        Args:
            hour: The hour (0-23).
            minute: The minute (0-59).
            second: The second (0-59).
            nano: The nanosecond of second (0-999999999).

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalTime(24)
            Traceback (most recent call last):
            ...
            ValidationError: Hour must be an integer between 0 and 23.
        """
        validate_field("Hour", hour, 23)
        validate_field("Minute", minute, 59)
        validate_field("Second", second, 59)
        validate_field("Nanosecond of second", nano, NANOS_PER_SECOND - 1)

        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nano
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        This is an internal constructor that bypasses validation.
        """
        result = object.__new__(cls)
        result._nanos = nanos
        return result

    @classmethod
    def of(
        cls,
        hour: int,
        minute: int = 0,
        second: int = 0,
        nano: int = 0,
    ) -> LocalTime:
        """Create a LocalTime from component parts.

        Same as calling the constructor.
        """
        return cls(hour, minute, second, nano)

    @classmethod
    def of_second_of_day(
        cls, second_of_day: int, nano_of_second: int = 0
    ) -> LocalTime:
        """Create a LocalTime from a second of day and a nanosecond of second.

        Args:
            second_of_day: Seconds since midnight (0-86399).
            nano_of_second: Nanosecond of second (0-999999999).

        Returns:
            The corresponding LocalTime.

        Raises:
            RangeError: If either value is outside its range.

        Examples:
            >>> LocalTime.of_second_of_day(3661)
            LocalTime(1, 1, 1, 0)

            >>> LocalTime.of_second_of_day(86400)
            Traceback (most recent call last):
            ...
            RangeError: The second value 86400 is out of the range [0 - 86399] of local time.
        """
        if not is_safe_integer(second_of_day) or not (
            0 <= second_of_day < SECONDS_PER_DAY
        ):
            raise RangeError(
                f"The second value {second_of_day} is out of the range "
                f"[0 - {SECONDS_PER_DAY - 1}] of local time."
            )
        if not is_safe_integer(nano_of_second) or not (
            0 <= nano_of_second < NANOS_PER_SECOND
        ):
            raise RangeError(
                f"The nanosecond value {nano_of_second} is out of the range "
                f"[0 - {NANOS_PER_SECOND - 1}] of local time."
            )

        return cls._from_nanos(second_of_day * NANOS_PER_SECOND + nano_of_second)

    @classmethod
    def start_of_day(cls) -> LocalTime:
        """Return the time at midnight, 00:00.

        Examples:
            >>> str(LocalTime.start_of_day())
            '00:00'
        """
        return _START_OF_DAY

    @classmethod
    def end_of_day(cls) -> LocalTime:
        """Return the last nanosecond of the day, 23:59:59.999999999.

        Examples:
            >>> str(LocalTime.end_of_day())
            '23:59:59.999999999'
        """
        return _END_OF_DAY

    @classmethod
    def parse(cls, s: str) -> LocalTime:
        """Parse a time from ISO 8601 format.

        Supported formats:
            - HH:MM
            - HH:MM:SS
            - HH:MM:SS.f (1-9 fractional digits, right-padded with zeros)

        Args:
            s: The ISO 8601 time string.

        Returns:
            The parsed LocalTime.

        Raises:
            ParseError: If the string does not match a supported format.
            ValidationError: If a component is out of range.

        Examples:
            >>> LocalTime.parse("12:01:01.1001")
            LocalTime(12, 1, 1, 100100000)

            >>> LocalTime.parse("12:34:56:78.99")
            Traceback (most recent call last):
            ...
            ParseError: Invalid ISO-8601 time string: 12:34:56:78.99
        """
        hour, minute, second, nano = parse_time_fields(s)
        return cls(hour, minute, second, nano)

    @classmethod
    def is_valid(cls, s: Any) -> bool:
        """Return True if s parses as a LocalTime."""
        try:
            cls.parse(s)
        except ChrononError:
            return False
        return True

    @classmethod
    def from_native(cls, value: datetime.time | datetime.datetime) -> LocalTime:
        """Create a LocalTime from a datetime.time or datetime.datetime.

        Aware datetimes are converted to the local time zone first.
        Microseconds become nanoseconds.
        """
        # Import here to avoid circular imports
        from chronon.convert.native import local_time_fields

        return cls(*local_time_fields(value))

    @property
    def hour(self) -> int:
        """Return the hour component (0-23)."""
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        """Return the minute component (0-59)."""
        return (self._nanos // NANOS_PER_MINUTE) % 60

    @property
    def second(self) -> int:
        """Return the second component (0-59)."""
        return (self._nanos // NANOS_PER_SECOND) % 60

    @property
    def nano(self) -> int:
        """Return the nanosecond of second (0-999999999).

        Examples:
            >>> LocalTime(12, 0, 0, 123_456_789).nano
            123456789
        """
        return self._nanos % NANOS_PER_SECOND

    def to_minute_of_day(self) -> int:
        """Return the number of whole minutes since midnight."""
        return self._nanos // NANOS_PER_MINUTE

    def to_second_of_day(self) -> int:
        """Return the number of whole seconds since midnight.

        Examples:
            >>> LocalTime(1, 1, 1, 999).to_second_of_day()
            3661
        """
        return self._nanos // NANOS_PER_SECOND

    def to_milli_of_day(self) -> int:
        """Return the number of whole milliseconds since midnight."""
        return self._nanos // NANOS_PER_MILLI

    def to_micro_of_day(self) -> int:
        """Return the number of whole microseconds since midnight."""
        return self._nanos // NANOS_PER_MICRO

    def to_nano_of_day(self) -> int:
        """Return the number of nanoseconds since midnight."""
        return self._nanos

    def _plus(self, amount: int, units_per_day: int, nanos_per_unit: int) -> LocalTime:
        """Add an amount of one unit, wrapping around midnight.

        Args:
            amount: Number of units to add (can be negative).
            units_per_day: How many of the unit make up one day.
            nanos_per_unit: Length of one unit in nanoseconds.

        Returns:
            The shifted time, or self when the time of day is unchanged.

        Raises:
            OverflowError: If amount is not a safe integer.
        """
        if amount == 0:
            return self

        amount_in_day = floor_mod(amount, units_per_day)
        delta = multiply_exact(amount_in_day, nanos_per_unit)
        nanos = (self._nanos + delta) % NANOS_PER_DAY
        if nanos == self._nanos:
            return self
        return LocalTime._from_nanos(nanos)

    def plus_hours(self, hours: int) -> LocalTime:
        """Return a copy of this time with the given hours added.

        Examples:
            >>> LocalTime(23).plus_hours(2)
            LocalTime(1, 0, 0, 0)
            >>> LocalTime(1).plus_hours(-2)
            LocalTime(23, 0, 0, 0)
        """
        return self._plus(hours, HOURS_PER_DAY, NANOS_PER_HOUR)

    def minus_hours(self, hours: int) -> LocalTime:
        """Return a copy of this time with the given hours subtracted."""
        return self._plus(-hours, HOURS_PER_DAY, NANOS_PER_HOUR)

    def plus_minutes(self, minutes: int) -> LocalTime:
        """Return a copy of this time with the given minutes added."""
        return self._plus(minutes, MINUTES_PER_DAY, NANOS_PER_MINUTE)

    def minus_minutes(self, minutes: int) -> LocalTime:
        """Return a copy of this time with the given minutes subtracted."""
        return self._plus(-minutes, MINUTES_PER_DAY, NANOS_PER_MINUTE)

    def plus_seconds(self, seconds: int) -> LocalTime:
        """Return a copy of this time with the given seconds added."""
        return self._plus(seconds, SECONDS_PER_DAY, NANOS_PER_SECOND)

    def minus_seconds(self, seconds: int) -> LocalTime:
        """Return a copy of this time with the given seconds subtracted."""
        return self._plus(-seconds, SECONDS_PER_DAY, NANOS_PER_SECOND)

    def plus_millis(self, millis: int) -> LocalTime:
        """Return a copy of this time with the given milliseconds added."""
        return self._plus(millis, MILLIS_PER_DAY, NANOS_PER_MILLI)

    def minus_millis(self, millis: int) -> LocalTime:
        """Return a copy of this time with the given milliseconds subtracted."""
        return self._plus(-millis, MILLIS_PER_DAY, NANOS_PER_MILLI)

    def plus_micros(self, micros: int) -> LocalTime:
        """Return a copy of this time with the given microseconds added."""
        return self._plus(micros, MICROS_PER_DAY, NANOS_PER_MICRO)

    def minus_micros(self, micros: int) -> LocalTime:
        """Return a copy of this time with the given microseconds subtracted."""
        return self._plus(-micros, MICROS_PER_DAY, NANOS_PER_MICRO)

    def plus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy of this time with the given nanoseconds added."""
        return self._plus(nanos, NANOS_PER_DAY, 1)

    def minus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy of this time with the given nanoseconds subtracted."""
        return self._plus(-nanos, NANOS_PER_DAY, 1)

    def compare(self, other: LocalTime) -> int:
        """Compare this time with another.

        Returns:
            -1, 0 or 1 as this time is before, equal to or after other.

        Raises:
            TypeError: If other is not a LocalTime.
        """
        if not isinstance(other, LocalTime):
            raise TypeError(f"expected LocalTime, got {type(other).__name__}")
        return (self._nanos > other._nanos) - (self._nanos < other._nanos)

    def is_after(self, other: LocalTime) -> bool:
        """Return True if this time is strictly after other."""
        return self.compare(other) > 0

    def is_before(self, other: LocalTime) -> bool:
        """Return True if this time is strictly before other."""
        return self.compare(other) < 0

    def is_after_or_equal(self, other: LocalTime) -> bool:
        """Return True if this time is after or equal to other."""
        return self.compare(other) >= 0

    def is_before_or_equal(self, other: LocalTime) -> bool:
        """Return True if this time is before or equal to other."""
        return self.compare(other) <= 0

    def to_iso_format(self) -> str:
        """Return the time as an ISO 8601 string.

        Seconds are omitted when both second and nano are zero. The
        fraction is the shortest of 3, 6 or 9 digits that keeps the
        precision.

        Examples:
            >>> LocalTime(12, 34).to_iso_format()
            '12:34'
            >>> LocalTime(12, 34, 0, 1).to_iso_format()
            '12:34:00.000000001'
        """
        result = f"{self.hour:02d}:{self.minute:02d}"
        nano = self.nano
        if self.second == 0 and nano == 0:
            return result
        return f"{result}:{self.second:02d}{format_fraction(nano)}"

    def to_json(self) -> str:
        """Return the JSON form of this time, its ISO 8601 string."""
        return self.to_iso_format()

    def __eq__(self, other: object) -> bool:
        """Check equality with another time."""
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        """Check inequality with another time."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this time is earlier than another."""
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        """Check if this time is earlier than or equal to another."""
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        """Check if this time is later than another."""
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        """Check if this time is later than or equal to another."""
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'LocalTime(12, 34, 56, 0)'.
        """
        return f"LocalTime({self.hour}, {self.minute}, {self.second}, {self.nano})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Times are always truthy, including midnight."""
        return True


_START_OF_DAY = LocalTime._from_nanos(0)
_END_OF_DAY = LocalTime._from_nanos(NANOS_PER_DAY - 1)


__all__ = ["LocalTime"]
