"""Instant class representing a point on the UTC timeline.

This module provides the Instant class, an epoch second paired with a
nanosecond of second. The nanosecond is always in [0, 10**9), even for
instants before 1970, so ordering by (epoch_second, nano) is
chronological.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chronon._internal.constants import (
    MAX_EPOCH_SECOND,
    MICROS_PER_SECOND,
    MILLIS_PER_SECOND,
    MIN_EPOCH_SECOND,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronon._internal.safe_math import add_exact, floor_div, floor_mod, multiply_exact
from chronon._internal.validation import validate_safe_integers
from chronon.core.local_date import LocalDate
from chronon.core.local_time import LocalTime
from chronon.errors import ChrononError, RangeError
from chronon.format.iso8601 import format_date, format_fraction, parse_instant_fields

if TYPE_CHECKING:
    import datetime

    from chronon.clock import Clock

TIMESTAMP_MESSAGE = "The timestamp must be a safe integer."


def _check_epoch_second(epoch_second: int) -> None:
    if epoch_second < MIN_EPOCH_SECOND or epoch_second > MAX_EPOCH_SECOND:
        raise RangeError(
            f"The value {epoch_second} is out of the range "
            f"[{MIN_EPOCH_SECOND} - {MAX_EPOCH_SECOND}] of instant."
        )


class Instant:
    """An instantaneous point on the UTC timeline.

    Instant stores whole seconds since 1970-01-01T00:00:00Z and a
    nanosecond of second. It covers the same years as LocalDate,
    -999999 to 999999.

    Attributes:
        epoch_second: Seconds since the epoch.
        nano: Nanosecond of second (0-999999999).

    Examples:
        >>> instant = Instant.parse("2015-08-30T12:34:56.155Z")
        >>> instant.to_epoch_millis()
        1440938096155
        >>> instant.nano
        155000000

        >>> str(Instant.of_epoch_milli(123456789))
        '1970-01-02T10:17:36.789Z'
    """

    __slots__ = ("_seconds", "_nano")

    EPOCH: Instant
    MIN: Instant
    MAX: Instant

    @validate_safe_integers("epoch_second", "nano_adjustment", message=TIMESTAMP_MESSAGE)
    def __init__(self, epoch_second: int, nano_adjustment: int = 0) -> None:
        """Create an Instant from epoch seconds and a nanosecond adjustment.

        The adjustment may be any safe integer; whole seconds in it are
        carried into the epoch second.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.
            nano_adjustment: Nanoseconds to add, positive or negative.

        Raises:
            ValidationError: If an argument is not a safe integer.
            OverflowError: If carrying the adjustment overflows.
            RangeError: If the normalized epoch second is out of range.

        Examples:
            >>> Instant(3, -1)
            Instant(2, 999999999)

            >>> Instant(2**52)
            Traceback (most recent call last):
            ...
            RangeError: The value 4503599627370496 is out of the range [-31619087596800 - 31494784780799] of instant.
        """
        seconds = add_exact(epoch_second, floor_div(nano_adjustment, NANOS_PER_SECOND))
        nano = floor_mod(nano_adjustment, NANOS_PER_SECOND)
        _check_epoch_second(seconds)

        self._seconds: int = seconds
        self._nano: int = nano

    @classmethod
    def _create(cls, seconds: int, nano: int) -> Instant:
        """Create an Instant from normalized fields, bypassing validation."""
        result = object.__new__(cls)
        result._seconds = seconds
        result._nano = nano
        return result

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        """Create an Instant from epoch seconds and a nanosecond adjustment.

        Same as calling the constructor.

        Examples:
            >>> Instant.of_epoch_second(1440979200).to_epoch_millis()
            1440979200000
        """
        return cls(epoch_second, nano_adjustment)

    @classmethod
    @validate_safe_integers("millis", message=TIMESTAMP_MESSAGE)
    def of_epoch_milli(cls, millis: int) -> Instant:
        """Create an Instant from milliseconds since the epoch.

        Args:
            millis: Milliseconds since 1970-01-01T00:00:00Z.

        Returns:
            The corresponding Instant.

        Raises:
            ValidationError: If millis is not a safe integer.

        Examples:
            >>> Instant.of_epoch_milli(-1)
            Instant(-1, 999000000)
        """
        return cls(
            floor_div(millis, MILLIS_PER_SECOND),
            floor_mod(millis, MILLIS_PER_SECOND) * NANOS_PER_MILLI,
        )

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant from a clock.

        Args:
            clock: The clock to read. Defaults to the default clock.

        Returns:
            The current Instant.
        """
        # Import here to avoid circular imports
        from chronon.clock import get_default_clock

        if clock is None:
            clock = get_default_clock()
        return clock.instant()

    @classmethod
    def from_native(cls, value: datetime.datetime) -> Instant:
        """Create an Instant from a datetime.datetime.

        Naive datetimes are read as local time. Sub-millisecond digits
        are dropped.

        Args:
            value: The native datetime.

        Returns:
            The Instant of the datetime's epoch millisecond.
        """
        # Import here to avoid circular imports
        from chronon.convert.native import native_to_epoch_millis

        return cls.of_epoch_milli(native_to_epoch_millis(value))

    @classmethod
    def parse(cls, s: str) -> Instant:
        """Parse a UTC instant from ISO 8601 format.

        The format is <date>THH[:MM[:SS[.f]]]Z with a 1-9 digit fraction
        and a mandatory Z. Offsets are not accepted.

        Args:
            s: The ISO 8601 instant string.

        Returns:
            The parsed Instant.

        Raises:
            ParseError: If the string does not match the format.
            ValidationError: If a date or time component is out of range.

        Examples:
            >>> Instant.parse("2015-08-30T12Z").to_epoch_millis()
            1440936000000

            >>> Instant.parse("2015-08-30T12:34:56.155-03:00")
            Traceback (most recent call last):
            ...
            ParseError: Unrecognized UTC ISO-8601 date-time string "2015-08-30T12:34:56.155-03:00".
        """
        year, month, day, hour, minute, second, nano = parse_instant_fields(s)
        date = LocalDate(year, month, day)
        time = LocalTime(hour, minute, second, nano)

        epoch_second = date.to_epoch_day() * SECONDS_PER_DAY + time.to_second_of_day()
        return cls(epoch_second, nano)

    @classmethod
    def is_valid(cls, s: Any) -> bool:
        """Return True if s parses as an Instant."""
        try:
            cls.parse(s)
        except ChrononError:
            return False
        return True

    @property
    def epoch_second(self) -> int:
        """Return the seconds since 1970-01-01T00:00:00Z."""
        return self._seconds

    @property
    def nano(self) -> int:
        """Return the nanosecond of second (0-999999999)."""
        return self._nano

    def _plus(self, seconds: int, nanos: int) -> Instant:
        """Add seconds and nanoseconds, then range-check the result.

        Raises:
            OverflowError: If the second arithmetic leaves the safe integers.
            RangeError: If the normalized epoch second is out of range.
        """
        if seconds == 0 and nanos == 0:
            return self

        epoch_second = add_exact(self._seconds, seconds)
        epoch_second = add_exact(epoch_second, floor_div(nanos, NANOS_PER_SECOND))
        nano_adjustment = self._nano + floor_mod(nanos, NANOS_PER_SECOND)
        return Instant.of_epoch_second(epoch_second, nano_adjustment)

    def plus_days(self, days: int) -> Instant:
        """Return a copy of this instant with the given 86400-second days added."""
        return self._plus(multiply_exact(days, SECONDS_PER_DAY), 0)

    def minus_days(self, days: int) -> Instant:
        """Return a copy of this instant with the given days subtracted."""
        return self.plus_days(-days)

    def plus_hours(self, hours: int) -> Instant:
        """Return a copy of this instant with the given hours added."""
        return self._plus(multiply_exact(hours, SECONDS_PER_HOUR), 0)

    def minus_hours(self, hours: int) -> Instant:
        """Return a copy of this instant with the given hours subtracted."""
        return self.plus_hours(-hours)

    def plus_minutes(self, minutes: int) -> Instant:
        """Return a copy of this instant with the given minutes added."""
        return self._plus(multiply_exact(minutes, SECONDS_PER_MINUTE), 0)

    def minus_minutes(self, minutes: int) -> Instant:
        """Return a copy of this instant with the given minutes subtracted."""
        return self.plus_minutes(-minutes)

    def plus_seconds(self, seconds: int) -> Instant:
        """Return a copy of this instant with the given seconds added.

        Args:
            seconds: Number of seconds to add (can be negative).

        Returns:
            A new Instant, or this instant if seconds is 0.

        Raises:
            OverflowError: If the sum leaves the safe integers.
            RangeError: If the sum is outside the instant range.

        Examples:
            >>> Instant.of_epoch_second(0).plus_seconds(-1)
            Instant(-1, 0)
        """
        return self._plus(seconds, 0)

    def minus_seconds(self, seconds: int) -> Instant:
        """Return a copy of this instant with the given seconds subtracted."""
        return self.plus_seconds(-seconds)

    def plus_millis(self, millis: int) -> Instant:
        """Return a copy of this instant with the given milliseconds added.

        Examples:
            >>> Instant.of_epoch_milli(0).plus_millis(-1500)
            Instant(-2, 500000000)
        """
        return self._plus(
            floor_div(millis, MILLIS_PER_SECOND),
            floor_mod(millis, MILLIS_PER_SECOND) * NANOS_PER_MILLI,
        )

    def minus_millis(self, millis: int) -> Instant:
        """Return a copy of this instant with the given milliseconds subtracted."""
        return self.plus_millis(-millis)

    def plus_micros(self, micros: int) -> Instant:
        """Return a copy of this instant with the given microseconds added."""
        return self._plus(
            floor_div(micros, MICROS_PER_SECOND),
            floor_mod(micros, MICROS_PER_SECOND) * NANOS_PER_MICRO,
        )

    def minus_micros(self, micros: int) -> Instant:
        """Return a copy of this instant with the given microseconds subtracted."""
        return self.plus_micros(-micros)

    def plus_nanos(self, nanos: int) -> Instant:
        """Return a copy of this instant with the given nanoseconds added."""
        return self._plus(0, nanos)

    def minus_nanos(self, nanos: int) -> Instant:
        """Return a copy of this instant with the given nanoseconds subtracted."""
        return self.plus_nanos(-nanos)

    def compare(self, other: Instant) -> int:
        """Compare this instant with another.

        Returns:
            -1, 0 or 1 as this instant is before, equal to or after other.

        Raises:
            TypeError: If other is not an Instant.
        """
        if not isinstance(other, Instant):
            raise TypeError(f"expected Instant, got {type(other).__name__}")
        mine = self._key()
        theirs = other._key()
        return (mine > theirs) - (mine < theirs)

    @staticmethod
    def compare_ascending(a: Instant, b: Instant) -> int:
        """Comparator for sorting instants from earliest to latest.

        Examples:
            >>> from functools import cmp_to_key
            >>> instants = [Instant.of_epoch_milli(ms) for ms in (2, 1, 3)]
            >>> [i.to_epoch_millis() for i in sorted(instants, key=cmp_to_key(Instant.compare_ascending))]
            [1, 2, 3]
        """
        return a.compare(b)

    @staticmethod
    def compare_descending(a: Instant, b: Instant) -> int:
        """Comparator for sorting instants from latest to earliest."""
        return b.compare(a)

    def is_after(self, other: Instant) -> bool:
        """Return True if this instant is strictly after other."""
        return self.compare(other) > 0

    def is_before(self, other: Instant) -> bool:
        """Return True if this instant is strictly before other."""
        return self.compare(other) < 0

    def is_after_or_equal(self, other: Instant) -> bool:
        """Return True if this instant is after or equal to other."""
        return self.compare(other) >= 0

    def is_before_or_equal(self, other: Instant) -> bool:
        """Return True if this instant is before or equal to other."""
        return self.compare(other) <= 0

    def to_epoch_millis(self) -> int:
        """Return the milliseconds since the epoch, rounding the nanos down.

        Raises:
            OverflowError: If the result is not a safe integer.

        Examples:
            >>> Instant(-1, 999_999_999).to_epoch_millis()
            -1
        """
        millis_of_second = self._nano // NANOS_PER_MILLI
        if self._seconds < 0 and self._nano > 0:
            # Borrow one second so the intermediate product stays safe
            return add_exact(
                multiply_exact(self._seconds + 1, MILLIS_PER_SECOND),
                millis_of_second - MILLIS_PER_SECOND,
            )
        return add_exact(
            multiply_exact(self._seconds, MILLIS_PER_SECOND), millis_of_second
        )

    def to_native(self) -> datetime.datetime:
        """Return this instant as an aware UTC datetime.datetime.

        Raises:
            OverflowError: If the epoch millisecond is not a safe integer.
            RangeError: If the instant is outside the years datetime supports.
        """
        # Import here to avoid circular imports
        from chronon.convert.native import epoch_millis_to_native

        return epoch_millis_to_native(self.to_epoch_millis())

    def to_iso_format(self) -> str:
        """Return the instant as a UTC ISO 8601 string.

        Seconds are always present; the fraction is 3, 6 or 9 digits when
        the nano is non-zero.

        Examples:
            >>> Instant.of_epoch_second(1438387200).to_iso_format()
            '2015-08-01T00:00:00Z'
        """
        epoch_day = self._seconds // SECONDS_PER_DAY
        second_of_day = self._seconds - epoch_day * SECONDS_PER_DAY

        date = LocalDate.of_epoch_day(epoch_day)
        hour = second_of_day // SECONDS_PER_HOUR
        minute = (second_of_day // SECONDS_PER_MINUTE) % 60
        second = second_of_day % 60

        return (
            f"{format_date(date.year, date.month, date.day)}"
            f"T{hour:02d}:{minute:02d}:{second:02d}"
            f"{format_fraction(self._nano)}Z"
        )

    def to_json(self) -> str:
        """Return the JSON form of this instant, its ISO 8601 string."""
        return self.to_iso_format()

    def _key(self) -> tuple[int, int]:
        return (self._seconds, self._nano)

    def __eq__(self, other: object) -> bool:
        """Check equality with another instant."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another instant."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this instant is earlier than another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        """Check if this instant is earlier than or equal to another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        """Check if this instant is later than another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        """Check if this instant is later than or equal to another."""
        if not isinstance(other, Instant):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Instant(1440938096, 155000000)'.
        """
        return f"Instant({self._seconds}, {self._nano})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Instants are always truthy, including the epoch."""
        return True


Instant.EPOCH = Instant._create(0, 0)
Instant.MIN = Instant._create(MIN_EPOCH_SECOND, 0)
Instant.MAX = Instant._create(MAX_EPOCH_SECOND, NANOS_PER_SECOND - 1)


__all__ = ["Instant", "TIMESTAMP_MESSAGE"]
