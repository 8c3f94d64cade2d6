"""Tests for the Instant class."""

from __future__ import annotations

import datetime
import functools
import math
import re

import pytest

from chronon._internal.constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from chronon.core.instant import Instant
from chronon.errors import OverflowError, ParseError, RangeError, ValidationError

OVERFLOW = "The result overflows the range of safe integers."
TIMESTAMP = "The timestamp must be a safe integer."


def range_message(value: int) -> str:
    return re.escape(
        f"The value {value} is out of the range "
        "[-31619087596800 - 31494784780799] of instant."
    )


class TestInstantConstruction:
    """Tests for Instant factories."""

    def test_of_epoch_second(self) -> None:
        """Test construction from epoch seconds."""
        instant = Instant.of_epoch_second(1440979200)
        assert instant.epoch_second == 1440979200
        assert instant.nano == 0
        assert Instant(1440979200) == instant

    def test_nano_adjustment_normalized(self) -> None:
        """Nano adjustments carry into seconds and stay non-negative."""
        assert Instant(3, 1) == Instant(3, 1)
        assert Instant(4, -999_999_999) == Instant(3, 1)
        assert Instant(2, 1_000_000_001) == Instant(3, 1)
        assert Instant(-1, -1).epoch_second == -2
        assert Instant(-1, -1).nano == 999_999_999

    def test_of_epoch_milli(self) -> None:
        """Test construction from epoch milliseconds."""
        instant = Instant.of_epoch_milli(1440938096155)
        assert instant.epoch_second == 1440938096
        assert instant.nano == 155_000_000
        negative = Instant.of_epoch_milli(-1)
        assert negative.epoch_second == -1
        assert negative.nano == 999_000_000

    def test_of_epoch_second_out_of_range(self) -> None:
        """2**52 seconds is outside the instant range."""
        with pytest.raises(RangeError, match=range_message(4503599627370496)):
            Instant.of_epoch_second(2**52)

    def test_range_bounds(self) -> None:
        """The bounds themselves are accepted, one past them is not."""
        assert Instant.of_epoch_second(-31619087596800) == Instant.MIN
        assert Instant.of_epoch_second(31494784780799, 999_999_999) == Instant.MAX
        with pytest.raises(RangeError, match=range_message(31494784780800)):
            Instant.of_epoch_second(31494784780799, 1_000_000_000)
        with pytest.raises(RangeError, match=range_message(-31619087596801)):
            Instant.of_epoch_second(-31619087596800, -1)

    @pytest.mark.parametrize(
        "value", [1.5, 1.0, math.nan, math.inf, -math.inf, MAX_SAFE_INTEGER + 1]
    )
    def test_invalid_timestamps(self, value: float) -> None:
        """Non-safe inputs raise the timestamp validation error."""
        with pytest.raises(ValidationError, match=TIMESTAMP):
            Instant.of_epoch_second(value)
        with pytest.raises(ValidationError, match=TIMESTAMP):
            Instant.of_epoch_second(0, value)
        with pytest.raises(ValidationError, match=TIMESTAMP):
            Instant.of_epoch_milli(value)

    def test_constants(self) -> None:
        """Test EPOCH, MIN and MAX."""
        assert str(Instant.EPOCH) == "1970-01-01T00:00:00Z"
        assert str(Instant.MIN) == "-999999-01-01T00:00:00Z"
        assert str(Instant.MAX) == "+999999-12-31T23:59:59.999999999Z"


class TestInstantParse:
    """Tests for UTC ISO 8601 parsing."""

    def test_parse_with_millis(self) -> None:
        """Test the canonical millisecond example."""
        instant = Instant.parse("2015-08-30T12:34:56.155Z")
        assert instant.to_epoch_millis() == 1440938096155
        assert instant.nano == 155_000_000

    def test_parse_hour_only(self) -> None:
        """Minute and second may be omitted."""
        instant = Instant.parse("2015-08-30T12Z")
        assert instant.to_epoch_millis() == 1440936000000
        assert instant.nano == 0

    def test_parse_nanos(self) -> None:
        """Fractions of up to nine digits are kept."""
        instant = Instant.parse("2015-08-30T12:34:56.155155155Z")
        assert instant.nano == 155_155_155

    def test_parse_negative_year(self) -> None:
        """Negative years parse with floor-normalized nanos."""
        instant = Instant.parse("-2015-08-30T12:34:56.155155155Z")
        assert instant.to_epoch_millis() == -125733554703845
        assert instant.nano == 155_155_155
        assert str(instant) == "-2015-08-30T12:34:56.155155155Z"

    def test_parse_extended_year(self) -> None:
        """Years past 9999 require a sign."""
        instant = Instant.parse("+10000-01-01T00:00Z")
        assert str(instant) == "+10000-01-01T00:00:00Z"

    @pytest.mark.parametrize(
        "text",
        [
            "2015-08-30T12:34:56.155",
            "2015-08-30T12:34:56.155-03:00",
            "2015-08-30T12:34:56.155+00:00",
            "2015-08-30",
            "2015-08",
            "2015",
            "2015-08-30T12:00.155Z",
            "2015-08-30T12.155Z",
            "2015-08-30T155Z",
            "2015-08-30T12:34:56.Z",
            "2015-08-30T12:34:Z",
            "2015-08-30T12:Z",
            "2015-08-30TZ",
            "2015-08-30T12:34:0.Z",
            "2015-08-30T12:34:0Z",
            "2015-08-30T12:0Z",
            "2015-08-30T0Z",
            "2015-08-30T00:00:000Z",
            "10000-01-01T00:00:00Z",
            "2015-08-30t12:34:56z",
        ],
    )
    def test_parse_rejects(self, text: str) -> None:
        """Other shapes raise ParseError quoting the input."""
        message = f'Unrecognized UTC ISO-8601 date-time string "{text}".'
        with pytest.raises(ParseError, match=re.escape(message)):
            Instant.parse(text)

    def test_parse_invalid_fields(self) -> None:
        """Well-formed strings with invalid fields raise ValidationError."""
        with pytest.raises(ValidationError, match="Day must be"):
            Instant.parse("2015-02-29T00:00Z")
        with pytest.raises(ValidationError, match="Hour must be"):
            Instant.parse("2015-08-30T24:00Z")

    def test_is_valid(self) -> None:
        """is_valid reports whether parse would succeed."""
        assert Instant.is_valid("2015-08-30T12Z")
        assert not Instant.is_valid("2015-08-30T12:00")
        assert not Instant.is_valid(1440936000000)


class TestInstantFormat:
    """Tests for UTC ISO 8601 formatting."""

    @pytest.mark.parametrize(
        "millis, text",
        [
            (0, "1970-01-01T00:00:00Z"),
            (123456789, "1970-01-02T10:17:36.789Z"),
            (1438387200000, "2015-08-01T00:00:00Z"),
            (-1, "1969-12-31T23:59:59.999Z"),
            (4321, "1970-01-01T00:00:04.321Z"),
        ],
    )
    def test_format_millis(self, millis: int, text: str) -> None:
        """Seconds are always written; fractions in groups of three."""
        instant = Instant.of_epoch_milli(millis)
        assert str(instant) == text
        assert instant.to_iso_format() == text
        assert instant.to_json() == text

    def test_format_fraction_groups(self) -> None:
        """Fractions widen to six or nine digits only when needed."""
        assert str(Instant(0, 100_000)) == "1970-01-01T00:00:00.000100Z"
        assert str(Instant(0, 1)) == "1970-01-01T00:00:00.000000001Z"
        assert str(Instant(0, 120_000_000)) == "1970-01-01T00:00:00.120Z"

    def test_round_trip(self) -> None:
        """Formatting and parsing are inverse operations."""
        for instant in (
            Instant(1440938096, 155_155_155),
            Instant(-1, 1),
            Instant.MIN,
            Instant.MAX,
        ):
            assert Instant.parse(str(instant)) == instant

    def test_repr(self) -> None:
        """Test the detailed representation."""
        assert repr(Instant(1, 2)) == "Instant(1, 2)"


class TestInstantArithmetic:
    """Tests for Instant arithmetic."""

    def test_plus_units(self) -> None:
        """Test each unit against epoch milliseconds."""
        base = Instant.of_epoch_milli(1440938096155)
        millis = 1440938096155
        assert base.plus_days(1).to_epoch_millis() == millis + 86_400_000
        assert base.plus_hours(1).to_epoch_millis() == millis + 3_600_000
        assert base.plus_minutes(1).to_epoch_millis() == millis + 60_000
        assert base.plus_seconds(1).to_epoch_millis() == millis + 1_000
        assert base.plus_millis(1).to_epoch_millis() == millis + 1
        assert base.plus_micros(1000).to_epoch_millis() == millis + 1
        assert base.plus_nanos(1_000_000).to_epoch_millis() == millis + 1

    def test_minus_units(self) -> None:
        """Test subtraction across the epoch."""
        epoch = Instant.EPOCH
        assert epoch.minus_days(1) == Instant(-86400)
        assert epoch.minus_hours(1) == Instant(-3600)
        assert epoch.minus_minutes(1) == Instant(-60)
        assert epoch.minus_seconds(1) == Instant(-1)
        assert epoch.minus_millis(1) == Instant(-1, 999_000_000)
        assert epoch.minus_micros(1) == Instant(-1, 999_999_000)
        assert epoch.minus_nanos(1) == Instant(-1, 999_999_999)

    def test_sub_second_carry(self) -> None:
        """Sub-second amounts carry into seconds."""
        instant = Instant(0, 999_999_999)
        assert instant.plus_nanos(1) == Instant(1)
        assert Instant.of_epoch_milli(0).plus_millis(-1500) == Instant(-2, 500_000_000)

    def test_zero_returns_same_instance(self) -> None:
        """Adding zero of any unit returns the same object."""
        instant = Instant.of_epoch_second(1440979200)
        assert instant.plus_seconds(0) is instant
        assert instant.plus_days(0) is instant
        assert instant.minus_millis(0) is instant
        assert instant.plus_nanos(0) is instant

    def test_additive_inverse(self) -> None:
        """plus_x(n).minus_x(n) returns the original instant."""
        instant = Instant(1440938096, 155_155_155)
        for n in (1, 999, 123_456_789, -86401):
            assert instant.plus_days(n).minus_days(n) == instant
            assert instant.plus_millis(n).minus_millis(n) == instant
            assert instant.plus_nanos(n).minus_nanos(n) == instant

    def test_plus_seconds_overflow(self) -> None:
        """Adding MAX_SAFE_INTEGER seconds is a generic overflow."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            Instant.of_epoch_second(1440979200).plus_seconds(MAX_SAFE_INTEGER)

    def test_plus_seconds_out_of_range(self) -> None:
        """Adding MIN_SAFE_INTEGER seconds names the computed second."""
        with pytest.raises(RangeError, match=range_message(-9007197813761791)):
            Instant.of_epoch_second(1440979200).plus_seconds(MIN_SAFE_INTEGER)

    def test_minus_seconds_errors(self) -> None:
        """minus_seconds mirrors plus_seconds with the sign flipped."""
        instant = Instant.of_epoch_second(1440979200)
        with pytest.raises(RangeError, match=range_message(-9007197813761791)):
            instant.minus_seconds(MAX_SAFE_INTEGER)
        with pytest.raises(OverflowError, match=OVERFLOW):
            instant.minus_seconds(MIN_SAFE_INTEGER)

    @pytest.mark.parametrize(
        "method", ["plus_days", "plus_hours", "plus_minutes"]
    )
    def test_whole_unit_overflow(self, method: str) -> None:
        """Whole units that overflow when converted to seconds."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            getattr(Instant.EPOCH, method)(MAX_SAFE_INTEGER)

    def test_past_max(self) -> None:
        """Stepping past Instant.MAX raises RangeError."""
        with pytest.raises(RangeError, match=range_message(31494784780800)):
            Instant.MAX.plus_nanos(1)

    def test_fractional_amount(self) -> None:
        """Fractional amounts raise the overflow error."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            Instant.EPOCH.plus_seconds(1.5)
        with pytest.raises(OverflowError, match=OVERFLOW):
            Instant.EPOCH.plus_millis(0.5)


class TestInstantComparison:
    """Tests for Instant comparison and ordering."""

    def test_compare(self) -> None:
        """compare orders by epoch second, then nano."""
        a = Instant(-1, 999_999_999)
        b = Instant(0)
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(Instant(-1, 999_999_999)) == 0

    def test_predicates_and_operators(self) -> None:
        """Test the is_after/is_before family and operators."""
        a = Instant.of_epoch_milli(100000)
        b = Instant.of_epoch_milli(100001)
        assert b.is_after(a) and a.is_before(b)
        assert a.is_after_or_equal(a) and a.is_before_or_equal(a)
        assert a < b and b > a and a <= a and b >= b
        assert a != b
        assert a == Instant.of_epoch_milli(100000)

    def test_sort_with_comparators(self) -> None:
        """compare_ascending and compare_descending sort instants."""
        instants = [Instant.of_epoch_milli(ms) for ms in (100001, 100000, 123456, 100001)]

        ascending = sorted(
            instants, key=functools.cmp_to_key(Instant.compare_ascending)
        )
        assert [i.to_epoch_millis() for i in ascending] == [
            100000,
            100001,
            100001,
            123456,
        ]

        descending = sorted(
            instants, key=functools.cmp_to_key(Instant.compare_descending)
        )
        assert [i.to_epoch_millis() for i in descending] == [
            123456,
            100001,
            100001,
            100000,
        ]

    def test_hashable(self) -> None:
        """Equal instants hash equally."""
        assert len({Instant(1, 0), Instant(0, 1_000_000_000)}) == 1

    def test_compare_with_other_type(self) -> None:
        """Comparing with a non-instant raises TypeError."""
        with pytest.raises(TypeError):
            Instant.EPOCH.compare(0)


class TestInstantEpochMillis:
    """Tests for the millisecond view."""

    def test_rounds_down(self) -> None:
        """Sub-millisecond nanos are floored."""
        assert Instant(0, 1_999_999).to_epoch_millis() == 1
        assert Instant(-1, 999_999_999).to_epoch_millis() == -1
        assert Instant(-1, 1).to_epoch_millis() == -1000

    @pytest.mark.parametrize(
        "millis", [0, 1, -1, 1440938096155, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER]
    )
    def test_round_trip(self, millis: int) -> None:
        """of_epoch_milli(ms).to_epoch_millis() == ms."""
        assert Instant.of_epoch_milli(millis).to_epoch_millis() == millis

    def test_overflow(self) -> None:
        """Instants beyond the safe millisecond range cannot be converted."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            Instant.MAX.to_epoch_millis()


class TestInstantNative:
    """Tests for datetime interop."""

    def test_to_native(self) -> None:
        """to_native returns an aware UTC datetime."""
        native = Instant.parse("2015-08-30T12:34:56.155Z").to_native()
        assert native == datetime.datetime(
            2015, 8, 30, 12, 34, 56, 155000, tzinfo=datetime.timezone.utc
        )
        assert native.utcoffset() == datetime.timedelta(0)

    def test_from_aware_native(self) -> None:
        """Aware datetimes keep their absolute time."""
        minus_three = datetime.timezone(datetime.timedelta(hours=-3))
        native = datetime.datetime(2015, 8, 30, 9, 34, 56, 155999, tzinfo=minus_three)
        instant = Instant.from_native(native)
        assert instant.to_epoch_millis() == 1440938096155

    @pytest.mark.usefixtures("utc_tz")
    def test_from_naive_native(self) -> None:
        """Naive datetimes are read as local time."""
        native = datetime.datetime(1970, 1, 1, 0, 0, 4, 321000)
        assert Instant.from_native(native) == Instant.of_epoch_milli(4321)

    def test_to_native_out_of_range(self) -> None:
        """Instants outside datetime's years raise RangeError."""
        with pytest.raises(RangeError):
            Instant.parse("+10000-01-01T00:00Z").to_native()

    def test_from_native_wrong_type(self) -> None:
        """Non-datetimes raise TypeError."""
        with pytest.raises(TypeError):
            Instant.from_native(datetime.date(2015, 8, 30))
