"""Tests for the InstantRange class."""

from __future__ import annotations

import pytest

from chronon.core.instant import Instant
from chronon.core.instant_range import InstantRange
from chronon.errors import InvalidIntervalError, ParseError

START = Instant.parse("2015-08-01T00:00:00Z")
END = Instant.parse("2015-08-02T00:00:00Z")


class TestInstantRangeConstruction:
    """Tests for InstantRange construction."""

    def test_keyword_construction(self) -> None:
        """Test construction with start and end keywords."""
        r = InstantRange(start=START, end=END)
        assert r.start == START
        assert r.end == END

    def test_end_before_start(self) -> None:
        """An end before the start is rejected."""
        with pytest.raises(
            InvalidIntervalError, match="The start instant must be before the end instant"
        ):
            InstantRange(start=END, end=START)

    def test_equal_bounds(self) -> None:
        """Equal bounds are rejected."""
        with pytest.raises(InvalidIntervalError):
            InstantRange(start=START, end=START)

    def test_one_nanosecond(self) -> None:
        """The shortest valid range is one nanosecond."""
        r = InstantRange(start=START, end=START.plus_nanos(1))
        assert START in r

    def test_non_instant_bounds(self) -> None:
        """Bounds must be Instants."""
        with pytest.raises(TypeError):
            InstantRange(start="2015-08-01T00:00:00Z", end=END)


class TestInstantRangeBehavior:
    """Tests for InstantRange formatting, parsing and membership."""

    def test_str(self) -> None:
        """The interval string joins both instants with a slash."""
        r = InstantRange(start=START, end=END)
        assert str(r) == "2015-08-01T00:00:00Z/2015-08-02T00:00:00Z"
        assert r.to_json() == str(r)

    def test_parse_round_trip(self) -> None:
        """parse reads back the interval string."""
        r = InstantRange(start=START, end=END.plus_nanos(5))
        assert InstantRange.parse(str(r)) == r

    @pytest.mark.parametrize(
        "text",
        [
            "2015-08-01T00:00:00Z",
            "2015-08-01T00:00:00Z/2015-08-02T00:00:00Z/2015-08-03T00:00:00Z",
            "2015-08-01T00:00:00Z/2015-08-02",
        ],
    )
    def test_parse_rejects(self, text: str) -> None:
        """Malformed interval strings raise ParseError."""
        with pytest.raises(ParseError):
            InstantRange.parse(text)

    def test_parse_reversed(self) -> None:
        """A reversed interval string fails the ordering check."""
        with pytest.raises(InvalidIntervalError):
            InstantRange.parse("2015-08-02T00:00:00Z/2015-08-01T00:00:00Z")

    def test_contains_half_open(self) -> None:
        """The start is inside the range and the end is not."""
        r = InstantRange(start=START, end=END)
        assert START in r
        assert START.plus_hours(12) in r
        assert END.minus_nanos(1) in r
        assert END not in r
        assert START.minus_nanos(1) not in r
        assert "2015-08-01T12:00:00Z" not in r
        assert r.contains(START)

    def test_is_instant_range(self) -> None:
        """is_instant_range distinguishes genuine ranges."""
        r = InstantRange(start=START, end=END)
        assert InstantRange.is_instant_range(r)
        assert not InstantRange.is_instant_range(str(r))
        assert not InstantRange.is_instant_range({"start": START, "end": END})
        assert not InstantRange.is_instant_range(None)

    def test_equality_and_hash(self) -> None:
        """Ranges with equal bounds are equal and hash equally."""
        a = InstantRange(start=START, end=END)
        b = InstantRange(start=START, end=END)
        assert a == b
        assert a != InstantRange(start=START, end=END.plus_seconds(1))
        assert len({a, b}) == 1

    def test_repr(self) -> None:
        """Test the detailed representation."""
        r = InstantRange(start=Instant(0), end=Instant(1))
        assert repr(r) == "InstantRange(start=Instant(0, 0), end=Instant(1, 0))"
