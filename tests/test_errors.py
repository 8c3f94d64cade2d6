"""Tests for the exception hierarchy and cross-type edge cases."""

from __future__ import annotations

import pytest

from chronon import (
    ChrononError,
    Instant,
    InstantRange,
    InvalidIntervalError,
    LocalDate,
    LocalTime,
    OverflowError,
    ParseError,
    RangeError,
    ValidationError,
)


class TestHierarchy:
    """Tests for exception subclassing."""

    def test_subclasses(self) -> None:
        """Every error derives from ChrononError."""
        assert issubclass(ValidationError, ChrononError)
        assert issubclass(RangeError, ValidationError)
        assert issubclass(InvalidIntervalError, ValidationError)
        assert issubclass(ParseError, ChrononError)
        assert issubclass(OverflowError, ChrononError)

    def test_parse_and_validation_are_distinct(self) -> None:
        """A parse failure is not a validation failure."""
        assert not issubclass(ParseError, ValidationError)
        assert not issubclass(OverflowError, ValidationError)

    def test_catch_all(self) -> None:
        """ChrononError catches errors from every type."""
        failures = [
            lambda: LocalDate.parse("nope"),
            lambda: LocalTime(25),
            lambda: Instant.of_epoch_second(2**52),
            lambda: Instant.EPOCH.plus_seconds(2**53),
            lambda: InstantRange(start=Instant.EPOCH, end=Instant.EPOCH),
        ]
        for failure in failures:
            with pytest.raises(ChrononError):
                failure()


class TestImmutability:
    """Tests that value objects cannot be mutated."""

    @pytest.mark.parametrize(
        "value",
        [LocalDate(2015, 8, 30), LocalTime(12), Instant.EPOCH],
    )
    def test_no_new_attributes(self, value: object) -> None:
        """Slots prevent adding attributes."""
        with pytest.raises(AttributeError):
            value.extra = 1  # type: ignore[attr-defined]

    def test_properties_are_read_only(self) -> None:
        """Public fields are read-only properties."""
        with pytest.raises(AttributeError):
            LocalDate(2015, 8, 30).year = 2016  # type: ignore[misc]
        with pytest.raises(AttributeError):
            Instant.EPOCH.nano = 1  # type: ignore[misc]

    def test_always_truthy(self) -> None:
        """Zero-like values are still truthy."""
        assert LocalTime.start_of_day()
        assert Instant.EPOCH
        assert LocalDate(0, 1, 1)


class TestCrossTypeEquality:
    """Tests that different types never compare equal."""

    def test_distinct_types(self) -> None:
        """A date, a time and an instant are never equal to each other."""
        assert LocalDate(1970, 1, 1) != Instant.EPOCH
        assert LocalTime(0) != Instant.EPOCH
        assert Instant.EPOCH != 0
