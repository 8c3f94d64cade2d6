"""Tests for overflow-checked integer arithmetic."""

from __future__ import annotations

import math
from typing import Callable

import pytest

from chronon._internal.constants import MAX_SAFE_INTEGER, MIN_SAFE_INTEGER
from chronon._internal.safe_math import (
    add_exact,
    floor_div,
    floor_mod,
    int_div,
    multiply_exact,
    subtract_exact,
)
from chronon._internal.validation import is_safe_integer
from chronon.errors import ChrononError, OverflowError

OVERFLOW = "The result overflows the range of safe integers."


class TestIsSafeInteger:
    """Tests for the safe integer predicate."""

    @pytest.mark.parametrize(
        "value",
        [0, 1, -1, MAX_SAFE_INTEGER, MIN_SAFE_INTEGER],
    )
    def test_safe_values(self, value: int) -> None:
        """Integers within +/-(2**53 - 1) are safe."""
        assert is_safe_integer(value)

    @pytest.mark.parametrize(
        "value",
        [
            MAX_SAFE_INTEGER + 1,
            MIN_SAFE_INTEGER - 1,
            1.0,
            0.5,
            math.nan,
            math.inf,
            -math.inf,
            True,
            "1",
            None,
        ],
    )
    def test_unsafe_values(self, value: object) -> None:
        """Out-of-range integers, floats, bools and non-numbers are not safe."""
        assert not is_safe_integer(value)


class TestAddSubtractMultiply:
    """Tests for add_exact, subtract_exact and multiply_exact."""

    def test_add(self) -> None:
        """Test addition within range."""
        assert add_exact(12300, 1000) == 13300
        assert add_exact(MAX_SAFE_INTEGER, MIN_SAFE_INTEGER) == 0

    def test_subtract(self) -> None:
        """Test subtraction within range."""
        assert subtract_exact(12300, 1000) == 11300
        assert subtract_exact(MIN_SAFE_INTEGER, -1) == MIN_SAFE_INTEGER + 1

    def test_multiply(self) -> None:
        """Test multiplication within range."""
        assert multiply_exact(12300, 1000) == 12300000
        assert multiply_exact(-3, 7) == -21

    def test_add_overflow(self) -> None:
        """Sums beyond the safe range raise OverflowError."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            add_exact(MAX_SAFE_INTEGER, 1)
        with pytest.raises(OverflowError, match=OVERFLOW):
            add_exact(MIN_SAFE_INTEGER, -1)

    def test_subtract_overflow(self) -> None:
        """Differences beyond the safe range raise OverflowError."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            subtract_exact(MIN_SAFE_INTEGER, 1)

    def test_multiply_overflow(self) -> None:
        """Products beyond the safe range raise OverflowError."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            multiply_exact(2**27, 2**27)

    def test_unsafe_operand_rejected(self) -> None:
        """An operand outside the safe range is rejected even if the result fits."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            add_exact(MAX_SAFE_INTEGER + 1, -2)

    @pytest.mark.parametrize("operand", [1.5, 2.0, math.nan, math.inf, -math.inf])
    def test_non_integer_operand_rejected(self, operand: float) -> None:
        """Fractional and non-finite operands raise the overflow error."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            add_exact(1, operand)
        with pytest.raises(OverflowError, match=OVERFLOW):
            multiply_exact(operand, 1)

    def test_overflow_is_chronon_error(self) -> None:
        """OverflowError is part of the Chronon hierarchy."""
        with pytest.raises(ChrononError):
            add_exact(MAX_SAFE_INTEGER, MAX_SAFE_INTEGER)


class TestDivision:
    """Tests for int_div, floor_div and floor_mod."""

    def test_floor_div(self) -> None:
        """floor_div rounds toward negative infinity."""
        assert floor_div(12300, 1000) == 12
        assert floor_div(-12300, 1000) == -13
        assert floor_div(-12000, 1000) == -12

    def test_floor_mod(self) -> None:
        """floor_mod takes the sign of the divisor."""
        assert floor_mod(12300, 1000) == 300
        assert floor_mod(-12300, 1000) == 700
        assert floor_mod(12300, -1000) == -700

    def test_floor_identity(self) -> None:
        """floor_div(x, y) * y + floor_mod(x, y) == x."""
        for x in (-12345, -1, 0, 1, 12345):
            for y in (-7, 3, 1000):
                assert floor_div(x, y) * y + floor_mod(x, y) == x

    def test_int_div_truncates(self) -> None:
        """int_div rounds toward zero."""
        assert int_div(12999, 1000) == 12
        assert int_div(-12999, 1000) == -12
        assert int_div(-12000, 1000) == -12
        assert int_div(12999, -1000) == -12

    @pytest.mark.parametrize("func", [int_div, floor_div, floor_mod])
    @pytest.mark.parametrize("dividend", [0, 1, -1, MAX_SAFE_INTEGER])
    def test_division_by_zero(
        self, func: Callable[[int, int], int], dividend: int
    ) -> None:
        """Dividing by zero raises OverflowError, not ZeroDivisionError."""
        with pytest.raises(OverflowError, match=OVERFLOW) as excinfo:
            func(dividend, 0)
        assert isinstance(excinfo.value, ChrononError)

    def test_fractional_dividend_rejected(self) -> None:
        """Division functions reject non-integer operands."""
        with pytest.raises(OverflowError, match=OVERFLOW):
            floor_div(1.5, 1)
        with pytest.raises(OverflowError, match=OVERFLOW):
            floor_mod(10, 0.5)
