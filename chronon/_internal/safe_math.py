"""Overflow-checked integer arithmetic.

Every function here works on safe integers, the integers in
[-(2**53 - 1), 2**53 - 1]. Operands and results outside that range, as
well as floats of any kind, raise OverflowError with the message
"The result overflows the range of safe integers."

Division by zero also raises OverflowError, since the quotient is not a
safe integer.

This module is not part of the public API.
"""

from __future__ import annotations

from chronon._internal.decorators import OVERFLOW_MESSAGE, exact
from chronon.errors import OverflowError


def _check_divisor(divisor: int) -> None:
    if divisor == 0:
        raise OverflowError(OVERFLOW_MESSAGE)


@exact
def add_exact(augend: int, addend: int) -> int:
    """Return the sum of the arguments.

    Examples:
        >>> add_exact(12300, 1000)
        13300
    """
    return augend + addend


@exact
def subtract_exact(minuend: int, subtrahend: int) -> int:
    """Return the difference of the arguments.

    Examples:
        >>> subtract_exact(12300, 1000)
        11300
    """
    return minuend - subtrahend


@exact
def multiply_exact(multiplicand: int, multiplier: int) -> int:
    """Return the product of the arguments.

    Examples:
        >>> multiply_exact(12300, 1000)
        12300000
    """
    return multiplicand * multiplier


@exact
def int_div(dividend: int, divisor: int) -> int:
    """Return the quotient of the arguments truncated toward zero.

    Examples:
        >>> int_div(12999, 1000)
        12
        >>> int_div(-12999, 1000)
        -12
    """
    _check_divisor(divisor)
    quotient = dividend // divisor
    # Floor division rounds negative quotients down; step back toward zero
    if quotient < 0 and quotient * divisor != dividend:
        quotient += 1
    return quotient


@exact
def floor_div(dividend: int, divisor: int) -> int:
    """Return the largest integer less than or equal to the algebraic quotient.

    Examples:
        >>> floor_div(12300, 1000)
        12
        >>> floor_div(-12300, 1000)
        -13
    """
    _check_divisor(divisor)
    return dividend // divisor


@exact
def floor_mod(dividend: int, divisor: int) -> int:
    """Return the floor modulus of the arguments.

    floor_div(x, y) * y + floor_mod(x, y) == x always holds, and the
    result has the sign of the divisor.

    Examples:
        >>> floor_mod(12300, 1000)
        300
        >>> floor_mod(-12300, 1000)
        700
    """
    _check_divisor(divisor)
    return dividend - (dividend // divisor) * divisor


__all__ = [
    "add_exact",
    "subtract_exact",
    "multiply_exact",
    "int_div",
    "floor_div",
    "floor_mod",
]
