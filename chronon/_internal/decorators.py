"""Custom decorators for Chronon.

This module provides decorator utilities for the library:
    - @exact: Guard an integer function so operands and result stay safe

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable

from chronon._internal.validation import is_safe_integer
from chronon.errors import OverflowError

OVERFLOW_MESSAGE = "The result overflows the range of safe integers."


def exact(func: Callable[..., int]) -> Callable[..., int]:
    """Reject non-safe operands and non-safe results of an integer function.

    Every positional argument is checked before the call and the return
    value after it. A failure on either side raises OverflowError with
    the same message, so fractional or infinite operands are rejected
    exactly like results that leave the safe-integer range.

    Args:
        func: The integer function to guard.

    Returns:
        The guarded function.

    Examples:
        >>> @exact
        ... def double(value: int) -> int:
        ...     return value * 2

        >>> double(2**52)
        Traceback (most recent call last):
        ...
        OverflowError: The result overflows the range of safe integers.
    """

    @functools.wraps(func)
    def wrapper(*args: int) -> int:
        for arg in args:
            if not is_safe_integer(arg):
                raise OverflowError(OVERFLOW_MESSAGE)

        result = func(*args)

        if not is_safe_integer(result):
            raise OverflowError(OVERFLOW_MESSAGE)
        return result

    return wrapper


__all__ = [
    "OVERFLOW_MESSAGE",
    "exact",
]
