"""Epoch conversion utilities for instants.

This module provides functions for converting between Instants and
epoch-based timestamps.

Functions:
    to_epoch_seconds: Whole seconds since the epoch of an Instant.
    from_epoch_seconds: Create an Instant from epoch seconds.
    to_epoch_millis: Milliseconds since the epoch of an Instant.
    from_epoch_millis: Create an Instant from epoch milliseconds.

The epoch is 1970-01-01T00:00:00Z.

Examples:
    >>> from chronon.convert import to_epoch_millis, from_epoch_millis

    >>> to_epoch_millis(from_epoch_millis(1440938096155))
    1440938096155
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chronon.core.instant import Instant


def to_epoch_seconds(instant: Instant) -> int:
    """Return the whole seconds since the epoch, rounding down.

    Examples:
        >>> from chronon import Instant
        >>> to_epoch_seconds(Instant.of_epoch_milli(-1))
        -1
    """
    return instant.epoch_second


def from_epoch_seconds(seconds: int, nano_adjustment: int = 0) -> Instant:
    """Create an Instant from epoch seconds and a nanosecond adjustment.

    Raises:
        ValidationError: If an argument is not a safe integer.
        RangeError: If the result is outside the instant range.
    """
    from chronon.core.instant import Instant

    return Instant.of_epoch_second(seconds, nano_adjustment)


def to_epoch_millis(instant: Instant) -> int:
    """Return the milliseconds since the epoch, rounding down.

    Raises:
        OverflowError: If the result is not a safe integer.
    """
    return instant.to_epoch_millis()


def from_epoch_millis(millis: int) -> Instant:
    """Create an Instant from milliseconds since the epoch.

    Raises:
        ValidationError: If millis is not a safe integer.
    """
    from chronon.core.instant import Instant

    return Instant.of_epoch_milli(millis)


__all__ = [
    "to_epoch_seconds",
    "from_epoch_seconds",
    "to_epoch_millis",
    "from_epoch_millis",
]
