"""Clocks that supply the current instant.

This module provides the Clock abstraction used by Instant.now() and a
set of implementations:
    - SystemClock: the operating system's wall clock, in milliseconds
    - FixedClock: always the same instant
    - OffsetClock: another clock shifted by a fixed amount
    - TickClock: another clock truncated to a tick duration

Clocks carry no time zone; they only produce Instants.

The default clock is process-wide and can be overridden per context
(thread or asyncio task) with use_clock().

Examples:
    >>> from chronon import Instant
    >>> from chronon.clock import FixedClock, use_clock

    >>> fixed = FixedClock(Instant.of_epoch_milli(4321))
    >>> with use_clock(fixed):
    ...     str(Instant.now())
    '1970-01-01T00:00:04.321Z'
"""

from __future__ import annotations

import contextlib
import contextvars
import logging
import time
from abc import ABC, abstractmethod
from typing import Iterator

from chronon._internal.constants import (
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from chronon._internal.safe_math import floor_mod, multiply_exact
from chronon._internal.validation import is_safe_integer
from chronon.core.instant import Instant
from chronon.errors import ValidationError

logger = logging.getLogger(__name__)


class Clock(ABC):
    """A source of the current instant."""

    __slots__ = ()

    @abstractmethod
    def instant(self) -> Instant:
        """Return the current instant of this clock."""

    def millis(self) -> int:
        """Return the current epoch millisecond of this clock."""
        return self.instant().to_epoch_millis()

    def _key(self) -> tuple:
        """Return the values that identify this clock."""
        return ()

    def __eq__(self, other: object) -> bool:
        """Check equality with another clock.

        Clocks are equal when they have the same type and configuration.
        """
        if not isinstance(other, Clock):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        """Check inequality with another clock."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class SystemClock(Clock):
    """The system wall clock with millisecond resolution."""

    __slots__ = ()

    def instant(self) -> Instant:
        return Instant.of_epoch_milli(time.time_ns() // NANOS_PER_MILLI)

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock(Clock):
    """A clock that always returns the same instant.

    Examples:
        >>> clock = FixedClock(Instant.EPOCH)
        >>> clock.instant() is Instant.EPOCH
        True
    """

    __slots__ = ("_instant",)

    def __init__(self, instant: Instant) -> None:
        if not isinstance(instant, Instant):
            raise TypeError(f"expected Instant, got {type(instant).__name__}")
        self._instant = instant

    def instant(self) -> Instant:
        return self._instant

    def _key(self) -> tuple:
        return (self._instant,)

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r})"


class OffsetClock(Clock):
    """A clock that adds a fixed offset to another clock.

    Examples:
        >>> base = FixedClock(Instant.EPOCH)
        >>> str(OffsetClock(base, seconds=60).instant())
        '1970-01-01T00:01:00Z'
    """

    __slots__ = ("_base", "_seconds", "_nanos")

    def __init__(self, base: Clock, seconds: int = 0, nanos: int = 0) -> None:
        """Create a clock offset from base.

        Args:
            base: The clock to read.
            seconds: Whole seconds to add (can be negative).
            nanos: Nanoseconds to add (can be negative).
        """
        self._base = base
        self._seconds = seconds
        self._nanos = nanos

    @classmethod
    def jump(cls, base: Clock, instant: Instant) -> OffsetClock:
        """Create a clock that reads base shifted so that it now shows instant.

        Args:
            base: The clock to read.
            instant: The instant the new clock reports right now.

        Returns:
            An OffsetClock that advances with base from instant onward.
        """
        now = base.instant()
        return cls(
            base,
            seconds=instant.epoch_second - now.epoch_second,
            nanos=instant.nano - now.nano,
        )

    def instant(self) -> Instant:
        return self._base.instant().plus_seconds(self._seconds).plus_nanos(self._nanos)

    def _key(self) -> tuple:
        return (self._base, self._seconds, self._nanos)

    def __repr__(self) -> str:
        return (
            f"OffsetClock({self._base!r}, seconds={self._seconds}, "
            f"nanos={self._nanos})"
        )


class TickClock(Clock):
    """A clock that truncates another clock to a whole tick.

    The tick must be a whole number of milliseconds or divide one second
    evenly, so that ticks stay aligned with the epoch.

    Examples:
        >>> base = FixedClock(Instant.parse("2015-08-30T12:34:56.789Z"))
        >>> str(TickClock.of_seconds(base).instant())
        '2015-08-30T12:34:56Z'
    """

    __slots__ = ("_reference", "_tick_nanos")

    def __init__(self, reference: Clock, tick_nanos: int) -> None:
        """Create a tick clock.

        Args:
            reference: The clock to read.
            tick_nanos: Tick duration in nanoseconds.

        Raises:
            ValidationError: If the tick is not a positive safe integer,
                or is not aligned with seconds.
        """
        if not is_safe_integer(tick_nanos) or tick_nanos <= 0:
            raise ValidationError(
                "Tick duration must be a positive safe integer "
                "and larger than 1 nanosecond."
            )
        if tick_nanos % NANOS_PER_MILLI != 0 and NANOS_PER_SECOND % tick_nanos != 0:
            raise ValidationError(f"Invalid tick duration {tick_nanos}ns.")

        self._reference = reference
        self._tick_nanos = tick_nanos

    @classmethod
    def of_millis(cls, reference: Clock, millis: int = 1) -> TickClock:
        """Create a clock that ticks every given number of milliseconds."""
        return cls(reference, multiply_exact(millis, NANOS_PER_MILLI))

    @classmethod
    def of_seconds(cls, reference: Clock, seconds: int = 1) -> TickClock:
        """Create a clock that ticks every given number of seconds."""
        return cls(reference, multiply_exact(seconds, NANOS_PER_SECOND))

    @classmethod
    def of_minutes(cls, reference: Clock, minutes: int = 1) -> TickClock:
        """Create a clock that ticks every given number of minutes."""
        return cls(reference, multiply_exact(minutes, NANOS_PER_MINUTE))

    @property
    def tick_nanos(self) -> int:
        """Return the tick duration in nanoseconds."""
        return self._tick_nanos

    def instant(self) -> Instant:
        instant = self._reference.instant()
        if self._tick_nanos % NANOS_PER_MILLI == 0:
            millis = instant.to_epoch_millis()
            tick_millis = self._tick_nanos // NANOS_PER_MILLI
            return Instant.of_epoch_milli(millis - floor_mod(millis, tick_millis))
        return instant.minus_nanos(floor_mod(instant.nano, self._tick_nanos))

    def _key(self) -> tuple:
        return (self._reference, self._tick_nanos)

    def __repr__(self) -> str:
        return f"TickClock({self._reference!r}, tick_nanos={self._tick_nanos})"


_default_clock: Clock = SystemClock()
_clock_override: contextvars.ContextVar[Clock | None] = contextvars.ContextVar(
    "chronon_clock_override", default=None
)


def get_default_clock() -> Clock:
    """Return the clock used by Instant.now() in the current context."""
    override = _clock_override.get()
    if override is not None:
        return override
    return _default_clock


def set_default_clock(clock: Clock) -> None:
    """Replace the process-wide default clock.

    Raises:
        TypeError: If clock is not a Clock.
    """
    global _default_clock

    if not isinstance(clock, Clock):
        raise TypeError(f"expected Clock, got {type(clock).__name__}")
    logger.debug("Default clock replaced: %r -> %r", _default_clock, clock)
    _default_clock = clock


@contextlib.contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Override the default clock within the current context.

    Args:
        clock: The clock to use inside the with block.

    Yields:
        The clock.

    Raises:
        TypeError: If clock is not a Clock.
    """
    if not isinstance(clock, Clock):
        raise TypeError(f"expected Clock, got {type(clock).__name__}")

    logger.debug("Clock override entered: %r", clock)
    token = _clock_override.set(clock)
    try:
        yield clock
    finally:
        _clock_override.reset(token)
        logger.debug("Clock override exited: %r", clock)


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "OffsetClock",
    "TickClock",
    "get_default_clock",
    "set_default_clock",
    "use_clock",
]
