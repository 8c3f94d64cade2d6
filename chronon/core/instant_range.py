"""InstantRange class representing a span between two instants.

This module provides the InstantRange class, an ordered pair of
Instants whose start is strictly before its end. Membership uses
half-open semantics [start, end).
"""

from __future__ import annotations

from typing import Any

from chronon.core.instant import Instant
from chronon.errors import InvalidIntervalError, ParseError


class InstantRange:
    """A span of the UTC timeline between two instants.

    The start is inclusive and the end is exclusive, so adjacent ranges
    [a, b) and [b, c) neither overlap nor leave a gap.

    Attributes:
        start: Start of the range (inclusive).
        end: End of the range (exclusive).

    Examples:
        >>> r = InstantRange(
        ...     start=Instant.parse("2015-08-01T00:00:00Z"),
        ...     end=Instant.parse("2015-08-02T00:00:00Z"),
        ... )
        >>> str(r)
        '2015-08-01T00:00:00Z/2015-08-02T00:00:00Z'
        >>> Instant.parse("2015-08-01T12:00:00Z") in r
        True
        >>> r.end in r
        False
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant, end: Instant) -> None:
        """Create a range [start, end).

        Args:
            start: Start of the range (inclusive).
            end: End of the range (exclusive).

        Raises:
            TypeError: If start or end is not an Instant.
            InvalidIntervalError: If start is not strictly before end.
        """
        if not isinstance(start, Instant) or not isinstance(end, Instant):
            raise TypeError(
                f"expected Instant bounds, got {type(start).__name__} "
                f"and {type(end).__name__}"
            )
        if not start.is_before(end):
            raise InvalidIntervalError(
                "The start instant must be before the end instant"
            )

        self._start = start
        self._end = end

    @classmethod
    def parse(cls, s: str) -> InstantRange:
        """Parse a range from its "<start>/<end>" form.

        Args:
            s: Two UTC instant strings separated by a slash.

        Returns:
            The parsed InstantRange.

        Raises:
            ParseError: If s is not two slash-separated instants.
            InvalidIntervalError: If start is not before end.

        Examples:
            >>> InstantRange.parse("2015-08-01T00:00:00Z/2015-08-02T00:00:00Z").end
            Instant(1438473600, 0)
        """
        parts = s.split("/") if isinstance(s, str) else []
        if len(parts) != 2:
            raise ParseError(f"Invalid ISO-8601 interval string: {s}")

        start, end = parts
        return cls(Instant.parse(start), Instant.parse(end))

    @staticmethod
    def is_instant_range(value: Any) -> bool:
        """Return True if value is an InstantRange.

        Examples:
            >>> InstantRange.is_instant_range("2015-08-01T00:00:00Z/2015-08-02T00:00:00Z")
            False
        """
        return isinstance(value, InstantRange)

    @property
    def start(self) -> Instant:
        """Return the start of the range (inclusive)."""
        return self._start

    @property
    def end(self) -> Instant:
        """Return the end of the range (exclusive)."""
        return self._end

    def contains(self, instant: Instant) -> bool:
        """Return True if start <= instant < end.

        Raises:
            TypeError: If instant is not an Instant.
        """
        if not isinstance(instant, Instant):
            raise TypeError(f"expected Instant, got {type(instant).__name__}")
        return self._start <= instant < self._end

    def __contains__(self, instant: object) -> bool:
        """Support the 'in' operator for instants."""
        if not isinstance(instant, Instant):
            return False
        return self.contains(instant)

    def to_json(self) -> str:
        """Return the JSON form of this range, its "<start>/<end>" string."""
        return str(self)

    def __eq__(self, other: object) -> bool:
        """Check equality with another range."""
        if not isinstance(other, InstantRange):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __ne__(self, other: object) -> bool:
        """Check inequality with another range."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'InstantRange(start=Instant(0, 0), end=Instant(1, 0))'.
        """
        return f"InstantRange(start={self._start!r}, end={self._end!r})"

    def __str__(self) -> str:
        """Return the interval string "<start>/<end>"."""
        return f"{self._start}/{self._end}"


__all__ = ["InstantRange"]
