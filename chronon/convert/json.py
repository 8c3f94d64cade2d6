"""JSON serialization and deserialization for temporal objects.

Every Chronon value serializes to its canonical ISO 8601 string, so a
value is written to JSON as a plain quoted string:

    "2015-08-30T12:34:56.155Z"
    "2015-08-30"
    "12:34:56.155"
    "2015-08-01T00:00:00Z/2015-08-02T00:00:00Z"

Because the string carries no type tag, reading it back requires the
expected kind.

Functions:
    to_json: Convert a temporal object to its JSON string form.
    from_json: Create a temporal object of a given kind from a JSON string.

Classes:
    TemporalEncoder: json.JSONEncoder that understands temporal objects.

Examples:
    >>> import json
    >>> from chronon import Instant
    >>> from chronon.convert.json import TemporalEncoder, from_json

    >>> json.dumps(Instant.of_epoch_milli(4321), cls=TemporalEncoder)
    '"1970-01-01T00:00:04.321Z"'

    >>> from_json("1970-01-01T00:00:04.321Z", Instant)
    Instant(4, 321000000)
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Union

from chronon.errors import ParseError

if TYPE_CHECKING:
    from chronon.core.instant import Instant
    from chronon.core.instant_range import InstantRange
    from chronon.core.local_date import LocalDate
    from chronon.core.local_time import LocalTime

# Type alias for temporal objects
TemporalType = Union["LocalDate", "LocalTime", "Instant", "InstantRange"]


def _temporal_types() -> dict[str, type]:
    # Import here to avoid circular imports
    from chronon.core.instant import Instant
    from chronon.core.instant_range import InstantRange
    from chronon.core.local_date import LocalDate
    from chronon.core.local_time import LocalTime

    return {
        "Instant": Instant,
        "InstantRange": InstantRange,
        "LocalDate": LocalDate,
        "LocalTime": LocalTime,
    }


def to_json(value: TemporalType) -> str:
    """Convert a temporal object to its JSON string form.

    Args:
        value: A LocalDate, LocalTime, Instant, or InstantRange.

    Returns:
        The canonical ISO 8601 string of the value.

    Raises:
        TypeError: If value is not a supported temporal type.

    Examples:
        >>> from chronon import LocalDate, LocalTime
        >>> to_json(LocalDate(2015, 8, 30))
        '2015-08-30'
        >>> to_json(LocalTime(12, 34))
        '12:34'
    """
    if isinstance(value, tuple(_temporal_types().values())):
        return value.to_json()
    raise TypeError(
        "expected LocalDate, LocalTime, Instant, or InstantRange, "
        f"got {type(value).__name__}"
    )


def from_json(value: str, kind: type | str) -> TemporalType:
    """Create a temporal object from its JSON string form.

    Args:
        value: The ISO 8601 string read from JSON.
        kind: The expected type, as a class or its name.

    Returns:
        The parsed value.

    Raises:
        ParseError: If value is not a string or does not match the grammar.
        TypeError: If kind is not a supported temporal type.

    Examples:
        >>> from_json("2015-08-30", "LocalDate")
        LocalDate(2015, 8, 30)
    """
    type_name = kind.__name__ if isinstance(kind, type) else kind
    types = _temporal_types()
    if type_name not in types:
        raise TypeError(f"unknown temporal type: {type_name!r}")

    if not isinstance(value, str):
        raise ParseError(f"expected str, got {type(value).__name__}")

    return types[type_name].parse(value)


class TemporalEncoder(json.JSONEncoder):
    """JSON encoder that writes temporal objects as ISO 8601 strings.

    Examples:
        >>> import json
        >>> from chronon import LocalDate
        >>> json.dumps({"due": LocalDate(2015, 8, 30)}, cls=TemporalEncoder)
        '{"due": "2015-08-30"}'
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, tuple(_temporal_types().values())):
            return o.to_json()
        return super().default(o)


__all__ = [
    "to_json",
    "from_json",
    "TemporalEncoder",
]
