"""Interop with the standard library datetime types.

This module maps Chronon values onto datetime objects and back. The
only timeline quantity exchanged is the epoch millisecond; calendar
fields are read from the datetime objects as they are.

Functions:
    native_to_epoch_millis: Milliseconds since the epoch of a datetime.
    epoch_millis_to_native: Aware UTC datetime of an epoch millisecond.
    local_date_fields: (year, month, day) of a date or datetime.
    local_time_fields: (hour, minute, second, nano) of a time or datetime.

Naive datetimes are read as local time, the same convention as
datetime.timestamp().

Examples:
    >>> import datetime
    >>> dt = datetime.datetime(1970, 1, 1, 0, 0, 4, 321000, tzinfo=datetime.timezone.utc)
    >>> native_to_epoch_millis(dt)
    4321
    >>> epoch_millis_to_native(4321) == dt
    True
"""

from __future__ import annotations

import datetime
import logging

from chronon.errors import RangeError

logger = logging.getLogger(__name__)

EPOCH_UTC = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_ONE_MILLI = datetime.timedelta(milliseconds=1)


def _is_naive(value: datetime.datetime) -> bool:
    return value.tzinfo is None or value.utcoffset() is None


def native_to_epoch_millis(value: datetime.datetime) -> int:
    """Return the milliseconds since the epoch of a datetime.

    Sub-millisecond digits are floored away.

    Args:
        value: An aware or naive datetime.datetime.

    Returns:
        The epoch millisecond.

    Raises:
        TypeError: If value is not a datetime.datetime.
        RangeError: If a naive value cannot be placed in the local zone.
    """
    if not isinstance(value, datetime.datetime):
        raise TypeError(f"expected datetime.datetime, got {type(value).__name__}")

    if _is_naive(value):
        logger.debug("Reading naive datetime %s as local time", value.isoformat())
        try:
            value = value.astimezone()
        except (OverflowError, ValueError, OSError) as e:
            raise RangeError(
                f"The datetime {value.isoformat()} cannot be read as local time."
            ) from e

    return (value - EPOCH_UTC) // _ONE_MILLI


def epoch_millis_to_native(millis: int) -> datetime.datetime:
    """Return the aware UTC datetime of an epoch millisecond.

    Args:
        millis: Milliseconds since 1970-01-01T00:00:00Z.

    Returns:
        A datetime.datetime with tzinfo set to UTC.

    Raises:
        RangeError: If the value is outside the years datetime supports.
    """
    try:
        return EPOCH_UTC + datetime.timedelta(milliseconds=millis)
    except (OverflowError, ValueError) as e:
        raise RangeError(
            f"The value {millis} is out of the range of datetime.datetime."
        ) from e


def _to_local(value: datetime.datetime) -> datetime.datetime:
    if _is_naive(value):
        return value
    return value.astimezone()


def local_date_fields(value: datetime.date) -> tuple[int, int, int]:
    """Return the local (year, month, day) of a date or datetime.

    Aware datetimes are converted to the local time zone first.

    Raises:
        TypeError: If value is not a datetime.date.
    """
    if isinstance(value, datetime.datetime):
        value = _to_local(value)
    elif not isinstance(value, datetime.date):
        raise TypeError(f"expected datetime.date, got {type(value).__name__}")

    return (value.year, value.month, value.day)


def local_time_fields(
    value: datetime.time | datetime.datetime,
) -> tuple[int, int, int, int]:
    """Return the local (hour, minute, second, nano) of a time or datetime.

    Aware datetimes are converted to the local time zone first. The
    tzinfo of a datetime.time is ignored.

    Raises:
        TypeError: If value is neither a datetime.time nor a datetime.datetime.
    """
    if isinstance(value, datetime.datetime):
        value = _to_local(value)
    elif not isinstance(value, datetime.time):
        raise TypeError(
            f"expected datetime.time or datetime.datetime, got {type(value).__name__}"
        )

    return (value.hour, value.minute, value.second, value.microsecond * 1_000)


__all__ = [
    "EPOCH_UTC",
    "native_to_epoch_millis",
    "epoch_millis_to_native",
    "local_date_fields",
    "local_time_fields",
]
