"""Temporal conversion utilities.

This module provides functions for converting temporal objects to and from
other representations:
    - JSON strings
    - Epoch seconds and milliseconds
    - datetime objects (see chronon.convert.native)

Examples:
    >>> from chronon import Instant
    >>> from chronon.convert import to_json, from_json

    >>> instant = Instant.of_epoch_milli(4321)
    >>> to_json(instant)
    '1970-01-01T00:00:04.321Z'
    >>> from_json(to_json(instant), Instant) == instant
    True
"""

from __future__ import annotations

from chronon.convert.epoch import (
    from_epoch_millis,
    from_epoch_seconds,
    to_epoch_millis,
    to_epoch_seconds,
)
from chronon.convert.json import TemporalEncoder, from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    "TemporalEncoder",
    # Epoch
    "to_epoch_seconds",
    "from_epoch_seconds",
    "to_epoch_millis",
    "from_epoch_millis",
]
