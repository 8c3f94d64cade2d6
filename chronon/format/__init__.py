"""Temporal formatting and parsing.

This module provides functions for converting temporal objects to and from
ISO 8601 string representations.

Functions:
    parse_iso8601: Parse ISO 8601 date, time, or UTC instant string.
    format_iso8601: Format temporal object as ISO 8601 string.

Examples:
    >>> from chronon.format import parse_iso8601, format_iso8601

    >>> instant = parse_iso8601("2015-08-30T12:34:56.155Z")
    >>> instant.to_epoch_millis()
    1440938096155

    >>> format_iso8601(instant)
    '2015-08-30T12:34:56.155Z'
"""

from __future__ import annotations

from chronon.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
