"""Core temporal types for Chronon.

This module exports the fundamental temporal types:
    - LocalDate: Calendar date (year, month, day)
    - LocalTime: Time of day with nanosecond precision
    - Instant: Point on the UTC timeline with nanosecond precision
    - InstantRange: Span between two instants
"""

from __future__ import annotations

from chronon.core.instant import Instant
from chronon.core.instant_range import InstantRange
from chronon.core.local_date import LocalDate
from chronon.core.local_time import LocalTime

__all__: list[str] = [
    "Instant",
    "InstantRange",
    "LocalDate",
    "LocalTime",
]
