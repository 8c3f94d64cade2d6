"""Internal utilities for Chronon.

This module contains private implementation details:
    - Constants and magic numbers
    - Overflow-checked integer arithmetic
    - Proleptic Gregorian calendar algorithms
    - Validation helpers and decorators

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronon._internal.decorators import exact
from chronon._internal.safe_math import (
    add_exact,
    floor_div,
    floor_mod,
    int_div,
    multiply_exact,
    subtract_exact,
)
from chronon._internal.validation import (
    is_safe_integer,
    validate_day,
    validate_epoch_day,
    validate_field,
    validate_month,
    validate_safe_integers,
    validate_year,
)

__all__: list[str] = [
    "exact",
    "add_exact",
    "subtract_exact",
    "multiply_exact",
    "int_div",
    "floor_div",
    "floor_mod",
    "is_safe_integer",
    "validate_day",
    "validate_epoch_day",
    "validate_field",
    "validate_month",
    "validate_safe_integers",
    "validate_year",
]
