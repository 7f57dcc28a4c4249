"""Internal utilities for Almanac.

This module contains private implementation details:
    - Constants and magic numbers
    - Floor and truncating integer division
    - Proleptic Gregorian calendar primitives
    - Argument validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.intmath import floor_div, floor_mod, trunc_divmod, trunc_mod
from almanac._internal.validation import (
    validate_fields,
    validate_instant,
    validate_non_negative,
)

__all__: list[str] = [
    "floor_div",
    "floor_mod",
    "trunc_divmod",
    "trunc_mod",
    "validate_fields",
    "validate_instant",
    "validate_non_negative",
]
