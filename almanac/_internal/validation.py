"""Validation utilities for Almanac.

Out-of-range field values are not errors (normalization absorbs them), so
validation here is limited to types and to the few arguments that have a
hard domain: non-negative Roman input and the 64-bit instant range.

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import MAX_INSTANT, MIN_INSTANT
from almanac.errors import OverflowError, ValidationError


def validate_fields(**fields: object) -> None:
    """Validate that every named field is an integer.

    Booleans are rejected even though they subclass int.

    Raises:
        ValidationError: If any field is not an integer.

    Examples:
        >>> validate_fields(year=2015, month=1.5)
        Traceback (most recent call last):
        ...
        almanac.errors.ValidationError: month must be an integer, got float
    """
    for name, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(
                f"{name} must be an integer, got {type(value).__name__}"
            )


def validate_non_negative(name: str, value: int) -> None:
    """Validate that an integer argument is zero or positive.

    Raises:
        ValidationError: If value is negative or not an integer.
    """
    validate_fields(**{name: value})
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


def validate_instant(usec: int) -> int:
    """Validate that a microsecond instant fits in a signed 64-bit integer.

    Returns:
        The instant, unchanged.

    Raises:
        OverflowError: If the instant is outside the 64-bit range.
    """
    if usec < MIN_INSTANT or usec > MAX_INSTANT:
        raise OverflowError(
            f"instant {usec} is outside the signed 64-bit microsecond range"
        )
    return usec


__all__ = [
    "validate_fields",
    "validate_non_negative",
    "validate_instant",
]
