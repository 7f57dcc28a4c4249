"""Almanac exception hierarchy.

All Almanac-specific exceptions inherit from AlmanacError.
"""

from __future__ import annotations


class AlmanacError(Exception):
    """Base exception for all Almanac errors."""

    pass


class ValidationError(AlmanacError):
    """Invalid input values.

    Raised when an argument has the wrong type or lies outside the domain
    that normalization can absorb.

    Examples:
        - A date field given as a float or string
        - A negative value passed to the Roman numeral encoder
        - A format template that cannot be written as 8-bit text
    """

    pass


class OverflowError(AlmanacError):
    """Instant outside the representable range.

    Raised when a microsecond count falls outside the signed 64-bit range
    (roughly 292 000 years either side of year 0).
    """

    pass


__all__ = [
    "AlmanacError",
    "ValidationError",
    "OverflowError",
]
