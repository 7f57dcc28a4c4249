"""Comparison of BrokenDown values.

Values are ordered by the instant they name, not by their wall-clock
fields: 12:00 at UTC+02:00 and 10:00 at UTC compare equal.

Examples:
    >>> from almanac.core.codec import make
    >>> compare(make(2015, 1, 1, 12, 0, 0, 0, 120), make(2015, 1, 1, 10))
    0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac.core.codec import encode_usec

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown


def compare(left: BrokenDown, right: BrokenDown) -> int:
    """Return 1 if left is later than right, -1 if earlier, 0 if equal."""
    left_usec = encode_usec(left)
    right_usec = encode_usec(right)
    if left_usec > right_usec:
        return 1
    if left_usec < right_usec:
        return -1
    return 0


def same_instant(left: BrokenDown, right: BrokenDown) -> bool:
    """Return True if both values name the same instant."""
    return compare(left, right) == 0


__all__ = ["compare", "same_instant"]
