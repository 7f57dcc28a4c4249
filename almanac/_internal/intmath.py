"""Signed integer division helpers.

Calendar math uses floor semantics across the negative-year range; span
decomposition and the ``%y`` directive truncate toward zero.

This module is not part of the public API.
"""

from __future__ import annotations


def floor_div(a: int, b: int) -> int:
    """Return the quotient of a / b rounded toward negative infinity.

    Examples:
        >>> floor_div(7, 2)
        3
        >>> floor_div(-7, 2)
        -4
    """
    return a // b


def floor_mod(a: int, b: int) -> int:
    """Return the remainder matching floor_div, in [0, b) for b > 0.

    Examples:
        >>> floor_mod(-1, 7)
        6
    """
    return a % b


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the sign of a.

    Args:
        a: The dividend.
        b: A positive divisor.

    Returns:
        Tuple of (quotient, remainder) with quotient * b + remainder == a.

    Examples:
        >>> trunc_divmod(-90, 60)
        (-1, -30)
        >>> trunc_divmod(90, 60)
        (1, 30)
    """
    quotient = abs(a) // b
    if a < 0:
        quotient = -quotient
    return quotient, a - quotient * b


def trunc_mod(a: int, b: int) -> int:
    """Return the remainder of trunc_divmod(a, b)."""
    return trunc_divmod(a, b)[1]


__all__ = [
    "floor_div",
    "floor_mod",
    "trunc_divmod",
    "trunc_mod",
]
