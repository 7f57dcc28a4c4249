"""Arithmetic and comparison operations on BrokenDown values.

Functions:
    usec_difference: Signed microseconds between two values.
    difference: The same, decomposed into a Span.
    add / subtract: Move a value by a Span.
    compare: Three-way comparison by instant.
    same_instant: Equality by instant.
"""

from __future__ import annotations

from almanac.arithmetic.comparisons import compare, same_instant
from almanac.arithmetic.ops import add, difference, subtract, usec_difference

__all__: list[str] = [
    "add",
    "compare",
    "difference",
    "same_instant",
    "subtract",
    "usec_difference",
]
