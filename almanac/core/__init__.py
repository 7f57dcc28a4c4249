"""Core value types and the instant codec.

This module exports:
    - BrokenDown: civil date/time fields with a UTC offset
    - Span: a signed duration decomposed into weeks .. microseconds
    - The encode/decode functions that map BrokenDown to instants
"""

from __future__ import annotations

from almanac.core.brokendown import BrokenDown
from almanac.core.codec import (
    decode_unix_seconds,
    decode_usec,
    encode_unix_seconds,
    encode_usec,
    fix,
    from_timeval,
    make,
    normalize,
    to_timeval,
    to_timezone,
)
from almanac.core.span import Span

__all__: list[str] = [
    "BrokenDown",
    "Span",
    "decode_unix_seconds",
    "decode_usec",
    "encode_unix_seconds",
    "encode_usec",
    "fix",
    "from_timeval",
    "make",
    "normalize",
    "to_timeval",
    "to_timezone",
]
