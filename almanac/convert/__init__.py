"""Conversions between BrokenDown values and host representations.

This module provides:
    - Epoch conversions (UNIX seconds and microseconds, timeval triples)
    - The host wall-clock bridge (Clock, SystemClock, now)
"""

from __future__ import annotations

from almanac.convert.clock import Clock, SystemClock, now
from almanac.convert.epoch import (
    from_timeval,
    from_unix_seconds,
    from_unix_usec,
    to_timeval,
    to_unix_seconds,
    to_unix_usec,
)

__all__: list[str] = [
    "Clock",
    "SystemClock",
    "now",
    "from_timeval",
    "from_unix_seconds",
    "from_unix_usec",
    "to_timeval",
    "to_unix_seconds",
    "to_unix_usec",
]
