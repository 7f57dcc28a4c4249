"""Epoch conversion utilities.

This module gathers the conversions between BrokenDown values and the
host's epoch-based representations.

Functions:
    to_unix_seconds: BrokenDown to whole seconds since the UNIX epoch.
    from_unix_seconds: Seconds since the UNIX epoch to a BrokenDown.
    to_unix_usec: BrokenDown to microseconds since the UNIX epoch.
    from_unix_usec: Microseconds since the UNIX epoch to a BrokenDown.
    to_timeval / from_timeval: (seconds, microseconds, minutes west).

The UNIX epoch is 1970-01-01 00:00:00 UTC, 719528 days after 0000-01-01.

Examples:
    >>> from almanac import make
    >>> to_unix_seconds(make(1970, 1, 1))
    0
    >>> from_unix_seconds(86400).day
    2
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac._internal.constants import UNIX_EPOCH_SECONDS, USEC_PER_SECOND
from almanac.core.codec import (
    decode_unix_seconds,
    decode_usec,
    encode_unix_seconds,
    encode_usec,
    from_timeval,
    to_timeval,
)

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown

_UNIX_EPOCH_USEC = UNIX_EPOCH_SECONDS * USEC_PER_SECOND


def to_unix_seconds(date: BrokenDown) -> int:
    """Return whole seconds since 1970-01-01 00:00 UTC (floored)."""
    return encode_unix_seconds(date)


def from_unix_seconds(seconds: int, tz_offset: int = 0) -> BrokenDown:
    """Return the BrokenDown for UNIX seconds, at ``tz_offset`` (UTC by default)."""
    if tz_offset == 0:
        return decode_unix_seconds(seconds)
    return decode_usec(seconds * USEC_PER_SECOND + _UNIX_EPOCH_USEC, tz_offset)


def to_unix_usec(date: BrokenDown) -> int:
    """Return microseconds since 1970-01-01 00:00 UTC."""
    return encode_usec(date) - _UNIX_EPOCH_USEC


def from_unix_usec(usec: int, tz_offset: int = 0) -> BrokenDown:
    """Return the BrokenDown for UNIX microseconds at ``tz_offset``."""
    return decode_usec(usec + _UNIX_EPOCH_USEC, tz_offset)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_usec",
    "from_unix_usec",
    "to_timeval",
    "from_timeval",
]
