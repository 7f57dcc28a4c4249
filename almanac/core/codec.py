"""Instant codec: BrokenDown <-> microseconds since 0000-01-01 00:00 UTC.

The absolute scale is a signed 64-bit count of microseconds measured from
0000-01-01 00:00:00 UTC. Everything else in the library goes through the
two functions here:

    encode_usec: BrokenDown -> microseconds
    decode_usec: microseconds + UTC offset -> BrokenDown

Normalization is defined as a round trip through them, which reduces any
out-of-range field to its canonical form. The UNIX seconds bridge and
timezone conversion are the same round trip with a different anchor or a
different target offset.

Examples:
    >>> d = make(2015, 1, 32)
    >>> (d.year, d.month, d.day)
    (2015, 2, 1)

    >>> encode_usec(make(0, 1, 1))
    0

    >>> decode_unix_seconds(0).weekday
    3
"""

from __future__ import annotations

from almanac._internal.calendar import (
    civil_from_days,
    days_from_zero,
    weekday_from_days,
)
from almanac._internal.constants import (
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    UNIX_EPOCH_SECONDS,
    USEC_PER_DAY,
    USEC_PER_HOUR,
    USEC_PER_MINUTE,
    USEC_PER_SECOND,
)
from almanac._internal.intmath import floor_div, floor_mod
from almanac._internal.validation import validate_fields, validate_instant
from almanac.core.brokendown import BrokenDown


def encode_usec(date: BrokenDown) -> int:
    """Return microseconds since 0000-01-01 00:00 UTC for a BrokenDown.

    The offset is subtracted at the minute level, converting wall-clock
    time to UTC. Fields need not be in range: overflow in any field simply
    moves the instant, which is what makes normalization work.

    Raises:
        OverflowError: If the instant does not fit in 64 bits.

    Examples:
        >>> encode_usec(BrokenDown(0, 1, 1, 1, 0, 0, 0, 60))
        0
    """
    time_of_day = (
        ((date.hour * MINUTES_PER_HOUR + date.minute - date.tz_offset) * SECONDS_PER_MINUTE
         + date.second) * USEC_PER_SECOND
        + date.microsecond
    )
    days = days_from_zero(date.year, date.month, date.day)
    return validate_instant(days * USEC_PER_DAY + time_of_day)


def decode_usec(usec: int, tz_offset: int = 0) -> BrokenDown:
    """Build a BrokenDown for an instant, expressed at ``tz_offset``.

    Args:
        usec: Microseconds since 0000-01-01 00:00 UTC.
        tz_offset: Target offset in minutes east of UTC.

    Returns:
        The canonical BrokenDown, weekday included.

    Raises:
        ValidationError: If an argument is not an integer.
        OverflowError: If usec does not fit in 64 bits.
    """
    validate_fields(usec=usec, tz_offset=tz_offset)
    validate_instant(usec)

    local = usec + tz_offset * USEC_PER_MINUTE
    days = floor_div(local, USEC_PER_DAY)
    time_of_day = floor_mod(local, USEC_PER_DAY)

    year, month, day = civil_from_days(days)
    return BrokenDown(
        year=year,
        month=month,
        day=day,
        hour=time_of_day // USEC_PER_HOUR,
        minute=(time_of_day // USEC_PER_MINUTE) % 60,
        second=(time_of_day // USEC_PER_SECOND) % 60,
        microsecond=time_of_day % USEC_PER_SECOND,
        tz_offset=tz_offset,
        weekday=weekday_from_days(days),
    )


def normalize(date: BrokenDown) -> BrokenDown:
    """Reduce every field to its canonical range by an encode/decode round trip.

    Examples:
        >>> normalize(BrokenDown(2015, 1, 1, 25)).day
        2
    """
    return decode_usec(encode_usec(date), date.tz_offset)


def fix(date: BrokenDown) -> BrokenDown:
    """Return the canonical form of a BrokenDown, reading hour 24 as 00.

    Hour 24 is taken as midnight of the same day, a courtesy for callers
    who write midnight as 24:00.
    """
    validate_fields(
        year=date.year,
        month=date.month,
        day=date.day,
        hour=date.hour,
        minute=date.minute,
        second=date.second,
        microsecond=date.microsecond,
        tz_offset=date.tz_offset,
    )
    if date.hour == 24:
        date = BrokenDown(
            date.year,
            date.month,
            date.day,
            0,
            date.minute,
            date.second,
            date.microsecond,
            date.tz_offset,
        )
    return normalize(date)


def make(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
    tz_offset: int = 0,
) -> BrokenDown:
    """Create a normalized BrokenDown from raw fields.

    Out-of-range fields are folded into their neighbours rather than
    rejected: 2015-01-32 becomes 2015-02-01, hour 25 becomes 01 of the
    next day, negative minutes borrow from the hour. Hour 24 is read as
    00 of the same day.

    Args:
        year: The year (0 is 1 BCE).
        month: The month, usually 1-12.
        day: The day of the month, usually 1-31.
        hour: The hour, usually 0-23.
        minute: The minute, usually 0-59.
        second: The second, usually 0-59.
        microsecond: The microsecond, usually 0-999999.
        tz_offset: Offset from UTC in minutes, positive east.

    Returns:
        The canonical BrokenDown with its weekday filled in.

    Raises:
        ValidationError: If any field is not an integer.

    Examples:
        >>> d = make(2015, 1, 1, 24)
        >>> (d.day, d.hour)
        (1, 0)
    """
    return fix(
        BrokenDown(year, month, day, hour, minute, second, microsecond, tz_offset)
    )


def to_timezone(date: BrokenDown, tz_offset: int) -> BrokenDown:
    """Express the same instant at another UTC offset.

    Examples:
        >>> d = to_timezone(make(2015, 6, 11, 12, 0, 0, 0, 0), 120)
        >>> (d.hour, d.tz_offset)
        (14, 120)
    """
    return decode_usec(encode_usec(date), tz_offset)


# POSIX seconds bridge


def encode_unix_seconds(date: BrokenDown) -> int:
    """Return whole seconds since 1970-01-01 00:00 UTC (floored).

    The microsecond field is carried separately, see :func:`to_timeval`.

    Examples:
        >>> encode_unix_seconds(make(1970, 1, 1, 2, 0, 0, 0, 120))
        0
    """
    return floor_div(encode_usec(date), USEC_PER_SECOND) - UNIX_EPOCH_SECONDS


def decode_unix_seconds(seconds: int) -> BrokenDown:
    """Build a UTC BrokenDown from seconds since 1970-01-01 00:00 UTC."""
    validate_fields(seconds=seconds)
    return decode_usec((seconds + UNIX_EPOCH_SECONDS) * USEC_PER_SECOND, 0)


def to_timeval(date: BrokenDown) -> tuple[int, int, int]:
    """Return ``(seconds, microseconds, minutes_west)`` for a BrokenDown.

    This is the shape the host clock reports: seconds since the UNIX
    epoch, microseconds within the second, and the offset as minutes west
    of UTC.
    """
    usec = encode_usec(date)
    seconds = floor_div(usec, USEC_PER_SECOND) - UNIX_EPOCH_SECONDS
    return seconds, floor_mod(usec, USEC_PER_SECOND), -date.tz_offset


def from_timeval(seconds: int, microseconds: int, minutes_west: int = 0) -> BrokenDown:
    """Build a BrokenDown from a host clock reading.

    Args:
        seconds: Seconds since 1970-01-01 00:00 UTC.
        microseconds: Microseconds within the second.
        minutes_west: Host offset in minutes west of UTC.

    Returns:
        The BrokenDown at offset ``-minutes_west``.
    """
    validate_fields(seconds=seconds, microseconds=microseconds, minutes_west=minutes_west)
    usec = (seconds + UNIX_EPOCH_SECONDS) * USEC_PER_SECOND + microseconds
    return decode_usec(usec, -minutes_west)


__all__ = [
    "encode_usec",
    "decode_usec",
    "normalize",
    "fix",
    "make",
    "to_timezone",
    "encode_unix_seconds",
    "decode_unix_seconds",
    "to_timeval",
    "from_timeval",
]
