"""Gregorian Easter Sunday (anonymous Gregorian algorithm).

Meeus/Jones/Butcher computation of the date of Easter Sunday in the
proleptic Gregorian calendar. Floor division keeps the arithmetic
consistent for years before 1 CE.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac._internal.validation import validate_fields

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown


def easter_month_day(year: int) -> tuple[int, int]:
    """Return ``(month, day)`` of Easter Sunday in a year.

    Examples:
        >>> easter_month_day(2015)
        (4, 5)
        >>> easter_month_day(2000)
        (4, 23)
    """
    validate_fields(year=year)
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return month, day + 1


def easter_in_year(date: BrokenDown) -> BrokenDown:
    """Return the date moved to Easter Sunday of its year.

    Month and day are replaced; the time of day and the offset are kept
    and the weekday is recomputed (always 6, Sunday).

    Examples:
        >>> from almanac.core.codec import make
        >>> e = easter_in_year(make(2015, 6, 11, 21, 53))
        >>> (e.month, e.day, e.hour, e.minute)
        (4, 5, 21, 53)
    """
    from almanac.core.codec import make

    month, day = easter_month_day(date.year)
    return make(
        date.year,
        month,
        day,
        date.hour,
        date.minute,
        date.second,
        date.microsecond,
        date.tz_offset,
    )


__all__ = ["easter_month_day", "easter_in_year"]
