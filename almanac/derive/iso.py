"""Day-of-year and ISO 8601 week numbering.

ISO weeks start on Monday. Week 1 of a year is the week that contains
the year's first Thursday (equivalently, January 4th), so the days around
New Year may belong to a week of the neighbouring week-numbering year.
Each week is attributed to the year its Thursday falls in.

All functions read the civil fields (year, month, day) of the value and
ignore its time of day and offset.

Examples:
    >>> from almanac.core.codec import make
    >>> iso_week_number(make(2015, 12, 31))
    53
    >>> iso_calendar(make(2016, 1, 1))
    (2015, 53, 5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac._internal.calendar import (
    civil_from_days,
    days_before_month,
    days_from_zero,
    fold_month,
    is_leap_year,
    weekday_from_days,
)

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown

_THURSDAY = 3
_WEDNESDAY = 2


def weekday_of(year: int, month: int, day: int) -> int:
    """Return the weekday of a civil date (0 = Monday, 6 = Sunday)."""
    return weekday_from_days(days_from_zero(year, month, day))


def day_of_year(date: BrokenDown) -> int:
    """Return the 1-based day number within the year.

    Examples:
        >>> from almanac.core.codec import make
        >>> day_of_year(make(2016, 12, 31))
        366
    """
    year, month = fold_month(date.year, date.month)
    return days_before_month(year, month) + date.day


def iso_weeks_in_year(year: int) -> int:
    """Return the number of ISO weeks in a week-numbering year (52 or 53).

    A year has 53 weeks when it starts on a Thursday, or when it is a
    leap year starting on a Wednesday.
    """
    first = weekday_of(year, 1, 1)
    if first == _THURSDAY or (first == _WEDNESDAY and is_leap_year(year)):
        return 53
    return 52


def iso_calendar(date: BrokenDown) -> tuple[int, int, int]:
    """Return ``(iso_year, iso_week, iso_weekday)`` with weekday 1 = Monday.

    Locates the Thursday of the date's week; its calendar year is the
    week-numbering year, and its distance from January 1st of that year
    gives the week number.
    """
    days = days_from_zero(date.year, date.month, date.day)
    weekday = weekday_from_days(days)
    thursday = days + _THURSDAY - weekday
    iso_year, _, _ = civil_from_days(thursday)
    week = (thursday - days_from_zero(iso_year, 1, 1)) // 7 + 1
    return iso_year, week, weekday + 1


def iso_week_number(date: BrokenDown) -> int:
    """Return the ISO 8601 week number (1-53).

    Examples:
        >>> from almanac.core.codec import make
        >>> iso_week_number(make(2015, 1, 1))
        1
        >>> iso_week_number(make(2016, 1, 1))
        53
    """
    return iso_calendar(date)[1]


def iso_week_numbering_year(date: BrokenDown) -> int:
    """Return the ISO 8601 week-numbering year.

    Equal to the calendar year except for late-December days that belong
    to week 1 of the next year and early-January days that belong to the
    last week of the previous year.

    Examples:
        >>> from almanac.core.codec import make
        >>> iso_week_numbering_year(make(2014, 12, 29))
        2015
    """
    return iso_calendar(date)[0]


__all__ = [
    "weekday_of",
    "day_of_year",
    "iso_weeks_in_year",
    "iso_calendar",
    "iso_week_number",
    "iso_week_numbering_year",
]
