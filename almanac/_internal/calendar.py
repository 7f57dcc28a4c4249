"""Calendar utilities for Almanac.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap year logic, month and year lengths, and conversion
between (year, month, day) and a day count measured from 0000-01-01.

Day 0 = 0000-01-01 (a Saturday). Year 0 exists and is a leap year.

This module is not part of the public API.
"""

from __future__ import annotations

from almanac._internal.constants import (
    DAYS_BEFORE_YEAR_ONE,
    DAYS_IN_1_YEAR,
    DAYS_IN_4_YEARS,
    DAYS_IN_100_YEARS,
    DAYS_IN_400_YEARS,
    DAYS_PER_WEEK,
    MONTH_LENGTHS,
    ZERO_WEEKDAY,
)
from almanac._internal.intmath import floor_div, floor_mod


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def year_length(year: int) -> int:
    """Return the number of days in a year (366 for leap years, else 365)."""
    return 366 if is_leap_year(year) else 365


def month_length(year: int, month: int) -> int:
    """Return the number of days in a month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return MONTH_LENGTHS[is_leap_year(year)][month - 1]


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    return sum(MONTH_LENGTHS[is_leap_year(year)][: month - 1])


def leap_years_before(year: int) -> int:
    """Count leap years among 1 .. year - 1.

    For years below 1 the floor-division form keeps the count consistent,
    so that ``leap_years_before(y + 1) - leap_years_before(y)`` is 1 exactly
    when ``y`` is a leap year. Year 0 contributes through that difference
    (``leap_years_before(0) == -1``).

    Examples:
        >>> leap_years_before(2001)
        485
        >>> leap_years_before(1) - leap_years_before(0)
        1
    """
    y = year - 1
    return floor_div(y, 4) - floor_div(y, 100) + floor_div(y, 400)


def leap_years_between(start: int, end: int) -> int:
    """Count leap years in [start, end); negative when end < start."""
    return leap_years_before(end) - leap_years_before(start)


def days_before_year(year: int) -> int:
    """Return the day count from 0000-01-01 to year-01-01 (negative for BCE)."""
    return year * DAYS_IN_1_YEAR + leap_years_between(0, year)


def century(year: int) -> int:
    """Return the 1-based century of a year as a positive magnitude.

    Years 1-100 are the 1st century CE; years 0 to -99 (1 BCE to 100 BCE)
    are the 1st century BCE. The era is reported separately.

    Examples:
        >>> century(2000)
        20
        >>> century(2001)
        21
        >>> century(-43)
        1
    """
    if year > 0:
        return floor_div(year - 1, 100) + 1
    return floor_div(-year, 100) + 1


def fold_month(year: int, month: int) -> tuple[int, int]:
    """Carry an out-of-range month into the year.

    Examples:
        >>> fold_month(2015, 13)
        (2016, 1)
        >>> fold_month(2015, 0)
        (2014, 12)
    """
    return year + floor_div(month - 1, 12), floor_mod(month - 1, 12) + 1


def days_from_zero(year: int, month: int, day: int) -> int:
    """Convert year, month, day to a day count from 0000-01-01.

    The day may be out of range for the month (e.g. 32 or -5); the result
    is then simply offset from the first of the month. An out-of-range
    month is folded into the year first.

    Examples:
        >>> days_from_zero(0, 1, 1)
        0
        >>> days_from_zero(1970, 1, 1)
        719528
    """
    year, month = fold_month(year, month)
    return (day - 1) + days_before_month(year, month) + days_before_year(year)


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert a day count from 0000-01-01 to year, month, day.

    Strips 400-, 100-, 4- and 1-year cycles with floor division, counted
    from 0001-01-01 where each cycle ends on its leap year.

    Args:
        days: Day number (0 = 0000-01-01; negative for earlier dates).

    Returns:
        Tuple of (year, month, day).
    """
    n = days - DAYS_BEFORE_YEAR_ONE

    n400, n = divmod(n, DAYS_IN_400_YEARS)
    n100, n = divmod(n, DAYS_IN_100_YEARS)
    n4, n = divmod(n, DAYS_IN_4_YEARS)
    n1, n = divmod(n, DAYS_IN_1_YEAR)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle: December 31 of the leap year
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month = 1
    lengths = MONTH_LENGTHS[is_leap_year(year)]
    while n >= lengths[month - 1]:
        n -= lengths[month - 1]
        month += 1
    return (year, month, n + 1)


def weekday_from_days(days: int) -> int:
    """Return the weekday (0 = Monday) of a day count from 0000-01-01."""
    return floor_mod(days + ZERO_WEEKDAY, DAYS_PER_WEEK)


__all__ = [
    "is_leap_year",
    "year_length",
    "month_length",
    "days_before_month",
    "leap_years_before",
    "leap_years_between",
    "days_before_year",
    "century",
    "fold_month",
    "days_from_zero",
    "civil_from_days",
    "weekday_from_days",
]
