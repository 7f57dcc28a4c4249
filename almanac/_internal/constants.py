"""Internal constants for Almanac.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
USEC_PER_SECOND: int = 1_000_000
USEC_PER_MINUTE: int = 60 * USEC_PER_SECOND
USEC_PER_HOUR: int = 60 * USEC_PER_MINUTE
USEC_PER_DAY: int = 24 * USEC_PER_HOUR  # 86_400_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_DAY: int = 86_400
MINUTES_PER_HOUR: int = 60
DAYS_PER_WEEK: int = 7

# Gregorian cycle lengths in days
DAYS_IN_1_YEAR: int = 365
DAYS_IN_4_YEARS: int = DAYS_IN_1_YEAR * 4 + 1  # 1_461
DAYS_IN_100_YEARS: int = DAYS_IN_4_YEARS * 25 - 1  # 36_524
DAYS_IN_400_YEARS: int = DAYS_IN_100_YEARS * 4 + 1  # 146_097

# Year 0 is a leap year, so 0001-01-01 is day 366 counted from 0000-01-01
DAYS_BEFORE_YEAR_ONE: int = 366

# Epoch anchors (weekday: 0 = Monday)
ZERO_WEEKDAY: int = 5  # 0000-01-01 was a Saturday
UNIX_EPOCH_DAYS: int = 719_528  # days from 0000-01-01 to 1970-01-01
UNIX_EPOCH_WEEKDAY: int = 3  # 1970-01-01 was a Thursday
UNIX_EPOCH_SECONDS: int = UNIX_EPOCH_DAYS * SECONDS_PER_DAY

# Instants are signed 64-bit microsecond counts
MIN_INSTANT: int = -(2**63)
MAX_INSTANT: int = 2**63 - 1

# Month lengths, first row for a common year, second for a leap year
MONTH_LENGTHS: tuple[tuple[int, ...], tuple[int, ...]] = (
    (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)


__all__ = [
    "USEC_PER_SECOND",
    "USEC_PER_MINUTE",
    "USEC_PER_HOUR",
    "USEC_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_DAY",
    "MINUTES_PER_HOUR",
    "DAYS_PER_WEEK",
    "DAYS_IN_1_YEAR",
    "DAYS_IN_4_YEARS",
    "DAYS_IN_100_YEARS",
    "DAYS_IN_400_YEARS",
    "DAYS_BEFORE_YEAR_ONE",
    "ZERO_WEEKDAY",
    "UNIX_EPOCH_DAYS",
    "UNIX_EPOCH_WEEKDAY",
    "UNIX_EPOCH_SECONDS",
    "MIN_INSTANT",
    "MAX_INSTANT",
    "MONTH_LENGTHS",
]
