"""Values derived from a BrokenDown: day of year, ISO weeks, Easter."""

from __future__ import annotations

from almanac.derive.easter import easter_in_year, easter_month_day
from almanac.derive.iso import (
    day_of_year,
    iso_calendar,
    iso_week_number,
    iso_week_numbering_year,
    iso_weeks_in_year,
    weekday_of,
)

__all__: list[str] = [
    "day_of_year",
    "easter_in_year",
    "easter_month_day",
    "iso_calendar",
    "iso_week_number",
    "iso_week_numbering_year",
    "iso_weeks_in_year",
    "weekday_of",
]
