"""English names used by the format interpreter.

Each table ends with a placeholder that is returned for indices outside
the valid range, so formatting a non-normalized value never fails.
"""

from __future__ import annotations

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
    "Invalid",
)
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = (
    "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun", "Inv",
)
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
    "Invalid",
)
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec", "Inv",
)
AMPM_CAPS: tuple[str, str] = ("AM", "PM")
AMPM_SMALL: tuple[str, str] = ("a.m.", "p.m.")


def lookup(table: tuple[str, ...], index: int) -> str:
    """Return table[index], or the trailing placeholder if out of range.

    Examples:
        >>> lookup(MONTH_ABBREVIATIONS, 2)
        'Mar'
        >>> lookup(MONTH_ABBREVIATIONS, 12)
        'Inv'
    """
    if 0 <= index < len(table) - 1:
        return table[index]
    return table[-1]


__all__ = [
    "WEEKDAY_NAMES",
    "WEEKDAY_ABBREVIATIONS",
    "MONTH_NAMES",
    "MONTH_ABBREVIATIONS",
    "AMPM_CAPS",
    "AMPM_SMALL",
    "lookup",
]
