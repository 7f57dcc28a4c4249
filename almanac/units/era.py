"""Era enumeration for BCE/CE designation.

This module provides the Era enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) dates.
"""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Historical era designation.

    The Era enum represents whether a date is in the Common Era (CE)
    or Before Common Era (BCE). Year 0 exists (astronomical convention)
    and is considered BCE.

    Examples:
        >>> Era.from_year(-43)
        <Era.BCE: 'BCE'>
        >>> Era.from_year(-43).sign
        '-'
        >>> Era.CE.year_of_era(2015)
        2015
        >>> Era.BCE.year_of_era(0)
        1
    """

    BCE = "BCE"  # Before Common Era
    CE = "CE"  # Common Era

    @classmethod
    def from_year(cls, year: int) -> Era:
        """Return the era of an astronomical year number."""
        return cls.BCE if year <= 0 else cls.CE

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era."""
        return self == Era.BCE

    @property
    def sign(self) -> str:
        """Return "-" for BCE and "+" for CE."""
        return "-" if self.is_before_common_era else "+"

    def year_of_era(self, year: int) -> int:
        """Convert an astronomical year to a year count without year 0.

        Year 0 is 1 BCE, year -1 is 2 BCE, and so on.
        """
        return -year + 1 if self.is_before_common_era else year


__all__ = ["Era"]
