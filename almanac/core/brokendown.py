"""BrokenDown: civil date and time fields with a UTC offset.

This module provides the BrokenDown value type. Operations on it live in
functional modules (codec, derive, arithmetic, format); the methods here
are thin conveniences that delegate to them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from almanac.units.era import Era

if TYPE_CHECKING:
    from almanac.convert.clock import Clock
    from almanac.core.span import Span


@dataclass(frozen=True, slots=True)
class BrokenDown:
    """A civil date/time broken down into fields, plus a UTC offset.

    The fields represent the instant obtained by reading the wall-clock
    fields at ``tz_offset`` minutes east of UTC. ``weekday`` is derived
    from that instant (0 = Monday).

    A BrokenDown built directly from its constructor is taken as given and
    may hold out-of-range fields; use :meth:`make` (or
    :func:`almanac.make`) to obtain the canonical, in-range value.

    Attributes:
        year: The year (0 is 1 BCE, negative years are earlier).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        microsecond: The microsecond (0-999999).
        tz_offset: Offset from UTC in minutes, positive east.
        weekday: Day of the week, 0 = Monday to 6 = Sunday.

    Examples:
        >>> d = BrokenDown.make(2015, 1, 32)
        >>> (d.year, d.month, d.day)
        (2015, 2, 1)

        >>> str(BrokenDown.make(2015, 6, 11, 21, 53, 12, 543294, 120))
        'Thu, 2015-06-11 21:53:12.543294+02:00'
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: int = 0
    tz_offset: int = 0
    weekday: int = 0

    @classmethod
    def make(
        cls,
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

        See :func:`almanac.core.codec.make`.
        """
        from almanac.core.codec import make

        return make(year, month, day, hour, minute, second, microsecond, tz_offset)

    @classmethod
    def now(cls, clock: Clock | None = None) -> BrokenDown:
        """Return the current wall-clock time in the host's timezone."""
        from almanac.convert.clock import now

        return now(clock)

    @classmethod
    def from_usec(cls, usec: int, tz_offset: int = 0) -> BrokenDown:
        """Decode microseconds since 0000-01-01 00:00 UTC at an offset."""
        from almanac.core.codec import decode_usec

        return decode_usec(usec, tz_offset)

    @classmethod
    def from_unix_seconds(cls, seconds: int) -> BrokenDown:
        """Decode seconds since the UNIX epoch into a UTC BrokenDown."""
        from almanac.core.codec import decode_unix_seconds

        return decode_unix_seconds(seconds)

    # Derived properties

    @property
    def era(self) -> Era:
        """Return the era (BCE for year 0 and earlier, else CE)."""
        return Era.from_year(self.year)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based day number within the year."""
        from almanac.derive.iso import day_of_year

        return day_of_year(self)

    @property
    def iso_week(self) -> int:
        """Return the ISO 8601 week number (1-53)."""
        from almanac.derive.iso import iso_week_number

        return iso_week_number(self)

    @property
    def iso_year(self) -> int:
        """Return the ISO 8601 week-numbering year."""
        from almanac.derive.iso import iso_week_numbering_year

        return iso_week_numbering_year(self)

    @property
    def century(self) -> int:
        """Return the 1-based century as a positive magnitude."""
        from almanac._internal.calendar import century

        return century(self.year)

    # Conversions

    def to_usec(self) -> int:
        """Return microseconds since 0000-01-01 00:00 UTC."""
        from almanac.core.codec import encode_usec

        return encode_usec(self)

    def to_unix_seconds(self) -> int:
        """Return whole seconds since 1970-01-01 00:00 UTC."""
        from almanac.core.codec import encode_unix_seconds

        return encode_unix_seconds(self)

    def to_timezone(self, tz_offset: int) -> BrokenDown:
        """Return the same instant expressed at another UTC offset."""
        from almanac.core.codec import to_timezone

        return to_timezone(self, tz_offset)

    def fix(self) -> BrokenDown:
        """Return the canonical in-range form of this value."""
        from almanac.core.codec import fix

        return fix(self)

    def easter(self) -> BrokenDown:
        """Return this value moved to Easter Sunday of its year."""
        from almanac.derive.easter import easter_in_year

        return easter_in_year(self)

    # Arithmetic

    def __add__(self, other: object) -> BrokenDown:
        from almanac.core.span import Span

        if not isinstance(other, Span):
            return NotImplemented
        from almanac.arithmetic.ops import add

        return add(self, other)

    def __sub__(self, other: object) -> Span:
        if not isinstance(other, BrokenDown):
            return NotImplemented
        from almanac.arithmetic.ops import difference

        return difference(other, self)

    # Formatting

    def format(self, template: str, limit: int | None = None) -> str:
        """Render this value with a format template.

        See :func:`almanac.format.interpreter.format_date`.
        """
        from almanac.format.interpreter import format_date

        return format_date(self, template, limit)

    def __str__(self) -> str:
        from almanac.format.interpreter import default_string

        return default_string(self)


__all__ = ["BrokenDown"]
