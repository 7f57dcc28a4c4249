"""Span: a signed duration decomposed into calendar-free units.

A Span splits a microsecond count into weeks, days, hours, minutes,
seconds and microseconds by truncated division, so every component
carries the sign of the total.
"""

from __future__ import annotations

from dataclasses import dataclass

from almanac._internal.constants import (
    DAYS_PER_WEEK,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
    USEC_PER_DAY,
    USEC_PER_HOUR,
    USEC_PER_MINUTE,
    USEC_PER_SECOND,
)
from almanac._internal.intmath import trunc_divmod


@dataclass(frozen=True, slots=True)
class Span:
    """A duration as (weeks, days, hours, minutes, seconds, microseconds).

    Spans returned by :meth:`from_microseconds` are canonical: components
    share the sign of the total and their magnitudes stay below the next
    unit (microseconds < 10**6, seconds < 60, minutes < 60, hours < 24,
    days < 7). Spans built by hand may use any values; they are applied
    field by field and the result is normalized.

    Examples:
        >>> Span.from_microseconds(-90 * 60 * 1_000_000)
        Span(weeks=0, days=0, hours=-1, minutes=-30, seconds=0, microseconds=0)

        >>> Span(weeks=1, days=1).total_microseconds
        691200000000
    """

    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    microseconds: int = 0

    @classmethod
    def from_microseconds(cls, usec: int) -> Span:
        """Decompose a signed microsecond count."""
        rest, microseconds = trunc_divmod(usec, USEC_PER_SECOND)
        rest, seconds = trunc_divmod(rest, SECONDS_PER_MINUTE)
        rest, minutes = trunc_divmod(rest, MINUTES_PER_HOUR)
        rest, hours = trunc_divmod(rest, 24)
        weeks, days = trunc_divmod(rest, DAYS_PER_WEEK)
        return cls(weeks, days, hours, minutes, seconds, microseconds)

    @property
    def total_microseconds(self) -> int:
        """Return the span as a single signed microsecond count."""
        return (
            (self.weeks * DAYS_PER_WEEK + self.days) * USEC_PER_DAY
            + self.hours * USEC_PER_HOUR
            + self.minutes * USEC_PER_MINUTE
            + self.seconds * USEC_PER_SECOND
            + self.microseconds
        )

    @property
    def is_zero(self) -> bool:
        """Return True if the span has no length."""
        return self.total_microseconds == 0

    def __neg__(self) -> Span:
        return Span(
            -self.weeks,
            -self.days,
            -self.hours,
            -self.minutes,
            -self.seconds,
            -self.microseconds,
        )


__all__ = ["Span"]
