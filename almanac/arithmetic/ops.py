"""Arithmetic between BrokenDown values and Spans.

Differences are taken on the absolute instant scale, so two values that
name the same instant at different offsets are zero apart. Adding a span
works on the wall-clock fields at the value's own offset and then
normalizes.

Examples:
    >>> from almanac.core.codec import make
    >>> a = make(2015, 1, 1)
    >>> b = make(2015, 1, 9, 1, 30)
    >>> difference(a, b)
    Span(weeks=1, days=1, hours=1, minutes=30, seconds=0, microseconds=0)
    >>> add(a, difference(a, b)) == b
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from almanac._internal.constants import DAYS_PER_WEEK
from almanac.core.codec import encode_usec, normalize
from almanac.core.span import Span

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown


def usec_difference(sooner: BrokenDown, later: BrokenDown) -> int:
    """Return ``later - sooner`` in microseconds (negative if reversed)."""
    return encode_usec(later) - encode_usec(sooner)


def difference(sooner: BrokenDown, later: BrokenDown) -> Span:
    """Return ``later - sooner`` as a Span with sign-aligned components."""
    return Span.from_microseconds(usec_difference(sooner, later))


def add(date: BrokenDown, span: Span) -> BrokenDown:
    """Return ``date`` moved by ``span``, normalized at the date's offset.

    Weeks and days are added to the day field and the clock components
    to their counterparts before normalization, so an hour count that
    reaches 24 rolls over into the next day.
    """
    from almanac.core.brokendown import BrokenDown

    return normalize(
        BrokenDown(
            date.year,
            date.month,
            date.day + span.weeks * DAYS_PER_WEEK + span.days,
            date.hour + span.hours,
            date.minute + span.minutes,
            date.second + span.seconds,
            date.microsecond + span.microseconds,
            date.tz_offset,
        )
    )


def subtract(date: BrokenDown, span: Span) -> BrokenDown:
    """Return ``date`` moved back by ``span``."""
    return add(date, -span)


__all__ = [
    "usec_difference",
    "difference",
    "add",
    "subtract",
]
