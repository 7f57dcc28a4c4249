"""Host wall-clock source.

The library core never reads the clock itself. A Clock reports the host
time the way the operating system does: seconds since the UNIX epoch,
microseconds within the second, and the local offset in minutes west of
UTC. ``now`` turns such a reading into a BrokenDown.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from almanac.core.brokendown import BrokenDown

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """A source of wall-clock readings."""

    def read(self) -> tuple[int, int, int]:
        """Return ``(seconds, microseconds, minutes_west)``."""
        ...

    def local_minutes_west(self, seconds: int) -> int:
        """Return the local offset in minutes west of UTC at an instant."""
        ...


class SystemClock:
    """Clock backed by the ``time`` module.

    The primary offset comes from ``time.timezone``/``time.altzone``,
    which reflect the zone as of interpreter start. When that reports
    UTC, :func:`now` asks :meth:`local_minutes_west` to confirm it from
    the broken-down local time.
    """

    def read(self) -> tuple[int, int, int]:
        seconds, nanos = divmod(time.time_ns(), 1_000_000_000)
        zone = time.altzone if time.localtime(seconds).tm_isdst > 0 else time.timezone
        return seconds, nanos // 1_000, zone // 60

    def local_minutes_west(self, seconds: int) -> int:
        return -(time.localtime(seconds).tm_gmtoff // 60)


def now(clock: Clock | None = None) -> BrokenDown:
    """Return the current wall-clock time at the host's offset.

    Args:
        clock: Clock to read; defaults to the system clock.

    Returns:
        A BrokenDown at the host's UTC offset.
    """
    from almanac.core.codec import from_timeval

    if clock is None:
        clock = SystemClock()

    seconds, microseconds, minutes_west = clock.read()
    if minutes_west == 0:
        # A zero offset may be a stale zone rather than real UTC
        minutes_west = clock.local_minutes_west(seconds)
        if minutes_west != 0:
            logger.debug("clock offset refreshed from local time: %d minutes west", minutes_west)

    return from_timeval(seconds, microseconds, minutes_west)


__all__ = ["Clock", "SystemClock", "now"]
