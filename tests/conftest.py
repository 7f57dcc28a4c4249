"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from almanac.core.codec import make  # noqa: E402


class FixedClock:
    """Clock returning a preset reading, for tests of ``now``."""

    def __init__(self, seconds: int, microseconds: int = 0, minutes_west: int = 0,
                 local_minutes_west: int = 0) -> None:
        self.reading = (seconds, microseconds, minutes_west)
        self.local = local_minutes_west
        self.local_queries: list[int] = []

    def read(self) -> tuple[int, int, int]:
        return self.reading

    def local_minutes_west(self, seconds: int) -> int:
        self.local_queries.append(seconds)
        return self.local


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock at 2015-06-11 19:53:12.543294 UTC, reporting UTC+02:00."""
    return FixedClock(1434052392, 543294, -120)


@pytest.fixture
def sample_dates():
    """A spread of normalized dates across eras, offsets and leap days."""
    fields = [
        (2015, 6, 11, 21, 53, 12, 543294, 120),
        (1970, 1, 1, 0, 0, 0, 0, 0),
        (0, 1, 1, 0, 0, 0, 0, 0),
        (0, 12, 31, 23, 59, 59, 999999, 0),
        (-1, 12, 31, 12, 0, 0, 0, -60),
        (-43, 3, 15, 21, 0, 0, 0, 120),
        (-400, 2, 29, 6, 30, 0, 0, 0),
        (-4713, 11, 24, 12, 0, 0, 0, 0),
        (1, 1, 1, 0, 0, 0, 0, 0),
        (1600, 2, 29, 1, 2, 3, 4, 330),
        (1900, 2, 28, 23, 0, 0, 0, -300),
        (1941, 12, 7, 7, 48, 0, 0, -630),
        (2000, 2, 29, 12, 0, 0, 0, 0),
        (2000, 12, 31, 23, 59, 59, 999999, 840),
        (2016, 12, 31, 0, 0, 0, 0, -720),
        (9999, 12, 31, 23, 59, 59, 999999, 0),
        (100000, 7, 4, 4, 4, 4, 4, 45),
    ]
    return [make(*f) for f in fields]


@pytest.fixture
def make_clock():
    """Factory for FixedClock instances."""
    return FixedClock
