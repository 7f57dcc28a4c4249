"""Tests for conversion between UTC offsets."""

from __future__ import annotations

from almanac.core.codec import encode_usec, make, to_timezone


class TestToTimezone:
    """Tests for to_timezone."""

    def test_pearl_harbor_in_japan(self) -> None:
        """07:48 in Hawaii (UTC-10:30) is 03:18 next day in Japan."""
        attack = make(1941, 12, 7, 7, 48, 0, 0, -630)
        japan = to_timezone(attack, 540)
        assert (japan.year, japan.month, japan.day, japan.hour, japan.minute) == (1941, 12, 8, 3, 18)
        assert japan.tz_offset == 540
        assert japan.weekday == 0

    def test_pearl_harbor_in_washington(self) -> None:
        """07:48 in Hawaii is 13:18 in Washington."""
        attack = make(1941, 12, 7, 7, 48, 0, 0, -630)
        washington = to_timezone(attack, -300)
        assert (washington.day, washington.hour, washington.minute) == (7, 13, 18)
        assert washington.weekday == 6

    def test_instant_preserved(self, sample_dates) -> None:
        """The instant never changes."""
        for d in sample_dates:
            for offset in (-720, -630, 0, 45, 540, 840):
                assert encode_usec(to_timezone(d, offset)) == encode_usec(d)

    def test_round_trip(self, sample_dates) -> None:
        """Converting back restores the original fields."""
        for d in sample_dates:
            assert to_timezone(to_timezone(d, 333), d.tz_offset) == d

    def test_method(self) -> None:
        """BrokenDown.to_timezone is the same operation."""
        d = make(2015, 6, 11, 21, 53, 12, 543294, 120)
        utc = d.to_timezone(0)
        assert (utc.hour, utc.tz_offset) == (19, 0)
        assert d.tz_offset == 120
