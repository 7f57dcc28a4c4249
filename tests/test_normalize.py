"""Tests for make, fix and normalize."""

from __future__ import annotations

import pytest

from almanac import BrokenDown
from almanac.core.codec import fix, make, normalize
from almanac.errors import ValidationError


def fields(d: BrokenDown) -> tuple[int, ...]:
    return (d.year, d.month, d.day, d.hour, d.minute, d.second, d.microsecond, d.tz_offset)


class TestMake:
    """Tests for building canonical values from raw fields."""

    def test_in_range_fields_kept(self) -> None:
        """Valid fields come back unchanged, with the weekday filled in."""
        d = make(2015, 6, 11, 21, 53, 12, 543294, 120)
        assert fields(d) == (2015, 6, 11, 21, 53, 12, 543294, 120)
        assert d.weekday == 3

    def test_day_overflow(self) -> None:
        """January 32 is February 1."""
        d = make(2015, 1, 32)
        assert (d.year, d.month, d.day) == (2015, 2, 1)

    def test_day_zero(self) -> None:
        """Day 0 is the last day of the previous month."""
        assert (make(2015, 3, 0).month, make(2015, 3, 0).day) == (2, 28)
        assert (make(2016, 3, 0).month, make(2016, 3, 0).day) == (2, 29)

    def test_february_30(self) -> None:
        """Days past the end of February spill into March."""
        d = make(2016, 2, 30)
        assert (d.month, d.day) == (3, 1)

    def test_month_13(self) -> None:
        """Month 13 is January of the next year."""
        d = make(2015, 13, 1)
        assert (d.year, d.month, d.day) == (2016, 1, 1)

    def test_month_zero_and_negative(self) -> None:
        """Months below 1 borrow from the year."""
        assert (make(2015, 0, 1).year, make(2015, 0, 1).month) == (2014, 12)
        assert (make(2015, -12, 1).year, make(2015, -12, 1).month) == (2013, 12)

    def test_hour_24_is_midnight_same_day(self) -> None:
        """Hour 24 is read as 00 of the same day."""
        d = make(2015, 1, 1, 24)
        assert fields(d)[:4] == (2015, 1, 1, 0)

    def test_hour_25(self) -> None:
        """Hour 25 is 01 of the next day."""
        d = make(2015, 1, 1, 25)
        assert fields(d)[:4] == (2015, 1, 2, 1)

    def test_negative_minutes(self) -> None:
        """Negative minutes borrow from the hour."""
        d = make(2015, 1, 1, 0, -1)
        assert fields(d)[:5] == (2014, 12, 31, 23, 59)

    def test_microsecond_overflow(self) -> None:
        """Microseconds carry into seconds and borrow from them."""
        assert make(2015, 1, 1, 0, 0, 0, 1_000_000).second == 1
        d = make(2015, 1, 1, 0, 0, 0, -1)
        assert fields(d)[:7] == (2014, 12, 31, 23, 59, 59, 999999)

    def test_offset_kept(self) -> None:
        """Normalization happens at the value's own offset."""
        d = make(2015, 1, 1, 25, 0, 0, 0, -300)
        assert (d.day, d.hour, d.tz_offset) == (2, 1, -300)

    def test_weekday_derived(self) -> None:
        """The weekday always reflects the normalized date."""
        assert make(2015, 1, 1).weekday == 3
        assert make(2016, 1, 1).weekday == 4
        assert make(0, 1, 1).weekday == 5
        assert make(2015, 1, 32).weekday == 6

    def test_rejects_float(self) -> None:
        """Non-integer fields are rejected."""
        with pytest.raises(ValidationError):
            make(2015.0, 1, 1)

    def test_rejects_bool(self) -> None:
        """Booleans are not accepted as integers."""
        with pytest.raises(ValidationError):
            make(2015, True, 1)

    def test_classmethod(self) -> None:
        """BrokenDown.make is the same operation."""
        assert BrokenDown.make(2015, 1, 32) == make(2015, 1, 32)


class TestIdempotence:
    """Normalizing a normalized value changes nothing."""

    def test_samples(self, sample_dates) -> None:
        """make over a canonical value's fields is the identity."""
        for d in sample_dates:
            assert make(*fields(d)) == d
            assert normalize(d) == d
            assert fix(d) == d

    @pytest.mark.parametrize(
        "raw",
        [
            (2015, 14, 45, 30, 75, 80, 2_500_000, 0),
            (-43, 0, 0, -1, -1, -1, -1, 120),
            (1999, 12, 31, 23, 59, 59, 1_000_000, -720),
            (0, 1, -400, 0, 0, 0, 0, 0),
        ],
    )
    def test_twice_equals_once(self, raw: tuple[int, ...]) -> None:
        """Repeating make on its own output is stable."""
        once = make(*raw)
        assert make(*fields(once)) == once


class TestFixAndNormalize:
    """Differences between fix and normalize."""

    def test_fix_reads_hour_24_as_midnight(self) -> None:
        """fix maps hour 24 to 00 of the same day."""
        d = fix(BrokenDown(2015, 1, 1, 24))
        assert fields(d)[:4] == (2015, 1, 1, 0)

    def test_normalize_rolls_hour_24_over(self) -> None:
        """normalize treats hour 24 as a full day."""
        d = normalize(BrokenDown(2015, 1, 1, 24))
        assert fields(d)[:4] == (2015, 1, 2, 0)

    def test_stale_weekday_replaced(self) -> None:
        """A hand-written weekday is recomputed."""
        assert fix(BrokenDown(2015, 6, 11, weekday=0)).weekday == 3
        assert BrokenDown(2015, 6, 11).fix().weekday == 3

    def test_fix_validates(self) -> None:
        """fix rejects non-integer fields."""
        with pytest.raises(ValidationError):
            fix(BrokenDown(2015, 6, 11, "12"))
