"""Tests for the floor and truncating division helpers."""

from __future__ import annotations

import pytest

from almanac._internal.intmath import floor_div, floor_mod, trunc_divmod, trunc_mod

DIVIDENDS = [-(2**63), -10**12 - 7, -146097, -400, -101, -8, -7, -1, 0, 1, 6, 7, 8, 99, 10**12 + 3, 2**63 - 1]
DIVISORS = [1, 4, 7, 60, 100, 400, 1461, 36524, 146097, 86_400_000_000]


class TestFloorDivision:
    """Tests for floor_div and floor_mod."""

    @pytest.mark.parametrize("b", DIVISORS)
    @pytest.mark.parametrize("a", DIVIDENDS)
    def test_identity_and_range(self, a: int, b: int) -> None:
        """floor_div * b + floor_mod reconstructs a, with 0 <= mod < b."""
        assert floor_div(a, b) * b + floor_mod(a, b) == a
        assert 0 <= floor_mod(a, b) < b

    def test_rounds_toward_negative_infinity(self) -> None:
        """Negative quotients round down, not toward zero."""
        assert floor_div(-7, 2) == -4
        assert floor_mod(-7, 2) == 1
        assert floor_div(-8, 2) == -4
        assert floor_mod(-8, 2) == 0

    def test_positive_values_match_plain_division(self) -> None:
        """For non-negative dividends floor and truncation agree."""
        assert floor_div(7, 2) == 3
        assert floor_mod(7, 2) == 1


class TestTruncatedDivision:
    """Tests for trunc_divmod and trunc_mod."""

    @pytest.mark.parametrize("b", DIVISORS)
    @pytest.mark.parametrize("a", DIVIDENDS)
    def test_identity_and_sign(self, a: int, b: int) -> None:
        """Quotient * b + remainder == a and the remainder follows a's sign."""
        q, r = trunc_divmod(a, b)
        assert q * b + r == a
        assert abs(r) < b
        assert r == 0 or (r > 0) == (a > 0)

    def test_rounds_toward_zero(self) -> None:
        """Negative quotients round toward zero."""
        assert trunc_divmod(-7, 2) == (-3, -1)
        assert trunc_divmod(-90, 60) == (-1, -30)
        assert trunc_divmod(90, 60) == (1, 30)

    def test_trunc_mod(self) -> None:
        """trunc_mod keeps the dividend's sign."""
        assert trunc_mod(-43, 100) == -43
        assert trunc_mod(-2015, 100) == -15
        assert trunc_mod(2015, 100) == 15
