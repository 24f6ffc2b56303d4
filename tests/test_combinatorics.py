"""Unit tests for integer combinatorics primitives."""

import math

import pytest

from utils.combinatorics import mult_range, mult_range_down_by, n_choose_k


class TestMultRange:
    """Tests for mult_range function."""

    def test_small_range(self) -> None:
        assert mult_range(3, 5) == 60

    def test_single_value(self) -> None:
        assert mult_range(7, 7) == 7

    def test_factorial(self) -> None:
        assert mult_range(1, 10) == math.factorial(10)

    def test_empty_range_is_one(self) -> None:
        """begin == end + 1 is the empty product."""
        assert mult_range(5, 4) == 1


class TestMultRangeDownBy:
    """Tests for mult_range_down_by function."""

    def test_two_factors(self) -> None:
        """60 × 59: ordered ways to draw the first two cards of a 60-card deck."""
        assert mult_range_down_by(60, 2) == 3540

    def test_full_range_is_factorial(self) -> None:
        assert mult_range_down_by(5, 5) == 120

    def test_zero_factors_is_one(self) -> None:
        assert mult_range_down_by(5, 0) == 1

    def test_zero_factors_from_zero_is_one(self) -> None:
        """Choosing nothing from nothing still has exactly one way."""
        assert mult_range_down_by(0, 0) == 1

    def test_more_factors_than_start_is_zero(self) -> None:
        """Drawing 5 cards from a pile of 3 is impossible."""
        assert mult_range_down_by(3, 5) == 0

    def test_matches_factorial_ratio(self) -> None:
        for begin, down in [(60, 7), (40, 4), (20, 3), (250, 17)]:
            expected = math.factorial(begin) // math.factorial(begin - down)
            assert mult_range_down_by(begin, down) == expected

    def test_negative_begin_raises(self) -> None:
        with pytest.raises(ValueError, match="Range start must be non-negative"):
            mult_range_down_by(-1, 0)

    def test_negative_down_raises(self) -> None:
        with pytest.raises(ValueError, match="Factor count must be non-negative"):
            mult_range_down_by(5, -1)


class TestNChooseK:
    """Tests for n_choose_k function."""

    def test_opening_hands_in_constructed_deck(self) -> None:
        """Distinct 7-card hands from a 60-card deck."""
        assert n_choose_k(60, 7) == 386206920

    def test_poker_hands(self) -> None:
        assert n_choose_k(52, 5) == 2598960

    def test_choose_zero(self) -> None:
        assert n_choose_k(5, 0) == 1
        assert n_choose_k(0, 0) == 1

    def test_choose_all(self) -> None:
        assert n_choose_k(17, 17) == 1

    def test_matches_math_comb(self) -> None:
        for n in range(0, 30):
            for k in range(0, n + 1):
                assert n_choose_k(n, k) == math.comb(n, k)

    def test_large_values_stay_exact(self) -> None:
        """Results far beyond 64 and 128 bits are exact."""
        assert n_choose_k(250, 125) == math.comb(250, 125)

    def test_k_exceeds_n_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot exceed item count"):
            n_choose_k(4, 5)

    def test_negative_k_raises(self) -> None:
        with pytest.raises(ValueError, match="Subset size must be non-negative"):
            n_choose_k(4, -1)
