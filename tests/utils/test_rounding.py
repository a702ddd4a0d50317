"""
tests/utils/test_rounding.py

Covers:
  - Half-up rounding of ties
  - Whole-number percentages and the zero denominator
"""

import pytest

from wbs_engine.utils.rounding import percentage, round_half_up


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, expected", [
        (12.5, 13),
        (2.5, 3),
        (0.5, 1),
        (12.49, 12),
        (12.51, 13),
        (0.0, 0),
        (100.0, 100),
    ])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round_on_even_ties(self):
        assert round(12.5) == 12
        assert round_half_up(12.5) == 13


class TestPercentage:

    @pytest.mark.parametrize("part, whole, expected", [
        (1, 8, 13),
        (1, 40, 3),
        (3, 8, 38),
        (1, 3, 33),
        (2, 3, 67),
        (5, 5, 100),
        (0, 5, 0),
    ])
    def test_values(self, part, whole, expected):
        assert percentage(part, whole) == expected

    def test_empty_whole(self):
        assert percentage(0, 0) == 0
