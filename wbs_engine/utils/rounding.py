"""Rounding helpers for displayed percentages."""

import math


def round_half_up(value: float) -> int:
    """Nearest integer, ties rounded up (12.5 -> 13), unlike built-in round."""
    return math.floor(value + 0.5)


def percentage(part: float, whole: float) -> int:
    """part / whole as a whole-number percentage; 0 when whole is 0."""
    if whole == 0:
        return 0
    return round_half_up(part / whole * 100)
