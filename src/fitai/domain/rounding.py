"""Rounding helpers shared by the calculators."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding toward +infinity."""
    return math.floor(value + 0.5)
