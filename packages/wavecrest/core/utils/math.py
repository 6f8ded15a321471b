"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with halves rounding toward +inf.

    Python's round() uses banker's rounding (round(2.5) == 2); peak counts
    need 2.5 -> 3.
    """
    return int(math.floor(x + 0.5))


def frac(x: float) -> float:
    """Fractional part of x in [0, 1), also for negative x."""
    return x - math.floor(x)
