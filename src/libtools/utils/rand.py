"""
Random number helpers.

Both generators draw from the half-open interval ``[lo, hi)``; when
``lo == hi`` they always return ``lo``.
"""

import math
import random


def random_float(lo: float, hi: float) -> float:
    """Random float in ``[lo, hi)``."""
    return random.random() * (hi - lo) + lo


def random_int(lo: int, hi: int) -> int:
    """Random int in ``[lo, hi)``."""
    return math.floor(random.random() * (hi - lo)) + lo


def variance_coefficient(variance: float) -> float:
    """
    Return a random multiplier centred on 1.

    Args:
        variance: Total spread, e.g. 0.2 for 20%

    Returns:
        A value in ``[1 - variance / 2, 1 + variance / 2)``, so 0.2
        gives something between 0.9 and 1.1
    """
    return random_float(1 - variance / 2, 1 + variance / 2)
