"""Small numeric helpers used for audio levels."""

from __future__ import annotations

import math

DEFAULT_EPSILON = 0.0005


def compare_values(f1: float, f2: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True when the two values differ by at most ``epsilon``.

    Floating point values should not be compared for equality directly;
    this also works for integers as a plain margin.
    """
    return abs(f1 - f2) <= epsilon


def db_to_lin(db: float) -> float:
    """Convert a level in decibels to a linear amplitude factor."""
    return math.pow(10.0, float(db) / 20.0)


def lin_to_db(lin: float) -> float:
    """Convert a linear amplitude factor to decibels.

    Zero gives negative infinity and negative values give NaN.
    """
    lin = float(lin)
    if math.isnan(lin) or lin < 0.0:
        return math.nan
    if lin == 0.0:
        return -math.inf
    if math.isinf(lin):
        return math.inf
    return 20.0 * (math.log(lin) / math.log(10.0))