"""Elementary real functions and floating point classification helpers."""

from __future__ import annotations

import math
import sys

_EPSILON = sys.float_info.epsilon
_EXP_MAX_ITER = 25


def _sign(x: float) -> int:
    if x > 0:
        return 1
    if x < 0:
        return -1
    return 0


# --------------------------------------------------------------------------
# Infinity checks
# --------------------------------------------------------------------------


def is_neginf(x: float) -> bool:
    """True when ``x`` is negative infinity."""
    return x == -math.inf


def is_posinf(x: float) -> bool:
    """True when ``x`` is positive infinity."""
    return x == math.inf


def is_inf(x: float) -> bool:
    """True when ``x`` is positive or negative infinity."""
    return is_neginf(x) or is_posinf(x)


def any_neginf(*args: float) -> bool:
    """True when any argument is negative infinity."""
    return any(is_neginf(a) for a in args)


def all_neginf(*args: float) -> bool:
    """True when every argument is negative infinity."""
    return all(is_neginf(a) for a in args)


def any_posinf(*args: float) -> bool:
    """True when any argument is positive infinity."""
    return any(is_posinf(a) for a in args)


def all_posinf(*args: float) -> bool:
    """True when every argument is positive infinity."""
    return all(is_posinf(a) for a in args)


def any_inf(*args: float) -> bool:
    """True when any argument is infinite."""
    return any(is_inf(a) for a in args)


def all_inf(*args: float) -> bool:
    """True when every argument is infinite."""
    return all(is_inf(a) for a in args)


def neg_zero(x: float) -> bool:
    """True when ``x`` is a negatively signed zero."""
    return x == 0.0 and math.copysign(1.0, x) == -1.0


# --------------------------------------------------------------------------
# Splitting a number as n + r
# --------------------------------------------------------------------------


def find_whole(x: float) -> int:
    """Whole part ``n`` of ``x = n + r``, rounding to the nearer integer."""
    floor = math.floor(x)
    if abs(x - floor) >= 0.5:
        return int(floor + _sign(x))
    return int(floor)


def find_fraction(x: float) -> float:
    """Fractional part ``r`` of ``x = n + r`` matching :func:`find_whole`."""
    floor = math.floor(x)
    if abs(x - floor) >= 0.5:
        return x - floor - _sign(x)
    return x - floor


def mantissa(x: float) -> float:
    """Scale a positive ``x`` by powers of ten into the range [1, 10]."""
    if not math.isfinite(x) or x <= 0:
        raise ValueError(f"mantissa needs a positive finite value, got {x!r}")
    while x < 1.0 or x > 10.0:
        x = x * 10.0 if x < 1.0 else x / 10.0
    return x


# --------------------------------------------------------------------------
# Functions
# --------------------------------------------------------------------------


def gcd(a, b):
    """Greatest common divisor by Euclid's algorithm.

    Non-integral inputs are truncated to integers and the result is a float.
    """
    integral = isinstance(a, int) and isinstance(b, int)
    x, y = int(abs(a)), int(abs(b))
    while y:
        x, y = y, x % y
    return x if integral else float(x)


def cos(x: float) -> float:
    """Cosine through the half-angle tangent identity."""
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        return math.nan
    if abs(x) < _EPSILON:
        return 1.0
    if abs(x - math.pi / 2) < _EPSILON or abs(x + math.pi / 2) < _EPSILON:
        return 0.0
    if abs(x - math.pi) < _EPSILON or abs(x + math.pi) < _EPSILON:
        return -1.0
    t = math.tan(x / 2.0)
    return (1.0 - t * t) / (1.0 + t * t)


def _exp_cf(x: float) -> float:
    value = 1.0
    for depth in range(_EXP_MAX_ITER - 1, 0, -1):
        if depth == 1:
            value = 1.0 - x / value
        else:
            value = 1.0 + x / (depth - 1) - x / depth / value
    return 1.0 / value


def _exp_split(x: float) -> float:
    try:
        whole = math.e ** find_whole(x)
    except OverflowError:
        return math.inf
    return whole * _exp_cf(find_fraction(x))


def exp(x: float) -> float:
    """Exponential through a continued fraction expansion."""
    x = float(x)
    if math.isnan(x):
        return math.nan
    if is_neginf(x):
        return 0.0
    if abs(x) < _EPSILON:
        return 1.0
    if is_posinf(x):
        return math.inf
    if abs(x) < 2.0:
        return _exp_cf(x)
    return _exp_split(x)