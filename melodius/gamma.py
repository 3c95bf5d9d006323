"""Log-gamma and the regularized lower incomplete gamma function."""

from __future__ import annotations

import math
import sys

from .quadrature import integrate

_EPSILON = sys.float_info.epsilon
_LOG_SQRT_2PI = 0.91893853320467274178032973640562
_INCOMPLETE_GAMMA_MAX_ITER = 55
_CF2_DEPTH = 100

# Godfrey's coefficients for the Lanczos approximation with g = 607/128.
_LANCZOS = (
    0.99999999999999709182,
    57.156235665862923517,
    -59.597960355475491248,
    14.136097974741747174,
    -0.49191381609762019978,
    0.33994649984811888699e-4,
    0.46523628927048575665e-4,
    -0.98374475304879564677e-4,
    0.15808870322491248884e-3,
    -0.21026444172410488319e-3,
    0.21743961811521264320e-3,
    -0.16431810653676389022e-3,
    0.84418223983852743293e-4,
    -0.26190838401581408670e-4,
    0.36899182659531622704e-5,
)
_LANCZOS_SHIFT = 5.2421875


def _lanczos_sum(x: float) -> float:
    head, *tail = _LANCZOS
    return head + math.fsum(c / (x + k) for k, c in enumerate(tail, start=1))


def _lgamma_shifted(x: float) -> float:
    """Return ``ln Gamma(x + 1)``."""
    shifted = x + _LANCZOS_SHIFT
    return (x + 0.5) * math.log(shifted) - shifted + _LOG_SQRT_2PI + math.log(_lanczos_sum(x))


def lgamma(x: float) -> float:
    """Natural logarithm of the gamma function.

    Returns positive infinity for arguments at or below zero.
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if abs(x - 1.0) < _EPSILON:
        return 0.0
    if x < _EPSILON:
        return math.inf
    if math.isinf(x):
        return math.inf
    return _lgamma_shifted(x - 1.0)


def _cf1(a: float, z: float) -> float:
    value = a + _INCOMPLETE_GAMMA_MAX_ITER - 1
    for depth in range(_INCOMPLETE_GAMMA_MAX_ITER - 1, 0, -1):
        if depth % 2 == 1:
            coef = -(a - 1 + (depth + 1) / 2.0) * z
        else:
            coef = depth / 2.0 * z
        value = (a + depth - 1) + coef / value
    return math.exp(a * math.log(z) - z - lgamma(a)) / value


def _cf2(a: float, z: float) -> float:
    value = 1 + (_CF2_DEPTH - 1) * 2 - a + z
    for depth in range(_CF2_DEPTH - 1, 0, -1):
        value = (1 + (depth - 1) * 2 - a + z) + depth * (a - depth) / value
    return 1.0 - math.exp(a * math.log(z) - z - lgamma(a)) / value


_LOWER_SPREAD = ((1000, 11), (800, 11), (500, 10), (300, 10), (100, 9), (90, 9),
                 (70, 8), (50, 7), (40, 6), (30, 5))
_UPPER_SPREAD = ((1000, 10), (800, 10), (500, 9), (300, 9), (100, 8), (90, 8),
                 (70, 7), (50, 6))


def _spread(a: float, table, default: int) -> int:
    return next((k for limit, k in table if a > limit), default)


def _quad(a: float, z: float) -> float:
    root = math.sqrt(a)
    lower = max(0.0, min(z, a) - _spread(a, _LOWER_SPREAD, 4) * root)
    upper = min(z, a + _spread(a, _UPPER_SPREAD, 5) * root)
    lg = lgamma(a)

    def density(t: float) -> float:
        return math.exp(-t + (a - 1.0) * math.log(t) - lg)

    return integrate(density, lower, upper, 50)


def incomplete_gamma(a: float, x: float) -> float:
    """Regularized lower incomplete gamma function ``P(a, x)``.

    NaN inputs or a negative ``a`` give NaN.
    """
    a = float(a)
    z = float(x)
    if math.isnan(a) or math.isnan(z):
        return math.nan
    if a < 0.0:
        return math.nan
    if z < _EPSILON:
        return 0.0
    if a < _EPSILON:
        return 1.0
    if a < 10.0 and z - a < 10.0:
        return _cf1(a, z)
    if a < 10.0 or z / a > 3.0:
        return _cf2(a, z)
    return _quad(a, z)