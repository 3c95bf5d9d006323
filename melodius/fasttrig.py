"""Fast approximate trigonometry at default accuracy.

Scalar functions take and return Python floats. The ``*_ps`` functions
work lane-wise on sequences or numpy arrays and return ``float32`` arrays.
Vector helpers take plain tuples: ``(x, y)`` and ``(x, y, z)`` for cartesian
coordinates, ``(length, angle)`` for polar ones and
``(length, azimuth, inclination)`` for spherical ones.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

INV_TWO_PI = 0.1591549
TWO_PI = 6.283185
THREE_HALF_PI = 4.7123889
PI = 3.141593
HALF_PI = 1.570796
QUARTER_PI = 0.7853982

_ATAN_A = 0.2447
_ATAN_B = 0.0663

_COS_C1 = 0.99940307
_COS_C2 = -0.49558072
_COS_C3 = 0.03679168

_F32 = np.float32


# --------------------------------------------------------------------------
# Scalar
# --------------------------------------------------------------------------


def _rsqrt_times(squared: float) -> float:
    """Square root computed as ``squared * rsqrt(squared)`` in single precision."""
    if squared == 0.0:
        return 0.0
    with np.errstate(invalid="ignore", divide="ignore"):
        value = _F32(squared)
        return float(value * (_F32(1.0) / np.sqrt(value)))


def sqrt(squared: float) -> float:
    """Approximate square root; zero maps to zero, negatives to NaN."""
    return _rsqrt_times(squared)


def _components(args: tuple, name: str) -> tuple:
    if len(args) == 1 and isinstance(args[0], (Sequence, np.ndarray)):
        args = tuple(args[0])
    if len(args) not in (2, 3):
        raise TypeError(f"{name}() takes 2 or 3 components, got {len(args)}")
    return args


def length(*args: float) -> float:
    """Length of a 2D or 3D vector given as components or as one sequence."""
    components = _components(args, "length")
    return sqrt(sum(c * c for c in components))


def _atan(x: float) -> float:
    ax = abs(x)
    return QUARTER_PI * x - x * (ax - 1.0) * (_ATAN_A + _ATAN_B * ax)


def _ratio(num: float, den: float) -> float:
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def atan2(y: float, x: float) -> float:
    """Approximate ``atan2(y, x)``; NaN when both are zero."""
    if abs(x) > abs(y):
        a = _atan(_ratio(y, x))
        if x > 0.0:
            return a
        return a + PI if y > 0.0 else a - PI
    a = _atan(_ratio(x, y))
    if x > 0.0:
        return HALF_PI - a if y > 0.0 else -HALF_PI - a
    return HALF_PI + a if y > 0.0 else -HALF_PI + a


def _cos_32s(x: float) -> float:
    x2 = x * x
    return _COS_C1 + x2 * (_COS_C2 + _COS_C3 * x2)


def _reduce(angle: float) -> float:
    return angle - math.floor(angle * INV_TWO_PI) * TWO_PI


def _cos_reduced(angle: float) -> float:
    if angle < HALF_PI:
        return _cos_32s(angle)
    if angle < PI:
        return -_cos_32s(PI - angle)
    if angle < THREE_HALF_PI:
        return -_cos_32s(angle - PI)
    return _cos_32s(TWO_PI - angle)


def cos(angle: float) -> float:
    """Approximate cosine."""
    angle = abs(_reduce(angle))
    return _cos_reduced(angle)


def sin(angle: float) -> float:
    """Approximate sine."""
    return cos(HALF_PI - angle)


def sincos(angle: float) -> tuple[float, float]:
    """Return ``(sin, cos)`` of the angle together."""
    angle = _reduce(angle)
    multiplier = 1.0 if 0.0 < angle < PI else -1.0
    angle = abs(angle)
    c = _cos_reduced(angle)
    s = multiplier * sqrt(1.0 - c * c)
    return s, c


# --------------------------------------------------------------------------
# Packed
# --------------------------------------------------------------------------


def _packed(values) -> np.ndarray:
    return np.asarray(values, dtype=np.float32)


def sqrt_ps(squared) -> np.ndarray:
    """Lane-wise approximate square root."""
    squared = _packed(squared)
    with np.errstate(invalid="ignore", divide="ignore"):
        result = squared * (_F32(1.0) / np.sqrt(squared))
    return np.where(squared == 0, _F32(0.0), result).astype(np.float32)


def length_ps(*args) -> np.ndarray:
    """Lane-wise length of 2D or 3D vectors given as component arrays."""
    if len(args) not in (2, 3):
        raise TypeError(f"length_ps() takes 2 or 3 component arrays, got {len(args)}")
    arrays = [_packed(a) for a in args]
    total = arrays[0] * arrays[0]
    for a in arrays[1:]:
        total = total + a * a
    return sqrt_ps(total)


def _atan_ps(x: np.ndarray) -> np.ndarray:
    ax = np.abs(x)
    return _F32(QUARTER_PI) * x - x * (ax - _F32(1.0)) * (_F32(_ATAN_A) + _F32(_ATAN_B) * ax)


def atan2_ps(y, x) -> np.ndarray:
    """Lane-wise approximate ``atan2(y, x)``."""
    y = _packed(y)
    x = _packed(x)
    x_dominant = np.abs(x) > np.abs(y)
    with np.errstate(invalid="ignore", divide="ignore"):
        ratio = np.where(x_dominant, y, x) / np.where(x_dominant, x, y)
        a = _atan_ps(ratio.astype(np.float32))
    x_positive = x > 0
    y_positive = y > 0
    a = np.where(~x_dominant & x_positive, -a, a)
    shift = np.where(x_dominant, _F32(PI), _F32(PI) - _F32(HALF_PI))
    shift = np.where(y_positive, shift, -shift)
    shift = np.where(x_dominant & x_positive, _F32(0.0), shift)
    return (a + shift).astype(np.float32)


def _cos_32s_ps(x: np.ndarray) -> np.ndarray:
    x2 = x * x
    return _F32(_COS_C1) + x2 * (_F32(_COS_C2) + _F32(_COS_C3) * x2)


def _reduce_ps(angle: np.ndarray) -> np.ndarray:
    angle = np.abs(angle)
    return angle - np.trunc(angle * _F32(INV_TWO_PI)) * _F32(TWO_PI)


def _cos_reduced_ps(angle: np.ndarray) -> np.ndarray:
    folded = np.where(angle >= _F32(HALF_PI), _F32(PI) - angle, angle)
    folded = np.where(angle >= _F32(PI), -folded, folded)
    folded = np.where(angle >= _F32(THREE_HALF_PI), _F32(TWO_PI) - angle, folded)
    result = _cos_32s_ps(folded)
    negate = (angle >= _F32(HALF_PI)) & (angle < _F32(THREE_HALF_PI))
    return np.where(negate, -result, result).astype(np.float32)


def cos_ps(angle) -> np.ndarray:
    """Lane-wise approximate cosine."""
    return _cos_reduced_ps(_reduce_ps(_packed(angle)))


def sin_ps(angle) -> np.ndarray:
    """Lane-wise approximate sine."""
    return cos_ps(_F32(HALF_PI) - _packed(angle))


def sincos_ps(angle) -> tuple[np.ndarray, np.ndarray]:
    """Return lane-wise ``(sin, cos)`` arrays."""
    angle = _packed(angle)
    sign = np.copysign(_F32(1.0), angle).astype(np.float32)
    reduced = _reduce_ps(angle)
    c = _cos_reduced_ps(reduced)
    multiplier = sign * np.where(reduced > _F32(PI), _F32(-1.0), _F32(1.0))
    s = multiplier * sqrt_ps(_F32(1.0) - c * c)
    return s.astype(np.float32), c


def _same_shape(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape or a.ndim != 1:
        raise ValueError("packed arrays must be one-dimensional and of equal length")


def interleave_ps(xs, ys) -> tuple[np.ndarray, np.ndarray]:
    """Interleave x and y lanes into ``(x0 y0 x1 y1 ..., ...)`` halves."""
    xs = _packed(xs)
    ys = _packed(ys)
    _same_shape(xs, ys)
    pairs = np.column_stack((xs, ys)).ravel()
    half = xs.size
    return pairs[:half].copy(), pairs[half:].copy()


def deinterleave_ps(low, high) -> tuple[np.ndarray, np.ndarray]:
    """Split interleaved ``x y`` pairs back into x lanes and y lanes."""
    low = _packed(low)
    high = _packed(high)
    _same_shape(low, high)
    pairs = np.concatenate((low, high))
    return pairs[0::2].copy(), pairs[1::2].copy()


# --------------------------------------------------------------------------
# Vectors
# --------------------------------------------------------------------------


def _unpack(vector, size: int, kind: str) -> tuple:
    values = tuple(vector)
    if len(values) != size:
        raise ValueError(f"{kind} vector needs {size} components, got {len(values)}")
    return values


def angle(vector) -> float:
    """Angle of a cartesian ``(x, y)`` vector."""
    x, y = _unpack(vector, 2, "2D")
    return atan2(y, x)


def azimuth(vector) -> float:
    """Azimuth of a cartesian ``(x, y, z)`` vector."""
    x, y, _ = _unpack(vector, 3, "3D")
    return atan2(y, x)


def inclination(vector) -> float:
    """Inclination of a cartesian ``(x, y, z)`` vector."""
    x, y, z = _unpack(vector, 3, "3D")
    return atan2(z, length(x, y))


def cartesian_to_polar(vector) -> tuple[float, float]:
    """Convert ``(x, y)`` to ``(length, angle)``."""
    x, y = _unpack(vector, 2, "2D")
    return length(x, y), atan2(y, x)


def polar_to_cartesian(vector) -> tuple[float, float]:
    """Convert ``(length, angle)`` to ``(x, y)``."""
    radius, theta = _unpack(vector, 2, "2D")
    s, c = sincos(theta)
    return radius * c, radius * s


def cartesian_to_spherical(vector) -> tuple[float, float, float]:
    """Convert ``(x, y, z)`` to ``(length, azimuth, inclination)``."""
    values = _unpack(vector, 3, "3D")
    return length(*values), azimuth(values), inclination(values)


def spherical_to_cartesian(vector) -> tuple[float, float, float]:
    """Convert ``(length, azimuth, inclination)`` to ``(x, y, z)``."""
    radius, az, inc = _unpack(vector, 3, "3D")
    az_sin, az_cos = sincos(az)
    inc_sin, inc_cos = sincos(inc)
    return (
        radius * az_cos * inc_cos,
        radius * az_sin * inc_cos,
        radius * inc_sin,
    )