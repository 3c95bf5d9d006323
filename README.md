# melodius

Small numeric helpers: fast trigonometric approximations, decibel
conversions, a timing context manager and a handful of elementary and
special functions.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Fast trigonometry

Two modules offer the same functions with a different trade-off:

- `melodius.fasttrig`: low-order polynomial approximations and a square
  root computed through a single-precision reciprocal square root.
- `melodius.accutrig`: higher-order polynomials and an exact
  single-precision square root, for noticeably smaller errors.

Both provide scalar functions that take and return Python floats:
`sqrt`, `length` (2 or 3 components, or one sequence of them), `atan2`,
`cos`, `sin` and `sincos` (which returns `(sin, cos)`). `atan2(0.0, 0.0)`
gives NaN.

They also provide packed functions that work lane-wise on sequences or
numpy arrays of any length and return `float32` arrays: `sqrt_ps`,
`length_ps`, `atan2_ps`, `cos_ps`, `sin_ps` and `sincos_ps`.
`interleave_ps(xs, ys)` splits the pairs `x0 y0 x1 y1 ...` into two
halves, and `deinterleave_ps(low, high)` undoes it; both need
one-dimensional arrays of equal length and raise `ValueError` otherwise.

Vector helpers take plain tuples: `angle`, `azimuth`, `inclination`,
`cartesian_to_polar`, `polar_to_cartesian`, `cartesian_to_spherical` and
`spherical_to_cartesian`. Polar vectors are `(length, angle)` and
spherical ones `(length, azimuth, inclination)`. A tuple of the wrong
size raises `ValueError`.

```python
from melodius import fasttrig, accutrig

fasttrig.cos(1.0)                 # ~0.5403
s, c = accutrig.sincos(0.5)
accutrig.atan2(1.0, 1.0)          # ~0.7854
fasttrig.length(3.0, 4.0)         # ~5.0
fasttrig.cos_ps([0.0, 0.5, 1.0, 1.5])
accutrig.polar_to_cartesian((2.0, 0.0))
```

## Audio levels

```python
from melodius.audio_math import db_to_lin, lin_to_db, compare_values

db_to_lin(20.0)                   # 10.0
lin_to_db(10.0)                   # 20.0
lin_to_db(0.0)                    # -inf
compare_values(1.0, 1.0004, 0.0005)   # True
```

`compare_values` uses an epsilon of `0.0005` when none is given.

## Timing

```python
from melodius.benchmark import Benchmark

with Benchmark("loading") as bench:
    ...
# prints "loading Took: <n>ms"
bench.elapsed_ms                  # whole milliseconds
```

## Elementary and special functions

`melodius.elementary` has `cos`, `exp`, `gcd`, `mantissa`, `neg_zero`,
`find_whole`, `find_fraction` and infinity checks (`is_inf`,
`is_posinf`, `is_neginf` and `any_`/`all_` variants taking any number of
arguments). `gcd` returns an `int` for integer inputs and a float
otherwise. `mantissa` raises `ValueError` for values that are not
positive and finite.

`melodius.gamma` has `lgamma(x)` and the regularised lower incomplete
gamma function `incomplete_gamma(a, x)`, which gives NaN for NaN inputs
or a negative `a`.

`melodius.quadrature.integrate(func, lower, upper, points=50)` integrates
with a 30- or 50-point Gauss-Legendre rule; any other `points` raises
`ValueError`.

```python
from melodius.gamma import lgamma, incomplete_gamma
from melodius.quadrature import integrate

lgamma(5.0)                       # ~log(24)
incomplete_gamma(1.0, 1.0)        # ~0.6321
integrate(lambda t: t * t, 0.0, 1.0, 30)   # ~1/3
```

## What this package does not do

It is a library of numeric functions only. It has no command-line tool
and does not record, play or analyse audio, nor write or display musical
scores.