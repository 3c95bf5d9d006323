import math

import numpy as np
import pytest

from melodius import accutrig

TOL = 1e-4
ANGLES = [0.3, 1.0, 2.0, 3.0, 4.0, 5.5, -0.7, -2.5, 7.5]


@pytest.mark.parametrize("value", [0.25, 2.0, 9.0, 123.456])
def test_sqrt_matches_math(value):
    assert accutrig.sqrt(value) == pytest.approx(math.sqrt(value), rel=1e-6)


def test_sqrt_of_negative_is_nan():
    result = accutrig.sqrt(-1.0)
    assert result == pytest.approx(math.nan, nan_ok=True)


def test_sqrt_of_zero_is_zero():
    assert accutrig.sqrt(0.0) == 0.0


def test_length_components_and_sequence_agree():
    assert accutrig.length(3.0, 4.0) == pytest.approx(5.0, rel=1e-6)
    assert accutrig.length([3.0, 4.0]) == accutrig.length(3.0, 4.0)
    assert accutrig.length(1.0, 2.0, 2.0) == pytest.approx(3.0, rel=1e-6)


def test_length_rejects_wrong_component_count():
    with pytest.raises(TypeError):
        accutrig.length(1.0)
    with pytest.raises(TypeError):
        accutrig.length(1.0, 2.0, 3.0, 4.0)


@pytest.mark.parametrize(
    "y, x",
    [(1.0, 2.0), (2.0, 1.0), (1.0, -2.0), (2.0, -1.0), (-1.0, -2.0), (-2.0, -1.0), (-1.0, 2.0), (-2.0, 1.0)],
)
def test_atan2_all_quadrants(y, x):
    assert accutrig.atan2(y, x) == pytest.approx(math.atan2(y, x), abs=TOL)


def test_atan2_origin_is_nan():
    result = accutrig.atan2(0.0, 0.0)
    assert result == pytest.approx(math.nan, nan_ok=True)


def test_cos_at_zero_is_leading_coefficient():
    assert accutrig.cos(0.0) == pytest.approx(0.9999932946)


@pytest.mark.parametrize("value", ANGLES)
def test_cos_and_sin_match_math(value):
    assert accutrig.cos(value) == pytest.approx(math.cos(value), abs=TOL)
    assert accutrig.sin(value) == pytest.approx(math.sin(value), abs=TOL)


@pytest.mark.parametrize("value", ANGLES)
def test_sincos_matches_math(value):
    s, c = accutrig.sincos(value)
    assert s == pytest.approx(math.sin(value), abs=TOL)
    assert c == pytest.approx(math.cos(value), abs=TOL)


@pytest.mark.parametrize("value", ANGLES)
def test_sincos_unit_circle(value):
    s, c = accutrig.sincos(value)
    assert s * s + c * c == pytest.approx(1.0, abs=1e-5)


def test_sqrt_ps_lanes():
    result = accutrig.sqrt_ps([0.0, 1.0, 4.0, 16.0])
    assert result.dtype == np.float32
    np.testing.assert_allclose(result, [0.0, 1.0, 2.0, 4.0], rtol=1e-6)


def test_length_ps_matches_scalar():
    xs = [3.0, 1.0, 0.0, 6.0]
    ys = [4.0, 2.0, 5.0, 8.0]
    zs = [0.0, 2.0, 0.0, 0.0]
    np.testing.assert_allclose(accutrig.length_ps(xs, ys), np.hypot(xs, ys), rtol=1e-6)
    expected = [accutrig.length(x, y, z) for x, y, z in zip(xs, ys, zs)]
    np.testing.assert_allclose(accutrig.length_ps(xs, ys, zs), expected, rtol=1e-6)


def test_length_ps_rejects_wrong_count():
    with pytest.raises(TypeError):
        accutrig.length_ps([1.0])


def test_atan2_ps_matches_math():
    ys = np.array([1.0, 2.0, -1.0, -2.0, 1.0, -2.0, 2.0, -1.0])
    xs = np.array([2.0, 1.0, -2.0, -1.0, -2.0, 1.0, -1.0, 2.0])
    np.testing.assert_allclose(accutrig.atan2_ps(ys, xs), np.arctan2(ys, xs), atol=TOL)


def test_atan2_ps_agrees_with_scalar():
    ys = [0.5, -3.0, 2.0, -0.25]
    xs = [1.5, 1.0, -4.0, -0.5]
    expected = [accutrig.atan2(y, x) for y, x in zip(ys, xs)]
    np.testing.assert_allclose(accutrig.atan2_ps(ys, xs), expected, atol=1e-5)


def test_cos_ps_and_sin_ps_match_numpy():
    angles = np.array(ANGLES, dtype=np.float32)
    np.testing.assert_allclose(accutrig.cos_ps(angles), np.cos(angles), atol=TOL)
    np.testing.assert_allclose(accutrig.sin_ps(angles), np.sin(angles), atol=TOL)


def test_sincos_ps_matches_numpy():
    angles = np.array(ANGLES, dtype=np.float32)
    s, c = accutrig.sincos_ps(angles)
    np.testing.assert_allclose(s, np.sin(angles), atol=TOL)
    np.testing.assert_allclose(c, np.cos(angles), atol=TOL)


def test_interleave_round_trip():
    xs = [1.0, 2.0, 3.0, 4.0]
    ys = [5.0, 6.0, 7.0, 8.0]
    low, high = accutrig.interleave_ps(xs, ys)
    np.testing.assert_array_equal(low, [1.0, 5.0, 2.0, 6.0])
    np.testing.assert_array_equal(high, [3.0, 7.0, 4.0, 8.0])
    back_x, back_y = accutrig.deinterleave_ps(low, high)
    np.testing.assert_array_equal(back_x, xs)
    np.testing.assert_array_equal(back_y, ys)


def test_interleave_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        accutrig.interleave_ps([1.0, 2.0], [1.0])
    with pytest.raises(ValueError):
        accutrig.deinterleave_ps([1.0, 2.0, 3.0], [1.0])


def test_angle_and_azimuth():
    assert accutrig.angle((1.0, 1.0)) == pytest.approx(math.pi / 4, abs=TOL)
    assert accutrig.azimuth((-1.0, 1.0, 5.0)) == pytest.approx(3 * math.pi / 4, abs=TOL)


def test_inclination():
    vector = (1.0, 1.0, math.sqrt(2.0))
    assert accutrig.inclination(vector) == pytest.approx(math.pi / 4, abs=TOL)


def test_vector_helpers_reject_wrong_size():
    with pytest.raises(ValueError):
        accutrig.angle((1.0, 2.0, 3.0))
    with pytest.raises(ValueError):
        accutrig.spherical_to_cartesian((1.0, 2.0))


@pytest.mark.parametrize("point", [(3.0, 4.0), (-2.0, 1.0), (-1.5, -2.5), (0.5, -3.0)])
def test_polar_round_trip(point):
    polar = accutrig.cartesian_to_polar(point)
    back = accutrig.polar_to_cartesian(polar)
    assert back[0] == pytest.approx(point[0], abs=1e-3)
    assert back[1] == pytest.approx(point[1], abs=1e-3)


@pytest.mark.parametrize("point", [(1.0, 2.0, 3.0), (-2.0, 1.0, -1.0), (0.5, -3.0, 2.0)])
def test_spherical_round_trip(point):
    spherical = accutrig.cartesian_to_spherical(point)
    assert spherical[0] == pytest.approx(math.sqrt(sum(c * c for c in point)), rel=1e-6)
    back = accutrig.spherical_to_cartesian(spherical)
    for original, restored in zip(point, back):
        assert restored == pytest.approx(original, abs=1e-3)