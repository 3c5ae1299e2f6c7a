import math

import pytest

from rendermath.mathlib import (
    clamp,
    degrees,
    frac,
    lerp,
    radians,
    sign,
    smoothstep,
)
from rendermath.vec3 import Vec3


@pytest.mark.parametrize("x", [0.0, 1.5, -42.0, 359.0])
def test_radians_degrees_round_trip(x):
    assert degrees(radians(x)) == pytest.approx(x)


def test_radians_half_turn_is_pi():
    assert radians(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize("x", [-5.0, 0.3, 2.0, 9.0])
def test_clamp_scalar_within_bounds(x):
    result = clamp(x, 0.0, 2.0)
    assert 0.0 <= result <= 2.0
    if 0.0 <= x <= 2.0:
        assert result == x


def test_clamp_vector_is_componentwise():
    v = Vec3(-1.0, 0.5, 3.0)
    lo = Vec3(0.0)
    hi = Vec3(1.0)
    result = clamp(v, lo, hi)
    assert isinstance(result, Vec3)
    assert tuple(result) == tuple(clamp(a, 0.0, 1.0) for a in v)


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_lerp_vectors_endpoints():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 7.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


@pytest.mark.parametrize("x, expected", [(3.5, 1.0), (-0.1, -1.0), (0.0, 0.0)])
def test_sign(x, expected):
    assert sign(x) == expected


@pytest.mark.parametrize("x", [2.75, -2.5, 0.0, 7.0])
def test_frac_plus_integer_part(x):
    f = frac(x)
    assert f + math.trunc(x) == pytest.approx(x)
    assert abs(f) < 1.0


def test_frac_truncates_toward_zero():
    assert frac(-2.5) <= 0.0


def test_smoothstep_edges():
    assert smoothstep(1.0, 3.0, 1.0) == 0.0
    assert smoothstep(1.0, 3.0, 3.0) == 1.0
    assert smoothstep(1.0, 3.0, -10.0) == 0.0
    assert smoothstep(1.0, 3.0, 10.0) == 1.0


@pytest.mark.parametrize("x", [0.1, 0.25, 0.4])
def test_smoothstep_symmetric(x):
    assert smoothstep(0.0, 1.0, x) + smoothstep(0.0, 1.0, 1.0 - x) == pytest.approx(1.0)


def test_smoothstep_monotonic():
    values = [smoothstep(0.0, 1.0, i / 10) for i in range(11)]
    assert values == sorted(values)