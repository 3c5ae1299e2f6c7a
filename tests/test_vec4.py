import math

import pytest

from rendermath.vec3 import Vec3
from rendermath.vec4 import Vec4, dot, hmax, hmin

A = Vec4(1.5, -2.0, 0.75, 4.0)
B = Vec4(0.25, 4.0, -8.0, 2.0)


def test_fill_and_partial_rejected():
    assert tuple(Vec4(2.0)) == (2.0,) * 4
    assert Vec4() == Vec4(0.0)
    with pytest.raises(TypeError):
        Vec4(1.0, 2.0, 3.0)


def test_xyz_and_project():
    v3 = Vec3(1.0, -2.0, 3.5)
    assert Vec4(*v3, 7.0).xyz() == v3
    assert Vec4(*(v3 * 2), 2.0).project() == v3
    assert not Vec4(1.0, 1.0, 1.0, 0.0).project().valid()


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        ((A + B) - B, A),
        ((A * B) / B, A),
        (2 * A, A + A),
        (3 - A, A - 3),
        (-(-A), A),
        ((-A).abs(), A.abs()),
    ],
)
def test_arithmetic_identities(lhs, rhs):
    assert lhs == rhs


def test_inplace_keeps_identity():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    alias = v
    v /= 2
    assert alias is v
    assert v == Vec4(0.5, 1.0, 1.5, 2.0)


def test_index_and_valid():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    v[3] = math.nan
    assert not v.valid()
    with pytest.raises(IndexError):
        v[4]


def test_normalize_matches_unit():
    v = Vec4(1.0, -2.0, 3.0, 4.0)
    u = v.unit()
    assert u.norm() == pytest.approx(1.0)
    v.normalize()
    assert v == u


def test_hmin_hmax_and_dot():
    lo, hi = hmin(A, B), hmax(A, B)
    assert lo + hi == A + B
    assert dot(A, B) == dot(B, A) == pytest.approx(1.5 * 0.25 - 8.0 - 6.0 + 8.0)


def test_str_format():
    assert str(Vec4(1.0, 2.0, 3.0, 4.0)) == "{1,2,3,4}"