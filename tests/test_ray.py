import math

import pytest

from rendermath.bbox import FLT_MAX
from rendermath.mat4 import Mat4
from rendermath.ray import Ray
from rendermath.spectrum import Spectrum
from rendermath.vec2 import Vec2
from rendermath.vec3 import Vec3


def _close(a, b, tol=1e-9):
    return list(a) == pytest.approx(list(b), abs=tol)


def test_constructor_normalizes_direction():
    r = Ray(Vec3(1.0, 2.0, 3.0), Vec3(3.0, 4.0, 12.0))
    assert r.dir.norm() == pytest.approx(1.0)
    assert r.point == Vec3(1.0, 2.0, 3.0)
    assert r.dist_bounds == Vec2(0.0, FLT_MAX)


def test_default_state():
    r = Ray()
    assert math.isinf(r.dist_bounds.y)
    assert r.throughput == Spectrum(1.0)
    assert r.depth == 0


def test_point_without_direction_rejected():
    with pytest.raises(TypeError):
        Ray(Vec3(0.0))


def test_at():
    r = Ray(Vec3(1.0, 1.0, 1.0), Vec3(0.0, 2.0, 2.0))
    assert r.at(0.0) == r.point
    assert (r.at(2.0) - r.point).norm() == pytest.approx(2.0)


def test_transform_translate_keeps_direction():
    r = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 0.0, -1.0))
    t = Vec3(4.0, 5.0, 6.0)
    r.transform(Mat4.translate(t))
    assert _close(r.point, Vec3(1.0, 2.0, 3.0) + t)
    assert _close(r.dir, Vec3(0.0, 0.0, -1.0))
    assert r.dist_bounds == Vec2(0.0, FLT_MAX)


def test_transform_scale_scales_bounds():
    r = Ray(Vec3(0.0), Vec3(1.0, 0.0, 0.0))
    r.dist_bounds = Vec2(1.0, 3.0)
    r.transform(Mat4.scale(Vec3(2.0)))
    assert r.dir.norm() == pytest.approx(1.0)
    assert _close(r.dist_bounds, Vec2(1.0, 3.0) * 2.0)