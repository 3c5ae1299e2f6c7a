import pytest

from rendermath.line import Line
from rendermath.plane import Plane
from rendermath.vec3 import Vec3
from rendermath.vec4 import Vec4


def test_default_plane_is_zero():
    assert Plane().p == Vec4(0.0)


def test_from_point_normal_keeps_normal_and_offset():
    plane = Plane.from_point_normal(Vec3(0.0, 2.0, 0.0), Vec3(0.0, 3.0, 0.0))
    assert plane.p == Vec4(0.0, 3.0, 0.0, 2.0)


def test_point_lies_on_plane():
    point = Vec3(1.0, 2.0, 3.0)
    n = Vec3(0.0, 0.0, 1.0)
    plane = Plane.from_point_normal(point, n)
    origin = Vec3(5.0, -4.0, 10.0)
    hit, _ = plane.hit(Line(origin, Vec3(0.0, 0.0, -1.0)))
    assert hit.z == pytest.approx(point.z)
    assert (hit.x, hit.y) == pytest.approx((origin.x, origin.y))


def test_hit_in_front():
    plane = Plane.from_point_normal(Vec3(0.0, 2.0, 0.0), Vec3(0.0, 1.0, 0.0))
    pt, ahead = plane.hit(Line(Vec3(0.0), Vec3(0.0, 1.0, 0.0)))
    assert list(pt) == pytest.approx([0.0, 2.0, 0.0])
    assert ahead is True


def test_hit_behind():
    plane = Plane.from_point_normal(Vec3(0.0, 2.0, 0.0), Vec3(0.0, 1.0, 0.0))
    pt, ahead = plane.hit(Line(Vec3(0.0), Vec3(0.0, -1.0, 0.0)))
    assert list(pt) == pytest.approx([0.0, 2.0, 0.0])
    assert ahead is False


def test_parallel_line_misses():
    plane = Plane.from_point_normal(Vec3(0.0, 2.0, 0.0), Vec3(0.0, 1.0, 0.0))
    pt, _ = plane.hit(Line(Vec3(0.0), Vec3(1.0, 0.0, 0.0)))
    assert not pt.valid()


def test_str_and_equality():
    plane = Plane(Vec4(0.0, 1.0, 0.0, 2.0))
    assert plane == Plane(Vec4(0.0, 1.0, 0.0, 2.0))
    assert str(plane) == "Plane{0,1,0,2}"