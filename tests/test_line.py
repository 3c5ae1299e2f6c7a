import pytest

from rendermath.line import Line
from rendermath.vec3 import Vec3, dot


def test_direction_is_normalized():
    line = Line(Vec3(1.0, 2.0, 3.0), Vec3(3.0, 4.0, 12.0))
    assert line.dir.norm() == pytest.approx(1.0)
    assert line.at(0.0) == Vec3(1.0, 2.0, 3.0)


def test_at_moves_along_direction():
    line = Line(Vec3(1.0, 1.0, 1.0), Vec3(0.0, 0.0, 5.0))
    assert line.at(2.0) == Vec3(1.0, 1.0, 1.0) + Vec3(0.0, 0.0, 1.0) * 2.0


def test_default_line():
    line = Line()
    assert line.point == Vec3()
    assert line.dir == Vec3()


def test_closest_point_is_perpendicular_foot():
    line = Line(Vec3(1.0, -1.0, 2.0), Vec3(1.0, 2.0, 2.0))
    pt = Vec3(4.0, 3.0, -1.0)
    foot = line.closest(pt)
    assert dot(pt - foot, line.dir) == pytest.approx(0.0, abs=1e-9)
    # The foot lies on the line.
    offset = foot - line.point
    assert (offset - line.dir * dot(offset, line.dir)).norm() == pytest.approx(0.0, abs=1e-9)


def test_closest_to_crossing_line_ahead():
    a = Line(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    b = Line(Vec3(5.0, 1.0, 0.0), Vec3(0.0, -1.0, 0.0))
    pt, ahead = a.closest_to_line(b)
    assert list(pt) == pytest.approx([5.0, 0.0, 0.0])
    assert ahead is True


def test_closest_to_crossing_line_behind():
    a = Line(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    b = Line(Vec3(5.0, 1.0, 0.0), Vec3(0.0, 1.0, 0.0))
    pt, ahead = a.closest_to_line(b)
    assert list(pt) == pytest.approx([5.0, 0.0, 0.0])
    assert ahead is False


def test_closest_to_parallel_line_is_invalid():
    a = Line(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    b = Line(Vec3(0.0, 1.0, 0.0), Vec3(1.0, 0.0, 0.0))
    pt, _ = a.closest_to_line(b)
    assert not pt.valid()


def test_equality_and_str():
    a = Line(Vec3(0.0, 0.0, 0.0), Vec3(2.0, 0.0, 0.0))
    b = Line(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0))
    assert a == b
    assert str(a) == "Line{{0,0,0},{1,0,0}}"