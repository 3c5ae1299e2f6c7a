"""Infinite lines in 3D."""

from __future__ import annotations

from typing import Optional, Tuple

from .mathlib import _fdiv
from .vec3 import Vec3, dot


class Line:
    """A line through ``point`` along a unit direction ``dir``."""

    __slots__ = ("point", "dir")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, point: Optional[Vec3] = None, dir: Optional[Vec3] = None) -> None:
        self.point = Vec3(*point) if point is not None else Vec3()
        self.dir = dir.unit() if dir is not None else Vec3()

    def at(self, t: float) -> Vec3:
        """Point on the line at parameter t."""
        return self.point + t * self.dir

    def closest(self, pt: Vec3) -> Vec3:
        """Point on the line closest to pt."""
        return self.at(dot(pt - self.point, self.dir))

    def closest_to_line(self, other: "Line") -> Tuple[Vec3, bool]:
        """Point on this line closest to ``other``.

        The flag is False when that point lies behind ``other``'s direction.
        """
        p0 = self.point - other.point
        a = dot(self.dir, other.dir)
        b = dot(self.dir, p0)
        c = dot(other.dir, p0)
        denom = 1.0 - a * a
        t0 = _fdiv(a * c - b, denom)
        t1 = _fdiv(c - a * b, denom)
        return self.at(t0), t1 >= 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.point == other.point and self.dir == other.dir

    def __repr__(self) -> str:
        return f"Line(point={self.point!r}, dir={self.dir!r})"

    def __str__(self) -> str:
        return f"Line{{{self.point},{self.dir}}}"