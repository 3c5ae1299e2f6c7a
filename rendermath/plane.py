"""Planes in 3D stored as (a, b, c, d) with a*x + b*y + c*z = d."""

from __future__ import annotations

from typing import Optional, Tuple

from .line import Line
from .mathlib import _fdiv
from .vec3 import Vec3, dot
from .vec4 import Vec4


class Plane:
    """A plane with normal ``p.xyz()`` and offset ``p.w``."""

    __slots__ = ("p",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, p: Optional[Vec4] = None) -> None:
        self.p = Vec4(*p) if p is not None else Vec4()

    @staticmethod
    def from_point_normal(point: Vec3, n: Vec3) -> "Plane":
        """Plane through ``point`` with normal ``n``."""
        return Plane(Vec4(n.x, n.y, n.z, dot(point, n.unit())))

    def hit(self, line: Line) -> Tuple[Vec3, bool]:
        """Intersection with ``line``.

        The flag is False when the point lies behind the line's direction.
        """
        n = self.p.xyz()
        t = _fdiv(self.p.w - dot(line.point, n), dot(line.dir, n))
        return line.at(t), t >= 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self.p == other.p

    def __repr__(self) -> str:
        return f"Plane(p={self.p!r})"

    def __str__(self) -> str:
        return f"Plane{self.p}"