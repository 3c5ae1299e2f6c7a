"""Four-component float vector."""

from __future__ import annotations

from typing import Optional

from .mathlib import _fdiv
from .vec2 import (
    _abs,
    _componentwise,
    _dot,
    _norm,
    _norm_squared,
    _normalize,
    _unit,
    _valid,
    _Vector,
)
from .vec3 import Vec3


class Vec4(_Vector):
    """A mutable 4D vector; a single constructor argument fills every component.

    Build one from a Vec3 with ``Vec4(*v, w)``.
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(
        self,
        x: float = 0.0,
        y: Optional[float] = None,
        z: Optional[float] = None,
        w: Optional[float] = None,
    ) -> None:
        self._assign(x, y, z, w)

    def abs(self) -> "Vec4":
        """Componentwise absolute value."""
        return _abs(self)

    def valid(self) -> bool:
        """True if no component is infinite or NaN."""
        return _valid(self)

    def normalize(self) -> "Vec4":
        """Scale this vector to unit length in place and return a copy."""
        return _normalize(self)

    def unit(self) -> "Vec4":
        """Return a unit-length vector in the same direction."""
        return _unit(self)

    def norm_squared(self) -> float:
        return _norm_squared(self)

    def norm(self) -> float:
        return _norm(self)

    def xyz(self) -> Vec3:
        """Return the first three components."""
        return Vec3(self.x, self.y, self.z)

    def project(self) -> Vec3:
        """Perspective division: xyz / w."""
        return Vec3(*(_fdiv(c, self.w) for c in (self.x, self.y, self.z)))


def hmin(l: Vec4, r: Vec4) -> Vec4:
    """Componentwise minimum."""
    return _componentwise(min, l, r)


def hmax(l: Vec4, r: Vec4) -> Vec4:
    """Componentwise maximum."""
    return _componentwise(max, l, r)


def dot(l: Vec4, r: Vec4) -> float:
    """4D dot product."""
    return _dot(l, r)