"""Three-component float vector."""

from __future__ import annotations

from typing import Optional

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


class Vec3(_Vector):
    """A mutable 3D vector; a single constructor argument fills every component."""

    __slots__ = ("x", "y", "z")

    def __init__(
        self, x: float = 0.0, y: Optional[float] = None, z: Optional[float] = None
    ) -> None:
        self._assign(x, y, z)

    def __lt__(self, other: "Vec3") -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return (self.x, self.y, self.z) < (other.x, other.y, other.z)

    def abs(self) -> "Vec3":
        """Componentwise absolute value."""
        return _abs(self)

    def valid(self) -> bool:
        """True if no component is infinite or NaN."""
        return _valid(self)

    def normalize(self) -> "Vec3":
        """Scale this vector to unit length in place and return a copy."""
        return _normalize(self)

    def unit(self) -> "Vec3":
        """Return a unit-length vector in the same direction."""
        return _unit(self)

    def norm_squared(self) -> float:
        return _norm_squared(self)

    def norm(self) -> float:
        return _norm(self)

    def range(self, lo: float, hi: float) -> "Vec3":
        """Wrap each component into [lo, hi); invalid vectors become zero."""
        return self._wrapped(lo, hi)


def hmin(l: Vec3, r: Vec3) -> Vec3:
    """Componentwise minimum."""
    return _componentwise(min, l, r)


def hmax(l: Vec3, r: Vec3) -> Vec3:
    """Componentwise maximum."""
    return _componentwise(max, l, r)


def dot(l: Vec3, r: Vec3) -> float:
    """3D dot product."""
    return _dot(l, r)


def cross(l: Vec3, r: Vec3) -> Vec3:
    """3D cross product."""
    return Vec3(
        l.y * r.z - l.z * r.y,
        l.z * r.x - l.x * r.z,
        l.x * r.y - l.y * r.x,
    )