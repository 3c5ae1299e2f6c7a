"""Rays for tracing through a scene."""

from __future__ import annotations

import math
from typing import Optional

from .bbox import FLT_MAX
from .mat4 import Mat4
from .spectrum import Spectrum
from .vec2 import Vec2
from .vec3 import Vec3


class Ray:
    """A ray from ``point`` along unit direction ``dir``.

    ``dist_bounds`` holds the nearest and farthest distances at which the ray
    may hit something; ``throughput`` and ``depth`` track path state.
    """

    __slots__ = ("point", "dir", "throughput", "depth", "dist_bounds")

    def __init__(self, point: Optional[Vec3] = None, dir: Optional[Vec3] = None) -> None:
        if point is None and dir is None:
            self.point = Vec3()
            self.dir = Vec3()
            self.dist_bounds = Vec2(0.0, math.inf)
        elif point is None or dir is None:
            raise TypeError("Ray takes both a point and a direction, or neither")
        else:
            self.point = Vec3(*point)
            self.dir = dir.unit()
            self.dist_bounds = Vec2(0.0, FLT_MAX)
        self.throughput = Spectrum(1.0)
        self.depth = 0

    def at(self, t: float) -> Vec3:
        """Point on the ray at distance t."""
        return self.point + t * self.dir

    def transform(self, trans: Mat4) -> None:
        """Move the ray into the space defined by ``trans``."""
        self.point = trans * self.point
        d = trans.rotate(self.dir)
        n = d.norm()
        self.dist_bounds *= n
        self.dir = d / n

    def __repr__(self) -> str:
        return f"Ray(point={self.point!r}, dir={self.dir!r})"

    def __str__(self) -> str:
        return f"Ray{{{self.point},{self.dir}}}"