"""Axis-aligned bounding boxes."""

from __future__ import annotations

from itertools import product
from typing import List, Optional, Tuple, Union

from .mat4 import Mat4
from .vec2 import Vec2
from .vec2 import hmax as hmax2
from .vec2 import hmin as hmin2
from .vec3 import Vec3, hmax, hmin

FLT_MAX = 3.4028234663852886e38


class BBox:
    """An axis-aligned box; the default box is inverted so it encloses nothing."""

    __slots__ = ("min", "max")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, lo: Optional[Vec3] = None, hi: Optional[Vec3] = None) -> None:
        self.min = Vec3(*lo) if lo is not None else Vec3(FLT_MAX)
        self.max = Vec3(*hi) if hi is not None else Vec3(-FLT_MAX)

    def reset(self) -> None:
        """Make the box empty again."""
        self.min = Vec3(FLT_MAX)
        self.max = Vec3(-FLT_MAX)

    def enclose(self, item: Union[Vec3, "BBox"]) -> None:
        """Grow the box to include a point or another box."""
        if isinstance(item, BBox):
            self.min = hmin(self.min, item.min)
            self.max = hmax(self.max, item.max)
        else:
            self.min = hmin(self.min, item)
            self.max = hmax(self.max, item)

    def center(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def empty(self) -> bool:
        """True if the box has no volume."""
        return any(lo > hi for lo, hi in zip(self.min, self.max))

    def surface_area(self) -> float:
        if self.empty():
            return 0.0
        e = self.max - self.min
        return 2.0 * (e.x * e.z + e.x * e.y + e.y * e.z)

    def transform(self, trans: Mat4) -> None:
        """Replace the box by the bounds of its image under ``trans``."""
        amin, amax = self.min, self.max
        origin = trans[3].xyz()
        lo = Vec3(*origin)
        hi = Vec3(*origin)
        for i, j in product(range(3), repeat=2):
            a = trans[j][i] * amin[j]
            b = trans[j][i] * amax[j]
            if a < b:
                lo[i] += a
                hi[i] += b
            else:
                lo[i] += b
                hi[i] += a
        self.min, self.max = lo, hi

    def corners(self) -> List[Vec3]:
        """The eight corner points."""
        lo, hi = self.min, self.max
        return [
            Vec3(lo.x, lo.y, lo.z),
            Vec3(hi.x, lo.y, lo.z),
            Vec3(lo.x, hi.y, lo.z),
            Vec3(lo.x, lo.y, hi.z),
            Vec3(hi.x, hi.y, lo.z),
            Vec3(lo.x, hi.y, hi.z),
            Vec3(hi.x, lo.y, hi.z),
            Vec3(hi.x, hi.y, hi.z),
        ]

    def screen_rect(self, transform: Mat4) -> Tuple[Vec2, Vec2]:
        """Screen-space bounds in [-1,1]^2 that always contain the projected box."""
        lo = Vec2(-1.0, -1.0)
        hi = Vec2(1.0, 1.0)
        out_min = Vec2(FLT_MAX)
        out_max = Vec2(-FLT_MAX)
        behind = []
        for corner in self.corners():
            p = transform * corner
            behind.append(p.z < 0)
            out_min = hmin2(out_min, Vec2(p.x, p.y))
            out_max = hmax2(out_max, Vec2(p.x, p.y))
        if all(behind):
            return Vec2(0.0, 0.0), Vec2(0.0, 0.0)
        if any(behind):
            return lo, hi
        return out_min, out_max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BBox):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"BBox(min={self.min!r}, max={self.max!r})"

    def __str__(self) -> str:
        return f"BBox{{{self.min},{self.max}}}"