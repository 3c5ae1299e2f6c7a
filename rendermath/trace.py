"""Results of intersecting a ray with geometry."""

from __future__ import annotations

from dataclasses import dataclass, field

from .mat4 import Mat4
from .vec3 import Vec3


@dataclass
class Trace:
    """A ray hit: where, how far from the origin, the surface normal and material."""

    hit: bool = False
    distance: float = 0.0
    position: Vec3 = field(default_factory=Vec3)
    normal: Vec3 = field(default_factory=Vec3)
    origin: Vec3 = field(default_factory=Vec3)
    material: int = 0

    def _copy(self) -> "Trace":
        return Trace(
            self.hit,
            self.distance,
            Vec3(*self.position),
            Vec3(*self.normal),
            Vec3(*self.origin),
            self.material,
        )

    @staticmethod
    def min(l: "Trace", r: "Trace") -> "Trace":
        """The nearer of two results; a miss if neither hit."""
        if l.hit and r.hit:
            return (l if l.distance < r.distance else r)._copy()
        if l.hit:
            return l._copy()
        if r.hit:
            return r._copy()
        return Trace()

    def transform(self, transform: Mat4, norm: Mat4) -> None:
        """Move the result by ``transform``; normals use ``norm``."""
        self.position = transform * self.position
        self.origin = transform * self.origin
        self.normal = norm.rotate(self.normal).unit()
        self.distance = (self.position - self.origin).norm()