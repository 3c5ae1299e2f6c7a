"""Point-like light sources and their transformed wrapper."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from .mat4 import Mat4
from .mathlib import degrees, smoothstep
from .spectrum import Spectrum
from .vec2 import Vec2
from .vec3 import Vec3


@dataclass
class LightSample:
    """Incoming light at a point: radiance, direction towards the light, distance, pdf."""

    radiance: Spectrum = field(default_factory=Spectrum)
    direction: Vec3 = field(default_factory=Vec3)
    distance: float = 0.0
    pdf: float = 0.0

    def transform(self, trans: Mat4) -> None:
        """Rotate the direction by ``trans``."""
        self.direction = trans.rotate(self.direction)


@dataclass
class DirectionalLight:
    """Light arriving from +Y at every point."""

    radiance: Spectrum
    discrete: ClassVar[bool] = True

    def sample(self, origin: Vec3) -> LightSample:
        return LightSample(
            radiance=Spectrum(*self.radiance),
            direction=Vec3(0.0, -1.0, 0.0),
            distance=math.inf,
            pdf=1.0,
        )


@dataclass
class PointLight:
    """Light emitted from the local origin."""

    radiance: Spectrum
    discrete: ClassVar[bool] = True

    def sample(self, origin: Vec3) -> LightSample:
        return LightSample(
            radiance=Spectrum(*self.radiance),
            direction=-origin.unit(),
            distance=origin.norm(),
            pdf=1.0,
        )


@dataclass
class SpotLight:
    """Point light along +Y fading out between two cone angles (degrees)."""

    radiance: Spectrum
    angle_bounds: Vec2
    discrete: ClassVar[bool] = True

    def sample(self, origin: Vec3) -> LightSample:
        angle = math.atan2(Vec2(origin.x, origin.z).norm(), origin.y)
        angle = abs(degrees(angle))
        falloff = 1.0 - smoothstep(self.angle_bounds.x / 2.0, self.angle_bounds.y / 2.0, angle)
        return LightSample(
            radiance=falloff * self.radiance,
            direction=-origin.unit(),
            distance=origin.norm(),
            pdf=1.0,
        )


AnyLight = Union[DirectionalLight, PointLight, SpotLight]


class Light:
    """A light placed in the scene by a transformation matrix."""

    def __init__(self, light: AnyLight, light_id: int, trans: Optional[Mat4] = None) -> None:
        self.underlying = light
        self.id = light_id
        self.set_trans(trans if trans is not None else Mat4())

    def set_trans(self, trans: Mat4) -> None:
        """Place the light with ``trans``."""
        self._trans = Mat4(*trans)
        self._itrans = self._trans.inverse()
        self._has_trans = self._trans != Mat4.I

    def sample(self, origin: Vec3) -> LightSample:
        """Sample the light as seen from world-space point ``origin``."""
        if self._has_trans:
            origin = self._itrans * origin
        ret = self.underlying.sample(origin)
        if self._has_trans:
            ret.transform(self._trans)
        return ret

    def is_discrete(self) -> bool:
        return self.underlying.discrete