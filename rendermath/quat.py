"""Quaternions for representing 3D rotations."""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator

from .mat4 import Mat4
from .mathlib import EPS_F, _fdiv, radians
from .vec3 import Vec3
from .vec4 import Vec4


class Quat:
    """A mutable quaternion with imaginary part (x, y, z) and real part w.

    With no arguments it is the identity rotation. Build one from a vector
    and a real part with ``Quat(*v, w)``.
    """

    __slots__ = ("x", "y", "z", "w")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def axis_angle(axis: Vec3, angle: float) -> "Quat":
        """Unit quaternion rotating ``angle`` degrees about ``axis``."""
        axis = axis.unit()
        half = radians(angle) / 2.0
        s = math.sin(half)
        return Quat(s * axis.x, s * axis.y, s * axis.z, math.cos(half)).unit()

    @staticmethod
    def euler(angles: Vec3) -> "Quat":
        """Unit quaternion for XYZ Euler angles in degrees."""
        if angles == Vec3(0.0, 0.0, 180.0) or angles == Vec3(180.0, 0.0, 0.0):
            return Quat(0.0, 0.0, -1.0, 0.0)
        c1 = math.cos(radians(angles[2] * 0.5))
        c2 = math.cos(radians(angles[1] * 0.5))
        c3 = math.cos(radians(angles[0] * 0.5))
        s1 = math.sin(radians(angles[2] * 0.5))
        s2 = math.sin(radians(angles[1] * 0.5))
        s3 = math.sin(radians(angles[0] * 0.5))
        return Quat(
            c1 * c2 * s3 - s1 * s2 * c3,
            c1 * s2 * c3 + s1 * c2 * s3,
            s1 * c2 * c3 - c1 * s2 * s3,
            c1 * c2 * c3 + s1 * s2 * s3,
        )

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __len__(self) -> int:
        return 4

    def __getitem__(self, idx: int) -> float:
        if not 0 <= idx <= 3:
            raise IndexError(f"Quat index out of range: {idx}")
        return getattr(self, self.__slots__[idx])

    def __setitem__(self, idx: int, value: float) -> None:
        if not 0 <= idx <= 3:
            raise IndexError(f"Quat index out of range: {idx}")
        setattr(self, self.__slots__[idx], float(value))

    def conjugate(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quat":
        """Inverse of a rotation: the normalized conjugate."""
        return self.conjugate().unit()

    def complex(self) -> Vec3:
        """Imaginary part as a vector."""
        return Vec3(self.x, self.y, self.z)

    def real(self) -> float:
        return self.w

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def unit(self) -> "Quat":
        n = self.norm()
        return Quat(*(_fdiv(c, n) for c in self))

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Quat):
            x, y, z, w = self
            rx, ry, rz, rw = other
            return Quat(
                y * rz - z * ry + x * rw + w * rx,
                z * rx - x * rz + y * rw + w * ry,
                x * ry - y * rx + z * rw + w * rz,
                w * rw - x * rx - y * ry - z * rz,
            )
        if isinstance(other, numbers.Real):
            s = float(other)
            return Quat(*(s * c for c in self))
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            s = float(other)
            return Quat(*(s * c for c in self))
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Quat):
            return Quat(*(a + b for a, b in zip(self, other)))
        return NotImplemented

    # A scalar on the left adds to the real part only.
    def __radd__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return Quat(self.x, self.y, self.z, float(other) + self.w)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Quat):
            return Quat(*(a - b for a, b in zip(self, other)))
        return NotImplemented

    def __neg__(self) -> "Quat":
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return tuple(self) == tuple(other)

    def to_euler(self) -> Vec3:
        """Equivalent XYZ Euler angles in degrees."""
        return self.unit().to_mat().to_euler()

    def to_mat(self) -> Mat4:
        """Equivalent rotation matrix."""
        x, y, z, w = self
        return Mat4(
            Vec4(1 - 2 * y * y - 2 * z * z, 2 * x * y + 2 * z * w, 2 * x * z - 2 * y * w, 0.0),
            Vec4(2 * x * y - 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z + 2 * x * w, 0.0),
            Vec4(2 * x * z + 2 * y * w, 2 * y * z - 2 * x * w, 1 - 2 * x * x - 2 * y * y, 0.0),
            Vec4(0.0, 0.0, 0.0, 1.0),
        )

    def rotate(self, v: Vec3) -> Vec3:
        """Apply this rotation to vector v."""
        return ((self * Quat(v.x, v.y, v.z, 0.0)) * self.conjugate()).complex()

    def __repr__(self) -> str:
        return f"Quat(x={self.x!r}, y={self.y!r}, z={self.z!r}, w={self.w!r})"

    def __str__(self) -> str:
        return f"Quat{{{self.x:g},{self.y:g},{self.z:g},{self.w:g}}}"


def dot(q0: Quat, q1: Quat) -> float:
    """Four-component dot product."""
    return q0.x * q1.x + q0.y * q1.y + q0.z * q1.z + q0.w * q1.w


def slerp(q0: Quat, q1: Quat, t: float) -> Quat:
    """Spherical linear interpolation from q0 to q1 along the shorter arc."""
    hcos = dot(q0, q1)
    shortest = -q0 if hcos < 0 else q0
    if abs(hcos) >= 1.0 - EPS_F:
        return (1.0 - t) * shortest + t * q1
    a = math.acos(abs(hcos))
    return (math.sin((1.0 - t) * a) * shortest + math.sin(t * a) * q1) * (1.0 / math.sin(a))