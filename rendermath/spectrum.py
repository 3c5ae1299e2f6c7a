"""RGB radiance values."""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterator, Optional

from .mathlib import _fdiv
from .vec3 import Vec3

GAMMA = 2.1


def _powf(base: float, exp: float) -> float:
    try:
        return math.pow(base, exp)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


class Spectrum:
    """A mutable RGB triple; a single constructor argument fills every channel."""

    __slots__ = ("r", "g", "b")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, r: float = 0.0, g: Optional[float] = None, b: Optional[float] = None) -> None:
        if g is None and b is None:
            g = b = r
        elif g is None or b is None:
            raise TypeError("Spectrum takes one or three channels")
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @staticmethod
    def direction(v: Vec3) -> "Spectrum":
        """Colour that visualises a direction: absolute unit components, linearised."""
        u = v.unit()
        s = Spectrum(abs(u.x), abs(u.y), abs(u.z))
        s.make_linear()
        return s

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def __len__(self) -> int:
        return 3

    def make_srgb(self) -> None:
        """Apply gamma encoding in place."""
        self.r, self.g, self.b = (_powf(c, 1.0 / GAMMA) for c in (self.r, self.g, self.b))

    def make_linear(self) -> None:
        """Undo gamma encoding in place."""
        self.r, self.g, self.b = (_powf(c, GAMMA) for c in (self.r, self.g, self.b))

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Spectrum):
            return Spectrum(self.r + other.r, self.g + other.g, self.b + other.b)
        if isinstance(other, numbers.Real):
            return Spectrum(*(c + other for c in self))
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return Spectrum(*(c + other for c in self))
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Spectrum):
            return Spectrum(self.r - other.r, self.g - other.g, self.b - other.b)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Spectrum):
            return Spectrum(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, numbers.Real):
            return Spectrum(*(c * other for c in self))
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return Spectrum(*(c * other for c in self))
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return Spectrum(*(_fdiv(c, other) for c in self))
        return NotImplemented

    def __iadd__(self, other: Any) -> Any:
        if not isinstance(other, Spectrum):
            return NotImplemented
        self.r += other.r
        self.g += other.g
        self.b += other.b
        return self

    def __imul__(self, other: Any) -> Any:
        if isinstance(other, Spectrum):
            self.r *= other.r
            self.g *= other.g
            self.b *= other.b
            return self
        if isinstance(other, numbers.Real):
            self.r, self.g, self.b = (c * other for c in (self.r, self.g, self.b))
            return self
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spectrum):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def luma(self) -> float:
        """Perceived brightness."""
        return 0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b

    def valid(self) -> bool:
        """True if no channel is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def to_vec(self) -> Vec3:
        return Vec3(self.r, self.g, self.b)

    def __repr__(self) -> str:
        return f"Spectrum(r={self.r!r}, g={self.g!r}, b={self.b!r})"

    def __str__(self) -> str:
        return f"Spectrum{{{self.r:g},{self.g:g},{self.b:g}}}"