"""Scalar helpers shared by the vector and matrix types."""

from __future__ import annotations

import math
import numbers
from typing import Any

EPS_F = 0.00001
PI_F = math.pi


def _fdiv(a: float, b: float) -> float:
    """Divide with IEEE semantics: division by zero gives inf or nan."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def radians(v: Any) -> Any:
    """Convert degrees to radians."""
    return v * (PI_F / 180.0)


def degrees(v: Any) -> Any:
    """Convert radians to degrees."""
    return v * (180.0 / PI_F)


def clamp(x: Any, lo: Any, hi: Any) -> Any:
    """Clamp a scalar, or each component of a vector, into [lo, hi]."""
    if isinstance(x, numbers.Real):
        return min(max(x, lo), hi)
    return type(x)(*(clamp(a, b, c) for a, b, c in zip(x, lo, hi)))


def lerp(start: Any, end: Any, t: float) -> Any:
    """Linearly interpolate between start and end."""
    return start + (end - start) * t


def sign(x: float) -> float:
    """Return 1, -1 or 0 according to the sign of x."""
    if x > 0.0:
        return 1.0
    if x < 0.0:
        return -1.0
    return 0.0


def frac(x: float) -> float:
    """Return the fractional part of x, truncating toward zero."""
    return float(x - math.trunc(x))


def smoothstep(e0: float, e1: float, x: float) -> float:
    """Hermite interpolation between 0 and 1 as x moves from e0 to e1."""
    t = clamp(_fdiv(x - e0, e1 - e0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)