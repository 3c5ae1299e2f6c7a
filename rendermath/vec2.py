"""Two-component float vector and the shared vector machinery."""

from __future__ import annotations

import math
import numbers
import operator
from typing import Any, Callable, Iterator, Optional, Tuple

from .mathlib import _fdiv


def _wrap(c: float, lo: float, hi: float, span: float) -> float:
    while c < lo:
        c += span
    while c >= hi:
        c -= span
    return c


class _Vector:
    """Fixed-size mutable float vector; subclasses name their fields in __slots__."""

    __slots__: Tuple[str, ...] = ()
    __hash__ = None  # type: ignore[assignment]

    def _assign(self, first: float, *rest: Optional[float]) -> None:
        if all(c is None for c in rest):
            rest = (first,) * len(rest)
        elif any(c is None for c in rest):
            raise TypeError(
                f"{type(self).__name__} takes one or {len(self.__slots__)} components"
            )
        for name, value in zip(self.__slots__, (first, *rest)):
            setattr(self, name, float(value))  # type: ignore[arg-type]

    def _set_all(self, values: Any) -> None:
        for name, value in zip(self.__slots__, list(values)):
            setattr(self, name, value)

    def _components(self, other: Any) -> Optional[Tuple[float, ...]]:
        if isinstance(other, type(self)):
            return tuple(other)
        if isinstance(other, numbers.Real):
            return (float(other),) * len(self.__slots__)
        return None

    def _binary(self, other: Any, op: Callable[[float, float], float]) -> Any:
        o = self._components(other)
        if o is None:
            return NotImplemented
        return type(self)(*map(op, self, o))

    def _inplace(self, other: Any, op: Callable[[float, float], float]) -> Any:
        o = self._components(other)
        if o is None:
            return NotImplemented
        self._set_all(map(op, self, o))
        return self

    def _check_index(self, idx: int) -> str:
        if not 0 <= idx < len(self.__slots__):
            raise IndexError(f"{type(self).__name__} index out of range: {idx}")
        return self.__slots__[idx]

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, name) for name in self.__slots__)

    def __len__(self) -> int:
        return len(self.__slots__)

    def __getitem__(self, idx: int) -> float:
        return getattr(self, self._check_index(idx))

    def __setitem__(self, idx: int, value: float) -> None:
        setattr(self, self._check_index(idx), float(value))

    def __add__(self, other: Any) -> Any:
        return self._binary(other, operator.add)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, operator.sub)

    # A scalar on the left is subtracted from each component, as with v - s.
    __rsub__ = __sub__

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, operator.mul)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, _fdiv)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, lambda a, b: _fdiv(b, a))

    def __iadd__(self, other: Any) -> Any:
        return self._inplace(other, operator.add)

    def __isub__(self, other: Any) -> Any:
        return self._inplace(other, operator.sub)

    def __imul__(self, other: Any) -> Any:
        return self._inplace(other, operator.mul)

    def __itruediv__(self, other: Any) -> Any:
        return self._inplace(other, _fdiv)

    def __neg__(self) -> Any:
        return type(self)(*(-c for c in self))

    def __abs__(self) -> Any:
        return _abs(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in zip(self.__slots__, self))
        return f"{type(self).__name__}({fields})"

    def __str__(self) -> str:
        return "{" + ",".join(f"{c:g}" for c in self) + "}"

    def _wrapped(self, lo: float, hi: float) -> Any:
        if not _valid(self):
            return type(self)()
        span = hi - lo
        return type(self)(*(_wrap(c, lo, hi, span) for c in self))


def _abs(v: _Vector) -> Any:
    return type(v)(*(abs(c) for c in v))


def _valid(v: _Vector) -> bool:
    return all(math.isfinite(c) for c in v)


def _norm_squared(v: _Vector) -> float:
    return sum(c * c for c in v)


def _norm(v: _Vector) -> float:
    return math.sqrt(_norm_squared(v))


def _unit(v: _Vector) -> Any:
    n = _norm(v)
    return type(v)(*(_fdiv(c, n) for c in v))


def _normalize(v: _Vector) -> Any:
    n = _norm(v)
    v._set_all(_fdiv(c, n) for c in v)
    return type(v)(*v)


def _componentwise(fn: Callable[[float, float], float], l: _Vector, r: _Vector) -> Any:
    return type(l)(*map(fn, l, r))


def _dot(l: _Vector, r: _Vector) -> float:
    return sum(a * b for a, b in zip(l, r))


class Vec2(_Vector):
    """A mutable 2D vector; a single constructor argument fills both components."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: Optional[float] = None) -> None:
        self._assign(x, y)

    def abs(self) -> "Vec2":
        """Componentwise absolute value."""
        return _abs(self)

    def valid(self) -> bool:
        """True if no component is infinite or NaN."""
        return _valid(self)

    def normalize(self) -> "Vec2":
        """Scale this vector to unit length in place and return a copy."""
        return _normalize(self)

    def unit(self) -> "Vec2":
        """Return a unit-length vector in the same direction."""
        return _unit(self)

    def norm_squared(self) -> float:
        return _norm_squared(self)

    def norm(self) -> float:
        return _norm(self)

    def range(self, lo: float, hi: float) -> "Vec2":
        """Wrap each component into [lo, hi); invalid vectors become zero."""
        return self._wrapped(lo, hi)


def hmin(l: Vec2, r: Vec2) -> Vec2:
    """Componentwise minimum."""
    return _componentwise(min, l, r)


def hmax(l: Vec2, r: Vec2) -> Vec2:
    """Componentwise maximum."""
    return _componentwise(max, l, r)


def dot(l: Vec2, r: Vec2) -> float:
    """2D dot product."""
    return _dot(l, r)