"""Column-major 4x4 float matrix and common transformations."""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Iterator, List, Optional, Sequence

from .mathlib import EPS_F, _fdiv, degrees, radians
from .vec3 import Vec3, cross
from .vec3 import dot as dot3
from .vec4 import Vec4

FLT_EPSILON = 1.1920928955078125e-07

_SINGULARITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, -1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
)


def _det3(m: Sequence[Sequence[float]]) -> float:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _minor(m: Sequence[Sequence[float]], row: int, col: int) -> List[List[float]]:
    return [
        [v for j, v in enumerate(line) if j != col]
        for i, line in enumerate(m)
        if i != row
    ]


class _Fresh:
    """Class attribute that hands out a new object on every access."""

    def __init__(self, factory: Callable[[], "Mat4"]) -> None:
        self._factory = factory

    def __get__(self, obj: Any, owner: Any) -> "Mat4":
        return self._factory()


class Mat4:
    """A mutable 4x4 matrix stored as four column vectors.

    ``m[i]`` is column ``i`` (a live Vec4), so ``m[i][j]`` is row ``j`` of it.
    With no arguments the matrix is the identity.
    """

    __slots__ = ("_cols",)
    __hash__ = None  # type: ignore[assignment]

    I = _Fresh(lambda: Mat4())
    Zero = _Fresh(lambda: Mat4(Vec4(0.0), Vec4(0.0), Vec4(0.0), Vec4(0.0)))

    def __init__(
        self,
        x: Optional[Vec4] = None,
        y: Optional[Vec4] = None,
        z: Optional[Vec4] = None,
        w: Optional[Vec4] = None,
    ) -> None:
        given = (x, y, z, w)
        if all(c is None for c in given):
            self._cols = [
                Vec4(*(1.0 if i == j else 0.0 for i in range(4))) for j in range(4)
            ]
        elif any(c is None for c in given):
            raise TypeError("Mat4 takes no columns or four columns")
        else:
            self._cols = [Vec4(*c) for c in given]  # type: ignore[misc]

    # --- construction helpers -------------------------------------------------

    @staticmethod
    def translate(t: Vec3) -> "Mat4":
        """Translation by vector t."""
        r = Mat4()
        r[3] = Vec4(*t, 1.0)
        return r

    @staticmethod
    def rotation(angle: float, axis: Vec3) -> "Mat4":
        """Rotation by ``angle`` degrees about ``axis``."""
        ret = Mat4()
        c = math.cos(radians(angle))
        s = math.sin(radians(angle))
        axis = axis.unit()
        temp = axis * (1.0 - c)
        ret[0][0] = c + temp[0] * axis[0]
        ret[0][1] = temp[0] * axis[1] + s * axis[2]
        ret[0][2] = temp[0] * axis[2] - s * axis[1]
        ret[1][0] = temp[1] * axis[0] - s * axis[2]
        ret[1][1] = c + temp[1] * axis[1]
        ret[1][2] = temp[1] * axis[2] + s * axis[0]
        ret[2][0] = temp[2] * axis[0] + s * axis[1]
        ret[2][1] = temp[2] * axis[1] - s * axis[0]
        ret[2][2] = c + temp[2] * axis[2]
        return ret

    @staticmethod
    def euler(angles: Vec3) -> "Mat4":
        """Rotation for XYZ Euler angles in degrees."""
        return (
            Mat4.rotation(angles.z, Vec3(0.0, 0.0, 1.0))
            * Mat4.rotation(angles.y, Vec3(0.0, 1.0, 0.0))
            * Mat4.rotation(angles.x, Vec3(1.0, 0.0, 0.0))
        )

    @staticmethod
    def rotate_to(direction: Vec3) -> "Mat4":
        """Rotation taking the +Y axis to ``direction``."""
        d = direction.unit()
        if abs(d.y - 1.0) < EPS_F:
            return Mat4()
        if abs(d.y + 1.0) < EPS_F:
            return Mat4(
                Vec4(1.0, 0.0, 0.0, 0.0),
                Vec4(0.0, -1.0, 0.0, 0.0),
                Vec4(0.0, 0.0, 1.0, 0.0),
                Vec4(0.0, 0.0, 0.0, 1.0),
            )
        x = cross(d, Vec3(0.0, 1.0, 0.0)).unit()
        z = cross(x, d).unit()
        return Mat4(Vec4(*x, 0.0), Vec4(*d, 0.0), Vec4(*z, 0.0), Vec4(0.0, 0.0, 0.0, 1.0))

    @staticmethod
    def rotate_z_to(direction: Vec3) -> "Mat4":
        """Rotation taking the -Z axis to ``direction``."""
        m = Mat4.rotate_to(direction)
        old_y, old_z = m[1], m[2]
        m[1] = old_z
        m[2] = -old_y
        return m

    @staticmethod
    def scale(s: Vec3) -> "Mat4":
        """Scaling by the components of s."""
        r = Mat4()
        r[0][0] = s.x
        r[1][1] = s.y
        r[2][2] = s.z
        return r

    @staticmethod
    def axes(x: Vec3, y: Vec3, z: Vec3) -> "Mat4":
        """Matrix whose first three columns are the given axes."""
        return Mat4(Vec4(*x, 0.0), Vec4(*y, 0.0), Vec4(*z, 0.0), Vec4(0.0, 0.0, 0.0, 1.0))

    @staticmethod
    def look_at(pos: Vec3, at: Vec3, up: Optional[Vec3] = None) -> "Mat4":
        """View matrix for a camera at ``pos`` looking at ``at``; +Y is up by default."""
        if up is None:
            up = Vec3(0.0, 1.0, 0.0)
        r = Mat4.Zero
        f = (at - pos).unit()
        s = cross(f, up).unit()
        u = cross(s, f).unit()
        r[0][0], r[0][1], r[0][2] = s.x, u.x, -f.x
        r[1][0], r[1][1], r[1][2] = s.y, u.y, -f.y
        r[2][0], r[2][1], r[2][2] = s.z, u.z, -f.z
        r[3][0] = -dot3(s, pos)
        r[3][1] = -dot3(u, pos)
        r[3][2] = dot3(f, pos)
        r[3][3] = 1.0
        return r

    @staticmethod
    def ortho(l: float, r: float, b: float, t: float, n: float, f: float) -> "Mat4":
        """Orthographic projection for the given clipping planes."""
        rs = Mat4()
        rs[0][0] = _fdiv(2.0, r - l)
        rs[1][1] = _fdiv(2.0, t - b)
        rs[2][2] = _fdiv(2.0, n - f)
        rs[3][0] = _fdiv(-l - r, r - l)
        rs[3][1] = _fdiv(-b - t, t - b)
        rs[3][2] = _fdiv(-n, f - n)
        return rs

    @staticmethod
    def project(fov: float, ar: float, n: float) -> "Mat4":
        """Infinite perspective projection with reversed depth (near plane maps to 1)."""
        f = _fdiv(1.0, math.tan(radians(fov) / 2.0))
        r = Mat4()
        r[0][0] = _fdiv(f, ar)
        r[1][1] = f
        r[2][2] = 0.0
        r[3][3] = 0.0
        r[3][2] = n
        r[2][3] = -1.0
        return r

    # --- container protocol ---------------------------------------------------

    def __getitem__(self, idx: int) -> Vec4:
        if not 0 <= idx <= 3:
            raise IndexError(f"Mat4 column index out of range: {idx}")
        return self._cols[idx]

    def __setitem__(self, idx: int, col: Vec4) -> None:
        if not 0 <= idx <= 3:
            raise IndexError(f"Mat4 column index out of range: {idx}")
        self._cols[idx] = Vec4(*col)

    def __iter__(self) -> Iterator[Vec4]:
        return iter(self._cols)

    def __len__(self) -> int:
        return 4

    # --- arithmetic -----------------------------------------------------------

    def _columnwise(self, fn: Callable[[Vec4], Vec4]) -> "Mat4":
        return Mat4(*(fn(c) for c in self._cols))

    def __add__(self, other: Any) -> Any:
        if isinstance(other, Mat4):
            return Mat4(*(a + b for a, b in zip(self._cols, other._cols)))
        if isinstance(other, numbers.Real):
            return self._columnwise(lambda c: c + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Mat4):
            return Mat4(*(a - b for a, b in zip(self._cols, other._cols)))
        if isinstance(other, numbers.Real):
            return self._columnwise(lambda c: c - other)
        return NotImplemented

    # A scalar on the left is subtracted from each entry, as with m - s.
    def __rsub__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return self._columnwise(lambda c: c - other)
        return NotImplemented

    def _matmul(self, other: Any) -> Any:
        if isinstance(other, Mat4):
            return Mat4(*(self._apply(c) for c in other._cols))
        if isinstance(other, Vec4):
            return self._apply(other)
        if isinstance(other, Vec3):
            return self._apply(Vec4(*other, 1.0)).project()
        return NotImplemented

    def _apply(self, v: Vec4) -> Vec4:
        c = self._cols
        return v[0] * c[0] + v[1] * c[1] + v[2] * c[2] + v[3] * c[3]

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return self._columnwise(lambda c: c * other)
        return self._matmul(other)

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return self._columnwise(lambda c: c * other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        return self._matmul(other)

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, numbers.Real):
            return self._columnwise(lambda c: c / other)
        return NotImplemented

    # A scalar on the left divides each entry, as with m / s.
    __rtruediv__ = __truediv__

    def __iadd__(self, other: Any) -> Any:
        result = self + other
        if result is NotImplemented:
            return NotImplemented
        self._cols = result._cols
        return self

    def __isub__(self, other: Any) -> Any:
        result = self - other
        if result is NotImplemented:
            return NotImplemented
        self._cols = result._cols
        return self

    def __imul__(self, other: Any) -> Any:
        if not isinstance(other, (Mat4, numbers.Real)):
            return NotImplemented
        self._cols = (self * other)._cols
        return self

    def __itruediv__(self, other: Any) -> Any:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._cols = (self / other)._cols
        return self

    def __neg__(self) -> "Mat4":
        return self._columnwise(lambda c: -c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return all(a == b for a, b in zip(self._cols, other._cols))

    def __repr__(self) -> str:
        return "Mat4(" + ", ".join(repr(c) for c in self._cols) + ")"

    def __str__(self) -> str:
        return "{" + ",".join(str(c) for c in self._cols) + "}"

    # --- queries ----------------------------------------------------------------

    def rotate(self, v: Vec3) -> Vec3:
        """Apply the matrix to direction v (w = 0), ignoring translation."""
        return self._apply(Vec4(*v, 0.0)).xyz()

    def to_euler(self) -> Vec3:
        """Euler angles (XYZ, degrees) of an orthonormal rotation matrix."""
        data = [v for col in self._cols for v in col]
        eps = 16.0 * FLT_EPSILON
        if all(abs(d - s) < eps for d, s in zip(data, _SINGULARITY)):
            return Vec3(0.0, 0.0, 180.0)

        c = self._cols
        cy = math.hypot(c[0][0], c[0][1])
        if cy > eps:
            eul1 = Vec3(
                math.atan2(c[1][2], c[2][2]),
                math.atan2(-c[0][2], cy),
                math.atan2(c[0][1], c[0][0]),
            )
            eul2 = Vec3(
                math.atan2(-c[1][2], -c[2][2]),
                math.atan2(-c[0][2], -cy),
                math.atan2(-c[0][1], -c[0][0]),
            )
        else:
            eul1 = Vec3(
                math.atan2(-c[2][1], c[1][1]),
                math.atan2(-c[0][2], cy),
                0.0,
            )
            eul2 = eul1
        d1 = sum(abs(a) for a in eul1)
        d2 = sum(abs(a) for a in eul2)
        return degrees(eul2 if d1 > d2 else eul1)

    def transpose(self) -> "Mat4":
        """Return the transposed matrix."""
        return Mat4(*(Vec4(*(col[j] for col in self._cols)) for j in range(4)))

    def _rows(self) -> List[List[float]]:
        return [list(col) for col in self._cols]

    def det(self) -> float:
        """Determinant."""
        m = self._rows()
        return sum(
            (-1) ** j * m[0][j] * _det3(_minor(m, 0, j)) for j in range(4)
        )

    def inverse(self) -> "Mat4":
        """Inverse matrix; entries are NaN or infinite if it is singular."""
        m = self._rows()
        d = self.det()
        cof = [
            [(-1) ** (i + j) * _det3(_minor(m, i, j)) for j in range(4)]
            for i in range(4)
        ]
        return Mat4(
            *(Vec4(*(_fdiv(cof[i][j], d) for i in range(4))) for j in range(4))
        )


def outer(u: Vec4, v: Vec4) -> Mat4:
    """Outer product: entry [i][j] is u[i] * v[j]."""
    return Mat4(*(Vec4(*(ui * vj for vj in v)) for ui in u))