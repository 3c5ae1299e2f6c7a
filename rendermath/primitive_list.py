"""A flat collection of primitives searched one by one."""

from __future__ import annotations

from functools import reduce
from typing import Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar

from .bbox import BBox
from .ray import Ray
from .trace import Trace


class Primitive(Protocol):
    def bbox(self) -> BBox: ...

    def hit(self, ray: Ray) -> Trace: ...


P = TypeVar("P", bound=Primitive)


class PrimitiveList(Generic[P]):
    """Primitives tested in turn; the nearest hit wins."""

    def __init__(self, primitives: Optional[Iterable[P]] = None) -> None:
        self._prims: List[P] = list(primitives) if primitives is not None else []

    def __iter__(self) -> Iterator[P]:
        return iter(self._prims)

    def __len__(self) -> int:
        return len(self._prims)

    def bbox(self) -> BBox:
        """Box enclosing every primitive."""
        box = BBox()
        for p in self._prims:
            box.enclose(p.bbox())
        return box

    def hit(self, ray: Ray) -> Trace:
        """Nearest hit among the primitives."""
        return reduce(Trace.min, (p.hit(ray) for p in self._prims), Trace())

    def append(self, prim: P) -> None:
        self._prims.append(prim)