from __future__ import annotations

from typing import Dict, List, Set, Tuple
import math

from ..core.point import Point


class GraphMap:
    """Sparse map storing explicit weighted edges between points."""

    def __init__(self) -> None:
        self._edges: Dict[Point, List[Tuple[Point, float]]] = {}
        self._opaque: Set[Point] = set()

    def add_edge(
        self, a: Point, b: Point, cost: float = 1.0, *, bidirectional: bool = True
    ) -> None:
        """Connect ``a`` to ``b`` (and back, unless ``bidirectional`` is False)."""
        cost = float(cost)
        if not math.isfinite(cost) or cost < 0:
            raise ValueError(f"edge cost must be finite and non-negative, got {cost!r}")
        self._edges.setdefault(a, []).append((b, cost))
        self._edges.setdefault(b, [])
        if bidirectional:
            self._edges[b].append((a, cost))

    def set_opaque(self, point: Point, opaque: bool = True) -> None:
        if opaque:
            self._opaque.add(point)
        else:
            self._opaque.discard(point)

    def nodes(self) -> List[Point]:
        return list(self._edges)

    def neighbours(self, point: Point) -> List[Tuple[Point, float]]:
        return list(self._edges.get(point, ()))

    def is_transparent(self, point: Point) -> bool:
        return point not in self._opaque


__all__ = ["GraphMap"]
