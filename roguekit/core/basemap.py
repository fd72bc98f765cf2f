"""Map capability interface consumed by pathfinding and visibility code."""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple, runtime_checkable

from .point import Point


@runtime_checkable
class BaseMap(Protocol):
    """Anything that can tell which points are walkable and which are see-through.

    Concrete maps do not inherit from this class; providing both methods is
    enough. Neither method may mutate the map.
    """

    def neighbours(self, point: Point) -> Sequence[Tuple[Point, float]]:
        """Return ``(neighbour, step_cost)`` pairs reachable from ``point``.

        Costs must be finite and non-negative. An empty sequence marks a
        dead end.
        """
        ...

    def is_transparent(self, point: Point) -> bool:
        """Return ``True`` if light passes through ``point``."""
        ...


__all__ = ["BaseMap"]
