"""Distance functions used as A* heuristics and edge metrics."""

from __future__ import annotations

from enum import Enum
import math

from .point import Point


SQRT_2 = math.sqrt(2.0)


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance between ``a`` and ``b``."""

    return math.hypot(a.x - b.x, a.y - b.y)


def manhattan_distance(a: Point, b: Point) -> float:
    """Sum of the axis deltas; tight for a 4-neighbour grid."""

    return float(abs(a.x - b.x) + abs(a.y - b.y))


def chebyshev_distance(a: Point, b: Point) -> float:
    """Largest axis delta; tight for an 8-neighbour grid with unit diagonals."""

    return float(max(abs(a.x - b.x), abs(a.y - b.y)))


def octile_distance(a: Point, b: Point) -> float:
    """Diagonal moves as far as possible (cost sqrt 2), then straight moves."""

    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return SQRT_2 * min(dx, dy) + abs(dx - dy)


class DistanceAlg(Enum):
    """Selectable distance metric."""

    EUCLIDEAN = "euclidean"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"
    OCTILE = "octile"

    def distance(self, a: Point, b: Point) -> float:
        return _DISTANCE_FUNCS[self](a, b)

    @classmethod
    def from_name(cls, name: str) -> "DistanceAlg":
        """Return the member called ``name`` (case-insensitive)."""

        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown distance algorithm '{name}' (expected one of: {valid})"
            ) from None


_DISTANCE_FUNCS = {
    DistanceAlg.EUCLIDEAN: euclidean_distance,
    DistanceAlg.MANHATTAN: manhattan_distance,
    DistanceAlg.CHEBYSHEV: chebyshev_distance,
    DistanceAlg.OCTILE: octile_distance,
}


__all__ = [
    "DistanceAlg",
    "euclidean_distance",
    "manhattan_distance",
    "chebyshev_distance",
    "octile_distance",
]
