"""Dense rectangular tile map implementing :class:`BaseMap`."""

from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple
import math

from ..core.point import Point


WALL = math.inf

CARDINALS: Tuple[Point, ...] = (
    Point(1, 0),
    Point(-1, 0),
    Point(0, 1),
    Point(0, -1),
)
DIAGONALS: Tuple[Point, ...] = (
    Point(1, 1),
    Point(-1, -1),
    Point(1, -1),
    Point(-1, 1),
)


class GridMap:
    """Row-major grid of per-tile entry costs.

    A tile's cost is what it takes to step *onto* it, whichever direction
    the step comes from. Tiles with cost :data:`WALL` cannot be entered and
    block light unless told otherwise via :meth:`set_transparent`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        costs: Optional[Sequence[float]] = None,
        *,
        diagonal: bool = True,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.diagonal = diagonal
        if costs is None:
            self._costs: List[float] = [1.0] * (width * height)
        else:
            if len(costs) != width * height:
                raise ValueError(
                    f"expected {width * height} costs, got {len(costs)}"
                )
            self._costs = []
            for cost in costs:
                self._costs.append(_validated(cost))
        self._transparency: Dict[int, bool] = {}

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def from_prefab(
        cls, prefab: Sequence[Sequence[int]], *, diagonal: bool = True
    ) -> "GridMap":
        """Build a map from a matrix of ``0`` (floor, cost 1) and ``1`` (wall)."""

        return cls.from_ascii(
            ["".join(str(cell) for cell in row) for row in prefab],
            {"0": 1.0, "1": WALL},
            diagonal=diagonal,
        )

    @classmethod
    def from_ascii(
        cls,
        lines: Sequence[str],
        legend: Mapping[str, float],
        *,
        diagonal: bool = True,
    ) -> "GridMap":
        """Build a map from text rows, translating each glyph via ``legend``."""

        if not lines:
            raise ValueError("at least one row is required")
        width = len(lines[0])
        costs: List[float] = []
        for y, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(
                    f"row {y} has length {len(line)}, expected {width}"
                )
            for x, glyph in enumerate(line):
                if glyph not in legend:
                    raise ValueError(f"unknown glyph {glyph!r} at ({x}, {y})")
                costs.append(legend[glyph])
        return cls(width, len(lines), costs, diagonal=diagonal)

    # ------------------------------------------------------------------
    # Tile access
    # ------------------------------------------------------------------
    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def index(self, point: Point) -> int:
        """Return the row-major index of ``point``."""
        if not self.in_bounds(point):
            raise IndexError(f"{point} is outside a {self.width}x{self.height} map")
        return point.y * self.width + point.x

    def cost_at(self, point: Point) -> float:
        return self._costs[self.index(point)]

    def set_cost(self, point: Point, cost: float) -> None:
        self._costs[self.index(point)] = _validated(cost)

    def set_wall(self, point: Point) -> None:
        self.set_cost(point, WALL)

    def is_wall(self, point: Point) -> bool:
        return self.cost_at(point) == WALL

    def set_transparent(self, point: Point, transparent: bool) -> None:
        """Override the light-transparency of ``point``."""
        self._transparency[self.index(point)] = transparent

    def points(self) -> Iterator[Point]:
        """Yield every point of the map in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Point(x, y)

    def copy(self) -> "GridMap":
        clone = GridMap(self.width, self.height, self._costs, diagonal=self.diagonal)
        clone._transparency = dict(self._transparency)
        return clone

    # ------------------------------------------------------------------
    # BaseMap
    # ------------------------------------------------------------------
    def neighbours(self, point: Point) -> List[Tuple[Point, float]]:
        directions = CARDINALS + DIAGONALS if self.diagonal else CARDINALS
        result: List[Tuple[Point, float]] = []
        for direction in directions:
            neighbour = point + direction
            if not self.in_bounds(neighbour):
                continue
            cost = self._costs[neighbour.y * self.width + neighbour.x]
            if cost == WALL:
                continue
            result.append((neighbour, cost))
        return result

    def is_transparent(self, point: Point) -> bool:
        if not self.in_bounds(point):
            return False
        idx = self.index(point)
        if idx in self._transparency:
            return self._transparency[idx]
        return self._costs[idx] != WALL


def _validated(cost: float) -> float:
    cost = float(cost)
    if math.isnan(cost) or cost < 0:
        raise ValueError(f"tile cost must be non-negative, got {cost!r}")
    return cost


__all__ = ["GridMap", "WALL", "CARDINALS", "DIAGONALS"]
