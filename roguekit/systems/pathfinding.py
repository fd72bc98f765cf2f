"""A* search over any :class:`~roguekit.core.basemap.BaseMap`."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple
import logging
import math

from ..core.basemap import BaseMap
from ..core.distance import DistanceAlg
from ..core.point import Point

logger = logging.getLogger(__name__)


class InvalidCostError(ValueError):
    """Raised when a map reports a negative or non-finite step cost."""


def _check_cost(current: Point, neighbour: Point, step_cost: float) -> None:
    if not math.isfinite(step_cost) or step_cost < 0:
        raise InvalidCostError(
            f"Invalid step cost {step_cost!r} from {current} to {neighbour}"
        )


def _reconstruct(
    origin: Point, goal: Point, came_from: Dict[Point, Point]
) -> List[Point]:
    path: List[Point] = []
    current = goal
    while current != origin:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path


def a_star_search(
    origin: Point,
    goal: Point,
    game_map: BaseMap,
    heuristic: DistanceAlg = DistanceAlg.MANHATTAN,
) -> Optional[List[Point]]:
    """Return the cheapest path from ``origin`` to ``goal`` on ``game_map``.

    The returned list starts with the first step after ``origin`` and ends
    with ``goal``; it is empty when ``origin == goal``. ``None`` means the
    goal cannot be reached. The path is optimal as long as ``heuristic``
    never overestimates the remaining cost on ``game_map``.

    Frontier entries with equal f-score are expanded in insertion order.
    """

    cost_to_node: Dict[Point, float] = {origin: 0.0}
    came_from: Dict[Point, Point] = {}
    sequence = count()
    # (f, insertion order, g, point); the counter keeps Points out of comparisons
    open_list: List[Tuple[float, int, float, Point]] = []
    heappush(open_list, (0.0, next(sequence), 0.0, origin))
    expanded = 0

    while open_list:
        _, _, g, current = heappop(open_list)

        # Stale entry superseded by a cheaper route.
        if g > cost_to_node[current]:
            continue

        if current == goal:
            path = _reconstruct(origin, goal, came_from)
            logger.debug(
                "A* %s -> %s: %d steps, cost %.3f, %d nodes expanded",
                origin, goal, len(path), g, expanded,
            )
            return path

        expanded += 1
        for neighbour, step_cost in game_map.neighbours(current):
            _check_cost(current, neighbour, step_cost)
            cost = g + step_cost
            if neighbour not in cost_to_node or cost < cost_to_node[neighbour]:
                f = cost + heuristic.distance(neighbour, goal)
                if not math.isfinite(f):
                    raise InvalidCostError(
                        f"Non-finite f-score {f!r} for {neighbour}"
                    )
                cost_to_node[neighbour] = cost
                came_from[neighbour] = current
                heappush(open_list, (f, next(sequence), cost, neighbour))

    logger.debug(
        "A* %s -> %s: no path, frontier exhausted after %d nodes expanded",
        origin, goal, expanded,
    )
    return None


__all__ = ["InvalidCostError", "a_star_search"]
