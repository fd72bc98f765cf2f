# roguekit/gui/renderer.py
"""Renderer drawing a grid map and a path onto a :class:`Window`."""

from __future__ import annotations

from typing import Any, Iterable, Optional

import pygame

from ..config import CONFIG
from ..core.point import Point
from ..maps.grid_map import WALL, GridMap

# Define colors for tiles
TILE_COLOR_MAP = {
    "floor": (70, 70, 70),
    "rough": (110, 90, 50),     # Brownish for costly floor
    "wall": (30, 30, 40),
    "path": (200, 180, 50),
    "origin": (80, 200, 80),
    "goal": (220, 70, 70),
}
TEXT_COLOR = (200, 200, 200)
PAN_STEP = 1
STATUS_HEIGHT = 24


class PathRenderer:
    """Draw tiles, a path and its endpoints through ``window``."""

    def __init__(self, window: Any, tile_size: int | None = None) -> None:
        self.window = window
        self.tile_size: int = tile_size if tile_size is not None else CONFIG.gui.tile_size
        self.min_tile_size = 4
        self.max_tile_size = 64
        # Camera offset in tiles
        self.offset_x = 0
        self.offset_y = 0

    def pan(self, dx: int, dy: int) -> None:
        self.offset_x += dx
        self.offset_y += dy

    def zoom(self, steps: int) -> None:
        self.tile_size = max(
            self.min_tile_size, min(self.tile_size + 2 * steps, self.max_tile_size)
        )

    def world_to_screen(self, point: Point) -> tuple[int, int]:
        return (
            (point.x - self.offset_x) * self.tile_size,
            (point.y - self.offset_y) * self.tile_size,
        )

    def handle_events(self, events: Iterable[Any]) -> bool:
        """Apply pan/zoom input; return ``False`` once the window should close."""

        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_LEFT:
                    self.pan(-PAN_STEP, 0)
                elif event.key == pygame.K_RIGHT:
                    self.pan(PAN_STEP, 0)
                elif event.key == pygame.K_UP:
                    self.pan(0, -PAN_STEP)
                elif event.key == pygame.K_DOWN:
                    self.pan(0, PAN_STEP)
            elif event.type == pygame.MOUSEWHEEL:
                self.zoom(event.y)
        return True

    def draw(
        self,
        grid_map: GridMap,
        path: Optional[Iterable[Point]] = None,
        origin: Optional[Point] = None,
        goal: Optional[Point] = None,
    ) -> None:
        steps = list(path or ())
        on_path = set(steps)
        self.window.clear()
        for point in grid_map.points():
            if point == origin:
                colour = TILE_COLOR_MAP["origin"]
            elif point == goal:
                colour = TILE_COLOR_MAP["goal"]
            elif point in on_path:
                colour = TILE_COLOR_MAP["path"]
            else:
                cost = grid_map.cost_at(point)
                if cost == WALL:
                    colour = TILE_COLOR_MAP["wall"]
                elif cost > 1:
                    colour = TILE_COLOR_MAP["rough"]
                else:
                    colour = TILE_COLOR_MAP["floor"]
            x, y = self.world_to_screen(point)
            # 1px gap between tiles
            self.window.draw_tile(x, y, max(1, self.tile_size - 1), colour)

        if path is None:
            status = "No path"
        else:
            status = f"Path: {len(steps)} steps"
        # Status bar along the bottom edge; the window does not resize on zoom
        self.window.draw_text(status, 5, self.window.size[1] - STATUS_HEIGHT + 2, TEXT_COLOR)
        self.window.refresh()


__all__ = ["PathRenderer", "STATUS_HEIGHT", "TILE_COLOR_MAP"]
