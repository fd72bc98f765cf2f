"""ASCII terminal renderer for grid maps and paths."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from ...core.point import Point
from ...maps.grid_map import WALL, GridMap


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPH_COLOURS = {
    "#": "blue",
    "*": "yellow",
    "@": "green",
    "X": "red",
}


class TerminalView:
    """Draw a :class:`GridMap` with an optional path overlaid."""

    def __init__(self, colour: bool = True) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(
        self,
        grid_map: GridMap,
        path: Optional[Iterable[Point]] = None,
        origin: Optional[Point] = None,
        goal: Optional[Point] = None,
    ) -> str:
        """Return the map as text, one line per row."""

        on_path = set(path or ())
        lines: list[str] = []
        for y in range(grid_map.height):
            row: list[str] = []
            for x in range(grid_map.width):
                point = Point(x, y)
                if point == origin:
                    glyph = "@"
                elif point == goal:
                    glyph = "X"
                elif point in on_path:
                    glyph = "*"
                else:
                    glyph = _tile_glyph(grid_map.cost_at(point))
                row.append(self._paint(glyph))
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return "\n".join(lines)

    def show(
        self,
        grid_map: GridMap,
        path: Optional[Iterable[Point]] = None,
        origin: Optional[Point] = None,
        goal: Optional[Point] = None,
    ) -> None:
        """Write :meth:`render` output to ``stdout``."""

        sys.stdout.write(self.render(grid_map, path, origin, goal) + "\n")
        sys.stdout.flush()

    def _paint(self, glyph: str) -> str:
        if not self.colour:
            return glyph
        colour = _GLYPH_COLOURS.get(glyph, "white")
        return f"{_COLOURS[colour]}{glyph}"


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _tile_glyph(cost: float) -> str:
    if cost == WALL:
        return "#"
    if cost <= 1:
        return "."
    return str(min(int(cost), 9))


__all__ = ["TerminalView"]
