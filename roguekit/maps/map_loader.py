"""Load :class:`GridMap` instances from YAML map files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import logging
import math

import yaml

from ..config import CONFIG
from .grid_map import WALL, GridMap

logger = logging.getLogger(__name__)

DEFAULT_LEGEND: Dict[str, Any] = {".": 1, "#": "wall"}


class MapFormatError(ValueError):
    """Raised when a map file cannot be turned into a :class:`GridMap`."""


def _legend_cost(glyph: str, value: Any) -> float:
    if isinstance(value, str) and value.lower() == "wall":
        return WALL
    try:
        cost = float(value)
    except (TypeError, ValueError):
        raise MapFormatError(f"legend entry {glyph!r} has invalid cost {value!r}") from None
    if math.isnan(cost) or cost < 0:
        raise MapFormatError(f"legend entry {glyph!r} has invalid cost {value!r}")
    return cost


def parse_grid_map(
    data: Any,
    *,
    diagonal: Optional[bool] = None,
    default_diagonal: Optional[bool] = None,
) -> GridMap:
    """Build a :class:`GridMap` from an already parsed YAML document.

    Connectivity comes from ``diagonal`` if given, else the document's own
    ``diagonal`` key, else ``default_diagonal``, else
    ``CONFIG.pathfinding.diagonal``.
    """

    if not isinstance(data, dict):
        raise MapFormatError("map document must be a mapping")

    rows = data.get("rows")
    if not rows or not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        raise MapFormatError("'rows' must be a non-empty list of strings")

    raw_legend = data.get("legend") or DEFAULT_LEGEND
    if not isinstance(raw_legend, dict):
        raise MapFormatError("'legend' must be a mapping of glyph to cost")
    legend: Dict[str, float] = {}
    for glyph, value in raw_legend.items():
        glyph = str(glyph)
        if len(glyph) != 1:
            raise MapFormatError(f"legend glyph {glyph!r} must be a single character")
        legend[glyph] = _legend_cost(glyph, value)

    if diagonal is None:
        if default_diagonal is None:
            default_diagonal = CONFIG.pathfinding.diagonal
        diagonal = bool(data.get("diagonal", default_diagonal))

    try:
        grid = GridMap.from_ascii(rows, legend, diagonal=diagonal)
    except ValueError as exc:
        raise MapFormatError(str(exc)) from exc

    opaque = data.get("opaque")
    if opaque is not None:
        opaque_glyphs = {str(g) for g in opaque}
        for point in grid.points():
            glyph = rows[point.y][point.x]
            if glyph in opaque_glyphs:
                grid.set_transparent(point, False)
            elif grid.is_wall(point):
                grid.set_transparent(point, True)
    return grid


def load_grid_map(
    path: str | Path,
    *,
    diagonal: Optional[bool] = None,
    default_diagonal: Optional[bool] = None,
) -> GridMap:
    """Read ``path`` and return the :class:`GridMap` it describes."""

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise MapFormatError(f"{path}: invalid YAML: {exc}") from exc
    grid = parse_grid_map(data, diagonal=diagonal, default_diagonal=default_diagonal)
    logger.info(
        "Loaded %dx%d map from %s (diagonal=%s)",
        grid.width, grid.height, path, grid.diagonal,
    )
    return grid


__all__ = ["MapFormatError", "load_grid_map", "parse_grid_map", "DEFAULT_LEGEND"]
