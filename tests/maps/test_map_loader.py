from pathlib import Path

import pytest
import yaml

from roguekit.core.point import Point
from roguekit.maps.grid_map import WALL
from roguekit.maps.map_loader import MapFormatError, load_grid_map, parse_grid_map
from roguekit.systems.pathfinding import a_star_search


def test_bundled_map_matches_fixture(maps_dir: Path, simple_map):
    grid = load_grid_map(maps_dir / "walled_5x5.yaml")
    assert grid.diagonal
    for point in simple_map.points():
        assert grid.cost_at(point) == simple_map.cost_at(point)
    assert len(a_star_search(Point(1, 3), Point(0, 0), grid)) == 6


def test_swamp_route_avoids_water(maps_dir: Path):
    grid = load_grid_map(maps_dir / "swamp.yaml")
    assert not grid.diagonal
    assert grid.cost_at(Point(5, 1)) == 5
    assert grid.is_wall(Point(2, 2))
    assert not grid.is_transparent(Point(2, 2))

    path = a_star_search(Point(1, 1), Point(8, 1), grid)
    assert path is not None
    assert sum(grid.cost_at(p) for p in path) == 13
    assert all(grid.cost_at(p) == 1 for p in path)


def test_default_legend_and_diagonal_override():
    grid = parse_grid_map({"rows": ["..", "#."]}, diagonal=False)
    assert grid.is_wall(Point(0, 1))
    assert not grid.diagonal


def test_default_diagonal_used_when_document_is_silent():
    assert not parse_grid_map({"rows": ["."]}, default_diagonal=False).diagonal
    assert parse_grid_map({"rows": ["."], "diagonal": True}, default_diagonal=False).diagonal


def test_opaque_glyphs_override_wall_transparency():
    data = {
        "legend": {".": 1, "#": "wall", "=": "wall"},
        "opaque": ["#"],
        "rows": [".#="],
    }
    grid = parse_grid_map(data)
    assert grid.cost_at(Point(2, 0)) == WALL
    assert grid.is_transparent(Point(2, 0))
    assert not grid.is_transparent(Point(1, 0))
    assert grid.is_transparent(Point(0, 0))


@pytest.mark.parametrize(
    "data",
    [
        [],
        {},
        {"rows": []},
        {"rows": ["..", "."]},
        {"rows": [".?"]},
        {"rows": ["."], "legend": {".": -1}},
        {"rows": ["."], "legend": {".": "soft"}},
        {"rows": ["."], "legend": {"..": 1}},
    ],
)
def test_malformed_documents(data):
    with pytest.raises(MapFormatError):
        parse_grid_map(data)


def test_invalid_yaml_file(tmp_path: Path):
    path = tmp_path / "broken.yaml"
    path.write_text("rows: [\n")
    with pytest.raises(MapFormatError):
        load_grid_map(path)


def test_round_trip_through_file(tmp_path: Path):
    path = tmp_path / "tiny.yaml"
    path.write_text(yaml.safe_dump({"diagonal": False, "rows": ["...", ".#."]}))
    grid = load_grid_map(path)
    assert (grid.width, grid.height) == (3, 2)
    assert grid.is_wall(Point(1, 1))
