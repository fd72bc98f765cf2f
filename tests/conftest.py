# tests/conftest.py
from pathlib import Path

import pytest

from roguekit.maps.grid_map import GridMap

REPO_ROOT = Path(__file__).resolve().parents[1]
MAPS_DIR = REPO_ROOT / "data" / "maps"

# 0 = floor (cost 1), 1 = wall
SIMPLE_PREFAB = [
    [0, 0, 0, 1, 0],
    [0, 1, 0, 0, 1],
    [1, 1, 1, 0, 1],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 1],
]


@pytest.fixture
def simple_map() -> GridMap:
    """Fresh 5x5 map with diagonal movement; safe to mutate per test."""
    return GridMap.from_prefab(SIMPLE_PREFAB)


@pytest.fixture
def maps_dir() -> Path:
    return MAPS_DIR
