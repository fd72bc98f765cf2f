import math

import pytest

from roguekit.core.basemap import BaseMap
from roguekit.core.point import Point
from roguekit.maps.graph_map import GraphMap


def test_bidirectional_edges():
    graph = GraphMap()
    graph.add_edge(Point(0, 0), Point(3, 4), 2.0)
    assert graph.neighbours(Point(0, 0)) == [(Point(3, 4), 2.0)]
    assert graph.neighbours(Point(3, 4)) == [(Point(0, 0), 2.0)]
    assert set(graph.nodes()) == {Point(0, 0), Point(3, 4)}
    assert isinstance(graph, BaseMap)


def test_one_way_edge():
    graph = GraphMap()
    graph.add_edge(Point(0, 0), Point(1, 0), bidirectional=False)
    assert graph.neighbours(Point(1, 0)) == []
    assert graph.neighbours(Point(7, 7)) == []


@pytest.mark.parametrize("cost", [-0.5, math.inf, math.nan])
def test_rejects_invalid_costs(cost):
    with pytest.raises(ValueError):
        GraphMap().add_edge(Point(0, 0), Point(1, 0), cost)


def test_opacity():
    graph = GraphMap()
    assert graph.is_transparent(Point(2, 2))
    graph.set_opaque(Point(2, 2))
    assert not graph.is_transparent(Point(2, 2))
    graph.set_opaque(Point(2, 2), False)
    assert graph.is_transparent(Point(2, 2))


def test_neighbours_returns_copy():
    graph = GraphMap()
    graph.add_edge(Point(0, 0), Point(1, 0))
    graph.neighbours(Point(0, 0)).clear()
    assert graph.neighbours(Point(0, 0)) == [(Point(1, 0), 1.0)]
