"""
Unit tests for LazyDijkstraEngine using AdjacencyListGraph.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import LazyDijkstraEngine

NETWORK_DELAY_EDGES = [
    (0, 1, 9),
    (0, 3, 2),
    (1, 4, 1),
    (3, 1, 4),
    (3, 4, 6),
    (2, 1, 3),
    (4, 2, 7),
    (2, 0, 5),
]


def test_shortest_path_reports_max_distance_and_visit_order():
    g = AdjacencyListGraph(5, NETWORK_DELAY_EDGES)
    engine = LazyDijkstraEngine()

    max_distance, visit_order = engine.shortest_path(g, 0)

    assert max_distance == 14
    assert visit_order[0] == 0
    assert sorted(visit_order) == [0, 1, 2, 3, 4]
    # Settled in non-decreasing distance order: 0, 3 (2), 1 (6), 4 (7), 2 (14).
    assert visit_order == [0, 3, 1, 4, 2]


def test_shortest_path_from_other_source():
    g = AdjacencyListGraph(5, NETWORK_DELAY_EDGES)

    result = LazyDijkstraEngine().shortest_path(g, 2)

    assert result.max_distance == 7
    assert result.visit_order == [2, 1, 4, 0, 3]


def test_costs_for_every_node():
    g = AdjacencyListGraph(5, NETWORK_DELAY_EDGES)

    dist = LazyDijkstraEngine().shortest_path_costs(g, 0)

    assert dist == [0, 6, 14, 2, 7]


def test_isolated_node_is_never_settled():
    g = AdjacencyListGraph(6, NETWORK_DELAY_EDGES)
    engine = LazyDijkstraEngine()

    max_distance, visit_order = engine.shortest_path(g, 0)
    dist = engine.shortest_path_costs(g, 0)

    assert 5 not in visit_order
    assert dist[5] == math.inf
    # Maximum is taken over finite distances only.
    assert max_distance == 14


def test_single_node_graph():
    g = AdjacencyListGraph(1)

    result = LazyDijkstraEngine().shortest_path(g, 0)

    assert result == (0, [0])


def test_source_with_no_outgoing_edges():
    g = AdjacencyListGraph(3, [(1, 0, 4), (2, 0, 1)])

    max_distance, visit_order = LazyDijkstraEngine().shortest_path(g, 0)

    assert max_distance == 0
    assert visit_order == [0]


def test_stale_entries_are_discarded():
    """Node 2 is pushed twice (via 0 then via 1) but settled once."""
    g = AdjacencyListGraph(3, [(0, 2, 10), (0, 1, 1), (1, 2, 1)])

    max_distance, visit_order = LazyDijkstraEngine().shortest_path(g, 0)

    assert max_distance == 2
    assert visit_order == [0, 1, 2]


def test_duplicate_edges_use_cheapest():
    g = AdjacencyListGraph(2, [(0, 1, 5), (0, 1, 3), (0, 0, 0)])

    dist = LazyDijkstraEngine().shortest_path_costs(g, 0)

    assert dist == [0, 3]


def test_float_weights():
    g = AdjacencyListGraph(3, [(0, 1, 1.5), (1, 2, 2.25)])

    max_distance, _ = LazyDijkstraEngine().shortest_path(g, 0)

    assert max_distance == pytest.approx(3.75)


def test_predecessors_and_path_reconstruction():
    g = AdjacencyListGraph(6, NETWORK_DELAY_EDGES)
    engine = LazyDijkstraEngine()

    dist, prev = engine.shortest_paths(g, 0)

    assert dist[2] == 14
    assert 0 not in prev
    assert 5 not in prev
    assert prev == {1: 3, 3: 0, 4: 1, 2: 4}

    assert engine.path_to(g, 0, 2) == [0, 3, 1, 4, 2]
    assert engine.path_to(g, 0, 0) == [0]
    assert engine.path_to(g, 0, 5) is None


def test_runs_are_independent():
    g = AdjacencyListGraph(5, NETWORK_DELAY_EDGES)
    engine = LazyDijkstraEngine()

    first = engine.shortest_path(g, 0)
    engine.shortest_path(g, 2)
    again = engine.shortest_path(g, 0)

    assert first == again


def test_source_out_of_range():
    g = AdjacencyListGraph(5, NETWORK_DELAY_EDGES)
    engine = LazyDijkstraEngine()

    with pytest.raises(IndexError):
        engine.shortest_path(g, 5)
    with pytest.raises(IndexError):
        engine.shortest_path(AdjacencyListGraph(0), 0)


def test_path_to_target_out_of_range():
    g = AdjacencyListGraph(3, [(0, 1, 1), (1, 2, 1)])
    engine = LazyDijkstraEngine()

    with pytest.raises(IndexError):
        engine.path_to(g, 0, -1)
    with pytest.raises(IndexError):
        engine.path_to(g, 0, 3)


def test_negative_source_rejected():
    g = AdjacencyListGraph(3, [(0, 1, 1)])

    with pytest.raises(IndexError):
        LazyDijkstraEngine().shortest_path(g, -1)
