"""Tests for the shortest-path query."""

from __future__ import annotations

import logging
import math

import pytest

from algorithms import SHORTEST_PATH, dijkstra_distances, path_weight, reconstruct_path, shortest_path
from graph import Graph


def _graph(n: int, edges=()) -> Graph:
    g = Graph()
    for _ in range(n):
        g.add_vertex()
    for source, target, weight, directed in edges:
        g.add_edge(source, target, weight, directed)
    return g


@pytest.fixture
def weighted() -> Graph:
    #   0 --1-- 1 --1-- 2
    #    \_____10______/
    return _graph(3, [(0, 1, 1.0, False), (1, 2, 1.0, False), (0, 2, 10.0, False)])


class TestShortestPath:
    def test_prefers_lighter_detour(self, weighted: Graph) -> None:
        assert shortest_path(weighted, 0, 2) == [0, 1, 2]
        assert path_weight(weighted, [0, 1, 2]) == 2.0

    def test_undirected_walks_both_ways(self, weighted: Graph) -> None:
        assert shortest_path(weighted, 2, 0) == [2, 1, 0]

    def test_same_vertex(self, weighted: Graph) -> None:
        assert shortest_path(weighted, 1, 1) == [1]

    def test_isolated_same_vertex(self) -> None:
        assert shortest_path(_graph(1), 0, 0) == [0]

    def test_no_path(self) -> None:
        assert shortest_path(_graph(2), 0, 1) == []

    def test_directed_edges_are_one_way(self) -> None:
        g = _graph(2, [(0, 1, 3.0, True)])
        assert shortest_path(g, 0, 1) == [0, 1]
        assert shortest_path(g, 1, 0) == []

    @pytest.mark.parametrize("start,end", [(-1, 0), (0, 3), (3, 3), (None, 0), ("0", 1)])
    def test_invalid_endpoints(self, weighted: Graph, start, end) -> None:
        assert shortest_path(weighted, start, end) == []

    def test_zero_weight_edges(self) -> None:
        g = _graph(3, [(0, 1, 0.0, False), (1, 2, 0.0, False), (0, 2, 1.0, False)])
        path = shortest_path(g, 0, 2)
        assert path_weight(g, path) == 0.0
        assert path == [0, 1, 2]

    def test_path_weight_matches_distance(self) -> None:
        g = _graph(5, [
            (0, 1, 2.0, False), (0, 2, 6.0, False), (1, 2, 3.0, False),
            (1, 3, 5.0, False), (2, 3, 1.0, False), (3, 4, 4.0, False),
        ])
        dist, _ = dijkstra_distances(g, 0)
        for target in range(5):
            path = shortest_path(g, 0, target)
            assert path[0] == 0 and path[-1] == target
            assert path_weight(g, path) == pytest.approx(dist[target])

    @pytest.mark.parametrize("bad_weight", [math.nan, math.inf, -1.0])
    def test_record_with_invalid_weight_is_skipped(self, bad_weight: float) -> None:
        g = _graph(3, [(0, 1, 1.0, True), (1, 2, 1.0, True), (0, 2, 5.0, True)])
        g.get_edge(0, 1).weight = bad_weight
        assert shortest_path(g, 0, 2) == [0, 2]

    @pytest.mark.parametrize("bad_weight", [math.nan, math.inf, -1.0])
    def test_only_route_with_invalid_weight_gives_no_path(self, bad_weight: float) -> None:
        g = _graph(2, [(0, 1, 1.0, True)])
        g.get_edge(0, 1).weight = bad_weight
        assert shortest_path(g, 0, 1) == []

    def test_metadata_card_points_at_query(self) -> None:
        assert SHORTEST_PATH.fn is shortest_path
        assert SHORTEST_PATH.pseudocode


class TestDistances:
    def test_unreachable_is_infinite(self) -> None:
        dist, previous = dijkstra_distances(_graph(3, [(0, 1, 2.0, True)]), 0)
        assert dist[:2] == [0.0, 2.0]
        assert math.isinf(dist[2])
        assert previous == [None, 0, None]

    def test_invalid_start(self) -> None:
        assert dijkstra_distances(_graph(2), 5) == ([], [])


class TestReconstructPath:
    def test_simple_chain(self) -> None:
        assert reconstruct_path([None, 0, 1], 0, 2) == [0, 1, 2]

    def test_cycle_in_predecessors_gives_empty(self, caplog) -> None:
        with caplog.at_level(logging.WARNING):
            assert reconstruct_path([None, 2, 1], 0, 2) == []
        assert "exceeds" in caplog.text

    def test_out_of_range_predecessor(self) -> None:
        assert reconstruct_path([None, 7], 0, 1) == []

    def test_chain_not_ending_at_start(self) -> None:
        assert reconstruct_path([None, None, 1], 0, 2) == []
