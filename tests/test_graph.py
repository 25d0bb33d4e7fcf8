"""Unit tests for the Graph container: vertices, edge upsert, directedness."""

from __future__ import annotations

import math

import pytest

from graph import Graph, InvalidVertexReference, InvalidWeight, weights_equal


def _graph(n: int) -> Graph:
    g = Graph()
    for _ in range(n):
        g.add_vertex()
    return g


# ── Vertices ────────────────────────────────────────────────────────


class TestVertices:
    @pytest.mark.parametrize("n", [0, 1, 5, 20])
    def test_ids_are_dense_in_call_order(self, n: int) -> None:
        g = _graph(n)
        assert g.vertex_ids() == list(range(n))
        assert [v.id for v in g.vertices] == list(range(n))

    def test_new_vertex_sits_at_origin_with_default_name(self) -> None:
        v = Graph().add_vertex()
        assert (v.x, v.y) == (0.0, 0.0)
        assert v.name == "V0"

    def test_custom_name_is_kept(self) -> None:
        g = Graph()
        g.add_vertex()
        assert g.add_vertex("Berlin").name == "Berlin"
        assert g.vertex_names() == ["V0", "Berlin"]

    def test_position_survives_edge_mutation(self) -> None:
        g = _graph(2)
        g.move_vertex(1, 42.0, 7.5)
        g.add_edge(0, 1, 3.0)
        assert (g.vertices[1].x, g.vertices[1].y) == (42.0, 7.5)

    def test_move_unknown_vertex_raises(self) -> None:
        with pytest.raises(InvalidVertexReference):
            _graph(1).move_vertex(3, 1.0, 1.0)


# ── Edges ───────────────────────────────────────────────────────────


class TestAddEdge:
    def test_undirected_edge_is_reachable_from_both_ends(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 2.5, directed=False)
        adj = g.adjacency_list()
        assert (1, 2.5) in adj[0]
        assert (0, 2.5) in adj[1]
        assert g.edge_count() == 2
        assert all(not e.directed for e in g.edges)

    def test_directed_edge_creates_single_record(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 4.0, directed=True)
        assert g.edge_count() == 1
        assert g.adjacency_list()[1] == []

    def test_same_pair_updates_instead_of_duplicating(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 1.0, directed=True)
        g.add_edge(0, 1, 9.0, directed=True)
        assert g.edge_count() == 1
        assert g.get_edge(0, 1).weight == 9.0

    def test_undirected_update_keeps_both_halves_in_sync(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 1.0)
        g.add_edge(1, 0, 6.0)
        assert g.edge_count() == 2
        assert g.get_edge(0, 1).weight == 6.0
        assert g.get_edge(1, 0).weight == 6.0

    def test_undirected_over_existing_directed_reverse(self) -> None:
        g = _graph(2)
        g.add_edge(1, 0, 3.0, directed=True)
        g.add_edge(0, 1, 5.0, directed=False)
        reverse = g.get_edge(1, 0)
        assert reverse.weight == 5.0
        assert reverse.directed is False
        assert g.edge_count() == 2

    def test_directed_update_flips_flag_in_place(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 1.0)
        g.add_edge(0, 1, 1.0, directed=True)
        assert g.get_edge(0, 1).directed is True
        assert g.edge_count() == 2

    def test_self_loop_is_a_single_record(self) -> None:
        g = _graph(1)
        g.add_edge(0, 0, 2.0, directed=False)
        assert g.edge_count() == 1
        assert g.get_edge(0, 0).weight == 2.0

    @pytest.mark.parametrize("source,target", [(-1, 0), (0, 2), (5, 5), ("0", 1), (True, 1), (0.0, 1)])
    def test_out_of_range_endpoint_raises(self, source, target) -> None:
        g = _graph(2)
        with pytest.raises(InvalidVertexReference):
            g.add_edge(source, target, 1.0)
        assert g.edge_count() == 0

    @pytest.mark.parametrize("weight", [-1, -0.5, math.nan, math.inf, -math.inf, "3", None])
    def test_invalid_weight_raises_and_leaves_graph_unchanged(self, weight) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 2.0)
        before = g.to_dict()
        with pytest.raises(InvalidWeight):
            g.add_edge(0, 1, weight)
        assert g.to_dict() == before

    def test_zero_weight_is_allowed(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 0, directed=True)
        assert g.get_edge(0, 1).weight == 0.0

    def test_edge_weight_reads_undirected_reverse(self) -> None:
        g = _graph(3)
        g.add_edge(0, 1, 2.0)
        g.add_edge(1, 2, 7.0, directed=True)
        assert g.edge_weight(1, 0) == 2.0
        assert g.edge_weight(1, 2) == 7.0
        assert g.edge_weight(2, 1) == 0.0


# ── Adjacency views ─────────────────────────────────────────────────


class TestAdjacencyViews:
    def test_matrix_reflects_current_edges(self) -> None:
        g = _graph(3)
        g.add_edge(0, 1, 2.0)
        g.add_edge(1, 2, 5.0, directed=True)
        assert g.adjacency_matrix() == [
            [0.0, 2.0, 0.0],
            [2.0, 0.0, 5.0],
            [0.0, 0.0, 0.0],
        ]

    def test_matrix_is_not_stale_after_update(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 1.0)
        g.adjacency_matrix()
        g.add_edge(0, 1, 8.0)
        assert g.adjacency_matrix()[1][0] == 8.0

    def test_list_has_every_vertex(self) -> None:
        g = _graph(3)
        g.add_edge(0, 2, 1.0, directed=True)
        assert g.adjacency_list() == {0: [(2, 1.0)], 1: [], 2: []}

    def test_outgoing_only_returns_edges_from_vertex(self) -> None:
        g = _graph(3)
        g.add_edge(0, 1, 1.0, directed=True)
        g.add_edge(2, 0, 1.0, directed=True)
        assert [e.target for e in g.outgoing(0)] == [1]


# ── Directedness ────────────────────────────────────────────────────


class TestIsDirected:
    def test_empty_graph_is_undirected(self) -> None:
        assert _graph(3).is_directed() is False

    def test_undirected_edges_only(self) -> None:
        g = _graph(3)
        g.add_edge(0, 1, 1.0)
        g.add_edge(1, 2, 2.0)
        assert g.is_directed() is False

    def test_any_directed_record_makes_graph_directed(self) -> None:
        g = _graph(3)
        g.add_edge(0, 1, 1.0)
        g.add_edge(1, 2, 2.0, directed=True)
        assert g.is_directed() is True

    def test_asymmetric_weights_make_graph_directed(self) -> None:
        g = Graph.from_dict({
            "vertices": [{"id": 0}, {"id": 1}],
            "edges": [
                {"source": 0, "target": 1, "weight": 1.0, "directed": False},
                {"source": 1, "target": 0, "weight": 2.0, "directed": False},
            ],
        })
        assert g.is_directed() is True

    def test_missing_partner_makes_graph_directed(self) -> None:
        g = Graph.from_dict({
            "vertices": [{"id": 0}, {"id": 1}],
            "edges": [{"source": 0, "target": 1, "weight": 1.0, "directed": False}],
        })
        assert g.is_directed() is True

    def test_weights_within_tolerance_are_symmetric(self) -> None:
        g = Graph.from_dict({
            "vertices": [{"id": 0}, {"id": 1}],
            "edges": [
                {"source": 0, "target": 1, "weight": 1.0, "directed": False},
                {"source": 1, "target": 0, "weight": 1.00005, "directed": False},
            ],
        })
        assert g.is_directed() is False

    def test_weights_equal_tolerance(self) -> None:
        assert weights_equal(1.0, 1.00009)
        assert not weights_equal(1.0, 1.001)


# ── Serialisation ───────────────────────────────────────────────────


class TestSerialisation:
    def test_round_trip_keeps_positions_and_flags(self) -> None:
        g = _graph(3)
        g.move_vertex(2, 10.0, 20.0)
        g.add_edge(0, 1, 1.5)
        g.add_edge(1, 2, 3.0, directed=True)
        restored = Graph.from_dict(g.to_dict())
        assert restored.to_dict() == g.to_dict()
        assert restored.get_edge(1, 2).directed is True

    def test_corrupt_payload_fails_fast(self) -> None:
        with pytest.raises(InvalidVertexReference):
            Graph.from_dict({
                "vertices": [{"id": 0}],
                "edges": [{"source": 0, "target": 4, "weight": 1.0}],
            })

    def test_clear_resets_everything(self) -> None:
        g = _graph(3)
        g.add_edge(0, 1, 1.0)
        g.clear()
        assert g.vertex_count() == 0
        assert g.edge_count() == 0
        assert g.add_vertex().id == 0
