"""Tests for the SVG renderer and the UI panels."""

from __future__ import annotations

import math

from algorithms import SHORTEST_PATH
from formats import from_adjacency_matrix
from graph import Graph
from ui import (
    CanvasConfig,
    SvgRenderer,
    arrange_on_circle,
    graph_info_panel,
    path_result_panel,
    pseudocode_viewer,
    render_canvas,
    vertex_selector,
    visible_edges,
)


def _graph(n: int) -> Graph:
    g = Graph()
    for _ in range(n):
        g.add_vertex()
    return g


class TestVisibleEdges:
    def test_undirected_pair_is_one_line_without_arrow(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 3.0)
        assert [(e.key, arrow) for e, arrow in visible_edges(g)] == [((0, 1), False)]

    def test_directed_edge_has_arrow(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 3.0, directed=True)
        assert [(e.key, arrow) for e, arrow in visible_edges(g)] == [((0, 1), True)]

    def test_reciprocal_same_weight_is_one_line(self) -> None:
        g = _graph(2)
        g.add_edge(0, 1, 3.0, directed=True)
        g.add_edge(1, 0, 3.0, directed=True)
        assert len(visible_edges(g)) == 1
        assert visible_edges(g)[0][1] is False

    def test_reciprocal_different_weight_is_two_arrows(self) -> None:
        g = from_adjacency_matrix([[0, 2], [5, 0]])
        drawn = visible_edges(g)
        assert len(drawn) == 2
        assert all(arrow for _, arrow in drawn)

    def test_self_loop_is_not_drawn(self) -> None:
        g = _graph(1)
        g.add_edge(0, 0, 1.0)
        assert visible_edges(g) == []


class TestLayout:
    def test_circle_layout(self) -> None:
        config = CanvasConfig()
        g = _graph(4)
        arrange_on_circle(g, config)
        radius = min(config.layout_max_radius, 4 * config.layout_radius_per_vertex)
        for v in g.vertices:
            d = math.hypot(v.x - config.layout_center_x, v.y - config.layout_center_y)
            assert math.isclose(d, radius)

    def test_renderer_lays_out_new_vertices(self) -> None:
        renderer = SvgRenderer()
        g = _graph(3)
        renderer.render(g, [])
        assert renderer.layout_count == 3
        assert not all(v.x == 0 and v.y == 0 for v in g.vertices)

    def test_renderer_keeps_dragged_positions(self) -> None:
        renderer = SvgRenderer()
        g = _graph(3)
        renderer.render(g, [])
        g.move_vertex(0, 11.0, 22.0)
        renderer.render(g, [])
        assert (g.vertices[0].x, g.vertices[0].y) == (11.0, 22.0)

    def test_imported_graph_of_same_size_is_laid_out(self) -> None:
        renderer = SvgRenderer(layout_count=2)
        g = from_adjacency_matrix([[0, 1], [1, 0]])
        assert renderer.needs_layout(g)


class TestRenderCanvas:
    def test_svg_contains_vertices_and_weights(self) -> None:
        g = _graph(2)
        arrange_on_circle(g)
        g.add_edge(0, 1, 2.5)
        svg = render_canvas(g)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert svg.count('class="vertex"') == 2
        assert svg.count('class="edge"') == 1
        assert ">2.5<" in svg

    def test_highlighted_vertices(self) -> None:
        g = _graph(3)
        arrange_on_circle(g)
        g.add_edge(0, 1, 1.0)
        svg = render_canvas(g, [0, 1])
        assert svg.count('class="vertex path"') == 2
        assert CanvasConfig.path_edge_color in svg

    def test_vertex_names_are_escaped(self) -> None:
        g = Graph()
        g.add_vertex("<b>x</b>")
        svg = render_canvas(g)
        assert "<b>" not in svg
        assert "&lt;b&gt;" in svg


class TestPanels:
    def test_vertex_selector(self) -> None:
        html = vertex_selector("start-vertex", ["A", "B"], 1)
        assert '<option value="0" >0: A</option>' in html
        assert '<option value="1" selected>1: B</option>' in html

    def test_empty_vertex_selector_is_disabled(self) -> None:
        assert "disabled" in vertex_selector("x", [])

    def test_graph_info(self) -> None:
        assert "Directed" in graph_info_panel(2, 1, True)
        assert "Undirected" in graph_info_panel(2, 2, False)

    def test_path_result(self) -> None:
        assert "Path: 0 → 1 → 2" in path_result_panel([0, 1, 2], 0, 2, 2.0)
        assert "Total weight: 2" in path_result_panel([0, 1, 2], 0, 2, 2.0)
        assert "No path between 0 and 3" in path_result_panel([], 0, 3)
        assert "No path selected" in path_result_panel([])

    def test_pseudocode_viewer(self) -> None:
        html = pseudocode_viewer(SHORTEST_PATH)
        assert html.count('class="code-line"') == len(SHORTEST_PATH.pseudocode)
        assert f"Time {SHORTEST_PATH.complexity_time}" in html
        assert f"Space {SHORTEST_PATH.complexity_space}" in html
        for tag in SHORTEST_PATH.tags:
            assert f'<span class="tag">{tag}</span>' in html
