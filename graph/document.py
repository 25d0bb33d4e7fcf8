"""
document.py — Editable Graph Document
======================================
What the UI actually holds: one Graph, the currently highlighted path,
and (optionally) something that can draw them.

The document is the only place that calls into the renderer.  The
renderer never calls back; it just gets `render(graph, highlight_path)`
after every change.  A renderer that blows up is logged and ignored so a
drawing bug can't take the editing session down with it.

Imports replace the graph wholesale and only on success: a ParseFailure
leaves the previous graph and highlight exactly as they were.
"""

import logging
from typing import Any, List, Optional, Protocol

from algorithms import path_weight, shortest_path
from formats import adjacency_list_text, adjacency_matrix_text, from_adjacency_list, from_matrix_text
from graph.edge import Edge
from graph.graph import Graph
from graph.vertex import Vertex

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, graph: Graph, highlight_path: List[int]) -> Any:
        ...


class GraphDocument:
    """
    Attributes:
        graph      : the Graph being edited
        highlight  : vertex ids of the highlighted path ([] = none)
        renderer   : optional Renderer, called after every change
    """

    def __init__(self, graph: Optional[Graph] = None, highlight: Optional[List[int]] = None,
                 renderer: Optional[Renderer] = None):
        self.graph:     Graph              = graph if graph is not None else Graph()
        self.highlight: List[int]          = list(highlight or [])
        self.renderer:  Optional[Renderer] = renderer

    # ==================================================================
    # MUTATION
    # ==================================================================
    def add_vertex(self, name: Optional[str] = None) -> Vertex:
        vertex = self.graph.add_vertex(name)
        self.redraw()
        return vertex

    def add_edge(self, source: int, target: int, weight: float = 1.0, directed: bool = False) -> Edge:
        """Errors from the graph propagate unchanged; nothing is redrawn on failure."""
        edge = self.graph.add_edge(source, target, weight, directed)
        self.redraw()
        return edge

    def move_vertex(self, vertex_id: int, x: float, y: float) -> Vertex:
        vertex = self.graph.move_vertex(vertex_id, x, y)
        self.redraw()
        return vertex

    def clear(self) -> None:
        self.graph.clear()
        self.highlight = []
        self.redraw()

    # ==================================================================
    # IMPORT
    # ==================================================================
    def load_matrix_text(self, text: str) -> Graph:
        return self._replace(from_matrix_text(text))

    def load_adjacency_list_text(self, text: str) -> Graph:
        return self._replace(from_adjacency_list(text))

    def _replace(self, graph: Graph) -> Graph:
        self.graph = graph
        self.highlight = []
        logger.info("Loaded %r", graph)
        self.redraw()
        return graph

    # ==================================================================
    # PATHS
    # ==================================================================
    def find_shortest_path(self, start: int, end: int) -> List[int]:
        """Query and highlight.  An empty result clears the highlight."""
        path = shortest_path(self.graph, start, end)
        self.highlight = path
        if path:
            logger.info("Shortest path %s -> %s: %s", start, end, " → ".join(map(str, path)))
        else:
            logger.info("No path %s -> %s", start, end)
        self.redraw()
        return path

    def highlight_weight(self) -> float:
        return path_weight(self.graph, self.highlight)

    def clear_path(self) -> None:
        self.highlight = []
        self.redraw()

    # ==================================================================
    # VIEWS
    # ==================================================================
    def matrix_text(self) -> str:
        return adjacency_matrix_text(self.graph)

    def list_text(self) -> str:
        return adjacency_list_text(self.graph)

    def summary(self) -> dict:
        return {
            "vertex_count": self.graph.vertex_count(),
            "edge_count":   self.graph.edge_count(),
            "directed":     self.graph.is_directed(),
        }

    def redraw(self) -> Any:
        if self.renderer is None:
            return None
        try:
            return self.renderer.render(self.graph, list(self.highlight))
        except Exception:
            logger.exception("Rendering failed; keeping the session alive")
            return None

    def __repr__(self) -> str:
        return f"GraphDocument({self.graph!r}, highlight={self.highlight})"
