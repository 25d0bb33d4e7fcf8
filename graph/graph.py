"""
graph.py — Graph Container
==========================
Single source of truth for the graph.  The parsers, the path finder and
the renderer all talk to this object.

Responsibilities:
  1. Vertex creation & edge add/update       (the only mutation paths)
  2. Adjacency queries                       (outgoing, matrix, list, …)
  3. Directedness inference                  (whole-graph, derived)
  4. Serialisation round-trip                (to_dict / from_dict)

Design decisions:
  - Vertices live in a list; a vertex id IS its index.  There is no
    per-vertex removal, only clear().
  - Edges live in an insertion-ordered list plus a dict keyed by
    (source, target) that is maintained incrementally, so "is there
    already a record for this pair" is O(1).
  - Directedness is NOT a stored flag.  is_directed() derives it from the
    current records every time it is asked.
"""

import logging
import math
from typing import Dict, Iterator, List, Optional, Tuple

from graph.edge import Edge
from graph.errors import InvalidVertexReference, InvalidWeight
from graph.vertex import Vertex

logger = logging.getLogger(__name__)

# Two weights closer than this are "the same weight" for symmetry purposes.
SYMMETRY_TOLERANCE = 1e-4


def weights_equal(a: float, b: float) -> bool:
    return abs(a - b) <= SYMMETRY_TOLERANCE


def is_valid_weight(weight) -> bool:
    """Finite, non-negative real number."""
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return False
    return math.isfinite(weight) and weight >= 0


class Graph:
    """
    Attributes:
        vertices : [Vertex]                   – index == vertex id
        edges    : [Edge]                     – insertion order
        _index   : {(source, target): Edge}   – one record per ordered pair
    """

    def __init__(self):
        self.vertices: List[Vertex]                 = []
        self.edges:    List[Edge]                   = []
        self._index:   Dict[Tuple[int, int], Edge]  = {}

    # ==================================================================
    # VERTICES
    # ==================================================================
    def add_vertex(self, name: Optional[str] = None) -> Vertex:
        vertex = Vertex(len(self.vertices), name)
        self.vertices.append(vertex)
        logger.debug("Added vertex %d (%s)", vertex.id, vertex.name)
        return vertex

    def has_vertex(self, vertex_id) -> bool:
        return (
            isinstance(vertex_id, int)
            and not isinstance(vertex_id, bool)
            and 0 <= vertex_id < len(self.vertices)
        )

    def get_vertex(self, vertex_id: int) -> Optional[Vertex]:
        if not self.has_vertex(vertex_id):
            return None
        return self.vertices[vertex_id]

    def move_vertex(self, vertex_id: int, x: float, y: float) -> Vertex:
        """Update display position only; no structural effect."""
        self._require_vertex(vertex_id)
        vertex = self.vertices[vertex_id]
        vertex.move_to(x, y)
        return vertex

    def _require_vertex(self, vertex_id) -> None:
        if not self.has_vertex(vertex_id):
            raise InvalidVertexReference(vertex_id, len(self.vertices))

    # ==================================================================
    # EDGES
    # ==================================================================
    def add_edge(self, source: int, target: int, weight: float = 1.0, directed: bool = False) -> Edge:
        """
        Add a record for (source, target), or update the existing one in place.

        When `directed` is False the reverse record (target, source) is
        created or updated too, with the same weight, so that both halves
        of an undirected edge always agree.

        Raises:
            InvalidVertexReference : an endpoint is not in [0, vertex_count).
            InvalidWeight          : weight is NaN, infinite or negative.
        """
        # validate everything before touching any state
        self._require_vertex(source)
        self._require_vertex(target)
        if not is_valid_weight(weight):
            raise InvalidWeight(weight)

        weight = float(weight)
        directed = bool(directed)

        edge = self._upsert(source, target, weight, directed)
        if not directed:
            # no-op for self-loops: (source, target) is its own reverse
            self._upsert(target, source, weight, False)

        logger.debug(
            "Edge %d %s %d set to weight %s",
            source, "->" if directed else "<->", target, weight,
        )
        return edge

    def _upsert(self, source: int, target: int, weight: float, directed: bool) -> Edge:
        edge = self._index.get((source, target))
        if edge is not None:
            edge.weight = weight
            edge.directed = directed
            return edge
        edge = Edge(source, target, weight, directed)
        self.edges.append(edge)
        self._index[edge.key] = edge
        return edge

    def get_edge(self, source: int, target: int) -> Optional[Edge]:
        """The record for the exact ordered pair, or None."""
        return self._index.get((source, target))

    def edge_weight(self, source: int, target: int) -> float:
        """
        Weight of the edge source→target, 0.0 when there is none.
        An undirected record target→source also counts.
        """
        edge = self._index.get((source, target))
        if edge is None:
            reverse = self._index.get((target, source))
            if reverse is not None and not reverse.directed:
                edge = reverse
        return edge.weight if edge is not None else 0.0

    def outgoing(self, vertex_id: int) -> Iterator[Edge]:
        """Every record whose source is `vertex_id`, in insertion order."""
        return (e for e in self.edges if e.source == vertex_id)

    # ==================================================================
    # ADJACENCY VIEWS  (always derived fresh from the edge records)
    # ==================================================================
    def adjacency_matrix(self) -> List[List[float]]:
        n = len(self.vertices)
        matrix = [[0.0] * n for _ in range(n)]
        for edge in self.edges:
            matrix[edge.source][edge.target] = edge.weight
        return matrix

    def adjacency_list(self) -> Dict[int, List[Tuple[int, float]]]:
        adjacency: Dict[int, List[Tuple[int, float]]] = {v.id: [] for v in self.vertices}
        for edge in self.edges:
            adjacency[edge.source].append((edge.target, edge.weight))
        return adjacency

    # ==================================================================
    # DIRECTEDNESS
    # ==================================================================
    def is_directed(self) -> bool:
        """
        Whole-graph classification.

        Directed if any record is flagged directed, or if the weighted
        adjacency is asymmetric: a cell (i, j) with no (j, i) partner, or
        a partner whose weight differs by more than SYMMETRY_TOLERANCE.
        """
        if any(e.directed for e in self.edges):
            return True

        matrix = self.adjacency_matrix()
        n = len(matrix)
        for i in range(n):
            for j in range(n):
                if matrix[i][j] == 0:
                    continue
                if matrix[j][i] == 0:
                    return True
                if not weights_equal(matrix[i][j], matrix[j][i]):
                    return True
        return False

    # ==================================================================
    # RESET
    # ==================================================================
    def clear(self) -> None:
        self.vertices.clear()
        self.edges.clear()
        self._index.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "vertices": [v.to_dict() for v in self.vertices],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """
        Rebuild a graph, records restored exactly as stored (flags included).
        A payload that breaks the model's invariants fails fast.
        """
        g = cls()
        for i, vd in enumerate(data.get("vertices", [])):
            vertex = Vertex.from_dict(vd)
            if vertex.id != i:
                raise InvalidVertexReference(vertex.id, i + 1)
            g.vertices.append(vertex)
        for ed in data.get("edges", []):
            edge = Edge.from_dict(ed)
            g._require_vertex(edge.source)
            g._require_vertex(edge.target)
            if not is_valid_weight(edge.weight):
                raise InvalidWeight(edge.weight)
            g._upsert(edge.source, edge.target, edge.weight, edge.directed)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        return len(self.edges)

    def vertex_ids(self) -> List[int]:
        return [v.id for v in self.vertices]

    def vertex_names(self) -> List[str]:
        return [v.name for v in self.vertices]

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()}, directed={self.is_directed()})"
