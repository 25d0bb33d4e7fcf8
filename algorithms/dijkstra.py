"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Array-scan Dijkstra: the next vertex to settle is found by a linear scan
over the tentative distances instead of a heap.  O(V²), which is nothing
at the vertex counts an interactive editor deals with.

Only OUTGOING records are relaxed (edge.source == current).  Undirected
edges are stored as two records, so that is enough to walk them both ways.

Queries never raise.  Invalid endpoints, no path, and any internal
inconsistency all come back as an empty list, so UI code can call this
speculatively.

Correctness note: Dijkstra requires non-negative weights.  Graph.add_edge
already rejects anything else; records that somehow carry a bad weight
are skipped here rather than trusted.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from graph import Graph, is_valid_weight

logger = logging.getLogger(__name__)

INF = float("inf")


# ---------------------------------------------------------------------------
# Pseudocode  (shown in the side panel)
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def ShortestPath(graph, start, end):",              # 0
    "    dist ← [∞ for v in V];  dist[start] ← 0",       # 1
    "    prev ← [None for v in V]",                      # 2
    "    repeat |V| times:",                             # 3
    "        u ← unvisited v with minimum dist[v]",      # 4
    "        if dist[u] = ∞ or u = end: break",          # 5
    "        visited[u] ← true",                         # 6
    "        for (u → v, w) in outgoing(u):",            # 7
    "            if dist[u] + w < dist[v]:",             # 8
    "                dist[v] ← dist[u] + w",             # 9
    "                prev[v] ← u",                       # 10
    "    return walk prev[] back from end",              # 11
]


# ---------------------------------------------------------------------------
# Core loop
# ---------------------------------------------------------------------------
def _settle(graph: Graph, start: int, end: Optional[int] = None) -> Tuple[List[float], List[Optional[int]]]:
    n = graph.vertex_count()
    dist: List[float] = [INF] * n
    previous: List[Optional[int]] = [None] * n
    visited: List[bool] = [False] * n
    dist[start] = 0.0

    for _ in range(n):
        # pick the unvisited vertex with the smallest tentative distance
        current, best = -1, INF
        for v in range(n):
            if not visited[v] and dist[v] < best:
                current, best = v, dist[v]

        if current == -1 or math.isinf(dist[current]):
            break               # everything left is unreachable
        if current == end:
            break

        visited[current] = True

        for edge in graph.outgoing(current):
            nbr = edge.target
            if not 0 <= nbr < n:
                continue
            if not is_valid_weight(edge.weight):
                continue
            if visited[nbr]:
                continue
            new_dist = dist[current] + edge.weight
            if new_dist < dist[nbr]:
                dist[nbr] = new_dist
                previous[nbr] = current

    return dist, previous


def dijkstra_distances(graph: Graph, start: int) -> Tuple[List[float], List[Optional[int]]]:
    """
    Full single-source run: (distances, predecessors) for every vertex.
    Unreachable vertices keep distance ∞ and predecessor None.
    """
    if not graph.has_vertex(start):
        return [], []
    return _settle(graph, start)


def reconstruct_path(previous: Sequence[Optional[int]], start: int, end: int) -> List[int]:
    """
    Walk the predecessor chain from `end` back to `start`.

    The walk is bounded by len(previous) steps; a chain that loops, points
    outside the array, or doesn't end at `start` yields [] instead.
    """
    n = len(previous)
    path: List[int] = []
    node: Optional[int] = end

    while node is not None:
        if not 0 <= node < n:
            return []
        path.append(node)
        if len(path) > n:
            logger.warning("Predecessor chain from %d exceeds %d vertices; giving up", end, n)
            return []
        node = previous[node]

    path.reverse()
    if not path or path[0] != start:
        return []
    return path


# ---------------------------------------------------------------------------
# Public query
# ---------------------------------------------------------------------------
def shortest_path(graph: Graph, start: int, end: int) -> List[int]:
    """
    Vertex ids from `start` to `end` inclusive, or [] when there is no path.
    `[start]` when start == end.
    """
    try:
        if not graph.has_vertex(start) or not graph.has_vertex(end):
            return []
        if start == end:
            return [start]

        dist, previous = _settle(graph, start, end)
        if math.isinf(dist[end]):
            return []
        return reconstruct_path(previous, start, end)
    except Exception:
        logger.exception("Shortest path %r -> %r failed", start, end)
        return []


def path_weight(graph: Graph, path: Sequence[int]) -> float:
    """Sum of the edge weights along consecutive pairs of `path`."""
    return sum(graph.edge_weight(a, b) for a, b in zip(path, path[1:]))
