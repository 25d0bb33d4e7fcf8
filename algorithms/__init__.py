"""
algorithms/__init__.py — Path Finding
=====================================

    from algorithms import shortest_path, path_weight
    from algorithms import SHORTEST_PATH          # metadata card for the UI

The editor answers exactly one kind of query: single source to single
target, non-negative weights.  SHORTEST_PATH describes that query for
the side panel.
"""

from dataclasses import dataclass, field
from typing import Callable, List

from algorithms.dijkstra import (
    shortest_path,
    path_weight,
    reconstruct_path,
    dijkstra_distances,
    PSEUDOCODE,
)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card shown next to the canvas
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgoInfo:
    key:              str                     # e.g. "dijkstra"
    label:            str                     # human label
    fn:               Callable                # (graph, start, end) -> [vertex ids]
    pseudocode:       List[str]               # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""


SHORTEST_PATH = AlgoInfo(
    key="dijkstra", label="Dijkstra's Algorithm", fn=shortest_path, pseudocode=PSEUDOCODE,
    tags=["weighted", "shortest-path"],
    complexity_time="O(V²)", complexity_space="O(V)",
    description="Settles the closest unvisited vertex each round. Optimal for non-negative weights.",
)


__all__ = [
    "AlgoInfo",
    "SHORTEST_PATH",
    "shortest_path",
    "path_weight",
    "reconstruct_path",
    "dijkstra_distances",
    "PSEUDOCODE",
]
