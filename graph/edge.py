"""
edge.py — Graph Edge Record
===========================
One directed record between two vertex ids.

Design decisions:
  - `source` and `target` are vertex ids (ints), NOT Vertex references.
    This keeps edges serialisable and avoids circular references.
  - An undirected edge is stored as TWO records, (a, b) and (b, a), both
    with `directed=False` and the same weight.  Traversal code therefore
    only ever follows `source → target`.
  - The Graph guarantees at most one record per ordered (source, target)
    pair; the record itself knows nothing about that invariant.
"""

from typing import Tuple


class Edge:
    """
    Attributes:
        source   : Id of the tail vertex.
        target   : Id of the head vertex.
        weight   : Non-negative finite cost (validated by Graph.add_edge).
        directed : False when this record is one half of an undirected pair.
    """

    __slots__ = ("source", "target", "weight", "directed")

    def __init__(self, source: int, target: int, weight: float = 1.0, directed: bool = False):
        self.source:   int   = source
        self.target:   int   = target
        self.weight:   float = weight
        self.directed: bool  = directed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def key(self) -> Tuple[int, int]:
        return (self.source, self.target)

    def is_self_loop(self) -> bool:
        return self.source == self.target

    def as_tuple(self) -> Tuple[int, int, float, bool]:
        """(from, to, weight, is_directed) — the shape the renderer consumes."""
        return (self.source, self.target, self.weight, self.directed)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "source":   self.source,
            "target":   self.target,
            "weight":   self.weight,
            "directed": self.directed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=int(data["source"]),
            target=int(data["target"]),
            weight=float(data.get("weight", 1.0)),
            directed=bool(data.get("directed", False)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.key)
