"""
errors.py — Graph Error Taxonomy
=================================
Everything the core raises derives from GraphError so the web layer can
map the whole family to a 400 in one place.

    GraphError
      ├── InvalidVertexReference   – out-of-range vertex id in a mutation
      ├── InvalidWeight            – NaN / infinite / negative edge weight
      └── ParseFailure             – matrix / list text could not be built
"""


class GraphError(Exception):
    """Base class for every error raised by the graph core."""


class InvalidVertexReference(GraphError):
    def __init__(self, vertex_id, vertex_count: int):
        self.vertex_id = vertex_id
        self.vertex_count = vertex_count
        super().__init__(
            f"Invalid vertex reference {vertex_id!r}: "
            f"expected an id in [0, {vertex_count})"
        )


class InvalidWeight(GraphError):
    def __init__(self, weight):
        self.weight = weight
        super().__init__(f"Invalid edge weight: {weight!r} (must be finite and >= 0)")


class ParseFailure(GraphError):
    """
    Raised by the format parsers.  The underlying cause is chained
    (`raise ParseFailure(...) from exc`) so callers can still inspect it.
    """

    def __init__(self, fmt: str, message: str):
        self.format = fmt
        super().__init__(f"Failed to parse {fmt}: {message}")
