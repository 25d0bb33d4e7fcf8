"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Vertex, Edge
    from graph import GraphError, InvalidVertexReference, InvalidWeight, ParseFailure

The document façade (graph + highlighted path + renderer) is imported
explicitly from graph.document, since it pulls in the parsers and the
path finder.
"""

from graph.vertex import Vertex
from graph.edge   import Edge
from graph.errors import GraphError, InvalidVertexReference, InvalidWeight, ParseFailure
from graph.graph  import Graph, SYMMETRY_TOLERANCE, weights_equal, is_valid_weight

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidVertexReference",
    "InvalidWeight",
    "ParseFailure",
    "SYMMETRY_TOLERANCE",
    "weights_equal",
    "is_valid_weight",
]
