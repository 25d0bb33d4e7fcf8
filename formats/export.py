"""
export.py — Graph → human-readable text
========================================
Tabular matrix and arrow-annotated list renderings for the side panels.
Meant for reading, not for a lossless round-trip.
"""

from graph import Graph

EMPTY_GRAPH_TEXT = "Graph is empty"
NO_NEIGHBOURS_TEXT = "no adjacent vertices"


def format_weight(weight: float) -> str:
    """At most one decimal place, trailing zeros dropped: 2.0 → '2', 2.54 → '2.5'."""
    text = f"{weight:.1f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def adjacency_matrix_text(graph: Graph) -> str:
    n = graph.vertex_count()
    if n == 0:
        return EMPTY_GRAPH_TEXT

    matrix = graph.adjacency_matrix()
    names = graph.vertex_names()

    lines = ["     " + "".join(f"{name:>5}" for name in names)]
    lines.append("-" * (6 + n * 5))
    for i in range(n):
        cells = "".join(f"{format_weight(w) if w != 0 else '0':>5}" for w in matrix[i])
        lines.append(f"{names[i]:>4} |{cells}")
    return "\n".join(lines) + "\n"


def adjacency_list_text(graph: Graph) -> str:
    if graph.vertex_count() == 0:
        return EMPTY_GRAPH_TEXT

    adjacency = graph.adjacency_list()
    lines = []
    for vertex in graph.vertices:
        targets = adjacency.get(vertex.id, [])
        if targets:
            rendered = " ".join(
                f"→{to}" if w == 1.0 else f"→{to}({format_weight(w)})"
                for to, w in targets
            )
        else:
            rendered = NO_NEIGHBOURS_TEXT
        lines.append(f"{vertex.id:>2} ({vertex.name}): {rendered}")
    return "\n".join(lines) + "\n"
