"""
canvas.py — SVG Graph Renderer
================================
Graph + highlighted path → SVG string.

The renderer consumes:
  • graph      – vertex (id, name, x, y) and edge (from, to, weight, directed)
  • highlight  – vertex ids of the path to emphasise (may be empty)
  • config     – visual config (canvas size, colors, fonts, …)

Design decisions:
  - render_canvas() is a pure function: it never touches the graph.
  - SvgRenderer is the stateful wrapper the document talks to.  It owns
    layout: whenever the vertex count differs from the count it last laid
    out, every vertex is re-placed on a circle.  Otherwise positions the
    user dragged to are left alone.
  - Edge de-duplication is a drawing concern only.  An undirected pair, or
    two reciprocal directed records with the same weight, is drawn as ONE
    line without arrows; anything else gets its own arrowed line.
"""

import math
from typing import List, Optional, Set, Tuple

from markupsafe import escape

from graph import Edge, Graph, Vertex, weights_equal
from formats.export import format_weight


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts, layout
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 600
    height: int = 400
    bg:     str = "#0d1117"

    # circular layout
    layout_center_x:      float = 300
    layout_center_y:      float = 200
    layout_max_radius:    float = 150
    layout_radius_per_vertex: float = 20

    # vertex
    vertex_radius:       int = 20
    vertex_fill:         str = "#1c2128"
    vertex_stroke:       str = "#0ea5e9"
    vertex_stroke_width: int = 2
    vertex_label_color:  str = "#e6edf3"
    vertex_label_size:   int = 13
    path_vertex_fill:    str = "#f59e0b"   # gold

    # edge
    edge_color:          str = "#7d8590"
    directed_edge_color: str = "#f43f5e"
    path_edge_color:     str = "#10b981"
    edge_width:          int = 2
    edge_width_path:     int = 4
    edge_arrow_size:     int = 10
    edge_weight_color:   str = "#e6edf3"
    edge_weight_size:    int = 12
    edge_weight_bg:      str = "#161b22"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
def arrange_on_circle(graph: Graph, config: CanvasConfig = CONFIG) -> None:
    """Place every vertex evenly on a circle; radius grows with the count."""
    n = graph.vertex_count()
    if n == 0:
        return
    radius = min(config.layout_max_radius, n * config.layout_radius_per_vertex)
    for i, vertex in enumerate(graph.vertices):
        angle = 2 * math.pi * i / n
        vertex.move_to(
            config.layout_center_x + radius * math.cos(angle),
            config.layout_center_y + radius * math.sin(angle),
        )


# ---------------------------------------------------------------------------
# Edge de-duplication
# ---------------------------------------------------------------------------
def visible_edges(graph: Graph) -> List[Tuple[Edge, bool]]:
    """
    [(edge, draw_arrow)] — one entry per line that should appear on screen.
    Self-loops are left out (nothing sensible to draw between a point and itself).
    """
    drawn: Set[Tuple[int, int]] = set()
    result: List[Tuple[Edge, bool]] = []
    for edge in graph.edges:
        if edge.is_self_loop() or edge.key in drawn:
            continue
        reverse = graph.get_edge(edge.target, edge.source)
        paired = reverse is not None and (
            (not edge.directed and not reverse.directed)
            or weights_equal(edge.weight, reverse.weight)
        )
        drawn.add(edge.key)
        if paired:
            drawn.add(reverse.key)
        result.append((edge, not paired))
    return result


def path_pairs(highlight: List[int]) -> Set[Tuple[int, int]]:
    return set(zip(highlight, highlight[1:]))


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: Graph,
    highlight: Optional[List[int]] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """Returns an SVG string."""
    highlight = highlight or []
    on_path = path_pairs(highlight)
    path_vertices = set(highlight)

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    # -- edges (draw first so vertices sit on top) --
    for edge, arrow in visible_edges(graph):
        highlighted = edge.key in on_path or (not arrow and (edge.target, edge.source) in on_path)
        svg_parts.append(_render_edge(graph, edge, arrow, highlighted, config))

    # -- vertices --
    for vertex in graph.vertices:
        svg_parts.append(_render_vertex(vertex, vertex.id in path_vertices, config))

    svg_parts.append("</svg>")
    return "\n".join(p for p in svg_parts if p)


class SvgRenderer:
    """
    Renderer handed to GraphDocument.  Keeps the last SVG it produced and
    the vertex count it last laid out, so the web layer can carry both in
    the session between requests.
    """

    def __init__(self, config: CanvasConfig = CONFIG, layout_count: Optional[int] = None):
        self.config = config
        self.layout_count: Optional[int] = layout_count
        self.svg: str = ""

    def needs_layout(self, graph: Graph) -> bool:
        # freshly built graphs have every vertex parked at the origin
        if graph.vertex_count() != self.layout_count:
            return True
        return graph.vertex_count() > 0 and all(v.x == 0 and v.y == 0 for v in graph.vertices)

    def render(self, graph: Graph, highlight_path: List[int]) -> str:
        if self.needs_layout(graph):
            arrange_on_circle(graph, self.config)
            self.layout_count = graph.vertex_count()
        self.svg = render_canvas(graph, highlight_path, self.config)
        return self.svg


# ---------------------------------------------------------------------------
# Vertex Rendering
# ---------------------------------------------------------------------------
def _render_vertex(vertex: Vertex, on_path: bool, config: CanvasConfig) -> str:
    fill = config.path_vertex_fill if on_path else config.vertex_fill
    cx, cy = vertex.x, vertex.y
    r = config.vertex_radius

    parts = [
        f'<g class="vertex{" path" if on_path else ""}" data-id="{vertex.id}">',
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" '
        f'fill="{fill}" stroke="{config.vertex_stroke}" stroke-width="{config.vertex_stroke_width}"/>',
        f'  <text x="{cx}" y="{cy + 5}" text-anchor="middle" '
        f'font-size="{config.vertex_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.vertex_label_color}" font-weight="600">{escape(vertex.name)}</text>',
        '</g>',
    ]
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(graph: Graph, edge: Edge, arrow: bool, highlighted: bool, config: CanvasConfig) -> str:
    src = graph.get_vertex(edge.source)
    tgt = graph.get_vertex(edge.target)
    if src is None or tgt is None:
        return ""

    if highlighted:
        stroke, stroke_width = config.path_edge_color, config.edge_width_path
    elif arrow:
        stroke, stroke_width = config.directed_edge_color, config.edge_width
    else:
        stroke, stroke_width = config.edge_color, config.edge_width

    # shorten the line by the vertex radius so it stops at the circle
    dx, dy = tgt.x - src.x, tgt.y - src.y
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # degenerate: both ends on the same spot

    ux, uy = dx / dist, dy / dist
    r = config.vertex_radius
    x1, y1 = src.x + ux * r, src.y + uy * r
    x2, y2 = tgt.x - ux * r, tgt.y - uy * r

    parts = [
        f'<g class="edge" data-from="{edge.source}" data-to="{edge.target}">',
        f'  <line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>',
    ]
    if arrow:
        parts.append(_render_arrow(x2, y2, ux, uy, stroke, config))

    # weight label at the midpoint, nudged off the line
    mx, my = (src.x + tgt.x) / 2 - uy * 12, (src.y + tgt.y) / 2 + ux * 12
    parts.append(
        f'  <circle cx="{mx}" cy="{my}" r="12" fill="{config.edge_weight_bg}" opacity="0.9"/>'
    )
    parts.append(
        f'  <text x="{mx}" y="{my + 4}" text-anchor="middle" '
        f'font-size="{config.edge_weight_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.edge_weight_color}" font-weight="600">{format_weight(edge.weight)}</text>'
    )
    parts.append('</g>')
    return "\n".join(parts)


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.edge_arrow_size
    px, py = -uy, ux
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'  <polygon points="{x},{y} {p1_x},{p1_y} {p2_x},{p2_y}" fill="{color}"/>'

