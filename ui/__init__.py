"""
ui/
---
Presentation layer.

    from ui import SvgRenderer, render_canvas
    from ui import vertex_selector, graph_info_panel, …
"""

from ui.canvas import (
    render_canvas,
    SvgRenderer,
    CanvasConfig,
    arrange_on_circle,
    visible_edges,
)

from ui.controls import (
    vertex_selector,
    graph_info_panel,
    path_result_panel,
    matrix_view_panel,
    examples_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_canvas",
    "SvgRenderer",
    "CanvasConfig",
    "arrange_on_circle",
    "visible_edges",
    "vertex_selector",
    "graph_info_panel",
    "path_result_panel",
    "matrix_view_panel",
    "examples_panel",
    "pseudocode_viewer",
]
