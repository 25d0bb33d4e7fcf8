"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • vertex_selector     – "<id>: <name>" dropdown for start / end / edge ends
  • graph_info_panel    – vertex count, edge count, directed / undirected
  • path_result_panel   – the path found (or "no path"), with its total weight
  • matrix_view_panel   – adjacency matrix + adjacency list text
  • examples_panel      – ready-made matrices to paste into the import box
  • pseudocode_viewer   – the path finder's pseudocode

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings (no templating engine); user-supplied
    text goes through markupsafe.escape.
  - The main app stitches them together.
"""

from typing import List, Optional, Sequence

from markupsafe import escape

from algorithms import AlgoInfo
from formats.export import format_weight


EXAMPLE_MATRICES = [
    ("Path of three", "0 1 0\n1 0 1\n0 1 0"),
    ("Weighted five", "0 2 6 0 0\n2 0 3 5 0\n6 3 0 1 0\n0 5 1 0 4\n0 0 0 4 0"),
]


# ---------------------------------------------------------------------------
# Vertex Selector
# ---------------------------------------------------------------------------
def vertex_selector(element_id: str, names: Sequence[str], selected: Optional[int] = None) -> str:
    options = []
    for i, name in enumerate(names):
        sel = 'selected' if i == selected else ''
        options.append(f'<option value="{i}" {sel}>{i}: {escape(name)}</option>')
    disabled = '' if names else 'disabled'
    return f'<select id="{element_id}" {disabled}>{"".join(options)}</select>'


# ---------------------------------------------------------------------------
# Graph Info
# ---------------------------------------------------------------------------
def graph_info_panel(vertex_count: int, edge_count: int, directed: bool) -> str:
    kind = "Directed" if directed else "Undirected"
    return f"""
    <div class="panel graph-info">
      <h3>📊 Graph</h3>
      <div>Vertices: <span id="vertex-count">{vertex_count}</span></div>
      <div>Edges: <span id="edge-count">{edge_count}</span></div>
      <div>Type: <span id="graph-kind">{kind}</span></div>
    </div>
    """


# ---------------------------------------------------------------------------
# Path Result
# ---------------------------------------------------------------------------
def path_result_panel(path: List[int], start: Optional[int] = None, end: Optional[int] = None,
                      total_weight: float = 0.0) -> str:
    if path:
        body = (
            f'<div class="path ok">Path: {" → ".join(str(v) for v in path)}</div>'
            f'<div>Total weight: {format_weight(total_weight)}</div>'
        )
    elif start is not None and end is not None:
        body = f'<div class="path none">No path between {start} and {end}</div>'
    else:
        body = '<div class="path none">No path selected</div>'
    return f"""
    <div class="panel path-result">
      <h3>🎯 Shortest Path</h3>
      {body}
    </div>
    """


# ---------------------------------------------------------------------------
# Matrix / List view
# ---------------------------------------------------------------------------
def matrix_view_panel(matrix_text: str, list_text: str) -> str:
    return f"""
    <div class="panel matrix-view">
      <h3>🧮 Adjacency Matrix</h3>
      <pre id="matrix-text">{escape(matrix_text)}</pre>
      <h3>📜 Adjacency List</h3>
      <pre id="list-text">{escape(list_text)}</pre>
    </div>
    """


# ---------------------------------------------------------------------------
# Examples
# ---------------------------------------------------------------------------
def examples_panel() -> str:
    items = []
    for label, text in EXAMPLE_MATRICES:
        items.append(
            f'<div class="example"><h4>{escape(label)}</h4>'
            f'<pre class="example-text">{escape(text)}</pre></div>'
        )
    return f"""
    <div class="panel examples">
      <h3>💡 Examples</h3>
      {''.join(items)}
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(algo: AlgoInfo) -> str:
    lines = "".join(
        f'<div class="code-line" data-line="{i}">{escape(line)}</div>'
        for i, line in enumerate(algo.pseudocode)
    )
    tags = "".join(f'<span class="tag">{escape(tag)}</span>' for tag in algo.tags)
    return f"""
    <div class="panel pseudocode">
      <h3>📝 {escape(algo.label)}</h3>
      <div class="complexity">Time {algo.complexity_time} · Space {algo.complexity_space}</div>
      <div class="tags">{tags}</div>
      <div class="code-block">{lines}</div>
      <p class="description">{escape(algo.description)}</p>
    </div>
    """
