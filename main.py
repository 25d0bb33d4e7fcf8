"""
main.py — Graph Editor Flask App
=================================
The web server that powers the editor.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current graph, highlight, svg, panels
  POST /api/graph/new          – clear the graph
  POST /api/graph/import       – build from adjacency matrix / list text
  GET  /api/graph/export       – adjacency matrix + list text
  POST /api/vertex             – add a vertex
  POST /api/vertex/move        – move a vertex (drag)
  POST /api/edge               – add / update an edge
  POST /api/path               – shortest path between two vertices
  POST /api/path/clear         – drop the highlighted path

State management:
  The Flask session (signed cookie) carries only a random `doc_id`.  The
  document itself is kept server-side in a DocumentStore, one snapshot per
  doc_id:
    • graph         – serialised Graph
    • highlight     – vertex ids of the highlighted path
    • layout_count  – vertex count the renderer last laid out on a circle
  The store keeps the STORE_LIMIT most recently used documents.

Configuration:
  create_app() starts from DEFAULT_CONFIG, then GRAPH_EDITOR_* environment
  variables (e.g. GRAPH_EDITOR_PORT=8080, GRAPH_EDITOR_LOG_LEVEL=DEBUG),
  then the mapping passed in (tests use that).
"""

import logging
import secrets
import threading
from collections import OrderedDict
from typing import Any, Mapping, Optional, Tuple

from flask import Blueprint, Flask, current_app, jsonify, render_template_string, request, session

from algorithms import SHORTEST_PATH
from formats import validate_adjacency_list, validate_matrix
from graph import Graph, GraphError, ParseFailure
from graph.document import GraphDocument
from ui import (
    SvgRenderer,
    vertex_selector,
    graph_info_panel,
    path_result_panel,
    matrix_view_panel,
    examples_panel,
    pseudocode_viewer,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "HOST":      "127.0.0.1",
    "PORT":      5000,
    "DEBUG":     False,
    "LOG_LEVEL": "INFO",
    "LOG_FORMAT": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    "STORE_LIMIT": 256,
}

bp = Blueprint("editor", __name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(DEFAULT_CONFIG)
    app.config.from_prefixed_env(prefix="GRAPH_EDITOR")
    if config:
        app.config.update(config)
    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    logging.basicConfig(level=app.config["LOG_LEVEL"], format=app.config["LOG_FORMAT"])

    app.extensions["graph_editor.store"] = DocumentStore(app.config["STORE_LIMIT"])
    app.register_blueprint(bp)
    return app


# ---------------------------------------------------------------------------
# Server-side document store
# ---------------------------------------------------------------------------
class DocumentStore:
    """
    doc_id → snapshot dict, least recently used evicted past `limit`.

    Snapshots are plain dicts (Graph.to_dict() + highlight + layout_count),
    so no live Graph is ever shared between two requests.
    """

    def __init__(self, limit: int = 256):
        self.limit = limit
        self._docs: "OrderedDict[str, dict]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, doc_id: Optional[str]) -> Optional[dict]:
        with self._lock:
            snapshot = self._docs.get(doc_id)
            if snapshot is not None:
                self._docs.move_to_end(doc_id)
            return snapshot

    def put(self, doc_id: str, snapshot: dict) -> None:
        with self._lock:
            self._docs[doc_id] = snapshot
            self._docs.move_to_end(doc_id)
            while len(self._docs) > self.limit:
                evicted, _ = self._docs.popitem(last=False)
                logger.info("Evicted document %s from the store", evicted)

    def __len__(self) -> int:
        return len(self._docs)


def _store() -> DocumentStore:
    return current_app.extensions["graph_editor.store"]


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def load_document() -> GraphDocument:
    """Rebuild the document (graph + highlight + renderer) for this session."""
    snapshot = _store().get(session.get("doc_id")) or {}
    graph = Graph.from_dict(snapshot["graph"]) if "graph" in snapshot else Graph()
    renderer = SvgRenderer(layout_count=snapshot.get("layout_count"))
    return GraphDocument(graph, snapshot.get("highlight", []), renderer)


def save_document(doc: GraphDocument) -> None:
    if "doc_id" not in session:
        session["doc_id"] = secrets.token_urlsafe(16)
    _store().put(session["doc_id"], {
        "graph":        doc.graph.to_dict(),
        "highlight":    list(doc.highlight),
        "layout_count": doc.renderer.layout_count,
    })


def state_payload(doc: GraphDocument) -> dict:
    svg = doc.renderer.svg or doc.redraw() or ""
    return {
        "vertices":  [v.to_dict() for v in doc.graph.vertices],
        "edges":     [e.to_dict() for e in doc.graph.edges],
        "highlight": list(doc.highlight),
        "svg":       svg,
        **doc.summary(),
    }


def _json() -> dict:
    return request.get_json(silent=True) or {}


def _as_int(value):
    """int(value) when it is integral; otherwise hand back as-is for the graph to reject."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def _as_float(value, default: float = 1.0):
    if value is None or value == "":
        return default
    if isinstance(value, str):
        value = value.replace(",", ".")
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def _error(message: str, status: int = 400) -> Tuple[Any, int]:
    return jsonify({"error": message}), status


@bp.app_errorhandler(GraphError)
def handle_graph_error(e: GraphError):
    logger.info("Rejected request: %s", e)
    return _error(str(e))


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@bp.route("/")
def index():
    doc = load_document()
    doc.redraw()
    save_document(doc)

    names = doc.graph.vertex_names()
    summary = doc.summary()
    start = doc.highlight[0] if doc.highlight else 0
    end = doc.highlight[-1] if doc.highlight else min(1, max(len(names) - 1, 0))

    return render_template_string(INDEX_TEMPLATE,
        svg=doc.renderer.svg,
        info=graph_info_panel(summary["vertex_count"], summary["edge_count"], summary["directed"]),
        start_picker=vertex_selector("start-vertex", names, start),
        end_picker=vertex_selector("end-vertex", names, end),
        from_picker=vertex_selector("edge-from", names, 0),
        to_picker=vertex_selector("edge-to", names, min(1, max(len(names) - 1, 0))),
        path_result=path_result_panel(doc.highlight, total_weight=doc.highlight_weight()),
        matrix_view=matrix_view_panel(doc.matrix_text(), doc.list_text()),
        examples=examples_panel(),
        pseudocode=pseudocode_viewer(SHORTEST_PATH),
    )


@bp.route("/api/state")
def api_state():
    doc = load_document()
    payload = state_payload(doc)
    save_document(doc)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@bp.route("/api/graph/new", methods=["POST"])
def api_graph_new():
    doc = load_document()
    doc.clear()
    save_document(doc)
    return jsonify(state_payload(doc))


@bp.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data = _json()
    text = data.get("text", "")
    fmt  = data.get("format", "matrix")

    if fmt == "matrix":
        problem = validate_matrix(text)
    elif fmt == "list":
        problem = validate_adjacency_list(text)
    else:
        return _error(f"Unknown format: {fmt}")
    if problem:
        return _error(problem)

    doc = load_document()
    try:
        if fmt == "matrix":
            doc.load_matrix_text(text)
        else:
            doc.load_adjacency_list_text(text)
    except ParseFailure as e:
        logger.warning("Import failed: %s", e)
        return _error(str(e))

    save_document(doc)
    return jsonify(state_payload(doc))


@bp.route("/api/graph/export")
def api_graph_export():
    doc = load_document()
    return jsonify({"matrix": doc.matrix_text(), "list": doc.list_text()})


# ---------------------------------------------------------------------------
# API: Vertices & Edges
# ---------------------------------------------------------------------------
@bp.route("/api/vertex", methods=["POST"])
def api_vertex_add():
    name = (_json().get("name") or "").strip() or None
    doc = load_document()
    vertex = doc.add_vertex(name)
    save_document(doc)
    return jsonify({"vertex": vertex.to_dict(), **state_payload(doc)})


@bp.route("/api/vertex/move", methods=["POST"])
def api_vertex_move():
    data = _json()
    try:
        x, y = float(data["x"]), float(data["y"])
    except (KeyError, TypeError, ValueError):
        return _error("x and y must be numbers")

    doc = load_document()
    doc.move_vertex(_as_int(data.get("id")), x, y)
    save_document(doc)
    return jsonify(state_payload(doc))


@bp.route("/api/edge", methods=["POST"])
def api_edge_add():
    data = _json()
    doc = load_document()
    edge = doc.add_edge(
        _as_int(data.get("from")),
        _as_int(data.get("to")),
        _as_float(data.get("weight")),
        bool(data.get("directed", False)),
    )
    save_document(doc)
    return jsonify({"edge": edge.to_dict(), **state_payload(doc)})


# ---------------------------------------------------------------------------
# API: Paths
# ---------------------------------------------------------------------------
@bp.route("/api/path", methods=["POST"])
def api_path():
    data = _json()
    start, end = _as_int(data.get("start")), _as_int(data.get("end"))

    doc = load_document()
    path = doc.find_shortest_path(start, end)
    save_document(doc)
    return jsonify({
        "path":         path,
        "found":        bool(path),
        "total_weight": doc.highlight_weight(),
        "result":       path_result_panel(path, start, end, doc.highlight_weight()),
        **state_payload(doc),
    })


@bp.route("/api/path/clear", methods=["POST"])
def api_path_clear():
    doc = load_document()
    doc.clear_path()
    save_document(doc)
    return jsonify(state_payload(doc))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Graph Editor</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-rose: #f43f5e;
    }
    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }
    #sidebar { width: 340px; overflow-y: auto; padding: 24px 16px; border-right: 1px solid var(--border); }
    #main { flex: 1; display: flex; flex-direction: column; padding: 16px; gap: 16px; overflow-y: auto; }
    .panel { background: var(--bg-panel); border: 1px solid var(--border); border-radius: 8px; padding: 12px; margin-bottom: 12px; }
    .panel h3 { font-size: 13px; text-transform: uppercase; color: var(--accent-cyan); margin-bottom: 8px; }
    input, select, textarea, button {
      background: var(--bg-dark); color: var(--text-primary);
      border: 1px solid var(--border); border-radius: 4px; padding: 4px 6px; margin: 2px 0;
    }
    button { cursor: pointer; }
    button:hover { border-color: var(--accent-cyan); }
    textarea { width: 100%; height: 100px; font-family: 'JetBrains Mono', monospace; }
    pre { font-family: 'JetBrains Mono', monospace; font-size: 12px; color: var(--text-secondary); white-space: pre; }
    #error { color: var(--accent-rose); min-height: 1em; }
    .code-line { font-family: 'JetBrains Mono', monospace; font-size: 12px; }
    .tag { font-size: 11px; border: 1px solid var(--border); border-radius: 10px; padding: 0 6px; margin-right: 4px; }
    #canvas-svg g.vertex { cursor: grab; touch-action: none; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="info">{{ info|safe }}</div>

    <div class="panel">
      <h3>➕ Vertex</h3>
      <input id="vertex-name" placeholder="name (optional)">
      <button id="btn-add-vertex">Add vertex</button>
    </div>

    <div class="panel">
      <h3>🔗 Edge</h3>
      <div>From <span id="from-picker">{{ from_picker|safe }}</span>
           To <span id="to-picker">{{ to_picker|safe }}</span></div>
      <div>Weight <input id="edge-weight" value="1" size="6">
           <label><input type="checkbox" id="edge-directed"> directed</label></div>
      <button id="btn-add-edge">Add / update edge</button>
    </div>

    <div class="panel">
      <h3>🧭 Path</h3>
      <div>Start <span id="start-picker">{{ start_picker|safe }}</span>
           End <span id="end-picker">{{ end_picker|safe }}</span></div>
      <button id="btn-find-path">Find shortest path</button>
      <button id="btn-clear-path">Clear</button>
    </div>
    <div id="path-result">{{ path_result|safe }}</div>

    <div class="panel">
      <h3>📥 Import</h3>
      <select id="import-format">
        <option value="matrix">Adjacency matrix</option>
        <option value="list">Adjacency list</option>
      </select>
      <textarea id="import-text" placeholder="0 1 0&#10;1 0 1&#10;0 1 0"></textarea>
      <button id="btn-import">Build graph</button>
      <button id="btn-new">New graph</button>
    </div>
    <div id="error"></div>
    <div id="examples">{{ examples|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="matrix-view">{{ matrix_view|safe }}</div>
    <div id="pseudocode">{{ pseudocode|safe }}</div>
  </div>

  <script>
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      document.getElementById('error').textContent = body.error || '';
      return body;
    }

    // panels that depend on the vertex set are cheapest to refresh by reload
    function refresh(data) {
      if (!data.error) window.location.reload();
    }

    const val = (id) => document.getElementById(id)?.value;

    document.getElementById('btn-add-vertex').addEventListener('click', async () => {
      refresh(await post('/api/vertex', {name: val('vertex-name')}));
    });

    document.getElementById('btn-add-edge').addEventListener('click', async () => {
      refresh(await post('/api/edge', {
        from: val('edge-from'),
        to: val('edge-to'),
        weight: val('edge-weight'),
        directed: document.getElementById('edge-directed').checked,
      }));
    });

    document.getElementById('btn-find-path').addEventListener('click', async () => {
      const data = await post('/api/path', {start: val('start-vertex'), end: val('end-vertex')});
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.result) document.getElementById('path-result').innerHTML = data.result;
    });

    // drag a vertex: move its circle + label live, commit on release
    const canvas = document.getElementById('canvas-svg');
    let drag = null;

    function svgPoint(svg, evt) {
      const pt = svg.createSVGPoint();
      pt.x = evt.clientX;
      pt.y = evt.clientY;
      return pt.matrixTransform(svg.getScreenCTM().inverse());
    }

    canvas.addEventListener('pointerdown', (evt) => {
      const group = evt.target.closest('g.vertex');
      if (!group) return;
      drag = {group, svg: group.ownerSVGElement, id: Number(group.dataset.id), moved: false, x: 0, y: 0};
      group.setPointerCapture(evt.pointerId);
      evt.preventDefault();
    });

    canvas.addEventListener('pointermove', (evt) => {
      if (!drag) return;
      const p = svgPoint(drag.svg, evt);
      drag.moved = true;
      drag.x = p.x;
      drag.y = p.y;
      const circle = drag.group.querySelector('circle');
      const label = drag.group.querySelector('text');
      circle.setAttribute('cx', p.x);
      circle.setAttribute('cy', p.y);
      label.setAttribute('x', p.x);
      label.setAttribute('y', p.y + 5);
    });

    canvas.addEventListener('pointerup', async () => {
      if (!drag) return;
      const done = drag;
      drag = null;
      if (!done.moved) return;
      const data = await post('/api/vertex/move', {id: done.id, x: done.x, y: done.y});
      if (data.svg) canvas.innerHTML = data.svg;
    });

    document.getElementById('btn-clear-path').addEventListener('click', async () => {
      refresh(await post('/api/path/clear'));
    });

    document.getElementById('btn-import').addEventListener('click', async () => {
      refresh(await post('/api/graph/import', {format: val('import-format'), text: val('import-text')}));
    });

    document.getElementById('btn-new').addEventListener('click', async () => {
      if (confirm('Create a new graph? The current graph will be removed.')) {
        refresh(await post('/api/graph/new'));
      }
    });

    // click an example to copy it into the import box
    document.querySelectorAll('.example-text').forEach((el) => {
      el.addEventListener('click', () => {
        document.getElementById('import-format').value = 'matrix';
        document.getElementById('import-text').value = el.textContent;
      });
    });
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Graph Editor listening on http://%s:%s", app.config["HOST"], app.config["PORT"])
    app.run(debug=app.config["DEBUG"], host=app.config["HOST"], port=app.config["PORT"])
