"""
parser.py — Adjacency Matrix / Adjacency List → Graph
======================================================
Both entry points build a FRESH Graph and hand it back; they never touch
a graph the caller already owns.  The document swaps the result in only
when parsing succeeded, so a failed import can't leave half a graph on
screen.

Any failure inside a build (bad weight, bad id, ragged rows, …) is
re-raised as a single ParseFailure with the original exception chained.

Supported text:

    matrix                       adjacency list
    ------                       --------------
    0 4 0 0                      0: →1(4)
    4 0 8 0                      1: →0(4) →2(8)
    0 8 0 7                      2: ->1(8) ->3(7)
    0 0 7 0                      3: ->2(7)

Directedness is inferred from the data, never passed in:
  - matrix : per cell, (i, j) is directed when m[i][j] and m[j][i] differ.
  - list   : whole list, undirected only if EVERY edge u→v has a reverse
             v→u of the same weight.
"""

import logging
import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from graph import Graph, ParseFailure, weights_equal
from formats.validators import MAX_VERTICES, is_number, parse_number, split_lines, split_matrix_row

logger = logging.getLogger(__name__)

AdjacencyList = Dict[int, List[Tuple[int, float]]]

DEFAULT_WEIGHT = 1.0

_LINE_RE   = re.compile(r"^\s*(\d+)\s*:(.*)$")
_TARGET_RE = re.compile(r"(?:→|->)\s*(\d+)(?:\(\s*([\d.,]+)\s*\))?")


def _name_for(i: int, names: Optional[Sequence[str]]) -> Optional[str]:
    if names is not None and i < len(names) and names[i]:
        return names[i]
    return None


def _check_size(vertex_count: int) -> None:
    if vertex_count > MAX_VERTICES:
        raise ValueError(f"{vertex_count} vertices requested; at most {MAX_VERTICES} are supported")


# ===========================================================================
# ADJACENCY MATRIX
# ===========================================================================
def parse_matrix_text(text: str) -> List[List[float]]:
    """
    Text → N×N grid of floats, N = number of non-blank lines.

    Tokens that aren't plain finite numbers count as 0.  Shape is not
    validated here (that's validate_matrix's job): short rows are padded
    with zeros and long rows truncated.
    """
    lines = split_lines(text)
    n = len(lines)
    matrix: List[List[float]] = []
    for line in lines:
        row = [parse_number(tok) if is_number(tok) else 0.0 for tok in split_matrix_row(line)[:n]]
        row.extend([0.0] * (n - len(row)))
        matrix.append(row)
    return matrix


def from_adjacency_matrix(rows: Sequence[Sequence[float]], names: Optional[Sequence[str]] = None) -> Graph:
    """
    Build a graph from an N×N weight grid (0 = no edge).

    A symmetric pair of cells is one undirected edge: only the upper
    triangle submits it, and add_edge fills in the mirror record.
    """
    try:
        g = Graph()
        n = len(rows)
        _check_size(n)
        for i in range(n):
            g.add_vertex(_name_for(i, names))

        for i in range(n):
            for j in range(n):
                w = rows[i][j]
                if w == 0:
                    continue
                directed = not weights_equal(w, rows[j][i])
                if not directed and i > j:
                    continue
                g.add_edge(i, j, w, directed)
    except ParseFailure:
        raise
    except Exception as e:
        raise ParseFailure("adjacency matrix", str(e)) from e

    logger.debug("Built graph from %dx%d matrix: %r", n, n, g)
    return g


def from_matrix_text(text: str, names: Optional[Sequence[str]] = None) -> Graph:
    try:
        rows = parse_matrix_text(text)
    except Exception as e:
        raise ParseFailure("adjacency matrix", str(e)) from e
    return from_adjacency_matrix(rows, names)


# ===========================================================================
# ADJACENCY LIST
# ===========================================================================
def parse_adjacency_list_text(text: str) -> AdjacencyList:
    """
    Text → {source: [(target, weight), …]}.

    Every source line gets a key, even with no targets.  Repeated source
    lines are merged in order.  Targets mentioned only on the right-hand
    side do NOT get a key of their own.
    """
    adjacency: AdjacencyList = {}
    for line in split_lines(text):
        m = _LINE_RE.match(line)
        if not m:
            raise ValueError(f"line {line!r} does not start with '<vertex>:'")

        src = int(m.group(1))
        targets = adjacency.setdefault(src, [])

        for tgt_str, w_str in _TARGET_RE.findall(m.group(2)):
            if w_str:
                w = float(w_str.replace(",", "."))
            else:
                w = DEFAULT_WEIGHT
            targets.append((int(tgt_str), w))
    return adjacency


def is_symmetric_adjacency(adjacency: Mapping[int, Sequence[Tuple[int, float]]]) -> bool:
    """
    True when every listed edge u→v (w) has a listed reverse v→u (w')
    with the same weight.  An empty list is vacuously symmetric.
    """
    for src, targets in adjacency.items():
        for tgt, w in targets:
            reverse = adjacency.get(tgt, ())
            if not any(r == src and weights_equal(rw, w) for r, rw in reverse):
                return False
    return True


def from_adjacency_list(
    source: Union[str, Mapping[int, Sequence[Tuple[int, float]]]],
    names: Optional[Sequence[str]] = None,
) -> Graph:
    """
    Build a graph from adjacency-list text (or an already-parsed mapping).

    Vertex ids are dense: vertex count = highest id mentioned + 1, and any
    id in between that never appears still becomes a (default-named) vertex.
    """
    try:
        if isinstance(source, str):
            adjacency = parse_adjacency_list_text(source)
        else:
            adjacency = {int(k): list(v) for k, v in source.items()}

        mentioned = set(adjacency)
        for targets in adjacency.values():
            mentioned.update(t for t, _ in targets)
        vertex_count = max(mentioned) + 1 if mentioned else 0
        _check_size(vertex_count)

        g = Graph()
        for i in range(vertex_count):
            g.add_vertex(_name_for(i, names))

        undirected = is_symmetric_adjacency(adjacency)
        for src, targets in adjacency.items():
            for tgt, w in targets:
                if undirected and src > tgt:
                    continue
                g.add_edge(src, tgt, w, not undirected)
    except ParseFailure:
        raise
    except Exception as e:
        raise ParseFailure("adjacency list", str(e)) from e

    logger.debug("Built graph from adjacency list (undirected=%s): %r", undirected, g)
    return g
