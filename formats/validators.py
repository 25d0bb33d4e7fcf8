"""
validators.py — Input Text Validation
======================================
Shape checks run BEFORE the parsers.  The parsers are deliberately lenient
(unparseable matrix cells become 0, short rows are padded); these
functions are what turn user typos into readable messages.

Every validator returns None when the text is acceptable, or an error
message string otherwise — the web layer hands the message straight back
to the user.
"""

import math
import re
from typing import List, Optional

# one line of an adjacency list:   3: →1 →2(4.5) ->0(1,5)
ADJACENCY_LINE_RE = re.compile(
    r"^\s*\d+\s*:(?:\s*(?:→|->)\s*\d+(?:\(\s*[\d.,]+\s*\))?)*\s*$"
)

_WEIGHT_RE = re.compile(r"\(\s*([\d.,]+)\s*\)")

# a plain decimal number, '.' or ',' as the decimal separator
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:[.,]\d*)?|[.,]\d+)$")

# every vertex id on a line: the source and each arrow target
_VERTEX_ID_RE = re.compile(r"(?:^|→|->)\s*(\d+)")

# largest graph an import may build; list ids are dense, so id < MAX_VERTICES
MAX_VERTICES = 1000


def split_lines(text: str) -> List[str]:
    """Non-blank lines, stripped."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def split_matrix_row(line: str) -> List[str]:
    """
    Tokens of one matrix row.

    Whitespace (and ';') always separate cells.  Commas separate cells when
    the row is written comma-style ("0,1,2" or "0, 1, 2"); otherwise a comma
    inside a token is a decimal separator ("0 1,5 2").
    """
    tokens = line.replace(";", " ").split()
    comma_style = any(t.endswith(",") for t in tokens) or (len(tokens) == 1 and "," in tokens[0])
    if comma_style:
        tokens = [t for t in re.split(r"[\s,;]+", line) if t]
    return tokens


def parse_number(token: str, default: float = 0.0) -> float:
    """Locale-tolerant float parse: '1,5' and '1.5' are the same number."""
    if token is None:
        return default
    token = token.strip()
    if not token:
        return default
    try:
        return float(token.replace(",", "."))
    except ValueError:
        return default


def is_number(token: str) -> bool:
    if not _NUMBER_RE.match(token.strip()):
        return False
    return math.isfinite(parse_number(token, float("nan")))


# ---------------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------------
def validate_matrix(text: str) -> Optional[str]:
    if not text or not text.strip():
        return "Matrix must not be empty"

    lines = split_lines(text)
    expected = len(lines)
    if expected > MAX_VERTICES:
        return f"Matrix has {expected} rows; at most {MAX_VERTICES} vertices are supported"

    for row_no, line in enumerate(lines, start=1):
        values = split_matrix_row(line)
        if len(values) != expected:
            return f"Row {row_no}: expected {expected} values, found {len(values)}"
        for value in values:
            if not is_number(value):
                return f"Row {row_no}, value '{value}': invalid number format"
            if parse_number(value) < 0:
                return f"Row {row_no}, value '{value}': weights must not be negative"
    return None


# ---------------------------------------------------------------------------
# Adjacency list
# ---------------------------------------------------------------------------
def validate_adjacency_list(text: str) -> Optional[str]:
    if not text or not text.strip():
        return "Adjacency list must not be empty"

    for line in split_lines(text):
        if not ADJACENCY_LINE_RE.match(line):
            return (
                f"Invalid line: '{line}'. "
                f"Expected 'vertex: →neighbour(weight) →neighbour(weight)' "
                f"or 'vertex: ->neighbour(weight) ->neighbour(weight)'"
            )
        for weight in _WEIGHT_RE.findall(line):
            if not is_number(weight):
                return f"Invalid line: '{line}'. Weight '{weight}' is not a number"
        for vertex_id in _VERTEX_ID_RE.findall(line):
            if int(vertex_id) >= MAX_VERTICES:
                return (
                    f"Invalid line: '{line}'. Vertex {int(vertex_id)} is out of range; "
                    f"at most {MAX_VERTICES} vertices are supported"
                )
    return None
