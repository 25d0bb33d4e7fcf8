"""
formats/
--------
Text in, text out.

    from formats import from_matrix_text, from_adjacency_list
    from formats import validate_matrix, validate_adjacency_list
    from formats import adjacency_matrix_text, adjacency_list_text
"""

from formats.validators import (
    validate_matrix,
    validate_adjacency_list,
    parse_number,
)
from formats.parser import (
    parse_matrix_text,
    from_adjacency_matrix,
    from_matrix_text,
    parse_adjacency_list_text,
    is_symmetric_adjacency,
    from_adjacency_list,
)
from formats.export import (
    adjacency_matrix_text,
    adjacency_list_text,
    format_weight,
)

__all__ = [
    "validate_matrix",
    "validate_adjacency_list",
    "parse_number",
    "parse_matrix_text",
    "from_adjacency_matrix",
    "from_matrix_text",
    "parse_adjacency_list_text",
    "is_symmetric_adjacency",
    "from_adjacency_list",
    "adjacency_matrix_text",
    "adjacency_list_text",
    "format_weight",
]
