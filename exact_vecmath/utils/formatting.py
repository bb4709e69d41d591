"""
Diagnostic text rendering for matrices and vectors.

Purely for debugging: rendering has no effect on computed values.
Works on anything exposing an `elements` grid (Matrix4x4, Matrix3x3).
"""

from typing import Optional

from .config import Config, DEFAULT_CONFIG


def format_row(row, config: Optional[Config] = None) -> str:
    """Render one row as '[ a  b  c  d ]'."""
    config = config or DEFAULT_CONFIG
    return f"[ {config.column_separator.join(str(t) for t in row)} ]"


def format_matrix(matrix, label: str, config: Optional[Config] = None) -> str:
    """
    Render a matrix as a label line followed by one bracketed line per row.

    Example:
        >>> print(format_matrix(identity(), 'I'))
        I =
          [ 1  0  0  0 ]
          [ 0  1  0  0 ]
          [ 0  0  1  0 ]
          [ 0  0  0  1 ]
    """
    config = config or DEFAULT_CONFIG
    lines = [f"{label} ="]
    lines.extend(f"{config.indent}{format_row(row, config)}" for row in matrix.elements)
    return '\n'.join(lines)


def print_matrix(matrix, label: str, config: Optional[Config] = None) -> None:
    """Print format_matrix(matrix, label)."""
    print(format_matrix(matrix, label, config))


def format_vector(vector, label: Optional[str] = None) -> str:
    """Render a vector as '(x, y, z, w)', optionally prefixed by 'label = '."""
    text = '(' + ', '.join(str(t) for t in vector) + ')'
    if label is None:
        return text
    return f"{label} = {text}"
