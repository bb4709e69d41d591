"""
Core module for exact-vecmath.

Contains:
- Constants: Dimensions, component indices and formatting defaults
- Types: Type aliases for Terms, rows and bindings
- Exceptions: Shape, division and evaluation errors
"""

from .constants import (
    VECTOR_SIZE,
    MATRIX_ORDER,
    REDUCED_ORDER,
    INDICES,
    IDX_X,
    IDX_Y,
    IDX_Z,
    IDX_W,
    COMPONENT_NAMES,
    DEFAULT_DTYPE,
    DEFAULT_DEVICE,
    DEFAULT_COLUMN_SEPARATOR,
    DEFAULT_INDENT,
)

from .types import (
    TermLike,
    Bindings,
    Row4,
    Row3,
    RowsLike,
)

from .exceptions import (
    ShapeError,
    TermDivisionError,
    UnboundSymbolError,
)

__all__ = [
    # Constants
    "VECTOR_SIZE",
    "MATRIX_ORDER",
    "REDUCED_ORDER",
    "INDICES",
    "IDX_X",
    "IDX_Y",
    "IDX_Z",
    "IDX_W",
    "COMPONENT_NAMES",
    "DEFAULT_DTYPE",
    "DEFAULT_DEVICE",
    "DEFAULT_COLUMN_SEPARATOR",
    "DEFAULT_INDENT",
    # Types
    "TermLike",
    "Bindings",
    "Row4",
    "Row3",
    "RowsLike",
    # Exceptions
    "ShapeError",
    "TermDivisionError",
    "UnboundSymbolError",
]
