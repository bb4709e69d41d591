"""
Shape validation and index exclusion shared by the matrix types.
"""

from typing import List, Tuple

from ..core.constants import INDICES, MATRIX_ORDER
from ..core.exceptions import ShapeError
from ..core.types import RowsLike
from ..terms.algebra import Term, as_term


def all_but(index: int) -> List[int]:
    """
    Return the three indices of a 4x4 matrix other than index, ascending.

    The ascending order fixes the sign pattern of the minor expansion.

    Example:
        >>> all_but(2)
        [0, 1, 3]
    """
    check_index(index)
    return [i for i in INDICES if i != index]


def check_index(index: int, order: int = MATRIX_ORDER) -> int:
    """Raise IndexError unless index is an int in [0, order)."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Index must be an int, got {type(index).__name__}")
    if not 0 <= index < order:
        raise IndexError(f"Index {index} out of range for order {order}")
    return index


def validate_rows(rows: RowsLike, order: int, name: str) -> Tuple[Tuple[Term, ...], ...]:
    """
    Check that rows is an order x order grid and coerce its entries to Terms.

    Args:
        rows: Row-major sequence of sequences
        order: Required number of rows and of entries per row
        name: Type name for error messages

    Returns:
        Tuple of row tuples of Terms

    Raises:
        ShapeError: If the grid is not order x order
    """
    if isinstance(rows, (str, bytes)) or not hasattr(rows, '__len__'):
        raise ShapeError(f"{name} expects a sequence of {order} rows")
    if len(rows) != order:
        raise ShapeError(f"{name} expects {order} rows, got {len(rows)}")

    validated = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise ShapeError(f"{name} row {i} is not a sequence")
        if len(row) != order:
            raise ShapeError(
                f"{name} row {i} should have {order} entries, got {len(row)}"
            )
        validated.append(tuple(as_term(t) for t in row))
    return tuple(validated)
