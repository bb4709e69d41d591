"""
Constructors for common 4x4 matrices.

All factories return fresh immutable matrices; arguments may be Terms or
exact numbers.
"""

from ..core.constants import INDICES
from ..core.types import RowsLike, TermLike
from ..terms.algebra import zero, one
from .matrix import Matrix4x4


def identity() -> Matrix4x4:
    """Ones on the diagonal, zeros elsewhere."""
    return Matrix4x4([
        [one if row == col else zero for col in INDICES]
        for row in INDICES
    ])


def zero_matrix() -> Matrix4x4:
    return Matrix4x4([[zero] * 4 for _ in INDICES])


def translation(tx: TermLike = zero, ty: TermLike = zero, tz: TermLike = zero) -> Matrix4x4:
    """
    Translation by (tx, ty, tz) in the last column.

    Args:
        tx, ty, tz: Offsets along each axis

    Returns:
        Matrix moving the point (x, y, z, 1) to (x+tx, y+ty, z+tz, 1)
    """
    return Matrix4x4([
        [one, zero, zero, tx],
        [zero, one, zero, ty],
        [zero, zero, one, tz],
        [zero, zero, zero, one],
    ])


def scaling(sx: TermLike = one, sy: TermLike = one, sz: TermLike = one) -> Matrix4x4:
    """Axis-aligned scaling with w left untouched."""
    return Matrix4x4([
        [sx, zero, zero, zero],
        [zero, sy, zero, zero],
        [zero, zero, sz, zero],
        [zero, zero, zero, one],
    ])


def from_rows(rows: RowsLike) -> Matrix4x4:
    """Build a matrix from row-major data (alias for the constructor)."""
    return Matrix4x4(rows)
