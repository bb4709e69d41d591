"""
Reduced 3x3 matrices.

A Matrix3x3 is what remains of a Matrix4x4 after deleting one row and one
column. It is a value holder; the only arithmetic it offers is its
determinant, which equals the corresponding minor of the source matrix.
"""

from __future__ import annotations
from typing import Tuple

from ..core.constants import REDUCED_ORDER
from ..core.types import Row3, RowsLike
from ..terms.algebra import Term, sum_of, difference, product
from .shape import check_index, validate_rows


class Matrix3x3:
    """Immutable 3x3 grid of Terms."""

    __slots__ = ('_elements',)

    def __init__(self, rows: RowsLike):
        object.__setattr__(
            self, '_elements', validate_rows(rows, REDUCED_ORDER, 'Matrix3x3')
        )

    def __setattr__(self, name, value):
        raise AttributeError("Matrix3x3 is immutable")

    @property
    def elements(self) -> Tuple[Row3, Row3, Row3]:
        return self._elements

    def row(self, index: int) -> Row3:
        return self._elements[check_index(index, REDUCED_ORDER)]

    def __getitem__(self, position: Tuple[int, int]) -> Term:
        row, col = position
        return self._elements[check_index(row, REDUCED_ORDER)][check_index(col, REDUCED_ORDER)]

    def determinant(self) -> Term:
        """Rule of Sarrus."""
        e = self._elements
        return difference(
            sum_of([
                product(product(e[0][0], e[1][1]), e[2][2]),
                product(product(e[0][1], e[1][2]), e[2][0]),
                product(product(e[0][2], e[1][0]), e[2][1]),
            ]),
            sum_of([
                product(product(e[0][2], e[1][1]), e[2][0]),
                product(product(e[0][0], e[1][2]), e[2][1]),
                product(product(e[0][1], e[1][0]), e[2][2]),
            ]),
        )

    def __eq__(self, other) -> bool:
        if isinstance(other, Matrix3x3):
            return self._elements == other._elements
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('Matrix3x3', self._elements))

    def __repr__(self) -> str:
        rows = ', '.join(
            '[' + ', '.join(str(t) for t in row) + ']' for row in self._elements
        )
        return f"Matrix3x3([{rows}])"
