"""
4x4 matrices over exact Terms.

Matrix4x4 acts on homogeneous coordinates (Vector4) and composes with other
4x4 matrices. The determinant family is built bottom-up:

    determinant2x2 -> minor -> determinant / minors

Every operation returns a new matrix. The entries are held as a tuple of
four 4-tuples, so the shape checked at construction cannot change later.

Index conventions:
    elements[row][col], rows and columns numbered 0..3
    vectors are column vectors: result[i] = sum_k elements[i][k] * v[k]
"""

from __future__ import annotations
from typing import Optional, Tuple

from ..core.constants import INDICES, MATRIX_ORDER
from ..core.types import Row4, RowsLike, TermLike
from ..terms.algebra import (
    Term,
    as_term,
    sum_of,
    difference,
    product,
    quotient,
    negate,
    is_one,
)
from ..utils.config import Config
from ..utils.formatting import print_matrix
from .matrix3 import Matrix3x3
from .shape import all_but, check_index, validate_rows
from .vector import Vector4


class Matrix4x4:
    """
    Immutable 4x4 grid of Terms.

    Raises ShapeError at construction unless given exactly four rows of
    exactly four entries.

    Example:
        >>> m = Matrix4x4([[1, 0, 0, 5], [0, 1, 0, 6], [0, 0, 1, 7], [0, 0, 0, 1]])
        >>> m.transform(Vector4(1, 2, 3))
        Vector4(6, 8, 10, 1)
    """

    __slots__ = ('_elements',)

    def __init__(self, rows: RowsLike):
        object.__setattr__(
            self, '_elements', validate_rows(rows, MATRIX_ORDER, 'Matrix4x4')
        )

    def __setattr__(self, name, value):
        raise AttributeError("Matrix4x4 is immutable")

    # === Access ===

    @property
    def elements(self) -> Tuple[Row4, Row4, Row4, Row4]:
        return self._elements

    def row(self, index: int) -> Row4:
        return self._elements[check_index(index)]

    def column(self, index: int) -> Row4:
        check_index(index)
        return tuple(r[index] for r in self._elements)

    def __getitem__(self, position: Tuple[int, int]) -> Term:
        row, col = position
        return self._elements[check_index(row)][check_index(col)]

    # === Transformation and composition ===

    def transform(self, vector: Vector4) -> Vector4:
        """
        Post-multiply vector as a column vector:

            [ m00 m01 m02 m03 ]   [ x ]
            [ m10 m11 m12 m13 ] x [ y ]
            [ m20 m21 m22 m23 ]   [ z ]
            [ m30 m31 m32 m33 ]   [ w ]
        """
        v = vector.components
        return Vector4(*(
            sum_of([product(row[k], v[k]) for k in INDICES])
            for row in self._elements
        ))

    def scale_by(self, factor: TermLike) -> 'Matrix4x4':
        """Multiply all 16 entries by factor; returns self when factor is one."""
        factor = as_term(factor)
        if is_one(factor):
            return self
        return Matrix4x4([
            [product(term, factor) for term in row]
            for row in self._elements
        ])

    def divide_by(self, factor: TermLike) -> 'Matrix4x4':
        """
        Divide all 16 entries by factor; returns self when factor is one.

        Raises:
            TermDivisionError: If factor is zero
        """
        factor = as_term(factor)
        if is_one(factor):
            return self
        return Matrix4x4([
            [quotient(term, factor) for term in row]
            for row in self._elements
        ])

    def multiply_matrix(self, other: 'Matrix4x4') -> 'Matrix4x4':
        """Matrix product self x other."""
        return Matrix4x4([
            [Matrix4x4.cross_multiply(self, row, other, col) for col in INDICES]
            for row in INDICES
        ])

    @staticmethod
    def cross_multiply(
        row_matrix: 'Matrix4x4',
        row: int,
        col_matrix: 'Matrix4x4',
        col: int
    ) -> Term:
        """
        Dot product of a row of row_matrix with a column of col_matrix:

            row_matrix[row][0] * col_matrix[0][col] + ... +
            row_matrix[row][3] * col_matrix[3][col]
        """
        r = row_matrix.row(row)
        c = col_matrix.column(col)
        return sum_of([product(r[k], c[k]) for k in INDICES])

    def __matmul__(self, other):
        if isinstance(other, Matrix4x4):
            return self.multiply_matrix(other)
        if isinstance(other, Vector4):
            return self.transform(other)
        return NotImplemented

    # === Determinants ===

    def determinant2x2(self, row1: int, row2: int, col1: int, col2: int) -> Term:
        """
        Determinant of the 2x2 matrix picked out in the order given:

            [ m[row1][col1]  m[row1][col2] ]
            [ m[row2][col1]  m[row2][col2] ]
        """
        for index in (row1, row2, col1, col2):
            check_index(index)
        e = self._elements
        return difference(
            product(e[row1][col1], e[row2][col2]),
            product(e[row1][col2], e[row2][col1]),
        )

    def minor(self, row: int, col: int) -> Term:
        """
        Determinant of the 3x3 matrix left after deleting row and col,
        expanded along its first remaining row.
        """
        r = all_but(row)
        c = all_but(col)
        e = self._elements
        return sum_of([
            product(e[r[0]][c[0]], self.determinant2x2(r[1], r[2], c[1], c[2])),
            negate(product(e[r[0]][c[1]], self.determinant2x2(r[1], r[2], c[0], c[2]))),
            product(e[r[0]][c[2]], self.determinant2x2(r[1], r[2], c[0], c[1])),
        ])

    def determinant(self) -> Term:
        """Laplace expansion along row 0."""
        terms = []
        for col in INDICES:
            m = self.minor(0, col)
            if col & 1:
                m = negate(m)
            terms.append(product(self._elements[0][col], m))
        return sum_of(terms)

    def minors(self) -> 'Matrix4x4':
        """Matrix of minor(row, col) at every position."""
        return Matrix4x4([
            [self.minor(row, col) for col in INDICES]
            for row in INDICES
        ])

    def cofactors(self) -> 'Matrix4x4':
        """
        Apply the checkerboard sign pattern to this matrix's own entries:
        unchanged where row + col is even, negated where it is odd.

        For the classical cofactor matrix call minors().cofactors().
        """
        return Matrix4x4([
            [
                term if (row + col) % 2 == 0 else negate(term)
                for col, term in enumerate(self._elements[row])
            ]
            for row in INDICES
        ])

    # === Restructuring ===

    def transpose(self) -> 'Matrix4x4':
        return Matrix4x4([
            [self._elements[col][row] for col in INDICES]
            for row in INDICES
        ])

    def without(self, skip_row: int, skip_col: int) -> Matrix3x3:
        """The 3x3 matrix left after deleting skip_row and skip_col."""
        return Matrix3x3([
            [self._elements[r][c] for c in all_but(skip_col)]
            for r in all_but(skip_row)
        ])

    # === Diagnostics ===

    def print_out(self, label: str, config: Optional[Config] = None) -> None:
        """Print the label followed by the four bracketed rows."""
        print_matrix(self, label, config)

    # === Value semantics ===

    def __eq__(self, other) -> bool:
        if isinstance(other, Matrix4x4):
            return self._elements == other._elements
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('Matrix4x4', self._elements))

    def __repr__(self) -> str:
        rows = ', '.join(
            '[' + ', '.join(str(t) for t in row) + ']' for row in self._elements
        )
        return f"Matrix4x4([{rows}])"
