"""
Homogeneous 4-vectors over exact Terms.

A Vector4 holds (x, y, z, w). With every component omitted it is the
origin in homogeneous form, (0, 0, 0, 1). All operations return new
vectors; nothing is mutated after construction.
"""

from __future__ import annotations
from typing import Iterator, Tuple

from ..core.types import TermLike
from ..terms.algebra import (
    Term,
    zero,
    one,
    as_term,
    sum_of,
    difference,
    product,
    quotient,
)
from .shape import check_index


class Vector4:
    """
    A homogeneous coordinate (x, y, z, w) with exact Term components.

    Example:
        >>> v = Vector4(6, 8, 10, 2)
        >>> v.normalize()
        Vector4(3, 4, 5, 2)
    """

    __slots__ = ('_x', '_y', '_z', '_w')

    def __init__(
        self,
        x: TermLike = zero,
        y: TermLike = zero,
        z: TermLike = zero,
        w: TermLike = one,
    ):
        object.__setattr__(self, '_x', as_term(x))
        object.__setattr__(self, '_y', as_term(y))
        object.__setattr__(self, '_z', as_term(z))
        object.__setattr__(self, '_w', as_term(w))

    def __setattr__(self, name, value):
        raise AttributeError("Vector4 is immutable")

    @property
    def x(self) -> Term:
        return self._x

    @property
    def y(self) -> Term:
        return self._y

    @property
    def z(self) -> Term:
        return self._z

    @property
    def w(self) -> Term:
        return self._w

    @property
    def components(self) -> Tuple[Term, Term, Term, Term]:
        """Components in (x, y, z, w) order."""
        return (self._x, self._y, self._z, self._w)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.components)

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> Term:
        return self.components[check_index(index)]

    # === Arithmetic ===

    def add(self, other: 'Vector4') -> 'Vector4':
        """Component-wise sum."""
        return Vector4(
            sum_of([self._x, other.x]),
            sum_of([self._y, other.y]),
            sum_of([self._z, other.z]),
            sum_of([self._w, other.w]),
        )

    def subtract(self, other: 'Vector4') -> 'Vector4':
        """Component-wise difference self - other."""
        return Vector4(
            difference(self._x, other.x),
            difference(self._y, other.y),
            difference(self._z, other.z),
            difference(self._w, other.w),
        )

    def scale_by(self, factor: TermLike) -> 'Vector4':
        """Multiply every component, w included, by factor."""
        return Vector4(
            product(self._x, factor),
            product(self._y, factor),
            product(self._z, factor),
            product(self._w, factor),
        )

    def divide_by(self, factor: TermLike) -> 'Vector4':
        """
        Divide every component, w included, by factor.

        Raises:
            TermDivisionError: If factor is zero
        """
        return Vector4(
            quotient(self._x, factor),
            quotient(self._y, factor),
            quotient(self._z, factor),
            quotient(self._w, factor),
        )

    def normalize(self) -> 'Vector4':
        """
        Perspective divide: (x/w, y/w, z/w, w).

        The fourth component is carried through unchanged rather than set
        to one; callers interpret the result as Cartesian x, y, z.
        """
        return Vector4(
            quotient(self._x, self._w),
            quotient(self._y, self._w),
            quotient(self._z, self._w),
            self._w,
        )

    def __add__(self, other):
        if isinstance(other, Vector4):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector4):
            return self.subtract(other)
        return NotImplemented

    # === Value semantics ===

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector4):
            return self.components == other.components
        return NotImplemented

    def __hash__(self) -> int:
        return hash(('Vector4',) + self.components)

    def __str__(self) -> str:
        return f"({self._x}, {self._y}, {self._z}, {self._w})"

    def __repr__(self) -> str:
        return f"Vector4({self._x}, {self._y}, {self._z}, {self._w})"
