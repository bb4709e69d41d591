"""
Linear algebra over homogeneous coordinates.

Vector4 and Matrix4x4 with exact Term entries, the Matrix3x3 produced by
row/column deletion, and factories for common matrices.
"""

from .vector import Vector4

from .matrix import Matrix4x4

from .matrix3 import Matrix3x3

from .shape import (
    all_but,
    validate_rows,
)

from .factories import (
    identity,
    zero_matrix,
    translation,
    scaling,
    from_rows,
)

__all__ = [
    # Types
    "Vector4",
    "Matrix4x4",
    "Matrix3x3",
    # Helpers
    "all_but",
    "validate_rows",
    # Factories
    "identity",
    "zero_matrix",
    "translation",
    "scaling",
    "from_rows",
]
