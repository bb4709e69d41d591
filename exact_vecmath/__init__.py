"""
exact-vecmath: Exact Linear Algebra over Homogeneous Coordinates

A small library of 4-vectors and 4x4 matrices whose entries are exact
Terms (rationals, symbols and expressions built from them) rather than
floats, for projective and affine geometry where rounding is unacceptable.

Key Features:
- Exact Term algebra on sympy: rationals, symbols and expanded expressions
- Immutable Vector4 (x, y, z, w) with perspective divide
- Immutable Matrix4x4: transform, compose, determinant, minors, cofactors,
  transpose and 3x3 sub-matrix extraction
- Float export/import with PyTorch and NumPy

API Design:
- Every operation returns a new value; nothing is mutated
- Wrong shapes fail at construction with ShapeError
- Division by zero is raised by the Term algebra as TermDivisionError

Example:
    >>> from exact_vecmath import Vector4, translation
    >>> translation(1, 2, 3).transform(Vector4(0, 0, 0))
    Vector4(1, 2, 3, 1)
"""

__version__ = "0.1.0"
__author__ = "exact-vecmath Contributors"

from . import core
from . import terms
# utils before linalg: interop depends on the linear algebra types
from . import utils
from . import linalg

from .core import ShapeError, TermDivisionError, UnboundSymbolError
from .terms import Term, Symbol, zero, one, symbols, evaluate
from .linalg import (
    Vector4,
    Matrix4x4,
    Matrix3x3,
    identity,
    translation,
    scaling,
)

__all__ = [
    "core",
    "terms",
    "linalg",
    "utils",
    # Errors
    "ShapeError",
    "TermDivisionError",
    "UnboundSymbolError",
    # Terms
    "Term",
    "evaluate",
    "Symbol",
    "zero",
    "one",
    "symbols",
    # Linear algebra
    "Vector4",
    "Matrix4x4",
    "Matrix3x3",
    "identity",
    "translation",
    "scaling",
]
