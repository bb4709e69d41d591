"""
Pytest configuration and fixtures for exact-vecmath tests.
"""

import pytest

from exact_vecmath.linalg import Matrix4x4, Vector4, identity
from exact_vecmath.terms import Symbol, symbols


@pytest.fixture
def identity_matrix():
    """4x4 identity matrix."""
    return identity()


@pytest.fixture
def marker_matrix():
    """Matrix of distinct symbols a00 .. a33, one per position."""
    return Matrix4x4([
        [Symbol(f"a{row}{col}") for col in range(4)]
        for row in range(4)
    ])


@pytest.fixture
def marker_bindings():
    """Integer values for the marker symbols."""
    values = [
        [2, -1, 0, 3],
        [1, 4, -2, 0],
        [0, 5, 1, -3],
        [7, 0, 2, 1],
    ]
    return {f"a{row}{col}": values[row][col] for row in range(4) for col in range(4)}


@pytest.fixture
def triangular_matrix():
    """Upper triangular matrix with determinant 24."""
    return Matrix4x4([
        [1, 2, 3, 4],
        [0, 2, 5, 6],
        [0, 0, 3, 7],
        [0, 0, 0, 4],
    ])


@pytest.fixture
def dense_matrix():
    """Integer matrix with no zero entries."""
    return Matrix4x4([
        [3, 1, 4, 1],
        [5, 9, 2, 6],
        [5, 3, 5, 8],
        [9, 7, 9, 3],
    ])


@pytest.fixture
def symbolic_vector():
    """Vector of four independent symbols."""
    x, y, z, w = symbols('x y z w')
    return Vector4(x, y, z, w)
