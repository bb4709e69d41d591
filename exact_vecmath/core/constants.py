"""
Centralized constants for exact-vecmath.

This module defines the fixed dimensions and index names used throughout
the library. Using these constants keeps index arithmetic readable.

Usage:
    from exact_vecmath.core.constants import MATRIX_ORDER, INDICES
"""

from typing import Tuple

# =============================================================================
# Dimensions
# =============================================================================

# Homogeneous coordinates have four components (x, y, z, w)
VECTOR_SIZE: int = 4

# Square matrix acting on homogeneous coordinates
MATRIX_ORDER: int = 4

# Order of the reduced matrix produced by deleting one row and one column
REDUCED_ORDER: int = 3

# Row/column indices of a 4x4 matrix in ascending order
INDICES: Tuple[int, ...] = (0, 1, 2, 3)


# =============================================================================
# Component Indices
# =============================================================================

IDX_X: int = 0
IDX_Y: int = 1
IDX_Z: int = 2
IDX_W: int = 3

COMPONENT_NAMES: Tuple[str, ...] = ("x", "y", "z", "w")


# =============================================================================
# Float Interop Defaults
# =============================================================================

DEFAULT_DTYPE: str = "float64"
DEFAULT_DEVICE: str = "cpu"

# Diagnostic formatting
DEFAULT_COLUMN_SEPARATOR: str = "  "
DEFAULT_INDENT: str = "  "
