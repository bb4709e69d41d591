"""
Utility functions for exact-vecmath.

Includes configuration management, diagnostic formatting, and float
interop with PyTorch and NumPy.
"""

from .config import Config, DEFAULT_CONFIG, load_config, save_config
from .formatting import (
    format_row,
    format_matrix,
    format_vector,
    print_matrix,
)
from .interop import (
    matrix_to_tensor,
    matrices_to_tensor,
    vector_to_tensor,
    matrix_to_numpy,
    vector_to_numpy,
    matrix_from_numpy,
    matrix_from_tensor,
    vector_from_numpy,
    vector_from_tensor,
)

__all__ = [
    # Config
    "Config",
    "DEFAULT_CONFIG",
    "load_config",
    "save_config",
    # Formatting
    "format_row",
    "format_matrix",
    "format_vector",
    "print_matrix",
    # Interop
    "matrix_to_tensor",
    "matrices_to_tensor",
    "vector_to_tensor",
    "matrix_to_numpy",
    "vector_to_numpy",
    "matrix_from_numpy",
    "matrix_from_tensor",
    "vector_from_numpy",
    "vector_from_tensor",
]
