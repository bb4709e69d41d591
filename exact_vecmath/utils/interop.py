"""
Float interop with PyTorch and NumPy.

Exact matrices and vectors are exported by evaluating every Term to a
Fraction and only then rounding to the configured float dtype. Imports go
the other way: every float is converted to the Fraction it represents
exactly (optionally bounded by Config.max_denominator), so no rounding is
introduced on the way in.

Shapes:
    matrices: (4, 4), batches of matrices: (N, 4, 4)
    vectors:  (4,) in (x, y, z, w) order
"""

import math
import warnings
from fractions import Fraction
from typing import Optional, Sequence, Union

import numpy as np
import torch

from ..core.exceptions import ShapeError
from ..core.types import Bindings
from ..linalg.matrix import Matrix4x4
from ..linalg.vector import Vector4
from ..terms.algebra import Term, as_term, evaluate
from .config import Config, DEFAULT_CONFIG


ArrayLike = Union[np.ndarray, torch.Tensor]


# =============================================================================
# Export
# =============================================================================

def _evaluate_rows(matrix: Matrix4x4, bindings: Optional[Bindings]):
    return [[float(evaluate(t, bindings)) for t in row] for row in matrix.elements]


def matrix_to_tensor(
    matrix: Matrix4x4,
    bindings: Optional[Bindings] = None,
    config: Optional[Config] = None
) -> torch.Tensor:
    """
    Evaluate a matrix into a float tensor.

    Args:
        matrix: Matrix to export
        bindings: Values for any symbols in the entries
        config: Supplies dtype and device

    Returns:
        Tensor of shape (4, 4)

    Raises:
        UnboundSymbolError: If an entry has a symbol missing from bindings
    """
    config = config or DEFAULT_CONFIG
    return torch.tensor(
        _evaluate_rows(matrix, bindings),
        dtype=getattr(torch, config.dtype),
        device=config.device,
    )


def matrices_to_tensor(
    matrices: Sequence[Matrix4x4],
    bindings: Optional[Bindings] = None,
    config: Optional[Config] = None
) -> torch.Tensor:
    """Evaluate a sequence of matrices into a tensor of shape (N, 4, 4)."""
    config = config or DEFAULT_CONFIG
    if len(matrices) == 0:
        return torch.zeros(0, 4, 4, dtype=getattr(torch, config.dtype), device=config.device)
    return torch.stack([matrix_to_tensor(m, bindings, config) for m in matrices])


def vector_to_tensor(
    vector: Vector4,
    bindings: Optional[Bindings] = None,
    config: Optional[Config] = None
) -> torch.Tensor:
    """Evaluate a vector into a float tensor of shape (4,)."""
    config = config or DEFAULT_CONFIG
    return torch.tensor(
        [float(evaluate(t, bindings)) for t in vector],
        dtype=getattr(torch, config.dtype),
        device=config.device,
    )


def matrix_to_numpy(
    matrix: Matrix4x4,
    bindings: Optional[Bindings] = None,
    config: Optional[Config] = None
) -> np.ndarray:
    """Evaluate a matrix into a float array of shape (4, 4)."""
    config = config or DEFAULT_CONFIG
    return np.array(_evaluate_rows(matrix, bindings), dtype=config.dtype)


def vector_to_numpy(
    vector: Vector4,
    bindings: Optional[Bindings] = None,
    config: Optional[Config] = None
) -> np.ndarray:
    """Evaluate a vector into a float array of shape (4,)."""
    config = config or DEFAULT_CONFIG
    return np.array([float(evaluate(t, bindings)) for t in vector], dtype=config.dtype)


# =============================================================================
# Import
# =============================================================================

def _to_constant(value, config: Config) -> Term:
    if isinstance(value, (np.integer, int)) and not isinstance(value, (bool, np.bool_)):
        return as_term(int(value))
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value {value} to an exact Term")
    fraction = Fraction(value)
    if config.max_denominator is not None:
        fraction = fraction.limit_denominator(config.max_denominator)
    return as_term(fraction)


def _as_numpy(data: ArrayLike) -> np.ndarray:
    if isinstance(data, torch.Tensor):
        if data.requires_grad:
            warnings.warn(
                "Converting a tensor that requires grad; the result is detached "
                "from the computation graph"
            )
        array = data.detach().cpu().numpy()
    else:
        array = np.asarray(data)
    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number):
        raise TypeError(f"Expected a numeric array, got dtype {array.dtype}")
    return array


def matrix_from_numpy(array: ArrayLike, config: Optional[Config] = None) -> Matrix4x4:
    """
    Build an exact matrix from a (4, 4) array or tensor.

    Args:
        array: NumPy array, torch tensor, or nested sequence of shape (4, 4)
        config: Supplies max_denominator

    Returns:
        Matrix4x4 of sympy Rational entries

    Raises:
        ShapeError: If the input is not (4, 4)
        ValueError: If any entry is NaN or infinite
    """
    config = config or DEFAULT_CONFIG
    array = _as_numpy(array)
    if array.shape != (4, 4):
        raise ShapeError(f"Expected shape (4, 4), got {tuple(array.shape)}")
    return Matrix4x4([[_to_constant(v, config) for v in row] for row in array.tolist()])


def matrix_from_tensor(tensor: torch.Tensor, config: Optional[Config] = None) -> Matrix4x4:
    """Build an exact matrix from a (4, 4) tensor, e.g. Motor.to_matrix()."""
    return matrix_from_numpy(tensor, config)


def vector_from_numpy(array: ArrayLike, config: Optional[Config] = None) -> Vector4:
    """Build an exact vector from a (4,) array or tensor in (x, y, z, w) order."""
    config = config or DEFAULT_CONFIG
    array = _as_numpy(array)
    if array.shape != (4,):
        raise ShapeError(f"Expected shape (4,), got {tuple(array.shape)}")
    return Vector4(*(_to_constant(v, config) for v in array.tolist()))


def vector_from_tensor(tensor: torch.Tensor, config: Optional[Config] = None) -> Vector4:
    """Build an exact vector from a (4,) tensor."""
    return vector_from_numpy(tensor, config)
