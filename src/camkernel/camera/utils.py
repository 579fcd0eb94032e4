"""Camera matrix utilities."""

from __future__ import annotations
from typing import Tuple
import numpy as np

from ..errors import DegenerateGeometryError, DimensionMismatchError
from ..utils.conversion import to_numpy_array


def ensure_vector3(v, name: str = "vector") -> np.ndarray:
    """
    Convert input to a length-3 float64 vector.
    
    Args:
        v: Input vector (array-like with exactly 3 components)
        name: Operand name used in error messages
    
    Returns:
        (3,) float64 numpy array (a fresh copy)
    
    Raises:
        DimensionMismatchError: If input does not have shape (3,)
    """
    vec = np.array(to_numpy_array(v), dtype=np.float64)
    
    if vec.shape != (3,):
        raise DimensionMismatchError(
            f"{name} must have 3 components, got shape {vec.shape}"
        )
    
    return vec


def ensure_points3(points, name: str = "points") -> np.ndarray:
    """Convert input to an (N, 3) float64 array, raising on any other shape."""
    pts = np.array(to_numpy_array(points), dtype=np.float64)
    
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise DimensionMismatchError(f"{name} must be (N, 3), got {pts.shape}")
    
    return pts


def ensure_matrix_shape(m, shape: Tuple[int, int], name: str = "matrix") -> np.ndarray:
    """
    Convert input to a float64 matrix of a fixed shape.
    
    A flat array with the right number of elements is reshaped row-major,
    so a 4x4 transform may be given as 16 values.
    
    Raises:
        DimensionMismatchError: If input cannot be read as the requested shape
    """
    M = np.array(m, dtype=np.float64)
    
    if M.ndim == 1 and M.size == shape[0] * shape[1]:
        M = M.reshape(shape)
    
    if M.shape != tuple(shape):
        raise DimensionMismatchError(
            f"{name} must be {shape[0]}x{shape[1]}, got shape {M.shape}"
        )
    
    return M


def homogeneous_point(p) -> np.ndarray:
    """Promote a 3D point to homogeneous coordinates by appending 1.0."""
    return np.append(ensure_vector3(p, "point"), 1.0)


def normalize(v: np.ndarray, eps: float, what: str = "vector") -> np.ndarray:
    """
    Scale a vector to unit length.
    
    Args:
        v: Input vector
        eps: Smallest magnitude accepted
        what: Description used in error messages
    
    Returns:
        Unit-length copy of v
    
    Raises:
        DegenerateGeometryError: If |v| < eps
    """
    n = float(np.linalg.norm(v))
    if not np.isfinite(n) or n < eps:
        raise DegenerateGeometryError(f"cannot normalize {what}: magnitude {n:.3g}")
    return v / n


def sub_block(m: np.ndarray, row: int, col: int, height: int, width: int) -> np.ndarray:
    """Copy of the axis-aligned block m[row:row+height, col:col+width]."""
    if row < 0 or col < 0 or row + height > m.shape[0] or col + width > m.shape[1]:
        raise DimensionMismatchError(
            f"block ({row}, {col}, {height}x{width}) outside matrix of shape {m.shape}"
        )
    return m[row:row + height, col:col + width].copy()


def invert_rigid_transform(m: np.ndarray) -> np.ndarray:
    """
    Invert a 4x4 rigid transform [R | t; 0 0 0 1].
    
    Uses R^T instead of a general inverse; R must be orthonormal.
    
    Returns:
        Inverted 4x4 matrix (float64)
    """
    M = ensure_matrix_shape(m, (4, 4), "rigid transform")
    R = M[:3, :3]
    t = M[:3, 3]
    
    inv = np.eye(4, dtype=np.float64)
    inv[:3, :3] = R.T
    inv[:3, 3] = -R.T @ t
    return inv


def format_matrix(name: str, m: np.ndarray, precision: int = 4) -> str:
    """Human-readable dump of a labelled matrix."""
    body = np.array2string(
        np.asarray(m), precision=precision, suppress_small=True, separator=", "
    )
    rows, cols = np.asarray(m).shape
    return f"[{name}] {rows}x{cols}\n{body}"
