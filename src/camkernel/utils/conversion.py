"""Type conversion utilities."""

from __future__ import annotations
from typing import Any
import numpy as np


def to_numpy_array(x: Any, dtype: np.dtype = np.float64) -> np.ndarray:
    """
    Convert array-like input to a NumPy array.

    Tensor-like objects are accepted by duck typing: anything exposing
    detach().cpu().numpy() (e.g. a torch.Tensor) is read through that chain,
    so no tensor library is imported or required here.

    Args:
        x: numpy array, nested sequence, or tensor-like object
        dtype: Target dtype

    Returns:
        NumPy array
    """
    if hasattr(x, "detach"):
        x = x.detach().cpu().numpy()
    return np.asarray(x, dtype=dtype)
