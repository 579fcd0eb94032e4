"""Debug utilities."""

from __future__ import annotations
import os

import numpy as np

DEBUG_ENV_VAR = "CAMKERNEL_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def debug_matrix(name: str, matrix: np.ndarray):
    """Print a labelled matrix dump if debug mode is enabled."""
    if is_debug_enabled():
        from ..camera.utils import format_matrix
        print(format_matrix(name, matrix))
