"""Common utilities."""

from .conversion import to_numpy_array
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix,
)

__all__ = [
    # Conversion
    "to_numpy_array",
    
    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix",
]
