"""
camkernel - Pinhole Camera Transform Kernel

Geometric core of a virtual pinhole camera: look-at extrinsics, projection
and calibration matrices, point projection and direction transforms.

Components:
    - Camera: CameraTransform and matrix builders
    - Errors: Error taxonomy (all ValueError subclasses)
    - Utils: Conversion and debug output

Example:
    >>> from camkernel import CameraTransform
    >>> 
    >>> cam = CameraTransform()
    >>> cam.set_look_at([0, 0, 5], [0, 0, 0], [0, 1, 0])
    >>> cam.set_projection()
    >>> cam.set_calibration(focal=1.0, width=2, height=2)
    >>> 
    >>> cam.project_point([0, 0, 0])   # pixel (1, 1), depth 5
    array([1., 1., 5.])
"""

__version__ = "1.0.0"

# Camera
from .camera import (
    CameraTransform,
    CameraConfig,
    load_camera_config,
    make_camera_from_config,
    build_lookat_world_to_camera,
    build_canonical_projection,
    build_calibration_matrix,
)

# Errors
from .errors import (
    CameraError,
    DimensionMismatchError,
    DegenerateGeometryError,
    InvalidCalibrationError,
    SingularProjectionError,
    CameraConfigError,
)

# Utils
from .utils import (
    to_numpy_array,
    debug_print,
    debug_matrix,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    
    # Camera
    "CameraTransform",
    "CameraConfig",
    "load_camera_config",
    "make_camera_from_config",
    "build_lookat_world_to_camera",
    "build_canonical_projection",
    "build_calibration_matrix",
    
    # Errors
    "CameraError",
    "DimensionMismatchError",
    "DegenerateGeometryError",
    "InvalidCalibrationError",
    "SingularProjectionError",
    "CameraConfigError",
    
    # Utils
    "to_numpy_array",
    "debug_print",
    "debug_matrix",
    "is_debug_enabled",
]
