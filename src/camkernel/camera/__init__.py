"""Camera system: look-at, projection and calibration transforms."""

from .utils import (
    ensure_vector3,
    ensure_points3,
    ensure_matrix_shape,
    homogeneous_point,
    normalize,
    sub_block,
    invert_rigid_transform,
    format_matrix,
)
from .lookat import build_lookat_world_to_camera
from .projection import build_canonical_projection, build_calibration_matrix
from .transform import CameraTransform
from .config import CameraConfig, load_camera_config, make_camera_from_config

__all__ = [
    "ensure_vector3",
    "ensure_points3",
    "ensure_matrix_shape",
    "homogeneous_point",
    "normalize",
    "sub_block",
    "invert_rigid_transform",
    "format_matrix",
    "build_lookat_world_to_camera",
    "build_canonical_projection",
    "build_calibration_matrix",
    "CameraTransform",
    "CameraConfig",
    "load_camera_config",
    "make_camera_from_config",
]
