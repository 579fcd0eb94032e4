"""Look-at camera transform."""

from __future__ import annotations
from typing import Optional
import numpy as np

from .utils import ensure_vector3, normalize


EPS_DEGENERATE = 1e-12
EPS_PARALLEL = 1e-6

WORLD_UP = np.array([0.0, 1.0, 0.0], dtype=np.float64)


def build_lookat_world_to_camera(
    eye,
    target,
    up: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Build world-to-camera (w2c) matrix from look-at parameters.
    
    Camera coordinate system:
        +Z = forward (eye -> target)
        +X = up x forward
        +Y = forward x right
    
    With the default Y-up hint this is a right-handed frame in which points
    in front of the camera have positive depth.
    
    Args:
        eye: (3,) Camera position in world coordinates
        target: (3,) Look-at point in world coordinates
        up: (3,) World 'up' direction hint (default: Y-up)
    
    Returns:
        w2c: (4,4) world-to-camera transformation matrix (float64)
    
    Raises:
        DimensionMismatchError: If any input is not a 3-vector
        DegenerateGeometryError: If eye == target, or up is parallel to
            the viewing direction
    """
    eye = ensure_vector3(eye, "eye")
    target = ensure_vector3(target, "target")
    up = WORLD_UP.copy() if up is None else ensure_vector3(up, "up")
    
    # Step 1: forward direction (camera Z-axis)
    forward = normalize(
        target - eye, EPS_DEGENERATE, "view direction (eye and target coincide)"
    )
    
    # Step 2: right direction (camera X-axis)
    # Parallel test on the unit up hint, so its length does not matter
    up_dir = normalize(up, EPS_DEGENERATE, "up hint")
    right = normalize(
        np.cross(up_dir, forward), EPS_PARALLEL, "right axis (up is parallel to view direction)"
    )
    
    # Step 3: camera Y-axis, already unit length
    cam_up = np.cross(forward, right)
    
    # Step 4: camera-to-world rotation has columns [right, up, forward]
    R_cw = np.stack([right, cam_up, forward], axis=1)
    R_wc = R_cw.T
    t = -R_wc @ eye
    
    w2c = np.eye(4, dtype=np.float64)
    w2c[:3, :3] = R_wc
    w2c[:3, 3] = t
    
    return w2c
