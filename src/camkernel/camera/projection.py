"""Projection and calibration matrix construction."""

from __future__ import annotations
import math
import numpy as np

from ..errors import InvalidCalibrationError


def build_canonical_projection() -> np.ndarray:
    """
    Build the canonical 3x4 projection matrix [I | 0].
    
    Maps homogeneous camera-space points (x, y, z, 1) to image-plane
    homogeneous points (x, y, z). The perspective divide is not part of
    the matrix; it happens after calibration.
    
    Returns:
        3x4 projection matrix (float64)
    """
    P = np.zeros((3, 4), dtype=np.float64)
    P[0, 0] = 1.0
    P[1, 1] = 1.0
    P[2, 2] = 1.0
    return P


def build_calibration_matrix(
    focal: float,
    width: float,
    height: float
) -> np.ndarray:
    """
    Build the 3x3 pinhole calibration (intrinsics) matrix.
    
        K = [[f, 0, width/2],
             [0, f, height/2],
             [0, 0, 1]]
    
    Args:
        focal: Focal length in pixels, must be > 0
        width, height: Image dimensions in pixels, must be >= 0
    
    Returns:
        3x3 calibration matrix (float64)
    
    Raises:
        InvalidCalibrationError: On non-finite values, focal <= 0 or
            negative image dimensions
    """
    try:
        f = float(focal)
        w = float(width)
        h = float(height)
    except (TypeError, ValueError) as e:
        raise InvalidCalibrationError(f"calibration values must be numbers: {e}") from e
    
    if not math.isfinite(f) or f <= 0.0:
        raise InvalidCalibrationError(f"focal must be > 0, got {focal}")
    
    if not (math.isfinite(w) and math.isfinite(h)) or w < 0.0 or h < 0.0:
        raise InvalidCalibrationError(
            f"image dimensions must be >= 0, got {width}x{height}"
        )
    
    K = np.eye(3, dtype=np.float64)
    K[0, 0] = f
    K[1, 1] = f
    K[0, 2] = w / 2
    K[1, 2] = h / 2
    return K
