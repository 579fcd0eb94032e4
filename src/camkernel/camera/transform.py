"""
Pinhole camera transform.

This module provides the CameraTransform class, which owns the
world-to-camera, projection and calibration matrices of a virtual pinhole
camera and maps world points to pixel coordinates through them.
"""

from __future__ import annotations
from typing import Callable, Optional
import numpy as np

from ..errors import SingularProjectionError
from ..utils.debug import debug_matrix
from .lookat import build_lookat_world_to_camera
from .projection import build_canonical_projection, build_calibration_matrix
from .utils import (
    ensure_points3,
    ensure_vector3,
    homogeneous_point,
    invert_rigid_transform,
    format_matrix,
    sub_block,
)


# ============================================================================
# Constants
# ============================================================================

EPS_DEPTH = 1e-12

W2C_LABEL = "W2C"
PROJECTION_LABEL = "P"
CALIBRATION_LABEL = "K"

MatrixHook = Callable[[str, np.ndarray], None]


class CameraTransform:
    """
    World-to-pixel transform of a pinhole camera.

    Holds three matrices, each overwritten wholesale by its setter:
        - world_to_camera (4x4): rigid transform, identity by default
        - projection (3x4): zero until set_projection() is called
        - calibration (3x3): identity by default

    Setters validate their inputs before touching state, so a failed call
    leaves the camera exactly as it was. Instances are not thread-safe.

    Attributes:
        on_update: Callable (label, matrix) invoked after each successful
            setter. Defaults to debug_matrix (prints when CAMKERNEL_DEBUG
            is set).

    Example:
        >>> cam = CameraTransform()
        >>> cam.set_look_at([0, 0, 5], [0, 0, 0], [0, 1, 0])
        >>> cam.set_projection()
        >>> cam.set_calibration(1.0, 2, 2)
        >>> cam.project_point([0, 0, 0])
        array([1., 1., 5.])
    """

    def __init__(self, on_update: Optional[MatrixHook] = None):
        self._world_to_camera = np.eye(4, dtype=np.float64)
        self._projection = np.zeros((3, 4), dtype=np.float64)
        self._calibration = np.eye(3, dtype=np.float64)
        self.on_update = on_update if on_update is not None else debug_matrix

    # ------------------------------------------------------------------
    # Matrix access
    # ------------------------------------------------------------------

    @property
    def world_to_camera(self) -> np.ndarray:
        """(4, 4) world-to-camera matrix (copy)."""
        return self._world_to_camera.copy()

    @property
    def projection(self) -> np.ndarray:
        """(3, 4) projection matrix (copy)."""
        return self._projection.copy()

    @property
    def calibration(self) -> np.ndarray:
        """(3, 3) calibration matrix (copy)."""
        return self._calibration.copy()

    @property
    def camera_matrix(self) -> np.ndarray:
        """Composite (3, 4) matrix K @ P @ W2C mapping world points to pixels."""
        return self._calibration @ self._projection @ self._world_to_camera

    @property
    def camera_position(self) -> np.ndarray:
        """(3,) camera center in world coordinates."""
        return invert_rigid_transform(self._world_to_camera)[:3, 3]

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_look_at(self, eye, target, up) -> None:
        """
        Place the camera at eye, looking at target.

        Args:
            eye: (3,) Camera position in world coordinates
            target: (3,) Point the camera looks at
            up: (3,) World up hint, must not be parallel to target - eye

        Raises:
            DimensionMismatchError: If an input is not a 3-vector
            DegenerateGeometryError: If eye == target or up is parallel to
                the viewing direction; world_to_camera is left unchanged
        """
        w2c = build_lookat_world_to_camera(eye, target, up)
        self._world_to_camera = w2c
        self._notify(W2C_LABEL, w2c)

    def set_projection(self) -> None:
        """Set the canonical [I | 0] projection."""
        P = build_canonical_projection()
        self._projection = P
        self._notify(PROJECTION_LABEL, P)

    def set_calibration(self, focal: float, width: float, height: float) -> None:
        """
        Set intrinsics from focal length and image size.

        The principal point is placed at the image center (width/2, height/2).

        Raises:
            InvalidCalibrationError: If focal <= 0 or a dimension is negative;
                calibration is left unchanged
        """
        K = build_calibration_matrix(focal, width, height)
        self._calibration = K
        self._notify(CALIBRATION_LABEL, K)

    def _notify(self, label: str, matrix: np.ndarray) -> None:
        if self.on_update is not None:
            self.on_update(label, matrix.copy())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def project_point(self, p) -> np.ndarray:
        """
        Project a 3D world point onto the image.

        Args:
            p: (3,) point in world coordinates

        Returns:
            (3,) array (pixel_x, pixel_y, depth). Depth is positive in front
            of the camera and negative behind it.

        Raises:
            DimensionMismatchError: If p is not a 3-vector
            SingularProjectionError: If the point lies on the camera plane
                (depth is zero)
        """
        ph = homogeneous_point(p)
        pcam = self._world_to_camera @ ph
        pproj = self._projection @ pcam
        pcalib = self._calibration @ pproj

        depth = float(pcalib[2])
        if not abs(depth) > EPS_DEPTH:
            raise SingularProjectionError(
                f"point {ph[:3].tolist()} projects with depth {depth:.3g}"
            )

        return np.array([pcalib[0] / depth, pcalib[1] / depth, depth], dtype=np.float64)

    def project_points(self, points) -> np.ndarray:
        """
        Project an (N, 3) array of world points.

        Returns:
            (N, 3) array of (pixel_x, pixel_y, depth) rows

        Raises:
            DimensionMismatchError: If points is not (N, 3)
            SingularProjectionError: If any point has zero depth
        """
        pts = ensure_points3(points)
        N = pts.shape[0]

        pts_h = np.concatenate([pts, np.ones((N, 1), dtype=np.float64)], axis=1)
        pcalib = pts_h @ self.camera_matrix.T
        depth = pcalib[:, 2]

        singular = ~(np.abs(depth) > EPS_DEPTH)
        if singular.any():
            idx = np.flatnonzero(singular)
            raise SingularProjectionError(
                f"{idx.size} of {N} points project with zero depth "
                f"(indices {idx[:10].tolist()})"
            )

        out = np.empty((N, 3), dtype=np.float64)
        out[:, 0] = pcalib[:, 0] / depth
        out[:, 1] = pcalib[:, 1] / depth
        out[:, 2] = depth
        return out

    def unproject_point(self, pixel_x: float, pixel_y: float, depth: float) -> np.ndarray:
        """
        Recover the world point that projects to (pixel_x, pixel_y, depth).

        Inverts the calibration, the 3x3 block of the projection and the
        world-to-camera transform in turn.

        Raises:
            SingularProjectionError: If depth is zero or the calibration or
                projection cannot be inverted
        """
        depth = float(depth)
        if not abs(depth) > EPS_DEPTH:
            raise SingularProjectionError(f"cannot unproject at depth {depth:.3g}")

        pcalib = np.array([pixel_x * depth, pixel_y * depth, depth], dtype=np.float64)

        try:
            pproj = np.linalg.solve(self._calibration, pcalib)
            P3 = sub_block(self._projection, 0, 0, 3, 3)
            pcam = np.linalg.solve(P3, pproj - self._projection[:, 3])
        except np.linalg.LinAlgError as e:
            raise SingularProjectionError(f"projection chain is not invertible: {e}") from e

        c2w = invert_rigid_transform(self._world_to_camera)
        return (c2w @ np.append(pcam, 1.0))[:3]

    def transform_vector(self, v) -> np.ndarray:
        """
        Rotate a world-space direction into camera space.

        Only the rotation block is applied; translation does not affect
        directions.

        Raises:
            DimensionMismatchError: If v is not a 3-vector
        """
        vec = ensure_vector3(v, "vector")
        R = sub_block(self._world_to_camera, 0, 0, 3, 3)
        return R @ vec

    def __repr__(self) -> str:
        return "\n".join([
            f"{type(self).__name__}(",
            format_matrix(W2C_LABEL, self._world_to_camera),
            format_matrix(PROJECTION_LABEL, self._projection),
            format_matrix(CALIBRATION_LABEL, self._calibration),
            ")",
        ])
