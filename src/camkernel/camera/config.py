"""Camera configuration parser."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
import numpy as np
import yaml
from omegaconf import DictConfig, OmegaConf

from ..errors import CameraConfigError
from ..utils.debug import debug_print
from .transform import CameraTransform, MatrixHook


DEFAULT_FOCAL = 1.0
DEFAULT_WIDTH = 0.0
DEFAULT_HEIGHT = 0.0
DEFAULT_EYE = (0.0, 0.0, 0.0)
DEFAULT_TARGET = (0.0, 0.0, 1.0)
DEFAULT_UP = (0.0, 1.0, 0.0)


def _as_triple(value: Any, key: str) -> np.ndarray:
    if isinstance(value, (str, bytes)):
        raise CameraConfigError(f"{key} must be a list of 3 numbers, got {value!r}")
    try:
        vec = np.asarray(list(value), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise CameraConfigError(f"{key} must be a list of 3 numbers, got {value!r}") from e
    if vec.shape != (3,):
        raise CameraConfigError(f"{key} must be a list of 3 numbers, got {value!r}")
    return vec


def _as_float(value: Any, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise CameraConfigError(f"{key} must be a number, got {value!r}") from e


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise CameraConfigError(f"{key} must be true or false, got {value!r}")
    return value


@dataclass
class CameraConfig:
    """
    Camera configuration.

    Attributes:
        focal: Focal length in pixels
        width, height: Image dimensions in pixels
        eye: Camera position [x, y, z]
        target: Look-at point [x, y, z]
        up: Up direction hint [x, y, z]
        projection: Whether to set the canonical projection

    The defaults describe a camera at the origin looking down +Z with
    identity-like intrinsics.
    """
    focal: float = DEFAULT_FOCAL
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    eye: np.ndarray = field(default_factory=lambda: np.array(DEFAULT_EYE))
    target: np.ndarray = field(default_factory=lambda: np.array(DEFAULT_TARGET))
    up: np.ndarray = field(default_factory=lambda: np.array(DEFAULT_UP))
    projection: bool = True

    @classmethod
    def from_dict(cls, cfg: Union[Dict[str, Any], DictConfig]) -> 'CameraConfig':
        """
        Create CameraConfig from a dictionary or OmegaConf node.

        Accepts either the camera section itself or a mapping with a
        top-level 'camera' key. Look-at parameters live under 'lookat'.

        Raises:
            CameraConfigError: If a field has the wrong type or shape
        """
        if isinstance(cfg, DictConfig):
            cfg = OmegaConf.to_container(cfg, resolve=True)
        if not isinstance(cfg, dict):
            raise CameraConfigError(f"camera config must be a mapping, got {type(cfg).__name__}")

        cfg = cfg.get('camera', cfg)
        if not isinstance(cfg, dict):
            raise CameraConfigError("'camera' section must be a mapping")

        lookat = cfg.get('lookat') or {}
        if not isinstance(lookat, dict):
            raise CameraConfigError("'lookat' section must be a mapping")

        return cls(
            focal=_as_float(cfg.get('focal', DEFAULT_FOCAL), 'focal'),
            width=_as_float(cfg.get('width', DEFAULT_WIDTH), 'width'),
            height=_as_float(cfg.get('height', DEFAULT_HEIGHT), 'height'),
            eye=_as_triple(lookat.get('eye', DEFAULT_EYE), 'lookat.eye'),
            target=_as_triple(lookat.get('target', DEFAULT_TARGET), 'lookat.target'),
            up=_as_triple(lookat.get('up', DEFAULT_UP), 'lookat.up'),
            projection=_as_bool(cfg.get('projection', True), 'projection'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (the layout accepted by from_dict)."""
        return {
            'focal': self.focal,
            'width': self.width,
            'height': self.height,
            'lookat': {
                'eye': np.asarray(self.eye).tolist(),
                'target': np.asarray(self.target).tolist(),
                'up': np.asarray(self.up).tolist(),
            },
            'projection': self.projection,
        }


def load_camera_config(config_path: Union[str, Path]) -> CameraConfig:
    """
    Load camera configuration from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Parsed CameraConfig

    Raises:
        FileNotFoundError: If the file does not exist
        CameraConfigError: If the content is malformed
    """
    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        config = OmegaConf.load(config_path)
    except yaml.YAMLError as e:
        raise CameraConfigError(f"Cannot parse config file {config_path}: {e}") from e
    debug_print(f"[Config] Loaded camera configuration from: {config_path}")
    return CameraConfig.from_dict(config)


def make_camera_from_config(
    camera_cfg: Union[CameraConfig, Dict[str, Any], DictConfig],
    on_update: Optional[MatrixHook] = None
) -> CameraTransform:
    """
    Build a fully configured CameraTransform.

    Applies look-at, projection (unless disabled) and calibration in that
    order.

    Example:
        >>> cam = make_camera_from_config({
        ...     "focal": 1.0, "width": 2, "height": 2,
        ...     "lookat": {"eye": [0, 0, 5], "target": [0, 0, 0], "up": [0, 1, 0]},
        ... })
        >>> cam.project_point([0, 0, 0])
        array([1., 1., 5.])
    """
    if not isinstance(camera_cfg, CameraConfig):
        camera_cfg = CameraConfig.from_dict(camera_cfg)

    camera = CameraTransform(on_update=on_update)
    camera.set_look_at(camera_cfg.eye, camera_cfg.target, camera_cfg.up)
    if camera_cfg.projection:
        camera.set_projection()
    camera.set_calibration(camera_cfg.focal, camera_cfg.width, camera_cfg.height)

    debug_print(
        f"[Config] Camera f={camera_cfg.focal} "
        f"{camera_cfg.width:g}x{camera_cfg.height:g} "
        f"eye={np.asarray(camera_cfg.eye).tolist()}"
    )
    return camera
