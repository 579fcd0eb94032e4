from pathlib import Path

import numpy as np
import pytest
from omegaconf import OmegaConf

from camkernel.camera.config import CameraConfig, load_camera_config, make_camera_from_config
from camkernel.errors import CameraConfigError, DegenerateGeometryError

CAMERA_YAML = """\
camera:
  focal: 1.0
  width: 2
  height: 2
  lookat:
    eye: [0, 0, 5]
    target: [0, 0, 0]
    up: [0, 1, 0]
"""


def test_defaults_look_down_positive_z():
    cfg = CameraConfig()
    assert cfg.focal == 1.0
    assert np.array_equal(cfg.eye, [0.0, 0.0, 0.0])
    assert np.array_equal(cfg.target, [0.0, 0.0, 1.0])
    cam = make_camera_from_config(cfg, on_update=lambda label, m: None)
    assert np.allclose(cam.world_to_camera, np.eye(4))


def test_from_dict_reads_lookat_section():
    cfg = CameraConfig.from_dict(
        {"focal": 500, "width": 640, "height": 480, "lookat": {"eye": [1, 2, 3], "target": [0, 0, 0]}}
    )
    assert cfg.focal == 500.0
    assert cfg.width == 640.0
    assert np.array_equal(cfg.eye, [1.0, 2.0, 3.0])
    assert np.array_equal(cfg.up, [0.0, 1.0, 0.0])


def test_from_dict_accepts_camera_section_and_dictconfig():
    node = OmegaConf.create(CAMERA_YAML)
    cfg = CameraConfig.from_dict(node)
    assert np.array_equal(cfg.eye, [0.0, 0.0, 5.0])
    assert cfg.height == 2.0


def test_to_dict_is_accepted_by_from_dict():
    cfg = CameraConfig.from_dict(OmegaConf.create(CAMERA_YAML))
    again = CameraConfig.from_dict(cfg.to_dict())
    assert again.focal == cfg.focal
    assert np.array_equal(again.eye, cfg.eye)
    assert np.array_equal(again.up, cfg.up)


@pytest.mark.parametrize(
    "raw",
    [
        {"lookat": {"eye": [0, 0]}},
        {"lookat": {"up": "up"}},
        {"focal": "long"},
        {"lookat": [0, 0, 5]},
        {"lookat": {"eye": "123"}},
        {"projection": "false"},
        {"projection": 0},
    ],
)
def test_from_dict_rejects_malformed_fields(raw):
    with pytest.raises(CameraConfigError):
        CameraConfig.from_dict(raw)


def test_load_camera_config(tmp_path: Path):
    path = tmp_path / "camera.yaml"
    path.write_text(CAMERA_YAML, encoding="utf-8")
    cfg = load_camera_config(path)
    cam = make_camera_from_config(cfg, on_update=lambda label, m: None)
    assert np.allclose(cam.project_point([0, 0, 0]), [1.0, 1.0, 5.0])


def test_load_camera_config_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_camera_config(tmp_path / "nope.yaml")


def test_make_camera_without_projection_keeps_zero_matrix():
    cam = make_camera_from_config({"projection": False}, on_update=lambda label, m: None)
    assert np.array_equal(cam.projection, np.zeros((3, 4)))


def test_make_camera_propagates_geometry_errors():
    with pytest.raises(DegenerateGeometryError):
        make_camera_from_config({"lookat": {"eye": [1, 1, 1], "target": [1, 1, 1]}})


def test_load_camera_config_unparsable_yaml(tmp_path: Path):
    path = tmp_path / "broken.yaml"
    path.write_text("lookat: [unclosed\n", encoding="utf-8")
    with pytest.raises(CameraConfigError):
        load_camera_config(path)


def test_projection_flag_must_be_boolean():
    assert CameraConfig.from_dict({"projection": False}).projection is False
    assert CameraConfig.from_dict({}).projection is True
