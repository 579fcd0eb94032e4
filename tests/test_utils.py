import numpy as np
import pytest

from camkernel.camera.lookat import build_lookat_world_to_camera
from camkernel.camera.utils import (
    ensure_matrix_shape,
    ensure_vector3,
    homogeneous_point,
    invert_rigid_transform,
    normalize,
    sub_block,
)
from camkernel.errors import DegenerateGeometryError, DimensionMismatchError
from camkernel.utils.conversion import to_numpy_array


def test_homogeneous_point_appends_one():
    assert np.array_equal(homogeneous_point([1, 2, 3]), [1.0, 2.0, 3.0, 1.0])
    with pytest.raises(DimensionMismatchError):
        homogeneous_point([1, 2, 3, 1])


def test_ensure_vector3_copies_input():
    src = np.array([1.0, 2.0, 3.0])
    vec = ensure_vector3(src)
    vec[0] = 9.0
    assert src[0] == 1.0


def test_ensure_matrix_shape_accepts_flat_input():
    M = ensure_matrix_shape(list(range(16)), (4, 4))
    assert M.shape == (4, 4)
    assert M[1, 0] == 4.0
    with pytest.raises(DimensionMismatchError):
        ensure_matrix_shape(np.eye(3), (4, 4))


def test_normalize_rejects_zero():
    assert np.allclose(normalize(np.array([3.0, 0.0, 4.0]), 1e-12), [0.6, 0.0, 0.8])
    with pytest.raises(DegenerateGeometryError):
        normalize(np.zeros(3), 1e-12)


def test_sub_block_bounds():
    m = np.arange(12, dtype=float).reshape(3, 4)
    assert np.array_equal(sub_block(m, 1, 2, 2, 2), [[6.0, 7.0], [10.0, 11.0]])
    with pytest.raises(DimensionMismatchError):
        sub_block(m, 2, 0, 2, 2)


def test_invert_rigid_transform():
    w2c = build_lookat_world_to_camera([3, -1, 2], [0, 1, 0], [0, 0, 1])
    assert np.allclose(invert_rigid_transform(w2c) @ w2c, np.eye(4), atol=1e-12)
    assert np.allclose(invert_rigid_transform(w2c), np.linalg.inv(w2c), atol=1e-12)


def test_to_numpy_array_handles_lists_and_tensor_like():
    class _FakeTensor:
        def detach(self):
            return self

        def cpu(self):
            return self

        def numpy(self):
            return np.array([1, 2, 3], dtype=np.float32)

    assert to_numpy_array([1, 2, 3]).dtype == np.float64
    assert np.array_equal(to_numpy_array(_FakeTensor()), [1.0, 2.0, 3.0])
