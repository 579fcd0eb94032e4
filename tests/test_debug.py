import numpy as np
import pytest

from camkernel.utils.debug import DEBUG_ENV_VAR, debug_matrix, debug_print, is_debug_enabled


@pytest.mark.parametrize("value, enabled", [("1", True), ("true", True), ("0", False), ("", False), ("False", False)])
def test_is_debug_enabled(value, enabled, monkeypatch):
    monkeypatch.setenv(DEBUG_ENV_VAR, value)
    assert is_debug_enabled() is enabled


def test_debug_output_is_silent_by_default(capsys, monkeypatch):
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    debug_print("[Test] hidden")
    debug_matrix("K", np.eye(3))
    assert capsys.readouterr().out == ""


def test_debug_matrix_prints_label_and_values(capsys, monkeypatch):
    monkeypatch.setenv(DEBUG_ENV_VAR, "1")
    debug_matrix("K", np.diag([2.0, 2.0, 1.0]))
    out = capsys.readouterr().out
    assert out.startswith("[K] 3x3")
    assert "2." in out
