"""Tests for debug mode functionality."""

import numpy as np
import pytest

from optiviz.diagnostics import (
    check_hessian_symmetry,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from optiviz.objectives import rosenbrock
from optiviz.optimize import EvaluationCounter


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    # Back to previous (False in this block)
    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    set_debug_enabled(False)

    with debug_context(True):
        assert is_debug_enabled()
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


def test_check_hessian_symmetry() -> None:
    check_hessian_symmetry(np.array([[2.0, 1.0], [1.0, 3.0]]))
    # relative to the largest entry
    check_hessian_symmetry(np.array([[1e6, 1.0], [1.0 + 1e-3, 1e6]]))
    with pytest.raises(ValueError, match="rosenbrock: Hessian is not symmetric"):
        check_hessian_symmetry(np.array([[2.0, 1.0], [0.0, 3.0]]), name="rosenbrock")


def test_counter_checks_symmetry_only_in_debug_mode(monkeypatch) -> None:
    calls = []

    def spy(hess, name="objective", **kwargs):
        calls.append(name)

    monkeypatch.setattr("optiviz.optimize.core.check_hessian_symmetry", spy)
    counter = EvaluationCounter(rosenbrock)

    with debug_context(False):
        counter.hessian(np.zeros(2))
    assert calls == []

    with debug_context(True):
        counter.hessian(np.zeros(2))
    assert calls == ["rosenbrock"]
