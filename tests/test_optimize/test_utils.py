import numpy as np
import pytest

from optiviz.optimize.utils import approx_grad, approx_hessian, is_pos_def


def test_approx_grad_matches_linear_function():
    def fun(x: np.ndarray) -> float:
        return float(3 * x[0] - 2 * x[1])

    grad = approx_grad(fun, np.array([0.2, -0.1]))
    assert np.allclose(grad, np.array([3.0, -2.0]), atol=1e-6)


def test_approx_grad_uses_two_evaluations_per_coordinate():
    calls = []

    def fun(x: np.ndarray) -> float:
        calls.append(x)
        return float(x @ x)

    grad = approx_grad(fun, np.ones(3))
    assert len(calls) == 6
    assert np.allclose(grad, 2.0 * np.ones(3), atol=1e-6)


def test_approx_hessian_differences_the_gradient():
    def grad(x: np.ndarray) -> np.ndarray:
        return np.array([2 * x[0] + x[1], x[0] + 6 * x[1]])

    hess = approx_hessian(grad, np.array([0.5, -1.5]))
    assert hess.shape == (2, 2)
    assert np.allclose(hess, [[2.0, 1.0], [1.0, 6.0]], atol=1e-6)
    assert np.array_equal(hess, hess.T)


def test_approx_grad_invalid_eps():
    with pytest.raises(ValueError):
        approx_grad(lambda x: float(x[0]), np.array([0.0]), eps=0.0)
    with pytest.raises(ValueError):
        approx_hessian(lambda x: x, np.array([0.0]), eps=-1.0)


def test_is_pos_def():
    assert is_pos_def(np.array([[4.0, 1.0], [1.0, 2.0]]))
    assert not is_pos_def(np.array([[1.0, 2.0], [2.0, 1.0]]))
    assert not is_pos_def(np.array([[1.0, 1.0], [1.0, 1.0]]))
