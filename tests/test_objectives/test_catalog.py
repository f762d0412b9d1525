import numpy as np
import pytest

from optiviz.objectives import ALL_FUNCTIONS, get_function
from optiviz.optimize.utils import approx_grad, approx_hessian

FUNCTION_IDS = [f.id for f in ALL_FUNCTIONS]


def _sample_points(func, rng, count=5):
    """Start, minima and random points from the inner half of the bounds."""
    x_min, x_max, y_min, y_max = func.bounds
    cx, cy = (x_min + x_max) / 2, (y_min + y_max) / 2
    hx, hy = (x_max - x_min) / 4, (y_max - y_min) / 4
    randoms = [
        np.array([cx + hx * u, cy + hy * v]) for u, v in rng.uniform(-1, 1, size=(count, 2))
    ]
    return [func.default_start, *func.minima, *randoms]


def test_catalog_ids_are_unique():
    assert len(FUNCTION_IDS) == len(set(FUNCTION_IDS)) == 22


@pytest.mark.parametrize("function_id", FUNCTION_IDS)
def test_gradient_vanishes_at_minima(function_id):
    func = get_function(function_id)
    for minimum in func.minima:
        assert np.linalg.norm(func.gradient(minimum)) < 1e-4


@pytest.mark.parametrize("function_id", FUNCTION_IDS)
def test_value_at_minima_matches_optimum(function_id):
    func = get_function(function_id)
    for minimum in func.minima:
        assert func.value(minimum) == pytest.approx(func.optimum, abs=1e-6)


@pytest.mark.parametrize("function_id", FUNCTION_IDS)
def test_gradient_matches_central_differences(function_id, rng):
    func = get_function(function_id)
    for x in _sample_points(func, rng):
        analytic = np.asarray(func.gradient(x))
        numeric = approx_grad(func.value, x, eps=1e-7)
        np.testing.assert_allclose(analytic, numeric, rtol=1e-5, atol=1e-4)


@pytest.mark.parametrize("function_id", FUNCTION_IDS)
def test_hessian_matches_gradient_differences(function_id, rng):
    func = get_function(function_id)
    for x in _sample_points(func, rng):
        analytic = np.asarray(func.hessian(x))
        numeric = approx_hessian(func.gradient, x)
        np.testing.assert_allclose(analytic, numeric, rtol=1e-5, atol=1e-4)


@pytest.mark.parametrize("function_id", FUNCTION_IDS)
def test_hessian_is_symmetric(function_id, rng):
    func = get_function(function_id)
    for x in _sample_points(func, rng):
        hess = np.asarray(func.hessian(x))
        assert hess.shape == (2, 2)
        assert np.allclose(hess, hess.T, rtol=1e-9, atol=1e-9)


@pytest.mark.parametrize("function_id", FUNCTION_IDS)
def test_metadata_is_consistent(function_id):
    func = get_function(function_id)
    assert func.dimension == 2
    assert func.default_start.shape == (2,)
    x_min, x_max, y_min, y_max = func.bounds
    assert x_min < x_max and y_min < y_max
    assert len(func.minima) >= 1
    assert func.name and func.description


def test_get_function_unknown_id():
    with pytest.raises(ValueError, match="Unknown objective function"):
        get_function("ackley")
