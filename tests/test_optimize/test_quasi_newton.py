import numpy as np
import pytest

from optiviz.objectives import quadratic, rosenbrock
from optiviz.optimize import (
    bfgs,
    bfgs_update,
    dfp,
    dfp_update,
    is_pos_def,
    sr1,
    sr1_update,
)


@pytest.mark.parametrize("update", [bfgs_update, dfp_update, sr1_update])
def test_updates_satisfy_secant_condition(update, rng):
    for _ in range(5):
        s = rng.normal(size=3)
        y = s + 0.1 * rng.normal(size=3)
        assert s @ y > 0
        res = update(np.eye(3), s, y)
        assert res.applied
        assert np.allclose(res.matrix @ y, s)
        assert np.allclose(res.matrix, res.matrix.T)


def test_bfgs_update_skips_on_curvature_violation():
    h = np.array([[2.0, 0.0], [0.0, 1.0]])
    res = bfgs_update(h, [1.0, 0.0], [-1.0, 0.0])
    assert not res.applied
    assert "curvature" in res.reason
    assert np.array_equal(res.matrix, h)
    assert not bfgs_update(h, [1.0, 0.0], [0.0, 1.0]).applied


def test_dfp_update_skips_on_orthogonal_pair():
    res = dfp_update(np.eye(2), [1.0, 0.0], [0.0, 1.0])
    assert not res.applied
    assert np.array_equal(res.matrix, np.eye(2))


def test_sr1_update_skips_when_secant_already_holds():
    # s = H y, so the rank-one correction is zero.
    res = sr1_update(np.eye(2), [1.0, 2.0], [1.0, 2.0])
    assert not res.applied


def test_sr1_update_may_be_indefinite():
    res = sr1_update(np.eye(2), [1.0, 0.0], [-1.0, 0.0])
    assert res.applied
    assert np.allclose(res.matrix, [[-1.0, 0.0], [0.0, 1.0]])
    assert not is_pos_def(res.matrix)


@pytest.mark.parametrize("optimize", [bfgs, dfp, sr1])
def test_trajectory_keeps_secant_condition(optimize):
    res = optimize(rosenbrock, [-1.2, 1.0], {"max_iterations": 200})
    assert res.converged
    assert res.nit > 10
    checked = 0
    for prev, cur in zip(res.iterations, res.iterations[1:]):
        if optimize is bfgs:
            assert is_pos_def(cur.current_hessian_approx)
        if np.array_equal(cur.current_hessian_approx, prev.current_hessian_approx):
            continue  # update skipped
        s = cur.x - prev.x
        y = cur.gradient - prev.gradient
        h_y = cur.current_hessian_approx @ y
        scale = np.linalg.norm(s) + np.linalg.norm(prev.current_hessian_approx @ y)
        assert np.linalg.norm(h_y - s) <= 1e-6 * scale + 1e-12
        checked += 1
    assert checked > 5


@pytest.mark.parametrize("optimize", [bfgs, dfp, sr1])
def test_direction_pairs_with_the_approximation_that_chose_it(optimize):
    res = optimize(rosenbrock, [-1.2, 1.0], {"max_iterations": 200})
    for prev, cur in zip(res.iterations, res.iterations[1:]):
        assert np.array_equal(cur.hessian_approx, prev.current_hessian_approx)
        chosen = -cur.hessian_approx @ prev.gradient
        if chosen @ prev.gradient < 0:
            assert np.allclose(cur.direction, chosen)
        else:
            assert np.array_equal(cur.direction, -prev.gradient)


def test_bfgs_pairing_on_quadratic():
    res = bfgs(quadratic, [2.0, 2.0])
    first, second = res.iterations[0], res.iterations[1]
    assert np.array_equal(second.direction, [-10.0, -6.0])
    assert np.array_equal(second.hessian_approx, np.eye(2))
    assert not np.array_equal(second.current_hessian_approx, np.eye(2))
    assert np.array_equal(first.hessian_approx, first.current_hessian_approx)


def test_quasi_newton_starts_from_identity():
    for optimize in (bfgs, dfp, sr1):
        res = optimize(quadratic, [2.0, 2.0])
        assert np.array_equal(res.iterations[0].hessian_approx, np.eye(2))
        assert np.array_equal(res.iterations[1].direction, -res.iterations[0].gradient)


def test_initial_hessian_approx_is_used():
    h0 = np.linalg.inv(np.array([[4.0, 1.0], [1.0, 2.0]]))
    res = bfgs(quadratic, [2.0, 2.0], {"initial_hessian_approx": h0})
    assert np.allclose(res.iterations[0].hessian_approx, h0)
    # Exact inverse Hessian: one Newton step to the minimum.
    assert res.converged
    assert res.nit == 1


def test_non_descent_approximation_falls_back_to_negative_gradient():
    res = bfgs(quadratic, [2.0, 2.0], {"initial_hessian_approx": -np.eye(2)})
    first = res.iterations[1]
    assert np.array_equal(first.direction, -res.iterations[0].gradient)
    assert first.alpha > 0.0
    assert first.fx < res.iterations[0].fx


def test_initial_hessian_approx_shape_is_checked():
    with pytest.raises(ValueError):
        dfp(quadratic, [2.0, 2.0], {"initial_hessian_approx": np.eye(3)})


def test_dfp_and_sr1_agree_on_quadratic_minimum():
    for optimize in (dfp, sr1):
        res = optimize(quadratic, [2.0, 2.0])
        assert res.converged
        assert np.allclose(res.solution, 0.0, atol=1e-4)
