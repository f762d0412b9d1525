import numpy as np

from optiviz.linalg import inverse
from optiviz.objectives import ObjectiveFunction, quadratic, rosenbrock
from optiviz.optimize import newton_method


def make_objective(value, gradient, hessian, start, dimension=2):
    return ObjectiveFunction(
        id="custom",
        name="Custom",
        description="test objective",
        dimension=dimension,
        bounds=(-3.0, 3.0, -3.0, 3.0),
        minima=(np.zeros(dimension),),
        default_start=start,
        value=value,
        gradient=gradient,
        hessian=hessian,
    )


def test_newton_one_step_on_quadratic():
    res = newton_method(quadratic, [2.0, 2.0])
    assert res.converged
    assert res.nit == 1
    assert res.iterations[1].alpha == 1.0
    assert np.allclose(res.solution, 0.0, atol=1e-12)


def test_newton_current_approx_is_exact_inverse():
    res = newton_method(rosenbrock, [-1.2, 1.0], {"max_iterations": 200})
    assert res.converged
    for state in res.iterations:
        expected = inverse(state.true_hessian)
        assert expected is not None
        assert np.allclose(state.current_hessian_approx, expected)


def test_newton_direction_pairs_with_its_hessian_approx():
    res = newton_method(rosenbrock, [-1.2, 1.0], {"max_iterations": 200})
    assert res.nit > 1
    for prev, cur in zip(res.iterations, res.iterations[1:]):
        assert np.array_equal(cur.hessian_approx, prev.current_hessian_approx)
        assert np.allclose(cur.direction, -cur.hessian_approx @ prev.gradient)


def test_newton_singular_hessian_falls_back_to_identity():
    # f = x⁴/4 + y²/2 has Hessian diag(3x², 1), singular on x = 0.
    func = make_objective(
        value=lambda p: float(p[0] ** 4 / 4 + p[1] ** 2 / 2),
        gradient=lambda p: np.array([p[0] ** 3, p[1]]),
        hessian=lambda p: np.array([[3 * p[0] ** 2, 0.0], [0.0, 1.0]]),
        start=(0.0, 1.0),
    )
    res = newton_method(func, func.default_start)
    assert np.array_equal(res.iterations[0].hessian_approx, np.eye(2))
    assert np.array_equal(res.iterations[1].direction, [0.0, -1.0])
    assert res.converged
    assert np.allclose(res.solution, [0.0, 0.0])


def test_newton_saddle_direction_does_not_move():
    # Indefinite Hessian: the Newton direction is orthogonal to the gradient,
    # so the line search refuses it and the iterate stays put.
    func = make_objective(
        value=lambda p: float(-p[0] ** 2 / 2 + p[1] ** 2 / 2),
        gradient=lambda p: np.array([-p[0], p[1]]),
        hessian=lambda p: np.array([[-1.0, 0.0], [0.0, 1.0]]),
        start=(1.0, 1.0),
    )
    res = newton_method(func, func.default_start, {"max_iterations": 3})
    assert not res.converged
    assert res.nit == 3
    for state in res.iterations[1:]:
        assert state.alpha == 0.0
        assert np.array_equal(state.x, [1.0, 1.0])


def test_newton_counts_hessian_evaluations():
    res = newton_method(rosenbrock, [-1.0, 1.0], {"max_iterations": 200})
    assert res.hessian_evaluations == len(res.iterations)
    assert res.function_evaluations > len(res.iterations)
    assert res.gradient_evaluations >= len(res.iterations)
