import numpy as np
import pytest

from optiviz.objectives import ObjectiveFunction, create_quadratic, create_rosenbrock, rosenbrock


def test_default_quadratic():
    func = create_quadratic()
    assert func.id == "quadratic"
    assert np.allclose(func.hessian(np.zeros(2)), [[4.0, 1.0], [1.0, 2.0]])
    assert np.allclose(func.minima[0], [0.0, 0.0])
    assert func.value([1.0, 1.0]) == pytest.approx(0.5 * (4 + 2 + 2))


def test_quadratic_with_linear_term_reports_minimum():
    func = create_quadratic([[2.0, 0.0], [0.0, 4.0]], b=[-2.0, 4.0], c=3.0, id="shifted")
    minimum = func.minima[0]
    assert np.allclose(minimum, [1.0, -1.0])
    assert np.allclose(func.gradient(minimum), 0.0)
    assert func.optimum == pytest.approx(func.value(minimum))
    assert func.optimum == pytest.approx(0.0)


def test_quadratic_symmetrises_matrix():
    func = create_quadratic([[2.0, 3.0], [1.0, 2.0]])
    hess = func.hessian(np.zeros(2))
    assert np.array_equal(hess, hess.T)
    assert np.allclose(hess, [[2.0, 2.0], [2.0, 2.0]])


def test_quadratic_in_higher_dimension():
    a = np.diag([1.0, 2.0, 3.0])
    func = create_quadratic(a, id="diag3")
    assert func.dimension == 3
    assert func.default_start.shape == (3,)
    assert np.allclose(func.gradient([1.0, 1.0, 1.0]), [1.0, 2.0, 3.0])


def test_quadratic_rejects_bad_shapes():
    with pytest.raises(ValueError):
        create_quadratic([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
    with pytest.raises(ValueError):
        create_quadratic([[1.0, 0.0], [0.0, 1.0]], b=[1.0, 2.0, 3.0])


def test_rosenbrock_factory():
    func = create_rosenbrock(a=2.0, b=10.0)
    assert np.allclose(func.minima[0], [2.0, 4.0])
    assert func.value([2.0, 4.0]) == pytest.approx(0.0)
    assert np.allclose(func.gradient([2.0, 4.0]), 0.0)
    assert np.allclose(rosenbrock.default_start, [-1.0, 1.0])


def test_objective_contract_is_validated():
    def value(x):
        return 0.0

    def gradient(x):
        return np.zeros(2)

    def hessian(x):
        return np.zeros((2, 2))

    common = dict(
        id="bad",
        name="Bad",
        description="",
        bounds=(-1.0, 1.0, -1.0, 1.0),
        value=value,
        gradient=gradient,
        hessian=hessian,
    )
    with pytest.raises(ValueError):
        ObjectiveFunction(dimension=0, minima=(), default_start=(), **common)
    with pytest.raises(ValueError):
        ObjectiveFunction(dimension=2, minima=((0.0, 0.0),), default_start=(0.0,), **common)
    with pytest.raises(ValueError):
        ObjectiveFunction(dimension=2, minima=((0.0,),), default_start=(0.0, 0.0), **common)


def test_objective_is_immutable():
    with pytest.raises(Exception):
        rosenbrock.id = "other"
    assert not rosenbrock.default_start.flags.writeable
