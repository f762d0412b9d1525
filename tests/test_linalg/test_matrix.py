import numpy as np
import pytest

from optiviz.linalg import matrix as mat


def test_identity_trace_and_frobenius():
    eye = mat.identity(3)
    assert np.array_equal(eye, np.eye(3))
    assert not eye.flags.writeable
    assert mat.trace(eye) == 3.0
    assert mat.frobenius_norm([[1.0, 2.0], [2.0, 4.0]]) == pytest.approx(5.0)


def test_mul_and_transpose():
    a = [[1.0, 2.0], [3.0, 4.0]]
    b = [[0.0, 1.0], [1.0, 0.0]]
    assert np.allclose(mat.mul(a, b), [[2.0, 1.0], [4.0, 3.0]])
    assert np.allclose(mat.transpose(a), [[1.0, 3.0], [2.0, 4.0]])
    with pytest.raises(ValueError):
        mat.mul(np.ones((2, 3)), np.ones((2, 3)))


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        mat.add(np.eye(2), np.eye(3))
    with pytest.raises(ValueError):
        mat.inverse(np.ones((2, 3)))
    with pytest.raises(ValueError):
        mat.solve(np.eye(2), [1.0, 2.0, 3.0])


def test_inverse_2x2_closed_form():
    m = np.array([[4.0, 1.0], [1.0, 2.0]])
    inv = mat.inverse(m)
    assert inv is not None
    assert np.allclose(inv @ m, np.eye(2))
    assert np.allclose(inv, np.array([[2.0, -1.0], [-1.0, 4.0]]) / 7.0)


def test_inverse_rank_deficient_returns_none():
    assert mat.inverse([[1.0, 2.0], [2.0, 4.0]]) is None
    assert mat.inverse([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [0.0, 1.0, 1.0]]) is None


def test_inverse_gauss_jordan_needs_pivoting():
    # Zero leading entry: fails without row exchange.
    m = np.array([[0.0, 2.0, 1.0], [1.0, 1.0, 0.0], [3.0, 0.0, 1.0]])
    inv = mat.inverse(m)
    assert inv is not None
    assert np.allclose(inv @ m, np.eye(3))
    assert np.allclose(m @ inv, np.eye(3))


def test_inverse_random_well_conditioned(rng):
    for n in (3, 4, 6):
        m = rng.normal(size=(n, n)) + n * np.eye(n)
        inv = mat.inverse(m)
        assert inv is not None
        assert np.allclose(inv @ m, np.eye(n), atol=1e-10)


def test_solve_constructed_system():
    x = mat.solve([[2.0, 1.0], [1.0, 3.0]], [5.0, 10.0])
    assert x is not None
    assert np.allclose(x, [1.0, 3.0])


def test_solve_singular_returns_none():
    assert mat.solve([[1.0, 2.0], [2.0, 4.0]], [1.0, 1.0]) is None


def test_diag_helpers():
    m = mat.diag_matrix([1.0, 2.0, 3.0])
    assert np.array_equal(mat.diag(m), [1.0, 2.0, 3.0])
    assert np.allclose(mat.scale(m, 2.0), np.diag([2.0, 4.0, 6.0]))
    assert np.allclose(mat.sub(m, m), mat.zeros(3, 3))
