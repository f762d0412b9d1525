"""Finite-difference derivatives and matrix checks.

Pure NumPy helpers used to validate the analytic gradients and Hessians of
the objective catalog and to inspect quasi-Newton approximations.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]
GradientFn = Callable[[Array], Array]


def approx_grad(fun: Objective, x: Array, eps: float = 1e-7) -> Array:
    """Central-difference gradient ``(f(x + eps e_i) - f(x - eps e_i)) / 2 eps``.

    Parameters
    ----------
    fun:
        Scalar objective.
    x:
        Point where the gradient is approximated.
    eps:
        Perturbation size, must be positive.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    steps = eps * np.eye(x.size)
    return np.array(
        [(fun(x + e) - fun(x - e)) / (2.0 * eps) for e in steps], dtype=float
    )


def approx_hessian(grad: GradientFn, x: Array, eps: float = 1e-6) -> Array:
    """Approximate the Hessian by central differences of an analytic gradient.

    The result is symmetrised, so it can be compared directly against a
    Hessian that is required to be symmetric.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    x = np.asarray(x, dtype=float)
    steps = eps * np.eye(x.size)
    columns = [
        (np.asarray(grad(x + e), dtype=float) - np.asarray(grad(x - e), dtype=float))
        / (2.0 * eps)
        for e in steps
    ]
    hess = np.column_stack(columns)
    return 0.5 * (hess + hess.T)


def is_pos_def(mat: Array, tol: float = 1e-12) -> bool:
    """True if every eigenvalue of the symmetric part of ``mat`` exceeds ``tol``."""
    mat = np.asarray(mat, dtype=float)
    eigvals = np.linalg.eigvalsh(0.5 * (mat + mat.T))
    return bool(np.all(eigvals > tol))


__all__ = [
    "Array",
    "GradientFn",
    "Objective",
    "approx_grad",
    "approx_hessian",
    "is_pos_def",
]
