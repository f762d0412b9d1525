"""Quadratic objectives ``f(x) = ½ xᵀAx + bᵀx + c``.

The Hessian is the constant matrix ``A`` (symmetrised), which makes these the
reference problems for convergence behaviour: Newton reaches the minimum in
one step and exact quasi-Newton updates recover ``A⁻¹`` in ``n`` steps.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..linalg import as_matrix, as_vector, solve
from .base import ObjectiveFunction


def _fmt(v: float) -> str:
    return f"{v:g}"


def create_quadratic(
    a: Any = ((4.0, 1.0), (1.0, 2.0)),
    b: Optional[Any] = None,
    c: float = 0.0,
    id: str = "quadratic",
    name: str = "Quadratic",
) -> ObjectiveFunction:
    """Build a quadratic objective from ``A``, ``b`` and ``c``.

    ``b`` defaults to the zero vector. The documented minimum solves
    ``A x = -b``; for singular ``A`` the origin is reported instead.
    """
    a_mat = as_matrix(a)
    n = a_mat.shape[0]
    if a_mat.shape != (n, n):
        raise ValueError(f"Quadratic matrix must be square, got {a_mat.shape}.")
    hess = as_matrix(0.5 * (a_mat + a_mat.T))
    b_vec = as_vector(np.zeros(n) if b is None else b)
    if b_vec.shape != (n,):
        raise ValueError(f"Linear term has shape {b_vec.shape}, expected ({n},).")
    c = float(c)

    minimum = solve(hess, -b_vec)
    if minimum is None:
        minimum = as_vector(np.zeros(n))

    def value(x):
        x = np.asarray(x, dtype=float)
        return float(0.5 * x @ (hess @ x) + b_vec @ x + c)

    def gradient(x):
        x = np.asarray(x, dtype=float)
        return as_vector(hess @ x + b_vec)

    def hessian(_x):
        return hess

    if n == 2:
        description = (
            f"f(x,y) = ½({_fmt(a_mat[0, 0])}x² + {_fmt(a_mat[0, 1] + a_mat[1, 0])}xy"
            f" + {_fmt(a_mat[1, 1])}y²) + {_fmt(b_vec[0])}x + {_fmt(b_vec[1])}y"
        )
    else:
        description = f"f(x) = ½xᵀAx + bᵀx + c in {n} dimensions"

    return ObjectiveFunction(
        id=id,
        name=name,
        description=description,
        dimension=n,
        bounds=(-3.0, 3.0, -3.0, 3.0),
        minima=(minimum,),
        default_start=np.full(n, 2.0),
        value=value,
        gradient=gradient,
        hessian=hessian,
        optimum=value(minimum),
    )


quadratic = create_quadratic()

# Condition number 100: steepest descent zig-zags, quasi-Newton does not.
ill_conditioned_quadratic = create_quadratic(
    ((100.0, 0.0), (0.0, 1.0)),
    id="ill_conditioned_quadratic",
    name="Ill-conditioned Quadratic",
)


__all__ = ["create_quadratic", "ill_conditioned_quadratic", "quadratic"]
