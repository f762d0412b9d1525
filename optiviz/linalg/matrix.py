"""Dense matrix primitives, including a pivoting Gauss-Jordan inverse.

Matrices are 2-D read-only ``float64`` arrays in row-major order. Singular
input to :func:`inverse` or :func:`solve` is an expected outcome and yields
``None``; shape mismatches are programming errors and raise ``ValueError``.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .vector import Matrix, Vector, as_vector

PIVOT_TOL = 1e-12


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def as_matrix(values: Any) -> Matrix:
    """Return a read-only 2-D float copy of ``values``."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got shape {arr.shape}.")
    return _frozen(arr)


def _pair(a: Any, b: Any) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.ndim != 2 or a.shape != b.shape:
        raise ValueError(f"Matrix shape mismatch: {a.shape} vs {b.shape}.")
    return a, b


def _require_square(m: np.ndarray) -> None:
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {m.shape}.")


def identity(n: int) -> Matrix:
    return _frozen(np.eye(int(n), dtype=float))


def zeros(rows: int, cols: int) -> Matrix:
    return _frozen(np.zeros((int(rows), int(cols)), dtype=float))


def add(a: Any, b: Any) -> Matrix:
    a, b = _pair(a, b)
    return _frozen(a + b)


def sub(a: Any, b: Any) -> Matrix:
    a, b = _pair(a, b)
    return _frozen(a - b)


def scale(m: Any, s: float) -> Matrix:
    return _frozen(as_matrix(m) * float(s))


def mul(a: Any, b: Any) -> Matrix:
    """Matrix product ``A B``."""
    a = as_matrix(a)
    b = as_matrix(b)
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"Cannot multiply {a.shape} by {b.shape}.")
    return _frozen(a @ b)


def transpose(m: Any) -> Matrix:
    return _frozen(as_matrix(m).T.copy())


def diag(m: Any) -> Vector:
    """Diagonal entries of ``m`` as a vector."""
    return as_vector(np.diagonal(as_matrix(m)))


def diag_matrix(v: Any) -> Matrix:
    return _frozen(np.diag(as_vector(v)))


def trace(m: Any) -> float:
    m = as_matrix(m)
    _require_square(m)
    return float(np.trace(m))


def frobenius_norm(m: Any) -> float:
    m = as_matrix(m)
    return float(np.sqrt(np.sum(m * m)))


def inverse_2x2(m: Any) -> Optional[Matrix]:
    """Closed-form adjugate/determinant inverse of a 2×2 matrix."""
    m = as_matrix(m)
    if m.shape != (2, 2):
        raise ValueError(f"inverse_2x2 expects a 2x2 matrix, got {m.shape}.")
    (a, b), (c, d) = m
    det = a * d - b * c
    if abs(det) < PIVOT_TOL:
        return None
    inv_det = 1.0 / det
    return as_matrix([[d * inv_det, -b * inv_det], [-c * inv_det, a * inv_det]])


def inverse(m: Any) -> Optional[Matrix]:
    """Invert ``m``, or return ``None`` if it is singular or ill-conditioned.

    2×2 matrices use the closed form. Larger ones use Gauss-Jordan
    elimination with partial pivoting on the augmented matrix ``[M | I]``;
    the search gives up as soon as the largest available pivot magnitude
    drops below ``1e-12``.
    """
    m = as_matrix(m)
    _require_square(m)
    n = m.shape[0]
    if n == 2:
        return inverse_2x2(m)

    aug = np.hstack([m, np.eye(n)])
    for col in range(n):
        pivot_row = col + int(np.argmax(np.abs(aug[col:, col])))
        if abs(aug[pivot_row, col]) < PIVOT_TOL:
            return None
        if pivot_row != col:
            aug[[col, pivot_row]] = aug[[pivot_row, col]]
        aug[col] = aug[col] / aug[col, col]
        for row in range(n):
            if row != col:
                aug[row] = aug[row] - aug[row, col] * aug[col]
    return _frozen(aug[:, n:].copy())


def solve(a: Any, b: Any) -> Optional[Vector]:
    """Solve ``A x = b`` as ``inverse(A) · b``; ``None`` when ``A`` is singular."""
    b = as_vector(b)
    a = as_matrix(a)
    if a.shape[0] != b.shape[0]:
        raise ValueError(f"Cannot solve system {a.shape} with rhs {b.shape}.")
    inv = inverse(a)
    if inv is None:
        return None
    return as_vector(inv @ b)


__all__ = [
    "PIVOT_TOL",
    "add",
    "as_matrix",
    "diag",
    "diag_matrix",
    "frobenius_norm",
    "identity",
    "inverse",
    "inverse_2x2",
    "mul",
    "scale",
    "solve",
    "sub",
    "trace",
    "transpose",
    "zeros",
]
