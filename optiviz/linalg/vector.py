"""Vector primitives.

Vectors are 1-D read-only ``float64`` arrays. Every function allocates a new
result and never mutates its inputs. Operands of binary operations must have
the same length; a mismatch is a programming error and raises ``ValueError``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

Vector = np.ndarray
Matrix = np.ndarray


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def as_vector(values: Any) -> Vector:
    """Return a read-only 1-D float copy of ``values``."""
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1-D vector, got shape {arr.shape}.")
    return _frozen(arr)


def _pair(a: Any, b: Any) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.ndim != 1 or a.shape != b.shape:
        raise ValueError(
            f"Vector dimension mismatch: {a.shape} vs {b.shape}."
        )
    return a, b


def add(a: Any, b: Any) -> Vector:
    a, b = _pair(a, b)
    return _frozen(a + b)


def sub(a: Any, b: Any) -> Vector:
    a, b = _pair(a, b)
    return _frozen(a - b)


def scale(v: Any, s: float) -> Vector:
    return _frozen(as_vector(v) * float(s))


def negate(v: Any) -> Vector:
    return _frozen(-as_vector(v))


def dot(a: Any, b: Any) -> float:
    a, b = _pair(a, b)
    return float(np.dot(a, b))


def norm(v: Any) -> float:
    """Euclidean (L2) norm."""
    v = as_vector(v)
    return float(np.sqrt(np.dot(v, v)))


def normalize(v: Any) -> Vector:
    """Scale ``v`` to unit length; the zero vector is returned unchanged."""
    v = as_vector(v)
    n = norm(v)
    if n == 0.0:
        return v
    return _frozen(v / n)


def outer(a: Any, b: Any) -> Matrix:
    """Outer product ``a b^T`` with ``result[i, j] = a[i] * b[j]``."""
    a = as_vector(a)
    b = as_vector(b)
    return _frozen(np.outer(a, b))


def mat_vec(m: Any, v: Any) -> Vector:
    """Matrix-vector product ``M v``."""
    m = np.asarray(m, dtype=float)
    v = as_vector(v)
    if m.ndim != 2 or m.shape[1] != v.shape[0]:
        raise ValueError(
            f"Cannot multiply matrix of shape {m.shape} by vector of shape {v.shape}."
        )
    return _frozen(m @ v)


def zeros(n: int) -> Vector:
    return _frozen(np.zeros(int(n), dtype=float))


def ones(n: int) -> Vector:
    return _frozen(np.ones(int(n), dtype=float))


__all__ = [
    "Matrix",
    "Vector",
    "add",
    "as_vector",
    "dot",
    "mat_vec",
    "negate",
    "norm",
    "normalize",
    "ones",
    "outer",
    "scale",
    "sub",
    "zeros",
]
