"""Vector and dense-matrix primitives used by the optimizers.

The ``vector`` and ``matrix`` submodules share operation names (``add``,
``sub``, ``scale``, ``zeros``); only the unambiguous names are re-exported
here.
"""

from . import matrix, vector
from .matrix import (
    PIVOT_TOL,
    as_matrix,
    diag,
    diag_matrix,
    frobenius_norm,
    identity,
    inverse,
    inverse_2x2,
    mul,
    solve,
    trace,
    transpose,
)
from .vector import Matrix, Vector, as_vector, dot, mat_vec, norm, normalize, outer

__all__ = [
    "Matrix",
    "PIVOT_TOL",
    "Vector",
    "as_matrix",
    "as_vector",
    "diag",
    "diag_matrix",
    "dot",
    "frobenius_norm",
    "identity",
    "inverse",
    "inverse_2x2",
    "mat_vec",
    "matrix",
    "mul",
    "norm",
    "normalize",
    "outer",
    "solve",
    "trace",
    "transpose",
    "vector",
]
