"""Quasi-Newton optimization algorithms (BFGS, DFP and SR1).

All three keep an approximation ``H`` of the *inverse* Hessian, step along
``d = -H g`` and refresh ``H`` from the secant pair ``s = x_{k+1} - x_k``,
``y = g_{k+1} - g_k``. The update rules are exposed on their own and
return a :class:`SecantUpdate`, so a skipped update is an explicit value
rather than a silently unchanged matrix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from ..linalg import Matrix, Vector, as_matrix, as_vector, dot, mat_vec, norm, outer
from ..linalg.vector import negate
from ..logging import get_logger
from ..objectives import ObjectiveFunction
from .core import (
    EvaluationCounter,
    IterationState,
    OptimizationResult,
    ParamsLike,
    build_result,
    check_convergence,
    initial_inverse_hessian,
    make_state,
    prepare_start,
    resolve_params,
    take_step,
)
from .line_search import LineSearchResult, backtracking_armijo, wolfe_line_search

logger = get_logger(__name__)

CURVATURE_TOL = 1e-12
SR1_SKIP_THRESHOLD = 1e-8


@dataclass(frozen=True)
class SecantUpdate:
    """Outcome of one inverse-Hessian update.

    ``matrix`` is the new approximation when ``applied`` is True and the
    unchanged input otherwise; ``reason`` says why an update was skipped.
    """

    matrix: Matrix
    applied: bool
    reason: str = ""


def _skipped(h: Matrix, reason: str) -> SecantUpdate:
    return SecantUpdate(matrix=h, applied=False, reason=reason)


def bfgs_update(h: Any, s: Any, y: Any) -> SecantUpdate:
    """BFGS: ``H' = (I - ρ s yᵀ) H (I - ρ y sᵀ) + ρ s sᵀ`` with ``ρ = 1 / yᵀs``.

    Skipped when ``yᵀs <= 0`` (the curvature condition fails), which keeps a
    positive-definite ``H`` positive definite.
    """
    h = as_matrix(h)
    s = as_vector(s)
    y = as_vector(y)
    ys = dot(y, s)
    if not ys > 0.0:
        return _skipped(h, f"curvature condition violated (yᵀs = {ys:.3e})")
    rho = 1.0 / ys
    if not np.isfinite(rho):
        return _skipped(h, "1 / yᵀs is not finite")
    eye = np.eye(s.size)
    left = eye - rho * outer(s, y)
    right = eye - rho * outer(y, s)
    updated = left @ h @ right + rho * outer(s, s)
    return SecantUpdate(matrix=as_matrix(updated), applied=True)


def dfp_update(h: Any, s: Any, y: Any) -> SecantUpdate:
    """DFP: ``H' = H + s sᵀ / sᵀy - (H y)(H y)ᵀ / yᵀH y``."""
    h = as_matrix(h)
    s = as_vector(s)
    y = as_vector(y)
    sy = dot(s, y)
    if abs(sy) < CURVATURE_TOL:
        return _skipped(h, f"|sᵀy| = {abs(sy):.3e} below {CURVATURE_TOL:g}")
    hy = mat_vec(h, y)
    yhy = dot(y, hy)
    if abs(yhy) < CURVATURE_TOL:
        return _skipped(h, f"|yᵀHy| = {abs(yhy):.3e} below {CURVATURE_TOL:g}")
    updated = h + outer(s, s) / sy - outer(hy, hy) / yhy
    return SecantUpdate(matrix=as_matrix(updated), applied=True)


def sr1_update(
    h: Any, s: Any, y: Any, skip_threshold: float = SR1_SKIP_THRESHOLD
) -> SecantUpdate:
    """SR1: ``H' = H + (s - H y)(s - H y)ᵀ / (s - H y)ᵀy``.

    Skipped when ``|(s - H y)ᵀy| < skip_threshold · ‖s - H y‖ · ‖y‖`` or the
    denominator is exactly zero. The result need not be positive definite.
    """
    h = as_matrix(h)
    s = as_vector(s)
    y = as_vector(y)
    r = s - mat_vec(h, y)
    denom = dot(r, y)
    if denom == 0.0 or abs(denom) < skip_threshold * norm(r) * norm(y):
        return _skipped(h, f"SR1 denominator too small ({denom:.3e})")
    updated = h + outer(r, r) / denom
    return SecantUpdate(matrix=as_matrix(updated), applied=True)


UpdateRule = Callable[[Matrix, Vector, Vector], SecantUpdate]
LineSearch = Callable[..., LineSearchResult]


def _quasi_newton(
    optimizer_id: str,
    update: UpdateRule,
    line_search: LineSearch,
    func: ObjectiveFunction,
    x0: Any,
    params: ParamsLike,
) -> OptimizationResult:
    opts = resolve_params(params)
    x = prepare_start(func, x0)
    counter = EvaluationCounter(func)
    h = initial_inverse_hessian(opts, func.dimension)

    states: list[IterationState] = []
    direction: Optional[Vector] = None
    alpha: Optional[float] = None
    step_approx: Optional[Matrix] = None
    grad = counter.gradient(x)
    converged = False
    for k in range(opts.max_iterations + 1):
        fx = counter.value(x)
        state = make_state(
            x,
            fx,
            grad,
            h,
            counter.hessian(x),
            k,
            direction=direction,
            alpha=alpha,
            step_approx=step_approx,
        )
        states.append(state)
        if check_convergence(state.gradient_norm, opts.tolerance):
            converged = True
            break
        if k == opts.max_iterations:
            break

        step_approx = h
        direction = negate(mat_vec(h, grad))
        search = line_search
        if dot(direction, grad) >= 0:
            logger.debug(
                "%s: -Hg is not a descent direction at iteration %d, using -g",
                optimizer_id,
                k,
            )
            direction = negate(grad)
            search = backtracking_armijo
        alpha = search(counter.value, counter.gradient, x, direction).alpha
        x_new = take_step(x, alpha, direction)
        grad_new = counter.gradient(x_new)

        result = update(h, x_new - x, grad_new - grad)
        if not result.applied:
            logger.debug(
                "%s: update skipped at iteration %d: %s", optimizer_id, k, result.reason
            )
        h = result.matrix
        x, grad = x_new, grad_new

    return build_result(optimizer_id, states, counter, converged)


def bfgs(func: ObjectiveFunction, x0: Any, params: ParamsLike = None) -> OptimizationResult:
    """BFGS with a strong Wolfe line search."""
    return _quasi_newton("bfgs", bfgs_update, wolfe_line_search, func, x0, params)


def dfp(func: ObjectiveFunction, x0: Any, params: ParamsLike = None) -> OptimizationResult:
    """Davidon-Fletcher-Powell with a strong Wolfe line search."""
    return _quasi_newton("dfp", dfp_update, wolfe_line_search, func, x0, params)


def sr1(func: ObjectiveFunction, x0: Any, params: ParamsLike = None) -> OptimizationResult:
    """Symmetric rank-one updates with Armijo backtracking.

    SR1 approximations may be indefinite, so the Wolfe curvature test would
    not keep ``H`` positive definite anyway.
    """
    return _quasi_newton("sr1", sr1_update, backtracking_armijo, func, x0, params)


__all__ = [
    "SecantUpdate",
    "bfgs",
    "bfgs_update",
    "dfp",
    "dfp_update",
    "sr1",
    "sr1_update",
]
