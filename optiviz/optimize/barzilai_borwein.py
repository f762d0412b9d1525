"""Barzilai-Borwein spectral gradient method."""

from __future__ import annotations

from typing import Any, Optional

from ..linalg import Matrix, Vector, dot, identity
from ..linalg.matrix import scale as scale_matrix
from ..linalg.vector import scale
from ..objectives import ObjectiveFunction
from .core import (
    EvaluationCounter,
    IterationState,
    OptimizationResult,
    ParamsLike,
    build_result,
    check_convergence,
    make_state,
    prepare_start,
    resolve_params,
    take_step,
)

CURVATURE_TOL = 1e-12
MIN_SCALE = 1e-10
MAX_SCALE = 1e10
STEP = 1.0


def barzilai_borwein(
    func: ObjectiveFunction, x0: Any, params: ParamsLike = None
) -> OptimizationResult:
    """BB1 steps: ``d = -α_k g`` with a fixed unit step and no line search.

    The scalar ``α_k`` models the inverse Hessian as ``α_k I``. It starts at
    1 and becomes ``sᵀs / sᵀy`` after every step with ``sᵀy > 1e-12``,
    clamped to ``[1e-10, 1e10]``; otherwise the previous value is kept.
    The method is not monotone: ``f`` may rise between iterations.
    """
    opts = resolve_params(params)
    x = prepare_start(func, x0)
    counter = EvaluationCounter(func)
    eye = identity(func.dimension)
    bb_scale = 1.0

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
            scale_matrix(eye, bb_scale),
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

        step_approx = state.current_hessian_approx
        direction = scale(grad, -bb_scale)
        alpha = STEP
        x_new = take_step(x, alpha, direction)
        grad_new = counter.gradient(x_new)

        s = x_new - x
        y = grad_new - grad
        sy = dot(s, y)
        if sy > CURVATURE_TOL:
            bb_scale = min(max(dot(s, s) / sy, MIN_SCALE), MAX_SCALE)
        x, grad = x_new, grad_new

    return build_result("barzilai_borwein", states, counter, converged)


__all__ = ["barzilai_borwein"]
