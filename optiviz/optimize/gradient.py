"""Gradient-based optimization algorithms."""

from __future__ import annotations

from typing import Any, Optional

from ..linalg import Vector, identity
from ..linalg.vector import negate
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
from .line_search import backtracking_armijo


def steepest_descent(
    func: ObjectiveFunction, x0: Any, params: ParamsLike = None
) -> OptimizationResult:
    """Steepest descent: ``d = -g`` with an Armijo backtracking step.

    ``hessian_approx`` is the identity at every state; the method keeps no
    curvature model.
    """
    opts = resolve_params(params)
    x = prepare_start(func, x0)
    counter = EvaluationCounter(func)
    eye = identity(func.dimension)

    states: list[IterationState] = []
    direction: Optional[Vector] = None
    alpha: Optional[float] = None
    converged = False
    for k in range(opts.max_iterations + 1):
        fx = counter.value(x)
        grad = counter.gradient(x)
        state = make_state(
            x, fx, grad, eye, counter.hessian(x), k, direction=direction, alpha=alpha
        )
        states.append(state)
        if check_convergence(state.gradient_norm, opts.tolerance):
            converged = True
            break
        if k == opts.max_iterations:
            break

        direction = negate(grad)
        alpha = backtracking_armijo(counter.value, counter.gradient, x, direction).alpha
        x = take_step(x, alpha, direction)

    return build_result("steepest_descent", states, counter, converged)


__all__ = ["steepest_descent"]
