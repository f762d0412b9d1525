"""Newton's method with an Armijo line search."""

from __future__ import annotations

from typing import Any, Optional

from ..linalg import Matrix, Vector, identity, inverse, mat_vec
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
    make_state,
    prepare_start,
    resolve_params,
    take_step,
)
from .line_search import backtracking_armijo

logger = get_logger(__name__)


def newton_method(
    func: ObjectiveFunction, x0: Any, params: ParamsLike = None
) -> OptimizationResult:
    """Newton's method: ``d = -H⁻¹ g`` from the exact Hessian.

    A singular Hessian is replaced by the identity, which turns that step
    into a steepest-descent step. Indefinite Hessians are used as they are;
    if the resulting direction points uphill the line search reports
    ``alpha = 0`` and the point does not move.
    """
    opts = resolve_params(params)
    x = prepare_start(func, x0)
    counter = EvaluationCounter(func)
    n = func.dimension

    states: list[IterationState] = []
    direction: Optional[Vector] = None
    alpha: Optional[float] = None
    step_approx: Optional[Matrix] = None
    converged = False
    for k in range(opts.max_iterations + 1):
        fx = counter.value(x)
        grad = counter.gradient(x)
        hess = counter.hessian(x)
        hess_inv = inverse(hess)
        if hess_inv is None:
            logger.debug("Newton: singular Hessian at iteration %d, using identity", k)
            hess_inv = identity(n)
        state = make_state(
            x,
            fx,
            grad,
            hess_inv,
            hess,
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

        direction = negate(mat_vec(hess_inv, grad))
        step_approx = hess_inv
        alpha = backtracking_armijo(counter.value, counter.gradient, x, direction).alpha
        x = take_step(x, alpha, direction)

    return build_result("newton", states, counter, converged)


__all__ = ["newton_method"]
