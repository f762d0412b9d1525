"""Trust-region method with a dogleg subproblem solver.

Each iteration minimises the quadratic model
``m(d) = f + gᵀd + ½ dᵀB d`` subject to ``‖d‖ <= Δ`` approximately, with
``B`` the exact Hessian. The ratio of actual to predicted reduction decides
whether the step is taken and how the radius changes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from ..linalg import (
    Matrix,
    Vector,
    as_matrix,
    as_vector,
    dot,
    identity,
    inverse,
    mat_vec,
    norm,
)
from ..linalg.vector import negate, scale, zeros
from ..logging import get_logger
from ..objectives import ObjectiveFunction
from .core import (
    EvaluationCounter,
    IterationState,
    OptimizationResult,
    ParamsLike,
    build_result,
    check_convergence,
    is_finite,
    make_state,
    prepare_start,
    resolve_params,
    take_step,
)

logger = get_logger(__name__)

GRAD_TOL = 1e-12
PREDICTED_TOL = 1e-12
BOUNDARY_TOL = 1e-10
SHRINK_BELOW = 0.25
GROW_ABOVE = 0.75


@dataclass(frozen=True)
class DoglegStep:
    """Approximate subproblem solution.

    ``kind`` names the branch that produced ``step``: ``"zero"`` (vanishing
    gradient), ``"cauchy"`` (steepest-descent point), ``"newton"`` (full
    Newton step inside the region) or ``"dogleg"`` (Cauchy-to-Newton segment
    cut at the boundary).
    """

    step: Vector
    on_boundary: bool
    kind: str


def cauchy_point(grad: Any, hess: Any, delta: float) -> Vector:
    """Minimiser of the model along ``-g`` within the radius."""
    grad = as_vector(grad)
    hess = as_matrix(hess)
    grad_norm = norm(grad)
    if grad_norm < GRAD_TOL:
        return zeros(grad.size)
    gbg = dot(grad, mat_vec(hess, grad))
    if gbg <= 0:
        tau = delta / grad_norm
    else:
        tau = min(grad_norm * grad_norm / gbg, delta / grad_norm)
    return scale(grad, -tau)


def dogleg_step(grad: Any, hess: Any, delta: float) -> DoglegStep:
    """Solve the trust-region subproblem with the dogleg path.

    A singular ``B`` leaves only the Cauchy point. Otherwise the Newton point
    ``-B⁻¹g`` is used when it lies inside the region; when it does not, the
    step is the point where the segment from the Cauchy point to the Newton
    point leaves the ball, with the segment parameter clamped to ``[0, 1]``.
    Indefinite ``B`` is not repaired.
    """
    grad = as_vector(grad)
    hess = as_matrix(hess)
    if norm(grad) < GRAD_TOL:
        return DoglegStep(step=zeros(grad.size), on_boundary=False, kind="zero")

    p_c = cauchy_point(grad, hess, delta)
    hess_inv = inverse(hess)
    if hess_inv is None:
        return DoglegStep(
            step=p_c, on_boundary=norm(p_c) >= delta - BOUNDARY_TOL, kind="cauchy"
        )

    p_n = negate(mat_vec(hess_inv, grad))
    if norm(p_n) <= delta:
        return DoglegStep(step=p_n, on_boundary=False, kind="newton")

    diff = p_n - p_c
    a = dot(diff, diff)
    b = 2.0 * dot(p_c, diff)
    c = dot(p_c, p_c) - delta * delta
    disc = b * b - 4.0 * a * c
    if disc < 0 or a < GRAD_TOL:
        return DoglegStep(step=p_c, on_boundary=True, kind="cauchy")
    tau = (-b + math.sqrt(disc)) / (2.0 * a)
    tau = max(0.0, min(1.0, tau))
    return DoglegStep(step=as_vector(p_c + tau * diff), on_boundary=True, kind="dogleg")


def model_reduction(grad: Any, hess: Any, step: Any) -> float:
    """Predicted decrease ``-(gᵀd + ½ dᵀB d)`` of the quadratic model."""
    return -(dot(grad, step) + 0.5 * dot(step, mat_vec(hess, step)))


def trust_region(
    func: ObjectiveFunction,
    x0: Any,
    params: ParamsLike = None,
    *,
    delta0: float = 1.0,
    max_delta: float = 10.0,
    eta: float = 0.1,
) -> OptimizationResult:
    """Dogleg trust-region method on the exact Hessian.

    The radius shrinks to ``Δ/4`` when ``ρ < 0.25`` and doubles (up to
    ``max_delta``) when ``ρ > 0.75`` and the step reached the boundary. The
    step is taken only when ``ρ > eta``; a rejected iteration leaves ``x`` in
    place and is recorded with ``alpha = 0``, an accepted one with
    ``alpha = 1``.

    A step whose predicted reduction is at most ``1e-12`` gets ``ρ = 0`` and
    is rejected. Close to a minimum this can happen while the gradient norm
    is still above ``tolerance``: the radius then shrinks on every iteration,
    ``x`` stops moving, and the run ends with ``EXHAUSTED_BUDGET`` at a point
    that is numerically the minimizer. A looser ``tolerance`` usually avoids it.
    """
    if not delta0 > 0:
        raise ValueError("delta0 must be positive.")
    if not max_delta >= delta0:
        raise ValueError("max_delta must be at least delta0.")
    if not 0 <= eta < 1:
        raise ValueError("eta must lie in [0, 1).")

    opts = resolve_params(params)
    x = prepare_start(func, x0)
    counter = EvaluationCounter(func)
    eye = identity(func.dimension)
    delta = float(delta0)

    states: list[IterationState] = []
    direction: Optional[Vector] = None
    alpha: Optional[float] = None
    step_approx: Optional[Matrix] = None
    converged = False
    for k in range(opts.max_iterations + 1):
        fx = counter.value(x)
        grad = counter.gradient(x)
        hess = counter.hessian(x)
        hess_inv: Optional[Matrix] = inverse(hess)
        state = make_state(
            x,
            fx,
            grad,
            eye if hess_inv is None else hess_inv,
            hess,
            k,
            direction=direction,
            alpha=alpha,
            step_approx=step_approx,
            trust_radius=delta,
        )
        states.append(state)
        if check_convergence(state.gradient_norm, opts.tolerance):
            converged = True
            break
        if k == opts.max_iterations:
            break

        step_approx = state.current_hessian_approx
        sub = dogleg_step(grad, hess, delta)
        direction = sub.step
        x_trial = take_step(x, 1.0, direction)
        f_trial = counter.value(x_trial)
        predicted = model_reduction(grad, hess, direction)
        if not is_finite(f_trial):
            rho = 0.0
        elif predicted > PREDICTED_TOL:
            rho = (fx - f_trial) / predicted
        else:
            rho = 0.0

        if rho < SHRINK_BELOW:
            delta = SHRINK_BELOW * delta
        elif rho > GROW_ABOVE and sub.on_boundary:
            delta = min(2.0 * delta, max_delta)

        if rho > eta:
            alpha = 1.0
            x = x_trial
        else:
            logger.debug(
                "trust_region: step rejected at iteration %d (rho=%.3g, radius -> %.3g)",
                k,
                rho,
                delta,
            )
            alpha = 0.0
            x = take_step(x, alpha, direction)

    return build_result("trust_region", states, counter, converged)


__all__ = [
    "DoglegStep",
    "cauchy_point",
    "dogleg_step",
    "model_reduction",
    "trust_region",
]
