"""Diagnostic checks for objectives and optimizer trajectories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Tuple

import numpy as np

from ..linalg import Vector, as_vector, frobenius_norm, inverse
from ..optimize.utils import approx_grad, approx_hessian

if TYPE_CHECKING:
    from ..objectives import ObjectiveFunction
    from ..optimize.core import IterationState, OptimizationResult


@dataclass(frozen=True)
class ObjectiveCheck:
    """
    Derivative consistency report for one objective.

    All errors are maxima over the sampled points. Gradient and Hessian
    errors are scaled by ``max(1, max |analytic|)`` at each point, so values
    from steep and flat regions are comparable.
    """

    function_id: str
    points: Tuple[Vector, ...]
    gradient_error: float
    hessian_error: float
    hessian_asymmetry: float

    def passed(self, atol: float = 1e-4) -> bool:
        """Return True if every error is within ``atol``."""
        return max(self.gradient_error, self.hessian_error, self.hessian_asymmetry) <= atol


def _scaled_error(analytic: np.ndarray, numeric: np.ndarray) -> float:
    scale = max(1.0, float(np.max(np.abs(analytic))))
    return float(np.max(np.abs(analytic - numeric))) / scale


def _default_points(func: ObjectiveFunction) -> list[Vector]:
    points = [func.default_start, *func.minima]
    if func.dimension == 2:
        x_min, x_max, y_min, y_max = func.bounds
        points.append(as_vector([(x_min + x_max) / 2.0, (y_min + y_max) / 2.0]))
    return points


def check_objective(
    func: ObjectiveFunction,
    points: Optional[Iterable] = None,
    eps: float = 1e-7,
) -> ObjectiveCheck:
    """
    Compare an objective's analytic derivatives with finite differences.

    Parameters
    ----------
    func:
        Objective to check.
    points:
        Sample points. Defaults to the start point, the known minima and,
        for 2-D functions, the centre of the plotting bounds.
    eps:
        Central-difference step for the gradient. The Hessian is checked by
        differencing the analytic gradient with the default step of
        :func:`~optiviz.optimize.utils.approx_hessian`.

    Returns
    -------
    ObjectiveCheck
        Worst-case gradient error, Hessian error and Hessian asymmetry.

    Raises
    ------
    ValueError
        If a point does not match the objective's dimension.
    """
    sample = _default_points(func) if points is None else [as_vector(p) for p in points]
    grad_err = 0.0
    hess_err = 0.0
    asym = 0.0
    for x in sample:
        if x.shape != (func.dimension,):
            raise ValueError(
                f"Point of shape {x.shape} does not match {func.id} "
                f"dimension {func.dimension}."
            )
        grad = np.asarray(func.gradient(x), dtype=float)
        hess = np.asarray(func.hessian(x), dtype=float)
        grad_err = max(grad_err, _scaled_error(grad, approx_grad(func.value, x, eps=eps)))
        hess_err = max(hess_err, _scaled_error(hess, approx_hessian(func.gradient, x)))
        asym = max(asym, float(np.max(np.abs(hess - hess.T))))
    return ObjectiveCheck(
        function_id=func.id,
        points=tuple(sample),
        gradient_error=grad_err,
        hessian_error=hess_err,
        hessian_asymmetry=asym,
    )


def check_trajectory(result: OptimizationResult) -> None:
    """
    Validate the shape of an optimizer trajectory.

    Raises
    ------
    ValueError
        If iteration 0 carries a step, a later state lacks one, the iteration
        indices are not consecutive, or some state's ``x`` differs from
        ``previous.x + alpha * direction``.
    """
    states = result.iterations
    if not states:
        raise ValueError("Trajectory is empty.")
    first = states[0]
    if first.direction is not None or first.alpha is not None:
        raise ValueError("Iteration 0 must not carry a direction or step length.")
    for k, (prev, cur) in enumerate(zip(states, states[1:]), start=1):
        if cur.iteration != k:
            raise ValueError(f"Expected iteration index {k}, found {cur.iteration}.")
        if cur.direction is None or cur.alpha is None:
            raise ValueError(f"Iteration {k} is missing its direction or step length.")
        expected = prev.x + cur.alpha * cur.direction
        if not np.array_equal(cur.x, expected):
            raise ValueError(
                f"Iteration {k}: x does not equal previous x + alpha * direction "
                f"(max deviation {float(np.max(np.abs(cur.x - expected))):.3e})."
            )


def inverse_hessian_error(state: IterationState) -> Optional[float]:
    """
    Frobenius distance between ``current_hessian_approx`` and the exact
    inverse of ``true_hessian``.

    Returns None when the true Hessian is singular.
    """
    exact = inverse(state.true_hessian)
    if exact is None:
        return None
    return frobenius_norm(state.current_hessian_approx - exact)


__all__ = [
    "ObjectiveCheck",
    "check_objective",
    "check_trajectory",
    "inverse_hessian_error",
]
