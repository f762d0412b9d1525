"""Core interfaces shared across the optimization algorithms.

Every optimizer runs the same deterministic loop over iterations
``0..max_iterations``: evaluate, emit an :class:`IterationState`, stop on
convergence or budget exhaustion, otherwise choose a direction and a step
and advance. The next state records the step that reached it. The helpers
here hold the pieces of that loop that do not depend on the algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

import numpy as np

from ..diagnostics.debug_mode import check_hessian_symmetry, is_debug_enabled
from ..linalg import Matrix, Vector, as_matrix, as_vector, identity, norm
from ..logging import get_logger
from ..objectives import ObjectiveFunction

logger = get_logger(__name__)

DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-6


class Status(Enum):
    """State of an optimizer run.

    ``RUNNING`` is the loop state between emitting an iteration and deciding
    whether to stop. A returned :class:`OptimizationResult` is always
    ``CONVERGED`` or ``EXHAUSTED_BUDGET``.
    """

    RUNNING = "running"
    CONVERGED = "converged"
    EXHAUSTED_BUDGET = "exhausted_budget"


def _is_count(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False
    return bool(np.isfinite(value)) and int(value) == value and value >= 0


@dataclass(frozen=True)
class OptimizerParams:
    """Loop configuration shared by all optimizers.

    Args:
        max_iterations: Number of steps allowed; the trajectory holds at most
            ``max_iterations + 1`` states.
        tolerance: Convergence threshold on the gradient norm (strict ``<``).
        initial_hessian_approx: Starting inverse-Hessian approximation for the
            quasi-Newton methods. Defaults to the identity.
    """

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE
    initial_hessian_approx: Optional[Matrix] = None

    def __post_init__(self) -> None:
        if not _is_count(self.max_iterations):
            raise ValueError("max_iterations must be a non-negative integer.")
        if not self.tolerance > 0.0:
            raise ValueError("tolerance must be positive.")
        object.__setattr__(self, "max_iterations", int(self.max_iterations))
        if self.initial_hessian_approx is not None:
            object.__setattr__(
                self, "initial_hessian_approx", as_matrix(self.initial_hessian_approx)
            )


ParamsLike = Union[OptimizerParams, Mapping[str, Any], None]


def resolve_params(params: ParamsLike = None) -> OptimizerParams:
    """Merge partial overrides over the defaults.

    Accepts ``None`` (defaults), an :class:`OptimizerParams`, or a mapping of
    field overrides such as ``{"max_iterations": 200}``.
    """
    if params is None:
        return OptimizerParams()
    if isinstance(params, OptimizerParams):
        return params
    known = {f.name for f in fields(OptimizerParams)}
    unknown = set(params) - known
    if unknown:
        raise ValueError(
            f"Unknown optimizer parameters {sorted(unknown)}. Supported: {sorted(known)}"
        )
    return OptimizerParams(**dict(params))


@dataclass(frozen=True)
class IterationState:
    """Immutable snapshot of one loop iteration.

    ``direction`` and ``alpha`` describe the step that produced this state, so
    ``x == previous.x + alpha * direction`` and both are ``None`` at iteration
    0. ``hessian_approx`` is the inverse-Hessian approximation in effect when
    ``direction`` was chosen, so for ``k > 0`` it is the previous state's
    ``current_hessian_approx``; at iteration 0 the two coincide.
    ``current_hessian_approx`` is the approximation held at ``x``, which
    chooses the next step and is the one to compare with ``true_hessian``,
    the exact Hessian at ``x``.
    """

    x: Vector
    fx: float
    gradient: Vector
    gradient_norm: float
    direction: Optional[Vector]
    alpha: Optional[float]
    hessian_approx: Matrix
    current_hessian_approx: Matrix
    true_hessian: Matrix
    iteration: int
    trust_radius: Optional[float] = None


@dataclass(frozen=True)
class OptimizationResult:
    """Complete trajectory and summary of one optimizer run."""

    iterations: Tuple[IterationState, ...]
    solution: Vector
    final_value: float
    converged: bool
    function_evaluations: int
    gradient_evaluations: int
    hessian_evaluations: int = 0
    status: Status = Status.EXHAUSTED_BUDGET
    message: str = ""
    optimizer_id: str = ""

    @property
    def nit(self) -> int:
        """Number of steps taken."""
        return len(self.iterations) - 1


class EvaluationCounter:
    """Counted access to an objective's value, gradient and Hessian."""

    def __init__(self, func: ObjectiveFunction) -> None:
        self.func = func
        self.nfev = 0
        self.njev = 0
        self.nhev = 0

    def value(self, x: Vector) -> float:
        self.nfev += 1
        return float(self.func.value(x))

    def gradient(self, x: Vector) -> Vector:
        self.njev += 1
        grad = as_vector(self.func.gradient(x))
        if grad.shape != (self.func.dimension,):
            raise ValueError(
                f"{self.func.id}: gradient has shape {grad.shape}, "
                f"expected ({self.func.dimension},)."
            )
        return grad

    def hessian(self, x: Vector) -> Matrix:
        self.nhev += 1
        hess = as_matrix(self.func.hessian(x))
        n = self.func.dimension
        if hess.shape != (n, n):
            raise ValueError(
                f"{self.func.id}: Hessian has shape {hess.shape}, expected ({n}, {n})."
            )
        if is_debug_enabled():
            check_hessian_symmetry(hess, name=self.func.id)
        return hess


def check_convergence(grad_norm: float, tol: float) -> bool:
    """Return True if the gradient norm is strictly below tolerance."""
    return grad_norm < tol


def prepare_start(func: ObjectiveFunction, x0: Any) -> Vector:
    """Validate the starting point against the objective's dimension."""
    x = as_vector(x0)
    if x.shape != (func.dimension,):
        raise ValueError(
            f"Starting point has shape {x.shape}, but {func.id} expects "
            f"({func.dimension},)."
        )
    return x


def initial_inverse_hessian(params: OptimizerParams, n: int) -> Matrix:
    if params.initial_hessian_approx is None:
        return identity(n)
    h0 = params.initial_hessian_approx
    if h0.shape != (n, n):
        raise ValueError(
            f"initial_hessian_approx has shape {h0.shape}, expected ({n}, {n})."
        )
    return h0


def make_state(
    x: Vector,
    fx: float,
    grad: Vector,
    current_approx: Matrix,
    true_hessian: Matrix,
    iteration: int,
    direction: Optional[Vector] = None,
    alpha: Optional[float] = None,
    step_approx: Optional[Matrix] = None,
    trust_radius: Optional[float] = None,
) -> IterationState:
    """``step_approx`` is the approximation that chose ``direction``."""
    current = as_matrix(current_approx)
    return IterationState(
        x=x,
        fx=fx,
        gradient=grad,
        gradient_norm=norm(grad),
        direction=direction,
        alpha=None if alpha is None else float(alpha),
        hessian_approx=current if step_approx is None else as_matrix(step_approx),
        current_hessian_approx=current,
        true_hessian=true_hessian,
        iteration=iteration,
        trust_radius=trust_radius,
    )


def take_step(x: Vector, alpha: float, direction: Vector) -> Vector:
    """``x + alpha * direction``; the single place trajectories advance."""
    return as_vector(x + alpha * direction)


def build_result(
    optimizer_id: str,
    states: list[IterationState],
    counter: EvaluationCounter,
    converged: bool,
) -> OptimizationResult:
    last = states[-1]
    if converged:
        status = Status.CONVERGED
        message = "Gradient tolerance satisfied."
    else:
        status = Status.EXHAUSTED_BUDGET
        message = "Maximum iterations reached."
    result = OptimizationResult(
        iterations=tuple(states),
        solution=last.x,
        final_value=last.fx,
        converged=converged,
        function_evaluations=counter.nfev,
        gradient_evaluations=counter.njev,
        hessian_evaluations=counter.nhev,
        status=status,
        message=message,
        optimizer_id=optimizer_id,
    )
    logger.info(
        "%s on %s: %s after %d iterations (f=%.6g, |g|=%.3g, nfev=%d, njev=%d)",
        optimizer_id,
        counter.func.id,
        status.value,
        result.nit,
        last.fx,
        last.gradient_norm,
        counter.nfev,
        counter.njev,
    )
    return result


def is_finite(value: float) -> bool:
    return bool(np.isfinite(value))


__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
    "EvaluationCounter",
    "IterationState",
    "OptimizationResult",
    "OptimizerParams",
    "ParamsLike",
    "Status",
    "build_result",
    "check_convergence",
    "initial_inverse_hessian",
    "make_state",
    "prepare_start",
    "resolve_params",
    "take_step",
]
