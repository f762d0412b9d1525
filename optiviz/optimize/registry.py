"""Optimizer metadata and side-by-side comparison runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional

from ..logging import get_logger
from ..objectives import ObjectiveFunction
from .barzilai_borwein import barzilai_borwein
from .core import OptimizationResult, ParamsLike
from .gradient import steepest_descent
from .newton import newton_method
from .quasi_newton import bfgs, dfp, sr1
from .trust_region import trust_region

logger = get_logger(__name__)

OptimizeFn = Callable[[ObjectiveFunction, Any, ParamsLike], OptimizationResult]


@dataclass(frozen=True)
class OptimizerInfo:
    """
    Display metadata for one algorithm plus its entry point.

    Args:
        id: Stable identifier used by :func:`get_optimizer`.
        name: Human-readable name.
        description: One-line summary.
        uses_true_hessian: Whether the search direction is built from the
            exact Hessian rather than an approximation.
        optimize: ``optimize(func, x0, params=None) -> OptimizationResult``.
    """

    id: str
    name: str
    description: str
    uses_true_hessian: bool
    optimize: OptimizeFn = field(repr=False)


ALL_OPTIMIZERS: tuple[OptimizerInfo, ...] = (
    OptimizerInfo(
        id="steepest_descent",
        name="Gradient Descent",
        description="Steepest descent along the negative gradient",
        uses_true_hessian=False,
        optimize=steepest_descent,
    ),
    OptimizerInfo(
        id="newton",
        name="Newton's Method",
        description="Uses the true Hessian for quadratic local convergence",
        uses_true_hessian=True,
        optimize=newton_method,
    ),
    OptimizerInfo(
        id="bfgs",
        name="BFGS",
        description="Broyden-Fletcher-Goldfarb-Shanno quasi-Newton method",
        uses_true_hessian=False,
        optimize=bfgs,
    ),
    OptimizerInfo(
        id="dfp",
        name="DFP",
        description="Davidon-Fletcher-Powell quasi-Newton method",
        uses_true_hessian=False,
        optimize=dfp,
    ),
    OptimizerInfo(
        id="sr1",
        name="SR1",
        description="Symmetric rank-one quasi-Newton method",
        uses_true_hessian=False,
        optimize=sr1,
    ),
    OptimizerInfo(
        id="barzilai_borwein",
        name="Barzilai-Borwein",
        description="Scalar Hessian approximation B_k = α_k I",
        uses_true_hessian=False,
        optimize=barzilai_borwein,
    ),
    OptimizerInfo(
        id="trust_region",
        name="Trust Region (dogleg)",
        description="Solves a quadratic subproblem within a trust region each step",
        uses_true_hessian=True,
        optimize=trust_region,
    ),
)

_BY_ID: dict[str, OptimizerInfo] = {info.id: info for info in ALL_OPTIMIZERS}


def get_optimizer(optimizer_id: str) -> OptimizerInfo:
    """
    Look up an optimizer by id.

    Raises:
        ValueError: If the id is not one of :data:`ALL_OPTIMIZERS`.
    """
    try:
        return _BY_ID[optimizer_id]
    except KeyError:
        raise ValueError(
            f"Unsupported optimizer '{optimizer_id}'. "
            f"Supported ids: {list(_BY_ID)}"
        ) from None


def run_comparison(
    func: ObjectiveFunction,
    x0: Any,
    optimizer_ids: Optional[Iterable[str]] = None,
    params: ParamsLike = None,
) -> dict[str, OptimizationResult]:
    """
    Run several optimizers from the same start.

    Runs are sequential and independent. Ids are resolved before the first
    run, so an unknown id raises ``ValueError`` without any work done.

    Returns:
        Results keyed by optimizer id, in the requested order (all optimizers
        in registry order by default).
    """
    if optimizer_ids is None:
        infos = list(ALL_OPTIMIZERS)
    else:
        infos = [get_optimizer(opt_id) for opt_id in optimizer_ids]
    logger.debug(
        "Comparing %s on %s", [info.id for info in infos], func.id
    )
    results: dict[str, OptimizationResult] = {}
    for info in infos:
        results[info.id] = info.optimize(func, x0, params)
    return results


def max_iteration_count(results: Mapping[str, OptimizationResult]) -> int:
    """Largest number of steps across ``results`` (0 when empty)."""
    return max((res.nit for res in results.values()), default=0)


__all__ = [
    "ALL_OPTIMIZERS",
    "OptimizerInfo",
    "get_optimizer",
    "max_iteration_count",
    "run_comparison",
]
