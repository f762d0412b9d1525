"""Deterministic unconstrained optimizers with inspectable trajectories.

Example
-------
>>> from optiviz.objectives import rosenbrock
>>> from optiviz.optimize import bfgs
>>> res = bfgs(rosenbrock, rosenbrock.default_start, {"max_iterations": 200})
>>> res.converged
True
>>> res.iterations[0].direction is None
True
"""

from .barzilai_borwein import barzilai_borwein
from .core import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    EvaluationCounter,
    IterationState,
    OptimizationResult,
    OptimizerParams,
    Status,
    check_convergence,
    resolve_params,
)
from .gradient import steepest_descent
from .line_search import (
    LineSearchParams,
    LineSearchResult,
    backtracking_armijo,
    wolfe_line_search,
)
from .newton import newton_method
from .quasi_newton import SecantUpdate, bfgs, bfgs_update, dfp, dfp_update, sr1, sr1_update
from .registry import (
    ALL_OPTIMIZERS,
    OptimizerInfo,
    get_optimizer,
    max_iteration_count,
    run_comparison,
)
from .trust_region import DoglegStep, cauchy_point, dogleg_step, model_reduction, trust_region
from .utils import approx_grad, approx_hessian, is_pos_def

__all__ = [
    "ALL_OPTIMIZERS",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
    "DoglegStep",
    "EvaluationCounter",
    "IterationState",
    "LineSearchParams",
    "LineSearchResult",
    "OptimizationResult",
    "OptimizerInfo",
    "OptimizerParams",
    "SecantUpdate",
    "Status",
    "approx_grad",
    "approx_hessian",
    "backtracking_armijo",
    "barzilai_borwein",
    "bfgs",
    "bfgs_update",
    "cauchy_point",
    "check_convergence",
    "dfp",
    "dfp_update",
    "dogleg_step",
    "get_optimizer",
    "is_pos_def",
    "max_iteration_count",
    "model_reduction",
    "newton_method",
    "resolve_params",
    "run_comparison",
    "sr1",
    "sr1_update",
    "steepest_descent",
    "trust_region",
    "wolfe_line_search",
]
