"""optiviz - a deterministic core for visualizing unconstrained optimization."""

__version__ = "0.1.0"

# Linear algebra
from . import linalg

# Diagnostics
from .diagnostics import (
    ObjectiveCheck,
    check_objective,
    check_trajectory,
    debug_context,
    inverse_hessian_error,
    is_debug_enabled,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Objective functions
from .objectives import (
    ALL_FUNCTIONS,
    ObjectiveFunction,
    create_quadratic,
    create_rosenbrock,
    get_function,
)

# Optimizers
from .optimize import (
    ALL_OPTIMIZERS,
    DoglegStep,
    IterationState,
    LineSearchParams,
    LineSearchResult,
    OptimizationResult,
    OptimizerInfo,
    OptimizerParams,
    SecantUpdate,
    Status,
    backtracking_armijo,
    barzilai_borwein,
    bfgs,
    bfgs_update,
    dfp,
    dfp_update,
    dogleg_step,
    get_optimizer,
    max_iteration_count,
    newton_method,
    run_comparison,
    sr1,
    sr1_update,
    steepest_descent,
    trust_region,
    wolfe_line_search,
)

__all__ = [
    "__version__",
    # Linear algebra
    "linalg",
    # Objective functions
    "ALL_FUNCTIONS",
    "ObjectiveFunction",
    "create_quadratic",
    "create_rosenbrock",
    "get_function",
    # Optimizers
    "ALL_OPTIMIZERS",
    "DoglegStep",
    "IterationState",
    "LineSearchParams",
    "LineSearchResult",
    "OptimizationResult",
    "OptimizerInfo",
    "OptimizerParams",
    "SecantUpdate",
    "Status",
    "backtracking_armijo",
    "barzilai_borwein",
    "bfgs",
    "bfgs_update",
    "dfp",
    "dfp_update",
    "dogleg_step",
    "get_optimizer",
    "max_iteration_count",
    "newton_method",
    "run_comparison",
    "sr1",
    "sr1_update",
    "steepest_descent",
    "trust_region",
    "wolfe_line_search",
    # Diagnostics
    "ObjectiveCheck",
    "check_objective",
    "check_trajectory",
    "debug_context",
    "inverse_hessian_error",
    "is_debug_enabled",
    "set_debug_enabled",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
