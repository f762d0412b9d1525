"""Diagnostics and debugging utilities for optiviz."""

from .core import (
    ObjectiveCheck,
    check_objective,
    check_trajectory,
    inverse_hessian_error,
)
from .debug_mode import (
    check_hessian_symmetry,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "ObjectiveCheck",
    "check_objective",
    "check_trajectory",
    "inverse_hessian_error",
    "check_hessian_symmetry",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
