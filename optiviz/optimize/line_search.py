"""Deterministic line-search routines following Nocedal & Wright.

Both searches map ``(f, grad, x, direction)`` to a step length. A direction
that is not a descent direction is reported with ``alpha=0`` and
``success=False`` without probing; an exhausted budget is reported with the
last trial and ``success=False``. Neither case raises: callers use the
returned alpha as a best effort.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from ..logging import get_logger

logger = get_logger(__name__)

Array = np.ndarray
ScalarFn = Callable[[Array], float]
GradientFn = Callable[[Array], Array]

BRACKET_TOL = 1e-12


@dataclass(frozen=True)
class LineSearchParams:
    """Line-search constants.

    Args:
        c1: Sufficient-decrease (Armijo) constant.
        c2: Strong Wolfe curvature constant; only the Wolfe search uses it.
        max_iter: Trial budget.
        initial_alpha: First trial step.
        rho: Backtracking contraction factor.
    """

    c1: float = 1e-4
    c2: float = 0.9
    max_iter: int = 50
    initial_alpha: float = 1.0
    rho: float = 0.5

    def __post_init__(self) -> None:
        if not (0 < self.c1 < self.c2 < 1):
            raise ValueError("Require 0 < c1 < c2 < 1 for Wolfe conditions.")
        if not (0 < self.rho < 1):
            raise ValueError("rho must lie in (0, 1)")
        if not self.initial_alpha > 0:
            raise ValueError("initial_alpha must be positive")
        if self.max_iter < 1:
            raise ValueError("max_iter must be at least 1")


@dataclass(frozen=True)
class LineSearchResult:
    alpha: float
    evaluations: int
    success: bool


DEFAULT_PARAMS = LineSearchParams()


def backtracking_armijo(
    f: ScalarFn,
    grad: GradientFn,
    x: Array,
    direction: Array,
    params: Optional[LineSearchParams] = None,
) -> LineSearchResult:
    """Armijo backtracking over the trials ``initial_alpha * rho**i``."""
    params = params or DEFAULT_PARAMS
    x = np.asarray(x, dtype=float)
    direction = np.asarray(direction, dtype=float)
    fx = f(x)
    grad_dot = float(np.dot(grad(x), direction))
    if grad_dot >= 0:
        logger.debug("Backtracking: not a descent direction (g·d = %.3e)", grad_dot)
        return LineSearchResult(alpha=0.0, evaluations=1, success=False)

    alpha = float(params.initial_alpha)
    evaluations = 1
    for i in range(params.max_iter):
        f_new = f(x + alpha * direction)
        evaluations += 1
        if f_new <= fx + params.c1 * alpha * grad_dot:
            return LineSearchResult(alpha=alpha, evaluations=evaluations, success=True)
        if i < params.max_iter - 1:
            alpha *= params.rho
    logger.debug(
        "Backtracking: Armijo not met after %d trials, returning alpha=%.3e",
        params.max_iter,
        alpha,
    )
    return LineSearchResult(alpha=alpha, evaluations=evaluations, success=False)


def wolfe_line_search(
    f: ScalarFn,
    grad: GradientFn,
    x: Array,
    direction: Array,
    params: Optional[LineSearchParams] = None,
) -> LineSearchResult:
    """Strong Wolfe search by bracketing and bisection.

    The bracket starts as ``[0, 2 * initial_alpha]``. A trial that fails the
    Armijo test, or that does not improve on the bracket's low value, becomes
    the new upper end. Otherwise the gradient is evaluated: a trial meeting
    the curvature test is returned, one with a non-negative directional
    derivative becomes the upper end, and the rest become the lower end.
    """
    params = params or DEFAULT_PARAMS
    x = np.asarray(x, dtype=float)
    direction = np.asarray(direction, dtype=float)
    c1, c2 = params.c1, params.c2

    fx = f(x)
    der0 = float(np.dot(grad(x), direction))
    if der0 >= 0:
        logger.debug("Wolfe: not a descent direction (g·d = %.3e)", der0)
        return LineSearchResult(alpha=0.0, evaluations=1, success=False)

    evaluations = 1
    alpha_lo = 0.0
    alpha_hi = 2.0 * params.initial_alpha
    alpha = float(params.initial_alpha)
    f_lo = fx

    for iteration in range(params.max_iter):
        candidate = x + alpha * direction
        f_alpha = f(candidate)
        evaluations += 1

        if f_alpha > fx + c1 * alpha * der0 or (iteration > 0 and f_alpha >= f_lo):
            alpha_hi = alpha
        else:
            der_alpha = float(np.dot(grad(candidate), direction))
            evaluations += 1
            if abs(der_alpha) <= -c2 * der0:
                return LineSearchResult(alpha=alpha, evaluations=evaluations, success=True)
            if der_alpha >= 0:
                alpha_hi = alpha
            else:
                alpha_lo = alpha
                f_lo = f_alpha

        if math.isinf(alpha_hi):
            alpha *= 2.0
        else:
            alpha = 0.5 * (alpha_lo + alpha_hi)

        if abs(alpha_hi - alpha_lo) < BRACKET_TOL:
            return LineSearchResult(alpha=alpha, evaluations=evaluations, success=True)

    logger.debug(
        "Wolfe: conditions not met after %d trials, returning alpha=%.3e",
        params.max_iter,
        alpha,
    )
    return LineSearchResult(alpha=alpha, evaluations=evaluations, success=False)


__all__ = [
    "DEFAULT_PARAMS",
    "LineSearchParams",
    "LineSearchResult",
    "backtracking_armijo",
    "wolfe_line_search",
]
