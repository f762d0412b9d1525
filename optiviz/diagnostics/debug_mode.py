"""Debug mode management for optiviz.

With debug mode on, optimizers validate the objective contract as they run
(currently: every Hessian they evaluate must be symmetric) and raise
``ValueError`` on a malformed objective instead of producing a silently
wrong trajectory.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import numpy as np

_DEBUG_ENV_VAR = "OPTIVIZ_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)

SYMMETRY_RTOL = 1e-8


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    OPTIVIZ_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     # Hessians are checked for symmetry inside this block
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def check_hessian_symmetry(
    hess: np.ndarray, name: str = "objective", rtol: float = SYMMETRY_RTOL
) -> None:
    """
    Raise ValueError if ``hess`` is not symmetric within ``rtol``.

    The tolerance is relative to the largest entry, with an absolute floor of
    ``rtol`` for matrices close to zero.
    """
    asym = float(np.max(np.abs(hess - hess.T))) if hess.size else 0.0
    scale = max(float(np.max(np.abs(hess))) if hess.size else 0.0, 1.0)
    if asym > rtol * scale:
        raise ValueError(
            f"{name}: Hessian is not symmetric (max |H - Hᵀ| = {asym:.3e})."
        )


__all__ = [
    "check_hessian_symmetry",
    "debug_context",
    "is_debug_enabled",
    "set_debug_enabled",
]
