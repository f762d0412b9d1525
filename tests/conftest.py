"""Pytest configuration and shared fixtures for optiviz tests.

This module provides:
- A deterministic RNG fixture for sampling test points
- Isolation of the process-wide debug and logging switches
"""

import logging
import os
from typing import Generator

import numpy as np
import pytest

from optiviz.diagnostics import is_debug_enabled, set_debug_enabled
from optiviz.logging import set_log_level


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_global_switches() -> Generator[None, None, None]:
    """Restore debug mode and the log level after every test."""
    debug = is_debug_enabled()
    yield
    set_debug_enabled(debug)
    set_log_level(logging.WARNING)
