"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_compare_optimizers_example_runs() -> None:
    """Test that examples/compare_optimizers.py runs successfully."""
    script = ROOT / "examples" / "compare_optimizers.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=60,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    assert "Comparison on Rosenbrock" in result.stdout
    assert "Trust Region (dogleg)" in result.stdout
    assert "All optimizer comparisons completed." in result.stdout
