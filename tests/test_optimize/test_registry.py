import numpy as np
import pytest

from optiviz.objectives import ObjectiveFunction, quadratic, rosenbrock
from optiviz.optimize import (
    ALL_OPTIMIZERS,
    bfgs,
    get_optimizer,
    max_iteration_count,
    run_comparison,
)

EXPECTED_IDS = [
    "steepest_descent",
    "newton",
    "bfgs",
    "dfp",
    "sr1",
    "barzilai_borwein",
    "trust_region",
]


def test_registry_order_and_metadata():
    assert [info.id for info in ALL_OPTIMIZERS] == EXPECTED_IDS
    uses_hessian = {info.id for info in ALL_OPTIMIZERS if info.uses_true_hessian}
    assert uses_hessian == {"newton", "trust_region"}
    for info in ALL_OPTIMIZERS:
        assert info.name and info.description
        assert callable(info.optimize)


def test_get_optimizer():
    assert get_optimizer("bfgs").optimize is bfgs
    with pytest.raises(ValueError, match="Supported ids"):
        get_optimizer("adam")


def test_run_comparison_defaults_to_all_optimizers():
    results = run_comparison(quadratic, [2.0, 2.0])
    assert list(results) == EXPECTED_IDS
    for optimizer_id, res in results.items():
        assert res.optimizer_id == optimizer_id
        assert res.converged
        assert np.array_equal(res.iterations[0].x, [2.0, 2.0])


def test_run_comparison_subset_keeps_requested_order():
    results = run_comparison(
        rosenbrock, [-1.0, 1.0], ["dfp", "newton"], {"max_iterations": 200}
    )
    assert list(results) == ["dfp", "newton"]
    for res in results.values():
        assert np.allclose(res.solution, [1.0, 1.0], atol=1e-3)


def test_run_comparison_validates_ids_before_running():
    calls = []

    def value(x):
        calls.append(x)
        return float(x @ x)

    spy = ObjectiveFunction(
        id="spy",
        name="Spy",
        description="Records value calls",
        dimension=2,
        bounds=(-1.0, 1.0, -1.0, 1.0),
        minima=((0.0, 0.0),),
        default_start=(1.0, 1.0),
        value=value,
        gradient=lambda x: 2.0 * np.asarray(x),
        hessian=lambda x: 2.0 * np.eye(2),
    )
    with pytest.raises(ValueError, match="nope"):
        run_comparison(spy, [1.0, 1.0], ["newton", "nope"])
    assert calls == []


def test_run_comparison_matches_individual_runs():
    results = run_comparison(quadratic, [2.0, 2.0], ["bfgs"])
    direct = bfgs(quadratic, [2.0, 2.0])
    assert np.array_equal(results["bfgs"].solution, direct.solution)
    assert results["bfgs"].nit == direct.nit


def test_max_iteration_count():
    results = run_comparison(quadratic, [2.0, 2.0])
    assert max_iteration_count(results) == max(res.nit for res in results.values())
    assert max_iteration_count({}) == 0
