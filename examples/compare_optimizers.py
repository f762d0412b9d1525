"""
Example: Comparing optimizers on classic test functions

Runs every registered optimizer from the same starting point, prints a
summary table, and shows how to inspect a single trajectory step by step.
"""

import numpy as np

from optiviz import (
    ALL_OPTIMIZERS,
    check_trajectory,
    get_function,
    inverse_hessian_error,
    max_iteration_count,
    run_comparison,
)


def example_comparison_table(function_id: str, start):
    """Example: All optimizers side by side."""
    func = get_function(function_id)
    print("=" * 60)
    print(f"Comparison on {func.name} from {tuple(start)}")
    print("=" * 60)

    results = run_comparison(func, start, params={"max_iterations": 200})
    names = {info.id: info.name for info in ALL_OPTIMIZERS}
    print(f"{'Optimizer':<24}{'iters':>6}{'f(x*)':>14}{'|g|':>11}  status")
    for optimizer_id, res in results.items():
        check_trajectory(res)
        last = res.iterations[-1]
        print(
            f"{names[optimizer_id]:<24}{res.nit:>6}{res.final_value:>14.6g}"
            f"{last.gradient_norm:>11.2e}  {res.status.value}"
        )
    print(f"Longest trajectory: {max_iteration_count(results)} iterations")
    print()


def example_bfgs_hessian_learning():
    """Example: Watch BFGS learn the inverse Hessian of a quadratic."""
    print("=" * 60)
    print("BFGS inverse-Hessian error on the ill-conditioned quadratic")
    print("=" * 60)

    func = get_function("ill_conditioned_quadratic")
    res = run_comparison(func, [2.0, 2.0], ["bfgs"])["bfgs"]
    for state in res.iterations:
        err = inverse_hessian_error(state)
        step = "-" if state.alpha is None else f"{state.alpha:.4f}"
        err_text = "n/a" if err is None else f"{err:.3e}"
        print(
            f"k={state.iteration:<3} x={np.array2string(state.x, precision=4)}"
            f"  alpha={step:<8} ||H - inv(A)||_F={err_text}"
        )
    print()


if __name__ == "__main__":
    example_comparison_table("rosenbrock", [0.0, 0.0])
    example_comparison_table("booth", [-5.0, 5.0])
    example_bfgs_hessian_learning()
    print("All optimizer comparisons completed.")
