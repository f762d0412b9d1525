"""Objective-function contract and the shipped catalog of 2-D test functions."""

from .base import Bounds, Gradient, Hessian, ObjectiveFunction, Value
from .multimodal import branin, easom, goldstein_price, levi, rastrigin
from .quadratic import create_quadratic, ill_conditioned_quadratic, quadratic
from .rosenbrock import create_rosenbrock, rosenbrock
from .standard import (
    beale,
    booth,
    dixon_price,
    himmelblau,
    matyas,
    mccormick,
    rotated_ellipsoid,
    six_hump_camel,
    sphere,
    styblinski_tang,
    sum_squares,
    three_hump_camel,
    trid,
    zakharov,
)

ALL_FUNCTIONS: tuple[ObjectiveFunction, ...] = (
    rosenbrock,
    himmelblau,
    quadratic,
    ill_conditioned_quadratic,
    beale,
    booth,
    matyas,
    sphere,
    sum_squares,
    rotated_ellipsoid,
    trid,
    dixon_price,
    three_hump_camel,
    six_hump_camel,
    mccormick,
    styblinski_tang,
    zakharov,
    branin,
    goldstein_price,
    levi,
    easom,
    rastrigin,
)


def get_function(function_id: str) -> ObjectiveFunction:
    """Look up a shipped objective by id."""
    for func in ALL_FUNCTIONS:
        if func.id == function_id:
            return func
    supported = [f.id for f in ALL_FUNCTIONS]
    raise ValueError(
        f"Unknown objective function '{function_id}'. Supported ids: {supported}"
    )


__all__ = [
    "ALL_FUNCTIONS",
    "Bounds",
    "Gradient",
    "Hessian",
    "ObjectiveFunction",
    "Value",
    "beale",
    "booth",
    "branin",
    "create_quadratic",
    "create_rosenbrock",
    "dixon_price",
    "easom",
    "get_function",
    "goldstein_price",
    "himmelblau",
    "ill_conditioned_quadratic",
    "levi",
    "matyas",
    "mccormick",
    "quadratic",
    "rastrigin",
    "rosenbrock",
    "rotated_ellipsoid",
    "six_hump_camel",
    "sphere",
    "styblinski_tang",
    "sum_squares",
    "three_hump_camel",
    "trid",
    "zakharov",
]
