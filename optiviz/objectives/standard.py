"""Classic smooth 2-D benchmark functions with analytic derivatives."""

from __future__ import annotations

import math

from ..linalg import as_matrix, as_vector
from .base import ObjectiveFunction

# ---------------------------------------------------------------------------
# Himmelblau: four global minima with f = 0.
# ---------------------------------------------------------------------------


def _himmelblau_value(p):
    x, y = p
    u = x * x + y - 11.0
    v = x + y * y - 7.0
    return float(u * u + v * v)


def _himmelblau_gradient(p):
    x, y = p
    u = x * x + y - 11.0
    v = x + y * y - 7.0
    return as_vector([4.0 * x * u + 2.0 * v, 2.0 * u + 4.0 * y * v])


def _himmelblau_hessian(p):
    x, y = p
    h12 = 4.0 * x + 4.0 * y
    return as_matrix(
        [
            [12.0 * x * x + 4.0 * y - 42.0, h12],
            [h12, 4.0 * x + 12.0 * y * y - 26.0],
        ]
    )


himmelblau = ObjectiveFunction(
    id="himmelblau",
    name="Himmelblau",
    description="f(x,y) = (x² + y - 11)² + (x + y² - 7)²",
    dimension=2,
    bounds=(-5.0, 5.0, -5.0, 5.0),
    minima=(
        (3.0, 2.0),
        (-2.805118086952745, 3.131312518250573),
        (-3.779310253377747, -3.283185991286170),
        (3.584428340330492, -1.848126526964404),
    ),
    default_start=(0.0, 0.0),
    value=_himmelblau_value,
    gradient=_himmelblau_gradient,
    hessian=_himmelblau_hessian,
)

# ---------------------------------------------------------------------------
# Beale: flat valley around the minimum at (3, 0.5).
# ---------------------------------------------------------------------------


def _beale_terms(x, y):
    return (
        1.5 - x + x * y,
        2.25 - x + x * y * y,
        2.625 - x + x * y * y * y,
    )


def _beale_value(p):
    x, y = p
    t1, t2, t3 = _beale_terms(x, y)
    return float(t1 * t1 + t2 * t2 + t3 * t3)


def _beale_gradient(p):
    x, y = p
    t1, t2, t3 = _beale_terms(x, y)
    y2 = y * y
    y3 = y2 * y
    dx = 2.0 * t1 * (y - 1.0) + 2.0 * t2 * (y2 - 1.0) + 2.0 * t3 * (y3 - 1.0)
    dy = 2.0 * t1 * x + 4.0 * t2 * x * y + 6.0 * t3 * x * y2
    return as_vector([dx, dy])


def _beale_hessian(p):
    x, y = p
    t1, t2, t3 = _beale_terms(x, y)
    y2 = y * y
    y3 = y2 * y
    h11 = 2.0 * ((y - 1.0) ** 2 + (y2 - 1.0) ** 2 + (y3 - 1.0) ** 2)
    h12 = (
        2.0 * x * (y - 1.0)
        + 2.0 * t1
        + 4.0 * x * y * (y2 - 1.0)
        + 4.0 * y * t2
        + 6.0 * x * y2 * (y3 - 1.0)
        + 6.0 * y2 * t3
    )
    h22 = (
        2.0 * x * x
        + 8.0 * x * x * y2
        + 4.0 * x * t2
        + 18.0 * x * x * y2 * y2
        + 12.0 * x * y * t3
    )
    return as_matrix([[h11, h12], [h12, h22]])


beale = ObjectiveFunction(
    id="beale",
    name="Beale",
    description="f(x,y) = (1.5 - x + xy)² + (2.25 - x + xy²)² + (2.625 - x + xy³)²",
    dimension=2,
    bounds=(-4.5, 4.5, -4.5, 4.5),
    minima=((3.0, 0.5),),
    default_start=(0.0, 0.0),
    value=_beale_value,
    gradient=_beale_gradient,
    hessian=_beale_hessian,
)

# ---------------------------------------------------------------------------
# Convex quadratics with constant Hessians.
# ---------------------------------------------------------------------------


def _constant(matrix):
    hess = as_matrix(matrix)

    def hessian(_p):
        return hess

    return hessian


booth = ObjectiveFunction(
    id="booth",
    name="Booth",
    description="f(x,y) = (x + 2y - 7)² + (2x + y - 5)²",
    dimension=2,
    bounds=(-10.0, 10.0, -10.0, 10.0),
    minima=((1.0, 3.0),),
    default_start=(-5.0, 5.0),
    value=lambda p: float((p[0] + 2 * p[1] - 7) ** 2 + (2 * p[0] + p[1] - 5) ** 2),
    gradient=lambda p: as_vector(
        [
            2 * (p[0] + 2 * p[1] - 7) + 4 * (2 * p[0] + p[1] - 5),
            4 * (p[0] + 2 * p[1] - 7) + 2 * (2 * p[0] + p[1] - 5),
        ]
    ),
    hessian=_constant([[10.0, 8.0], [8.0, 10.0]]),
)

matyas = ObjectiveFunction(
    id="matyas",
    name="Matyas",
    description="f(x,y) = 0.26(x² + y²) - 0.48xy",
    dimension=2,
    bounds=(-10.0, 10.0, -10.0, 10.0),
    minima=((0.0, 0.0),),
    default_start=(5.0, -5.0),
    value=lambda p: float(0.26 * (p[0] ** 2 + p[1] ** 2) - 0.48 * p[0] * p[1]),
    gradient=lambda p: as_vector(
        [0.52 * p[0] - 0.48 * p[1], 0.52 * p[1] - 0.48 * p[0]]
    ),
    hessian=_constant([[0.52, -0.48], [-0.48, 0.52]]),
)

sphere = ObjectiveFunction(
    id="sphere",
    name="Sphere",
    description="f(x,y) = x² + y²",
    dimension=2,
    bounds=(-5.0, 5.0, -5.0, 5.0),
    minima=((0.0, 0.0),),
    default_start=(3.0, 3.0),
    value=lambda p: float(p[0] ** 2 + p[1] ** 2),
    gradient=lambda p: as_vector([2 * p[0], 2 * p[1]]),
    hessian=_constant([[2.0, 0.0], [0.0, 2.0]]),
)

sum_squares = ObjectiveFunction(
    id="sum_squares",
    name="Sum of Squares",
    description="f(x,y) = x² + 2y²",
    dimension=2,
    bounds=(-3.0, 3.0, -3.0, 3.0),
    minima=((0.0, 0.0),),
    default_start=(2.0, 2.0),
    value=lambda p: float(p[0] ** 2 + 2 * p[1] ** 2),
    gradient=lambda p: as_vector([2 * p[0], 4 * p[1]]),
    hessian=_constant([[2.0, 0.0], [0.0, 4.0]]),
)

rotated_ellipsoid = ObjectiveFunction(
    id="rotated_ellipsoid",
    name="Rotated Ellipsoid",
    description="f(x,y) = x² + (x + y)²",
    dimension=2,
    bounds=(-3.0, 3.0, -3.0, 3.0),
    minima=((0.0, 0.0),),
    default_start=(2.0, 2.0),
    value=lambda p: float(p[0] ** 2 + (p[0] + p[1]) ** 2),
    gradient=lambda p: as_vector([2 * p[0] + 2 * (p[0] + p[1]), 2 * (p[0] + p[1])]),
    hessian=_constant([[4.0, 2.0], [2.0, 2.0]]),
)

trid = ObjectiveFunction(
    id="trid",
    name="Trid",
    description="f(x,y) = (x-1)² + (y-1)² - xy",
    dimension=2,
    bounds=(-4.0, 6.0, -4.0, 6.0),
    minima=((2.0, 2.0),),
    default_start=(-2.0, -2.0),
    value=lambda p: float((p[0] - 1) ** 2 + (p[1] - 1) ** 2 - p[0] * p[1]),
    gradient=lambda p: as_vector([2 * (p[0] - 1) - p[1], 2 * (p[1] - 1) - p[0]]),
    hessian=_constant([[2.0, -1.0], [-1.0, 2.0]]),
    optimum=-2.0,
)

# ---------------------------------------------------------------------------
# Non-convex functions with curved valleys or several basins.
# ---------------------------------------------------------------------------


def _dixon_price_hessian(p):
    x, y = p
    t = 2.0 * y * y - x
    return as_matrix([[6.0, -16.0 * y], [-16.0 * y, 16.0 * t + 64.0 * y * y]])


dixon_price = ObjectiveFunction(
    id="dixon_price",
    name="Dixon-Price",
    description="f(x,y) = (x - 1)² + 2(2y² - x)²",
    dimension=2,
    bounds=(-3.0, 3.0, -3.0, 3.0),
    minima=((1.0, math.sqrt(0.5)), (1.0, -math.sqrt(0.5))),
    default_start=(-2.0, 2.0),
    value=lambda p: float((p[0] - 1) ** 2 + 2 * (2 * p[1] ** 2 - p[0]) ** 2),
    gradient=lambda p: as_vector(
        [
            2 * (p[0] - 1) - 4 * (2 * p[1] ** 2 - p[0]),
            16 * p[1] * (2 * p[1] ** 2 - p[0]),
        ]
    ),
    hessian=_dixon_price_hessian,
)


def _three_hump_value(p):
    x, y = p
    x2 = x * x
    return float(2 * x2 - 1.05 * x2 * x2 + x2 * x2 * x2 / 6 + x * y + y * y)


three_hump_camel = ObjectiveFunction(
    id="three_hump_camel",
    name="Three-Hump Camel",
    description="f(x,y) = 2x² - 1.05x⁴ + x⁶/6 + xy + y²",
    dimension=2,
    bounds=(-5.0, 5.0, -5.0, 5.0),
    minima=((0.0, 0.0),),
    default_start=(2.0, -2.0),
    value=_three_hump_value,
    gradient=lambda p: as_vector(
        [4 * p[0] - 4.2 * p[0] ** 3 + p[0] ** 5 + p[1], p[0] + 2 * p[1]]
    ),
    hessian=lambda p: as_matrix(
        [[4 - 12.6 * p[0] ** 2 + 5 * p[0] ** 4, 1.0], [1.0, 2.0]]
    ),
)


def _six_hump_value(p):
    x, y = p
    x2 = x * x
    y2 = y * y
    return float((4 - 2.1 * x2 + x2 * x2 / 3) * x2 + x * y + (-4 + 4 * y2) * y2)


six_hump_camel = ObjectiveFunction(
    id="six_hump_camel",
    name="Six-Hump Camel",
    description="f(x,y) = (4 - 2.1x² + x⁴/3)x² + xy + (-4 + 4y²)y²",
    dimension=2,
    bounds=(-3.0, 3.0, -2.0, 2.0),
    minima=(
        (0.0898420131003, -0.7126564030207),
        (-0.0898420131003, 0.7126564030207),
    ),
    default_start=(-1.0, 1.0),
    value=_six_hump_value,
    gradient=lambda p: as_vector(
        [
            8 * p[0] - 8.4 * p[0] ** 3 + 2 * p[0] ** 5 + p[1],
            p[0] - 8 * p[1] + 16 * p[1] ** 3,
        ]
    ),
    hessian=lambda p: as_matrix(
        [
            [8 - 25.2 * p[0] ** 2 + 10 * p[0] ** 4, 1.0],
            [1.0, -8 + 48 * p[1] ** 2],
        ]
    ),
    optimum=-1.0316284534898774,
)


def _mccormick_hessian(p):
    s = -math.sin(p[0] + p[1])
    return as_matrix([[s + 2.0, s - 2.0], [s - 2.0, s + 2.0]])


# Minimum where x - y = 1 and x + y = -2π/3.
_MCCORMICK_X = (1.0 - 2.0 * math.pi / 3.0) / 2.0

mccormick = ObjectiveFunction(
    id="mccormick",
    name="McCormick",
    description="f(x,y) = sin(x + y) + (x - y)² - 1.5x + 2.5y + 1",
    dimension=2,
    bounds=(-1.5, 4.0, -3.0, 4.0),
    minima=((_MCCORMICK_X, _MCCORMICK_X - 1.0),),
    default_start=(0.0, 0.0),
    value=lambda p: float(
        math.sin(p[0] + p[1]) + (p[0] - p[1]) ** 2 - 1.5 * p[0] + 2.5 * p[1] + 1
    ),
    gradient=lambda p: as_vector(
        [
            math.cos(p[0] + p[1]) + 2 * (p[0] - p[1]) - 1.5,
            math.cos(p[0] + p[1]) - 2 * (p[0] - p[1]) + 2.5,
        ]
    ),
    hessian=_mccormick_hessian,
    optimum=-1.9132229549810362,
)

_STYBLINSKI_ROOT = -2.903534027771178

styblinski_tang = ObjectiveFunction(
    id="styblinski_tang",
    name="Styblinski-Tang",
    description="f(x,y) = ½[(x⁴ - 16x² + 5x) + (y⁴ - 16y² + 5y)]",
    dimension=2,
    bounds=(-5.0, 5.0, -5.0, 5.0),
    minima=((_STYBLINSKI_ROOT, _STYBLINSKI_ROOT),),
    default_start=(3.0, 3.0),
    value=lambda p: float(
        0.5 * sum(v**4 - 16 * v * v + 5 * v for v in (p[0], p[1]))
    ),
    gradient=lambda p: as_vector(
        [0.5 * (4 * v**3 - 32 * v + 5) for v in (p[0], p[1])]
    ),
    hessian=lambda p: as_matrix(
        [[0.5 * (12 * p[0] ** 2 - 32), 0.0], [0.0, 0.5 * (12 * p[1] ** 2 - 32)]]
    ),
    optimum=-78.33233140754284,
)


def _zakharov_gradient(p):
    x, y = p
    s = 0.5 * x + y
    return as_vector([2 * x + s + 2 * s**3, 2 * y + 2 * s + 4 * s**3])


def _zakharov_hessian(p):
    s2 = (0.5 * p[0] + p[1]) ** 2
    return as_matrix([[2.5 + 3 * s2, 1 + 6 * s2], [1 + 6 * s2, 4 + 12 * s2]])


zakharov = ObjectiveFunction(
    id="zakharov",
    name="Zakharov",
    description="f(x,y) = x² + y² + (0.5x + y)² + (0.5x + y)⁴",
    dimension=2,
    bounds=(-5.0, 5.0, -5.0, 5.0),
    minima=((0.0, 0.0),),
    default_start=(3.0, 3.0),
    value=lambda p: float(
        p[0] ** 2 + p[1] ** 2 + (0.5 * p[0] + p[1]) ** 2 + (0.5 * p[0] + p[1]) ** 4
    ),
    gradient=_zakharov_gradient,
    hessian=_zakharov_hessian,
)


__all__ = [
    "beale",
    "booth",
    "dixon_price",
    "himmelblau",
    "matyas",
    "mccormick",
    "rotated_ellipsoid",
    "six_hump_camel",
    "sphere",
    "styblinski_tang",
    "sum_squares",
    "three_hump_camel",
    "trid",
    "zakharov",
]
