"""Smooth 2-D benchmarks with many local minima or oscillating terms.

Gradient-based optimizers started on these usually stop at whichever
stationary point is nearest, which is the behaviour they are here to show.
"""

from __future__ import annotations

import math

import numpy as np

from ..linalg import as_matrix, as_vector
from .base import ObjectiveFunction

# ---------------------------------------------------------------------------
# Branin (RCOS): three global minima with f = 5 / 4π.
# ---------------------------------------------------------------------------

_BRANIN_B = 5.1 / (4.0 * math.pi**2)
_BRANIN_C = 5.0 / math.pi
_BRANIN_R = 6.0
_BRANIN_S = 10.0
_BRANIN_T = 1.0 / (8.0 * math.pi)


def _branin_terms(p):
    x, y = p
    inner = y - _BRANIN_B * x * x + _BRANIN_C * x - _BRANIN_R
    d_inner = -2.0 * _BRANIN_B * x + _BRANIN_C
    return x, inner, d_inner


def _branin_value(p):
    x, inner, _ = _branin_terms(p)
    return float(inner * inner + _BRANIN_S * (1.0 - _BRANIN_T) * math.cos(x) + _BRANIN_S)


def _branin_gradient(p):
    x, inner, d_inner = _branin_terms(p)
    return as_vector(
        [
            2.0 * inner * d_inner - _BRANIN_S * (1.0 - _BRANIN_T) * math.sin(x),
            2.0 * inner,
        ]
    )


def _branin_hessian(p):
    x, inner, d_inner = _branin_terms(p)
    h11 = (
        2.0 * d_inner * d_inner
        - 4.0 * _BRANIN_B * inner
        - _BRANIN_S * (1.0 - _BRANIN_T) * math.cos(x)
    )
    h12 = 2.0 * d_inner
    return as_matrix([[h11, h12], [h12, 2.0]])


branin = ObjectiveFunction(
    id="branin",
    name="Branin",
    description="f(x,y) = (y - bx² + cx - r)² + s(1 - t)cos(x) + s",
    dimension=2,
    bounds=(-5.0, 10.0, 0.0, 15.0),
    minima=((-math.pi, 12.275), (math.pi, 2.275), (3.0 * math.pi, 2.475)),
    default_start=(0.0, 10.0),
    value=_branin_value,
    gradient=_branin_gradient,
    hessian=_branin_hessian,
    optimum=5.0 / (4.0 * math.pi),
)

# ---------------------------------------------------------------------------
# Goldstein-Price: f = A(x, y) · B(x, y), each factor 1 + u²P or 30 + v²Q with
# u, v linear and P, Q quadratic.
# ---------------------------------------------------------------------------

_GP_DU = np.array([1.0, 1.0])
_GP_DV = np.array([2.0, -3.0])
_GP_HP = np.array([[6.0, 6.0], [6.0, 6.0]])
_GP_HQ = np.array([[24.0, -36.0], [-36.0, 54.0]])


def _gp_factor(offset, lin, d_lin, quad, d_quad, h_quad):
    """Value, gradient and Hessian of ``offset + lin² · quad``."""
    value = offset + lin * lin * quad
    grad = 2.0 * lin * quad * d_lin + lin * lin * d_quad
    cross = np.outer(d_lin, d_quad)
    hess = (
        2.0 * quad * np.outer(d_lin, d_lin)
        + 2.0 * lin * (cross + cross.T)
        + lin * lin * h_quad
    )
    return value, grad, hess


def _gp_factors(p):
    x, y = p
    u = x + y + 1.0
    quad_p = 19.0 - 14.0 * x + 3.0 * x * x - 14.0 * y + 6.0 * x * y + 3.0 * y * y
    d_p = np.array([-14.0 + 6.0 * x + 6.0 * y, -14.0 + 6.0 * x + 6.0 * y])
    v = 2.0 * x - 3.0 * y
    quad_q = 18.0 - 32.0 * x + 12.0 * x * x + 48.0 * y - 36.0 * x * y + 27.0 * y * y
    d_q = np.array([-32.0 + 24.0 * x - 36.0 * y, 48.0 - 36.0 * x + 54.0 * y])
    first = _gp_factor(1.0, u, _GP_DU, quad_p, d_p, _GP_HP)
    second = _gp_factor(30.0, v, _GP_DV, quad_q, d_q, _GP_HQ)
    return first, second


def _goldstein_price_value(p):
    (a, _, _), (b, _, _) = _gp_factors(p)
    return float(a * b)


def _goldstein_price_gradient(p):
    (a, ga, _), (b, gb, _) = _gp_factors(p)
    return as_vector(b * ga + a * gb)


def _goldstein_price_hessian(p):
    (a, ga, ha), (b, gb, hb) = _gp_factors(p)
    cross = np.outer(ga, gb)
    return as_matrix(b * ha + (cross + cross.T) + a * hb)


goldstein_price = ObjectiveFunction(
    id="goldstein_price",
    name="Goldstein-Price",
    description="f(x,y) = [1 + (x+y+1)²(19-14x+3x²-14y+6xy+3y²)]"
    " × [30 + (2x-3y)²(18-32x+12x²+48y-36xy+27y²)]",
    dimension=2,
    bounds=(-2.0, 2.0, -2.0, 2.0),
    minima=((0.0, -1.0),),
    default_start=(1.5, 0.5),
    value=_goldstein_price_value,
    gradient=_goldstein_price_gradient,
    hessian=_goldstein_price_hessian,
    optimum=3.0,
)

# ---------------------------------------------------------------------------
# Lévi N.13
# ---------------------------------------------------------------------------


def _levi_value(p):
    x, y = p
    return float(
        math.sin(3 * math.pi * x) ** 2
        + (x - 1) ** 2 * (1 + math.sin(3 * math.pi * y) ** 2)
        + (y - 1) ** 2 * (1 + math.sin(2 * math.pi * y) ** 2)
    )


def _levi_gradient(p):
    x, y = p
    pi = math.pi
    return as_vector(
        [
            3 * pi * math.sin(6 * pi * x) + 2 * (x - 1) * (1 + math.sin(3 * pi * y) ** 2),
            3 * pi * (x - 1) ** 2 * math.sin(6 * pi * y)
            + 2 * (y - 1) * (1 + math.sin(2 * pi * y) ** 2)
            + 2 * pi * (y - 1) ** 2 * math.sin(4 * pi * y),
        ]
    )


def _levi_hessian(p):
    x, y = p
    pi = math.pi
    h11 = 18 * pi**2 * math.cos(6 * pi * x) + 2 * (1 + math.sin(3 * pi * y) ** 2)
    h12 = 6 * pi * (x - 1) * math.sin(6 * pi * y)
    h22 = (
        18 * pi**2 * (x - 1) ** 2 * math.cos(6 * pi * y)
        + 2 * (1 + math.sin(2 * pi * y) ** 2)
        + 8 * pi * (y - 1) * math.sin(4 * pi * y)
        + 8 * pi**2 * (y - 1) ** 2 * math.cos(4 * pi * y)
    )
    return as_matrix([[h11, h12], [h12, h22]])


levi = ObjectiveFunction(
    id="levi",
    name="Lévi N.13",
    description="f(x,y) = sin²(3πx) + (x-1)²(1 + sin²(3πy)) + (y-1)²(1 + sin²(2πy))",
    dimension=2,
    bounds=(-10.0, 10.0, -10.0, 10.0),
    minima=((1.0, 1.0),),
    default_start=(-4.0, 4.0),
    value=_levi_value,
    gradient=_levi_gradient,
    hessian=_levi_hessian,
)

# ---------------------------------------------------------------------------
# Easom: f = -φ(x)φ(y) with φ(t) = cos(t) exp(-(t - π)²), so the derivatives
# separate.
# ---------------------------------------------------------------------------


def _easom_factor(t):
    """φ(t), φ'(t) and φ''(t)."""
    a = t - math.pi
    decay = math.exp(-a * a)
    c, s = math.cos(t), math.sin(t)
    return (
        c * decay,
        -(s + 2 * a * c) * decay,
        ((4 * a * a - 3) * c + 4 * a * s) * decay,
    )


def _easom_value(p):
    return float(-_easom_factor(p[0])[0] * _easom_factor(p[1])[0])


def _easom_gradient(p):
    fx, dfx, _ = _easom_factor(p[0])
    fy, dfy, _ = _easom_factor(p[1])
    return as_vector([-dfx * fy, -fx * dfy])


def _easom_hessian(p):
    fx, dfx, d2fx = _easom_factor(p[0])
    fy, dfy, d2fy = _easom_factor(p[1])
    h12 = -dfx * dfy
    return as_matrix([[-d2fx * fy, h12], [h12, -fx * d2fy]])


easom = ObjectiveFunction(
    id="easom",
    name="Easom",
    description="f(x,y) = -cos(x)cos(y)exp(-((x-π)² + (y-π)²))",
    dimension=2,
    bounds=(-10.0, 10.0, -10.0, 10.0),
    minima=((math.pi, math.pi),),
    default_start=(0.0, 0.0),
    value=_easom_value,
    gradient=_easom_gradient,
    hessian=_easom_hessian,
    optimum=-1.0,
)

# ---------------------------------------------------------------------------
# Rastrigin: a regular lattice of local minima around the global one.
# ---------------------------------------------------------------------------

_TWO_PI = 2.0 * math.pi

rastrigin = ObjectiveFunction(
    id="rastrigin",
    name="Rastrigin",
    description="f(x,y) = 20 + x² - 10cos(2πx) + y² - 10cos(2πy)",
    dimension=2,
    bounds=(-5.12, 5.12, -5.12, 5.12),
    minima=((0.0, 0.0),),
    default_start=(3.0, 3.0),
    value=lambda p: float(
        20.0 + sum(v * v - 10.0 * math.cos(_TWO_PI * v) for v in (p[0], p[1]))
    ),
    gradient=lambda p: as_vector(
        [2.0 * v + 10.0 * _TWO_PI * math.sin(_TWO_PI * v) for v in (p[0], p[1])]
    ),
    hessian=lambda p: as_matrix(
        [
            [2.0 + 10.0 * _TWO_PI**2 * math.cos(_TWO_PI * p[0]), 0.0],
            [0.0, 2.0 + 10.0 * _TWO_PI**2 * math.cos(_TWO_PI * p[1])],
        ]
    ),
)


__all__ = ["branin", "easom", "goldstein_price", "levi", "rastrigin"]
