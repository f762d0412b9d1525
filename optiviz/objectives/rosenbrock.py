"""Rosenbrock's banana function ``f(x, y) = (a - x)² + b(y - x²)²``."""

from __future__ import annotations

from ..linalg import as_matrix, as_vector
from .base import ObjectiveFunction


def create_rosenbrock(a: float = 1.0, b: float = 100.0) -> ObjectiveFunction:
    """Rosenbrock function with global minimum ``(a, a²)`` where ``f = 0``.

    The minimum sits at the bottom of a long, curved, nearly flat valley,
    which is what makes it the classic stress test for descent methods.
    """

    def value(p):
        x, y = p
        t1 = a - x
        t2 = y - x * x
        return float(t1 * t1 + b * t2 * t2)

    def gradient(p):
        x, y = p
        dx = -2.0 * (a - x) - 4.0 * b * x * (y - x * x)
        dy = 2.0 * b * (y - x * x)
        return as_vector([dx, dy])

    def hessian(p):
        x, y = p
        h11 = 2.0 - 4.0 * b * (y - 3.0 * x * x)
        h12 = -4.0 * b * x
        return as_matrix([[h11, h12], [h12, 2.0 * b]])

    return ObjectiveFunction(
        id="rosenbrock",
        name="Rosenbrock",
        description=f"f(x,y) = ({a:g} - x)² + {b:g}(y - x²)²",
        dimension=2,
        bounds=(-2.0, 2.0, -1.0, 3.0),
        minima=((a, a * a),),
        default_start=(-1.0, 1.0),
        value=value,
        gradient=gradient,
        hessian=hessian,
    )


rosenbrock = create_rosenbrock()

__all__ = ["create_rosenbrock", "rosenbrock"]
