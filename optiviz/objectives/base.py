"""Objective-function contract shared by every optimizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Tuple

from ..linalg import Matrix, Vector, as_vector

Value = Callable[[Vector], float]
Gradient = Callable[[Vector], Vector]
Hessian = Callable[[Vector], Matrix]
Bounds = Tuple[float, float, float, float]


@dataclass(frozen=True)
class ObjectiveFunction:
    """A differentiable test function with display metadata.

    ``bounds`` is the ``(x_min, x_max, y_min, y_max)`` box used for plotting,
    not an optimization constraint. ``minima`` lists known optimal points and
    ``optimum`` the objective value attained there.
    """

    id: str
    name: str
    description: str
    dimension: int
    bounds: Bounds
    minima: Tuple[Vector, ...]
    default_start: Vector
    value: Value = field(repr=False)
    gradient: Gradient = field(repr=False)
    hessian: Hessian = field(repr=False)
    optimum: float = 0.0

    def __post_init__(self) -> None:
        if self.dimension <= 0:
            raise ValueError(f"{self.id}: dimension must be positive.")
        if len(self.bounds) != 4:
            raise ValueError(f"{self.id}: bounds must be (x_min, x_max, y_min, y_max).")
        start = as_vector(self.default_start)
        if start.shape != (self.dimension,):
            raise ValueError(
                f"{self.id}: default_start has shape {start.shape}, "
                f"expected ({self.dimension},)."
            )
        minima = tuple(as_vector(m) for m in self.minima)
        for point in minima:
            if point.shape != (self.dimension,):
                raise ValueError(
                    f"{self.id}: minimum {point} does not match dimension "
                    f"{self.dimension}."
                )
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "default_start", start)
        object.__setattr__(self, "minima", minima)
        object.__setattr__(self, "bounds", tuple(float(b) for b in self.bounds))


__all__ = ["Bounds", "Gradient", "Hessian", "ObjectiveFunction", "Value"]
