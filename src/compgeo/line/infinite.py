from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from compgeo.core.operations import perp_unit2d
from compgeo.core.types import PointLike, Tolerance, resolve_tolerance
from compgeo.core.vector import as_point, as_vector, dot, require_unit
from compgeo.line.distance import DistanceToPoint

if TYPE_CHECKING:
    from compgeo.line.ray import Ray


@dataclass(frozen=True, eq=False)
class Line(DistanceToPoint):
    """An infinite line in the implicit form ``normal.x * x + normal.y * y + c == 0``.

    ``normal`` must be unit length; it is checked against
    ``Tolerance.unit_length`` and never renormalized.
    """

    normal: np.ndarray
    c: float
    tolerance: Optional[Tolerance] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        tolerance = resolve_tolerance(self.tolerance)
        normal = as_vector(self.normal)
        require_unit(normal, tolerance.unit_length, "normal")
        c = float(self.c)
        if not math.isfinite(c):
            raise ValueError(f"c must be finite, got {c}")
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "tolerance", tolerance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return bool(np.array_equal(self.normal, other.normal)) and self.c == other.c

    def __hash__(self) -> int:
        return hash((tuple(self.normal.tolist()), self.c))

    def distance_to_point(self, point: PointLike) -> float:
        # Signed: positive on the side the normal points towards. No division
        # since the normal is unit length.
        return dot(self.normal, as_point(point)) + self.c

    def distance_to_point_squared(self, point: PointLike) -> float:
        d = self.distance_to_point(point)
        return d * d

    @classmethod
    def from_ray(cls, ray: Ray) -> Line:
        """The line through ``ray.origin`` along ``ray.direction``.

        The normal is the direction rotated counter-clockwise, so points to
        the left of the ray have a positive distance.
        """
        normal = perp_unit2d(ray.direction)
        c = -cls(normal, 0.0, tolerance=ray.tolerance).distance_to_point(ray.origin)
        return cls(normal, c, tolerance=ray.tolerance)
