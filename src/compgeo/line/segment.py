from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from compgeo.core.types import PointLike, Tolerance, resolve_tolerance
from compgeo.core.vector import as_point, as_vector, dot, norm, norm_squared
from compgeo.line.distance import DistanceToPoint
from compgeo.line.ray import Ray


@dataclass(frozen=True, eq=False)
class Segment(DistanceToPoint):
    """A bounded line from ``start`` to ``end``.

    ``start == end`` is allowed and represents a single point.
    """

    start: np.ndarray
    end: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", as_point(self.start))
        object.__setattr__(self, "end", as_point(self.end))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return bool(np.array_equal(self.start, other.start) and np.array_equal(self.end, other.end))

    def __hash__(self) -> int:
        return hash((tuple(self.start.tolist()), tuple(self.end.tolist())))

    def direction(self) -> np.ndarray:
        return as_vector(self.end - self.start)

    def length_squared(self) -> float:
        return norm_squared(self.end - self.start)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def is_degenerate(self, tolerance: Optional[Tolerance] = None) -> bool:
        eps = resolve_tolerance(tolerance).point_equality
        return self.length_squared() <= eps * eps

    def point_at(self, t: float) -> np.ndarray:
        if t == 0.0:
            return self.start
        if t == 1.0:
            return self.end
        return as_point(self.start + (self.end - self.start) * t)

    def closest_point(self, point: PointLike) -> np.ndarray:
        """The point on the segment nearest to ``point``.

        The projection parameter is clamped to [0, 1]: a point projecting
        before ``start`` returns ``start``, one projecting past ``end``
        returns ``end``.
        """
        p = as_point(point)
        v = self.end - self.start
        c1 = dot(p - self.start, v)
        if c1 <= 0.0:
            return self.start

        c2 = dot(v, v)
        if c2 <= c1:
            return self.end

        return as_point(self.start + v * (c1 / c2))

    def distance_to_point(self, point: PointLike) -> float:
        p = as_point(point)
        return norm(p - self.closest_point(p))

    def distance_to_point_squared(self, point: PointLike) -> float:
        p = as_point(point)
        return norm_squared(p - self.closest_point(p))

    def to_ray(self) -> Ray:
        return Ray.from_segment(self)

    @classmethod
    def from_ray(cls, ray: Ray, length: float) -> Segment:
        return ray.as_segment(length)
