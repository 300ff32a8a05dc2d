from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

import numpy as np

from compgeo.core.types import PointLike, Tolerance, resolve_tolerance
from compgeo.core.vector import as_point, as_vector, dot, norm, norm_squared, normalize, require_unit
from compgeo.line.distance import DistanceToPoint

if TYPE_CHECKING:
    from compgeo.line.segment import Segment


@dataclass(frozen=True, eq=False)
class Ray(DistanceToPoint):
    """A half-line ``origin + t * direction`` for ``t >= 0``.

    ``direction`` must be unit length.
    """

    origin: np.ndarray
    direction: np.ndarray
    tolerance: Optional[Tolerance] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        tolerance = resolve_tolerance(self.tolerance)
        direction = as_vector(self.direction)
        require_unit(direction, tolerance.unit_length, "direction")
        object.__setattr__(self, "tolerance", tolerance)
        object.__setattr__(self, "origin", as_point(self.origin))
        object.__setattr__(self, "direction", direction)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return bool(np.array_equal(self.origin, other.origin) and np.array_equal(self.direction, other.direction))

    def __hash__(self) -> int:
        return hash((tuple(self.origin.tolist()), tuple(self.direction.tolist())))

    def point_at(self, t: float) -> np.ndarray:
        return as_point(self.origin + self.direction * t)

    def distance_to_point(self, point: PointLike) -> float:
        """Signed distance from the ray to ``point``.

        A point behind the origin (projection onto the direction <= 0) gets
        the negated distance to the origin. A point in front gets the
        unsigned perpendicular distance to the ray. The magnitude jumps at
        the origin's normal line: just behind it the full offset length is
        returned, just in front only the perpendicular part.
        """
        w = as_point(point) - self.origin
        projection = dot(w, self.direction)
        if projection <= 0.0:
            return -norm(w)
        return norm(w - self.direction * projection)

    def distance_to_point_squared(self, point: PointLike) -> float:
        """Squared counterpart of :meth:`distance_to_point`.

        Behind the origin this is ``-|w|**2``, not the square of the signed
        distance.
        """
        w = as_point(point) - self.origin
        projection = dot(w, self.direction)
        if projection <= 0.0:
            return -norm_squared(w)
        return norm_squared(w - self.direction * projection)

    def as_segment(self, length: float) -> Segment:
        """A segment from the origin ``length`` units along the direction.

        Negative lengths produce a segment pointing backwards.
        """
        from compgeo.line.segment import Segment

        return Segment(self.origin, self.point_at(length))

    @classmethod
    def from_segment(cls, segment: Segment) -> Ray:
        """A ray from ``segment.start`` towards ``segment.end``; the length is dropped.

        Raises DegenerateGeometryError for a zero-length segment.
        """
        return cls(segment.start, normalize(segment.end - segment.start))
