"""Intersections between line segments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from compgeo.core.operations import perp_vec2d
from compgeo.core.types import Tolerance, resolve_tolerance
from compgeo.core.vector import as_point, dot, norm, norm_squared, points_equal
from compgeo.line.segment import Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoIntersection:
    """The segments have no point in common."""


@dataclass(frozen=True, eq=False)
class PointIntersection:
    """The segments meet in a single point."""

    point: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", as_point(self.point))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointIntersection):
            return NotImplemented
        return bool(np.array_equal(self.point, other.point))

    def __hash__(self) -> int:
        return hash(tuple(self.point.tolist()))


@dataclass(frozen=True)
class OverlapIntersection:
    """The segments are collinear and share ``segment``, oriented along the first input."""

    segment: Segment


SegmentIntersection = Union[NoIntersection, PointIntersection, OverlapIntersection]

NO_INTERSECTION = NoIntersection()


def intersect_segments(a: Segment, b: Segment, tolerance: Optional[Tolerance] = None) -> SegmentIntersection:
    """Classify how segments ``a`` and ``b`` intersect.

    Parallel pairs, including any pair where one segment has zero length,
    are resolved by containment and overlap tests. Everything else is solved
    by Cramer's rule on ``a.start + t * dir_a == b.start + u * dir_b``.

    Point coincidence uses ``tolerance.point_equality``, which defaults to
    exact floating-point equality. Points computed from nearly collinear
    input can therefore miss by a rounding error; pass a Tolerance with a
    non-zero ``point_equality`` where that matters.
    """
    tol = resolve_tolerance(tolerance)
    dir_a = a.direction()
    dir_b = b.direction()

    denom = dot(dir_a, perp_vec2d(dir_b))
    if abs(denom) <= tol.parallel:
        return _intersect_parallel(a, b, tol)

    w = b.start - a.start
    t = dot(w, perp_vec2d(dir_b)) / denom
    u = dot(w, perp_vec2d(dir_a)) / denom
    if 0.0 <= t <= 1.0 and 0.0 <= u <= 1.0:
        return PointIntersection(a.point_at(t))
    return NO_INTERSECTION


def _intersect_parallel(a: Segment, b: Segment, tol: Tolerance) -> SegmentIntersection:
    a_is_point = a.is_degenerate(tol)
    b_is_point = b.is_degenerate(tol)

    if a_is_point and b_is_point:
        logger.debug("both segments are points: %s, %s", a.start.tolist(), b.start.tolist())
        if points_equal(a.start, b.start, tol.point_equality):
            return PointIntersection(a.start)
        return NO_INTERSECTION

    if a_is_point:
        return _intersect_point(a.start, b, tol)
    if b_is_point:
        return _intersect_point(b.start, a, tol)

    dir_a = a.direction()
    len_sq = norm_squared(dir_a)

    # Distance from b.start to the line through a, scaled by |dir_a|.
    offset = dot(b.start - a.start, perp_vec2d(dir_a))
    if abs(offset) > tol.point_equality * norm(dir_a):
        logger.debug("segments are parallel but not collinear (offset %r)", offset)
        return NO_INTERSECTION

    t0 = dot(b.start - a.start, dir_a) / len_sq
    t1 = dot(b.end - a.start, dir_a) / len_sq
    lo = max(0.0, min(t0, t1))
    hi = min(1.0, max(t0, t1))
    logger.debug("collinear segments share parameter range [%r, %r] of the first", lo, hi)

    if lo > hi:
        return NO_INTERSECTION
    if lo == hi:
        return PointIntersection(a.point_at(lo))
    return OverlapIntersection(Segment(a.point_at(lo), a.point_at(hi)))


def _intersect_point(point: np.ndarray, segment: Segment, tol: Tolerance) -> SegmentIntersection:
    if segment.distance_to_point_squared(point) <= tol.point_equality * tol.point_equality:
        return PointIntersection(point)
    return NO_INTERSECTION
