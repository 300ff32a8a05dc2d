from compgeo.line.distance import DistanceToPoint, point_distance, point_distance_squared
from compgeo.line.infinite import Line
from compgeo.line.intersection import (
    NO_INTERSECTION,
    NoIntersection,
    OverlapIntersection,
    PointIntersection,
    SegmentIntersection,
    intersect_segments,
)
from compgeo.line.ray import Ray
from compgeo.line.segment import Segment

__all__ = [
    "DistanceToPoint",
    "Line",
    "NO_INTERSECTION",
    "NoIntersection",
    "OverlapIntersection",
    "PointIntersection",
    "Ray",
    "Segment",
    "SegmentIntersection",
    "intersect_segments",
    "point_distance",
    "point_distance_squared",
]
