from __future__ import annotations

from abc import ABC, abstractmethod

from compgeo.core.types import PointLike
from compgeo.core.vector import as_point, norm, norm_squared


class DistanceToPoint(ABC):
    """Objects which can compute their distance from an arbitrary point.

    Some implementations use negative values to indicate direction, so compare
    absolute values when ranking distances across different implementations.
    """

    @abstractmethod
    def distance_to_point(self, point: PointLike) -> float:
        raise NotImplementedError

    @abstractmethod
    def distance_to_point_squared(self, point: PointLike) -> float:
        raise NotImplementedError


def point_distance(a: PointLike, b: PointLike) -> float:
    return norm(as_point(b) - as_point(a))


def point_distance_squared(a: PointLike, b: PointLike) -> float:
    return norm_squared(as_point(b) - as_point(a))
