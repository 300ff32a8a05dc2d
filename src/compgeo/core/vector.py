from __future__ import annotations

import logging
import math

import numpy as np

from compgeo.core.errors import DegenerateGeometryError, NotUnitVectorError
from compgeo.core.types import PointLike

logger = logging.getLogger(__name__)


def as_point(values: PointLike) -> np.ndarray:
    """Coerce ``values`` into a read-only float64 array of shape (2,)."""
    arr = np.array(values, dtype=np.float64)
    if arr.shape != (2,):
        raise ValueError(f"expected a 2D point or vector, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"coordinates must be finite, got {arr.tolist()}")
    arr.setflags(write=False)
    return arr


as_vector = as_point


def dot(a: np.ndarray, b: np.ndarray) -> float:
    return float(a[0] * b[0] + a[1] * b[1])


def norm_squared(v: np.ndarray) -> float:
    return dot(v, v)


def norm(v: np.ndarray) -> float:
    return math.hypot(float(v[0]), float(v[1]))


def normalize(v: np.ndarray) -> np.ndarray:
    length = norm(v)
    if length == 0.0:
        raise DegenerateGeometryError("cannot normalize the zero vector")
    return as_vector(v / length)


def points_equal(a: np.ndarray, b: np.ndarray, tolerance: float = 0.0) -> bool:
    if tolerance == 0.0:
        return bool(a[0] == b[0] and a[1] == b[1])
    return norm(a - b) <= tolerance


def require_unit(v: np.ndarray, tolerance: float, name: str) -> np.ndarray:
    length = norm(v)
    if abs(length - 1.0) > tolerance:
        logger.debug("rejecting %s %s with norm %r", name, v.tolist(), length)
        raise NotUnitVectorError(f"{name} must be unit length, got norm {length!r}")
    return v
