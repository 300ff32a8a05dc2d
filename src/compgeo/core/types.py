from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np


PointLike = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class Tolerance:
    """Numeric policy for the degenerate-case checks.

    ``unit_length`` bounds how far the norm of a unit direction or normal may
    drift from 1. ``parallel`` is the magnitude of ``dir_a . perp(dir_b)`` at
    or below which two segments are treated as parallel; it is absolute, so
    it scales with the product of the segment lengths and very short
    crossing segments can fall under it. ``point_equality`` is
    the distance at or below which two points coincide; the default of 0.0
    means exact floating-point equality.
    """

    unit_length: float = 1e-9
    parallel: float = float(np.finfo(np.float64).eps)
    point_equality: float = 0.0

    def __post_init__(self) -> None:
        for name in ("unit_length", "parallel", "point_equality"):
            value = getattr(self, name)
            if not value >= 0.0:
                raise ValueError(f"{name} must be >= 0, got {value}")


DEFAULT_TOLERANCE = Tolerance()


def resolve_tolerance(tolerance: Optional[Tolerance]) -> Tolerance:
    return DEFAULT_TOLERANCE if tolerance is None else tolerance
