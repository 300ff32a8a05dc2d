"""Misc. operations on points and vectors in 2D."""

from __future__ import annotations

import numpy as np

from compgeo.core.vector import as_vector


def perp_vec2d(vector: np.ndarray) -> np.ndarray:
    """Rotate ``vector`` 90 degrees counter-clockwise.

    The result has the same norm as the input.

    >>> perp_vec2d(np.array([1.0, 1.0])).tolist()
    [-1.0, 1.0]
    """
    return as_vector((-vector[1], vector[0]))


def perp_unit2d(vector: np.ndarray) -> np.ndarray:
    """Rotate a unit vector 90 degrees counter-clockwise.

    Swapping and negating components is an exact rotation, so the result is
    returned without renormalization.
    """
    return perp_vec2d(vector)
