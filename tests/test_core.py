"""
Tests for the vector helpers, perpendicular operations and tolerance policy.
"""

import math

import numpy as np
import pytest

from compgeo.core.errors import DegenerateGeometryError, GeometryError, NotUnitVectorError
from compgeo.core.operations import perp_unit2d, perp_vec2d
from compgeo.core.types import DEFAULT_TOLERANCE, Tolerance, resolve_tolerance
from compgeo.core.vector import as_point, normalize, points_equal, require_unit


class TestAsPoint:
    def test_accepts_tuples_and_arrays(self):
        assert as_point((1, 2)).tolist() == [1.0, 2.0]
        assert as_point(np.array([3.0, 4.0])).dtype == np.float64

    def test_result_is_read_only(self):
        p = as_point((1.0, 2.0))
        with pytest.raises(ValueError):
            p[0] = 5.0

    def test_does_not_alias_input(self):
        src = np.array([1.0, 2.0])
        p = as_point(src)
        src[0] = 9.0
        assert p[0] == 1.0

    @pytest.mark.parametrize("bad", [(1.0,), (1.0, 2.0, 3.0), [[1.0, 2.0]]])
    def test_rejects_wrong_shape(self, bad):
        with pytest.raises(ValueError):
            as_point(bad)

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            as_point((math.nan, 0.0))
        with pytest.raises(ValueError):
            as_point((0.0, math.inf))


class TestNormalize:
    def test_normalizes(self):
        v = normalize(as_point((3.0, 4.0)))
        assert v.tolist() == pytest.approx([0.6, 0.8])

    def test_zero_vector_is_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            normalize(as_point((0.0, 0.0)))

    def test_errors_are_value_errors(self):
        assert issubclass(DegenerateGeometryError, GeometryError)
        assert issubclass(NotUnitVectorError, ValueError)


class TestRequireUnit:
    def test_accepts_unit_vector(self):
        v = as_point((1.0 / math.sqrt(2.0), 1.0 / math.sqrt(2.0)))
        assert require_unit(v, 1e-9, "direction") is v

    def test_rejects_non_unit_vector(self):
        with pytest.raises(NotUnitVectorError, match="direction"):
            require_unit(as_point((1.0, 1.0)), 1e-9, "direction")


class TestPointsEqual:
    def test_exact_by_default(self):
        assert points_equal(as_point((0.1, 0.2)), as_point((0.1, 0.2)))
        assert not points_equal(as_point((0.3, 0.0)), as_point((0.1 + 0.2, 0.0)))

    def test_with_tolerance(self):
        assert points_equal(as_point((0.3, 0.0)), as_point((0.1 + 0.2, 0.0)), 1e-12)


class TestPerpendicular:
    def test_rotates_counter_clockwise(self):
        assert perp_vec2d(as_point((1.0, 1.0))).tolist() == [-1.0, 1.0]
        assert perp_vec2d(as_point((1.0, 0.0))).tolist() == [0.0, 1.0]

    def test_preserves_norm(self):
        v = as_point((3.0, -7.5))
        assert np.linalg.norm(perp_vec2d(v)) == np.linalg.norm(v)

    def test_is_orthogonal(self):
        v = as_point((2.5, -1.25))
        assert float(np.dot(v, perp_vec2d(v))) == 0.0

    def test_unit_stays_unit(self):
        u = normalize(as_point((1.0, 1.0)))
        rotated = perp_unit2d(u)
        assert rotated.tolist() == pytest.approx(normalize(as_point((-1.0, 1.0))).tolist())
        assert np.linalg.norm(rotated) == np.linalg.norm(u)


class TestTolerance:
    def test_defaults(self):
        assert DEFAULT_TOLERANCE.point_equality == 0.0
        assert DEFAULT_TOLERANCE.parallel == np.finfo(np.float64).eps

    def test_resolve(self):
        custom = Tolerance(point_equality=1e-6)
        assert resolve_tolerance(None) is DEFAULT_TOLERANCE
        assert resolve_tolerance(custom) is custom

    @pytest.mark.parametrize("field", ["unit_length", "parallel", "point_equality"])
    def test_rejects_negative(self, field):
        with pytest.raises(ValueError, match=field):
            Tolerance(**{field: -1.0})

    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            Tolerance(parallel=math.nan)
