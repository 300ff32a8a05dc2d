from __future__ import annotations


class GeometryError(ValueError):
    """Base class for invalid geometric input."""


class NotUnitVectorError(GeometryError):
    """A direction or normal that must be unit length is not."""


class DegenerateGeometryError(GeometryError):
    """An operation is undefined for a zero-length vector or segment."""
