"""Planar geometry primitives: vectors, segments and polygons."""

from .vec2 import Vec2
from .segment import LineSegment2
from .poly2 import Poly2, SUPPORTED_ORDERS, regular_tile

__all__ = [
    "Vec2",
    "LineSegment2",
    "Poly2",
    "SUPPORTED_ORDERS",
    "regular_tile",
]
