## polygons for antwerp
## Copyright (c) 2023 antwerp contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Polygons
========

``Poly2`` is an immutable closed polygon given by an ordered list of
``Vec2`` vertices.  The closing edge from the last vertex back to the
first is implicit.  Adjacent duplicate vertices (including a last
vertex that repeats the first) are removed on construction, and a
polygon with fewer than three distinct vertices left is rejected.

Regular polygons are built by ``Poly2.regular``, with vertex ``k`` at
angle ``2*pi*k/n`` on the circumscribed circle.  ``regular_tile``
additionally restricts the order to the polygons that can take part in
an edge-to-edge Euclidean tiling.

All transformations return new polygons.
"""

from antwerp.errors import (
    error_degenerate_polygon,
    error_non_positive_side_length,
    error_non_positive_vertex_count,
    error_unsupported_polygon_order,
)
from antwerp.geometry.segment import LineSegment2
from antwerp.geometry.vec2 import Vec2
from antwerp.numerics import FLOAT

## orders of the regular polygons that tile the plane edge-to-edge
SUPPORTED_ORDERS = (3, 4, 6, 8, 12)


class Poly2:
    """immutable closed polygon"""

    def __init__(self, vertices):
        cleaned = []
        for v in vertices:
            if not isinstance(v, Vec2):
                raise ValueError('bad vertex passed to Poly2: {}'.format(v))
            if not cleaned or not v.close(cleaned[-1]):
                cleaned.append(v)
        while len(cleaned) > 1 and cleaned[-1].close(cleaned[0]):
            cleaned.pop()
        if len(cleaned) < 3:
            raise error_degenerate_polygon(len(cleaned))
        self._vertices = tuple(cleaned)

    @classmethod
    def regular(cls, order, side_length=1, num=FLOAT):
        """regular polygon with ``order`` sides of length
        ``side_length``, centred on the origin"""
        if order < 3:
            raise error_non_positive_vertex_count(order)
        if side_length <= 0:
            raise error_non_positive_side_length(side_length)
        radius = num.real(side_length) / (num.sin(num.pi / order) * 2)
        return cls([Vec2.unit(num.tau * k / order, num) * radius
                    for k in range(order)])

    def __repr__(self):
        return "Poly2([{}])".format(", ".join(str(v) for v in self._vertices))

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    @property
    def vertices(self):
        return self._vertices

    @property
    def order(self):
        return len(self._vertices)

    @property
    def num(self):
        return self._vertices[0].num

    def vertex(self, i):
        return self._vertices[i % len(self._vertices)]

    def edges(self):
        """ordered list of edges, edge ``i`` running from vertex ``i``
        to vertex ``i+1``"""
        n = len(self._vertices)
        return [LineSegment2(self._vertices[i], self._vertices[(i + 1) % n])
                for i in range(n)]

    def edge(self, i):
        n = len(self._vertices)
        return LineSegment2(self._vertices[i % n], self._vertices[(i + 1) % n])

    def area(self):
        """signed area, positive for counter-clockwise vertex order"""
        total = self.num.zero
        for e in self.edges():
            total = total + e.start.cross(e.end)
        return total / 2

    def centroid(self):
        """area centroid; for figures with no net area, such as a
        figure eight, the mean of the vertices"""
        num = self.num
        a = self.area()
        if num.close(a, 0):
            total = Vec2.zero(num)
            for v in self._vertices:
                total = total + v
            return total / len(self._vertices)
        cx = num.zero
        cy = num.zero
        for e in self.edges():
            w = e.start.cross(e.end)
            cx = cx + (e.start.x + e.end.x) * w
            cy = cy + (e.start.y + e.end.y) * w
        return Vec2(cx / (a * 6), cy / (a * 6), num)

    def turning_number(self):
        """signed sum of the exterior angles of the boundary

        ``2*pi`` for a simple clockwise polygon, ``-2*pi`` for a simple
        counter-clockwise polygon and ``0`` for a figure eight.
        """
        edges = self.edges()
        n = len(edges)
        total = self.num.zero
        for i in range(n):
            total = total - edges[i].direction().angle_to(edges[(i + 1) % n].direction())
        return total

    def translate(self, delta):
        return Poly2([v + delta for v in self._vertices])

    def rotate(self, radians, about=None):
        """rotate counter-clockwise by ``radians`` about the point
        ``about``, or the origin"""
        if about is None:
            return Poly2([v.rotate(radians) for v in self._vertices])
        return Poly2([(v - about).rotate(radians) + about for v in self._vertices])

    def reflect(self, axis, about=None):
        """mirror across the line along ``axis`` through the point
        ``about``, or the origin"""
        if about is None:
            return Poly2([v.reflect(axis) for v in self._vertices])
        return Poly2([(v - about).reflect(axis) + about for v in self._vertices])

    def coincides(self, other, tolerance=None):
        """do both polygons have the same vertex set, regardless of
        vertex order and orientation"""
        if len(self._vertices) != len(other.vertices):
            return False
        for v in self._vertices:
            if not any(v.close(w, tolerance) for w in other.vertices):
                return False
        return True


def regular_tile(order, side_length=1, num=FLOAT):
    """regular polygon usable as a tile of a Euclidean tiling"""
    if order not in SUPPORTED_ORDERS:
        raise error_unsupported_polygon_order(order)
    return Poly2.regular(order, side_length, num)
