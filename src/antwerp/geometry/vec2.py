## two dimensional vectors for antwerp
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

"""two dimensional vectors for **antwerp**

``Vec2`` is an immutable pair of coordinates that also carries the
``RealField`` its components live in.  All arithmetic returns new
vectors in the same field, so geometry built from ``Vec2`` stays in
the precision chosen by the caller.

Angles are always in radians.
"""

from dataclasses import dataclass, field

from antwerp.numerics import FLOAT, RealField


@dataclass(frozen=True)
class Vec2:
    """immutable 2D vector"""

    x: object
    y: object
    num: RealField = field(default=FLOAT, compare=False, repr=False)

    @classmethod
    def of(cls, x, y, num=FLOAT):
        """make a vector with both components converted into ``num``"""
        return cls(num.real(x), num.real(y), num)

    @classmethod
    def zero(cls, num=FLOAT):
        return cls(num.zero, num.zero, num)

    @classmethod
    def unit(cls, radians, num=FLOAT):
        """unit vector pointing at angle ``radians`` from the x axis"""
        return cls(num.cos(radians), num.sin(radians), num)

    def __str__(self):
        return "[{}, {}]".format(self.x, self.y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y, self.num)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y, self.num)

    def __neg__(self):
        return Vec2(-self.x, -self.y, self.num)

    def __mul__(self, c):
        return Vec2(self.x * c, self.y * c, self.num)

    __rmul__ = __mul__

    def __truediv__(self, c):
        return Vec2(self.x / c, self.y / c, self.num)

    def magnitude(self):
        return self.num.sqrt(self.x * self.x + self.y * self.y)

    def angle(self):
        """angle from the positive x axis, in `(-pi, pi]`"""
        return self.num.atan2(self.y, self.x)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """z component of the 3D cross product of ``self`` and ``other``"""
        return self.x * other.y - self.y * other.x

    def angle_to(self, other):
        """signed angle that rotates ``self`` onto ``other``, in `(-pi, pi]`

        Positive angles are counter-clockwise.
        """
        num = self.num
        turn = num.rem_euclid(other.angle() - self.angle(), num.tau)
        if turn > num.pi:
            turn = turn - num.tau
        return turn

    def normalize(self):
        """unit vector in the direction of ``self``; the zero vector is
        returned unchanged"""
        mag = self.magnitude()
        if mag == 0:
            return self
        return self / mag

    def rotate(self, radians):
        """rotate counter-clockwise about the origin"""
        cos = self.num.cos(radians)
        sin = self.num.sin(radians)
        return Vec2(self.x * cos - self.y * sin,
                    self.x * sin + self.y * cos,
                    self.num)

    def reflect(self, axis):
        """mirror across the line through the origin along ``axis``

        A zero ``axis`` does not define a line, and the vector is
        returned unchanged.
        """
        if axis.magnitude() == 0:
            return self
        twice = axis.angle() * 2
        cos = self.num.cos(twice)
        sin = self.num.sin(twice)
        return Vec2(self.x * cos + self.y * sin,
                    self.x * sin - self.y * cos,
                    self.num)

    def project(self, basis):
        """component of ``self`` along ``basis``"""
        return basis * (self.dot(basis) / basis.dot(basis))

    def close(self, other, tolerance=None):
        """ are two vectors the same to within tolerance"""
        return self.num.close((self - other).magnitude(), 0, tolerance)

    def to_tuple(self):
        return (float(self.x), float(self.y))
