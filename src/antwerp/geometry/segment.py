## line segments for antwerp
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

from dataclasses import dataclass

from antwerp.geometry.vec2 import Vec2
from antwerp.numerics import lerp


@dataclass(frozen=True)
class LineSegment2:
    """directed line segment from ``start`` to ``end``"""

    start: Vec2
    end: Vec2

    def centre(self):
        return lerp(self.start, self.end, self.start.num.half)

    def direction(self):
        return self.end - self.start

    def length(self):
        return self.direction().magnitude()

    def reversed(self):
        return LineSegment2(self.end, self.start)

    ## two segments coincide if they join the same pair of points,
    ## in either orientation
    def coincides(self, other, tolerance=None):
        if self.start.close(other.start, tolerance) and self.end.close(other.end, tolerance):
            return True
        return self.start.close(other.end, tolerance) and self.end.close(other.start, tolerance)
