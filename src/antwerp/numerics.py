## numeric capability sets for antwerp geometry
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

"""numeric capability sets for **antwerp**

Geometry in **antwerp** is generic over a single real number
representation chosen by the caller.  Rather than relying on the
numeric type itself, every geometric value carries a ``RealField``,
a small capability set that provides the trigonometric functions, the
standard constants (``pi``, ``tau``, ...) and tolerance comparison for
that representation.

Two fields are provided:

- ``FLOAT`` -- ordinary Python3 ``float`` arithmetic using ``math``.
  This is the default everywhere.
- ``mp_field(dps)`` -- arbitrary precision arithmetic using an
  independent ``mpmath`` context with ``dps`` decimal digits.

``epsilon`` is the default comparison tolerance, chosen empirically for
double precision geometry.
"""

from abc import ABC, abstractmethod
import math

from mpmath.ctx_mp import MPContext

## constants
epsilon = 0.000005


class RealField(ABC):
    """capability set for a real number representation"""

    name = "abstract"

    def __init__(self, tolerance=epsilon):
        if tolerance <= 0:
            raise ValueError('tolerance must be positive, got {}'.format(tolerance))
        self.tolerance = tolerance

    @abstractmethod
    def real(self, x):
        """convert ``x`` into this field's representation"""

    @property
    @abstractmethod
    def pi(self):
        pass

    @abstractmethod
    def sin(self, x):
        pass

    @abstractmethod
    def cos(self, x):
        pass

    @abstractmethod
    def atan2(self, y, x):
        pass

    @abstractmethod
    def sqrt(self, x):
        pass

    @abstractmethod
    def floor(self, x):
        pass

    @property
    def tau(self):
        return self.pi * 2

    @property
    def frac_pi_2(self):
        return self.pi / 2

    @property
    def frac_pi_3(self):
        return self.pi / 3

    @property
    def frac_pi_4(self):
        return self.pi / 4

    @property
    def frac_pi_6(self):
        return self.pi / 6

    @property
    def zero(self):
        return self.real(0)

    @property
    def one(self):
        return self.real(1)

    @property
    def two(self):
        return self.real(2)

    @property
    def half(self):
        return self.real(1) / 2

    def radians(self, degrees):
        """convert an angle in degrees into radians in this field"""
        return self.real(degrees) * self.pi / 180

    def rem_euclid(self, x, m):
        """least non-negative remainder of ``x`` modulo ``m``"""
        return x - m * self.floor(x / m)

    def close(self, a, b, tolerance=None):
        """ are two scalars the same within tolerance
        """
        if tolerance is None:
            tolerance = self.tolerance
        return abs(a - b) < tolerance

    def __repr__(self):
        return "{}(tolerance={})".format(type(self).__name__, self.tolerance)


class FloatField(RealField):
    """double precision field backed by the ``math`` module"""

    name = "float"

    def real(self, x):
        return float(x)

    @property
    def pi(self):
        return math.pi

    @property
    def tau(self):
        return math.tau

    def sin(self, x):
        return math.sin(x)

    def cos(self, x):
        return math.cos(x)

    def atan2(self, y, x):
        return math.atan2(y, x)

    def sqrt(self, x):
        return math.sqrt(x)

    def floor(self, x):
        return float(math.floor(x))


class MpField(RealField):
    """arbitrary precision field backed by a private ``mpmath`` context

    Each instance owns its own ``MPContext``, so changing the
    precision of one field never affects another, nor the global
    ``mpmath.mp`` context.
    """

    name = "mpmath"

    def __init__(self, dps=30, tolerance=None):
        if dps < 1:
            raise ValueError('decimal precision must be positive, got {}'.format(dps))
        self.ctx = MPContext()
        self.ctx.dps = dps
        if tolerance is None:
            ## scale the default tolerance with the working precision
            tolerance = min(epsilon, 10.0 ** (-(dps // 2)))
        super().__init__(tolerance)

    @property
    def dps(self):
        return self.ctx.dps

    def real(self, x):
        return self.ctx.mpf(x)

    @property
    def pi(self):
        return +self.ctx.pi

    def sin(self, x):
        return self.ctx.sin(x)

    def cos(self, x):
        return self.ctx.cos(x)

    def atan2(self, y, x):
        return self.ctx.atan2(y, x)

    def sqrt(self, x):
        return self.ctx.sqrt(x)

    def floor(self, x):
        return self.ctx.floor(x)

    def __repr__(self):
        return "MpField(dps={}, tolerance={})".format(self.dps, self.tolerance)


FLOAT = FloatField()


def mp_field(dps=30, tolerance=None):
    """return an arbitrary precision field with ``dps`` decimal digits"""
    return MpField(dps, tolerance)


def lerp(start, end, proportion):
    """linear interpolation between ``start`` and ``end``

    Works for scalars and for any value type that supports addition,
    subtraction and multiplication by a scalar, such as ``Vec2``.
    """
    return start + (end - start) * proportion
