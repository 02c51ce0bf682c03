## polynomial algebra for antwerp
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

"""polynomials in one variable

Coefficients are stored lowest power first, so ``Polynomial([2, 3])``
is ``3x + 2``.  Trailing zero coefficients are dropped, and the zero
polynomial has no coefficients at all.  Coefficients may be any
numbers that support ``+``, ``*`` and comparison with ``0``, including
``mpmath`` values.
"""


class Polynomial:
    """immutable polynomial in one variable"""

    def __init__(self, coefficients=()):
        coefficients = list(coefficients)
        while coefficients and coefficients[-1] == 0:
            coefficients.pop()
        self._coefficients = tuple(coefficients)

    @classmethod
    def zero(cls):
        return cls()

    @classmethod
    def one(cls):
        return cls([1])

    @property
    def coefficients(self):
        return self._coefficients

    @property
    def order(self):
        """number of coefficients, one more than the degree"""
        return len(self._coefficients)

    def is_zero(self):
        return not self._coefficients

    def eval(self, value):
        """evaluate at ``value``"""
        result = 0
        power = 1
        for c in self._coefficients:
            result = result + c * power
            power = power * value
        return result

    __call__ = eval

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other.coefficients

    def __hash__(self):
        return hash(self._coefficients)

    def __repr__(self):
        return "Polynomial({})".format(list(self._coefficients))

    def __neg__(self):
        return Polynomial([-c for c in self._coefficients])

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        size = max(self.order, other.order)
        lhs = list(self._coefficients) + [0] * (size - self.order)
        rhs = list(other.coefficients) + [0] * (size - other.order)
        return Polynomial([a + b for a, b in zip(lhs, rhs)])

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.is_zero() or other.is_zero():
            return Polynomial()
        product = [0] * (self.order + other.order - 1)
        for i, a in enumerate(self._coefficients):
            for j, b in enumerate(other.coefficients):
                product[i + j] = product[i + j] + a * b
        return Polynomial(product)

    def __str__(self):
        if not self._coefficients:
            return "0"
        top = len(self._coefficients) - 1
        formatted = ""
        for index in range(top, -1, -1):
            c = self._coefficients[index]
            if c == 0 and top > 0:
                continue

            negative = c < 0
            if index == top:
                if negative:
                    formatted += "-"
            else:
                formatted += " - " if negative else " + "

            magnitude = -c if negative else c
            if magnitude != 1 or index == 0:
                formatted += _format_coefficient(magnitude)

            if index >= 1:
                formatted += "x"
            if index >= 2:
                formatted += "^{}".format(index)
        return formatted


def _format_coefficient(c):
    ## integral values print without a fractional part, as 3 not 3.0
    try:
        if float(c).is_integer():
            return str(int(c))
    except (TypeError, ValueError, OverflowError):
        pass
    return str(c)
