#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Exact rational numbers over arbitrary-precision integers.

A Rational is always kept in canonical form: the denominator is strictly
positive, numerator and denominator are coprime, and zero is stored as 0/1.
Every operation returns a new instance built through the reducing
constructor, so two Rationals denote the same number exactly when their
fields are equal.

Example:
    >>> from bigrational import Rational
    >>> Rational(1, 2) + Rational(1, 3)
    Rational(5, 6)
    >>> str(Rational(6, -4))
    '-3/2'
    >>> Rational(-1, 2).floor(), Rational(-1, 2).ceil()
    (-1, 0)
"""

import logging
import math
from operator import index
from typing import Union

LOG = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a Rational is constructed with a zero denominator."""


def _as_int(value, name: str) -> int:
    # bool is an int subclass, but True/False as a fraction part is a bug
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        return index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


class Rational:
    """
    Immutable exact fraction numerator/denominator.

    Args:
        numerator: Any integer (int or an object supporting __index__)
        denominator: Nonzero integer, default 1. May be negative; the sign
            is moved to the numerator.

    Raises:
        InvalidArgument: If denominator is zero
        TypeError: If either argument is not an integer
    """

    __slots__ = ('_numerator', '_denominator', '_text')

    def __init__(self, numerator: int, denominator: int = 1):
        numerator = _as_int(numerator, "numerator")
        denominator = _as_int(denominator, "denominator")
        if denominator == 0:
            LOG.debug("Rejected fraction %d/0", numerator)
            raise InvalidArgument("Denominator of a fraction can not be zero.")

        self._text = None
        if numerator == 0:
            self._numerator = 0
            self._denominator = 1
            return

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        gcd = math.gcd(numerator, denominator)
        self._numerator = numerator // gcd
        self._denominator = denominator // gcd

    @staticmethod
    def value_of(value: Union[int, 'Rational']) -> 'Rational':
        """Return value if it already is a Rational, else the whole number Rational(value)."""
        if isinstance(value, Rational):
            return value
        return Rational(value)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def get_numerator(self) -> int:
        return self._numerator

    def get_denominator(self) -> int:
        return self._denominator

    # Predicates

    def signum(self) -> int:
        """Return sign: -1, 0, or 1"""
        if self._numerator < 0:
            return -1
        if self._numerator > 0:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return self._numerator == 1 and self._denominator == 1

    def is_negative(self) -> bool:
        return self._numerator < 0

    def is_integer(self) -> bool:
        return self._denominator == 1

    # Arithmetic

    def negate(self) -> 'Rational':
        return Rational(-self._numerator, self._denominator)

    def abs(self) -> 'Rational':
        if self._numerator < 0:
            return self.negate()
        return self

    def reciprocate(self) -> 'Rational':
        """
        Return the multiplicative inverse 1/self.

        Raises:
            ZeroDivisionError: If self is zero (an ArithmeticError)
        """
        if self._numerator == 0:
            LOG.debug("Rejected reciprocal of zero")
            raise ZeroDivisionError(f"Can not reciprocate fraction with value {self}")
        return Rational(self._denominator, self._numerator)

    def add(self, other: Union[int, 'Rational']) -> 'Rational':
        other = _operand(other)
        numerator = self._numerator * other._denominator + self._denominator * other._numerator
        return Rational(numerator, self._denominator * other._denominator)

    def subtract(self, other: Union[int, 'Rational']) -> 'Rational':
        return self.add(_operand(other).negate())

    def multiply(self, other: Union[int, 'Rational']) -> 'Rational':
        other = _operand(other)
        return Rational(self._numerator * other._numerator, self._denominator * other._denominator)

    def divide(self, other: Union[int, 'Rational']) -> 'Rational':
        """Divide by other; raises ZeroDivisionError when other is zero."""
        return self.multiply(_operand(other).reciprocate())

    def pow(self, exponent: int) -> 'Rational':
        """
        Return self**exponent for an integer exponent.

        A negative exponent raises the reciprocal, so zero to a negative
        power raises ZeroDivisionError. Any value to the power 0 is ONE.
        """
        exponent = _as_int(exponent, "exponent")
        base = self
        if exponent < 0:
            base = self.reciprocate()
            exponent = -exponent
        return Rational(base._numerator**exponent, base._denominator**exponent)

    # Rounding

    def floor(self) -> int:
        """Largest integer <= self"""
        return self._numerator // self._denominator

    def ceil(self) -> int:
        """Smallest integer >= self"""
        quotient, remainder = divmod(self._numerator, self._denominator)
        if remainder > 0:
            return quotient + 1
        return quotient

    # Ordering

    def compare_to(self, other: Union[int, 'Rational']) -> int:
        """Compare to another Rational: -1 if less, 0 if equal, 1 if greater"""
        return self.subtract(other).signum()

    def max(self, other: 'Rational') -> 'Rational':
        if self.compare_to(other) < 0:
            return other
        return self

    def min(self, other: 'Rational') -> 'Rational':
        if self.compare_to(other) > 0:
            return other
        return self

    def __eq__(self, other) -> bool:
        if isinstance(other, Rational):
            return self._numerator == other._numerator and self._denominator == other._denominator
        return False

    def __hash__(self) -> int:
        return hash((self._numerator, self._denominator))

    def __lt__(self, other) -> bool:
        if isinstance(other, Rational):
            return self.compare_to(other) < 0
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, Rational):
            return self.compare_to(other) <= 0
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, Rational):
            return self.compare_to(other) > 0
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, Rational):
            return self.compare_to(other) >= 0
        return NotImplemented

    def __str__(self) -> str:
        # write-once cache; a racing thread recomputes the same string
        if self._text is None:
            if self._denominator == 1:
                self._text = str(self._numerator)
            else:
                self._text = f"{self._numerator}/{self._denominator}"
        return self._text

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    # Python operator overloading for convenience
    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).subtract(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return _operand(other).divide(self)

    def __pow__(self, exponent):
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self.abs()

    def __floor__(self):
        return self.floor()

    def __ceil__(self):
        return self.ceil()


def _is_operand(value) -> bool:
    return isinstance(value, Rational) or (isinstance(value, int) and not isinstance(value, bool))


def _operand(value) -> Rational:
    if isinstance(value, Rational):
        return value
    if _is_operand(value):
        return Rational(value)
    raise TypeError(f"unsupported operand type for Rational arithmetic: {type(value).__name__}")


ZERO = Rational(0, 1)
ONE = Rational(1, 1)
HALF = Rational(1, 2)
QUARTER = Rational(1, 4)

Rational.ZERO = ZERO
Rational.ONE = ONE
Rational.HALF = HALF
Rational.QUARTER = QUARTER
