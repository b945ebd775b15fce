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
"""
Function-style access to Rational arithmetic.

RationalOperations is a stateless singleton that exposes every Rational
operation as a two-argument (or one-argument) function. Code that is
written against a generic "number operations" object, e.g. an exact
matrix routine, can take the provider instead of calling methods on the
values directly.

Example:
    >>> from bigrational.rational_operations import INSTANCE as ops
    >>> ops.add(ops.make(1, 2), ops.make(1, 3))
    Rational(5, 6)
"""

import math
from typing import Iterable, List, Union

from .rational import Rational, ZERO, ONE


class RationalOperations:
    """
    Factory and operations provider for Rational instances.

    Implements the singleton pattern; RationalOperations() and
    RationalOperations.instance() return the same object.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(RationalOperations, cls).__new__(cls)
        return cls._instance

    @classmethod
    def instance(cls) -> 'RationalOperations':
        return cls()

    def number_class(self) -> type:
        return Rational

    # Factory methods
    def make(self, numerator: int, denominator: int = 1) -> Rational:
        """Create a canonical Rational; raises InvalidArgument for a zero denominator"""
        return Rational(numerator, denominator)

    def value_of(self, value: Union[int, Rational]) -> Rational:
        return Rational.value_of(value)

    def zero(self) -> Rational:
        return ZERO

    def one(self) -> Rational:
        return ONE

    # Arithmetic operations - delegate to Rational methods
    def negate(self, number: Rational) -> Rational:
        return number.negate()

    def reciprocate(self, number: Rational) -> Rational:
        return number.reciprocate()

    def abs(self, number: Rational) -> Rational:
        return number.abs()

    def add(self, num_a: Rational, num_b: Rational) -> Rational:
        return num_a.add(num_b)

    def subtract(self, num_a: Rational, num_b: Rational) -> Rational:
        return num_a.subtract(num_b)

    def multiply(self, num_a: Rational, num_b: Rational) -> Rational:
        return num_a.multiply(num_b)

    def divide(self, num_a: Rational, num_b: Rational) -> Rational:
        return num_a.divide(num_b)

    def pow(self, number: Rational, exponent: int) -> Rational:
        return number.pow(exponent)

    def sum(self, values: Iterable[Rational]) -> Rational:
        """Exact sum of values; ZERO for an empty iterable"""
        total = ZERO
        for value in values:
            total = total.add(value)
        return total

    # Rounding
    def floor(self, number: Rational) -> int:
        return number.floor()

    def ceil(self, number: Rational) -> int:
        return number.ceil()

    # Comparison operations
    def compare(self, o1: Rational, o2: Rational) -> int:
        return o1.compare_to(o2)

    def max(self, o1: Rational, o2: Rational) -> Rational:
        return o1.max(o2)

    def min(self, o1: Rational, o2: Rational) -> Rational:
        return o1.min(o2)

    def signum(self, number: Rational) -> int:
        return number.signum()

    # Predicates
    def is_zero(self, number: Rational) -> bool:
        return number.is_zero()

    def is_one(self, number: Rational) -> bool:
        return number.is_one()

    def gcd(self, *values: Rational) -> Rational:
        """
        Greatest common divisor of several Rationals.

        For fractions gcd(a/b, c/d) = gcd(a, c) / lcm(b, d). The result is
        non-negative; it is ZERO when all values are zero or none are given.
        """
        if not values:
            return ZERO
        gcd_num = 0
        lcm_den = 1
        for value in values:
            gcd_num = math.gcd(gcd_num, value.numerator)
            lcm_den = lcm_den * value.denominator // math.gcd(lcm_den, value.denominator)
        return Rational(gcd_num, lcm_den)

    def reduce_vector(self, values: Iterable[Rational]) -> List[Rational]:
        """
        Divide a vector of Rationals by the gcd of its entries.

        The result is a new list whose entries are integers with no common
        factor, unless all entries are zero, in which case the vector is
        returned unchanged (as a new list).

        Args:
            values: Rationals to reduce

        Returns:
            Reduced vector
        """
        vector = list(values)
        if not vector:
            return vector

        gcd = self.gcd(*vector)
        if gcd.is_zero() or gcd.is_one():
            return vector
        return [value.divide(gcd) for value in vector]


# Create singleton instance
INSTANCE = RationalOperations.instance()
