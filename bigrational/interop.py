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
"""Exact conversion between Rational and other rational number types.

Supported types: fractions.Fraction, sympy.Rational (including
sympy.Integer) and, when python-flint is installed, flint.fmpq.
No conversion goes through float.

Example usage:
    >>> from fractions import Fraction
    >>> from bigrational.interop import as_rational, to_sympy
    >>> as_rational(Fraction(6, 4))
    Rational(3, 2)
    >>> to_sympy(as_rational(Fraction(6, 4)))
    3/2
"""

import logging
from fractions import Fraction

import sympy

from .rational import Rational

LOG = logging.getLogger(__name__)

# Backend detection - only place flint is imported in the package
try:
    from flint import fmpq
    FLINT_AVAILABLE = True
except ImportError:
    FLINT_AVAILABLE = False
    fmpq = None

LOG.debug("python-flint available: %s", FLINT_AVAILABLE)


def to_fraction(value: Rational) -> Fraction:
    """Convert a Rational to fractions.Fraction"""
    return Fraction(value.numerator, value.denominator)


def from_fraction(value: Fraction) -> Rational:
    """Convert a fractions.Fraction to Rational"""
    return Rational(value.numerator, value.denominator)


def to_sympy(value: Rational) -> sympy.Rational:
    """Convert a Rational to sympy.Rational (sympy.Integer for whole numbers)"""
    return sympy.Rational(value.numerator, value.denominator)


def from_sympy(value) -> Rational:
    """
    Convert a sympy rational number to Rational.

    Args:
        value: sympy.Rational or sympy.Integer

    Returns:
        Rational with the same value

    Raises:
        TypeError: If value is not a sympy rational (e.g. sympy.Float, sympy.pi)
    """
    if not isinstance(value, sympy.Rational):
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational exactly")
    return Rational(int(value.p), int(value.q))


def to_fmpq(value: Rational):
    """
    Convert a Rational to flint.fmpq.

    Raises:
        ImportError: If python-flint is not installed
    """
    if not FLINT_AVAILABLE:
        raise ImportError("to_fmpq requires the python-flint package (pip install python-flint)")
    return fmpq(value.numerator, value.denominator)


def from_fmpq(value) -> Rational:
    """Convert a flint.fmpq to Rational"""
    return Rational(int(value.p), int(value.q))


def as_rational(value) -> Rational:
    """
    Convert any supported exact number to Rational.

    Args:
        value: Rational, int, fractions.Fraction, sympy.Rational or flint.fmpq

    Returns:
        Rational with the same value

    Raises:
        TypeError: For any other type, including float and bool
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    if isinstance(value, Fraction):
        return from_fraction(value)
    if isinstance(value, sympy.Rational):
        return from_sympy(value)
    if FLINT_AVAILABLE and isinstance(value, fmpq):
        return from_fmpq(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to Rational exactly")
