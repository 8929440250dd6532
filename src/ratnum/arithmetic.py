# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Arithmetic operations on rational numbers.

All functions accept any value supported by :func:`ratnum.wrap` as operand
and return a Rational in lowest terms, or an int if the result is integral
and integer collapse is enabled.
"""

from __future__ import annotations

import builtins
from typing import Any, Union

from . import coercion
from .exceptions import DivideByZero
from .rational import Rational


__all__ = ['add', 'sub', 'mult', 'div', 'neg', 'abs']


def add(a: Any, b: Any) -> Union[Rational, int]:
    """Return a + b.

    >>> add(Rational(3, 4), Rational(5, 8))
    Rational(11, 8)
    """
    a, b = coercion.wrap(a), coercion.wrap(b)
    if not a:
        return coercion.collapse(b)
    if not b:
        return coercion.collapse(a)
    return coercion.collapse(
        Rational(a.numerator * b.denominator + b.numerator * a.denominator,
                 a.denominator * b.denominator))


def sub(a: Any, b: Any) -> Union[Rational, int]:
    """Return a - b.

    >>> sub(Rational(13, 32), Rational(5, 64))
    Rational(21, 64)
    """
    a, b = coercion.wrap(a), coercion.wrap(b)
    if not a:
        return neg(b)
    if not b:
        return coercion.collapse(a)
    return coercion.collapse(
        Rational(a.numerator * b.denominator - b.numerator * a.denominator,
                 a.denominator * b.denominator))


def mult(a: Any, b: Any) -> Union[Rational, int]:
    """Return a * b.

    >>> mult(Rational(-3, 4), Rational(5, 8))
    Rational(-15, 32)
    """
    a, b = coercion.wrap(a), coercion.wrap(b)
    if not a or not b:
        return coercion.collapse(Rational())
    return coercion.collapse(
        Rational(a.numerator * b.numerator, a.denominator * b.denominator))


def div(a: Any, b: Any) -> Union[Rational, int]:
    """Return a / b.

    Raises:
        DivideByZero: `b` is zero (even if `a` is zero, too)

    >>> div(Rational(3, 4), Rational(5, 8))
    Rational(6, 5)
    """
    a, b = coercion.wrap(a), coercion.wrap(b)
    if not b:
        raise DivideByZero(f"Division by zero: {a} / {b}")
    if not a:
        return coercion.collapse(Rational())
    return coercion.collapse(
        Rational(a.numerator * b.denominator, a.denominator * b.numerator))


def neg(a: Any) -> Union[Rational, int]:
    """Return -a."""
    a = coercion.wrap(a)
    return coercion.collapse(Rational(-a.numerator, a.denominator))


def abs(a: Any) -> Union[Rational, int]:
    """Return |a|."""
    a = coercion.wrap(a)
    return coercion.collapse(
        Rational(builtins.abs(a.numerator), a.denominator))
