# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Reduction of integer ratios to lowest terms."""

from __future__ import annotations

from numbers import Rational as _Rational
from typing import Tuple

from .exceptions import DivideByZero


__all__ = ['gcd', 'sign', 'reduce']


def gcd(m: int, n: int) -> int:
    """Return the greatest common divisor of `m` and `n`.

    Uses Euclid's algorithm: gcd(m, 0) is m, otherwise gcd(m, n) equals
    gcd(n, m mod n).

    >>> gcd(42, 56)
    14
    >>> gcd(624129, 2061517)
    18913
    """
    while n:
        m, n = n, m % n
    return m


def sign(x) -> int:
    """Return -1, 0 or 1 according to the sign of `x`.

    For rational numbers (including int) the sign of the numerator is
    returned. Other numbers are compared exactly against zero, i.e. no
    tolerance is applied to floats, and NaN gives 0.

    >>> sign(-3)
    -1
    """
    if isinstance(x, _Rational):
        x = x.numerator
    if x < 0:
        return -1
    if x > 0:
        return 1
    return 0


def reduce(numerator: int, denominator: int) -> Tuple[int, int]:
    """Return `numerator` / `denominator` in lowest terms.

    The returned denominator is always positive and zero is always returned
    as (0, 1).

    Raises:
        DivideByZero: `denominator` is 0
    """
    if denominator == 0:
        raise DivideByZero(f"Denominator must not be 0: "
                           f"{numerator}/{denominator}")
    if numerator == 0:
        return 0, 1
    num, den = abs(numerator), abs(denominator)
    g = gcd(num, den)
    return sign(numerator) * sign(denominator) * (num // g), den // g
