# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Rational number value type."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import math
from numbers import Integral, Rational as _Rational
import operator
import sys
from typing import Any, Callable, Optional, Tuple, Union

from .exceptions import UnsupportedType
from .normalize import reduce


__all__ = ['Rational', 'new']


_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


class Rational:
    """Exact rational number.

    A Rational is an immutable pair of integers, numerator and denominator,
    always kept in lowest terms with a positive denominator. Zero is always
    represented as 0/1.

    Args:
        numerator: integral number, string or any value accepted by
            :func:`ratnum.wrap` (default: 0)
        denominator: integral number or any value accepted by
            :func:`ratnum.wrap` (default: 1)

    If both arguments are integral, the ratio `numerator` / `denominator` is
    reduced to lowest terms. A string given as `numerator` is parsed (see
    :meth:`from_str`); `denominator` must not be a string. Otherwise both
    arguments are converted to rational numbers and the result is their
    exact quotient.

    Raises:
        DivideByZero: `denominator` is zero
        UnsupportedType: an argument can not be converted to a rational
            number
        ConversionError: an argument is not finite or can not be converted
            exactly
        ValueError: string argument can not be parsed

    Examples:
        >>> Rational(3, 4)
        Rational(3, 4)
        >>> Rational(8, -12)
        Rational(-2, 3)
        >>> Rational(0.75)
        Rational(3, 4)
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(cls, numerator: Any = 0, denominator: Any = 1) -> Rational:
        if isinstance(numerator, Integral) and \
                isinstance(denominator, Integral):
            return cls._from_reduced(*reduce(int(numerator),
                                             int(denominator)))
        if isinstance(numerator, str):
            numerator = Rational.from_str(numerator)
        if isinstance(denominator, int) and denominator == 1 and \
                type(numerator) is cls:
            return numerator
        num = coercion.wrap(numerator)
        den = coercion.wrap(denominator)
        return cls._from_reduced(
            *reduce(num._numerator * den._denominator,
                    num._denominator * den._numerator))

    @classmethod
    def _from_reduced(cls, numerator: int, denominator: int) -> Rational:
        # no checks, caller guarantees lowest terms and denominator > 0
        rn = object.__new__(cls)
        rn._numerator = numerator
        rn._denominator = denominator
        return rn

    @classmethod
    def from_float(cls, f: Union[float, Integral]) -> Rational:
        """Convert a finite float (or int) to a Rational.

        The float is scaled by powers of ten until it is integral, so that
        e.g. 0.1 is converted to 1/10. See :func:`ratnum.set_max_float_scale`
        for the limit of scaling steps.

        Raises:
            UnsupportedType: `f` is neither float nor int
            ConversionError: `f` is infinite or NaN or needs more scaling
                steps than allowed
        """
        if isinstance(f, float):
            return cls(*coercion.float_ratio(f))
        if isinstance(f, Integral):
            return cls(int(f))
        raise UnsupportedType(f"{f!r} is not a float.")

    @classmethod
    def from_decimal(cls, d: Union[Decimal, Integral]) -> Rational:
        """Convert a finite Decimal (or int) to a Rational.

        Raises:
            UnsupportedType: `d` is neither Decimal nor int
            ConversionError: `d` is infinite or NaN
        """
        if isinstance(d, Decimal):
            return cls(*coercion.decimal_ratio(d))
        if isinstance(d, Integral):
            return cls(int(d))
        raise UnsupportedType(f"{d!r} is not a Decimal.")

    @classmethod
    def from_str(cls, s: str) -> Rational:
        """Convert a string like '-17.5', '3e-4' or '-2/3' to a Rational.

        Raises:
            ValueError: `s` does not represent a rational number
        """
        return cls._from_reduced(*reduce(*coercion.parse(s)))

    @property
    def numerator(self) -> int:
        """Numerator of `self` in lowest terms."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Denominator of `self` in lowest terms (always > 0)."""
        return self._denominator

    @property
    def real(self) -> Rational:
        """Real part of `self`."""
        return self

    @property
    def imag(self) -> int:
        """Imaginary part of `self`."""
        return 0

    def conjugate(self) -> Rational:
        """Return `self`."""
        return self

    def as_integer_ratio(self) -> Tuple[int, int]:
        """Return the pair of numerator and denominator of `self`."""
        return self._numerator, self._denominator

    def as_fraction(self) -> Fraction:
        """Return an instance of `Fraction` equal to `self`."""
        return Fraction(self._numerator, self._denominator)

    def as_int(self) -> int:
        """Return `self` as int.

        Raises:
            ValueError: `self` is not integral
        """
        if self._denominator != 1:
            raise ValueError(f"{self!r} is not integral.")
        return self._numerator

    def __copy__(self) -> Rational:
        return self

    def __deepcopy__(self, memo: Any) -> Rational:
        return self

    def __reduce__(self) -> Tuple[type, Tuple[int, int]]:
        return type(self), (self._numerator, self._denominator)

    def __hash__(self) -> int:
        """hash(self)

        Equal to the hash of an int, Fraction or Decimal of the same value.
        Floats are converted by their decimal value, so a float equal to
        `self` shares its hash only if its binary value is exact, e.g.
        hash(Rational(1, 2)) == hash(0.5), but
        hash(Rational(1, 10)) != hash(0.1).
        """
        # same algorithm as used for int, float and Fraction
        try:
            dinv = pow(self._denominator, -1, _HASH_MODULUS)
        except ValueError:
            hash_ = _HASH_INF
        else:
            hash_ = hash(hash(abs(self._numerator)) * dinv)
        result = hash_ if self._numerator >= 0 else -hash_
        return -2 if result == -1 else result

    def __bool__(self) -> bool:
        """bool(self)"""
        return self._numerator != 0

    def __float__(self) -> float:
        """float(self)"""
        return self._numerator / self._denominator

    def __trunc__(self) -> int:
        """math.trunc(self)"""
        if self._numerator < 0:
            return -(-self._numerator // self._denominator)
        return self._numerator // self._denominator

    __int__ = __trunc__

    def __floor__(self) -> int:
        """math.floor(self)"""
        return self._numerator // self._denominator

    def __ceil__(self) -> int:
        """math.ceil(self)"""
        return -(-self._numerator // self._denominator)

    def __round__(self, ndigits: Optional[int] = None) \
            -> Union[int, Rational]:
        """round(self [, ndigits])

        Ties are rounded to the nearest even value.
        """
        if ndigits is None:
            floor, rem = divmod(self._numerator, self._denominator)
            if rem * 2 < self._denominator:
                return floor
            if rem * 2 > self._denominator:
                return floor + 1
            return floor if floor % 2 == 0 else floor + 1
        shift = 10 ** abs(ndigits)
        if ndigits > 0:
            return Rational(round(self * shift), shift)
        return Rational(round(self / shift) * shift)

    def __str__(self) -> str:
        """str(self)"""
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        """repr(self)"""
        cls_name = type(self).__name__
        if self._denominator == 1:
            return f"{cls_name}({self._numerator})"
        return f"{cls_name}({self._numerator}, {self._denominator})"

    def _richcmp(self, other: Any, op: Callable[[Any, Any], bool]) \
            -> bool:
        if (isinstance(other, float) and not math.isfinite(other)) or \
                (isinstance(other, Decimal) and not other.is_finite()):
            # any finite value compares to inf and nan the same way as zero
            return op(0.0, other)
        try:
            return op(comparison.compare(self, other), 0)
        except UnsupportedType:
            return NotImplemented

    def __eq__(self, other: Any) -> bool:
        """self == other"""
        if isinstance(other, complex):
            return other.imag == 0 and self == other.real
        return self._richcmp(other, operator.eq)

    def __lt__(self, other: Any) -> bool:
        """self < other"""
        return self._richcmp(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        """self <= other"""
        return self._richcmp(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        """self > other"""
        return self._richcmp(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        """self >= other"""
        return self._richcmp(other, operator.ge)

    def __pos__(self) -> Rational:
        """+self"""
        return self

    def __neg__(self) -> Rational:
        """-self"""
        return coercion.wrap(arithmetic.neg(self))

    def __abs__(self) -> Rational:
        """abs(self)"""
        return coercion.wrap(arithmetic.abs(self))

    def __add__(self, other: Any) -> Rational:
        """self + other"""
        return _apply(arithmetic.add, self, other)

    def __radd__(self, other: Any) -> Rational:
        """other + self"""
        return _apply(arithmetic.add, other, self)

    def __sub__(self, other: Any) -> Rational:
        """self - other"""
        return _apply(arithmetic.sub, self, other)

    def __rsub__(self, other: Any) -> Rational:
        """other - self"""
        return _apply(arithmetic.sub, other, self)

    def __mul__(self, other: Any) -> Rational:
        """self * other"""
        return _apply(arithmetic.mult, self, other)

    def __rmul__(self, other: Any) -> Rational:
        """other * self"""
        return _apply(arithmetic.mult, other, self)

    def __truediv__(self, other: Any) -> Rational:
        """self / other"""
        return _apply(arithmetic.div, self, other)

    def __rtruediv__(self, other: Any) -> Rational:
        """other / self"""
        return _apply(arithmetic.div, other, self)


_Rational.register(Rational)


def _apply(op: Callable[[Any, Any], Any], a: Any, b: Any) -> Rational:
    # operators are closed over Rational, integer collapse does not apply
    try:
        res = op(a, b)
    except UnsupportedType:
        return NotImplemented
    return coercion.wrap(res)


def new(numerator: Any = 0, denominator: Any = 1) -> Union[Rational, int]:
    """Return the rational number `numerator` / `denominator`.

    Same as `Rational(numerator, denominator)`, but an integral result is
    returned as int when integer collapse is enabled (the default).

    >>> new(8, 12)
    Rational(2, 3)
    >>> new(3)
    3
    >>> new()
    0
    """
    return coercion.collapse(Rational(numerator, denominator))


# the engine modules import Rational from here
from . import arithmetic, coercion, comparison  # noqa: E402
