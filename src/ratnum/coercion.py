# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Conversion between rational numbers and other numeric types."""

from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_EVEN
import logging
import math
from numbers import Integral, Rational as _Rational, Real
import re
from typing import Any, Tuple, Union

from .config import (
    FloatConversion, get_dflt_float_conversion, get_integer_collapse,
    get_max_float_scale)
from .exceptions import ConversionError, UnsupportedType
from .rational import Rational


__all__ = ['wrap', 'unwrap', 'collapse', 'value', 'float_ratio',
           'decimal_ratio', 'parse']


logger = logging.getLogger(__name__)

# precision only needs to hold the 17 significant digits of a float repr
_FLOAT_CTX = Context(prec=20, rounding=ROUND_HALF_EVEN)

_RATIONAL_FORMAT = re.compile(r"""
    \A\s*
    (?P<sign>[-+])?
    (?:
        (?P<num>\d+)\s*/\s*(?P<den>\d+)
    |
        (?=\d|\.\d)
        (?P<int>\d*)
        (?:\.(?P<frac>\d*))?
        (?:[eE](?P<exp>[-+]?\d+))?
    )
    \s*\Z
""", re.VERBOSE)


def float_ratio(f: float) -> Tuple[int, int]:
    """Return a pair of integers whose ratio equals the decimal value of `f`.

    An integral float is converted exactly to `(int(f), 1)`. Otherwise the
    shortest decimal representation of `f` is multiplied by ten until it is
    integral, the denominator accumulating the applied powers of ten. The
    number of multiplications is limited by the current max float scale.
    When the limit is reached, the current float conversion policy decides
    whether to raise or to round the scaled value.

    The returned ratio is not necessarily in lowest terms.

    Raises:
        ConversionError: `f` is infinite or NaN, or the limit of scaling
            steps is exceeded and the policy is FloatConversion.RAISE
    """
    if not math.isfinite(f):
        raise ConversionError(f"Can't convert {f!r} to Rational.")
    if f.is_integer():
        return int(f), 1
    max_scale = get_max_float_scale()
    scaled = Decimal(float.__repr__(f))
    den = 1
    n_steps = 0
    while scaled != scaled.to_integral_value():
        if n_steps == max_scale:
            if get_dflt_float_conversion() is FloatConversion.RAISE:
                raise ConversionError(
                    f"Can't convert {f!r} to Rational exactly using at most "
                    f"{max_scale} decimal digits.")
            scaled = scaled.to_integral_value(rounding=ROUND_HALF_EVEN)
            logger.debug("Saturated conversion of %r at %d decimal digits.",
                         f, max_scale)
            break
        scaled = scaled.scaleb(1, context=_FLOAT_CTX)
        den *= 10
        n_steps += 1
    return int(scaled), den


def decimal_ratio(d: Decimal) -> Tuple[int, int]:
    """Return the pair of integers whose ratio equals `d`.

    Raises:
        ConversionError: `d` is infinite or NaN
    """
    if not d.is_finite():
        raise ConversionError(f"Can't convert {d!r} to Rational.")
    return d.as_integer_ratio()


def parse(s: str) -> Tuple[int, int]:
    """Return the pair of integers represented by `s`.

    Accepted are decimal literals with optional fraction and exponent, like
    '-17.5', '.25' or '3e-4', and ratios of integers like '-2/3', all
    optionally surrounded by whitespace. The returned ratio is not
    necessarily in lowest terms.

    Raises:
        ValueError: `s` does not represent a rational number
    """
    match = _RATIONAL_FORMAT.match(s)
    if match is None:
        raise ValueError(f"Invalid literal for Rational: {s!r}")
    if match['num'] is not None:
        num, den = int(match['num']), int(match['den'])
    else:
        frac = match['frac'] or ''
        num = int(match['int'] + frac)
        exp = int(match['exp'] or 0) - len(frac)
        if exp >= 0:
            num, den = num * 10 ** exp, 1
        else:
            den = 10 ** -exp
    if match['sign'] == '-':
        num = -num
    return num, den


def wrap(value: Any) -> Rational:
    """Convert `value` to a Rational.

    Args:
        value: Rational, integral number, float (or other real number
            convertible to float), Decimal or other rational number (e.g.
            Fraction)

    Instances of Rational are returned unchanged.

    Raises:
        UnsupportedType: `value` has an unsupported type
        ConversionError: `value` is infinite or NaN or (in case of a float)
            can not be converted exactly

    >>> wrap(5)
    Rational(5)
    >>> wrap(0.125)
    Rational(1, 8)
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, Integral):
        return Rational._from_reduced(int(value), 1)
    if isinstance(value, float):
        return Rational(*float_ratio(value))
    if isinstance(value, _Rational):
        return Rational(value.numerator, value.denominator)
    if isinstance(value, Decimal):
        return Rational(*decimal_ratio(value))
    if isinstance(value, Real):
        return Rational(*float_ratio(float(value)))
    raise UnsupportedType(
        f"Can't convert {value!r} of type '{type(value).__name__}' to "
        "Rational.")


def unwrap(value: Any) -> Any:
    """Return `value` as int if it is a Rational with denominator 1.

    Any other value is returned unchanged.

    >>> unwrap(Rational(6, 3))
    2
    >>> unwrap(Rational(3, 4))
    Rational(3, 4)
    """
    if isinstance(value, Rational) and value.denominator == 1:
        return value.numerator
    return value


def collapse(rn: Rational) -> Union[Rational, int]:
    """Return `unwrap(rn)` if integer collapse is enabled, else `rn`."""
    if get_integer_collapse():
        return unwrap(rn)
    return rn


def value(x: Any) -> Union[int, float]:
    """Return the numeric value of `x` as int or float.

    Integral values are returned as int, all others as the float nearest to
    `x`. This is the only operation losing exactness.

    >>> value(Rational(3, 4))
    0.75
    >>> value(Rational(-12, 4))
    -3
    """
    rn = wrap(x)
    if rn.denominator == 1:
        return rn.numerator
    return rn.numerator / rn.denominator
