# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2018 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Context dependent defaults for rational number arithmetic."""

from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique


__all__ = [
    'FloatConversion',
    'DFLT_MAX_FLOAT_SCALE',
    'get_dflt_float_conversion',
    'set_dflt_float_conversion',
    'get_max_float_scale',
    'set_max_float_scale',
    'get_integer_collapse',
    'set_integer_collapse',
]


# the shortest repr of a finite binary64 value never has more than 340
# digits after the decimal point (5e-324 .. 2.2250738585072014e-308)
DFLT_MAX_FLOAT_SCALE = 340


@unique
class FloatConversion(Enum):
    """Enumeration of policies applied when converting a float exceeds the
    maximum number of decimal scaling steps."""

    def __new__(cls, value: int, doc: str) -> FloatConversion:
        """Return new member of the Enum."""
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    RAISE = (1, 'Raise ConversionError.')
    SATURATE = (2, 'Round the scaled value to the nearest integer, ties '
                   'going to the nearest even integer, and stop scaling.')


_dflt_float_conversion: ContextVar[FloatConversion] = \
    ContextVar("dflt_float_conversion", default=FloatConversion.RAISE)
_max_float_scale: ContextVar[int] = \
    ContextVar("max_float_scale", default=DFLT_MAX_FLOAT_SCALE)
_integer_collapse: ContextVar[bool] = \
    ContextVar("integer_collapse", default=True)


def get_dflt_float_conversion() -> FloatConversion:
    """Return default float conversion policy."""
    return _dflt_float_conversion.get()


def set_dflt_float_conversion(policy: FloatConversion) -> Token:
    """Set default float conversion policy.

    Args:
        policy (FloatConversion): policy to be set as default

    Raises:
        TypeError: given 'policy' is not a valid float conversion policy
    """
    if not isinstance(policy, FloatConversion):
        raise TypeError(f"Illegal float conversion policy: {policy!r}")
    return _dflt_float_conversion.set(policy)


def get_max_float_scale() -> int:
    """Return maximum number of decimal scaling steps for floats."""
    return _max_float_scale.get()


def set_max_float_scale(max_scale: int) -> Token:
    """Set maximum number of decimal scaling steps for floats.

    Args:
        max_scale (int): number of times a float may be multiplied by ten
            while searching for an integral value

    Raises:
        TypeError: given 'max_scale' is not an int
        ValueError: given 'max_scale' is negative
    """
    if not isinstance(max_scale, int) or isinstance(max_scale, bool):
        raise TypeError(f"Illegal max float scale: {max_scale!r}")
    if max_scale < 0:
        raise ValueError(f"Max float scale must be >= 0: {max_scale}")
    return _max_float_scale.set(max_scale)


def get_integer_collapse() -> bool:
    """Return whether integral results are returned as bare int."""
    return _integer_collapse.get()


def set_integer_collapse(collapse: bool) -> Token:
    """Set whether integral results are returned as bare int.

    Args:
        collapse (bool): if True, results of the module level functions
            having denominator 1 are returned as `int`

    Raises:
        TypeError: given 'collapse' is not a bool
    """
    if not isinstance(collapse, bool):
        raise TypeError(f"Illegal integer collapse flag: {collapse!r}")
    return _integer_collapse.set(collapse)
