# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Exact rational number arithmetic."""

# module 'rational' must be imported before the engine modules
from .rational import Rational, new
from .arithmetic import abs, add, div, mult, neg, sub
from .coercion import unwrap, value, wrap
from .comparison import compare, equal, ge, gt, le, lt
from .config import (
    FloatConversion, get_dflt_float_conversion, get_integer_collapse,
    get_max_float_scale, set_dflt_float_conversion, set_integer_collapse,
    set_max_float_scale)
from .exceptions import (
    ConversionError, DivideByZero, RationalError, UnsupportedType)
from .normalize import gcd, sign
from .version import version_tuple as __version__  # noqa: F401

# define public namespace
__all__ = [
    'Rational',
    'new',
    'gcd',
    'sign',
    'add',
    'sub',
    'mult',
    'div',
    'neg',
    'abs',
    'compare',
    'equal',
    'lt',
    'le',
    'gt',
    'ge',
    'wrap',
    'unwrap',
    'value',
    'FloatConversion',
    'get_dflt_float_conversion',
    'set_dflt_float_conversion',
    'get_max_float_scale',
    'set_max_float_scale',
    'get_integer_collapse',
    'set_integer_collapse',
    'RationalError',
    'DivideByZero',
    'UnsupportedType',
    'ConversionError',
]
