# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Exceptions raised by rational number arithmetic."""


__all__ = ['RationalError', 'DivideByZero', 'UnsupportedType',
           'ConversionError']


class RationalError(Exception):
    """Base class of all errors raised by this package."""


class DivideByZero(RationalError, ZeroDivisionError):
    """Zero denominator or zero divisor."""


class UnsupportedType(RationalError, TypeError):
    """Value can not be converted to a rational number."""


class ConversionError(RationalError, ValueError):
    """Value of a supported type can not be converted exactly.

    Raised for infinite or NaN values and for floats needing more decimal
    scaling steps than allowed (see :func:`ratnum.set_max_float_scale`).
    """
