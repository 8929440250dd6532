# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Copyright:   (c) 2021 ff. Michael Amrhein (michael@adrhinum.de)
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$

"""Comparison of rational numbers.

The ordering is solely defined by :func:`compare`; all predicates are
derived from it.
"""

from __future__ import annotations

from typing import Any

from . import arithmetic
from .normalize import sign


__all__ = ['compare', 'equal', 'lt', 'le', 'gt', 'ge']


def compare(a: Any, b: Any) -> int:
    """Return -1, 0 or 1 if a is less than, equal to or greater than b.

    >>> compare(0.25, 0.5)
    -1
    """
    return sign(arithmetic.sub(a, b))


def equal(a: Any, b: Any) -> bool:
    """Return a == b."""
    return compare(a, b) == 0


def lt(a: Any, b: Any) -> bool:
    """Return a < b."""
    return compare(a, b) == -1


def le(a: Any, b: Any) -> bool:
    """Return a <= b."""
    return compare(a, b) != 1


def gt(a: Any, b: Any) -> bool:
    """Return a > b."""
    return not le(a, b)


def ge(a: Any, b: Any) -> bool:
    """Return a >= b."""
    return not lt(a, b)
