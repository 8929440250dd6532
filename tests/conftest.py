# -*- coding: utf-8 -*-
# ----------------------------------------------------------------------------
# Author:      Michael Amrhein (michael@adrhinum.de)
#
# Copyright:   (c) 2021 ff. Michael Amrhein
# License:     This program is part of a larger application. For license
#              details please read the file LICENSE.TXT provided together
#              with the application.
# ----------------------------------------------------------------------------
# $Source$
# $Revision$


"""Shared pytest fixtures."""

import pytest

from ratnum import (
    FloatConversion, get_dflt_float_conversion, get_integer_collapse,
    get_max_float_scale, set_dflt_float_conversion, set_integer_collapse,
    set_max_float_scale)


@pytest.fixture(scope="session",
                params=[policy.name for policy in FloatConversion],
                ids=[policy.name for policy in FloatConversion])
def policy(request) -> FloatConversion:
    return FloatConversion[request.param]


def dflt_float_conversion(policy):
    @pytest.fixture()
    def closure():
        prev_policy = get_dflt_float_conversion()
        set_dflt_float_conversion(policy)
        yield
        set_dflt_float_conversion(prev_policy)
    return closure


with_raise = dflt_float_conversion(FloatConversion.RAISE)
with_saturate = dflt_float_conversion(FloatConversion.SATURATE)


@pytest.fixture()
def max_float_scale():
    """Yield a setter for the max float scale, restoring it afterwards."""
    prev_scale = get_max_float_scale()
    yield set_max_float_scale
    set_max_float_scale(prev_scale)


@pytest.fixture()
def no_collapse():
    prev_collapse = get_integer_collapse()
    set_integer_collapse(False)
    yield
    set_integer_collapse(prev_collapse)
