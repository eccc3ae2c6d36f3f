# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

from .. import capabilities
from ..traits import CapabilityError
import decimal
import fractions
import math
import numpy as np
import pytest


def test_literals():
    assert capabilities.zero(int) == 0
    assert capabilities.one(int) == 1
    assert capabilities.zero(fractions.Fraction) == fractions.Fraction(0)
    assert capabilities.one(decimal.Decimal) == decimal.Decimal(1)
    assert type(capabilities.zero(float)) is float
    assert type(capabilities.one(np.int16)) is np.int16

    for carrier in [str, list, object]:
        with pytest.raises(CapabilityError):
            capabilities.zero(carrier)


def test_register_literals():
    class Matrix2:
        def __init__(self, a, b, c, d):
            self.cells = (a, b, c, d)

    capabilities.register_literals(Matrix2, Matrix2(0, 0, 0, 0),
                                   Matrix2(1, 0, 0, 1))
    assert capabilities.zero(Matrix2).cells == (0, 0, 0, 0)
    assert capabilities.one(Matrix2).cells == (1, 0, 0, 1)


def test_builtin_bounds():
    assert capabilities.bounds(bool) == (False, True)
    assert capabilities.min_value(float) == -math.inf
    assert capabilities.max_value(float) == math.inf
    assert capabilities.min_value(str) == ''
    assert capabilities.min_value(bytes) == b''

    with pytest.raises(CapabilityError):
        capabilities.max_value(str)
    # Python ints are unbounded
    assert capabilities.bounds(int) == (None, None)
    with pytest.raises(CapabilityError):
        capabilities.max_value(int)
    with pytest.raises(CapabilityError):
        capabilities.min_value(int)


def test_numpy_bounds():
    assert capabilities.max_value(np.int8) == 127
    assert capabilities.min_value(np.int8) == -128
    assert type(capabilities.max_value(np.int8)) is np.int8
    assert capabilities.max_value(np.uint16) == 65535
    assert capabilities.min_value(np.uint16) == 0
    assert capabilities.max_value(np.float32) == np.inf
    assert type(capabilities.min_value(np.float64)) is np.float64
    assert capabilities.bounds(np.bool_) == (False, True)


def test_register_bounds():
    class Grade(int):
        pass

    capabilities.register_bounds(Grade, Grade(1), Grade(6))
    assert capabilities.bounds(Grade) == (1, 6)

    class HalfOpen:
        pass

    capabilities.register_bounds(HalfOpen, upper=10)
    assert capabilities.max_value(HalfOpen) == 10
    with pytest.raises(CapabilityError):
        capabilities.min_value(HalfOpen)
