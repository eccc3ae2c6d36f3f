# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

from .. import wrappers
from ..wrappers import All, Any, First, Last, Max, Min, Product, Sum
from ..core.instances import resolve
from ..core.traits import CapabilityError, Monoid, Reducer, Wrapper
import fractions
import math
import numpy as np
import pytest


def test_combine():
    assert Sum(2).combine(Sum(3)) == Sum(5)
    assert Product(2).combine(Product(3)) == Product(6)
    assert All(True).combine(All(False)) == All(False)
    assert All(True).combine(All(True)) == All(True)
    assert Any(False).combine(Any(True)) == Any(True)
    assert Any(False).combine(Any(False)) == Any(False)
    assert Min(2).combine(Min(1)) == Min(1)
    assert Max(2).combine(Max(1)) == Max(2)
    assert First(1).combine(First(2)) == First(1)
    assert Last(1).combine(Last(2)) == Last(2)


def test_units():
    assert Sum.unit() == Sum(0)
    assert Product.unit() == Product(1)
    assert All.unit() == All(True)
    assert Any.unit() == Any(False)

    assert not hasattr(First, 'unit')
    assert not hasattr(Last, 'unit')

    # Min & Max need a bounded carrier
    for cls in [Min, Max, Min[int], Max[int], Min[str]]:
        with pytest.raises(CapabilityError):
            cls.unit()


def test_carrier():
    assert Min[float].unit() == Min(math.inf)
    assert Max[float].unit() == Max(-math.inf)
    assert Max[str].unit() == Max('')
    assert Min[np.int32].unit() == Min(np.iinfo(np.int32).max)
    assert type(Min[np.int32].unit().value) is np.int32

    assert type(Sum[float].unit().value) is float
    assert Sum[fractions.Fraction].unit().value == fractions.Fraction(0)
    assert type(Product[np.int64].unit().value) is np.int64
    with pytest.raises(CapabilityError):
        Sum[str].unit()

    # specializations are cached, and compare with their family
    assert Min[float] is Min[float]
    assert Min[float] is not Min[int]
    assert issubclass(Min[float], Min)
    assert Min[float](1.5) == Min(1.5)
    assert Min[float].carrier is float
    assert Min.carrier is None
    assert Min[float].__name__ == 'Min[float]'
    with pytest.raises(TypeError):
        Min[float][int]


def test_combine_keeps_class():
    x = Sum[float](1.5).combine(Sum[float](2.5))
    assert type(x) is Sum[float]
    assert x == Sum(4.0)


def test_value_semantics():
    # different families never compare equal
    assert Sum(1) != Product(1)
    assert Min(1) != Max(1)
    assert Sum(1) != 1
    assert len({Sum(1), Sum(1), Sum(2), Product(1)}) == 3

    assert Min(1) < Min(2)
    assert sorted([First(3), First(1), First(2)]) \
        == [First(1), First(2), First(3)]
    with pytest.raises(TypeError):
        Sum(1) < Product(2)

    assert repr(Sum(3)) == 'Sum(3)'
    assert repr(Min[float](1.0)) == 'Min(1.0)'
    assert repr(First('a')) == "First('a')"

    # combine does not mutate its inputs
    a, b = Sum(1), Sum(2)
    a.combine(b)
    assert a == Sum(1) and b == Sum(2)


def test_wrapper_capability():
    for cls in [Sum, Product, All, Any, Min, Max, First, Last]:
        assert cls.from_inner(7).into_inner() == 7
        assert cls(7).into_inner() == 7

        w = resolve(cls)
        assert isinstance(w, Wrapper)
        assert isinstance(w, Reducer)
        assert w.from_inner(7) == cls(7)
        assert w.into_inner(cls(7)) == 7
        assert w.lift(7) == cls(7)


def test_algebra():
    assert isinstance(resolve(Sum), wrappers.WrapperMonoid)
    assert isinstance(resolve(Min[float]), Monoid)
    # Min alone still claims a unit, which then fails for lack of a carrier
    assert isinstance(resolve(Min), Monoid)

    assert not isinstance(resolve(First), Monoid)
    assert not isinstance(resolve(Last), Monoid)

    s = resolve(Sum)
    assert s.combine(Sum(1), Sum(2)) == Sum(3)
    assert s.unit() == Sum(0)
    assert s.combine_right(Sum(1), 2) == Sum(3)
    assert s.combine_left(Sum(1), 2) == Sum(3)
    assert repr(s) == 'WrapperMonoid(Sum)'
