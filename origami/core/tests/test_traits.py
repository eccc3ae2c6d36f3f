# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

from .. import traits
import pytest


class Concat(traits.Reducer):
    '''Tuples under concatenation, lifting single elements - only uses the
    default combine_left & combine_right.
    '''
    def combine(self, a, b):
        return a + b

    def lift(self, value):
        return (value,)


def test_reducer_defaults():
    r = Concat()
    assert r.combine_right((1, 2), 3) == (1, 2, 3)
    assert r.combine_left((1, 2), 3) == (3, 1, 2)
    assert r.combine_right(r.combine_left((), 'b'), 'c') == ('b', 'c')
    assert r.reduce('x', iter('yz')) == ('x', 'y', 'z')
    assert r.reduce('x', []) == ('x',)


def test_abstract():
    with pytest.raises(NotImplementedError):
        traits.Semigroup().combine(1, 2)
    with pytest.raises(NotImplementedError):
        traits.Monoid().unit()
    with pytest.raises(NotImplementedError):
        traits.Reducer().lift(1)
    with pytest.raises(NotImplementedError):
        traits.Wrapper().from_inner(1)


def test_require():
    r = Concat()
    assert traits.require(r, traits.Semigroup) is r
    assert traits.require(r, traits.Reducer) is r

    with pytest.raises(traits.CapabilityError):
        traits.require(r, traits.Monoid)

    # capability mismatches are type errors
    with pytest.raises(TypeError):
        traits.require(r, traits.Wrapper)

    assert repr(r) == 'Concat()'
