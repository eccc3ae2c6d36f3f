# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''origami - semigroups, monoids & reducers, and folds built on them.

A _semigroup_ is a type with an associative combining operation, a
_monoid_ is a semigroup with a unit, and a _reducer_ is a semigroup with a
canonical way to lift raw elements into it. origami provides these
contracts, instances for built-in types, and wrapper types that pin an
operation onto a value.

# Python example

    #!python
    >>> import origami as ori

    # Wrapper types fix the operation
    >>> ori.fold_monoid([ori.Sum(1), ori.Sum(2), ori.Sum(3)], ori.Sum)
    Sum(6)
    >>> ori.fold_map([True, False, True], ori.All)
    All(False)

    # Semigroups without a unit need a non-empty input
    >>> ori.fold_nonempty([ori.First(1), ori.First(2), ori.First(3)])
    First(1)
    >>> ori.fold_nonempty([]) is None
    True

    # Reducers lift raw elements, then accumulate
    >>> ori.fold_reduce(['Applejack', 'Fluttershy', 'Rarity'], str)
    'ApplejackFluttershyRarity'
    >>> ori.fold_reduce([[1, 2], (3,), range(4, 6)], list)
    [1, 2, 3, 4, 5]

    # Instances lift through None-able values & tuples
    >>> ori.fold_monoid([None, ori.Sum(2), None, ori.Sum(3)],
    ...                 ori.option_of(ori.Sum))
    Sum(5)
    >>> ori.fold_nonempty([(ori.Max(1), 'a'), (ori.Max(3), 'b')])
    (Max(3), 'ab')

    # Units that depend on the carrier type
    >>> ori.fold_monoid([], ori.Min[float])
    Min(inf)
'''

# Module

from . import core, fold, laws, wrappers
from .core import (
    CapabilityError, Monoid, Reducer, Semigroup, Wrapper,
    keys_of, option_of, register, resolve, tuple_of
)
from .fold import (
    fold_map, fold_map_nonempty, fold_monoid, fold_nonempty, fold_reduce,
    fold_reduce_nonempty
)
from .wrappers import All, Any, First, Last, Max, Min, Product, Sum

__all__ = [
    # submodules
    'core',
    'fold',
    'laws',
    'wrappers',

    # contracts
    'CapabilityError',
    'Semigroup',
    'Monoid',
    'Reducer',
    'Wrapper',

    # instances
    'keys_of',
    'option_of',
    'register',
    'resolve',
    'tuple_of',

    # wrappers
    'All', 'Any', 'First', 'Last', 'Max', 'Min', 'Product', 'Sum',

    # folds
    'fold_map',
    'fold_map_nonempty',
    'fold_monoid',
    'fold_nonempty',
    'fold_reduce',
    'fold_reduce_nonempty',
]
