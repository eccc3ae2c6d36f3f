# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Fold sequences using the combining-operation contracts.

Every fold makes a single pass over its input, strictly left to right, and
always runs to completion. The combining operation is named by a _spec_ -
an instance, a wrapper class such as `origami.Sum`, or a registered type
such as `str` (see `origami.core.instances.resolve`). Where the spec is
optional, it is inferred from the first element.

The strict (`_nonempty`) variants need only a `Semigroup` (or `Reducer`),
and return `default` (i.e. `None`) for an empty input, instead of a unit.
'''

import functools
from .core.common import split_first
from .core.instances import resolve, resolve_value
from .core.traits import Monoid, Reducer, require


def fold_monoid(iterable, monoid):
    '''Fold the iterable using the combining operation, starting at the unit.

    `iterable` -- `iterable` -- values of the monoid's carrier type

    `monoid` -- spec of a `Monoid`

    `return` -- `object` -- the combined value, or `unit()` for an empty
                iterable

    For example:

        >>> from origami import Sum
        >>> fold_monoid([Sum(1), Sum(2), Sum(3)], Sum)
        Sum(6)
    '''
    m = require(resolve(monoid), Monoid)
    return functools.reduce(m.combine, iterable, m.unit())


def fold_nonempty(iterable, semigroup=None, default=None):
    '''Fold a non-empty iterable using the combining operation, starting from
    the first element.

    `semigroup` -- spec of a `Semigroup`, or `None` to infer it from the type
                   of the first element

    `default` -- `object` -- returned for an empty iterable (pass a unique
                 sentinel if the combined value itself could be `None`)

    For example:

        >>> from origami import Product
        >>> fold_nonempty([Product(1), Product(2), Product(3)])
        Product(6)
        >>> fold_nonempty([]) is None
        True
    '''
    s = None if semigroup is None else resolve(semigroup)
    first, rest = split_first(iterable)
    if rest is None:
        return default
    if s is None:
        s = resolve_value(first)
    return functools.reduce(s.combine, rest, first)


def fold_map(iterable, f, monoid=None):
    '''Map each element into a monoid, then combine the results (without
    building an intermediate collection).

    `f` -- `callable` -- mapping from element to monoid value

    `monoid` -- spec of a `Monoid`, or `None` if `f` is itself a spec (e.g. a
                wrapper class)

    For example:

        >>> from origami import All
        >>> fold_map([True, False, True], All)
        All(False)
    '''
    return fold_monoid(map(f, iterable), f if monoid is None else monoid)


def fold_map_nonempty(iterable, f, semigroup=None, default=None):
    '''Map each element into a semigroup, then combine the results.

    `semigroup` -- spec of a `Semigroup`, or `None` to use `f` if it is a
                   class, or otherwise infer it from the first mapped value

    `return` -- `object` -- the combined value, or `default` for an empty
                iterable
    '''
    if semigroup is None and isinstance(f, type):
        semigroup = f
    return fold_nonempty(map(f, iterable), semigroup, default=default)


def fold_reduce(iterable, reducer):
    '''Fold raw elements into a reducer - lifting the first element, then
    pushing each of the rest onto the accumulator with `combine_right` (see
    `origami.core.traits.Reducer.reduce`). For example:

        >>> fold_reduce(['Applejack', 'Fluttershy', 'Rarity'], str)
        'ApplejackFluttershyRarity'

    This differs from `fold_map(iterable, reducer.lift, reducer)` only in
    cost: reducers such as `list` extend a single accumulator in place, and
    text is joined once, rather than allocating and combining a new value
    for every element.

    `reducer` -- spec of an instance that is both a `Reducer` and a `Monoid`

    `return` -- `object` -- the accumulated value, or `unit()` for an empty
                iterable
    '''
    r = require(require(resolve(reducer), Reducer), Monoid)
    first, rest = split_first(iterable)
    if rest is None:
        return r.unit()
    return r.reduce(first, rest)


def fold_reduce_nonempty(iterable, reducer, default=None):
    '''As `fold_reduce`, but for reducers with no unit.

    `reducer` -- spec of a `Reducer`

    `return` -- `object` -- the accumulated value, or `default` for an empty
                iterable
    '''
    r = require(resolve(reducer), Reducer)
    first, rest = split_first(iterable)
    if rest is None:
        return default
    return r.reduce(first, rest)
