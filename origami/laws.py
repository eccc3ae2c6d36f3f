# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Check the laws of the combining-operation contracts over sample values.

Instances cannot prove their laws, so these generate counterexamples from
samples instead - e.g. to fuzz an instance in a test:

    #!python
    >>> from origami import Sum
    >>> list(associativity_violations(Sum, [Sum(1), Sum(-2), Sum(3)]))
    []

Every combine is given fresh copies of its arguments, since a combine may
consume (grow in place) its inputs.
'''

import copy
import functools
import logging
import itertools as it
from .core.instances import resolve
from .core.traits import Monoid, Reducer, Wrapper, require


def associativity_violations(spec, values):
    '''Generate `(a, b, c)` triples of `values` for which

        combine(combine(a, b), c) != combine(a, combine(b, c))
    '''
    s = resolve(spec)
    fresh = copy.deepcopy
    for a, b, c in it.product(values, repeat=3):
        left = s.combine(s.combine(fresh(a), fresh(b)), fresh(c))
        right = s.combine(fresh(a), s.combine(fresh(b), fresh(c)))
        if left != right:
            yield (a, b, c)


def identity_violations(spec, values):
    '''Generate `values` for which the unit is not a left & right identity.
    '''
    m = require(resolve(spec), Monoid)
    for x in values:
        if m.combine(m.unit(), copy.deepcopy(x)) != x \
           or m.combine(copy.deepcopy(x), m.unit()) != x:
            yield x


def reducer_violations(spec, accumulators, elements):
    '''Generate `(acc, element, method)` for which a reducer's
    `combine_left` or `combine_right` differs from its default definition.
    '''
    r = require(resolve(spec), Reducer)
    fresh = copy.deepcopy
    for acc, x in it.product(accumulators, elements):
        right = r.combine(fresh(acc), r.lift(fresh(x)))
        if r.combine_right(fresh(acc), fresh(x)) != right:
            yield (acc, x, 'combine_right')
        left = r.combine(r.lift(fresh(x)), fresh(acc))
        if r.combine_left(fresh(acc), fresh(x)) != left:
            yield (acc, x, 'combine_left')


def reduce_violations(spec, elements, length=3):
    '''Generate runs of `elements` (up to `length` long) for which a
    reducer's `reduce` differs from combining each lifted element in turn.
    '''
    r = require(resolve(spec), Reducer)
    fresh = copy.deepcopy
    for n in range(1, length + 1):
        for run in it.product(elements, repeat=n):
            expected = functools.reduce(
                r.combine, (r.lift(fresh(x)) for x in run[1:]),
                r.lift(fresh(run[0])))
            if r.reduce(fresh(run[0]), iter(fresh(run[1:]))) != expected:
                yield run


def roundtrip_violations(spec, raws):
    '''Generate raw values which do not survive wrapping & unwrapping.
    '''
    w = require(resolve(spec), Wrapper)
    for x in raws:
        wrapped = w.from_inner(x)
        if w.into_inner(wrapped) != x \
           or w.from_inner(w.into_inner(wrapped)) != wrapped:
            yield x


def check(spec, values=(), elements=(), raws=()):
    '''Check every law that applies to an instance, logging each violation.

    `spec` -- spec of any instance

    `values` -- `list` -- samples of the carrier type

    `elements` -- `list` -- raw elements (if the instance is a `Reducer`)

    `raws` -- `list` -- inner values (if the instance is a `Wrapper`)

    `return` -- `bool` -- `True` if no violation was found
    '''
    instance = resolve(spec)
    violations = [('associativity', v)
                  for v in associativity_violations(instance, values)]
    if isinstance(instance, Monoid):
        violations += [('identity', v)
                       for v in identity_violations(instance, values)]
    if isinstance(instance, Reducer):
        violations += [('reducer', v) for v in reducer_violations(
            instance, values, elements)]
        violations += [('reduce', v)
                       for v in reduce_violations(instance, elements)]
    if isinstance(instance, Wrapper):
        violations += [('roundtrip', v)
                       for v in roundtrip_violations(instance, raws)]
    for law, v in violations:
        logging.warning('%r violates %s law: %r', instance, law, v)
    return not violations
