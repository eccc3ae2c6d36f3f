# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Instances of the combining-operation contracts for built-in Python types,
instance transformers (lifting an instance through `None`-able values,
tuples & keyed dictionaries), and the registry used to resolve an instance
from a type or a value.
'''

import itertools as it
import logging
from .traits import CapabilityError, Monoid, Reducer, Semigroup, require


# Sequences

class Text(Monoid, Reducer):
    '''Strings, under concatenation.

    As a reducer, `lift` converts the element to a plain `str`, and
    `combine_right` appends it. Python strings are immutable, so a single
    `combine_right` must copy the accumulator; a whole fold (`reduce`)
    instead collects the parts and joins them once, in linear time.
    '''
    __slots__ = []

    def combine(self, a, b):
        return a + b

    def unit(self):
        return ''

    def lift(self, value):
        return str(value)

    def reduce(self, first, rest):
        return ''.join(map(self.lift, it.chain([first], rest)))


class Bytes(Monoid):
    '''Immutable byte strings, under concatenation.
    '''
    __slots__ = []

    def combine(self, a, b):
        return a + b

    def unit(self):
        return b''


class Buffer(Monoid, Reducer):
    '''Growable byte buffers, under concatenation.

    As a reducer over any bytes-like element, the accumulator is a fresh
    `bytearray` (owned by the fold), extended in place.
    '''
    __slots__ = []

    def combine(self, a, b):
        return a + b

    def unit(self):
        return bytearray()

    def lift(self, value):
        return bytearray(value)

    def combine_right(self, acc, value):
        acc.extend(value)
        return acc


class List(Monoid, Reducer):
    '''Lists, under concatenation (order preserving).

    As a reducer over iterable slices, `lift` copies the slice into a new
    list, which `combine_right` then extends in place. This makes folding
    `n` slices linear, rather than quadratic for repeated `a + b`.
    '''
    __slots__ = []

    def combine(self, a, b):
        return a + b

    def unit(self):
        return []

    def lift(self, value):
        return list(value)

    def combine_right(self, acc, value):
        acc.extend(value)
        return acc


class Union(Monoid, Reducer):
    '''Sets (`set` or `frozenset`), under union.

    As a reducer over single elements, `lift(x) == {x}`; a mutable `set`
    accumulator is added to in place.
    '''
    __slots__ = ['carrier']

    def __init__(self, carrier):
        self.carrier = carrier

    def combine(self, a, b):
        return a | b

    def unit(self):
        return self.carrier()

    def lift(self, value):
        return self.carrier([value])

    def combine_right(self, acc, value):
        if isinstance(acc, set):
            acc.add(value)
            return acc
        return acc | self.lift(value)

    def __repr__(self):
        return 'Union(%s)' % self.carrier.__name__


# Instance transformers

class Option(Monoid):
    '''Lift an instance over values that may be `None`, ignoring the `None`s:

        combine(None, y) == y
        combine(x, None) == x
        combine(x, y) == inner.combine(x, y)

    The unit is `None`, so this is a `Monoid` even when `inner` is only a
    `Semigroup`.
    '''
    __slots__ = ['inner']

    def __init__(self, inner):
        self.inner = inner

    def combine(self, a, b):
        if a is None:
            return b
        if b is None:
            return a
        return self.inner.combine(a, b)

    def unit(self):
        return None

    def __repr__(self):
        return 'Option(%r)' % self.inner


class OptionReducer(Option, Reducer):
    '''`Option` over an inner `Reducer` - lifts on `None`, otherwise delegates
    to the inner reducer (so its in-place overrides are kept).
    '''
    __slots__ = []

    def lift(self, value):
        return self.inner.lift(value)

    def combine_left(self, acc, value):
        if acc is None:
            return self.inner.lift(value)
        return self.inner.combine_left(acc, value)

    def combine_right(self, acc, value):
        if acc is None:
            return self.inner.lift(value)
        return self.inner.combine_right(acc, value)

    def reduce(self, first, rest):
        return self.inner.reduce(first, rest)


class Tuple(Semigroup):
    '''Combine fixed-arity tuples component-wise.
    '''
    __slots__ = ['components']

    def __init__(self, components):
        self.components = tuple(components)

    def combine(self, a, b):
        n = len(self.components)
        if len(a) != n or len(b) != n:
            raise ValueError('expected tuples of length %d, actually %d, %d'
                             % (n, len(a), len(b)))
        return tuple(c.combine(x, y)
                     for c, x, y in zip(self.components, a, b))

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__,
                           ', '.join(map(repr, self.components)))


class TupleMonoid(Tuple, Monoid):
    '''`Tuple` where every component is a `Monoid` - the unit is the tuple of
    component units (so the empty tuple `()` is the unit type).
    '''
    __slots__ = []

    def unit(self):
        return tuple(c.unit() for c in self.components)


class Keys(Semigroup):
    '''Combine dictionaries with a fixed set of keys, key-wise.
    '''
    __slots__ = ['fields']

    def __init__(self, fields):
        self.fields = dict(fields)

    def combine(self, a, b):
        return {k: m.combine(a[k], b[k]) for k, m in self.fields.items()}

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, ', '.join(
            '%s=%r' % (k, m) for k, m in sorted(self.fields.items())))


class KeysMonoid(Keys, Monoid):
    __slots__ = []

    def unit(self):
        return {k: m.unit() for k, m in self.fields.items()}


def option_of(spec):
    '''Lift an instance over `None`-able values.

    `spec` -- instance, wrapper class or registered type (see `resolve`)

    `return` -- `Option` or `OptionReducer` -- the latter if the inner
                instance is a `Reducer`
    '''
    inner = resolve(spec)
    if isinstance(inner, Reducer):
        return OptionReducer(inner)
    return Option(inner)


def tuple_of(*specs):
    '''Lift instances component-wise over tuples of the same arity, e.g.
    `tuple_of(Sum, str)` combines `(Sum(1), 'a')` and `(Sum(2), 'b')` into
    `(Sum(3), 'ab')`.

    `return` -- `Tuple` or `TupleMonoid` -- the latter if every component
                is a `Monoid`
    '''
    components = [resolve(s) for s in specs]
    if all(isinstance(c, Monoid) for c in components):
        return TupleMonoid(components)
    return Tuple(components)


def keys_of(**specs):
    '''Return an instance combining `{k: value}` dictionaries key-wise, e.g.
    `keys_of(count=Sum, words=list)`.

    `return` -- `Keys` or `KeysMonoid` -- the latter if every value is a
                `Monoid`
    '''
    fields = {k: resolve(s) for k, s in specs.items()}
    if all(isinstance(m, Monoid) for m in fields.values()):
        return KeysMonoid(fields)
    return Keys(fields)


# Resolution

_REGISTRY = {}


def register(carrier, instance):
    '''Make `instance` the ambient instance for `carrier` (and subclasses of
    `carrier`, unless they are registered themselves).
    '''
    logging.debug('Registering %r for %s', instance, carrier)
    _REGISTRY[carrier] = require(instance, Semigroup)


def resolve(spec):
    '''Get an instance from a "spec", which is one of:

      - an instance (returned unchanged)
      - a class with an `algebra()` classmethod (e.g. `origami.Sum`)
      - a type registered with `register`, or a subclass of one

    `raise` -- `CapabilityError` -- if no instance can be found
    '''
    if isinstance(spec, Semigroup):
        return spec
    if isinstance(spec, type):
        algebra = getattr(spec, 'algebra', None)
        if algebra is not None:
            return algebra()
        for t in spec.__mro__:
            if t in _REGISTRY:
                return _REGISTRY[t]
    raise CapabilityError('no combining operation known for %r' % (spec,))


def resolve_value(value):
    '''Infer the ambient instance for a value from its type.

    Tuples are resolved component-wise. `None` cannot be resolved, as it
    could be the unit of any `Option`.
    '''
    if value is None:
        raise CapabilityError(
            'cannot infer a combining operation from None'
            ' (pass one explicitly, e.g. option_of(...))')
    if type(value) is tuple:
        return tuple_of(*(resolve_value(x) for x in value))
    return resolve(type(value))


register(str, Text())
register(bytes, Bytes())
register(bytearray, Buffer())
register(list, List())
register(set, Union(set))
register(frozenset, Union(frozenset))
