# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''The combining-operation contracts: `Semigroup`, `Monoid`, `Reducer` and
`Wrapper`.

Each contract is implemented by an _instance_ - a stateless object holding
the operations for some carrier type. Keeping the operations off the
carrier itself means one carrier can take part in more than one algebra
(`int` is a semigroup under both addition and multiplication), and that
built-in types such as `str` and `list` can have instances at all.
'''

import functools


class CapabilityError(TypeError):
    '''A carrier type was asked for a capability it does not have, e.g. a
    `Monoid` unit from a type that only forms a `Semigroup`, or the
    maximum value of an unbounded type.
    '''


class Semigroup:
    '''A [semigroup](https://en.wikipedia.org/wiki/Semigroup) is a type with
    a combining operation.

    The combining operation has to be _associative_, i.e. for all values
    `a`, `b` and `c`:

        combine(combine(a, b), c) == combine(a, combine(b, c))

    **Subclasses must implement:**

      - `origami.core.traits.Semigroup.combine`
    '''
    __slots__ = []

    def combine(self, a, b):
        '''Combine two values of the carrier type, `a` then `b`.

        Both arguments are consumed - the caller should not use them
        after the call.

        `a` -- `object` -- left value

        `b` -- `object` -- right value

        `return` -- `object` -- the combined value
        '''
        raise NotImplementedError

    def __repr__(self):
        return '%s()' % type(self).__name__


class Monoid(Semigroup):
    '''A [monoid](https://en.wikipedia.org/wiki/Monoid) is a semigroup with an
    empty value, or _unit_. Combining any value with the unit leaves the
    value unchanged:

        combine(unit(), x) == x
        combine(x, unit()) == x
    '''
    __slots__ = []

    def unit(self):
        '''Return the unit value (the same value on every call).
        '''
        raise NotImplementedError


class Reducer(Semigroup):
    '''A `Reducer` is a `Semigroup` which has a canonical mapping from some
    element type.

    If you wanted to concatenate a list of strings, you could map each
    element into the text monoid and fold, but that allocates a new
    accumulator for every element. A `Reducer` instead lifts the first
    element into an accumulator, then pushes each following element onto it
    with `combine_right` - which an instance may override to grow the
    accumulator in place.

    Overrides of `combine_left`, `combine_right` and `reduce` must behave
    the same as the defaults, differing only in cost:

        combine_right(acc, x) == combine(acc, lift(x))
        combine_left(acc, x) == combine(lift(x), acc)
        reduce(x, [y, z]) == combine(combine(lift(x), lift(y)), lift(z))
    '''
    __slots__ = []

    def lift(self, value):
        '''Inject a raw element into the carrier type (the reducer's unit).

        The result must be owned by the caller - an instance must not return
        storage shared with `value` if it may later grow that storage in
        place.
        '''
        raise NotImplementedError

    def combine_left(self, acc, value):
        '''Push a raw element onto the front of an accumulator.
        '''
        return self.combine(self.lift(value), acc)

    def combine_right(self, acc, value):
        '''Push a raw element onto the back of an accumulator.
        '''
        return self.combine(acc, self.lift(value))

    def reduce(self, first, rest):
        '''Lift `first`, then push each of `rest` onto it in order.

        `first` -- `object` -- the first raw element

        `rest` -- `iterable` -- the following raw elements

        `return` -- `object` -- the accumulated value

        An override must give the same result as this default, e.g. to
        collect the elements into a faster intermediate accumulator.
        '''
        return functools.reduce(self.combine_right, rest, self.lift(first))


class Wrapper:
    '''A wrapper type ("newtype") is isomorphic to a single inner value:

        into_inner(from_inner(x)) == x
        from_inner(into_inner(w)) == w
    '''
    __slots__ = []

    def from_inner(self, value):
        '''Wrap a value.'''
        raise NotImplementedError

    def into_inner(self, wrapped):
        '''Unwrap a value.'''
        raise NotImplementedError


def require(instance, contract):
    '''Check that `instance` implements `contract`.

    `instance` -- `Semigroup` -- resolved instance

    `contract` -- `type` -- one of the contract classes in this module

    `return` -- `Semigroup` -- `instance`, unchanged

    `raise` -- `CapabilityError` -- if the instance lacks the contract
    '''
    if not isinstance(instance, contract):
        raise CapabilityError('%r is not a %s' % (instance, contract.__name__))
    return instance
