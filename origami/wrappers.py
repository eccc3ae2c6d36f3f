# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Wrapper types, which pin one specific combining operation onto a value.

Many types form semigroups in more than one way - numbers under addition or
multiplication, booleans under "and" or "or". A wrapper class fixes the
choice:

    #!python
    >>> from origami import Sum, Product, fold_monoid
    >>> fold_monoid([Sum(2), Sum(3), Sum(4)], Sum)
    Sum(9)
    >>> fold_monoid([Product(2), Product(3), Product(4)], Product)
    Product(24)

Where the unit depends on the carrier type, subscript the wrapper with it:

    #!python
    >>> from origami import Min
    >>> Min[float].unit()
    Min(inf)
'''

import functools
from .core import capabilities
from .core.traits import CapabilityError, Monoid, Reducer, Wrapper


# Instances

class WrapperSemigroup(Reducer, Wrapper):
    '''The instance of a wrapper class, delegating to its methods.

    This is also a `Reducer` from the inner type (`lift` wraps the raw
    value), so `fold_reduce([1, 2, 3], Sum)` is `Sum(6)`.
    '''
    __slots__ = ['cls']

    def __init__(self, cls):
        self.cls = cls

    def combine(self, a, b):
        return a.combine(b)

    def lift(self, value):
        return self.cls(value)

    def from_inner(self, value):
        return self.cls(value)

    def into_inner(self, wrapped):
        return wrapped.value

    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, self.cls.__name__)


class WrapperMonoid(WrapperSemigroup, Monoid):
    __slots__ = []

    def unit(self):
        return self.cls.unit()


# Base classes

@functools.lru_cache(maxsize=None)
def _specialize(cls, carrier):
    name = '%s[%s]' % (cls.__name__, carrier.__name__)
    return type(cls)(name, (cls,), dict(
        __slots__=(),
        __module__=cls.__module__,
        __qualname__=name,
        carrier=carrier,
    ))


@functools.total_ordering
class Wrapped:
    '''Base class for wrapper types - a single `value`, whose semigroup is
    fixed by the class.

    Wrapped values of the same family (e.g. `Min` and `Min[float]`) compare
    by value; different families never compare equal.

    **Subclasses must implement:**

      - `origami.wrappers.Wrapped.combine`
    '''
    __slots__ = ['value']

    carrier = None
    '''The carrier type pinned by `Cls[carrier]`, or `None`.'''

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'carrier' not in cls.__dict__:
            cls.family = cls

    def __class_getitem__(cls, carrier):
        if cls.carrier is not None:
            raise TypeError('%s already has a carrier type' % cls.__name__)
        return _specialize(cls, carrier)

    def __init__(self, value):
        self.value = value

    @classmethod
    def from_inner(cls, value):
        return cls(value)

    def into_inner(self):
        return self.value

    def combine(self, other):
        '''Combine with another wrapped value of the same family, `self`
        first.
        '''
        raise NotImplementedError

    @classmethod
    def algebra(cls):
        '''The instance for this class (see `origami.core.instances.resolve`).
        '''
        return WrapperSemigroup(cls)

    def _same_family(self, other):
        return isinstance(other, Wrapped) and other.family is self.family

    def __eq__(self, other):
        if not self._same_family(other):
            return NotImplemented
        return bool(self.value == other.value)

    def __lt__(self, other):
        if not self._same_family(other):
            return NotImplemented
        return bool(self.value < other.value)

    def __hash__(self):
        return hash((self.family.__name__, self.value))

    def __repr__(self):
        return '%s(%r)' % (self.family.__name__, self.value)


class MonoidWrapped(Wrapped):
    '''Base class for wrapper types that also have a unit.

    **Subclasses must implement:**

      - `origami.wrappers.Wrapped.combine`
      - `origami.wrappers.MonoidWrapped.unit`
    '''
    __slots__ = []

    @classmethod
    def unit(cls):
        '''The unit value of this class.'''
        raise NotImplementedError

    @classmethod
    def algebra(cls):
        return WrapperMonoid(cls)


# Wrappers

class Sum(MonoidWrapped):
    '''Numbers under addition. The unit is the carrier's zero, or `0`.
    '''
    __slots__ = []

    def combine(self, other):
        return type(self)(self.value + other.value)

    @classmethod
    def unit(cls):
        if cls.carrier is None:
            return cls(0)
        return cls(capabilities.zero(cls.carrier))


class Product(MonoidWrapped):
    '''Numbers under multiplication. The unit is the carrier's one, or `1`.
    '''
    __slots__ = []

    def combine(self, other):
        return type(self)(self.value * other.value)

    @classmethod
    def unit(cls):
        if cls.carrier is None:
            return cls(1)
        return cls(capabilities.one(cls.carrier))


class All(MonoidWrapped):
    '''Booleans under "and".'''
    __slots__ = []

    def combine(self, other):
        return type(self)(self.value and other.value)

    @classmethod
    def unit(cls):
        return cls(True)


class Any(MonoidWrapped):
    '''Booleans under "or".'''
    __slots__ = []

    def combine(self, other):
        return type(self)(self.value or other.value)

    @classmethod
    def unit(cls):
        return cls(False)


class Min(MonoidWrapped):
    '''Ordered values, keeping the least (the left on a tie).

    The unit is the greatest value of the carrier, so `Min` alone (without
    a bounded carrier type, e.g. `Min[float]`) only forms a semigroup.
    '''
    __slots__ = []

    def combine(self, other):
        return type(self)(min(self.value, other.value))

    @classmethod
    def unit(cls):
        if cls.carrier is None:
            raise CapabilityError(
                'Min needs a bounded carrier type for its unit, e.g. Min[float]')
        return cls(capabilities.max_value(cls.carrier))


class Max(MonoidWrapped):
    '''Ordered values, keeping the greatest (the left on a tie).

    The unit is the least value of the carrier, e.g. `Max[str].unit()` is
    `Max('')`.
    '''
    __slots__ = []

    def combine(self, other):
        return type(self)(max(self.value, other.value))

    @classmethod
    def unit(cls):
        if cls.carrier is None:
            raise CapabilityError(
                'Max needs a bounded carrier type for its unit, e.g. Max[float]')
        return cls(capabilities.min_value(cls.carrier))


class First(Wrapped):
    '''Keep the leftmost value.

    There is no unit: any candidate would be observable once folded, so this
    is only a semigroup - use `fold_nonempty`, or `option_of(First)`.
    '''
    __slots__ = []

    def combine(self, other):
        return self


class Last(Wrapped):
    '''Keep the rightmost value (only a semigroup, as `First`).'''
    __slots__ = []

    def combine(self, other):
        return other
