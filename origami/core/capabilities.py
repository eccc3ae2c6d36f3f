# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Capabilities that a carrier type must have before some wrappers can give
it a unit: numeric literals (zero & one) for `Sum` & `Product`, and bounds
(minimum & maximum representable values) for `Min` & `Max`.

Python's own `int` is unbounded, so `Min[int]` has no unit. The fixed-width
`numpy` scalar types are bounded, by `numpy.iinfo` / `numpy.finfo`:

    >>> int(max_value(numpy.int8))
    127
    >>> min_value(float)
    -inf

Other types can be given capabilities with `register_literals` and
`register_bounds`.
'''

import logging
import numbers
import numpy
from .traits import CapabilityError


_LITERALS = {}
_BOUNDS = {}


def _lookup(table, carrier):
    for t in carrier.__mro__:
        if t in table:
            return table[t]
    return None


def register_literals(carrier, zero, one):
    '''Set the additive zero and multiplicative one of a carrier type.
    '''
    logging.debug('Registering literals for %s: %r, %r', carrier, zero, one)
    _LITERALS[carrier] = (zero, one)


def register_bounds(carrier, lower=None, upper=None):
    '''Set the minimum and maximum representable values of a carrier type.

    `lower` -- `object` or `None` -- least value, or `None` if unbounded below

    `upper` -- `object` or `None` -- greatest value, or `None` if unbounded
               above
    '''
    logging.debug('Registering bounds for %s: [%r, %r]',
                  carrier, lower, upper)
    _BOUNDS[carrier] = (lower, upper)


def _literal(carrier, index, n):
    literals = _lookup(_LITERALS, carrier)
    if literals is not None:
        return literals[index]
    if issubclass(carrier, numbers.Number):
        return carrier(n)
    raise CapabilityError('%s has no numeric literal %d' % (carrier, n))


def zero(carrier):
    '''The additive zero of `carrier`.

    `raise` -- `CapabilityError` -- if `carrier` is neither a number type nor
               registered with `register_literals`
    '''
    return _literal(carrier, 0, 0)


def one(carrier):
    '''The multiplicative one of `carrier`.

    `raise` -- `CapabilityError` -- if `carrier` is neither a number type nor
               registered with `register_literals`
    '''
    return _literal(carrier, 1, 1)


def _numpy_bounds(carrier):
    if issubclass(carrier, numpy.bool_):
        return (numpy.bool_(False), numpy.bool_(True))
    if issubclass(carrier, numpy.integer):
        info = numpy.iinfo(carrier)
        return (carrier(info.min), carrier(info.max))
    if issubclass(carrier, numpy.floating):
        return (carrier('-inf'), carrier('inf'))
    return None


def bounds(carrier):
    '''Get the `(lower, upper)` bounds of `carrier`, either of which may be
    `None` (unbounded in that direction).
    '''
    # numpy scalars before the MRO walk: numpy.float64 is also a float
    b = _BOUNDS.get(carrier)
    if b is None:
        b = _numpy_bounds(carrier)
    if b is None:
        b = _lookup(_BOUNDS, carrier)
    return b if b is not None else (None, None)


def min_value(carrier):
    '''The least representable value of `carrier` (the unit of `Max`).

    `raise` -- `CapabilityError` -- if `carrier` is unbounded below
    '''
    lower = bounds(carrier)[0]
    if lower is None:
        raise CapabilityError('%s has no minimum value' % carrier)
    return lower


def max_value(carrier):
    '''The greatest representable value of `carrier` (the unit of `Min`).

    `raise` -- `CapabilityError` -- if `carrier` is unbounded above
    '''
    upper = bounds(carrier)[1]
    if upper is None:
        raise CapabilityError('%s has no maximum value' % carrier)
    return upper


register_bounds(bool, False, True)
register_bounds(float, float('-inf'), float('inf'))
# strings have a least element, but no greatest
register_bounds(str, '')
register_bounds(bytes, b'')
