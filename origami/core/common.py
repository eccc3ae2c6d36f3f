# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Iteration helpers shared by the folds.
'''


def split_first(iterable):
    '''Take the first item out of an iterable, so a fold can seed from it
    then consume the rest.

    `iterable` -- `iterable` -- an iterable or collection of items

    `return` -- `(object, iterator)` -- a pair (first_item, rest), or
                `(None, None)` if the iterable is empty (the first item may
                itself be `None`, so test `rest`)
    '''
    iterable = iter(iterable)
    try:
        return next(iterable), iterable
    except StopIteration:
        return None, None
