# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT license.

'''Core components of origami - the combining-operation contracts
(`origami.core.traits`), carrier capabilities
(`origami.core.capabilities`), and instances for built-in types
(`origami.core.instances`).
'''

from .traits import (  # NOQA
    CapabilityError, Monoid, Reducer, Semigroup, Wrapper
)
from .instances import (  # NOQA
    keys_of, option_of, register, resolve, resolve_value, tuple_of
)
