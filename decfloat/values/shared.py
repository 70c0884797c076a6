"""
decfloat - shared.py
Decimal value with serialised access

(c) 2013--2024 Rob Hagemans
This file is released under the GNU GPL version 3 or later.
"""

import threading
from contextlib import contextmanager

from . import numbers


# operations that can be run through SharedDecimal.apply
MUTATORS = (
    'iadd', 'isub', 'imul', 'idiv', 'ipow_int', 'iscale', 'ineg', 'iabs', 'itrunc',
    'from_str', 'from_int', 'from_value', 'from_variant', 'copy_from',
)


class SharedDecimal(object):
    """Decimal that may be mutated from more than one thread."""

    def __init__(self, value=None, values=None):
        """Take ownership of a Decimal, or convert a Python value to one."""
        if value is None:
            value = numbers.Decimal(values)
        elif isinstance(value, numbers.Decimal):
            value = value.clone()
        else:
            value = numbers.as_decimal(value, values)
        self._value = value
        self._lock = threading.RLock()

    def __repr__(self):
        return 'SharedDecimal[%s]' % (self,)

    def __str__(self):
        return self.snapshot().to_str()

    @contextmanager
    def locked(self):
        """Hold the lock for a sequence of operations on the value."""
        with self._lock:
            yield self._value

    def apply(self, method_name, *args):
        """Run one mutating operation under the lock; return a snapshot of the result."""
        if method_name not in MUTATORS:
            raise ValueError('%r is not a mutating Decimal operation' % (method_name,))
        with self._lock:
            getattr(self._value, method_name)(*args)
            return self._value.clone()

    def snapshot(self):
        """Copy of the current value."""
        with self._lock:
            return self._value.clone()
