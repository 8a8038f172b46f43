"""
Uid Module
==========

This module provides process-unique identity tokens. Every token carries an
integer id taken from a process-wide counter (the first token gets 1) and an
optional name that is only used for display.

Tokens compare and hash by their integer id alone, so two tokens created with
the same name are still different tokens.
"""

import threading
from typing import Optional


class Uid:
    """
    Immutable unique id, created through :meth:`Uid.create`.
    """

    __slots__ = ('_id', '_name')

    # Process-wide counter, guarded by _counter_lock
    _id_counter = 0
    _counter_lock = threading.Lock()

    def __init__(self, *args, **kwargs):
        raise TypeError("Uid cannot be instantiated directly, use Uid.create()")

    @classmethod
    def create(cls, name: Optional[str] = None) -> 'Uid':
        """
        Create a new unique id.

        Args:
            name: Optional display name, recommended to be unique although not required

        Returns:
            New Uid instance
        """
        with cls._counter_lock:
            Uid._id_counter += 1
            id_val = Uid._id_counter

        uid = object.__new__(cls)
        object.__setattr__(uid, '_id', id_val)
        object.__setattr__(uid, '_name', name)
        return uid

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    def __setattr__(self, attr, value):
        raise AttributeError(f"Uid is immutable, cannot set '{attr}'")

    def __delattr__(self, attr):
        raise AttributeError(f"Uid is immutable, cannot delete '{attr}'")

    def __eq__(self, other):
        if not isinstance(other, Uid):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        if self._name is not None:
            return f"Uid{{'{self._name}'}}"

        return f"Uid{{{self._id}}}"

    __str__ = __repr__

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self
