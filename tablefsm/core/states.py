# tablefsm/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from tablefsm.interfaces.types import StateID
from tablefsm.runtime.concurrency import get_lock, with_lock


class State:
    """
    Caller-owned holder of the state a machine is presently in. Satisfies the
    StateHolder protocol.

    Each read and write is guarded by its own lock. That keeps a single
    ``current()`` or ``set()`` consistent across threads but does not make a
    whole dispatch atomic; callers still serialize ``send_event`` calls that
    share a holder.
    """

    def __init__(self, initial: StateID) -> None:
        """
        :param initial: The state the holder starts in.
        """
        self._current = initial
        self._lock = get_lock()

    def current(self) -> StateID:
        """Return the current state."""
        with with_lock(self._lock):
            return self._current

    def set(self, state: StateID) -> None:
        """Move the holder to ``state``."""
        with with_lock(self._lock):
            self._current = state

    def is_(self, target: StateID) -> bool:
        """Return True if the holder is currently in ``target``."""
        return self.current() == target

    def __repr__(self) -> str:
        return f"State({self.current()!r})"
