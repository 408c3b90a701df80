# tablefsm/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Protocol, runtime_checkable

from tablefsm.interfaces.types import StateID


@runtime_checkable
class StateHolder(Protocol):
    """
    Current-state holder protocol for type checking.

    Methods:
        current(): Returns the state the machine is presently in.
        set(state): Moves the holder to ``state``.

    Runtime Invariants:
    - The holder is owned by the caller and outlives many dispatches.
    - The state machine reads it before lookup and writes it at most once per
      dispatch, strictly between the exit and entry callbacks.

    Error Handling:
    - Implementations should not raise from either method. If they do, the
      exception propagates out of the dispatch unchanged.
    """

    def current(self) -> StateID:
        """Return the current state identifier."""
        ...

    def set(self, state: StateID) -> None:
        """Replace the current state identifier."""
        ...
