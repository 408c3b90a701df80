# tablefsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, FrozenSet, Generic, Iterable, Mapping, Optional, Union

from tablefsm.core.errors import UnknownTransitionError
from tablefsm.core.events import ENTRY_EVENT, EXIT_EVENT
from tablefsm.core.transitions import Transition, TransitionTable
from tablefsm.core.validations import Validator
from tablefsm.interfaces.protocols import StateHolder
from tablefsm.interfaces.types import ArgsT, Callback, EventID, StateID
from tablefsm.log import get_logger

Logger = Union[logging.Logger, logging.LoggerAdapter]


class StateMachine(Generic[ArgsT]):
    """
    A table-driven finite state machine.

    The transition table and callback registry are fixed at construction. The
    machine itself holds no current state: every dispatch reads and writes a
    caller-owned StateHolder, so one machine can drive any number of holders.
    """

    def __init__(
        self,
        transitions: Iterable[Transition],
        callbacks: Mapping[StateID, Callback],
        logger: Optional[Logger] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        """
        :param transitions: Declared transitions. No two may share a (source, event) key.
        :param callbacks: One callback per state. Every key must be mentioned by a transition.
        :param logger: Receives one INFO record per handled event. Defaults to the package logger.
        :param validator: Optional validator for the callback registry.
        :raises DuplicateTransitionError: On a repeated (source, event) key.
        :raises UnknownStateError: On a callback for a state no transition mentions.
        :raises ValidationError: On a callback that is not callable.
        """
        self._transitions = TransitionTable(transitions)
        self._validator = validator or Validator()
        self._callbacks = self._validator.validate_callbacks(callbacks, self._transitions.states)
        self._log = logger if logger is not None else get_logger("FSM")

    @property
    def transitions(self) -> TransitionTable:
        """The validated transition table."""
        return self._transitions

    @property
    def callbacks(self) -> Mapping[StateID, Callback]:
        """Read-only view of the callback registry."""
        return self._callbacks

    @property
    def states(self) -> FrozenSet[StateID]:
        """Every state mentioned by a declared transition."""
        return self._transitions.states

    def can_handle(self, state: StateHolder, event: EventID) -> bool:
        """Return True if ``event`` is declared for the holder's current state."""
        return self._transitions.lookup(state.current(), event) is not None

    def send_event(self, ctx: Any, state: StateHolder, event: EventID, args: Optional[ArgsT] = None) -> None:
        """
        Dispatch ``event`` against the holder's current state.

        There are 3 types of callback, always run in this order:
          - event callback: the source state's callback, with ``event``
          - exit callback: the source state's callback, with EXIT_EVENT
          - entry callback: the target state's callback, with ENTRY_EVENT

        The holder moves to the target between exit and entry. A self-loop runs
        the event callback only and never calls ``state.set``. All callbacks of
        one dispatch receive the same ``args`` object; ``None`` becomes a fresh
        dict.

        :param ctx: Passed through to callbacks untouched.
        :param state: The caller-owned current-state holder.
        :param event: The event to handle.
        :param args: Payload shared by the callbacks of this dispatch.
        :raises UnknownTransitionError: If no transition is declared for the
            current state and ``event``. Nothing is called and the holder is unchanged.
        :raises KeyError: If a state reached by the dispatch has no callback.
        """
        source = state.current()
        transition = self._transitions.lookup(source, event)
        if transition is None:
            raise UnknownTransitionError(source, event)

        self._log.info(
            "handle event[%s], transition from [%s] to [%s]",
            event,
            transition.source,
            transition.target,
            extra={"fsm_event": event, "fsm_from": transition.source, "fsm_to": transition.target},
        )

        if args is None:
            args = {}

        # event callback
        self._callbacks[transition.source](ctx, state, event, args)

        if transition.is_self_loop:
            return

        # exit callback
        self._callbacks[transition.source](ctx, state, EXIT_EVENT, args)

        # entry callback
        state.set(transition.target)
        self._callbacks[transition.target](ctx, state, ENTRY_EVENT, args)

    def __repr__(self) -> str:
        return f"StateMachine(transitions={len(self._transitions)}, callbacks={sorted(self._callbacks)})"
