# tablefsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tablefsm.core.transitions import Transition


class FSMError(Exception):
    """
    Base exception class for errors within the finite state machine library.
    """


class ConfigurationError(FSMError):
    """
    Raised when a state machine cannot be built from the declared transitions
    and callbacks. No machine is returned when this is raised.
    """


class DuplicateTransitionError(ConfigurationError):
    """
    Raised when two declared transitions share the same (source, event) key.
    """

    def __init__(self, transition: "Transition") -> None:
        super().__init__(f"duplicate transition: {transition!r}")
        self.transition = transition


class UnknownStateError(ConfigurationError):
    """
    Raised when a callback is registered for a state that no transition mentions.
    """

    def __init__(self, state: str) -> None:
        super().__init__(f"unknown state: {state!r}")
        self.state = state


class ValidationError(ConfigurationError):
    """
    Raised when validation detects a malformed callback registration.
    """


class UnknownTransitionError(FSMError):
    """
    Raised by dispatch when no transition is declared for the current state and
    the incoming event. The state holder is left untouched.
    """

    def __init__(self, state: str, event: str) -> None:
        super().__init__(f"unknown transition[From: {state}, Event: {event}]")
        self.state = state
        self.event = event
