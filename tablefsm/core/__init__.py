# tablefsm/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Core package: transition table, callback validation and event dispatch.
"""

# Import order matters to avoid circular dependencies
from .errors import (
    ConfigurationError,
    DuplicateTransitionError,
    FSMError,
    UnknownStateError,
    UnknownTransitionError,
    ValidationError,
)
from .events import ENTRY_EVENT, EXIT_EVENT
from .transitions import Transition, TransitionTable, as_transitions
from .states import State
from .validations import Validator
from .state_machine import StateMachine

__all__ = [
    # Errors
    "FSMError",
    "ConfigurationError",
    "DuplicateTransitionError",
    "UnknownStateError",
    "UnknownTransitionError",
    "ValidationError",
    # Events
    "ENTRY_EVENT",
    "EXIT_EVENT",
    # Other core classes
    "State",
    "StateMachine",
    "Transition",
    "TransitionTable",
    "Validator",
    "as_transitions",
]
