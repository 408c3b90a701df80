"""tablefsm: table-driven finite state machine engine

Responsibilities:
    - Transition table construction and duplicate detection
    - Callback registry validation
    - Event dispatch with a fixed event, exit, entry callback order
    - Graph export for visualization

Interactions:
    - Client code supplies the transitions, callbacks and current-state holder
    - Logging system receives one record per handled event

Cross-cutting Concerns:
    Thread Safety:
        - Transition table and callback registry are read-only after construction
        - Dispatch takes no locks; callers serialize dispatches that share a holder

    Error Handling:
        - Construction errors prevent the machine from being created
        - Dispatch errors leave the state holder untouched
        - Callback exceptions propagate unchanged

    Logging:
        - Standard library logging under the ``tablefsm`` logger
        - No handlers configured by the library
"""

from .core import (
    ENTRY_EVENT,
    EXIT_EVENT,
    ConfigurationError,
    DuplicateTransitionError,
    FSMError,
    State,
    StateMachine,
    Transition,
    TransitionTable,
    UnknownStateError,
    UnknownTransitionError,
    ValidationError,
)
from .interfaces import StateHolder
from .runtime import Context, background, export_dot, to_dot

__version__ = "0.1.0"

__all__ = [
    "ENTRY_EVENT",
    "EXIT_EVENT",
    "ConfigurationError",
    "Context",
    "DuplicateTransitionError",
    "FSMError",
    "State",
    "StateHolder",
    "StateMachine",
    "Transition",
    "TransitionTable",
    "UnknownStateError",
    "UnknownTransitionError",
    "ValidationError",
    "background",
    "export_dot",
    "to_dot",
]
