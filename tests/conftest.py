# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, List

import pytest

from tablefsm.core.state_machine import StateMachine
from tablefsm.core.states import State
from tablefsm.core.transitions import Transition
from tablefsm.runtime.context import background


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class Recorder:
    """Collects ``"<state>:<event>"`` labels from callbacks, plus what the holder read at the time."""

    def __init__(self) -> None:
        self.log: List[str] = []
        self.observed: List[str] = []
        self.args_seen: List[Any] = []

    def callback_for(self, name: str):
        def callback(ctx, state, event, args):
            self.log.append(f"{name}:{event}")
            self.observed.append(state.current())
            self.args_seen.append(args)

        return callback

    def callbacks(self, *names: str) -> Dict[str, Any]:
        return {name: self.callback_for(name) for name in names}


class SpyHolder(State):
    """State holder that counts set() calls."""

    def __init__(self, initial: str) -> None:
        super().__init__(initial)
        self.set_calls: List[str] = []

    def set(self, state: str) -> None:
        self.set_calls.append(state)
        super().set(state)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def ctx():
    return background()


@pytest.fixture
def idle_transitions() -> List[Transition]:
    return [
        Transition("start", "Idle", "Running"),
        Transition("ping", "Idle", "Idle"),
        Transition("stop", "Running", "Idle"),
    ]


@pytest.fixture
def idle_fsm(idle_transitions, recorder) -> StateMachine:
    return StateMachine(idle_transitions, recorder.callbacks("Idle", "Running"))


@pytest.fixture
def holder() -> SpyHolder:
    return SpyHolder("Idle")
