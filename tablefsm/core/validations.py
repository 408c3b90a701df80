# tablefsm/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from types import MappingProxyType
from typing import AbstractSet, Dict, Mapping

from tablefsm.core.errors import UnknownStateError, ValidationError
from tablefsm.interfaces.types import Callback, StateID


class Validator:
    """
    Performs construction-time validation of a state machine's callback
    registry against the states its transition table mentions.
    """

    def __init__(self) -> None:
        self._rules = _DefaultValidationRules

    def validate_callbacks(
        self, callbacks: Mapping[StateID, Callback], known_states: AbstractSet[StateID]
    ) -> Mapping[StateID, Callback]:
        """
        Check every registration and return a read-only registry.

        States mentioned by transitions but missing from ``callbacks`` are
        accepted here; they only fail if a dispatch actually reaches them.

        :param callbacks: Mapping from state to callback.
        :param known_states: Every state mentioned by a declared transition.
        :return: A read-only copy of the validated registry.
        :raises UnknownStateError: If a state is registered that no transition mentions.
        :raises ValidationError: If a registered callback is not callable.
        """
        registry: Dict[StateID, Callback] = {}
        for state, callback in callbacks.items():
            self._rules.validate_registration(state, callback, known_states)
            registry[state] = callback
        return MappingProxyType(registry)


class _DefaultValidationRules:
    """
    Built-in rules applied to each (state, callback) registration.
    """

    @staticmethod
    def validate_registration(state: StateID, callback: Callback, known_states: AbstractSet[StateID]) -> None:
        if state not in known_states:
            raise UnknownStateError(state)
        if not callable(callback):
            raise ValidationError(f"Callback for state {state!r} must be callable.")
