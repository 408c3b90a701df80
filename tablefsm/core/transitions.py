# tablefsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from tablefsm.core.errors import DuplicateTransitionError
from tablefsm.interfaces.types import EventID, StateID


@dataclass(frozen=True)
class Transition:
    """
    Declares that while in ``source``, receiving ``event`` moves the machine
    to ``target``. ``target`` may equal ``source``, which makes it a self-loop.
    """

    event: EventID
    source: StateID
    target: StateID

    @property
    def is_self_loop(self) -> bool:
        """True when the transition does not leave its source state."""
        return self.source == self.target


class _EventKey(NamedTuple):
    """Internal lookup key for the transition table."""

    source: StateID
    event: EventID


class TransitionTable:
    """
    Immutable mapping from (source state, event) to the declared Transition.
    Built once from a sequence of declarations; duplicate keys are rejected.
    """

    def __init__(self, transitions: Iterable[Transition]) -> None:
        """
        :param transitions: Transition declarations, in declaration order.
        :raises DuplicateTransitionError: If two declarations share a
            (source, event) key. The error carries the later declaration.
        """
        table: Dict[_EventKey, Transition] = {}
        states: set = set()

        for transition in transitions:
            key = _EventKey(transition.source, transition.event)
            if key in table:
                raise DuplicateTransitionError(transition)
            table[key] = transition
            states.add(transition.source)
            states.add(transition.target)

        self._table: Mapping[_EventKey, Transition] = MappingProxyType(table)
        self._states: FrozenSet[StateID] = frozenset(states)

    @property
    def states(self) -> FrozenSet[StateID]:
        """Every state mentioned as source or target of a declared transition."""
        return self._states

    def lookup(self, state: StateID, event: EventID) -> Optional[Transition]:
        """
        Return the transition declared for ``event`` in ``state``, or None.

        The returned object is the declaration itself, not a copy.
        """
        return self._table.get(_EventKey(state, event))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return _EventKey(*key) in self._table

    def __iter__(self) -> Iterator[Transition]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"TransitionTable({list(self._table.values())!r})"


def as_transitions(declarations: Iterable[Tuple[EventID, StateID, StateID]]) -> List[Transition]:
    """Build Transition records from plain (event, source, target) tuples."""
    return [Transition(event, source, target) for event, source, target in declarations]
