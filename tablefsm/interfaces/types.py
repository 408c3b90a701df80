# tablefsm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Callable, Dict, TypeVar

if TYPE_CHECKING:
    from tablefsm.interfaces.protocols import StateHolder

StateID = str
EventID = str

# Default argument bag shared by the callbacks of one dispatch
Args = Dict[str, Any]
ArgsT = TypeVar("ArgsT")

# Callback Types
Callback = Callable[[Any, "StateHolder", EventID, Any], None]
Callbacks = Dict[StateID, Callback]
