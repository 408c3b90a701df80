# tablefsm/interfaces/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Type aliases and protocols shared by the core and runtime packages."""

from .protocols import StateHolder
from .types import Args, ArgsT, Callback, Callbacks, EventID, StateID

__all__ = ["Args", "ArgsT", "Callback", "Callbacks", "EventID", "StateHolder", "StateID"]
