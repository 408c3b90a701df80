# tablefsm/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from tablefsm.interfaces.types import EventID

# Synthesized by the state machine itself, never sent by callers.
ENTRY_EVENT: EventID = "Entry event"
EXIT_EVENT: EventID = "Exit event"
