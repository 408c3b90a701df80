# tablefsm/runtime/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Runtime helpers around the core state machine: execution context, locking
primitives and graph export.
"""

from .context import Context, background
from .graph import export_dot, to_dot

__all__ = ["Context", "background", "export_dot", "to_dot"]
