"""
Execution context passed through a dispatch to every callback.

The state machine never inspects the context. It exists so callbacks can share
request-scoped values and cooperate on cancellation.
"""

import threading
from typing import Any, Optional


class Context:
    """
    Carries a cancellation signal and an immutable chain of key/value pairs.
    Children created with ``with_value`` share their parent's cancellation.
    """

    def __init__(self, parent: Optional["Context"] = None, key: Any = None, value: Any = None) -> None:
        self._parent = parent
        self._key = key
        self._value = value
        self._done = parent._done if parent is not None else threading.Event()

    @property
    def cancelled(self) -> bool:
        """True once ``cancel`` has been called on this context or any relative."""
        return self._done.is_set()

    def cancel(self) -> None:
        """Signal cancellation. Idempotent."""
        self._done.set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until cancelled or ``timeout`` elapses; return ``cancelled``."""
        return self._done.wait(timeout)

    def with_value(self, key: Any, value: Any) -> "Context":
        """Return a child context carrying ``key`` -> ``value``."""
        return Context(parent=self, key=key, value=value)

    def value(self, key: Any, default: Any = None) -> Any:
        """Look ``key`` up through this context and its ancestors."""
        ctx: Optional[Context] = self
        while ctx is not None:
            if ctx._parent is not None and ctx._key == key:
                return ctx._value
            ctx = ctx._parent
        return default


def background() -> Context:
    """Return a new root context that is never cancelled unless asked to be."""
    return Context()
