"""
Generator Identity

Process-wide registry handing out unique source ids of the form
``generator-<8 hex digits>``. The registry is the only piece of global
mutable state in the package; it is created once at import time and its
counter only ever grows.
"""

import threading

SOURCE_ID_FORMAT = "generator-%08x"


class GeneratorIdRegistry:
    """Monotonic, lock-protected counter for generator source ids."""

    def __init__(self, start: int = 0) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> str:
        """Reserve the next counter value and return it as a source id."""
        with self._lock:
            value = self._next
            self._next += 1
        return SOURCE_ID_FORMAT % value

    def peek(self) -> int:
        """Counter value the next call to ``next_id`` will use."""
        with self._lock:
            return self._next


_REGISTRY = GeneratorIdRegistry()


def next_generator_id() -> str:
    """Return a fresh, never reused generator source id."""
    return _REGISTRY.next_id()
