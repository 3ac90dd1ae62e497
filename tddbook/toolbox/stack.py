"""A thread-safe last-in, first-out stack."""

from __future__ import annotations

import threading


class EmptyStackError(IndexError):
    """Raised when popping from an empty stack."""


class Stack:
    """A LIFO stack of strings guarded by a lock."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._data: list[str] = []

    def push(self, item: str) -> None:
        """Add ``item`` to the top of the stack."""
        with self._lock:
            self._data.append(item)

    def pop(self) -> str:
        """Remove and return the top item; raise EmptyStackError if there is none."""
        with self._lock:
            if not self._data:
                raise EmptyStackError("stack is empty")
            return self._data.pop()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)