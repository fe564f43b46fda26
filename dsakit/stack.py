"""Last-in, first-out stacks backed by a list or by linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["Stack", "LinkedStack"]


class Stack:
    """A stack stored in a Python list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put *value* on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError if empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Link:
    value: Any
    below: _Link | None


class LinkedStack:
    """A stack stored as a chain of nodes, newest first."""

    def __init__(self) -> None:
        self._top: _Link | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put *value* on top."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value; IndexError if empty."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        value = self._top.value
        self._top = self._top.below
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the top value without removing it; IndexError if empty."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.value

    def __len__(self) -> int:
        return self._size