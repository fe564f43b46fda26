"""A singly linked list with positional insertion, deletion and reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One cell of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        """Put *value* at the front."""
        self.head = Node(value, self.head)

    def insert_at_tail(self, value: Any) -> None:
        """Put *value* at the end."""
        node = Node(value)
        if self.head is None:
            self.head = node
            return
        current = self.head
        while current.next is not None:
            current = current.next
        current.next = node

    def insert_at(self, position: int, value: Any) -> None:
        """Insert *value* so that it ends up at *position*.

        Positions of 1 or less insert at the front; positions past the end
        append at the tail.
        """
        if position <= 1 or self.head is None:
            if position <= 1:
                self.insert_at_head(value)
            else:
                self.insert_at_tail(value)
            return
        current: Node | None = self.head
        count = 1
        while current is not None and count < position - 1:
            current = current.next
            count += 1
        if current is None:
            self.insert_at_tail(value)
            return
        current.next = Node(value, current.next)

    def delete_at(self, position: int) -> None:
        """Remove the node at *position*; nothing happens past the end.

        Raises IndexError for positions below 1 on a non-empty list.
        """
        if self.head is None:
            return
        if position < 1:
            raise IndexError(f"position must be 1 or more, got {position}")
        if position == 1:
            self.head = self.head.next
            return
        previous = self.head
        current = self.head.next
        count = 2
        while current is not None and count < position:
            previous, current = current, current.next
            count += 1
        if current is None:
            return
        previous.next = current.next

    def clear(self) -> None:
        """Remove every node."""
        self.head = None

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"