"""Singly linked circular list whose last node links back to the head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["CircularLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class CircularLinkedList:
    """Circular singly linked list with 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self._append(value)

    def _append(self, value: Any) -> None:
        node = _Node(value)
        if self._head is None:
            node.next = node
            self._head = node
        else:
            node.next = self._head
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_front(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        if self._head is None:
            self._append(value)
            return
        node = _Node(value, self._head)
        self._tail.next = node
        self._head = node
        self._size += 1

    def insert_after(self, position: int, value: Any) -> None:
        """Insert ``value`` after the node at 1-based ``position``.

        Positions past the end wrap around the circle. In an empty list the
        value becomes the only node.
        """
        if position < 1:
            raise ValueError("positions start at 1")
        if self._head is None:
            self._append(value)
            return
        current = self._head
        for _ in range(position - 1):
            current = current.next
        node = _Node(value, current.next)
        current.next = node
        if current is self._tail:
            self._tail = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        if position == 1:
            removed = self._head
            if self._size == 1:
                self._head = self._tail = None
            else:
                self._head = removed.next
                self._tail.next = self._head
        else:
            before = self._head
            for _ in range(position - 2):
                before = before.next
            removed = before.next
            before.next = removed.next
            if removed is self._tail:
                self._tail = before
        removed.next = None
        self._size -= 1
        return removed.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"