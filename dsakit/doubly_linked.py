"""Doubly linked list traversable in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["DoublyLinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with insertion at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} --> " for value in self) + "NULL"