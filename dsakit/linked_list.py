"""Singly linked list with the classic list-manipulation operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedList"]


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list keeping a head, a tail and its length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("no data to delete")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the tail value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("no data to delete")
        if self._head.next is None:
            return self.pop_front()
        before = self._head
        while before.next is not self._tail:
            before = before.next
        last = self._tail
        before.next = None
        self._tail = before
        self._size -= 1
        return last.value

    def index(self, value: Any) -> int:
        """Return the 0-based position of the first ``value``; raise ValueError if absent."""
        for position, item in enumerate(self):
            if item == value:
                return position
        raise ValueError(f"{value!r} is not in the list")

    def insert_sorted(self, value: Any) -> None:
        """Insert ``value`` before the first element not smaller than it."""
        if self._head is None or self._head.value >= value:
            self.push_front(value)
            return
        current = self._head
        while current.next is not None and current.next.value < value:
            current = current.next
        node = _Node(value, current.next)
        current.next = node
        if node.next is None:
            self._tail = node
        self._size += 1

    def rotate(self, k: int) -> None:
        """Rotate counter-clockwise so that the (k+1)-th element becomes the head.

        Leaves the list unchanged when ``k`` is 0 or not smaller than its length.
        """
        if k < 0:
            raise ValueError("rotation count must be non-negative")
        if k == 0 or k >= self._size:
            return
        kth = self._head
        for _ in range(k - 1):
            kth = kth.next
        self._tail.next = self._head
        self._head = kth.next
        kth.next = None
        self._tail = kth

    def swap_adjacent_values(self) -> None:
        """Swap the values of each consecutive pair of nodes."""
        node = self._head
        while node is not None and node.next is not None:
            node.value, node.next.value = node.next.value, node.value
            node = node.next.next

    def nth_from_end(self, n: int) -> Any:
        """Return the value ``n`` nodes before the last one (0 is the last)."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if n >= self._size:
            raise IndexError(
                f"n = {n} is larger than the number of elements = {self._size}"
            )
        target = self._size - 1 - n
        for position, value in enumerate(self):
            if position == target:
                return value
        raise IndexError(n)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        stack = list(self)
        while stack:
            yield stack.pop()

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"