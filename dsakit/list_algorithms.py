"""Algorithms over bare singly linked nodes: merging, reversing, reordering, cycles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "ListNode",
    "from_values",
    "to_values",
    "merge_sorted",
    "is_palindrome",
    "swap_nodes",
    "k_reverse",
    "reorder",
    "swap_pairs",
    "remove_nth_from_end",
    "get_intersection",
    "has_cycle",
]


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = field(default=None)

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _reverse(head: ListNode | None) -> ListNode | None:
    previous = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def from_values(values: Iterable[Any]) -> ListNode | None:
    """Build a chain of nodes holding ``values``; return its head or None."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: ListNode | None) -> list[Any]:
    """Return the values of the chain starting at ``head``.

    Raises ValueError when the chain loops back on itself.
    """
    if has_cycle(head):
        raise ValueError("the list contains a cycle")
    return [node.value for node in _nodes(head)]


def merge_sorted(head1: ListNode | None, head2: ListNode | None) -> ListNode | None:
    """Merge two ascending chains into one by relinking their nodes.

    On equal values the node from ``head1`` comes first.
    """
    dummy = ListNode(None)
    tail = dummy
    while head1 is not None and head2 is not None:
        if head1.value <= head2.value:
            tail.next = head1
            head1 = head1.next
        else:
            tail.next = head2
            head2 = head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return dummy.next


def is_palindrome(head: ListNode | None) -> bool:
    """Return True if the values read the same in both directions.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    slow = fast = head
    previous = head
    while fast is not None and fast.next is not None:
        previous = slow
        slow = slow.next
        fast = fast.next.next
    previous.next = None
    second = _reverse(slow)
    try:
        first_node, second_node = head, second
        while first_node is not None:
            if first_node.value != second_node.value:
                return False
            first_node = first_node.next
            second_node = second_node.next
        return True
    finally:
        previous.next = _reverse(second)


def swap_nodes(head: ListNode | None, i: int, j: int) -> ListNode | None:
    """Swap the nodes at 0-based positions ``i`` and ``j``; return the new head."""
    if i == j or head is None or head.next is None:
        return head
    nodes = list(_nodes(head))
    for position in (i, j):
        if not 0 <= position < len(nodes):
            raise IndexError(f"position {position} is outside the list")
    nodes[i], nodes[j] = nodes[j], nodes[i]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    nodes[-1].next = None
    return nodes[0]


def k_reverse(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the nodes ``k`` at a time, including a shorter final group.

    A ``k`` below 2 leaves the order unchanged.
    """
    size = max(k, 1)
    dummy = ListNode(None)
    tail = dummy
    node = head
    while node is not None:
        group = []
        while node is not None and len(group) < size:
            group.append(node)
            node = node.next
        for member in reversed(group):
            tail.next = member
            tail = member
    tail.next = None
    return dummy.next


def reorder(head: ListNode | None) -> None:
    """Relink L0, L1, ..., Ln in place as L0, Ln, L1, Ln-1, ..."""
    if head is None or head.next is None or head.next.next is None:
        return
    stack = list(_nodes(head))
    count = len(stack)
    current = head
    for _ in range(count // 2):
        element = stack.pop()
        element.next = current.next
        current.next = element
        current = current.next.next
    current.next = None


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes by relinking; return the new head."""
    dummy = ListNode(None, head)
    previous = dummy
    current = head
    while current is not None and current.next is not None:
        previous.next = current.next
        current.next = current.next.next
        previous.next.next = current
        current = current.next
        previous = previous.next.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end (1 is the last one)."""
    if head is None:
        return None
    nodes = list(_nodes(head))
    length = len(nodes)
    if not 1 <= n <= length:
        raise IndexError(f"n = {n} is outside 1..{length}")
    if n == length:
        return head.next
    before = nodes[length - n - 1]
    removed = before.next
    before.next = removed.next
    removed.next = None
    return head


def get_intersection(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both chains, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def has_cycle(head: ListNode | None) -> bool:
    """Floyd's tortoise and hare: True if following ``next`` never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False