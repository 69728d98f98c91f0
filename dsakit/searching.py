"""Searching helpers over plain sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache
from itertools import combinations

__all__ = ["has_pair_with_sum", "find_positions", "ternary_search", "is_subset_sum"]


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Return True if two distinct elements of ``values`` add up to ``target``."""
    return any(a + b == target for a, b in combinations(values, 2))


def find_positions(values: Iterable[float], target: float) -> list[int]:
    """Return the 1-based positions at which ``target`` occurs.

    Raises ValueError when ``values`` is empty, since there is nothing to search.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot search an empty sequence")
    return [position for position, value in enumerate(items, start=1) if value == target]


def ternary_search(values: Sequence[int], key: int) -> int:
    """Find ``key`` in the sorted sequence ``values``.

    Returns the index of a matching element, or -1 when ``key`` is absent.
    """
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        first_mid = low + third
        second_mid = high - third
        if values[first_mid] == key:
            return first_mid
        if values[second_mid] == key:
            return second_mid
        if key < values[first_mid]:
            high = first_mid - 1
        elif key > values[second_mid]:
            low = second_mid + 1
        else:
            low, high = first_mid + 1, second_mid - 1
    return -1


def is_subset_sum(values: Iterable[int], target: int) -> bool:
    """Return True if some subset of ``values`` sums exactly to ``target``."""
    items = tuple(values)

    @lru_cache(maxsize=None)
    def reachable(count: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        if count == 0:
            return False
        last = items[count - 1]
        if last > remaining:
            return reachable(count - 1, remaining)
        return reachable(count - 1, remaining) or reachable(count - 1, remaining - last)

    return reachable(len(items), target)