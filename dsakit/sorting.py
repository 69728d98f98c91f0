"""Classic comparison and distribution sorts, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "quick_sort",
    "quick_sort_middle_pivot",
    "radix_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "bubble_sort",
    "selection_sort",
    "merge_sorted_arrays",
]


def _partition_last(items: list, low: int, high: int) -> int:
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def quick_sort(values: Iterable) -> list:
    """Quicksort using the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition_last(items, low, high)
            pending.append((split + 1, high))
            pending.append((low, split - 1))
    return items


def _partition_middle(items: list, low: int, high: int) -> int:
    middle = (low + high) // 2
    items[middle], items[high] = items[high], items[middle]
    pivot = items[high]
    store = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[high] = items[store]
    items[store] = pivot
    return store


def quick_sort_middle_pivot(values: Iterable) -> list:
    """Quicksort with the middle element as pivot, recursing on the smaller side."""
    items = list(values)

    def sort_range(low: int, high: int) -> None:
        while low < high:
            split = _partition_middle(items, low, high)
            if split - low < high - split:
                sort_range(low, split - 1)
                low = split + 1
            else:
                sort_range(split + 1, high)
                high = split - 1

    sort_range(0, len(items) - 1)
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort handles non-negative integers only")
    if not items:
        return items
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def _sift_down(items: list, size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Heapsort using a max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable) -> list:
    """Insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(first: list, second: list) -> list:
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def bubble_sort(values: Iterable) -> list:
    """Bubble sort: each pass carries the largest remaining element to the end."""
    items = list(values)
    for end in range(len(items), 1, -1):
        for i in range(end - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable) -> list:
    """Selection sort."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sorted_arrays(arrays: Iterable[Iterable]) -> list:
    """Merge already sorted sequences into one sorted list by divide and conquer."""
    lists = [list(array) for array in arrays]
    if not lists:
        return []

    def merge_range(low: int, high: int) -> list:
        if low == high:
            return list(lists[low])
        middle = (low + high) // 2
        return _merge(merge_range(low, middle), merge_range(middle + 1, high))

    return merge_range(0, len(lists) - 1)