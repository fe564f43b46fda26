"""Classic comparison sorts that return a new list and leave the input alone."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of *values* in descending order, using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] < items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
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


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of *values* in ascending order, using heap sort."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    while size > 1:
        items[0], items[size - 1] = items[size - 1], items[0]
        size -= 1
        _sift_down(items, size, 0)
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of *values* in ascending order, using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of *values* in ascending order, using merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of *values* in ascending order, using quicksort.

    The last element of each range is the pivot (Lomuto partitioning).
    """
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the items of *values* in ascending order, using selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items