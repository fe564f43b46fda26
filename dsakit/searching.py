"""Searching in plain, sorted and rotated sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["linear_search", "binary_search", "fibonacci_search", "search_rotated"]


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the first index holding *key*, or None if it is absent."""
    return next((index for index, item in enumerate(values) if item == key), None)


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of *key* in the ascending sequence *values*, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def fibonacci_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of *key* in the ascending sequence *values*, or None.

    The probe positions are chosen from Fibonacci numbers.
    """
    size = len(values)
    fib2, fib1 = 0, 1
    fib = fib1 + fib2
    while fib < size:
        fib2, fib1 = fib1, fib
        fib = fib1 + fib2

    offset = -1
    while fib > 1:
        probe = min(offset + fib2, size - 1)
        if values[probe] < key:
            fib = fib1
            fib1 = fib2
            fib2 = fib - fib1
            offset = probe
        elif values[probe] > key:
            fib = fib2
            fib1 = fib1 - fib2
            fib2 = fib - fib1
        else:
            return probe

    if fib1 and offset + 1 < size and values[offset + 1] == key:
        return offset + 1
    return None


def search_rotated(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of *target* in a rotated ascending sequence, or None.

    *values* is a sequence of distinct items sorted ascending and then
    rotated by some number of places.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[left] <= values[mid]:
            if values[left] <= target < values[mid]:
                right = mid - 1
            else:
                left = mid + 1
        else:
            if values[mid] < target <= values[right]:
                left = mid + 1
            else:
                right = mid - 1
    return None