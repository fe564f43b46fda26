"""Array problems: pair sums, majorities, subarrays, merging, rotation and more."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "has_pair_with_sum",
    "has_pair_with_sum_sorted",
    "majority_third_brute",
    "majority_third",
    "max_subarray_sum",
    "merge_sorted",
    "find_missing_brute",
    "find_missing",
    "product_except_self",
    "second_largest",
    "majority_element",
    "max_profit",
    "rotate_left_one",
    "remove_duplicates",
    "rotate_left",
]


def has_pair_with_sum(values: Iterable[int], target: int) -> bool:
    """Tell whether two distinct positions of *values* add up to *target*.

    Every pair is tried in turn.
    """
    items = list(values)
    return any(a + b == target for a, b in itertools.combinations(items, 2))


def has_pair_with_sum_sorted(values: Iterable[int], target: int) -> bool:
    """Tell whether two distinct positions of *values* add up to *target*.

    A sorted copy is scanned with two pointers; the input is left alone.
    """
    items = sorted(values)
    start, end = 0, len(items) - 1
    while start < end:
        total = items[start] + items[end]
        if total == target:
            return True
        if total < target:
            start += 1
        else:
            end -= 1
    return False


def majority_third_brute(values: Iterable[Any]) -> list[Any]:
    """Return the items occurring more than len // 3 times, by first appearance."""
    items = list(values)
    threshold = len(items) // 3
    result = []
    for index, item in enumerate(items):
        if item in items[:index]:
            continue
        if items.count(item) > threshold:
            result.append(item)
    return result


def majority_third(values: Iterable[Any]) -> list[Any]:
    """Return the items occurring more than len // 3 times.

    Uses the two-candidate extension of Boyer-Moore voting; at most two
    items can qualify.
    """
    items = list(values)
    candidate1: Any = None
    candidate2: Any = None
    count1 = count2 = 0

    for item in items:
        if count1 and item == candidate1:
            count1 += 1
        elif count2 and item == candidate2:
            count2 += 1
        elif count1 == 0:
            candidate1, count1 = item, 1
        elif count2 == 0:
            candidate2, count2 = item, 1
        else:
            count1 -= 1
            count2 -= 1

    threshold = len(items) // 3
    result = []
    for candidate, live in ((candidate1, count1), (candidate2, count2)):
        if live and candidate not in result and items.count(candidate) > threshold:
            result.append(candidate)
    return result


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's method).

    Raises ValueError for an empty input.
    """
    best: int | None = None
    running = 0
    for item in values:
        running += item
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def merge_sorted(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list, filling from the back."""
    merged: list[Any] = list(first) + [None] * len(second)
    i, j = len(first) - 1, len(second) - 1
    k = len(merged) - 1
    while i >= 0 and j >= 0:
        if first[i] > second[j]:
            merged[k] = first[i]
            i -= 1
        else:
            merged[k] = second[j]
            j -= 1
        k -= 1
    while j >= 0:
        merged[k] = second[j]
        j -= 1
        k -= 1
    return merged


def find_missing_brute(values: Sequence[int]) -> int:
    """Return the number from 1..len+1 that does not occur in *values*."""
    return next(number for number in range(1, len(values) + 2) if number not in values)


def find_missing(values: Sequence[int]) -> int:
    """Return the number from 1..len+1 missing from *values*, by summation."""
    n = len(values)
    return (n + 1) * (n + 2) // 2 - sum(values)


def product_except_self(values: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other items."""
    result = []
    prefix = 1
    for item in values:
        result.append(prefix)
        prefix *= item
    suffix = 1
    for index in reversed(range(len(values))):
        result[index] *= suffix
        suffix *= values[index]
    return result


def second_largest(values: Iterable[Any]) -> Any | None:
    """Return the largest item strictly below the maximum, or None if there is none."""
    largest: Any = None
    runner_up: Any = None
    for item in values:
        if largest is None or item > largest:
            runner_up, largest = largest, item
        elif item < largest and (runner_up is None or item > runner_up):
            runner_up = item
    return runner_up


def majority_element(values: Iterable[Any]) -> Any | None:
    """Return the item occurring more than len // 2 times, or None (Boyer-Moore)."""
    items = list(values)
    candidate: Any = None
    count = 0
    for item in items:
        if count == 0:
            candidate, count = item, 1
        elif item == candidate:
            count += 1
        else:
            count -= 1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit of one buy followed by one later sell, or 0."""
    lowest = float("inf")
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def rotate_left_one(values: Iterable[Any]) -> list[Any]:
    """Return a copy of *values* rotated one place to the left."""
    items = list(values)
    if items:
        items.append(items.pop(0))
    return items


def remove_duplicates(values: Iterable[Any]) -> list[Any]:
    """Return *values* with runs of equal neighbours collapsed to one item."""
    result: list[Any] = []
    for item in values:
        if not result or item != result[-1]:
            result.append(item)
    return result


def _reverse_range(items: list[Any], start: int, end: int) -> None:
    items[start : end + 1] = items[start : end + 1][::-1]


def rotate_left(values: Iterable[Any], places: int) -> list[Any]:
    """Return a copy of *values* rotated *places* to the left (three reversals).

    *places* must lie between 0 and the length of *values*.
    """
    items = list(values)
    if not 0 <= places <= len(items):
        raise ValueError(f"places must be between 0 and {len(items)}, got {places}")
    _reverse_range(items, 0, places - 1)
    _reverse_range(items, places, len(items) - 1)
    _reverse_range(items, 0, len(items) - 1)
    return items