"""Classic comparison sorts, a random array generator and binary search."""

from __future__ import annotations

import random
from typing import Any, Iterable, List, Optional, Sequence


def random_array(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Return ``size`` random integers in the range 0..99."""
    if size <= 0:
        raise ValueError("array size must be positive")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(100) for _ in range(size)]


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy, swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for i in range(n - 1 - done):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy, shifting each item left into place."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy, selecting the minimum of the unsorted tail each pass."""
    items = list(values)
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy using top-down merge sort (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: List[Any], start: int, end: int) -> int:
    pivot = items[end]
    wall = start - 1
    for i in range(start, end):
        if items[i] < pivot:
            wall += 1
            items[wall], items[i] = items[i], items[wall]
    wall += 1
    items[wall], items[end] = items[end], items[wall]
    return wall


def quick_sort(values: Iterable[Any]) -> List[Any]:
    """Return a sorted copy using quicksort with the last element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return items


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if target == values[middle]:
            return middle
        if target < values[middle]:
            high = middle - 1
        else:
            low = middle + 1
    return None