"""Classic comparison sorts.

Every sort function takes any iterable and returns a new sorted list.
The input is left unchanged. ``partition`` is the one exception: it
works in place on the list it is given.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with bubble sort, stopping early once a pass makes no swap."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and key < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


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


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by recursively splitting in halves and merging them."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) + 1) // 2
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Lomuto partition of ``items[low:high + 1]`` around ``items[high]``.

    Elements smaller than the pivot end up before it. Returns the pivot's
    final index.
    """
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort with quicksort using the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(result, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the minimum of the unsorted part forward."""
    result = list(items)
    for i in range(len(result) - 1):
        min_index = min(range(i, len(result)), key=result.__getitem__)
        if min_index != i:
            result[i], result[min_index] = result[min_index], result[i]
    return result