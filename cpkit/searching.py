"""Searching and array scanning routines."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``arr``, or -1 if absent."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def max_subarray_sum(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous subarray (Kadane)."""
    if not nums:
        raise ValueError("max_subarray_sum() needs at least one number")
    best = current = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def next_greater(nums: Sequence[int]) -> list[int]:
    """For each element, the first later element that is larger, else -1."""
    result = [-1] * len(nums)
    waiting: list[int] = []
    for index, value in enumerate(nums):
        while waiting and nums[waiting[-1]] < value:
            result[waiting.pop()] = value
        waiting.append(index)
    return result


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Best total value of a 0/1 selection whose weight fits ``capacity``."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]