"""Solutions to a first set of short contest problems."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import reduce
from operator import or_


def pluralize(word: str) -> str:
    """Replace the two-letter ending of ``word`` (such as "us") with "i"."""
    if len(word) < 2:
        raise ValueError("word must have at least two characters")
    return word[:-2] + "i"


def min_bench_length(n: int, m: int, k: int) -> int:
    """Smallest longest bench run so that ``n`` rows of ``m`` desks seat ``k``.

    A row whose longest run of occupied desks is ``length`` can hold
    ``length * (m // (length + 1)) + m % (length + 1)`` participants.
    """
    low, high = 0, k
    while low < high:
        mid = (low + high) // 2
        per_row = mid * (m // (mid + 1)) + m % (mid + 1)
        if n * per_row >= k:
            high = mid
        else:
            low = mid + 1
    return low


def coin_transform(n: int) -> int:
    """Most coins obtainable by repeatedly splitting a coin worth more than 3.

    A coin of value ``x > 3`` splits into two coins of value ``x // 4``.
    """
    if n < 3:
        return 1
    levels = 0
    while n > 3:
        n //= 4
        levels += 1
    return 1 << levels


def can_sort_single(a: Sequence[int], b: int) -> bool:
    """Whether ``a`` can be made non-decreasing by replacing some ``a[i]`` with ``b - a[i]``."""
    if not a:
        raise ValueError("a must not be empty")
    keep_ok = flip_ok = True
    for prev, cur in zip(a, a[1:]):
        keep_ok, flip_ok = (
            (keep_ok and prev <= cur) or (flip_ok and b - prev <= cur),
            (keep_ok and prev <= b - cur) or (flip_ok and b - prev <= b - cur),
        )
    return keep_ok or flip_ok


def can_sort_multi(a: Sequence[int], b: Sequence[int]) -> bool:
    """Whether ``a`` can be made non-decreasing by replacing some ``a[i]`` with ``b[j] - a[i]``.

    Each position may be changed at most once, with any ``b[j]``.
    """
    if not a:
        raise ValueError("a must not be empty")
    if not b:
        raise ValueError("b must not be empty")
    b_min, b_max = min(b), max(b)
    keep = a[0]
    flip = b_min - a[0]
    for value in a[1:]:
        new_keep = value if min(keep, flip) <= value else math.inf
        low, high = b_min - value, b_max - value
        new_flip = math.inf
        for previous in (keep, flip):
            if previous != math.inf:
                candidate = max(previous, low)
                if candidate <= high:
                    new_flip = min(new_flip, candidate)
        keep, flip = new_keep, new_flip
    return min(keep, flip) != math.inf


def lock_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n for the lock puzzle, or None when ``n`` is even."""
    if n % 2 == 0:
        return None
    return [2 * i % n + 1 for i in range(n)]


def min_mex_operations(a: Sequence[int]) -> int:
    """Operations needed to turn ``a`` into all zeros by MEX replacement.

    0 if everything is already zero, 2 if a zero sits strictly inside the
    array, otherwise 1.
    """
    if all(value == 0 for value in a):
        return 0
    if any(value == 0 for value in a[1:-1]):
        return 2
    return 1


def mex_or_sequence(n: int, x: int) -> list[int]:
    """A sequence of ``n`` values whose bitwise OR is ``x`` with maximal MEX."""
    if n <= 0:
        raise ValueError("n must be positive")
    if reduce(or_, range(n), 0) == x:
        return list(range(n))
    result: list[int] = []
    for i in range(n - 1):
        if i | x != x:
            break
        result.append(i)
    result.extend([x] * (n - len(result)))
    return result


def min_operations(n: int, k: int, p: int) -> int | None:
    """Fewest changes of at most ``p`` each to bring a sum of ``k`` to zero.

    Returns None when more than ``n`` changes would be needed.
    """
    if p <= 0:
        raise ValueError("p must be positive")
    total = -(-abs(k) // p)
    return total if total <= n else None