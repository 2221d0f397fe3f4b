"""Solutions to a second set of practice problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby
from operator import itemgetter


def max_beauty(arrays: Sequence[Sequence[int]]) -> int:
    """Largest sum of minimums after moving at most one element out of each array.

    Every smallest element is gathered into the array whose second
    smallest element is lowest; all other arrays keep their second smallest.
    """
    smallest: list[int] = []
    seconds: list[int] = []
    for array in arrays:
        ordered = sorted(array)
        if not ordered:
            raise ValueError("arrays must not be empty")
        smallest.append(ordered[0])
        if len(ordered) >= 2:
            seconds.append(ordered[1])
    if not seconds:
        raise ValueError("at least one array needs two or more elements")
    return min(smallest) + sum(seconds) - min(seconds)


def min_cost_permutation(n: int) -> list[int]:
    """Permutation of 0..n-1 whose largest XOR of neighbours is as small as possible."""
    if n < 1:
        raise ValueError("n must be positive")
    k = 0
    while 1 << (k + 1) <= n - 1:
        k += 1
    split = 1 << k
    return [*range(split - 1, -1, -1), *range(split, n)]


def min_ops_divisible(a: Sequence[int], k: int) -> int:
    """Fewest unit increments so that the product of ``a`` is divisible by ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    best = k - 1
    evens = 0
    for value in a:
        if value % 2 == 0:
            evens += 1
        remainder = value % k
        best = 0 if remainder == 0 else min(best, k - remainder)
    if k != 4:
        return best
    if evens >= 2:
        return 0
    if evens == 1:
        return min(best, 1)
    return min(best, 2)


def team_string(r: int, b: int) -> str:
    """Arrange ``r`` 'R' and ``b`` 'B' so the longest run of 'R' is shortest."""
    if r < 0 or b < 0:
        raise ValueError("counts must not be negative")
    exact, extra = divmod(r, b + 1)
    runs = ["R" * (exact + 1)] * extra + ["R" * exact] * (b + 1 - extra)
    return "B".join(runs)


def shuffle_shoes(sizes: Sequence[int]) -> list[int] | None:
    """One-based assignment where nobody gets their own shoes, or None.

    ``sizes`` is sorted; each student receives the shoes of another student
    of the same size. None when some size occurs only once.
    """
    result: list[int] = []
    for _, group in groupby(enumerate(sizes, start=1), key=itemgetter(1)):
        positions = [position for position, _ in group]
        if len(positions) == 1:
            return None
        result.extend(positions[1:] + positions[:1])
    return result


def count_vacations(a: Sequence[int], k: int, q: int) -> int:
    """Number of runs of at least ``k`` consecutive days with temperature at most ``q``."""
    if k < 1:
        raise ValueError("k must be positive")
    total = 0
    for fits, group in groupby(a, key=lambda temperature: temperature <= q):
        if not fits:
            continue
        length = sum(1 for _ in group)
        if length >= k:
            total += (length - k + 1) * (length - k + 2) // 2
    return total


def min_cost(s: str) -> int:
    """Fewest deletions from binary ``s`` so some rearrangement differs from ``s`` everywhere."""
    if set(s) - {"0", "1"}:
        raise ValueError("s must consist of '0' and '1' only")
    available = {"0": s.count("0"), "1": s.count("1")}
    for index, ch in enumerate(s):
        other = "1" if ch == "0" else "0"
        if available[other] == 0:
            return len(s) - index
        available[other] -= 1
    return 0


def max_wait(s: str, c: str) -> int:
    """Longest wait for green ('g') from a moment the cyclic light shows ``c``."""
    n = len(s)
    doubled = s + s
    best = 0
    i = 0
    while i < n:
        if doubled[i] == c:
            j = i
            while j < len(doubled) and doubled[j] != "g":
                j += 1
            best = max(best, j - i)
            i = j
        i += 1
    return best