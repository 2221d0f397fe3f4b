"""Solutions to a second set of short contest problems."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

_DATE_DIGITS = Counter({0: 3, 2: 2, 1: 1, 3: 1, 5: 1})


def _is_perfect_square(value: int) -> bool:
    if value < 0:
        return False
    root = math.isqrt(value)
    return root * root == value


def first_valid_prefix(a: Sequence[int]) -> int:
    """Length of the shortest prefix holding the digits of 01.03.2025.

    Returns 0 when no prefix holds three 0s, two 2s and one each of 1, 3, 5.
    """
    seen: Counter[int] = Counter()
    for position, digit in enumerate(a, start=1):
        if digit in _DATE_DIGITS:
            seen[digit] += 1
        if all(seen[d] >= need for d, need in _DATE_DIGITS.items()):
            return position
    return 0


def is_reachable(k: int) -> bool:
    """Whether position ``k`` can be the last one, i.e. ``k - 1`` is a multiple of 3."""
    return (k - 1) % 3 == 0


def square_free_prefix_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no prefix sum a perfect square, or None."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if n == 1 or _is_perfect_square(total):
        return None
    perm = [2, 1, *range(3, n + 1)]
    prefix = 0
    for i in range(n - 1):
        prefix += perm[i]
        if _is_perfect_square(prefix):
            perm[i], perm[i + 1] = perm[i + 1], perm[i]
            prefix = prefix - perm[i + 1] + perm[i]
    return perm


def segment_values(a: Sequence[int]) -> list[int]:
    """Sorted distinct values collected from ``a``, always including 0."""
    return sorted({0, *a})


def can_make_smaller(s: str, k: int) -> bool:
    """Whether ``s`` can end up smaller than its reverse using at most ``k`` swaps."""
    reverse = s[::-1]
    if s < reverse:
        return True
    if s == reverse and len(set(s)) == 1:
        return False
    return k >= 1


def min_length(s: str) -> int:
    """Shortest length reachable by merging two equal adjacent letters repeatedly."""
    if any(first == second for first, second in zip(s, s[1:])):
        return 1
    return len(s)


def is_square(l: int, r: int, d: int, u: int) -> bool:
    """Whether the four side lengths, taken by absolute value, are all equal."""
    return abs(l) == abs(r) == abs(d) == abs(u)


def max_dash_subsequences(s: str) -> int:
    """Most "-_-" subsequences after rearranging the characters of ``s``."""
    if len(s) < 3:
        return 0
    dashes = s.count("-")
    underscores = len(s) - dashes
    left = dashes // 2
    right = dashes - left
    return left * right * underscores


def max_teams(a: Sequence[int], x: int) -> int:
    """Most teams whose size times weakest member's skill reaches ``x``."""
    count = 0
    size = 0
    for skill in sorted(a, reverse=True):
        if skill >= x:
            count += 1
            continue
        size += 1
        if skill * size >= x:
            count += 1
            size = 0
    return count


def max_last_side(a: Sequence[int]) -> int:
    """Largest possible final side after merging all sides of ``a``."""
    return sum(a) - (len(a) - 1)


def xor_triangle_partner(x: int) -> int | None:
    """Smallest ``y`` in 1..x-1 such that x, y and x ^ y form a triangle, or None."""
    for y in range(1, x):
        z = x ^ y
        if z > 0 and x + y > z and x + z > y and y + z > x:
            return y
    return None