"""Solutions to a first set of practice problems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby


def basketball_wins(a: Sequence[int], d: int) -> int:
    """Most rounds a team can win against an enemy of power ``d``.

    A team is led by its strongest remaining player. Weaker players are
    added from the bottom until the team's total power (the leader's power
    times the team size) exceeds ``d``.
    """
    powers = sorted(a)
    low = 0
    wins = 0
    for high in range(len(powers) - 1, -1, -1):
        total = powers[high]
        while total <= d and low < high:
            low += 1
            total += powers[high]
        if total > d:
            wins += 1
    return wins


def min_recolor(s: str, k: int) -> int:
    """Fewest 'W' cells to repaint so that ``s`` has ``k`` consecutive 'B' cells."""
    if not 1 <= k <= len(s):
        raise ValueError("k must be between 1 and len(s)")
    whites = s[:k].count("W")
    best = whites
    for leaving, entering in zip(s, s[k:]):
        whites += (entering == "W") - (leaving == "W")
        best = min(best, whites)
    return best


def max_distinct_split(s: str) -> int:
    """Largest sum of distinct letters of both parts over splits into two non-empty parts."""
    prefix: list[int] = []
    seen: set[str] = set()
    for ch in s:
        seen.add(ch)
        prefix.append(len(seen))
    suffix: list[int] = []
    seen = set()
    for ch in reversed(s):
        seen.add(ch)
        suffix.append(len(seen))
    suffix.reverse()
    return max((prefix[i - 1] + suffix[i] for i in range(1, len(s))), default=0)


def min_announcement_cost(p: int, capacities: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest way to tell news to everyone, starting with one direct call.

    Calling a resident directly costs ``p``. Resident ``i`` who knows the
    news can pass it to up to ``capacities[i]`` others at ``costs[i]`` each.
    """
    if len(capacities) != len(costs):
        raise ValueError("capacities and costs must have the same length")
    n = len(capacities)
    offers = sorted([(p, n + 1), *zip(costs, capacities)])
    informed = 1
    total = p
    for cost, capacity in offers:
        if informed >= n:
            break
        remaining = n - informed
        if capacity <= remaining:
            informed += capacity
            total += cost * capacity
        else:
            informed = n
            total += cost * remaining
    return total


def min_lcm_pair(n: int) -> tuple[int, int]:
    """Two positive numbers summing to ``n`` whose least common multiple is smallest."""
    largest = 1
    factor = 2
    while factor * factor <= n:
        if n % factor == 0:
            largest = n // factor
            break
        factor += 1
    return largest, n - largest


def min_changes(a: Sequence[int], x: int) -> int:
    """Fewest times a value within ``x`` of every element so far must be reset."""
    if not a:
        raise ValueError("a must not be empty")
    low = high = a[0]
    changes = 0
    for value in a[1:]:
        high = max(high, value)
        low = min(low, value)
        if high - low > 2 * x:
            changes += 1
            low = high = value
    return changes


def _longest_runs(values: Sequence[int]) -> dict[int, int]:
    runs: dict[int, int] = {}
    for value, group in groupby(values):
        runs[value] = max(runs.get(value, 0), sum(1 for _ in group))
    return runs


def longest_equal_run(a: Sequence[int], b: Sequence[int]) -> int:
    """Longest run of one value obtainable by merging ``a`` and ``b``.

    It is the best sum, over all values, of that value's longest run in
    ``a`` and its longest run in ``b``.
    """
    runs_a = _longest_runs(a)
    runs_b = _longest_runs(b)
    return max(
        (runs_a.get(v, 0) + runs_b.get(v, 0) for v in runs_a.keys() | runs_b.keys()),
        default=0,
    )


def kill_order(a: Sequence[int], k: int) -> list[int]:
    """One-based order in which monsters with health ``a`` die under hits of ``k``.

    The monster with the most health left is hit each time, the earlier
    one on ties.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    remainders = [value % k or k for value in a]
    order = sorted(range(len(a)), key=remainders.__getitem__, reverse=True)
    return [index + 1 for index in order]