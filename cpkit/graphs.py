"""Graph algorithms over adjacency lists and edge lists.

Vertices are the integers ``0..n-1``. Unreachable distances are
``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

INF = math.inf


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; False if already together."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._rank[x] < self._rank[y]:
            x, y = y, x
        self._parent[y] = x
        if self._rank[x] == self._rank[y]:
            self._rank[x] += 1
        return True


def bellman_ford(n: int, src: int, edges: Iterable[tuple[int, int, float]]) -> list[float]:
    """Single-source shortest paths allowing negative edge weights."""
    edges = list(edges)
    dist: list[float] = [INF] * n
    dist[src] = 0
    for _ in range(n - 1):
        for u, v, w in edges:
            if dist[u] != INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    return dist


def find_bridges(adj: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Edges of an undirected graph whose removal disconnects it (Tarjan)."""
    n = len(adj)
    tin: list[int | None] = [None] * n
    low = [0] * n
    timer = 0
    bridges: list[tuple[int, int]] = []
    for start in range(n):
        if tin[start] is not None:
            continue
        tin[start] = low[start] = timer
        timer += 1
        stack = [(start, None, iter(adj[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v == parent:
                    continue
                if tin[v] is not None:
                    low[u] = min(low[u], tin[v])
                else:
                    tin[v] = low[v] = timer
                    timer += 1
                    stack.append((v, u, iter(adj[v])))
                    break
            else:
                stack.pop()
                if parent is not None:
                    low[parent] = min(low[parent], low[u])
                    if low[u] > tin[parent]:
                        bridges.append((parent, u))
    return bridges


def dijkstra(n: int, src: int, adj: Sequence[Iterable[tuple[int, float]]]) -> list[float]:
    """Single-source shortest paths for non-negative weights."""
    dist: list[float] = [INF] * n
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adj[u]:
            if dist[v] > d + w:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def floyd_warshall(dist: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a weight matrix (``inf`` = no edge)."""
    result = [list(row) for row in dist]
    for k, through in enumerate(result):
        for row in result:
            to_k = row[k]
            if to_k == INF:
                continue
            for j, from_k in enumerate(through):
                if from_k != INF and to_k + from_k < row[j]:
                    row[j] = to_k + from_k
    return result


def _preorder(adj: Sequence[Iterable[int]], start: int, seen: list[bool]) -> list[int]:
    seen[start] = True
    order = [start]
    stack = [iter(adj[start])]
    while stack:
        for v in stack[-1]:
            if not seen[v]:
                seen[v] = True
                order.append(v)
                stack.append(iter(adj[v]))
                break
        else:
            stack.pop()
    return order


def dfs(adj: Sequence[Iterable[int]], start: int) -> list[int]:
    """Vertices reachable from ``start`` in depth-first preorder."""
    return _preorder(adj, start, [False] * len(adj))


def bfs(adj: Sequence[Iterable[int]], start: int) -> list[int]:
    """Vertices reachable from ``start`` in breadth-first order."""
    seen = [False] * len(adj)
    seen[start] = True
    order = []
    queue = deque([start])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                queue.append(v)
    return order


def kosaraju(n: int, adj: Sequence[Iterable[int]]) -> list[list[int]]:
    """Strongly connected components of a directed graph."""
    seen = [False] * n
    finished: list[int] = []
    for start in range(n):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not seen[v]:
                    seen[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                finished.append(u)

    reverse: list[list[int]] = [[] for _ in range(n)]
    for u in range(n):
        for v in adj[u]:
            reverse[v].append(u)

    seen = [False] * n
    return [_preorder(reverse, u, seen) for u in reversed(finished) if not seen[u]]


def kruskal(n: int, edges: Iterable[tuple[float, int, int]]) -> float:
    """Total weight of a minimum spanning forest; edges are ``(w, u, v)``."""
    sets = DisjointSet(n)
    return sum(w for w, u, v in sorted(edges) if sets.union(u, v))


def topo_sort(n: int, adj: Sequence[Iterable[int]]) -> list[int]:
    """Kahn's topological order; vertices on a cycle are left out."""
    in_degree = [0] * n
    for neighbours in adj:
        for v in neighbours:
            in_degree[v] += 1
    queue = deque(u for u in range(n) if in_degree[u] == 0)
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            in_degree[v] -= 1
            if in_degree[v] == 0:
                queue.append(v)
    return order