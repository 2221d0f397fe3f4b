import math
import random

from cpkit.graphs import (
    DisjointSet,
    bellman_ford,
    bfs,
    dfs,
    dijkstra,
    find_bridges,
    floyd_warshall,
    kosaraju,
    kruskal,
    topo_sort,
)


def _random_weighted(n, m, seed):
    rng = random.Random(seed)
    edges = [(rng.randrange(n), rng.randrange(n), rng.randint(0, 20)) for _ in range(m)]
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
    return edges, adj


def _undirected(n, pairs):
    adj = [[] for _ in range(n)]
    for u, v in pairs:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def test_disjoint_set_union_and_find():
    sets = DisjointSet(5)
    assert sets.union(0, 1) is True
    assert sets.union(3, 4) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(3) == sets.find(4)
    assert sets.find(0) != sets.find(3)
    assert sets.union(1, 4) is True
    assert len({sets.find(i) for i in range(5)}) == 2


def test_bellman_ford_negative_edge():
    edges = [(0, 1, 4), (0, 2, 5), (2, 1, -3)]
    assert bellman_ford(3, 0, edges) == [0, 2, 5]


def test_bellman_ford_unreachable_is_inf():
    dist = bellman_ford(3, 0, [(0, 1, 7)])
    assert dist[1] == 7
    assert dist[2] == math.inf


def test_dijkstra_agrees_with_bellman_ford():
    for seed in range(5):
        edges, adj = _random_weighted(8, 20, seed)
        for src in range(8):
            assert dijkstra(8, src, adj) == bellman_ford(8, src, edges)


def test_floyd_warshall_agrees_with_dijkstra():
    n = 7
    edges, adj = _random_weighted(n, 18, 99)
    matrix = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0
    for u, v, w in edges:
        matrix[u][v] = min(matrix[u][v], w)
    snapshot = [list(row) for row in matrix]
    result = floyd_warshall(matrix)
    assert matrix == snapshot
    for src in range(n):
        assert result[src] == dijkstra(n, src, adj)


def test_bridges_on_path_and_triangle():
    path = _undirected(3, [(0, 1), (1, 2)])
    assert {frozenset(e) for e in find_bridges(path)} == {
        frozenset((0, 1)),
        frozenset((1, 2)),
    }
    triangle = _undirected(3, [(0, 1), (1, 2), (2, 0)])
    assert find_bridges(triangle) == []


def test_bridge_between_two_triangles():
    adj = _undirected(6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])
    assert [frozenset(e) for e in find_bridges(adj)] == [frozenset((2, 3))]


def test_bridges_in_disconnected_graph():
    adj = _undirected(4, [(0, 1), (2, 3)])
    assert {frozenset(e) for e in find_bridges(adj)} == {
        frozenset((0, 1)),
        frozenset((2, 3)),
    }


def test_bfs_on_chain_and_levels():
    chain = [[1], [2], [3], []]
    assert bfs(chain, 0) == list(range(4))
    tree = [[1, 2], [3], [4], [], []]
    order = bfs(tree, 0)
    assert set(order[:3]) == {0, 1, 2}
    assert set(order) == set(range(5))


def test_dfs_reaches_exactly_the_reachable_set():
    adj = [[1], [2], [0], [4], []]
    order = dfs(adj, 0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2]
    assert dfs(adj, 3) == [3, 4]


def test_dfs_goes_deep_first():
    tree = [[1, 2], [3], [], []]
    order = dfs(tree, 0)
    assert order.index(3) < order.index(2)


def test_kosaraju_components():
    adj = [[1], [2], [0, 3], [4], []]
    components = kosaraju(5, adj)
    assert sorted(sorted(c) for c in components) == [[0, 1, 2], [3], [4]]


def test_kosaraju_partitions_vertices():
    _, weighted = _random_weighted(10, 25, 7)
    adj = [[v for v, _ in nbrs] for nbrs in weighted]
    components = kosaraju(10, adj)
    flat = [v for comp in components for v in comp]
    assert sorted(flat) == list(range(10))


def test_kruskal_tree_weight_is_sum():
    edges = [(4, 0, 1), (2, 1, 2), (9, 2, 3)]
    assert kruskal(4, edges) == sum(w for w, _, _ in edges)


def test_kruskal_triangle_drops_heaviest():
    assert kruskal(3, [(3, 0, 1), (1, 1, 2), (2, 0, 2)]) == 3


def test_topo_sort_respects_edges():
    adj = [[1, 2], [3], [3], [4], []]
    order = topo_sort(5, adj)
    assert sorted(order) == list(range(5))
    position = {v: i for i, v in enumerate(order)}
    for u, nbrs in enumerate(adj):
        for v in nbrs:
            assert position[u] < position[v]


def test_topo_sort_cycle_is_left_out():
    adj = [[1], [2], [1], []]
    order = topo_sort(4, adj)
    assert sorted(order) == [0, 3]