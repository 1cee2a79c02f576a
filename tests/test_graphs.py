import math

import pytest

from algobook.graphs import (
    EdgeKind,
    bfs,
    classify_edges,
    cut_vertices,
    dfs_all,
    dfs_matrix,
    dfs_order,
    dijkstra,
    dijkstra_dense,
    euler_circuit,
    shortest_path,
    strongly_connected_components,
)

DIRECTED = [[1, 2], [3], [3, 4], [5], [5], [], [0]]

WEIGHTED = [
    [(4, 1), (1, 2)],
    [(1, 3)],
    [(2, 1), (7, 3)],
    [(3, 4)],
    [],
    [(1, 0)],
]


def _reachable(adj, start):
    return {v for v, d in enumerate(bfs(adj, start).distance) if d is not None}


def test_bfs_distances_respect_edges():
    result = bfs(DIRECTED, 0)
    assert result.distance[0] == 0
    assert result.parent[0] == 0
    for u, neighbours in enumerate(DIRECTED):
        if result.distance[u] is None:
            continue
        for v in neighbours:
            assert result.distance[v] <= result.distance[u] + 1
    assert result.distance[6] is None
    assert result.order[0] == 0
    assert len(result.order) == 6


def test_shortest_path_follows_parents():
    result = bfs(DIRECTED, 0)
    for v in range(6):
        path = shortest_path(result.parent, v)
        assert path[0] == v
        assert path[-1] == 0
        assert len(path) == result.distance[v] + 1
        for child, parent in zip(path, path[1:]):
            assert child in DIRECTED[parent]


def test_shortest_path_unreached_raises():
    result = bfs(DIRECTED, 0)
    with pytest.raises(ValueError):
        shortest_path(result.parent, 6)


def test_dfs_order_covers_reachable_once():
    order = dfs_order(DIRECTED, 0)
    assert order[0] == 0
    assert len(order) == len(set(order))
    assert set(order) == _reachable(DIRECTED, 0)


def test_dfs_all_covers_every_vertex():
    assert sorted(dfs_all(DIRECTED)) == list(range(len(DIRECTED)))


def test_dfs_matrix_matches_list_traversal():
    n = len(DIRECTED)
    matrix = [[v in DIRECTED[u] for v in range(n)] for u in range(n)]
    sorted_adj = [sorted(neighbours) for neighbours in DIRECTED]
    for start in range(n):
        assert dfs_matrix(matrix, start) == dfs_order(sorted_adj, start)


def test_dijkstra_variants_agree():
    for start in range(len(WEIGHTED)):
        assert dijkstra(WEIGHTED, start) == dijkstra_dense(WEIGHTED, start)


def test_dijkstra_distances_are_tight():
    dist = dijkstra(WEIGHTED, 0)
    assert dist[0] == 0
    assert dist[5] == math.inf
    for u, edges in enumerate(WEIGHTED):
        for weight, v in edges:
            assert dist[v] <= dist[u] + weight


def _component_count(adj, removed):
    seen = set()
    components = 0
    for v in range(len(adj)):
        if v == removed or v in seen:
            continue
        components += 1
        pruned = [[w for w in ns if w != removed] if u != removed else [] for u, ns in enumerate(adj)]
        seen |= _reachable(pruned, v)
    return components


def test_cut_vertices_match_brute_force():
    adj = [[1, 2], [0, 2], [0, 1, 3], [2, 4, 5], [3, 5], [3, 4, 6], [5]]
    base = _component_count(adj, None)
    expected = [v for v in range(len(adj)) if _component_count(adj, v) > base]
    assert cut_vertices(adj) == expected


def test_classify_back_edge():
    kinds = classify_edges([[1], [2], [0]], 0)
    assert kinds[2, 0] is EdgeKind.BACK
    assert kinds[0, 1] is EdgeKind.TREE


def test_classify_forward_and_cross_edges():
    assert classify_edges([[1, 2], [2], []], 0)[0, 2] is EdgeKind.FORWARD
    assert classify_edges([[1, 2], [], [1]], 0)[2, 1] is EdgeKind.CROSS


def test_classify_tree_edges_span_reachable():
    kinds = classify_edges(DIRECTED, 0)
    tree = [e for e, k in kinds.items() if k is EdgeKind.TREE]
    assert len(tree) == len(_reachable(DIRECTED, 0)) - 1


def test_euler_circuit_uses_every_edge_once():
    matrix = [[0] * 5 for _ in range(5)]
    for a, b in [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0)]:
        matrix[a][b] += 1
        matrix[b][a] += 1
    snapshot = [row[:] for row in matrix]
    circuit = euler_circuit(matrix, 0)
    assert matrix == snapshot
    assert circuit[0] == circuit[-1] == 0
    used = [[0] * 5 for _ in range(5)]
    for a, b in zip(circuit, circuit[1:]):
        used[a][b] += 1
        used[b][a] += 1
    assert used == snapshot


def test_scc_matches_mutual_reachability():
    adj = [[1], [2], [0, 3], [4], [5], [3], [5, 0]]
    components = strongly_connected_components(adj)
    reach = [_reachable(adj, v) for v in range(len(adj))]
    for u in range(len(adj)):
        for v in range(len(adj)):
            mutual = v in reach[u] and u in reach[v]
            assert (components[u] == components[v]) == mutual


def test_scc_of_dag_is_all_singletons():
    components = strongly_connected_components([[1, 2], [2], []])
    assert sorted(components) == [0, 1, 2]