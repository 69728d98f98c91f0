import itertools

import pytest

from dsakit.graphs import (
    INF,
    DisjointSet,
    Edge,
    Graph,
    bfs_order,
    color_graph,
    count_islands,
    dfs_order,
    floyd_warshall,
    format_distances,
    has_eulerian_path,
    is_connected,
    kruskal_mst,
    topological_sort,
)


@pytest.fixture
def sample_graph():
    g = Graph(4)
    for u, v in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        g.add_edge(u, v)
    return g


def test_graph_bfs_example(sample_graph):
    assert sample_graph.bfs(2) == [2, 0, 3, 1]


def test_graph_dfs_example(sample_graph):
    assert sample_graph.dfs(2) == [2, 0, 1, 3]


def test_graph_traversals_visit_each_once(sample_graph):
    for start in range(4):
        for order in (sample_graph.bfs(start), sample_graph.dfs(start)):
            assert order[0] == start
            assert len(order) == len(set(order))


def test_graph_rejects_bad_vertex(sample_graph):
    with pytest.raises(ValueError):
        sample_graph.add_edge(0, 4)
    with pytest.raises(ValueError):
        sample_graph.bfs(7)


def test_bfs_order_levels_nondecreasing():
    adjacency = [[1, 2], [3], [4], [5], [], []]
    order = bfs_order(adjacency)
    depth = {0: 0}
    for node in order:
        for nxt in adjacency[node]:
            depth.setdefault(nxt, depth[node] + 1)
    assert sorted(order) == list(range(6))
    assert [depth[n] for n in order] == sorted(depth[n] for n in order)


def test_dfs_order_goes_deep_first():
    adjacency = [[1, 2], [3], [], []]
    order = dfs_order(adjacency)
    assert order.index(3) < order.index(2)
    assert set(order) == {0, 1, 2, 3}


def test_orders_on_empty_and_unreachable():
    assert bfs_order([]) == []
    assert dfs_order([]) == []
    assert bfs_order([[], [0]]) == [0]


def test_topological_sort_respects_edges():
    adjacency = [[], [0], [3], [1], [0, 1], [0, 2]]
    order = topological_sort(adjacency)
    assert sorted(order) == list(range(6))
    for u, targets in enumerate(adjacency):
        for v in targets:
            assert order.index(u) < order.index(v)


def test_topological_sort_drops_cycle():
    order = topological_sort([[1], [2], [1]])
    assert order == [0]


EULER_PATH = [
    [0, 1, 1, 1, 0],
    [1, 0, 1, 0, 0],
    [1, 1, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [0, 0, 0, 1, 0],
]
EULER_CIRCUIT = [
    [0, 1, 1, 1, 1],
    [1, 0, 1, 0, 0],
    [1, 1, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [1, 0, 0, 1, 0],
]
NOT_EULERIAN = [
    [0, 1, 1, 1, 0],
    [1, 0, 1, 1, 0],
    [1, 1, 0, 0, 0],
    [1, 1, 0, 0, 1],
    [0, 0, 0, 1, 0],
]


def test_eulerian_examples():
    assert has_eulerian_path(EULER_PATH)
    assert has_eulerian_path(EULER_CIRCUIT)
    assert not has_eulerian_path(NOT_EULERIAN)


def test_disconnected_graph():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    assert not is_connected(matrix)
    assert not has_eulerian_path(matrix)
    assert is_connected(EULER_PATH)


FW_GRAPH = [
    [0, 5, INF, 10],
    [INF, 0, 3, INF],
    [INF, INF, 0, 1],
    [INF, INF, INF, 0],
]


def test_floyd_warshall_invariants():
    dist = floyd_warshall(FW_GRAPH)
    size = len(dist)
    for i, j in itertools.product(range(size), repeat=2):
        assert dist[i][j] <= FW_GRAPH[i][j]
    for i, j, k in itertools.product(range(size), repeat=3):
        if INF not in (dist[i][k], dist[k][j]):
            assert dist[i][j] <= dist[i][k] + dist[k][j]
    assert [dist[i][i] for i in range(size)] == [0] * size
    assert dist[3][0] == INF


def test_floyd_warshall_leaves_input_alone():
    original = [row[:] for row in FW_GRAPH]
    floyd_warshall(FW_GRAPH)
    assert FW_GRAPH == original


def test_floyd_warshall_requires_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_format_distances():
    assert format_distances([[0, INF], [INF, 0]]) == "0\t INF\t \nINF\t 0\t "


def _valid_coloring(colors, edges):
    return all(colors[a] != colors[b] for a, b in edges)


def test_color_graph_path_is_proper():
    edges = [(1, 2), (2, 3), (3, 4)]
    colors = color_graph(4, edges)
    assert set(colors) == {1, 2, 3, 4}
    assert all(1 <= c <= 3 for c in colors.values())
    assert _valid_coloring(colors, edges)


def test_color_graph_runs_out_of_colours():
    edges = [(1, 2), (2, 3), (1, 3)]
    colors = color_graph(3, edges)
    assert colors[3] == 0
    assert _valid_coloring({1: colors[1], 2: colors[2]}, [(1, 2)])


def test_color_graph_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        color_graph(3, [(1, 4)])


def test_disjoint_set_union_and_find():
    sets = DisjointSet(5)
    assert sets.union(1, 2) is True
    assert sets.union(3, 4) is True
    assert sets.find(1) == sets.find(2)
    assert sets.find(1) != sets.find(3)
    assert sets.union(2, 4) is True
    assert len({sets.find(v) for v in (1, 2, 3, 4)}) == 1
    assert sets.union(1, 3) is False


def test_kruskal_triangle():
    light = Edge(0, 1, 1)
    middle = Edge(1, 2, 2)
    heavy = Edge(0, 2, 3)
    chosen, cost = kruskal_mst(2, [heavy, middle, light])
    assert chosen == [light, middle]
    assert cost == light.weight + middle.weight


def test_kruskal_spanning_tree_shape():
    edges = [(0, 1, 4), (0, 2, 4), (1, 2, 2), (2, 3, 3), (2, 5, 2), (2, 4, 4), (3, 4, 3), (5, 4, 3)]
    chosen, cost = kruskal_mst(5, edges)
    assert len(chosen) == 5
    assert cost == sum(e.weight for e in chosen)
    sets = DisjointSet(5)
    for e in chosen:
        assert sets.union(e.u, e.v)
    weights = [e.weight for e in chosen]
    assert weights == sorted(weights)


def test_kruskal_rejects_bad_vertex():
    with pytest.raises(ValueError):
        kruskal_mst(2, [(0, 5, 1)])


def test_count_islands():
    grid = [
        ["1", "1", "0", "0", "0"],
        ["1", "1", "0", "0", "0"],
        ["0", "0", "1", "0", "0"],
        ["0", "0", "0", "1", "1"],
    ]
    assert count_islands(grid) == 3
    assert grid[0][0] == "1"


def test_count_islands_edge_cases():
    assert count_islands([]) == 0
    assert count_islands([[0, 0], [0, 0]]) == 0
    assert count_islands([[1, 1], [1, 1]]) == count_islands([["1"]])