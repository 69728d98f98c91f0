"""Graph traversals, shortest paths, colouring, spanning trees and grid flood fill."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = [
    "INF",
    "Graph",
    "bfs_order",
    "dfs_order",
    "topological_sort",
    "is_connected",
    "has_eulerian_path",
    "floyd_warshall",
    "format_distances",
    "color_graph",
    "DisjointSet",
    "Edge",
    "kruskal_mst",
    "count_islands",
]

INF = 99999
"""Distance used for vertices that are not connected."""


def _bfs(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    visited = [False] * len(adjacency)
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)
    return order


def _dfs(adjacency: Sequence[Iterable[int]], start: int) -> list[int]:
    visited = [False] * len(adjacency)
    visited[start] = True
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


class Graph:
    """Directed graph on vertices ``0 .. vertices-1`` stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Add a directed edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)

    def bfs(self, start: int) -> list[int]:
        """Return the breadth-first order of vertices reachable from ``start``."""
        self._check(start)
        return _bfs(self._adjacency, start)

    def dfs(self, start: int) -> list[int]:
        """Return the depth-first order of vertices reachable from ``start``."""
        self._check(start)
        return _dfs(self._adjacency, start)


def bfs_order(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Breadth-first order from vertex 0 over adjacency lists."""
    if not adjacency:
        return []
    return _bfs(adjacency, 0)


def dfs_order(adjacency: Sequence[Iterable[int]]) -> list[int]:
    """Depth-first order from vertex 0 over adjacency lists."""
    if not adjacency:
        return []
    return _dfs(adjacency, 0)


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Kahn's algorithm over adjacency lists.

    Vertices on or behind a cycle never reach in-degree zero and are left out.
    """
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for vertex in neighbours:
            indegree[vertex] += 1
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for vertex in adjacency[node]:
            indegree[vertex] -= 1
            if indegree[vertex] == 0:
                queue.append(vertex)
    return order


def _matrix_neighbours(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    return [[v for v, edge in enumerate(row) if edge] for row in matrix]


def is_connected(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if every vertex reaches every other along matrix edges."""
    neighbours = _matrix_neighbours(matrix)
    count = len(neighbours)
    return all(len(_dfs(neighbours, start)) == count for start in range(count))


def has_eulerian_path(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if the graph is connected with at most two odd-degree vertices."""
    if not is_connected(matrix):
        return False
    odd = sum(1 for row in matrix if sum(1 for edge in row if edge) % 2)
    return odd <= 2


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances; ``INF`` marks a missing edge."""
    dist = [list(row) for row in matrix]
    size = len(dist)
    if any(len(row) != size for row in dist):
        raise ValueError("distance matrix must be square")
    for k in range(size):
        for i in range(size):
            through_i = dist[i][k]
            if through_i == INF:
                continue
            for j in range(size):
                through_j = dist[k][j]
                if through_j != INF and dist[i][j] > through_i + through_j:
                    dist[i][j] = through_i + through_j
    return dist


def format_distances(distances: Iterable[Iterable[int]]) -> str:
    """Render a distance matrix, one row per line, writing ``INF`` for gaps."""
    return "\n".join(
        "".join(("INF" if d == INF else str(d)) + "\t " for d in row) for row in distances
    )


def color_graph(vertex_count: int, edges: Iterable[tuple[int, int]]) -> dict[int, int]:
    """Greedily colour vertices ``1 .. vertex_count`` with colours ``1 .. vertex_count-1``.

    Each vertex takes the lowest colour not used by a neighbour. When a vertex
    has no such colour it keeps colour 0 and colouring stops, so it and every
    later vertex are reported with colour 0.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    neighbours: dict[int, set[int]] = {v: set() for v in range(1, vertex_count + 1)}
    for a, b in edges:
        if a not in neighbours or b not in neighbours:
            raise ValueError(f"edge ({a}, {b}) names a vertex outside 1..{vertex_count}")
        neighbours[a].add(b)
        neighbours[b].add(a)
    palette = vertex_count - 1
    colors = dict.fromkeys(neighbours, 0)
    for vertex in range(1, vertex_count + 1):
        used = {colors[other] for other in neighbours[vertex]}
        choice = next((c for c in range(1, palette + 1) if c not in used), 0)
        colors[vertex] = choice
        if choice == 0:
            break
    return colors


class DisjointSet:
    """Union-find over the elements ``0 .. size``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size + 1))

    def find(self, v: int) -> int:
        """Return the root of the set holding ``v``."""
        while v != self._parent[v]:
            v = self._parent[v]
        return v

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; return False if they were already one."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if a == root_a:
            self._parent[a] = b
        elif b == root_b:
            self._parent[b] = a
        else:
            self._parent[root_a] = root_b
        return True


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge."""

    u: int
    v: int
    weight: int


def kruskal_mst(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]
) -> tuple[list[Edge], int]:
    """Kruskal's minimum spanning forest.

    Returns the chosen edges in order of selection and their total weight.
    Edges of equal weight keep their given order.
    """
    items = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    for edge in items:
        for vertex in (edge.u, edge.v):
            if not 0 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} is out of range")
    sets = DisjointSet(vertex_count)
    chosen = []
    for edge in sorted(items, key=lambda e: e.weight):
        if sets.find(edge.u) != sets.find(edge.v):
            chosen.append(edge)
            sets.union(edge.u, edge.v)
    return chosen, sum(edge.weight for edge in chosen)


def count_islands(grid: Sequence[Sequence[object]]) -> int:
    """Count 4-connected groups of land cells (``'1'`` or ``1``) in a grid."""
    land = {
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == "1" or cell == 1
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            i, j = stack.pop()
            for cell in ((i + 1, j), (i - 1, j), (i, j - 1), (i, j + 1)):
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)
    return islands