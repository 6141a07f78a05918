"""Graph traversals, Prim's minimum spanning tree and grid distances."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

Edge = tuple[int, int, int]


class Graph:
    """Directed graph over vertices ``0 .. vertices - 1`` stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertices}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, v: int, w: int) -> None:
        """Add a directed edge from ``v`` to ``w``."""
        self._check(v)
        self._check(w)
        self._adjacency[v].append(w)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in depth-first (pre-order) order."""
        self._check(start)
        visited: set[int] = set()
        order: list[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(
                neighbour
                for neighbour in reversed(self._adjacency[vertex])
                if neighbour not in visited
            )
        return order


def prim_mst(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning tree of a weighted adjacency matrix.

    Zero entries mean "no edge". Returns ``(parent, vertex, weight)`` for
    every vertex except the root ``0``, in vertex order.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    key: list[float] = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size):
        u = min((v for v in range(size) if not in_tree[v]), key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return [(parent[v], v, graph[v][parent[v]]) for v in range(1, size)]


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from every cell to the nearest zero, moving up, down, left or right."""
    if not mat:
        return []
    rows, cols = len(mat), len(mat[0])
    if any(len(row) != cols for row in mat):
        raise ValueError("matrix rows must all have the same length")
    dist: list[list[float]] = [
        [0 if cell == 0 else math.inf for cell in row] for row in mat
    ]
    for i in range(rows):
        for j in range(cols):
            if dist[i][j]:
                if i > 0:
                    dist[i][j] = min(dist[i][j], dist[i - 1][j] + 1)
                if j > 0:
                    dist[i][j] = min(dist[i][j], dist[i][j - 1] + 1)
    for i in range(rows - 1, -1, -1):
        for j in range(cols - 1, -1, -1):
            if i < rows - 1:
                dist[i][j] = min(dist[i][j], dist[i + 1][j] + 1)
            if j < cols - 1:
                dist[i][j] = min(dist[i][j], dist[i][j + 1] + 1)
    if any(math.isinf(cell) for row in dist for cell in row):
        raise ValueError("matrix contains no zero")
    return [[int(cell) for cell in row] for row in dist]