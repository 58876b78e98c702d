"""Graph traversals, shortest paths, topological orders and cycle detection."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from math import inf

__all__ = [
    "NegativeCycleError",
    "bfs",
    "dfs",
    "build_ratio_graph",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
    "topo_sort_kahn",
    "topo_sort_dfs",
    "add_undirected_edge",
    "has_undirected_cycle",
]

NO_PATH = -1


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


def _check_square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} outside 0..{size - 1}")


def bfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first order from ``start`` over an adjacency matrix (non-zero = edge)."""
    size = _check_square(matrix)
    _check_vertex(start, size)
    visited = [False] * size
    visited[start] = True
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour, connected in enumerate(matrix[node]):
            if connected and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                queue.append(neighbour)
    return order


def dfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first preorder from ``start``, neighbours taken in ascending order."""
    size = _check_square(matrix)
    _check_vertex(start, size)
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(size)))]
    while stack:
        node, pending = stack[-1]
        for neighbour in pending:
            if matrix[node][neighbour] and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append((neighbour, iter(range(size))))
                break
        else:
            stack.pop()
    return order


def build_ratio_graph(
    equations: Sequence[Sequence[str]], values: Sequence[float]
) -> dict[str, list[tuple[str, float]]]:
    """Graph of ``a / b = value`` equations, with reciprocal edges back."""
    if len(equations) != len(values):
        raise ValueError("equations and values must have the same length")
    graph: dict[str, list[tuple[str, float]]] = {}
    for (numerator, denominator), value in zip(equations, values):
        if value == 0:
            raise ValueError(f"ratio {numerator}/{denominator} must not be zero")
        graph.setdefault(numerator, []).append((denominator, value))
        graph.setdefault(denominator, []).append((numerator, 1.0 / value))
    return graph


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[float]:
    """Shortest distances from ``source`` over directed ``(u, v, weight)`` edges.

    Unreachable vertices get ``inf``; a reachable negative cycle raises
    NegativeCycleError.
    """
    _check_vertex(source, vertex_count)
    edge_list = [(u, v, w) for u, v, w in edges]
    for u, v, _ in edge_list:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
    dist: list[float] = [inf] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edge_list:
        if dist[u] != inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph contains a negative-weight cycle")
    return dist


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list[float]:
    """Shortest distances from ``source`` over a weighted adjacency matrix (0 = no edge)."""
    size = _check_square(matrix)
    _check_vertex(source, size)
    if any(weight < 0 for row in matrix for weight in row):
        raise ValueError("edge weights must not be negative")
    dist: list[float] = [inf] * size
    dist[source] = 0
    done = [False] * size
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if done[node]:
            continue
        done[node] = True
        for neighbour, weight in enumerate(matrix[node]):
            if weight and not done[neighbour] and distance + weight < dist[neighbour]:
                dist[neighbour] = distance + weight
                heapq.heappush(heap, (dist[neighbour], neighbour))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """All-pairs shortest distances; -1 marks a missing edge in and out.

    The input is left untouched and the given diagonal is kept as a starting value.
    """
    size = _check_square(matrix)
    dist = [list(row) for row in matrix]
    for via in range(size):
        via_row = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == NO_PATH:
                continue
            for target, onward in enumerate(via_row):
                if onward == NO_PATH:
                    continue
                candidate = to_via + onward
                if row[target] == NO_PATH or candidate < row[target]:
                    row[target] = candidate
    return dist


def _check_adjacency(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    for neighbours in adjacency:
        for node in neighbours:
            _check_vertex(node, size)
    return size


def topo_sort_kahn(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Topological order by repeatedly removing in-degree zero vertices.

    Vertices on or behind a cycle never reach in-degree zero and are left out.
    """
    size = _check_adjacency(adjacency)
    indegree = [0] * size
    for neighbours in adjacency:
        for node in neighbours:
            indegree[node] += 1
    queue = deque(node for node in range(size) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def topo_sort_dfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Topological order as reversed depth-first finishing order."""
    size = _check_adjacency(adjacency)
    visited = [False] * size
    finished: list[int] = []
    for root in range(size):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def add_undirected_edge(adjacency: Sequence[list[int]], u: int, v: int) -> None:
    """Record an edge between ``u`` and ``v`` in both adjacency lists."""
    _check_vertex(u, len(adjacency))
    _check_vertex(v, len(adjacency))
    adjacency[u].append(v)
    adjacency[v].append(u)


def has_undirected_cycle(adjacency: Sequence[Sequence[int]]) -> bool:
    """True when an undirected graph given as adjacency lists contains a cycle."""
    size = _check_adjacency(adjacency)
    visited = [False] * size
    for root in range(size):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, int, Iterator[int]]] = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, pending = stack[-1]
            for neighbour in pending:
                if neighbour == parent:
                    continue
                if visited[neighbour]:
                    return True
                visited[neighbour] = True
                stack.append((neighbour, node, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
    return False