"""Disjoint-set forest with path compression and two union strategies."""

from __future__ import annotations

__all__ = ["DisjointSet"]


class DisjointSet:
    """Disjoint sets over the nodes 0..n inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} outside 0..{len(self._parent) - 1}")

    def find(self, node: int) -> int:
        """Representative of the set containing ``node``; compresses the path."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union_by_rank(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; on equal rank ``u``'s root wins.

        Returns False when they were already in the same set.
        """
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_v] < self._rank[root_u]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; on equal size ``u``'s root wins.

        Returns False when they were already in the same set.
        """
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            root_u, root_v = root_v, root_u
        self._parent[root_v] = root_u
        self._size[root_u] += self._size[root_v]
        return True