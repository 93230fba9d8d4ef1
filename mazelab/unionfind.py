"""Weighted quick-union structure for tracking connected components."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the integers ``0 .. n-1``."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._tree_size = [1] * n
        self.node_count = n
        self.connection_count = 0

    def _root(self, p: int) -> int:
        while p != self._parent[p]:
            p = self._parent[p]
        return p

    def connected(self, p: int, q: int) -> bool:
        """Return whether ``p`` and ``q`` are in the same set."""
        return self._root(p) == self._root(q)

    def connect(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        i = self._root(p)
        j = self._root(q)
        if i == j:
            return
        if self._tree_size[i] < self._tree_size[j]:
            self._parent[i] = j
            self._tree_size[j] += self._tree_size[i]
        else:
            self._parent[j] = i
            self._tree_size[i] += self._tree_size[j]
        self.connection_count += 1