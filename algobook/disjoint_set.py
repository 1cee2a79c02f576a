"""Union-find with path compression."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over ``0..size-1``; a set is named by its smallest root."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Join the sets of ``a`` and ``b``; False if they were already one set."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return False
        if a > b:
            self._parent[a] = b
        else:
            self._parent[b] = a
        return True