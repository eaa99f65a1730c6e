"""Disjoint Set Union (Union-Find) over the integers ``0 .. size-1``.

Array-backed forest with union by rank and iterative path compression.
Operations are nearly O(1) amortized.
"""

from __future__ import annotations

from typing import List


class UnionFind:
    """Partition of ``range(size)`` into disjoint sets.

    Every element starts as its own singleton set (``parent[i] == i``,
    ``rank[i] == 0``).
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"UnionFind size must be non-negative, got {size}.")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self._set_count = size

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set, compressing the path."""
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # compress
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets containing ``x`` and ``y``.

        Returns:
            True if two distinct sets were merged, False if already joined.
        """
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] < self.rank[ry]:
            rx, ry = ry, rx
        self.parent[ry] = rx
        if self.rank[rx] == self.rank[ry]:
            self.rank[rx] += 1
        self._set_count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently in the partition."""
        return self._set_count

    def __len__(self) -> int:
        return len(self.parent)
