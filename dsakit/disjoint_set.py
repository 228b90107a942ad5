"""Union-find over integer nodes with union by rank or by size."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the nodes ``0`` to ``n`` inclusive, so 1-based numbering works too.

    Finding a root compresses the path behind it.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside the set")

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        self._check(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def _attach(self, child: int, root: int) -> None:
        self._parent[child] = root
        self._size[root] += self._size[child]

    def union_by_rank(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the lower-ranked root under the other."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._rank[root_u] == self._rank[root_v]:
            self._attach(root_v, root_u)
            self._rank[root_u] += 1
        elif self._rank[root_u] < self._rank[root_v]:
            self._attach(root_u, root_v)
        else:
            self._attach(root_v, root_u)

    def union_by_size(self, u: int, v: int) -> None:
        """Join the sets of ``u`` and ``v``, hanging the smaller set under the larger."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return
        if self._size[root_u] < self._size[root_v]:
            self._attach(root_u, root_v)
        else:
            self._attach(root_v, root_u)

    def size_of(self, node: int) -> int:
        """Return the number of nodes in the set holding ``node``."""
        return self._size[self.find(node)]