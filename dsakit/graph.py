"""Adjacency-list graphs with traversal, cycle detection and topological ordering."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterator, Sequence
from typing import Any


class Graph:
    """A graph over hashable nodes, keeping plain and weighted edges in separate lists.

    Traversals, cycle detection and topological sorting use the plain edges.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}
        self._weighted: dict[Hashable, list[tuple[Hashable, Any]]] = {}

    def add_edge(self, u: Hashable, v: Hashable, bidirectional: bool) -> None:
        """Add an edge from ``u`` to ``v``, and back again if ``bidirectional``."""
        self._adjacency.setdefault(u, []).append(v)
        if bidirectional:
            self._adjacency.setdefault(v, []).append(u)

    def add_weighted_edge(
        self, u: Hashable, v: Hashable, weight: Any, bidirectional: bool
    ) -> None:
        """Add a weighted edge from ``u`` to ``v``, and back again if ``bidirectional``."""
        self._weighted.setdefault(u, []).append((v, weight))
        if bidirectional:
            self._weighted.setdefault(v, []).append((u, weight))

    def neighbours(self, node: Hashable) -> list[Hashable]:
        """Return the targets of the plain edges leaving ``node``, in insertion order."""
        return list(self._adjacency.get(node, ()))

    def weighted_neighbours(self, node: Hashable) -> list[tuple[Hashable, Any]]:
        """Return ``(target, weight)`` pairs of the weighted edges leaving ``node``."""
        return list(self._weighted.get(node, ()))

    def format_adjacency(self) -> str:
        """Render the plain adjacency list, one ``node: n1 n2 ...`` line per node."""
        return "\n".join(
            f"{node}: " + " ".join(str(n) for n in targets)
            for node, targets in self._adjacency.items()
        )

    def format_weighted_adjacency(self) -> str:
        """Render the weighted adjacency list as ``node: (target, weight)  ...`` lines."""
        return "\n".join(
            f"{node}: " + "  ".join(f"({target}, {weight})" for target, weight in pairs)
            for node, pairs in self._weighted.items()
        )

    def _nodes(self) -> list[Hashable]:
        nodes: dict[Hashable, None] = {}
        for node, targets in self._adjacency.items():
            nodes[node] = None
            for target in targets:
                nodes[target] = None
        return list(nodes)

    def bfs_levels(self, source: Hashable) -> list[list[Hashable]]:
        """Return the nodes reachable from ``source``, grouped by distance in edges."""
        visited = {source}
        level = [source]
        levels: list[list[Hashable]] = []
        while level:
            levels.append(level)
            following = []
            for node in level:
                for neighbour in self._adjacency.get(node, ()):
                    if neighbour not in visited:
                        visited.add(neighbour)
                        following.append(neighbour)
            level = following
        return levels

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Return the nodes reachable from ``source`` in depth-first preorder."""
        visited = {source}
        order = [source]
        stack: list[Iterator[Hashable]] = [iter(self._adjacency.get(source, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        return order

    def has_cycle(self) -> bool:
        """Return True if the plain edges, taken as undirected, contain a cycle."""
        undirected: dict[Hashable, set[Hashable]] = {node: set() for node in self._nodes()}
        for node, targets in self._adjacency.items():
            for target in targets:
                undirected[node].add(target)
                undirected[target].add(node)
        parent: dict[Hashable, Hashable | None] = {}
        for start in undirected:
            if start in parent:
                continue
            parent[start] = None
            queue = deque([start])
            while queue:
                node = queue.popleft()
                for neighbour in undirected[node]:
                    if neighbour not in parent:
                        parent[neighbour] = node
                        queue.append(neighbour)
                    elif parent[node] != neighbour or neighbour == node:
                        return True
        return False

    def topological_sort(self) -> list[Hashable]:
        """Return the nodes so that every plain edge points forward.

        Raises ValueError if the directed edges contain a cycle.
        """
        order: list[Hashable] = []
        finished: set[Hashable] = set()
        active: set[Hashable] = set()
        for start in self._nodes():
            if start in finished:
                continue
            active.add(start)
            stack = [(start, iter(self._adjacency.get(start, ())))]
            while stack:
                node, targets = stack[-1]
                for target in targets:
                    if target in active:
                        raise ValueError("graph has a cycle")
                    if target not in finished:
                        active.add(target)
                        stack.append((target, iter(self._adjacency.get(target, ()))))
                        break
                else:
                    stack.pop()
                    active.discard(node)
                    finished.add(node)
                    order.append(node)
        order.reverse()
        return order


def _check_indices(adjacency: Sequence[Sequence[int]]) -> None:
    count = len(adjacency)
    for targets in adjacency:
        for target in targets:
            if not 0 <= target < count:
                raise ValueError(f"neighbour {target} is not a vertex")


def dfs_of_graph(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the depth-first preorder from vertex 0 of a graph given as index lists."""
    if not adjacency:
        return []
    _check_indices(adjacency)
    visited = [False] * len(adjacency)
    visited[0] = True
    order = [0]
    stack: list[Iterator[int]] = [iter(adjacency[0])]
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


def has_cycle_undirected(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return True if an undirected graph given as index lists contains a cycle.

    Every vertex is checked, so disconnected components are covered; an edge listed
    twice between the same pair counts as a cycle.
    """
    _check_indices(adjacency)
    parent: list[int | None] = [None] * len(adjacency)
    visited = [False] * len(adjacency)
    for start in range(len(adjacency)):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    parent[neighbour] = node
                    queue.append(neighbour)
                elif parent[node] != neighbour:
                    return True
    return False