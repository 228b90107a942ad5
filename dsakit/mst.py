"""Minimum spanning trees and connectivity problems built on union-find."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from dsakit.disjoint_set import DisjointSet

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _check_vertex(node: int, vertex_count: int) -> None:
    if not 0 <= node < vertex_count:
        raise ValueError(f"vertex {node} is outside 0..{vertex_count - 1}")


def kruskal_weight(vertex_count: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the total weight of a minimum spanning forest of ``(u, v, weight)`` edges."""
    ordered = []
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        ordered.append((weight, u, v))
    ordered.sort()
    ds = DisjointSet(vertex_count)
    total = 0
    for weight, u, v in ordered:
        if ds.find(u) != ds.find(v):
            total += weight
            ds.union_by_size(u, v)
    return total


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest 4-connected area of 1s reachable by turning at most one 0 into 1."""
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    if any(len(row) != cols for row in cells):
        raise ValueError("grid rows must all have the same length")
    ds = DisjointSet(rows * cols)

    def neighbours(r: int, c: int):
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and cells[nr][nc] == 1:
                yield nr * cols + nc

    for r in range(rows):
        for c in range(cols):
            if cells[r][c] == 1:
                for adjacent in neighbours(r, c):
                    ds.union_by_size(r * cols + c, adjacent)

    best = 0
    for r in range(rows):
        for c in range(cols):
            if cells[r][c] == 1:
                continue
            roots = {ds.find(adjacent) for adjacent in neighbours(r, c)}
            best = max(best, 1 + sum(ds.size_of(root) for root in roots))
    for r in range(rows):
        for c in range(cols):
            if cells[r][c] == 1:
                best = max(best, ds.size_of(r * cols + c))
    return best


def min_connections(n: int, connections: Iterable[Sequence[int]]) -> int:
    """Return how many cables must be moved to connect all ``n`` computers, or -1.

    Only redundant cables inside already connected groups may be moved.
    """
    ds = DisjointSet(n)
    spare = 0
    for u, v in connections:
        _check_vertex(u, n)
        _check_vertex(v, n)
        if ds.find(u) == ds.find(v):
            spare += 1
        else:
            ds.union_by_size(u, v)
    components = sum(1 for node in range(n) if ds.find(node) == node)
    needed = components - 1
    return needed if spare >= needed else -1


def prim_mst(vertex_count: int, edges: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the ``(parent, node)`` edges of a minimum spanning tree grown from vertex 0.

    Edges are undirected ``(u, v, weight)`` triples; the result lists tree edges in the
    order they are added, and covers only the component of vertex 0.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    if vertex_count == 0:
        return []
    visited = [False] * vertex_count
    tree: list[tuple[int, int]] = []
    pending: list[tuple[int, int, int]] = [(0, 0, -1)]
    while pending:
        _, node, parent = heapq.heappop(pending)
        if visited[node]:
            continue
        visited[node] = True
        if parent != -1:
            tree.append((parent, node))
        for neighbour, weight in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(pending, (weight, neighbour, node))
    return tree