"""Single-source shortest paths on weighted, unit-weight and grid graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

from dsakit.topological import kahn_topological_sort

UNREACHABLE_DISTANCE = 10**8
"""Distance that :func:`bellman_ford` reports for vertices it cannot reach."""

_FOUR_WAYS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_EIGHT_WAYS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def _check_vertex(node: int, vertex_count: int) -> None:
    if not 0 <= node < vertex_count:
        raise ValueError(f"vertex {node} is outside 0..{vertex_count - 1}")


def _weighted_adjacency(
    vertex_count: int, edges: Iterable[Sequence[int]]
) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append((v, weight))
    return adjacency


def _square_grid(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    cells = [list(row) for row in grid]
    if not cells or any(len(row) != len(cells) for row in cells):
        raise ValueError("grid must be square and not empty")
    return cells


def bellman_ford(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[int]:
    """Return distances from ``source`` along directed ``(u, v, weight)`` edges.

    Negative weights are allowed; unreachable vertices get ``UNREACHABLE_DISTANCE``.
    Raises ValueError if a negative cycle is reachable from ``source``.
    """
    _check_vertex(source, vertex_count)
    edge_list = [(u, v, weight) for u, v, weight in edges]
    for u, v, _ in edge_list:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
    dist: list[int | None] = [None] * vertex_count
    dist[source] = 0

    def relax() -> bool:
        changed = False
        for u, v, weight in edge_list:
            du = dist[u]
            if du is not None and (dist[v] is None or du + weight < dist[v]):
                dist[v] = du + weight
                changed = True
        return changed

    for _ in range(vertex_count - 1):
        if not relax():
            break
    if relax():
        raise ValueError("graph contains a negative cycle")
    return [UNREACHABLE_DISTANCE if d is None else d for d in dist]


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the cell count of the shortest 8-directional path of 0s from corner to corner.

    Returns -1 if there is no such path.
    """
    cells = _square_grid(grid)
    n = len(cells)
    if cells[0][0] != 0:
        return -1
    if n == 1:
        return 1
    seen = {(0, 0)}
    queue = deque([(1, 0, 0)])
    while queue:
        length, r, c = queue.popleft()
        for dr, dc in _EIGHT_WAYS:
            x, y = r + dr, c + dc
            if 0 <= x < n and 0 <= y < n and cells[x][y] == 0 and (x, y) not in seen:
                if x == n - 1 and y == n - 1:
                    return length + 1
                seen.add((x, y))
                queue.append((length + 1, x, y))
    return -1


def find_cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or -1.

    Flights are directed ``(from, to, price)`` triples.
    """
    _check_vertex(src, n)
    _check_vertex(dst, n)
    if k < 0:
        raise ValueError("k must not be negative")
    adjacency = _weighted_adjacency(n, flights)
    cost: list[int | None] = [None] * n
    cost[src] = 0
    queue = deque([(0, src, 0)])
    while queue:
        stops, node, spent = queue.popleft()
        if stops > k:
            continue
        for target, price in adjacency[node]:
            total = spent + price
            if cost[target] is None or total < cost[target]:
                cost[target] = total
                queue.append((stops + 1, target, total))
    result = cost[dst]
    return -1 if result is None else result


def dijkstra(vertex_count: int, edges: Iterable[Sequence[int]], source: int) -> list[int]:
    """Return distances from ``source`` along directed non-negative ``(u, v, weight)`` edges.

    Unreachable vertices get -1; a negative weight raises ValueError.
    """
    _check_vertex(source, vertex_count)
    adjacency = _weighted_adjacency(vertex_count, edges)
    if any(weight < 0 for targets in adjacency for _, weight in targets):
        raise ValueError("weights must not be negative")
    dist: list[int | None] = [None] * vertex_count
    dist[source] = 0
    pending = [(0, source)]
    while pending:
        d, node = heapq.heappop(pending)
        if d != dist[node]:
            continue
        for target, weight in adjacency[node]:
            total = d + weight
            if dist[target] is None or total < dist[target]:
                dist[target] = total
                heapq.heappush(pending, (total, target))
    return [-1 if d is None else d for d in dist]


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Return the time for a signal sent from node ``k`` to reach all nodes 1..n, or -1.

    ``times`` holds directed ``(u, v, delay)`` triples over nodes numbered from 1.
    """
    if not 1 <= k <= n:
        raise ValueError(f"node {k} is outside 1..{n}")
    edges = []
    for u, v, delay in times:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) leaves nodes 1..{n}")
        edges.append((u, v, delay))
    dist = dijkstra(n + 1, edges, k)[1:]
    if any(d == -1 for d in dist):
        return -1
    return max(dist)


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> int:
    """Return the smallest possible largest height step on a path across the grid.

    The path runs from the top-left to the bottom-right cell in four directions.
    """
    cells = [list(row) for row in heights]
    if not cells or not cells[0] or any(len(row) != len(cells[0]) for row in cells):
        raise ValueError("heights must be a non-empty rectangular grid")
    rows, cols = len(cells), len(cells[0])
    best = {(0, 0): 0}
    pending = [(0, 0, 0)]
    while pending:
        effort, r, c = heapq.heappop(pending)
        if r == rows - 1 and c == cols - 1:
            return effort
        if effort > best[(r, c)]:
            continue
        for dr, dc in _FOUR_WAYS:
            x, y = r + dr, c + dc
            if 0 <= x < rows and 0 <= y < cols:
                step = max(abs(cells[x][y] - cells[r][c]), effort)
                if step < best.get((x, y), step + 1):
                    best[(x, y)] = step
                    heapq.heappush(pending, (step, x, y))
    return -1


def dag_shortest_paths(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[int]:
    """Return distances from ``source`` in a directed acyclic graph, relaxing in topological order.

    Negative weights are allowed; unreachable vertices get -1.
    Raises ValueError if the graph has a cycle.
    """
    _check_vertex(source, vertex_count)
    adjacency = _weighted_adjacency(vertex_count, edges)
    order = kahn_topological_sort([[v for v, _ in targets] for targets in adjacency])
    dist: list[int | None] = [None] * vertex_count
    dist[source] = 0
    for node in order:
        d = dist[node]
        if d is None:
            continue
        for target, weight in adjacency[node]:
            if dist[target] is None or d + weight < dist[target]:
                dist[target] = d + weight
    return [-1 if d is None else d for d in dist]


def unit_distance_shortest_paths(
    vertex_count: int, edges: Iterable[Sequence[int]], source: int
) -> list[int]:
    """Return edge counts from ``source`` in an undirected graph of ``(u, v)`` pairs.

    Unreachable vertices get -1.
    """
    _check_vertex(source, vertex_count)
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        adjacency[v].append(u)
    dist = [-1] * vertex_count
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if dist[neighbour] == -1:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist