"""Kahn's algorithm and the course-scheduling and safe-state problems built on it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check(node: int, count: int) -> None:
    if not 0 <= node < count:
        raise ValueError(f"node {node} is outside 0..{count - 1}")


def _kahn(adjacency: Sequence[Sequence[int]]) -> list[int]:
    count = len(adjacency)
    indegree = [0] * count
    for targets in adjacency:
        for target in targets:
            _check(target, count)
            indegree[target] += 1
    queue = deque(node for node in range(count) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in adjacency[node]:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    return order


def _course_graph(
    num_courses: int, prerequisites: Iterable[Sequence[int]]
) -> list[list[int]]:
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        _check(course, num_courses)
        _check(required, num_courses)
        graph[required].append(course)
    return graph


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if every course can be taken; ``[a, b]`` means b comes before a."""
    return len(_kahn(_course_graph(num_courses, prerequisites))) == num_courses


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order for taking all courses, or an empty list if none exists."""
    order = _kahn(_course_graph(num_courses, prerequisites))
    return order if len(order) == num_courses else []


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, ascending, the nodes from which every path ends at a terminal node."""
    count = len(graph)
    reverse: list[list[int]] = [[] for _ in range(count)]
    for node, targets in enumerate(graph):
        for target in targets:
            _check(target, count)
            reverse[target].append(node)
    return sorted(_kahn(reverse))


def kahn_topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order of a graph given as index lists.

    Raises ValueError if the graph has a cycle.
    """
    order = _kahn(adjacency)
    if len(order) != len(adjacency):
        raise ValueError("graph has a cycle")
    return order