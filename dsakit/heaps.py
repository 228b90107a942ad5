"""Binary max-heap, heap sort and heap-based selection queries."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


def _sift_down(items: list, index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def _sift_up(items: list, index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if items[index] <= items[parent]:
            return
        items[index], items[parent] = items[parent], items[index]
        index = parent


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the values arranged as a zero-based array max-heap."""
    items = list(values)
    for index in reversed(range(len(items) // 2)):
        _sift_down(items, index, len(items))
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using an in-place max-heap."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


class MaxHeap:
    """A priority queue that always yields its largest item first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = build_max_heap(values)

    def push(self, value: Any) -> None:
        """Add a value."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items))
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


def k_closest_points(points: Iterable[Sequence[int]], k: int) -> list[tuple[int, int]]:
    """Return the ``k`` points nearest the origin, nearest first."""
    if k < 0:
        raise ValueError("k must not be negative")
    pairs = [(x, y) for x, y in points]
    return heapq.nsmallest(k, pairs, key=lambda p: (p[0] * p[0] + p[1] * p[1], p))


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """Return the k-th smallest value (1-based) by keeping a max-heap of size k."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError("k must be between 1 and the number of values")
    heap = MaxHeap(items[:k])
    for value in items[k:]:
        if value < heap.peek():
            heap.pop()
            heap.push(value)
    return heap.peek()


def top_k_frequent(values: Iterable[Hashable], k: int) -> list[Hashable]:
    """Return the ``k`` most frequent values, most frequent first.

    Ties in frequency favour the larger value.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(values)
    ranked = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in ranked]