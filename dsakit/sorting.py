"""Divide-and-conquer sorts."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list; equal items keep their order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, start: int, end: int) -> int:
    pivot = items[start]
    pivot_index = start + sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    items[start], items[pivot_index] = items[pivot_index], items[start]
    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while items[i] <= pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new ascending list, partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot_index = _partition(items, start, end)
        pending.append((pivot_index + 1, end))
        pending.append((start, pivot_index - 1))
    return items