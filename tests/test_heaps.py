import random

import pytest

from dsakit.heaps import (
    MaxHeap,
    build_max_heap,
    heap_sort,
    k_closest_points,
    kth_smallest,
    top_k_frequent,
)

HEAP_INPUT = [35, 50, 25, 18, 16, 12, 11, 14, 17, 18, 48, 19, 67, 56, 46, 3, 100]


def _is_max_heap(items):
    return all(
        items[(i - 1) // 2] >= items[i] for i in range(1, len(items))
    )


def test_max_heap_pops_in_descending_order():
    heap = MaxHeap()
    for value in HEAP_INPUT:
        heap.push(value)
    assert len(heap) == len(HEAP_INPUT)
    assert heap.peek() == max(HEAP_INPUT)
    popped = [heap.pop() for _ in range(len(HEAP_INPUT))]
    assert popped == sorted(HEAP_INPUT, reverse=True)
    assert len(heap) == 0


def test_max_heap_from_iterable():
    heap = MaxHeap([50, 30, 70, 40, 80])
    assert heap.pop() == 80
    assert heap.pop() == 70
    assert len(heap) == 3


def test_max_heap_empty_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_build_max_heap_property():
    items = build_max_heap(HEAP_INPUT)
    assert _is_max_heap(items)
    assert sorted(items) == sorted(HEAP_INPUT)


@pytest.mark.parametrize("values", [[5, 2, 3, 1], HEAP_INPUT, [], [7], [2, 2, 1, 2]])
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


def test_heap_sort_random():
    rng = random.Random(7)
    values = [rng.randint(-100, 100) for _ in range(200)]
    assert heap_sort(values) == sorted(values)


def test_k_closest_points_source_example():
    points = [[1, 3], [-2, 2], [5, 8], [0, 1]]
    assert k_closest_points(points, 2) == [(0, 1), (-2, 2)]


def test_k_closest_points_all_and_none():
    points = [[1, 3], [-2, 2], [5, 8], [0, 1]]
    everything = k_closest_points(points, 10)
    distances = [x * x + y * y for x, y in everything]
    assert distances == sorted(distances)
    assert len(everything) == len(points)
    assert k_closest_points(points, 0) == []


def test_k_closest_points_negative_k():
    with pytest.raises(ValueError):
        k_closest_points([[0, 0]], -1)


def test_kth_smallest_every_k():
    values = [6, 7, 3, 11, 1, 5]
    for k in range(1, len(values) + 1):
        assert kth_smallest(values, k) == sorted(values)[k - 1]


@pytest.mark.parametrize("k", [0, 7])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([6, 7, 3, 11, 1, 5], k)


def test_top_k_frequent_source_example():
    assert top_k_frequent([1, 1, 1, 2, 3, 3, 4, 4, 5], 2) == [1, 4]


def test_top_k_frequent_counts_are_non_increasing():
    values = [1, 1, 1, 2, 3, 3, 4, 4, 5]
    result = top_k_frequent(values, 5)
    counts = [values.count(v) for v in result]
    assert counts == sorted(counts, reverse=True)
    assert sorted(result) == sorted(set(values))


def test_top_k_frequent_negative_k():
    with pytest.raises(ValueError):
        top_k_frequent([1], -2)