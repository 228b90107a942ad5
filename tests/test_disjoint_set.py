import pytest

from dsakit.disjoint_set import DisjointSet


def test_fresh_nodes_are_their_own_roots():
    ds = DisjointSet(5)
    assert [ds.find(node) for node in range(6)] == list(range(6))
    assert all(ds.size_of(node) == 1 for node in range(6))


def test_union_by_rank_equal_ranks_keeps_first_root():
    ds = DisjointSet(7)
    ds.union_by_rank(1, 2)
    assert ds.find(2) == 1
    assert ds.find(1) == 1


def test_union_by_rank_attaches_lower_rank_tree():
    ds = DisjointSet(7)
    ds.union_by_rank(1, 2)
    ds.union_by_rank(3, 1)
    assert ds.find(3) == 1
    assert ds.size_of(3) == 3


def test_union_by_size_attaches_smaller_set():
    ds = DisjointSet(7)
    ds.union_by_size(4, 5)
    ds.union_by_size(6, 4)
    assert ds.find(6) == 4
    assert ds.size_of(5) == 3


def test_union_by_size_tie_keeps_first_root():
    ds = DisjointSet(3)
    ds.union_by_size(2, 3)
    assert ds.find(3) == 2


def test_union_within_same_set_changes_nothing():
    ds = DisjointSet(4)
    ds.union_by_size(1, 2)
    ds.union_by_size(2, 1)
    assert ds.size_of(1) == 2
    assert ds.find(1) == ds.find(2)


def test_chain_of_unions_connects_everything():
    ds = DisjointSet(6)
    for u, v in zip(range(6), range(1, 7)):
        ds.union_by_size(u, v)
    roots = {ds.find(node) for node in range(7)}
    assert len(roots) == 1
    assert ds.size_of(0) == 7


def test_separate_sets_have_different_roots():
    ds = DisjointSet(6)
    ds.union_by_rank(1, 2)
    ds.union_by_rank(3, 4)
    assert ds.find(1) != ds.find(3)
    assert ds.find(1) == ds.find(2)
    assert ds.find(3) == ds.find(4)


def test_out_of_range_node_raises():
    ds = DisjointSet(3)
    with pytest.raises(IndexError):
        ds.find(4)
    with pytest.raises(IndexError):
        ds.union_by_size(-1, 0)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-1)