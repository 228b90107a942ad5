import pytest

from dsakit.disjoint_set import DisjointSet
from dsakit.mst import kruskal_weight, largest_island, min_connections, prim_mst

PRIM_EDGES = [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 4, 4), (2, 3, 5), (3, 4, 1)]


def _weight_of(tree, edges):
    weights = {}
    for u, v, w in edges:
        weights[frozenset((u, v))] = min(w, weights.get(frozenset((u, v)), w))
    return sum(weights[frozenset(edge)] for edge in tree)


def test_kruskal_single_edge_example():
    assert kruskal_weight(7, [(1, 3, 5), (3, 1, 5)]) == 5


def test_kruskal_no_edges_is_zero():
    assert kruskal_weight(4, []) == 0


def test_kruskal_matches_prim_weight():
    tree = prim_mst(5, PRIM_EDGES)
    assert kruskal_weight(5, PRIM_EDGES) == _weight_of(tree, PRIM_EDGES)


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        kruskal_weight(3, [(0, 3, 1)])


def test_prim_builds_spanning_tree():
    tree = prim_mst(5, PRIM_EDGES)
    assert len(tree) == 4
    ds = DisjointSet(5)
    for u, v in tree:
        assert ds.find(u) != ds.find(v)
        ds.union_by_size(u, v)
    assert ds.size_of(0) == 5


def test_prim_edges_exist_in_graph():
    pairs = {frozenset((u, v)) for u, v, _ in PRIM_EDGES}
    assert all(frozenset(edge) in pairs for edge in prim_mst(5, PRIM_EDGES))


def test_prim_first_edge_is_cheapest_from_root():
    assert prim_mst(5, PRIM_EDGES)[0] == (0, 1)


def test_prim_only_covers_component_of_zero():
    tree = prim_mst(4, [(0, 1, 3), (2, 3, 1)])
    assert tree == [(0, 1)]


def test_prim_empty_graph():
    assert prim_mst(0, []) == []


def test_largest_island_example():
    grid = [[1, 1, 0, 0], [0, 1, 1, 0], [0, 0, 1, 0], [1, 0, 0, 0]]
    assert largest_island(grid) == 6


def test_largest_island_all_land():
    grid = [[1, 1], [1, 1]]
    assert largest_island(grid) == len(grid) * len(grid[0])


def test_largest_island_does_not_modify_input():
    grid = [[1, 0], [0, 1]]
    snapshot = [row[:] for row in grid]
    largest_island(grid)
    assert grid == snapshot


def test_largest_island_flip_joins_two_islands():
    grid = [[1, 0], [0, 1]]
    assert largest_island(grid) == 3


def test_min_connections_example_not_enough_cables():
    assert min_connections(7, [[0, 1], [1, 2], [2, 3], [3, 4], [4, 5]]) == -1


def test_min_connections_already_connected():
    assert min_connections(3, [[0, 1], [1, 2]]) == 0


def test_min_connections_uses_spare_cable():
    assert min_connections(4, [[0, 1], [0, 2], [1, 2]]) == 1


def test_min_connections_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        min_connections(2, [[0, 2]])