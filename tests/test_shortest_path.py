import pytest

from dsakit.shortest_path import (
    UNREACHABLE_DISTANCE,
    bellman_ford,
    dag_shortest_paths,
    dijkstra,
    find_cheapest_price,
    minimum_effort_path,
    network_delay_time,
    shortest_path_binary_matrix,
    unit_distance_shortest_paths,
)

BF_EDGES = [[0, 1, -1], [0, 2, 4], [1, 2, 3], [1, 3, 2], [2, 1, 1], [3, 2, 5]]

DIJKSTRA_EDGES = [
    [0, 1, 4],
    [0, 2, 1],
    [1, 2, 2],
    [1, 3, 5],
    [2, 3, 2],
    [2, 4, 3],
    [3, 4, 1],
]


def _satisfies_triangle(dist, edges, unreachable):
    return all(
        dist[u] == unreachable or dist[v] <= dist[u] + w for u, v, w in edges
    )


def test_bellman_ford_source_example_invariants():
    dist = bellman_ford(5, BF_EDGES, 0)
    assert dist[0] == 0
    assert dist[4] == UNREACHABLE_DISTANCE
    assert _satisfies_triangle(dist, BF_EDGES, UNREACHABLE_DISTANCE)


def test_bellman_ford_single_edge():
    assert bellman_ford(2, [[0, 1, 7]], 0) == [0, 7]


def test_bellman_ford_negative_cycle_raises():
    with pytest.raises(ValueError):
        bellman_ford(3, [[0, 1, 1], [1, 2, -3], [2, 1, 1]], 0)


def test_bellman_ford_bad_vertex_raises():
    with pytest.raises(ValueError):
        bellman_ford(2, [[0, 5, 1]], 0)


def test_binary_matrix_blocked_start():
    assert shortest_path_binary_matrix([[1, 0, 0], [1, 1, 0], [1, 0, 1]]) == -1


def test_binary_matrix_single_cell():
    assert shortest_path_binary_matrix([[0]]) == 1


def test_binary_matrix_diagonal_step():
    assert shortest_path_binary_matrix([[0, 1], [1, 0]]) == 2


def test_binary_matrix_blocked_goal():
    assert shortest_path_binary_matrix([[0, 0], [0, 1]]) == -1


def test_binary_matrix_not_square_raises():
    with pytest.raises(ValueError):
        shortest_path_binary_matrix([[0, 0, 0], [0, 0, 0]])


def test_cheapest_price_source_example():
    flights = [[0, 2, 200], [0, 1, 200], [2, 1, 500]]
    assert find_cheapest_price(3, flights, 0, 2, 2) == 200


def test_cheapest_price_respects_stop_limit():
    flights = [[0, 1, 100], [1, 2, 100], [0, 2, 500]]
    assert find_cheapest_price(3, flights, 0, 2, 0) == 500
    assert find_cheapest_price(3, flights, 0, 2, 1) == 200


def test_cheapest_price_unreachable():
    assert find_cheapest_price(3, [[0, 1, 10]], 0, 2, 5) == -1


def test_cheapest_price_same_city():
    assert find_cheapest_price(2, [[0, 1, 10]], 1, 1, 0) == 0


def test_dijkstra_agrees_with_bellman_ford():
    assert dijkstra(5, DIJKSTRA_EDGES, 0) == bellman_ford(5, DIJKSTRA_EDGES, 0)


def test_dijkstra_unreachable_is_minus_one():
    dist = dijkstra(3, [[0, 1, 3]], 0)
    assert dist == [0, 3, -1]


def test_dijkstra_negative_weight_raises():
    with pytest.raises(ValueError):
        dijkstra(2, [[0, 1, -1]], 0)


def test_network_delay_source_example():
    times = [[2, 1, 1], [2, 3, 1], [3, 4, 1]]
    assert network_delay_time(times, 4, 2) == 2


def test_network_delay_unreachable():
    assert network_delay_time([[1, 2, 1]], 3, 1) == -1


def test_network_delay_bad_start_raises():
    with pytest.raises(ValueError):
        network_delay_time([[1, 2, 1]], 2, 3)


def test_minimum_effort_single_cell():
    assert minimum_effort_path([[42]]) == 0


def test_minimum_effort_flat_grid():
    assert minimum_effort_path([[5, 5, 5], [5, 5, 5]]) == 0


def test_minimum_effort_bounded_by_direct_route():
    heights = [[1, 2, 2], [3, 8, 2], [5, 3, 5]]
    effort = minimum_effort_path(heights)
    top_then_right = [1, 2, 2, 2, 5]
    route_cost = max(abs(a - b) for a, b in zip(top_then_right, top_then_right[1:]))
    assert 0 <= effort <= route_cost


def test_minimum_effort_ragged_raises():
    with pytest.raises(ValueError):
        minimum_effort_path([[1, 2], [3]])


def test_dag_agrees_with_bellman_ford_with_negative_weights():
    edges = [[0, 1, 5], [1, 2, -3], [0, 2, 4], [2, 3, 2]]
    assert dag_shortest_paths(4, edges, 0) == bellman_ford(4, edges, 0)


def test_dag_source_example_matches_dijkstra():
    edges = [[0, 1, 4], [1, 2, 5], [0, 1, 7]]
    assert dag_shortest_paths(3, edges, 0) == dijkstra(3, edges, 0)


def test_dag_cycle_raises():
    with pytest.raises(ValueError):
        dag_shortest_paths(2, [[0, 1, 1], [1, 0, 1]], 0)


def test_unit_distance_matches_weighted_dijkstra():
    edges = [[0, 1], [1, 4], [2, 3], [2, 4], [3, 4]]
    weighted = [[u, v, 1] for u, v in edges] + [[v, u, 1] for u, v in edges]
    assert unit_distance_shortest_paths(5, edges, 1) == dijkstra(5, weighted, 1)


def test_unit_distance_unreachable():
    assert unit_distance_shortest_paths(3, [[0, 1]], 0) == [0, 1, -1]


def test_unit_distance_bad_source_raises():
    with pytest.raises(ValueError):
        unit_distance_shortest_paths(2, [[0, 1]], 2)