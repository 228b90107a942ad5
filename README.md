# dsakit

Classic algorithms and data structures in plain Python, with no runtime
dependencies. Every function takes ordinary Python values (lists, tuples,
strings, nested lists for grids) and returns new values; inputs are not
modified, except where a docstring says a structure is relinked in place.

## Installation

```
pip install .
```

Install the test tools with `pip install .[test]`, then run the tests with `pytest`.

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.backtracking` | `letter_combinations`, `solve_n_queens`, `string_permutations`, `rat_in_maze`, `solve_sudoku`, `count_beautiful_arrangements`, `combination_sum`, `combination_sum2`, `count_inversions`, `generate_parentheses` |
| `dsakit.sorting` | `merge_sort` (stable), `quick_sort` (first-element pivot) |
| `dsakit.heaps` | `MaxHeap` (`push`, `pop`, `peek`, `len`), `build_max_heap`, `heap_sort`, `k_closest_points`, `kth_smallest`, `top_k_frequent` |
| `dsakit.bst` | `Node`, `insert`, `build`, `contains`, `preorder`, `inorder`, `postorder`, `level_order`, `minimum`, `maximum`, `delete`, `find_ceil`, `inorder_predecessor`, `to_doubly_linked_list`, `sorted_list_to_bst` |
| `dsakit.dp` | `knapsack`, `longest_common_subsequence`, `lcs_string`, `longest_common_substring`, `shortest_common_supersequence_length`, `min_insert_delete_operations` |
| `dsakit.graph` | `Graph` (`add_edge`, `add_weighted_edge`, `neighbours`, `weighted_neighbours`, `format_adjacency`, `format_weighted_adjacency`, `bfs_levels`, `dfs`, `has_cycle`, `topological_sort`); `dfs_of_graph`, `has_cycle_undirected` |
| `dsakit.grid_search` | `distance_to_nearest_zero`, `flood_fill`, `oranges_rotting`, `capture_surrounded_regions` |
| `dsakit.disjoint_set` | `DisjointSet` (`find`, `union_by_rank`, `union_by_size`, `size_of`) over nodes `0..n` |
| `dsakit.mst` | `kruskal_weight`, `prim_mst`, `largest_island`, `min_connections` |
| `dsakit.topological` | `can_finish`, `find_order`, `eventual_safe_nodes`, `kahn_topological_sort` |
| `dsakit.shortest_path` | `bellman_ford`, `dijkstra`, `dag_shortest_paths`, `unit_distance_shortest_paths`, `shortest_path_binary_matrix`, `find_cheapest_price`, `network_delay_time`, `minimum_effort_path` |

## Examples

```python
from dsakit.backtracking import letter_combinations, generate_parentheses
from dsakit.dp import longest_common_subsequence, knapsack
from dsakit.shortest_path import dijkstra

letter_combinations("23")[:3]                    # ['ad', 'ae', 'af']
generate_parentheses(2)                          # ['(())', '()()']
longest_common_subsequence("abcdgh", "acdghr")   # 5
knapsack([4, 5, 1], [1, 2, 3], 4)                # 3

edges = [(0, 1, 4), (0, 2, 1), (1, 2, 2), (1, 3, 5),
         (2, 3, 2), (2, 4, 3), (3, 4, 1)]
dijkstra(5, edges, 0)                            # [0, 4, 1, 3, 4]
```

```python
from dsakit.heaps import MaxHeap

heap = MaxHeap()
for value in (35, 50, 25, 100):
    heap.push(value)
heap.pop()      # 100
len(heap)       # 3
```

```python
from dsakit.disjoint_set import DisjointSet

ds = DisjointSet(7)
ds.union_by_size(1, 2)
ds.find(1) == ds.find(2)    # True
ds.size_of(2)               # 2
```

```python
from dsakit.graph import Graph

g = Graph()
g.add_edge(0, 1, False)
g.add_edge(1, 2, False)
g.topological_sort()        # [0, 1, 2]
g.bfs_levels(0)             # [[0], [1], [2]]
```

## Errors and sentinel values

Malformed input raises an exception instead of returning a status code:
`ValueError` for bad arguments (ragged grids, out-of-range vertices,
negative sizes, an unsolvable sudoku, a cycle where an acyclic graph is
required, a negative cycle in `bellman_ford`), and `IndexError` for an
empty `MaxHeap`, a `flood_fill` start cell outside the image, or a
`DisjointSet` node outside its range.

Where a sentinel is part of the problem's answer, it is returned:
`-1` for unreachable targets in `dijkstra`, `dag_shortest_paths`,
`unit_distance_shortest_paths`, `find_cheapest_price`,
`network_delay_time` and `shortest_path_binary_matrix`, for
`oranges_rotting` when some orange never rots, and for
`min_connections` when there are too few spare cables.
`bellman_ford` reports unreachable vertices as
`dsakit.shortest_path.UNREACHABLE_DISTANCE` (10**8). Search-tree queries
such as `find_ceil` and `inorder_predecessor` return `None` when there
is no answer.

## What it does not do

This is a library only: there is no command-line program, and nothing
is read from standard input or printed. Callers build inputs themselves
and format the returned values as they need; `Graph.format_adjacency`
and `Graph.format_weighted_adjacency` return text rather than printing it.