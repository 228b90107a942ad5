"""Classic algorithms and data structures: backtracking, sorting, heaps, search trees, DP and graphs."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "bst",
    "disjoint_set",
    "dp",
    "graph",
    "grid_search",
    "heaps",
    "mst",
    "shortest_path",
    "sorting",
    "topological",
]