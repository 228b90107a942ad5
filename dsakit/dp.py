"""Dynamic programming: 0/1 knapsack and longest-common-subsequence problems."""

from __future__ import annotations

from collections.abc import Iterable


def knapsack(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Return the best total value of items, each taken at most once, within ``capacity``."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    if capacity <= 0:
        return 0
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        previous = best.copy()
        for room in range(weight, capacity + 1):
            best[room] = max(previous[room], previous[room - weight] + value)
    return best[capacity]


def _lcs_table(a: str, b: str) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, char_a in enumerate(a, 1):
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def longest_common_subsequence(a: str, b: str) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def lcs_string(a: str, b: str) -> str:
    """Return one longest common subsequence of ``a`` and ``b``."""
    table = _lcs_table(a, b)
    chars = []
    i, j = len(a), len(b)
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def longest_common_substring(a: str, b: str) -> int:
    """Return the length of the longest run of characters found in both strings."""
    best = 0
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0] * (len(b) + 1)
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def shortest_common_supersequence_length(a: str, b: str) -> int:
    """Return the length of the shortest string having both ``a`` and ``b`` as subsequences."""
    return len(a) + len(b) - longest_common_subsequence(a, b)


def min_insert_delete_operations(a: str, b: str) -> int:
    """Return the fewest single-character deletions plus insertions turning ``a`` into ``b``."""
    common = longest_common_subsequence(a, b)
    return (len(a) - common) + (len(b) - common)