"""Backtracking searches: keypad words, queens, permutations, mazes, sudoku and more."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_MAZE_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def letter_combinations(digits: str) -> list[str]:
    """Return every word a phone keypad can spell for ``digits``, in keypad order."""
    for digit in digits:
        if digit not in KEYPAD:
            raise ValueError(f"not a keypad digit: {digit!r}")
    words: list[str] = []

    def extend(index: int, prefix: str) -> None:
        if index >= len(digits):
            words.append(prefix)
            return
        for letter in KEYPAD[digits[index]]:
            extend(index + 1, prefix + letter)

    extend(0, "")
    return words


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` queens as board rows of 'Q' and '-'."""
    if n < 0:
        raise ValueError("board size must not be negative")
    row_of_column: list[int] = []
    rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col >= n:
            solutions.append(
                [
                    "".join("Q" if queen_row == row else "-" for queen_row in row_of_column)
                    for row in range(n)
                ]
            )
            return
        for row in range(n):
            if row in rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            row_of_column.append(row)
            place(col + 1)
            row_of_column.pop()
            rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def string_permutations(text: str) -> list[str]:
    """Return all arrangements of ``text`` produced by successive swaps, duplicates included."""
    chars = list(text)
    found: list[str] = []

    def permute(i: int) -> None:
        if i >= len(chars):
            found.append("".join(chars))
            return
        for j in range(i, len(chars)):
            chars[i], chars[j] = chars[j], chars[i]
            permute(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    permute(0)
    return found


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of D/L/R/U moves from the top-left to the bottom-right cell.

    Open cells hold 1; a cell is visited at most once per path.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        return []
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")
    rows = len(grid)
    if grid[0][0] != 1:
        return []
    visited = {(0, 0)}
    paths: list[str] = []

    def walk(i: int, j: int, route: str) -> None:
        if i == rows - 1 and j == cols - 1:
            paths.append(route)
            return
        for step, di, dj in _MAZE_MOVES:
            ni, nj = i + di, j + dj
            if (
                0 <= ni < rows
                and 0 <= nj < cols
                and grid[ni][nj] == 1
                and (ni, nj) not in visited
            ):
                visited.add((ni, nj))
                walk(ni, nj, route + step)
                visited.discard((ni, nj))

    walk(0, 0, "")
    return paths


def _sudoku_safe(grid: list[list[int]], value: int, i: int, j: int) -> bool:
    box_row, box_col = 3 * (i // 3), 3 * (j // 3)
    return not any(
        grid[i][k] == value
        or grid[k][j] == value
        or grid[box_row + k // 3][box_col + k % 3] == value
        for k in range(9)
    )


def _fill_sudoku(grid: list[list[int]]) -> bool:
    empty = next(
        ((i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == 0),
        None,
    )
    if empty is None:
        return True
    i, j = empty
    for value in range(1, 10):
        if _sudoku_safe(grid, value, i, j):
            grid[i][j] = value
            if _fill_sudoku(grid):
                return True
            grid[i][j] = 0
    return False


def solve_sudoku(board: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of a 9x9 sudoku whose empty cells hold 0.

    Raises ValueError if the board is malformed or has no solution.
    """
    grid = [list(row) for row in board]
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("sudoku board must be 9x9")
    if any(not isinstance(cell, int) or not 0 <= cell <= 9 for row in grid for cell in row):
        raise ValueError("sudoku cells must be integers from 0 to 9")
    if not _fill_sudoku(grid):
        raise ValueError("sudoku has no solution")
    return grid


def count_beautiful_arrangements(n: int) -> int:
    """Count permutations of 1..n where each value and its position divide one another."""
    if n < 0:
        raise ValueError("n must not be negative")
    used = [False] * (n + 1)

    def count(position: int) -> int:
        if position > n:
            return 1
        total = 0
        for value in range(1, n + 1):
            if not used[value] and (position % value == 0 or value % position == 0):
                used[value] = True
                total += count(position + 1)
                used[value] = False
        return total

    return count(1)


def _require_positive(values: Iterable[int]) -> None:
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return combinations of candidates, each usable any number of times, summing to target."""
    pool = list(candidates)
    _require_positive(pool)
    results: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        if remaining < 0:
            return
        for index, value in enumerate(pool[start:], start):
            chosen.append(value)
            search(index, remaining - value)
            chosen.pop()

    search(0, target)
    return results


def combination_sum2(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return distinct combinations using each candidate at most once, summing to target."""
    pool = sorted(candidates)
    _require_positive(pool)
    results: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(chosen))
            return
        if remaining < 0:
            return
        previous = None
        for index, value in enumerate(pool[start:], start):
            if index > start and value == previous:
                continue
            previous = value
            chosen.append(value)
            search(index + 1, remaining - value)
            chosen.pop()

    search(0, target)
    return results


def _sort_and_count(items: list) -> tuple[list, int]:
    if len(items) <= 1:
        return items, 0
    mid = len(items) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged = []
    count = left_count + right_count
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            count += len(left) - i
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Iterable[int]) -> int:
    """Count pairs i < j with values[i] > values[j]."""
    return _sort_and_count(list(values))[1]


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    if n < 0:
        raise ValueError("n must not be negative")
    found: list[str] = []

    def build(open_left: int, close_left: int, prefix: str) -> None:
        if open_left <= 0 and close_left <= 0:
            found.append(prefix)
            return
        if open_left > 0:
            build(open_left - 1, close_left, prefix + "(")
        if close_left > open_left:
            build(open_left, close_left - 1, prefix + ")")

    build(n, n, "")
    return found