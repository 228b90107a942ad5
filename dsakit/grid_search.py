"""Breadth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _copy_grid(grid: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _neighbours(r: int, c: int, rows: int, cols: int):
    for dr, dc in _DIRECTIONS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def distance_to_nearest_zero(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return, for each cell, the number of steps to the nearest cell holding 0.

    Raises ValueError if the matrix holds no 0.
    """
    grid = _copy_grid(matrix)
    if not grid or not grid[0]:
        return [[] for _ in grid]
    rows, cols = len(grid), len(grid[0])
    dist: list[list[int | None]] = [[None] * cols for _ in range(rows)]
    queue = deque()
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 0:
                dist[r][c] = 0
                queue.append((r, c))
    if not queue:
        raise ValueError("matrix holds no zero")
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if dist[nr][nc] is None:
                dist[nr][nc] = dist[r][c] + 1
                queue.append((nr, nc))
    return dist  # type: ignore[return-value]


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the region around (row, col) recoloured.

    The region is the 4-connected set of cells sharing the start cell's colour.
    """
    result = _copy_grid(image)
    rows = len(result)
    cols = len(result[0]) if rows else 0
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError("start cell is outside the image")
    initial = result[row][col]
    result[row][col] = color
    if initial == color:
        return result
    queue = deque([(row, col)])
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if result[nr][nc] == initial:
                result[nr][nc] = color
                queue.append((nr, nc))
    return result


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until every fresh orange (1) is rotten, spreading from 2s.

    Returns -1 if some fresh orange can never rot.
    """
    cells = _copy_grid(grid)
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    queue = deque(
        (r, c, 0) for r, row in enumerate(cells) for c, cell in enumerate(row) if cell == 2
    )
    minutes = 0
    while queue:
        r, c, time = queue.popleft()
        minutes = time
        for nr, nc in _neighbours(r, c, rows, cols):
            if cells[nr][nc] == 1:
                cells[nr][nc] = 2
                queue.append((nr, nc, time + 1))
    if any(cell == 1 for row in cells for cell in row):
        return -1
    return minutes


def capture_surrounded_regions(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a board where only 'O' cells connected to the border stay 'O'.

    Every other cell becomes 'X'.
    """
    cells = _copy_grid(board)
    rows = len(cells)
    cols = len(cells[0]) if rows else 0
    kept: set[tuple[int, int]] = {
        (r, c)
        for r in range(rows)
        for c in range(cols)
        if cells[r][c] == "O" and (r in (0, rows - 1) or c in (0, cols - 1))
    }
    queue = deque(kept)
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if (nr, nc) not in kept and cells[nr][nc] == "O":
                kept.add((nr, nc))
                queue.append((nr, nc))
    return [["O" if (r, c) in kept else "X" for c in range(cols)] for r in range(rows)]