from enum import IntEnum
from typing import List

EMPTY_CELL = 0
FILLED_CELL = 1

# Solution grids are rows of 0/1; player grids are rows of CellState.
Matrix = List[List[int]]


class CellState(IntEnum):
    EMPTY = 0
    FILLED = 1
    CROSSED = 2


def empty_player_grid(size: int) -> List[List[CellState]]:
    return [[CellState.EMPTY for _ in range(size)] for _ in range(size)]


def count_filled(grid: Matrix) -> int:
    return sum(1 for row in grid for v in row if v == FILLED_CELL)


def density(grid: Matrix) -> float:
    total = sum(len(row) for row in grid)
    return count_filled(grid) / total if total else 0.0


def column(grid: Matrix, c: int) -> List[int]:
    return [row[c] for row in grid]


def filled_neighbors(grid: Matrix, x: int, y: int) -> int:
    """
    Count filled cells in the Moore neighbourhood of (x, y).
    Out-of-bounds neighbours simply do not count.
    """
    h = len(grid)
    w = len(grid[0]) if h else 0
    n = 0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and grid[ny][nx] == FILLED_CELL:
                n += 1
    return n


def solution_as_player_grid(grid: Matrix) -> List[List[CellState]]:
    return [[CellState.FILLED if v == FILLED_CELL else CellState.EMPTY for v in row] for row in grid]
