# src/picturecross/engine/hints.py
from typing import List, Sequence

from ..grid import FILLED_CELL, column


def line_clues(line: Sequence[int]) -> List[int]:
    """
    Lengths of consecutive filled runs, in order. A line with no filled
    cells reads as [0], the way nonogram clues print it.
    """
    runs: List[int] = []
    run = 0
    for v in line:
        if v == FILLED_CELL:
            run += 1
        elif run:
            runs.append(run)
            run = 0
    if run:
        runs.append(run)
    return runs or [0]


def row_clues(grid: Sequence[Sequence[int]]) -> List[List[int]]:
    return [line_clues(row) for row in grid]


def col_clues(grid: Sequence[Sequence[int]]) -> List[List[int]]:
    width = len(grid[0]) if grid else 0
    return [line_clues(column(grid, c)) for c in range(width)]
