# src/picturecross/puzzlegen/safety.py
from typing import Optional, Tuple

from ..grid import Matrix, FILLED_CELL, EMPTY_CELL, count_filled

XY = Tuple[int, int]


def ensure_non_degenerate(grid: Matrix) -> Optional[XY]:
    """
    Post-generation correction. Mutates `grid` in place.
    - No filled cells  -> centre (size//2, size//2) becomes filled.
    - All cells filled -> (0, 0) becomes empty.
    The filled count is taken once, before either fix, so a 1x1 grid is
    flipped by exactly one rule. Returns the corrected (x, y), or None.
    """
    size = len(grid)
    filled = count_filled(grid)
    fixed: Optional[XY] = None
    if filled == 0:
        c = size // 2
        grid[c][c] = FILLED_CELL
        fixed = (c, c)
    if filled == size * size:
        grid[0][0] = EMPTY_CELL
        fixed = (0, 0)
    return fixed
