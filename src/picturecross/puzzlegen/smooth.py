# src/picturecross/puzzlegen/smooth.py
# Cellular-automata smoothing applied to mid-range densities only.

from ..grid import Matrix, FILLED_CELL, EMPTY_CELL, filled_neighbors

# Smoothing runs only when SMOOTH_MIN_DENSITY < target < SMOOTH_MAX_DENSITY.
SMOOTH_MIN_DENSITY = 0.3
SMOOTH_MAX_DENSITY = 0.8
SMOOTH_ITERATIONS = 2
SURVIVE_NEIGHBORS = 3  # filled cell stays filled with >= 3 filled neighbours
BIRTH_NEIGHBORS = 4    # empty cell becomes filled with >= 4 filled neighbours


def should_smooth(target_density: float) -> bool:
    return SMOOTH_MIN_DENSITY < target_density < SMOOTH_MAX_DENSITY


def smooth_step(grid: Matrix) -> Matrix:
    """One generation. Reads only `grid`, writes a fresh grid."""
    out: Matrix = []
    for y, row in enumerate(grid):
        new_row = []
        for x, v in enumerate(row):
            n = filled_neighbors(grid, x, y)
            if v == FILLED_CELL:
                new_row.append(FILLED_CELL if n >= SURVIVE_NEIGHBORS else EMPTY_CELL)
            else:
                new_row.append(FILLED_CELL if n >= BIRTH_NEIGHBORS else EMPTY_CELL)
        out.append(new_row)
    return out


def smooth_grid(grid: Matrix, iterations: int = SMOOTH_ITERATIONS) -> Matrix:
    for _ in range(iterations):
        grid = smooth_step(grid)
    return grid
