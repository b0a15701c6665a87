# src/picturecross/puzzlegen/noise.py
# Density draw and the raw noise pass. Both consume the same RNG stream,
# so call order here is part of the reproducibility contract.

from ..difficulty import DifficultyBand
from ..grid import Matrix, FILLED_CELL, EMPTY_CELL
from ..rng import SeededRandom


def draw_target_density(rng: SeededRandom, band: DifficultyBand) -> float:
    """One draw: the concrete fill probability for this seed, inside the band."""
    return band.min_density + rng.next() * (band.max_density - band.min_density)


def noise_grid(rng: SeededRandom, size: int, target_density: float) -> Matrix:
    # Row-major: y outer, x inner. One bool draw per cell.
    grid: Matrix = []
    for _y in range(size):
        row = [FILLED_CELL if rng.bool(target_density) else EMPTY_CELL for _x in range(size)]
        grid.append(row)
    return grid
