# src/picturecross/puzzlegen/generator.py
# Canonical puzzle generator: density draw -> noise -> smoothing -> safety.

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from .. import config
from ..difficulty import BandLike, band_for
from ..grid import Matrix, density
from ..rng import SeededRandom
from .noise import draw_target_density, noise_grid
from .safety import ensure_non_degenerate
from .smooth import should_smooth, smooth_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PuzzleData:
    title: str
    grid: Matrix
    size: int
    seed: int


def puzzle_title(seed: int) -> str:
    return f"Pattern #{seed}"


def generate_grid(seed: int, size: int, band: BandLike) -> Matrix:
    band = band_for(band)
    rng = SeededRandom(seed)

    target = draw_target_density(rng, band)
    grid = noise_grid(rng, size, target)

    smoothed = should_smooth(target)
    if smoothed:
        grid = smooth_grid(grid)

    fixed = ensure_non_degenerate(grid)
    logger.debug(
        "seed=%s size=%s target=%.3f smoothed=%s fixed=%s density=%.3f",
        seed, size, target, smoothed, fixed, density(grid),
    )
    return grid


def generate_puzzle(seed: int, size: int, band: BandLike) -> PuzzleData:
    grid = generate_grid(seed, size, band)
    return PuzzleData(title=puzzle_title(seed), grid=grid, size=size, seed=seed)


async def generate_puzzle_async(
    seed: int,
    size: int,
    band: BandLike,
    delay: Optional[float] = None,
) -> PuzzleData:
    """
    Same result as generate_puzzle, after a short sleep so a UI loop can
    show its loading state. The sleep is the only await; cancelling the
    task during it discards the call with nothing computed.
    """
    if delay is None:
        delay = config.CONFIG.loading_delay_s
    if delay > 0:
        await asyncio.sleep(delay)
    return generate_puzzle(seed, size, band)
