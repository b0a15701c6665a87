from dataclasses import dataclass
from typing import Optional, Tuple

from .difficulty import Difficulty
from .rng import MAX_FRESH_SEED

# Sizes offered by the size selector.
GRID_SIZES: Tuple[int, ...] = (5, 10, 15, 20, 25)


@dataclass(frozen=True)
class GameConfig:
    default_size: int = 10
    default_difficulty: Difficulty = Difficulty.MEDIUM
    # Spinner delay before a puzzle is returned; carries no meaning.
    loading_delay_s: float = 0.05
    # None = wait for generation forever.
    generation_timeout_s: Optional[float] = None
    max_fresh_seed: int = MAX_FRESH_SEED

# Global config (can be swapped by launcher)
CONFIG = GameConfig()
