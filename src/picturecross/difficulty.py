# Canonical difficulty bands (label -> fill density range)

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class Difficulty(Enum):
    VERY_EASY = "VERY_EASY"
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"
    VERY_HARD = "VERY_HARD"


@dataclass(frozen=True)
class DifficultyBand:
    label: str
    min_density: float
    max_density: float

    @property
    def width(self) -> float:
        return self.max_density - self.min_density

    def contains(self, density: float) -> bool:
        return self.min_density <= density <= self.max_density


# Easier puzzles are denser: a near-solid grid gives long, obvious runs.
DIFFICULTY_CONFIG: Mapping[Difficulty, DifficultyBand] = MappingProxyType({
    Difficulty.VERY_EASY: DifficultyBand("Very Easy (90-99%)", 0.90, 0.99),
    Difficulty.EASY:      DifficultyBand("Easy (70-90%)",      0.70, 0.90),
    Difficulty.MEDIUM:    DifficultyBand("Medium (50-70%)",    0.50, 0.70),
    Difficulty.HARD:      DifficultyBand("Hard (30-50%)",      0.30, 0.50),
    Difficulty.VERY_HARD: DifficultyBand("Very Hard (10-30%)", 0.10, 0.30),
})

BandLike = Union[DifficultyBand, Difficulty, str]


def difficulty_from_name(name: str) -> Difficulty:
    try:
        return Difficulty[name.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown difficulty {name!r}") from None


def band_for(band: BandLike) -> DifficultyBand:
    """Accept a band, a Difficulty, or a difficulty name; return the band."""
    if isinstance(band, DifficultyBand):
        return band
    if isinstance(band, str):
        band = difficulty_from_name(band)
    return DIFFICULTY_CONFIG[band]
