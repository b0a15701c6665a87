# src/picturecross/engine/state.py
# GameSession: new-game lifecycle, painting with drag strokes, win detection
# and the debug / check-hints toggles. Headless; the pygame runner drives it.

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .. import config
from ..difficulty import Difficulty, difficulty_from_name, DIFFICULTY_CONFIG
from ..grid import CellState, count_filled, empty_player_grid, solution_as_player_grid
from ..puzzlegen.generator import PuzzleData, generate_puzzle_async
from ..rng import resolve_seed
from .evaluator import col_complete, is_solved, row_complete
from .timing import Corner, win_pulse_level, win_wave_delay_ms

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate puzzle."


class GenerationFailure(RuntimeError):
    """A new-game request did not produce a puzzle."""


class GameStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    PLAYING = "playing"
    WON = "won"
    ERROR = "error"


class ToolType(Enum):
    FILL = "fill"
    CROSS = "cross"


@dataclass
class Stats:
    count: int
    percent: float


def _toggle_target(tool: ToolType, current: CellState) -> CellState:
    if tool == ToolType.FILL:
        return CellState.EMPTY if current == CellState.FILLED else CellState.FILLED
    return CellState.EMPTY if current == CellState.CROSSED else CellState.CROSSED


class GameSession:
    def __init__(
        self,
        size: Optional[int] = None,
        difficulty: Union[Difficulty, str, None] = None,
        *,
        rand: Optional[random.Random] = None,
        delay: Optional[float] = None,
        timeout: Optional[float] = None,
    ) -> None:
        # Settings (applied on the next new game); None = read config.CONFIG
        cfg = config.CONFIG
        self.size = size if size is not None else cfg.default_size
        if difficulty is None:
            difficulty = cfg.default_difficulty
        self.difficulty = difficulty_from_name(difficulty) if isinstance(difficulty, str) else difficulty
        self.delay = delay
        self.timeout = timeout

        # Game
        self.puzzle: Optional[PuzzleData] = None
        self.player_grid: List[List[CellState]] = []
        self.status = GameStatus.IDLE
        self.error: Optional[GenerationFailure] = None
        self.error_message: Optional[str] = None

        # UI flags
        self.debug_visible = False
        self.check_hints_active = False
        self.win_corner: Optional[Corner] = None
        self.active_tool = ToolType.FILL

        # Drag stroke
        self.dragging = False
        self.drag_target: Optional[CellState] = None

        self._rand = rand or random.Random()

    # ---- Lifecycle ----
    async def start_new_game(self, seed_text: Optional[str] = None) -> Optional[PuzzleData]:
        self.status = GameStatus.LOADING
        self.debug_visible = False
        self.check_hints_active = False
        self.win_corner = None
        self.error = None
        self.error_message = None
        self.release()

        try:
            cfg = config.CONFIG
            timeout = self.timeout if self.timeout is not None else cfg.generation_timeout_s
            seed = resolve_seed(seed_text, cfg.max_fresh_seed)
            band = DIFFICULTY_CONFIG[self.difficulty]
            pending = generate_puzzle_async(seed, self.size, band, delay=self.delay)
            if timeout is not None:
                puzzle = await asyncio.wait_for(pending, timeout)
            else:
                puzzle = await pending
        except Exception as e:  # timeouts included; cancellation propagates
            self.error = GenerationFailure(GENERATION_FAILED_MESSAGE)
            self.error.__cause__ = e
            self.error_message = GENERATION_FAILED_MESSAGE
            self.status = GameStatus.ERROR
            logger.exception("puzzle generation failed (size=%s difficulty=%s)", self.size, self.difficulty.name)
            return None

        self.puzzle = puzzle
        self.player_grid = empty_player_grid(puzzle.size)
        self.status = GameStatus.PLAYING
        logger.info("new game: %s size=%s difficulty=%s", puzzle.title, puzzle.size, self.difficulty.name)
        return puzzle

    @property
    def playing(self) -> bool:
        return self.status == GameStatus.PLAYING and self.puzzle is not None

    # ---- Painting ----
    def set_tool(self, tool: ToolType) -> None:
        self.active_tool = tool

    def press(self, r: int, c: int, secondary: bool = False) -> None:
        """Mouse-down on a cell: pick the stroke's target state and paint it."""
        if not self.playing:
            return
        tool = ToolType.CROSS if secondary else self.active_tool
        self.dragging = True
        self.drag_target = _toggle_target(tool, self.player_grid[r][c])
        self._update_cell(r, c, self.drag_target)

    def drag_over(self, r: int, c: int) -> None:
        if not self.playing:
            return
        if not self.dragging or self.drag_target is None:
            return
        self._update_cell(r, c, self.drag_target)

    def release(self) -> None:
        self.dragging = False
        self.drag_target = None

    def _update_cell(self, r: int, c: int, state: CellState) -> None:
        if self.player_grid[r][c] == state:
            return
        self.player_grid[r][c] = state
        self._check_win()

    def _check_win(self) -> None:
        if not self.playing:
            return
        if not is_solved(self.puzzle.grid, self.player_grid):
            return
        self.status = GameStatus.WON
        self.debug_visible = False
        self.check_hints_active = True
        self.win_corner = Corner(self._rand.randrange(4))
        self.release()
        logger.info("solved %s", self.puzzle.title)

    # ---- Toggles ----
    def toggle_debug(self) -> None:
        self.debug_visible = not self.debug_visible

    def toggle_check_hints(self) -> None:
        self.check_hints_active = not self.check_hints_active

    def cheat_win(self) -> None:
        if self.puzzle is None:
            return
        self.player_grid = solution_as_player_grid(self.puzzle.grid)
        self._check_win()

    # ---- Queries ----
    def row_feedback(self, r: int) -> bool:
        if self.puzzle is None or not self.player_grid:
            return False
        return self.check_hints_active and row_complete(self.puzzle.grid, self.player_grid, r)

    def col_feedback(self, c: int) -> bool:
        if self.puzzle is None or not self.player_grid:
            return False
        return self.check_hints_active and col_complete(self.puzzle.grid, self.player_grid, c)

    def stats(self) -> Stats:
        if self.puzzle is None:
            return Stats(count=0, percent=0.0)
        filled = count_filled(self.puzzle.grid)
        total = self.puzzle.size * self.puzzle.size
        return Stats(count=filled, percent=round(filled / total * 100, 1))

    def cell_delay_ms(self, r: int, c: int) -> int:
        if self.status != GameStatus.WON or self.win_corner is None or self.puzzle is None:
            return 0
        return win_wave_delay_ms(r, c, self.puzzle.size, self.win_corner)

    def cell_pulse(self, r: int, c: int, elapsed_ms: int) -> float:
        """Win pulse level of a filled cell, elapsed_ms after the win."""
        if self.status != GameStatus.WON or self.puzzle is None or self.puzzle.grid[r][c] != 1:
            return 0.0
        return win_pulse_level(elapsed_ms, self.cell_delay_ms(r, c))
