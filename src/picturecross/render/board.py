# src/picturecross/render/board.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Tuple

from ..engine.hints import col_clues, row_clues
from ..engine.state import GameSession, GameStatus
from . import palette

XY = Tuple[int, int]


@dataclass
class BoardLayout:
    """
    Pixel geometry of one puzzle on screen:
      - row clues in a gutter to the left, column clues in a gutter on top
      - cells of cell_px squares after both gutters
    """
    size: int
    cell_px: int
    gutter_w: int
    gutter_h: int
    origin: XY = (0, 0)

    @classmethod
    def for_grid(cls, grid: List[List[int]], origin: XY = (0, 0), cell_px: Optional[int] = None) -> "BoardLayout":
        size = len(grid)
        px = cell_px or palette.cell_px_for(size)
        clue_px = max(10, px // 2)
        longest_row = max((len(c) for c in row_clues(grid)), default=1)
        longest_col = max((len(c) for c in col_clues(grid)), default=1)
        return cls(size=size, cell_px=px, gutter_w=longest_row * clue_px + clue_px // 2,
                   gutter_h=longest_col * clue_px + clue_px // 2, origin=origin)

    @property
    def width(self) -> int:
        return self.gutter_w + self.size * self.cell_px

    @property
    def height(self) -> int:
        return self.gutter_h + self.size * self.cell_px

    def cell_rect(self, r: int, c: int) -> Tuple[int, int, int, int]:
        ox, oy = self.origin
        return (ox + self.gutter_w + c * self.cell_px, oy + self.gutter_h + r * self.cell_px,
                self.cell_px, self.cell_px)

    def cell_at(self, px: int, py: int) -> Optional[XY]:
        """(row, col) under a pixel, or None outside the cell area."""
        ox, oy = self.origin
        x = px - ox - self.gutter_w
        y = py - oy - self.gutter_h
        if x < 0 or y < 0:
            return None
        r, c = y // self.cell_px, x // self.cell_px
        if r >= self.size or c >= self.size:
            return None
        return (r, c)


@lru_cache(maxsize=16)
def _font(px: int):
    import pygame  # local import to avoid hard dep when not used
    return pygame.font.SysFont(None, max(10, px))


def draw_board(screen, session: GameSession, layout: BoardLayout, win_elapsed_ms: Optional[int] = None) -> None:
    """win_elapsed_ms: time since the win, drives the pulse wave on solved cells."""
    import pygame
    puzzle = session.puzzle
    if puzzle is None:
        return
    revealed = session.status == GameStatus.WON
    debug = session.debug_visible
    clue_px = max(10, layout.cell_px // 2)
    font = _font(clue_px + 4)
    ox, oy = layout.origin

    # Column clues, bottom-aligned above each column
    for c, clue in enumerate(col_clues(puzzle.grid)):
        colour = palette.HINT_DONE if session.col_feedback(c) else palette.HINT_TEXT
        x0 = ox + layout.gutter_w + c * layout.cell_px
        y = oy + layout.gutter_h - clue_px // 2
        for n in reversed(clue):
            img = font.render(str(n), True, colour)
            y -= clue_px
            screen.blit(img, (x0 + (layout.cell_px - img.get_width()) // 2, y))

    # Row clues, right-aligned left of each row
    for r, clue in enumerate(row_clues(puzzle.grid)):
        colour = palette.HINT_DONE if session.row_feedback(r) else palette.HINT_TEXT
        y0 = oy + layout.gutter_h + r * layout.cell_px
        x = ox + layout.gutter_w - clue_px // 2
        for n in reversed(clue):
            img = font.render(str(n), True, colour)
            x -= clue_px
            screen.blit(img, (x + (clue_px - img.get_width()) // 2, y0 + (layout.cell_px - img.get_height()) // 2))

    # Cells
    for r, row in enumerate(session.player_grid):
        for c, state in enumerate(row):
            rect = pygame.Rect(*layout.cell_rect(r, c))
            solution_filled = puzzle.grid[r][c] == 1
            colour = palette.cell_color(state, solution_filled, revealed, debug)
            if revealed and solution_filled and not debug and win_elapsed_ms is not None:
                colour = palette.win_pulse_color(session.cell_pulse(r, c, win_elapsed_ms))
            pygame.draw.rect(screen, colour, rect)
            pygame.draw.rect(screen, palette.GRID_LINE, rect, 1)
            if palette.shows_cross(state, revealed, debug):
                pad = layout.cell_px // 4
                pygame.draw.line(screen, palette.CROSS_MARK, (rect.left + pad, rect.top + pad),
                                 (rect.right - pad, rect.bottom - pad), 2)
                pygame.draw.line(screen, palette.CROSS_MARK, (rect.left + pad, rect.bottom - pad),
                                 (rect.right - pad, rect.top + pad), 2)

    # 5x5 block separators
    left = ox + layout.gutter_w
    top = oy + layout.gutter_h
    span = layout.size * layout.cell_px
    for i in range(layout.size):
        if palette.is_thick_after(i, layout.size):
            off = (i + 1) * layout.cell_px
            pygame.draw.line(screen, palette.THICK_LINE, (left + off, oy), (left + off, top + span), 2)
            pygame.draw.line(screen, palette.THICK_LINE, (ox, top + off), (left + span, top + off), 2)
