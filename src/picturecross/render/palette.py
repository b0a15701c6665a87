# src/picturecross/render/palette.py
# Colours and geometry shared by the pygame board and the Pillow renderer.

from typing import Tuple

from ..grid import CellState

RGBA = Tuple[int, int, int, int]

BACKGROUND: RGBA = (15, 23, 42, 255)
GRID_LINE: RGBA = (51, 65, 85, 255)
THICK_LINE: RGBA = (148, 163, 184, 255)
CELL_EMPTY: RGBA = (30, 41, 59, 255)
CELL_FILLED: RGBA = (99, 102, 241, 255)
CROSS_MARK: RGBA = (100, 116, 139, 255)
SOLUTION_FILLED: RGBA = (16, 185, 129, 255)
WIN_FILLED: RGBA = (52, 211, 153, 255)
WIN_PULSE: RGBA = (236, 253, 245, 255)
MISTAKE: RGBA = (143, 52, 64, 255)  # red-500 at 50% over slate-800
HINT_TEXT: RGBA = (148, 163, 184, 255)
HINT_DONE: RGBA = (52, 211, 153, 255)

# Every fifth line is drawn thick.
BLOCK = 5


def cell_color(state: CellState, solution_filled: bool, revealed: bool, debug: bool) -> RGBA:
    """
    revealed: game won, show the solution.
    debug:    peek at the solution while playing (no mistake colouring).
    """
    if revealed or debug:
        if solution_filled:
            return WIN_FILLED if (revealed and not debug) else SOLUTION_FILLED
        if revealed and state == CellState.FILLED:
            return MISTAKE
        return CELL_EMPTY
    if state == CellState.FILLED:
        return CELL_FILLED
    return CELL_EMPTY


def blend(a: RGBA, b: RGBA, t: float) -> RGBA:
    t = min(1.0, max(0.0, t))
    return tuple(round(x + (y - x) * t) for x, y in zip(a, b))


def win_pulse_color(level: float) -> RGBA:
    """Won filled cell at a pulse level from engine.timing.win_pulse_level."""
    return blend(WIN_FILLED, WIN_PULSE, level)


def shows_cross(state: CellState, revealed: bool, debug: bool) -> bool:
    return state == CellState.CROSSED and not (revealed or debug)


def is_thick_after(i: int, size: int) -> bool:
    """True when the border after line i is a block separator."""
    return (i + 1) % BLOCK == 0 and i != size - 1


def cell_px_for(size: int) -> int:
    if size <= 5:
        return 56
    if size <= 10:
        return 40
    if size <= 15:
        return 32
    if size <= 20:
        return 24
    return 20
