# src/picturecross/ui/hud.py
from typing import List

from ..engine.state import GameSession, GameStatus


def seed_label(seed: int) -> str:
    return f"Seed: {seed}"


def stats_label(count: int, percent: float) -> str:
    return f"Filled: {count} ({percent:.1f}%)"


def play_button_label(status: GameStatus) -> str:
    return "Generating..." if status == GameStatus.LOADING else "PLAY"


def check_hints_label(active: bool) -> str:
    return "[CHECK] HINTS ON" if active else "[CHECK] HINTS OFF"


def debug_label(visible: bool) -> str:
    return "[DEBUG] HIDE SOLUTION" if visible else "[DEBUG] SHOW SOLUTION"


def hud_lines(session: GameSession) -> List[str]:
    """
    Text rows for the status bar, top to bottom: what the control
    panel shows for each game status.
    """
    if session.status == GameStatus.IDLE:
        return ["Select settings above and press New Game to start."]
    if session.status == GameStatus.LOADING:
        return [play_button_label(session.status)]
    if session.status == GameStatus.ERROR:
        return [session.error_message or ""]

    puzzle = session.puzzle
    st = session.stats()
    lines = [seed_label(puzzle.seed), stats_label(st.count, st.percent)]
    if session.status == GameStatus.PLAYING:
        lines.append(f"{check_hints_label(session.check_hints_active)}  {debug_label(session.debug_visible)}")
    else:
        lines.append(f"Puzzle Solved! It was: {puzzle.title.upper()}")
    return lines
