# tools/run_game.py
# Interactive picture-cross player built on GameSession.
# - Left drag: paint with the active tool (F9 = fill, F10 = cross)
# - Right drag: cross
# - Type a seed (digits or any text), Enter = new game; Backspace edits
# - F1..F5: grid size, PgUp/PgDn: difficulty
# - F6 check hints, F7 debug reveal, F8 cheat win, Esc quit

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional

import pygame

# Project imports
try:
    from picturecross.config import CONFIG, GRID_SIZES
    from picturecross.difficulty import Difficulty, DIFFICULTY_CONFIG, difficulty_from_name
    from picturecross.engine.state import GameSession, GameStatus, ToolType
    from picturecross.render.board import BoardLayout, draw_board
    from picturecross.ui.hud import hud_lines
    from picturecross.ui.status_bar import render_status_bar, status_bar_height
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

MARGIN = 16
LINE_PX = 20
HUD_LINES = 3
_SIZE_KEYS = (pygame.K_F1, pygame.K_F2, pygame.K_F3, pygame.K_F4, pygame.K_F5)
# Non-printing keys so every character can go into the seed box
TOOL_KEYS = {pygame.K_F9: ToolType.FILL, pygame.K_F10: ToolType.CROSS}


def _layout_for(session: GameSession) -> Optional[BoardLayout]:
    if session.puzzle is None:
        return None
    return BoardLayout.for_grid(session.puzzle.grid, origin=(MARGIN, MARGIN))


def _resize(layout: Optional[BoardLayout]) -> pygame.Surface:
    w = (layout.width if layout else 400) + 2 * MARGIN
    h = (layout.height if layout else 300) + 2 * MARGIN + status_bar_height(LINE_PX, HUD_LINES)
    return pygame.display.set_mode((max(w, 480), h))


def _cycle_difficulty(d: Difficulty, step: int) -> Difficulty:
    order = list(Difficulty)
    return order[(order.index(d) + step) % len(order)]


async def run(args) -> int:
    pygame.init()
    clock = pygame.time.Clock()
    session = GameSession(size=args.size, difficulty=difficulty_from_name(args.difficulty))
    seed_text = args.seed or ""

    pending: Optional[asyncio.Task] = asyncio.ensure_future(session.start_new_game(seed_text))
    layout: Optional[BoardLayout] = None
    won_at: Optional[int] = None
    screen = _resize(layout)

    running = True
    while running:
        # Pick up a finished generation and fit the window to it
        if pending is not None and pending.done():
            pending = None
            layout = _layout_for(session)
            screen = _resize(layout)

        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if pending is None:
                        pending = asyncio.ensure_future(session.start_new_game(seed_text))
                elif ev.key == pygame.K_BACKSPACE:
                    seed_text = seed_text[:-1]
                elif ev.key in _SIZE_KEYS:
                    session.size = GRID_SIZES[_SIZE_KEYS.index(ev.key)]
                elif ev.key == pygame.K_PAGEUP:
                    session.difficulty = _cycle_difficulty(session.difficulty, -1)
                elif ev.key == pygame.K_PAGEDOWN:
                    session.difficulty = _cycle_difficulty(session.difficulty, 1)
                elif ev.key == pygame.K_F6 and session.playing:
                    session.toggle_check_hints()
                elif ev.key == pygame.K_F7 and session.playing:
                    session.toggle_debug()
                elif ev.key == pygame.K_F8 and session.playing:
                    session.cheat_win()
                elif ev.key in TOOL_KEYS:
                    session.set_tool(TOOL_KEYS[ev.key])
                elif ev.unicode and ev.unicode.isprintable():
                    seed_text += ev.unicode
            elif ev.type == pygame.MOUSEBUTTONDOWN and layout is not None and ev.button in (1, 3):
                cell = layout.cell_at(*ev.pos)
                if cell is not None:
                    session.press(*cell, secondary=(ev.button == 3))
            elif ev.type == pygame.MOUSEMOTION and layout is not None and session.dragging:
                cell = layout.cell_at(*ev.pos)
                if cell is not None:
                    session.drag_over(*cell)
            elif ev.type == pygame.MOUSEBUTTONUP:
                session.release()

        # Start the win wave clock on the first frame after a win
        if session.status == GameStatus.WON:
            if won_at is None:
                won_at = pygame.time.get_ticks()
        else:
            won_at = None

        # Draw
        screen.fill((15, 23, 42))
        if layout is not None and session.status in (GameStatus.PLAYING, GameStatus.WON):
            elapsed = pygame.time.get_ticks() - won_at if won_at is not None else None
            draw_board(screen, session, layout, win_elapsed_ms=elapsed)
        bar_y = screen.get_height() - status_bar_height(LINE_PX, HUD_LINES)
        render_status_bar(screen, (0, bar_y), screen.get_width(), LINE_PX, hud_lines(session)[:HUD_LINES])

        band = DIFFICULTY_CONFIG[session.difficulty]
        pygame.display.set_caption(
            f"Picture Cross - {session.size}x{session.size}  {band.label}  "
            f"Tool:{session.active_tool.name}  Seed:[{seed_text}]"
        )
        pygame.display.flip()
        clock.tick(args.fps)
        # Yield to the event loop so a pending generation can finish
        await asyncio.sleep(0)

    if pending is not None:
        pending.cancel()
    pygame.quit()
    return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Picture Cross (nonogram) player")
    parser.add_argument("--seed", type=str, default=None, help="number or any text; random if omitted")
    parser.add_argument("--size", type=int, default=CONFIG.default_size, choices=GRID_SIZES)
    parser.add_argument("--difficulty", type=str, default=CONFIG.default_difficulty.name,
                        choices=[d.name for d in Difficulty])
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--verbose", action="store_true", help="log generation details")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
