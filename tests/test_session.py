# tests/test_session.py
import asyncio
import random

from picturecross import config
from picturecross.config import GameConfig
from picturecross.difficulty import Difficulty
from picturecross.engine import state as state_mod
from picturecross.engine.state import GameSession, GameStatus, GenerationFailure, ToolType
from picturecross.engine.timing import Corner, win_wave_delay_ms
from picturecross.grid import CellState
from picturecross.puzzlegen.generator import generate_grid

def new_session(size=5, difficulty="MEDIUM", **kw):
    kw.setdefault("delay", 0)
    return GameSession(size=size, difficulty=difficulty, rand=random.Random(0), **kw)

def started(seed_text="42", **kw):
    s = new_session(**kw)
    asyncio.run(s.start_new_game(seed_text))
    return s

def test_idle_until_first_game():
    s = new_session()
    assert s.status == GameStatus.IDLE
    assert s.puzzle is None
    assert s.difficulty == Difficulty.MEDIUM
    assert s.stats().count == 0
    s.press(0, 0)  # ignored, nothing to paint
    assert s.player_grid == []

def test_new_game_installs_puzzle_and_blank_player_grid():
    s = started("42")
    assert s.status == GameStatus.PLAYING
    assert s.puzzle.title == "Pattern #42"
    assert s.puzzle.grid == generate_grid(42, 5, Difficulty.MEDIUM)
    assert s.player_grid == [[CellState.EMPTY] * 5 for _ in range(5)]

def test_text_seed_is_hashed():
    a, b = started("owl"), started("owl")
    assert a.puzzle.seed == b.puzzle.seed
    assert a.puzzle.grid == b.puzzle.grid

def test_settings_apply_on_next_game():
    s = started("7")
    s.size = 10
    s.difficulty = Difficulty.HARD
    assert s.puzzle.size == 5
    asyncio.run(s.start_new_game("7"))
    assert s.puzzle.size == 10
    assert len(s.player_grid) == 10
    assert s.puzzle.grid == generate_grid(7, 10, Difficulty.HARD)

def test_fill_tool_toggles_and_drag_paints():
    s = started("42")
    s.press(0, 0)
    assert s.player_grid[0][0] == CellState.FILLED
    s.drag_over(0, 1)
    s.drag_over(1, 1)
    assert s.player_grid[0][1] == CellState.FILLED
    assert s.player_grid[1][1] == CellState.FILLED
    s.release()
    s.drag_over(2, 2)
    assert s.player_grid[2][2] == CellState.EMPTY
    # pressing a filled cell starts an erasing stroke
    s.press(0, 0)
    s.drag_over(0, 1)
    s.release()
    assert s.player_grid[0][0] == CellState.EMPTY
    assert s.player_grid[0][1] == CellState.EMPTY
    assert s.player_grid[1][1] == CellState.FILLED

def test_cross_tool_and_secondary_button():
    s = started("42")
    s.press(0, 0, secondary=True)
    s.release()
    assert s.player_grid[0][0] == CellState.CROSSED
    s.set_tool(ToolType.CROSS)
    s.press(0, 0)
    s.release()
    assert s.player_grid[0][0] == CellState.EMPTY
    s.press(1, 0)
    s.release()
    assert s.player_grid[1][0] == CellState.CROSSED
    # crossing a filled cell replaces it
    s.set_tool(ToolType.FILL)
    s.press(2, 0)
    s.release()
    s.press(2, 0, secondary=True)
    s.release()
    assert s.player_grid[2][0] == CellState.CROSSED

def test_painting_the_solution_wins():
    s = started("42")
    s.toggle_debug()
    for r, row in enumerate(s.puzzle.grid):
        for c, v in enumerate(row):
            if v == 1:
                s.press(r, c)
                s.release()
            elif (r + c) % 2:
                s.press(r, c, secondary=True)
                s.release()
    assert s.status == GameStatus.WON
    assert not s.debug_visible
    assert s.check_hints_active
    assert s.win_corner in list(Corner)
    assert not s.dragging

    # board is frozen once won
    before = [row[:] for row in s.player_grid]
    s.press(0, 0)
    assert s.player_grid == before

def test_cheat_win_and_wave_delays():
    s = started("42")
    assert s.cell_delay_ms(4, 4) == 0
    s.cheat_win()
    assert s.status == GameStatus.WON
    assert s.cell_delay_ms(4, 4) == win_wave_delay_ms(4, 4, 5, s.win_corner)

def test_line_feedback_needs_check_hints():
    s = started("42")
    blank_rows = [r for r, row in enumerate(s.puzzle.grid) if not any(row)]
    for r, row in enumerate(s.puzzle.grid):
        for c, v in enumerate(row):
            if v == 1 and r == 0:
                s.press(r, c)
                s.release()
    assert not s.row_feedback(0)
    s.toggle_check_hints()
    assert s.row_feedback(0)
    for r in blank_rows:
        assert s.row_feedback(r)
    s.toggle_check_hints()
    assert not s.row_feedback(0)
    assert not s.col_feedback(0)

def test_stats_match_solution():
    s = started("42")
    filled = sum(map(sum, s.puzzle.grid))
    st = s.stats()
    assert st.count == filled
    assert st.percent == round(filled / 25 * 100, 1)

def test_new_game_resets_flags():
    s = started("42")
    s.cheat_win()
    s.toggle_debug()
    asyncio.run(s.start_new_game("43"))
    assert s.status == GameStatus.PLAYING
    assert not s.debug_visible
    assert not s.check_hints_active
    assert s.win_corner is None

def test_generation_error_is_recorded(monkeypatch):
    async def boom(*args, **kwargs):
        raise RuntimeError("no puzzle")

    monkeypatch.setattr(state_mod, "generate_puzzle_async", boom)
    s = new_session()
    assert asyncio.run(s.start_new_game("42")) is None
    assert s.status == GameStatus.ERROR
    assert s.error_message == "Failed to generate puzzle."
    assert isinstance(s.error, GenerationFailure)
    assert isinstance(s.error.__cause__, RuntimeError)
    assert s.puzzle is None

def test_generation_timeout_is_a_failure():
    s = new_session(delay=1.0, timeout=0.01)
    asyncio.run(s.start_new_game("42"))
    assert s.status == GameStatus.ERROR
    assert isinstance(s.error, GenerationFailure)

def test_swapped_config_reaches_session_and_generator(monkeypatch):
    monkeypatch.setattr(config, "CONFIG", GameConfig(
        default_size=15, default_difficulty=Difficulty.HARD,
        loading_delay_s=1.0, generation_timeout_s=0.01,
    ))
    s = GameSession(rand=random.Random(0))
    assert s.size == 15
    assert s.difficulty == Difficulty.HARD
    # config delay outlasts config timeout
    asyncio.run(s.start_new_game("42"))
    assert s.status == GameStatus.ERROR

    monkeypatch.setattr(config, "CONFIG", GameConfig(default_size=15, loading_delay_s=0.0))
    s = GameSession(difficulty=Difficulty.HARD, rand=random.Random(0))
    asyncio.run(s.start_new_game("42"))
    assert s.status == GameStatus.PLAYING
    assert s.puzzle.grid == generate_grid(42, 15, Difficulty.HARD)

def test_win_pulse_only_on_won_filled_cells():
    s = started("42")
    r, c = next((r, c) for r, row in enumerate(s.puzzle.grid) for c, v in enumerate(row) if v == 1)
    assert s.cell_pulse(r, c, 5000) == 0.0
    s.cheat_win()
    delay = s.cell_delay_ms(r, c)
    assert s.cell_pulse(r, c, delay) == 0.0
    assert s.cell_pulse(r, c, delay + 1000) == 1.0
    er, ec = next((r, c) for r, row in enumerate(s.puzzle.grid) for c, v in enumerate(row) if v == 0)
    assert s.cell_pulse(er, ec, delay + 1000) == 0.0
