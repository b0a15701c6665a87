# tests/test_board_layout.py
from picturecross.render.board import BoardLayout
from picturecross.ui.status_bar import status_bar_height

GRID = [
    [1, 0, 1, 0, 1],
    [0, 0, 0, 0, 0],
    [1, 1, 1, 1, 1],
    [0, 1, 0, 1, 0],
    [1, 0, 0, 0, 1],
]

def test_gutters_fit_longest_clue():
    lay = BoardLayout.for_grid(GRID)
    assert lay.cell_px == 56
    clue = 28
    # row 0 reads "1 1 1"; column 0 reads "1 1 1"
    assert lay.gutter_w == 3 * clue + clue // 2
    assert lay.gutter_h == 3 * clue + clue // 2
    assert lay.width == lay.gutter_w + 5 * 56

def test_cell_at_round_trips_cell_rect():
    lay = BoardLayout.for_grid(GRID, origin=(16, 16), cell_px=20)
    for r in range(5):
        for c in range(5):
            x, y, w, h = lay.cell_rect(r, c)
            assert lay.cell_at(x, y) == (r, c)
            assert lay.cell_at(x + w - 1, y + h - 1) == (r, c)
    assert lay.cell_at(0, 0) is None
    assert lay.cell_at(16 + lay.width, 16 + lay.height - 1) is None

def test_status_bar_height():
    assert status_bar_height(20, 3) == 70
    assert status_bar_height(20, 0) == 30
