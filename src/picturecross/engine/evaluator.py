# src/picturecross/engine/evaluator.py
# Player grid vs solution grid. Only FILLED is distinguished on the player
# side: CROSSED and EMPTY both mean "not filled".

from typing import List, Sequence

from ..grid import CellState, FILLED_CELL


def cell_matches(solution_cell: int, player_cell: CellState) -> bool:
    if solution_cell == FILLED_CELL:
        return player_cell == CellState.FILLED
    return player_cell != CellState.FILLED


def row_complete(solution: Sequence[Sequence[int]], player: Sequence[Sequence[CellState]], r: int) -> bool:
    return all(cell_matches(s, p) for s, p in zip(solution[r], player[r]))


def col_complete(solution: Sequence[Sequence[int]], player: Sequence[Sequence[CellState]], c: int) -> bool:
    return all(cell_matches(s_row[c], p_row[c]) for s_row, p_row in zip(solution, player))


def is_solved(solution: Sequence[Sequence[int]], player: Sequence[Sequence[CellState]]) -> bool:
    return all(row_complete(solution, player, r) for r in range(len(solution)))


def completed_rows(solution, player) -> List[int]:
    return [r for r in range(len(solution)) if row_complete(solution, player, r)]


def completed_cols(solution, player) -> List[int]:
    width = len(solution[0]) if solution else 0
    return [c for c in range(width) if col_complete(solution, player, c)]
