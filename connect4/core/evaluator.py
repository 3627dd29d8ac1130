# connect4/core/evaluator.py
from typing import List, Sequence

from connect4.models.enums import Cell, Side, WinDirection
from .board import Board
from .constants import (
    CENTER_COL, CENTER_VERTICAL_WEIGHT, CONNECT,
    THREE_WITH_SPACE, TWO_WITH_SPACES, OPPONENT_THREAT,
)
from .lines import LINES, windows


def _build_windows() -> List[tuple]:
    """(cells, weight) for every 4-cell window on the board."""
    weighted = []
    for direction, lines in LINES.items():
        for line in lines:
            weight = 1
            if direction == WinDirection.VERTICAL and line[0][1] == CENTER_COL:
                weight = CENTER_VERTICAL_WEIGHT
            for window in windows(line):
                weighted.append((window, weight))
    return weighted


# 24 horizontal + 21 vertical + 12 + 12 diagonal
WINDOWS = _build_windows()


def score_window(cells: Sequence[int], side: Side) -> int:
    """
    Scores one 4-cell window from `side`'s point of view.
    3 own + 1 empty: +6, 2 own + 2 empty: +3, 3 opponent + 1 empty: -2.
    """
    mine = sum(1 for v in cells if v == side)
    empty = sum(1 for v in cells if v == Cell.EMPTY)
    theirs = CONNECT - mine - empty

    if mine == 3 and empty == 1:
        return THREE_WITH_SPACE
    if mine == 2 and empty == 2:
        return TWO_WITH_SPACES
    if theirs == 3 and empty == 1:
        return OPPONENT_THREAT
    return 0


def score_position(board: Board, side: Side) -> int:
    """
    Static heuristic for a non-terminal board, used at the search depth cutoff.
    Vertical windows in the centre column count three times.
    """
    grid = board.grid
    score = 0
    for window, weight in WINDOWS:
        score += weight * score_window([grid[r][c] for r, c in window], side)
    return score
