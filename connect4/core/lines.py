# connect4/core/lines.py
"""
Every straight line of the grid that can hold a connect-four, built once at import.

Lines are lists of (row, col) coordinates. Diagonals are seeded from the grid
edges (top row plus the first/last column) and only kept when they are at
least CONNECT cells long, so on 6x7 each diagonal orientation has six lines.
"""
from typing import Dict, List, Tuple

from connect4.models.enums import WinDirection
from .constants import ROWS, COLS, CONNECT

Coord = Tuple[int, int]
Line = List[Coord]


def _walk(row: int, col: int, dr: int, dc: int) -> Line:
    cells = []
    while 0 <= row < ROWS and 0 <= col < COLS:
        cells.append((row, col))
        row += dr
        col += dc
    return cells


def _diagonals(dc: int) -> List[Line]:
    # dc=+1: top-left to bottom-right, seeds on the top row and the left column
    # dc=-1: top-right to bottom-left, seeds on the top row and the right column
    edge_col = 0 if dc == 1 else COLS - 1
    seeds = [(0, c) for c in range(COLS)] + [(r, edge_col) for r in range(1, ROWS)]
    lines = [_walk(r, c, 1, dc) for r, c in seeds]
    return [line for line in lines if len(line) >= CONNECT]


LINES: Dict[WinDirection, List[Line]] = {
    WinDirection.HORIZONTAL: [_walk(r, 0, 0, 1) for r in range(ROWS)],
    WinDirection.VERTICAL: [_walk(0, c, 1, 0) for c in range(COLS)],
    WinDirection.MAJOR_DIAGONAL: _diagonals(1),
    WinDirection.MINOR_DIAGONAL: _diagonals(-1),
}


def windows(line: Line, size: int = CONNECT) -> List[Line]:
    """All contiguous runs of `size` cells along a line."""
    return [line[i:i + size] for i in range(len(line) - size + 1)]
