# connect4/core/terminal.py
from dataclasses import dataclass
from typing import Optional

from connect4.models.enums import Cell, GameStatus, Side, WinDirection
from .board import Board
from .constants import CONNECT
from .lines import LINES


@dataclass(frozen=True)
class TerminalOutcome:
    status: GameStatus
    winner: Optional[Side] = None
    direction: Optional[WinDirection] = None

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


IN_PROGRESS = TerminalOutcome(GameStatus.IN_PROGRESS)
DRAW = TerminalOutcome(GameStatus.DRAW)


def evaluate(board: Board) -> TerminalOutcome:
    """
    Scans the whole board for a finished game.

    Passes run in a fixed order: horizontal, vertical, major diagonal,
    minor diagonal. Each line is walked with a run-length counter that
    restarts whenever the occupant changes; an empty cell never wins.
    """
    grid = board.grid
    for direction, lines in LINES.items():
        for line in lines:
            player = Cell.EMPTY
            consecutive = 0
            for r, c in line:
                val = grid[r][c]
                if val != player:
                    player = val
                    consecutive = 1
                else:
                    consecutive += 1
                if consecutive >= CONNECT and player != Cell.EMPTY:
                    return TerminalOutcome(GameStatus.WIN, Side(player), direction)

    if board.is_full():
        return DRAW
    return IN_PROGRESS
