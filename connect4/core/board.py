# connect4/core/board.py
from typing import List, Optional

from connect4.models.enums import Cell, Side
from .constants import ROWS, COLS


class Board:
    def __init__(self):
        """
        Board uses (row, col) indexing.
        Row 0 is the TOP of the board.
        Row 5 is the BOTTOM of the board.
        Values: 0=Empty, 1=First, 2=Second
        """
        self.grid: List[List[int]] = [[Cell.EMPTY] * COLS for _ in range(ROWS)]

    @classmethod
    def from_matrix(cls, matrix: List[List[int]]) -> "Board":
        """
        Builds a board from a plain 6x7 matrix (Row 0=Top).
        Rejects unknown cell values and discs floating above an empty cell.
        """
        if len(matrix) != ROWS or any(len(row) != COLS for row in matrix):
            raise ValueError(f"Expected a {ROWS}x{COLS} matrix")

        board = cls()
        for c in range(COLS):
            seen_empty = False
            # Scan from Bottom (Row 5) to Top (Row 0)
            for r in range(ROWS - 1, -1, -1):
                val = Cell(matrix[r][c])
                if val == Cell.EMPTY:
                    seen_empty = True
                elif seen_empty:
                    raise ValueError(f"Floating disc at row {r}, column {c}")
                board.grid[r][c] = val
        return board

    def to_matrix(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.grid]

    def copy(self) -> "Board":
        clone = Board()
        clone.grid = [row[:] for row in self.grid]
        return clone

    def cell(self, row: int, col: int) -> Cell:
        return Cell(self.grid[row][col])

    def can_drop(self, col: int) -> bool:
        """Checks if the top cell of the column is empty."""
        return 0 <= col < COLS and self.grid[0][col] == Cell.EMPTY

    def valid_moves(self) -> List[int]:
        """Returns a list of column indices (0-6) that are not full."""
        return [c for c in range(COLS) if self.grid[0][c] == Cell.EMPTY]

    def drop(self, col: int, side: Side) -> Optional[int]:
        """
        Drops a disc for `side` into the column.
        Returns the row it landed on, or None if the column is full
        (the board is left untouched in that case).
        """
        if not 0 <= col < COLS:
            raise ValueError(f"Column out of range: {col}")

        # Gravity: Find the lowest empty row
        for r in range(ROWS - 1, -1, -1):
            if self.grid[r][col] == Cell.EMPTY:
                self.grid[r][col] = side
                return r
        return None

    def undo(self, row: int, col: int):
        """Clears a disc previously placed by drop(). Must be the top disc of its column."""
        assert self.grid[row][col] != Cell.EMPTY, f"Nothing to undo at ({row}, {col})"
        assert row == 0 or self.grid[row - 1][col] == Cell.EMPTY, f"({row}, {col}) is not the top disc"
        self.grid[row][col] = Cell.EMPTY

    def disc_count(self) -> int:
        return sum(1 for row in self.grid for v in row if v != Cell.EMPTY)

    def is_empty(self) -> bool:
        return all(v == Cell.EMPTY for row in self.grid for v in row)

    def is_full(self) -> bool:
        return all(v != Cell.EMPTY for row in self.grid for v in row)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __repr__(self):
        return f"Board({self.to_matrix()!r})"
