# connect4/core/search.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from connect4.models.enums import GameStatus, Side
from .board import Board
from .constants import COLS, DEPTH_LIMIT, DRAW_SCORE, OPENING_MOVE, WIN_SCORE
from .evaluator import score_position
from .terminal import evaluate

logger = logging.getLogger(__name__)

NEG_INF = float("-inf")
POS_INF = float("inf")


@dataclass
class SearchResult:
    best_move: int
    score: float
    nodes_explored: int


class SearchEngine:
    """
    Depth-limited minimax with alpha-beta pruning.

    The side passed to search() is always the maximizing player; plies
    alternate by depth parity. The board is mutated in place and every
    drop is undone before the next candidate is tried.
    """

    def __init__(self, depth_limit: int = DEPTH_LIMIT, use_pruning: bool = True):
        if depth_limit < 1:
            raise ValueError(f"depth_limit must be at least 1, got {depth_limit}")
        self.depth_limit = depth_limit
        self.use_pruning = use_pruning
        self.nodes = 0

    def best_move(self, board: Board, side: Side) -> int:
        return self.search(board, side).best_move

    def search(self, board: Board, side: Side) -> SearchResult:
        """
        Root Entry Point.
        Columns are tried 0..6, so equal scores resolve to the lowest column.
        """
        self.nodes = 0

        # Opening book: always take the centre on an empty board
        if board.is_empty():
            return SearchResult(OPENING_MOVE, DRAW_SCORE, 0)

        if evaluate(board).is_over:
            raise ValueError("Cannot search a finished position")

        self.nodes += 1
        best_score, best_move = self._maximize(board, side, NEG_INF, POS_INF, 0)

        logger.debug(
            "Search for %s: column %s, score %s, %d nodes",
            side.name, best_move, best_score, self.nodes,
        )
        return SearchResult(best_move, best_score, self.nodes)

    def _minimax(self, board: Board, side: Side, is_maximizing: bool,
                 alpha: float, beta: float, depth: int) -> float:
        self.nodes += 1

        # 1. Exact result if the game is over (faster wins, slower losses)
        outcome = evaluate(board)
        if outcome.status == GameStatus.WIN:
            return WIN_SCORE - depth if outcome.winner == side else depth - WIN_SCORE
        if outcome.status == GameStatus.DRAW:
            return DRAW_SCORE

        # 2. Heuristic at the horizon
        if depth == self.depth_limit:
            return score_position(board, side)

        # 3. Recurse
        if is_maximizing:
            return self._maximize(board, side, alpha, beta, depth)[0]
        return self._minimize(board, side, alpha, beta, depth)

    def _maximize(self, board: Board, side: Side, alpha: float, beta: float,
                  depth: int) -> Tuple[float, Optional[int]]:
        best_score = NEG_INF
        best_move = None

        for col in range(COLS):
            row = board.drop(col, side)
            if row is None:
                continue
            try:
                score = self._minimax(board, side, False, alpha, beta, depth + 1)
            finally:
                board.undo(row, col)

            if score > best_score:
                best_score = score
                best_move = col

            if self.use_pruning:
                alpha = max(alpha, score)
                if alpha >= beta:
                    break  # Fail-soft cutoff

        return best_score, best_move

    def _minimize(self, board: Board, side: Side, alpha: float, beta: float,
                  depth: int) -> float:
        worst_score = POS_INF
        opponent = side.opponent

        for col in range(COLS):
            row = board.drop(col, opponent)
            if row is None:
                continue
            try:
                score = self._minimax(board, side, True, alpha, beta, depth + 1)
            finally:
                board.undo(row, col)

            worst_score = min(worst_score, score)

            if self.use_pruning:
                beta = min(beta, score)
                if beta <= alpha:
                    break

        return worst_score
