"""
Game Service - Session State

A GameSession owns everything one game needs: the board, whose turn it is,
the move history and the last terminal outcome. The driving loop (console,
GUI, ...) creates one session and talks to the core only through it.

It handles:
- Starting and restarting games
- Applying human moves (bad input is ignored, never fatal)
- Asking the search engine for AI moves
- Status text for display
"""

import logging
import time
from typing import List, Optional

from connect4.core.board import Board
from connect4.core.config import GameConfig
from connect4.core.search import SearchEngine
from connect4.core.terminal import IN_PROGRESS, TerminalOutcome, evaluate
from connect4.models.enums import GameStatus, PlayerType, Side
from connect4.schemas.game_schema import GameSnapshot, MoveRecord

logger = logging.getLogger(__name__)

ROLE_NAMES = {PlayerType.HUMAN: "Human", PlayerType.AI: "AI"}


class GameSession:
    def __init__(self, config: Optional[GameConfig] = None, engine: Optional[SearchEngine] = None):
        self.config = config or GameConfig()
        self.engine = engine or SearchEngine()
        self.new_game()

    def new_game(self):
        """Fresh empty board; player 1 moves first."""
        self.board = Board()
        self.current_side = Side.FIRST
        self.outcome: TerminalOutcome = IN_PROGRESS
        self.history: List[MoveRecord] = []
        logger.info(
            "New game: %s (first) vs %s (second)",
            self.config.player_1, self.config.player_2,
        )

    @property
    def is_over(self) -> bool:
        return self.outcome.is_over

    @property
    def is_ai_turn(self) -> bool:
        return not self.is_over and self.config.player_type(self.current_side) == PlayerType.AI

    def apply_move(self, column: int) -> Optional[int]:
        """
        Drops a disc for the side to move.
        Returns the row, or None if the move was ignored
        (game over, column out of range or full).
        """
        return self._apply(column, time.time())

    def play_ai_turn(self) -> Optional[int]:
        """Lets the engine choose and play a column for the side to move."""
        if self.is_over:
            return None

        start_time = time.time()
        result = self.engine.search(self.board, self.current_side)
        logger.info(
            "AI (%s) plays column %d (score %s, %d nodes)",
            self.current_side.name, result.best_move, result.score, result.nodes_explored,
        )
        row = self._apply(result.best_move, start_time, result.score, result.nodes_explored)
        if row is None:
            return None
        return result.best_move

    def _apply(self, column: int, start_time: float, score: Optional[float] = None,
               nodes: Optional[int] = None) -> Optional[int]:
        if self.is_over:
            logger.debug("Ignoring column %s: game is over", column)
            return None
        if not self.board.can_drop(column):
            logger.debug("Ignoring column %s: out of range or full", column)
            return None

        side = self.current_side
        row = self.board.drop(column, side)

        self.history.append(MoveRecord(
            side=int(side),
            column=column,
            row=row,
            duration=round(time.time() - start_time, 3),
            score=score,
            nodes_explored=nodes,
        ))

        self.outcome = evaluate(self.board)
        if self.outcome.is_over:
            logger.info("Game over: %s", self.status_message())
        else:
            self.current_side = side.opponent
        return row

    def _role_name(self, side: Side) -> str:
        # Same role on both sides: fall back to seat numbers
        if self.config.player_1 == self.config.player_2:
            return f"Player {int(side)}"
        return ROLE_NAMES[self.config.player_type(side)]

    def status_message(self) -> str:
        if self.outcome.status == GameStatus.WIN:
            return f"{self._role_name(self.outcome.winner)} wins by a {self.outcome.direction} line."
        if self.outcome.status == GameStatus.DRAW:
            return "Tie!"
        return f"{self._role_name(self.current_side)} to move."

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.to_matrix(),
            current_side=int(self.current_side),
            status=str(self.outcome.status),
            winner=int(self.outcome.winner) if self.outcome.winner else None,
            direction=str(self.outcome.direction) if self.outcome.direction else None,
            history=list(self.history),
            player_1_type=str(self.config.player_1),
            player_2_type=str(self.config.player_2),
        )
