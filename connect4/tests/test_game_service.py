import unittest

from connect4.core.config import GameConfig
from connect4.core.search import SearchEngine
from connect4.models.enums import GameStatus, PlayerType, Side, WinDirection
from connect4.services.game_service import GameSession


class TestGameSession(unittest.TestCase):
    def setUp(self):
        self.session = GameSession(GameConfig(player_1=PlayerType.HUMAN, player_2=PlayerType.AI))

    def test_new_session(self):
        self.assertEqual(self.session.current_side, Side.FIRST)
        self.assertFalse(self.session.is_over)
        self.assertFalse(self.session.is_ai_turn)
        self.assertTrue(self.session.board.is_empty())
        self.assertEqual(self.session.status_message(), "Human to move.")

    def test_apply_move_switches_turn(self):
        self.assertEqual(self.session.apply_move(2), 5)
        self.assertEqual(self.session.current_side, Side.SECOND)
        self.assertTrue(self.session.is_ai_turn)
        self.assertEqual(self.session.status_message(), "AI to move.")

        record = self.session.history[0]
        self.assertEqual((record.side, record.column, record.row), (1, 2, 5))
        self.assertIsNone(record.nodes_explored)

    def test_invalid_moves_are_ignored(self):
        for col in (-1, 7):
            self.assertIsNone(self.session.apply_move(col))
        self.assertEqual(self.session.current_side, Side.FIRST)

        # Fill column 0 without a winner (alternating discs)
        for _ in range(6):
            self.session.apply_move(0)
        side = self.session.current_side
        self.assertIsNone(self.session.apply_move(0))
        self.assertEqual(self.session.current_side, side)
        self.assertEqual(len(self.session.history), 6)

    def test_ai_turn(self):
        self.session.apply_move(0)
        col = self.session.play_ai_turn()

        self.assertIn(col, range(7))
        self.assertEqual(self.session.current_side, Side.FIRST)
        self.assertEqual(len(self.session.history), 2)
        record = self.session.history[1]
        self.assertEqual(record.side, int(Side.SECOND))
        self.assertEqual(record.column, col)
        self.assertIsNotNone(record.nodes_explored)

    def test_ai_opens_in_center(self):
        session = GameSession(GameConfig(player_1=PlayerType.AI, player_2=PlayerType.HUMAN))
        self.assertTrue(session.is_ai_turn)
        self.assertEqual(session.play_ai_turn(), 3)
        self.assertFalse(session.is_ai_turn)

    def test_win_ends_game(self):
        # FIRST fills the bottom row, SECOND stacks on top
        for col in (0, 0, 1, 1, 2, 2, 3):
            self.assertIsNotNone(self.session.apply_move(col))

        self.assertTrue(self.session.is_over)
        self.assertEqual(self.session.outcome.winner, Side.FIRST)
        self.assertEqual(self.session.status_message(), "Human wins by a horizontal line.")
        self.assertIsNone(self.session.apply_move(4))
        self.assertIsNone(self.session.play_ai_turn())
        self.assertFalse(self.session.is_ai_turn)

        snapshot = self.session.snapshot()
        self.assertEqual(snapshot.status, "WIN")
        self.assertEqual(snapshot.winner, 1)
        self.assertEqual(snapshot.direction, "horizontal")
        self.assertEqual(len(snapshot.history), 7)
        self.assertEqual(snapshot.board[5][:4], [1, 1, 1, 1])

    def test_seat_names_when_roles_match(self):
        session = GameSession(GameConfig(player_1=PlayerType.HUMAN, player_2=PlayerType.HUMAN))
        for col in (6, 5, 6, 5, 6, 5):
            session.apply_move(col)
        self.assertEqual(session.status_message(), "Player 1 to move.")
        session.apply_move(6)
        self.assertEqual(session.outcome.direction, WinDirection.VERTICAL)
        self.assertEqual(session.status_message(), "Player 1 wins by a vertical line.")

    def test_new_game_resets(self):
        for col in (0, 0, 1, 1, 2, 2, 3):
            self.session.apply_move(col)
        self.session.new_game()

        self.assertFalse(self.session.is_over)
        self.assertTrue(self.session.board.is_empty())
        self.assertEqual(self.session.history, [])
        self.assertEqual(self.session.current_side, Side.FIRST)

    def test_ai_vs_ai_plays_to_the_end(self):
        session = GameSession(
            GameConfig(player_1=PlayerType.AI, player_2=PlayerType.AI),
            engine=SearchEngine(depth_limit=2),
        )
        while not session.is_over:
            self.assertTrue(session.is_ai_turn)
            self.assertIsNotNone(session.play_ai_turn())

        self.assertIn(session.outcome.status, (GameStatus.WIN, GameStatus.DRAW))
        self.assertLessEqual(len(session.history), 42)
        self.assertEqual(session.snapshot().status, str(session.outcome.status))


if __name__ == '__main__':
    unittest.main()
