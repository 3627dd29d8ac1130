import logging

from connect4.core.board import Board
from connect4.core.config import load_config
from connect4.core.constants import COLS
from connect4.services.game_service import GameSession


def render_board(board: Board) -> str:
    """Generates an ASCII grid representation."""
    symbols = {0: ".", 1: "X", 2: "O"}
    header = " " + " ".join([str(i) for i in range(COLS)])
    rows_str = ["|" + "|".join(symbols[v] for v in row) + "|" for row in board.to_matrix()]
    return header + "\n" + "\n".join(rows_str)


def play_one_game(session: GameSession):
    print(render_board(session.board))

    while not session.is_over:

        # --- AI Turn ---
        if session.is_ai_turn:
            print("\nAI is thinking...")
            col = session.play_ai_turn()
            print(f"AI plays Column: {col}")

        # --- Human Turn ---
        else:
            valid_moves = session.board.valid_moves()
            try:
                user_input = input(f"\n{session.status_message()} Columns {valid_moves}: ")
                col = int(user_input)
            except ValueError:
                print("Please enter a valid number.")
                continue
            if session.apply_move(col) is None:
                print("Invalid column. Try again.")
                continue

        # Show Board
        print("\n" + render_board(session.board))

    # --- End Game ---
    print(f"\nGame Over! {session.status_message()}")


def main():
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=======================================")
    print(f"   CONNECT FOUR: {config.player_1} vs {config.player_2}")
    print("=======================================")

    session = GameSession(config)
    while True:
        play_one_game(session)
        try:
            again = input("\nPlay again? [y/N]: ")
        except EOFError:
            break
        if again.strip().lower() != "y":
            break
        session.new_game()


if __name__ == "__main__":
    main()
