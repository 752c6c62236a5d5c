"""
Test script for the Reversi game state machine.
"""
import numpy as np

from othello.game import Board, ReversiGame, BLACK, WHITE
from othello.game.game import PASS

# Black's only piece sits in the corner, so White can never capture;
# Black can take the top row run and the left column run.
CORNER = """
BWW.....
W.......
W.......
........
........
........
........
........
"""


def test_initial_board():
    """Test the initial board setup."""
    game = ReversiGame()
    board = game.get_board_state()

    assert board.shape == (8, 8), "Board should be 8x8"

    mid = 3  # 8//2 - 1
    assert board[mid][mid] == 2      # White
    assert board[mid+1][mid+1] == 2  # White
    assert board[mid][mid+1] == 1    # Black
    assert board[mid+1][mid] == 1    # Black

    empty_count = np.sum(board == 0)
    assert empty_count == 60, "Should have 60 empty squares initially"
    assert game.get_current_player() == BLACK, "Black moves first"


def test_valid_moves():
    """Test valid move generation."""
    game = ReversiGame()
    expected_moves = [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert game.get_valid_moves() == expected_moves, \
        f"Expected valid moves {expected_moves}, got {game.get_valid_moves()}"


def test_make_move():
    """Test making moves and capturing pieces."""
    game = ReversiGame()

    assert game.make_move(2, 3), "Should be a valid move"
    board = game.get_board_state()

    assert board[2][3] == 1, "Move should place black piece"
    assert board[3][3] == 1, "Should capture white piece"
    assert game.get_current_player() == WHITE, "Should be white's turn"
    assert game.get_move_history() == [{'player': BLACK, 'move': (2, 3), 'flipped': 1}]


def test_illegal_move_is_rejected():
    game = ReversiGame()
    before = game.get_board_state()

    assert not game.make_move(0, 0)
    assert not game.make_move(3, 3)
    assert not game.make_move(9, 9)

    assert np.array_equal(game.get_board_state(), before)
    assert game.get_current_player() == BLACK
    assert game.get_move_history() == []
    assert not game.is_valid_move(0, 0)
    assert game.is_valid_move(2, 3)


def test_turn_is_skipped_when_opponent_cannot_move():
    game = ReversiGame(Board.from_string(CORNER))
    assert game.get_valid_moves() == [(0, 3), (3, 0)]

    assert game.make_move(0, 3)
    # White has nothing to capture, so Black moves again
    assert game.get_current_player() == BLACK
    assert game.passes == 1
    assert game.get_move_history()[0] == {'player': BLACK, 'move': (0, 3), 'flipped': 2}
    assert game.get_move_history()[-1] == {'player': WHITE, 'move': PASS, 'flipped': 0}
    assert not game.is_game_over()

    assert game.make_move(3, 0)
    assert game.is_game_over()
    assert game.passes == 0, "A placed piece ends the run of passes"
    assert game.get_move_history()[-1]['flipped'] == 2
    assert game.get_score() == (7, 0)
    assert game.get_winner() == BLACK


def test_stuck_first_player_passes_at_start():
    rows = [[WHITE] * 8 for _ in range(8)]
    rows[3][3] = BLACK
    rows[4][4] = 0
    game = ReversiGame(Board.from_rows(rows))

    assert game.get_current_player() == WHITE
    assert game.passes == 1
    assert game.get_valid_moves() == [(4, 4)]

    assert game.make_move(4, 4)
    assert game.passes == 0
    assert game.is_game_over()
    assert game.get_score() == (0, 64)
    assert game.get_winner() == WHITE


def test_game_over():
    """Test game over condition by filling the board completely."""
    rows = [[BLACK] * 8 for _ in range(8)]
    for r, c in [(0, 0), (0, 7), (7, 0), (7, 7)]:
        rows[r][c] = WHITE
    game = ReversiGame(Board.from_rows(rows))

    assert game.is_game_over(), "Game should be over on a full board"
    assert game.get_score() == (60, 4)
    assert game.get_winner() == BLACK
    assert game.get_valid_moves() == []
    assert not game.make_move(0, 0)


def test_draw_and_running_winner():
    game = ReversiGame()
    assert game.get_winner() is None, "No winner while the game runs"

    rows = [[BLACK] * 8 if r % 2 else [WHITE] * 8 for r in range(8)]
    game = ReversiGame(Board.from_rows(rows))
    assert game.is_game_over()
    assert game.get_winner() == 0


def test_game_does_not_share_board():
    board = Board()
    game = ReversiGame(board)
    game.make_move(2, 3)
    assert board == Board(), "Caller's board must not change"


def test_copy_and_reset():
    game = ReversiGame()
    game.make_move(2, 3)

    clone = game.copy()
    clone.make_move(2, 2)
    assert len(game.get_move_history()) == 1
    assert len(clone.get_move_history()) == 2
    assert game.get_current_player() == WHITE

    game.reset()
    assert game.board == Board()
    assert game.get_current_player() == BLACK
    assert game.get_move_history() == []


def test_str_shows_turn_and_score():
    text = str(ReversiGame())
    assert "Current player: Black" in text
    assert "Score - Black: 2, White: 2" in text


if __name__ == "__main__":
    print("Running Reversi game tests...\n")

    test_initial_board()
    test_valid_moves()
    test_make_move()
    test_game_over()

    print("\nAll tests passed successfully!")
