"""
Reversi game module.
Handles turn order, passes and end-of-game state on top of the board rules.
"""
import logging
from typing import List, Tuple, Optional, Dict, Any

import numpy as np

from .board import (
    Board,
    BLACK,
    PLAYER_NAMES,
    apply_move,
    has_legal_move,
    is_legal_move,
    legal_moves,
    opponent,
    score,
    winner,
)
from ..errors import IllegalMoveError

logger = logging.getLogger(__name__)

PASS = (-1, -1)


class ReversiGame:
    """
    Main game class for Reversi that manages the game state and flow.

    The game owns its board. Black moves first. When the player to move has no
    legal move but the other player does, the turn is skipped automatically and
    recorded as a pass in the move history.
    """

    def __init__(self, board: Optional[Board] = None, current_player: int = BLACK):
        """
        Initialize a new Reversi game.

        Args:
            board: Starting position (default: standard opening)
            current_player: Player to move first (default: Black)
        """
        self.board = board.copy() if board is not None else Board()
        self.current_player = current_player
        self.passes = 0
        self.move_history: List[Dict[str, Any]] = []
        self.game_over = False
        self._settle_turn()

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self.current_player = BLACK
        self.passes = 0
        self.move_history = []
        self.game_over = False

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if self.game_over:
            return False

        player = self.current_player
        before = self.board.get_board_state()
        try:
            apply_move(self.board, row, col, player)
        except IllegalMoveError as e:
            logger.debug("Rejected: %s", e)
            return False

        self.move_history.append({
            'player': player,
            'move': (row, col),
            'flipped': int(np.count_nonzero(before != self.board.get_board_state())) - 1,
        })
        self.passes = 0
        self.current_player = opponent(player)
        self._settle_turn()
        return True

    def _record_pass(self) -> None:
        logger.info("%s has no legal move and passes", PLAYER_NAMES[self.current_player])
        self.move_history.append({'player': self.current_player, 'move': PASS, 'flipped': 0})
        self.passes += 1
        self.current_player = opponent(self.current_player)

    def _settle_turn(self) -> None:
        """Skip the player to move if they are stuck, and detect the end of the game."""
        if has_legal_move(self.board, self.current_player):
            return
        if has_legal_move(self.board, opponent(self.current_player)):
            self._record_pass()
            return
        self.game_over = True
        logger.info("Game over: Black %d, White %d", *self.get_score())

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) tuples representing valid moves
        """
        if self.game_over:
            return []
        return legal_moves(self.board, self.current_player)

    def is_valid_move(self, row: int, col: int) -> bool:
        return not self.game_over and is_legal_move(self.board, row, col, self.current_player)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.game_over

    def get_winner(self) -> Optional[int]:
        """
        Get the winner of the game.

        Returns:
            int: Board.BLACK, Board.WHITE, or 0 for draw, None if game not over
        """
        if not self.game_over:
            return None
        result = winner(self.board)
        return 0 if result is None else result

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return score(self.board)

    def get_board_state(self) -> np.ndarray:
        return self.board.get_board_state()

    def get_current_player(self) -> int:
        """
        Get the current player.

        Returns:
            int: Board.BLACK or Board.WHITE
        """
        return self.current_player

    def get_move_history(self) -> List[Dict[str, Any]]:
        """
        Get the move history.

        Returns:
            List of dicts with the player, the move ((-1, -1) for a pass) and the number of flipped pieces
        """
        return [dict(entry) for entry in self.move_history]

    def copy(self) -> 'ReversiGame':
        """Create a deep copy of the game."""
        new_game = ReversiGame.__new__(ReversiGame)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.passes = self.passes
        new_game.move_history = self.get_move_history()
        new_game.game_over = self.game_over
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.get_score()
        lines = [str(self.board)]
        if self.game_over:
            result = self.get_winner()
            lines.append(f"Score - Black: {black}, White: {white}")
            lines.append("Game over! It's a draw!" if result == 0 else f"Game over! {PLAYER_NAMES[result]} wins!")
        else:
            lines.append(f"Current player: {PLAYER_NAMES[self.current_player]}")
            lines.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(lines)
