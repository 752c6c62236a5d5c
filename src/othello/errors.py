"""
Exceptions raised by the Othello engine and its text driver.
"""
from typing import Optional


class ReversiError(Exception):
    """Base exception for the package."""


class IllegalMoveError(ReversiError):
    """Move not legal under the current board state.

    Covers off-board coordinates, occupied cells and moves that capture nothing.
    The board is never modified when this is raised.
    """

    def __init__(self, row: int, col: int, player: Optional[int] = None, message: Optional[str] = None):
        self.row = row
        self.col = col
        self.player = player
        super().__init__(message or f"Illegal move at {(row, col)}")


class InputError(ReversiError):
    """A line of input could not be read as a move."""


class ConfigError(ReversiError):
    """Invalid configuration file or values."""
