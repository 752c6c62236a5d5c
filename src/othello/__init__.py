"""
Othello (Reversi) rule engine with a text driver and transcript replay harness.
"""

from .errors import ReversiError, IllegalMoveError, InputError, ConfigError
from .game import Board, ReversiGame

__version__ = "0.1"

__all__ = ['Board', 'ReversiGame', 'ReversiError', 'IllegalMoveError', 'InputError', 'ConfigError']
