"""
Reversi game module.
This package contains the core game logic for Reversi.
"""

from .board import (
    Board,
    Cell,
    BLACK,
    WHITE,
    EMPTY,
    new_game,
    is_on_board,
    opponent,
    would_flip,
    is_legal_move,
    legal_moves,
    has_legal_move,
    apply_move,
    is_game_over,
    score,
    winner,
)
from .game import ReversiGame

__all__ = [
    'Board', 'Cell', 'BLACK', 'WHITE', 'EMPTY', 'ReversiGame',
    'new_game', 'is_on_board', 'opponent', 'would_flip', 'is_legal_move',
    'legal_moves', 'has_legal_move', 'apply_move', 'is_game_over', 'score', 'winner',
]
