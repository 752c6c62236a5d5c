"""
Board module for Reversi.
Handles the board state, flip detection and move application.
Cells are stored in an 8x8 numpy array (0 = empty, 1 = black, 2 = white).
"""
import logging
from enum import IntEnum
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from ..errors import IllegalMoveError

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class Cell(IntEnum):
    """State of a single square. BLACK and WHITE double as player ids."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2


EMPTY = Cell.EMPTY
BLACK = Cell.BLACK
WHITE = Cell.WHITE

SIZE = 8

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Coord, ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)

PLAYER_NAMES = {BLACK: 'Black', WHITE: 'White'}

_CHAR_TO_CELL = {'.': EMPTY, 'B': BLACK, 'W': WHITE}
_CELL_TO_CHAR = {v: k for k, v in _CHAR_TO_CELL.items()}


def is_on_board(row: int, col: int) -> bool:
    """Check whether (row, col) lies on the 8x8 grid."""
    return 0 <= row < SIZE and 0 <= col < SIZE


def opponent(player: int) -> Cell:
    """Return the other colour."""
    if player not in (BLACK, WHITE):
        raise ValueError(f"Invalid player: {player!r}")
    return Cell(3 - player)


class Board:
    """
    An 8x8 Reversi board.

    The grid is only written by `apply_move`; everything else reads it.
    Use `Board.from_rows` or `Board.from_string` to build arbitrary positions.
    """

    SIZE = SIZE
    EMPTY = EMPTY
    BLACK = BLACK
    WHITE = WHITE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            grid: Optional 8x8 array of cell values. If None, the standard
                starting position is used.
        """
        if grid is None:
            grid = np.zeros((SIZE, SIZE), dtype=np.int8)
            mid = SIZE // 2
            grid[mid - 1, mid - 1] = WHITE  # (3, 3)
            grid[mid - 1, mid] = BLACK      # (3, 4)
            grid[mid, mid - 1] = BLACK      # (4, 3)
            grid[mid, mid] = WHITE          # (4, 4)
        else:
            grid = np.array(grid, dtype=np.int8)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Board must be {SIZE}x{SIZE}, got {grid.shape}")
            if not np.isin(grid, [EMPTY, BLACK, WHITE]).all():
                raise ValueError("Board contains invalid cell values")
        self._board = grid

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """Create a board from 8 rows of cell values."""
        return cls(np.array(rows, dtype=np.int8))

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """
        Create a board from a text diagram.

        Each non-blank line is one row made of '.', 'B' and 'W'; spaces are ignored.
        """
        rows = []
        for line in text.strip().splitlines():
            chars = line.replace(' ', '')
            if not chars:
                continue
            try:
                rows.append([_CHAR_TO_CELL[ch] for ch in chars])
            except KeyError as e:
                raise ValueError(f"Invalid cell character: {e.args[0]!r}") from None
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError(f"Board must be {SIZE}x{SIZE}")
        return cls.from_rows(rows)

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        return Board(self._board.copy())

    def cell(self, row: int, col: int) -> Cell:
        if not is_on_board(row, col):
            raise IndexError(f"Out of bounds: {(row, col)}")
        return Cell(int(self._board[row, col]))

    def count(self, player: int) -> int:
        return int(np.count_nonzero(self._board == player))

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            A copy of the 8x8 array; changing it does not affect the board.
        """
        return self._board.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    __hash__ = None  # mutable

    def __str__(self) -> str:
        rows = [' '.join(_CELL_TO_CHAR[Cell(int(v))] for v in row) for row in self._board]
        return "\n".join(rows)


def new_game() -> Board:
    """Produce the standard starting layout (Black at (3,4),(4,3); White at (3,3),(4,4))."""
    return Board()


def would_flip(board: Board, row: int, col: int, player: int) -> Set[Coord]:
    """
    Get the pieces a move at (row, col) would capture.

    Walks each of the 8 rays from the target. A run of opponent pieces counts
    only if it is closed by one of `player`'s pieces; a run that reaches the
    edge or an empty cell contributes nothing.

    Returns:
        Set of (row, col) tuples; empty if the target is off-board, occupied,
        or captures nothing.
    """
    if not is_on_board(row, col) or board.cell(row, col) != EMPTY:
        return set()

    opp = opponent(player)
    grid = board._board
    flips: Set[Coord] = set()

    for dr, dc in DIRECTIONS:
        run: List[Coord] = []
        r, c = row + dr, col + dc
        while is_on_board(r, c) and grid[r, c] == opp:
            run.append((r, c))
            r += dr
            c += dc
        if run and is_on_board(r, c) and grid[r, c] == player:
            flips.update(run)

    return flips


def is_legal_move(board: Board, row: int, col: int, player: int) -> bool:
    """A move is legal iff the cell is on the board, empty, and captures something."""
    return bool(would_flip(board, row, col, player))


def legal_moves(board: Board, player: int) -> List[Coord]:
    """All legal moves for `player` in row-major order."""
    return [(r, c) for r in range(SIZE) for c in range(SIZE) if is_legal_move(board, r, c, player)]


def has_legal_move(board: Board, player: int) -> bool:
    return any(is_legal_move(board, r, c, player) for r in range(SIZE) for c in range(SIZE))


def apply_move(board: Board, row: int, col: int, player: int) -> Board:
    """
    Place a piece for `player` at (row, col) and flip the captured pieces.

    The board is modified in place and returned. Nothing is written unless
    the move is legal.

    Raises:
        IllegalMoveError: if the cell is off-board, occupied, or captures nothing.
    """
    flips = would_flip(board, row, col, player)
    if not flips:
        raise IllegalMoveError(
            row, col, player,
            f"Illegal move for {PLAYER_NAMES.get(player, player)} at {(row, col)}",
        )

    grid = board._board
    grid[row, col] = player
    for r, c in flips:
        grid[r, c] = player

    logger.debug("%s played %s, flipped %d", PLAYER_NAMES[player], (row, col), len(flips))
    return board


def is_game_over(board: Board) -> bool:
    """The game is over when neither player has a legal move."""
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)


def score(board: Board) -> Tuple[int, int]:
    """
    Get the current score.

    Returns:
        Tuple of (black_count, white_count)
    """
    return board.count(BLACK), board.count(WHITE)


def winner(board: Board) -> Optional[Cell]:
    """Colour with strictly more pieces, or None for a draw."""
    black, white = score(board)
    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return None
