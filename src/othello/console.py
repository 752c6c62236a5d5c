"""
Text driver for Othello.

Renders the board, reads moves line by line and runs the turn loop.
All rules live in `othello.game`; this module only talks to a ReversiGame.
"""
import re
import sys
import logging
from typing import Iterable, Optional, TextIO, Tuple

from .config import Config, DisplayConfig, get_default_config
from .errors import InputError
from .game import Board, ReversiGame
from .game.board import BLACK, WHITE, SIZE, PLAYER_NAMES
from .game.game import PASS

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r'^(-?\d+)\s*[,\s]\s*(-?\d+)$')
_ALGEBRAIC_RE = re.compile(r'^([a-z])(\d+)$')

QUIT_WORDS = {'q', 'quit', 'exit'}


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a move typed by a player into 0-based (row, col).

    Accepts "2 3" / "2,3" (row then column, 0-based) or "d3" (column letter,
    1-based row). Range is not checked here; the engine rejects off-board moves.

    Raises:
        InputError: if the text is not a coordinate at all.
    """
    s = text.strip().lower()
    m = _INDEX_RE.match(s)
    if m:
        return int(m.group(1)), int(m.group(2))
    m = _ALGEBRAIC_RE.match(s)
    if m:
        return int(m.group(2)) - 1, ord(m.group(1)) - ord('a')
    raise InputError(f"Cannot read a move from {text.strip()!r} (try '2 3' or 'd3')")


def format_move(move: Tuple[int, int], style: str = 'index') -> str:
    row, col = move
    if style == 'algebraic':
        return f"{chr(ord('a') + col)}{row + 1}"
    return f"{row},{col}"


def render_board(board: Board, display: Optional[DisplayConfig] = None) -> str:
    """Render the board with row/column labels."""
    display = display or DisplayConfig()
    symbols = {0: display.empty_symbol, BLACK: display.black_symbol, WHITE: display.white_symbol}
    state = board.get_board_state()
    algebraic = display.coordinate_style == 'algebraic'

    if algebraic:
        header = "  " + " ".join(chr(ord('a') + c) for c in range(SIZE))
    else:
        header = "  " + " ".join(str(c) for c in range(SIZE))
    lines = [header]
    for r in range(SIZE):
        label = r + 1 if algebraic else r
        lines.append(f"{label} " + " ".join(symbols[int(v)] for v in state[r]))
    return "\n".join(lines)


class GameDriver:
    """
    Runs one game over a stream of input lines and writes a transcript.

    The transcript depends only on the input lines and the display config,
    so a fixed move file always produces the same output.
    """

    def __init__(self, config: Optional[Config] = None, out: Optional[TextIO] = None, echo: bool = False,
                 game: Optional[ReversiGame] = None):
        """
        Args:
            config: Configuration object (default: get_default_config())
            out: Stream the transcript is written to (default: stdout)
            echo: Write each input line after its prompt, for non-interactive input
            game: Game to continue (default: a new game)
        """
        self.config = config or get_default_config()
        self.display = self.config.display
        self.out = out or sys.stdout
        self.echo = echo
        self.game = game or ReversiGame()
        self.aborted = False

    def _write(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def _show(self) -> None:
        game = self.game
        black, white = game.get_score()
        self._write(render_board(game.board, self.display))
        self._write(f"Score: Black {black}, White {white}")
        if game.is_game_over():
            return
        player = game.get_current_player()
        line = f"{PLAYER_NAMES[player]} to move."
        if self.display.show_legal_moves:
            moves = " ".join(format_move(m, self.display.coordinate_style) for m in game.get_valid_moves())
            line += f" Legal moves: {moves}"
        self._write(line)

    def _read_move(self, lines) -> Optional[Tuple[int, int]]:
        """Prompt until an accepted move is made. Returns None if the game stops early."""
        player = self.game.get_current_player()
        while True:
            self.out.write(f"{PLAYER_NAMES[player]}> ")
            self.out.flush()
            raw = next(lines, None)
            if raw is None:
                self._write()
                self._write("Input ended before the game finished.")
                return None
            text = raw.strip()
            if self.echo:
                self._write(text)
            if not text:
                continue
            if text.lower() in QUIT_WORDS:
                self._write("Game abandoned.")
                return None
            try:
                row, col = parse_move(text)
            except InputError as e:
                self._write(f"Invalid input: {e}")
                continue
            if self.game.make_move(row, col):
                return row, col
            self._write(f"Illegal move: {format_move((row, col), self.display.coordinate_style)}")

    def _announce_passes(self, entries) -> None:
        for entry in entries:
            if entry['move'] == PASS:
                self._write(f"{PLAYER_NAMES[entry['player']]} has no legal move and passes.")

    def run(self, lines: Iterable[str]) -> ReversiGame:
        """
        Play a game reading one move per line.

        Returns:
            The game; `self.aborted` is True if input ran out or the player quit.
        """
        lines = iter(lines)
        game = self.game
        # passes recorded since the last placed piece, e.g. when the game was set up
        pending = len(game.move_history)
        while pending and game.move_history[pending - 1]['move'] == PASS:
            pending -= 1
        self._announce_passes(game.move_history[pending:])

        while not game.is_game_over():
            self._show()
            seen = len(game.move_history)
            if self._read_move(lines) is None:
                self.aborted = True
                logger.info("Game aborted after %d turns", seen)
                return game
            self._announce_passes(game.move_history[seen + 1:])

        self._show()
        self._write("Game over. " + self.result_text())
        return game

    def result_text(self) -> str:
        result = self.game.get_winner()
        if result is None:
            return "No result."
        if result == 0:
            return "It's a draw!"
        return f"{PLAYER_NAMES[result]} wins!"
