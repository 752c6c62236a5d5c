"""
Command line entry point: play, replay, check and record games.
"""
import os
import sys
import argparse
from typing import List, Optional

from .config import Config, get_default_config
from .console import GameDriver
from .errors import ConfigError
from .logger import setup_logger
from .transcript import check_games, record_expected, replay_file


def load_config(path: Optional[str]) -> Config:
    """Load the config file if given, else fall back to the defaults."""
    if path is None:
        return get_default_config()
    if not os.path.exists(path):
        raise ConfigError(f"Config file {path} not found")
    return Config.load(path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='othello', description='Two-player Othello (Reversi)')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config file (JSON)')
    sub = parser.add_subparsers(dest='command')

    sub.add_parser('play', help='Play a game reading moves from stdin')

    p = sub.add_parser('replay', help='Replay a moves file and print the transcript')
    p.add_argument('moves', type=str, help='File with one move per line')

    p = sub.add_parser('check', help='Compare replayed games against expected transcripts')
    p.add_argument('directory', type=str, help='Directory with *.moves and *.expected files')
    p.add_argument('--quiet', action='store_true', help='Hide the progress bar')

    p = sub.add_parser('record', help='Write .expected transcripts for moves files')
    p.add_argument('moves', type=str, nargs='+', help='Moves files to record')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command or 'play'

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log = setup_logger(config)
    try:
        if command == 'play':
            driver = GameDriver(config)
            try:
                game = driver.run(sys.stdin)
            except KeyboardInterrupt:
                print("\nInterrupted.")
                return 130
            black, white = game.get_score()
            result = "aborted" if driver.aborted else driver.result_text()
            log.log_game_result(black, white, result, len(game.move_history))
            return 0

        if command == 'replay':
            sys.stdout.write(replay_file(args.moves, config))
            return 0

        if command == 'record':
            for path in record_expected(args.moves, config):
                print(f"Wrote {path}")
            return 0

        results = check_games(args.directory, config, progress=not args.quiet)
        failed = [r for r in results if not r.passed]
        for r in failed:
            print(f"FAIL {r.name}")
            if r.diff:
                print(r.diff)
        print(f"{len(results) - len(failed)}/{len(results)} games match")
        return 1 if failed else 0
    finally:
        log.close()


if __name__ == "__main__":
    sys.exit(main())
