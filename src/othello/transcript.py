"""
Replay and conformance checking of recorded games.

A game is a `*.moves` file with one move per line. Its transcript is what the
text driver prints when fed those lines. A matching `*.expected` file holds the
transcript the game must reproduce byte for byte.
"""
import io
import os
import glob
import difflib
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tqdm import tqdm

from .config import Config, get_default_config
from .console import GameDriver

logger = logging.getLogger(__name__)

MOVES_EXT = '.moves'
EXPECTED_EXT = '.expected'


@dataclass
class CheckResult:
    """Outcome of checking one recorded game."""
    name: str
    passed: bool
    diff: str = ""


def replay(lines: Iterable[str], config: Optional[Config] = None) -> str:
    """Run the driver over a fixed sequence of input lines and return the transcript."""
    out = io.StringIO()
    GameDriver(config, out=out, echo=True).run(lines)
    return out.getvalue()


def replay_file(path: str, config: Optional[Config] = None) -> str:
    with open(path, 'r') as f:
        return replay(f.read().splitlines(), config)


def expected_path(moves_path: str) -> str:
    return os.path.splitext(moves_path)[0] + EXPECTED_EXT


def record_expected(moves_paths: Iterable[str], config: Optional[Config] = None) -> List[str]:
    """
    Write the current transcript of each moves file next to it as `.expected`.

    Returns:
        List of written file paths
    """
    written = []
    for path in moves_paths:
        target = expected_path(path)
        with open(target, 'w') as f:
            f.write(replay_file(path, config))
        logger.info(f"Recorded {target}")
        written.append(target)
    return written


def check_games(directory: str, config: Optional[Config] = None, progress: bool = True) -> List[CheckResult]:
    """
    Replay every `*.moves` file in `directory` and compare with its `.expected` file.

    Games without an expected file are reported as failures.
    """
    config = config or get_default_config()
    paths = sorted(glob.glob(os.path.join(directory, '*' + MOVES_EXT)))
    results = []

    for path in tqdm(paths, desc="Checking games", disable=not progress):
        name = os.path.basename(path)
        target = expected_path(path)
        if not os.path.exists(target):
            logger.warning(f"No expected transcript for {name}")
            results.append(CheckResult(name, False, f"missing {os.path.basename(target)}"))
            continue

        actual = replay_file(path, config)
        with open(target, 'r') as f:
            expected = f.read()

        if actual == expected:
            results.append(CheckResult(name, True))
            continue

        diff = "".join(difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile=os.path.basename(target),
            tofile=name,
        ))
        logger.warning(f"Transcript mismatch for {name}")
        results.append(CheckResult(name, False, diff))

    return results
