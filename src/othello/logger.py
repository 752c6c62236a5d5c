"""
Logging utilities for the Othello driver.
"""
import os
import sys
import logging
from datetime import datetime
from typing import Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Sets up console and file logging for a run and records game results."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.level = logging.getLevelName(config.logging.log_level.upper())
        formatter = logging.Formatter(FORMAT)

        # stdout carries the game transcript, so the console handler writes to stderr
        self.console = logging.StreamHandler(sys.stderr)
        self.console.setLevel(self.level)
        self.console.setFormatter(formatter)
        self.handlers = [self.console]

        self.run_dir = None
        if config.logging.log_to_file:
            self.log_dir = log_dir or config.logging.log_dir
            run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            self.run_dir = os.path.join(self.log_dir, run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'game.log'))
            file_handler.setLevel(self.level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        self.logger = logging.getLogger('othello')
        self.logger.setLevel(self.level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def log_game_result(self, black: int, white: int, result: str, moves: int):
        """Log the final summary of a game."""
        self.logger.info(f"Game finished: {result} (Black {black}, White {white}, {moves} turns)")

    def close(self):
        """Remove handlers so repeated runs don't log twice."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
