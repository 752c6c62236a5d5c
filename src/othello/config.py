"""
Configuration parameters for the Othello driver.
"""
import os
import json
import logging
from dataclasses import dataclass, asdict, field, fields
from typing import Dict, Any

from .errors import ConfigError

COORDINATE_STYLES = ('index', 'algebraic')


@dataclass
class DisplayConfig:
    """Configuration for rendering the board and reading moves."""
    black_symbol: str = "B"
    white_symbol: str = "W"
    empty_symbol: str = "."
    show_legal_moves: bool = True
    coordinate_style: str = "index"  # "index" -> "2 3", "algebraic" -> "d3"

    def __post_init__(self):
        _check_types(self, str, 'black_symbol', 'white_symbol', 'empty_symbol', 'coordinate_style')
        _check_types(self, bool, 'show_legal_moves')
        if self.coordinate_style not in COORDINATE_STYLES:
            raise ConfigError(
                f"coordinate_style must be one of {COORDINATE_STYLES}, got {self.coordinate_style!r}"
            )
        symbols = (self.black_symbol, self.white_symbol, self.empty_symbol)
        if any(len(s) != 1 for s in symbols) or len(set(symbols)) != 3:
            raise ConfigError(f"Board symbols must be three distinct characters, got {symbols}")


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False

    def __post_init__(self):
        _check_types(self, str, 'log_dir', 'log_level')
        _check_types(self, bool, 'log_to_file')
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"Unknown log level: {self.log_level!r}")


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        _check_types(self, str, 'project_name')

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        _check_keys(cls, config_dict, 'config')
        display = config_dict.get('display', {})
        log_cfg = config_dict.get('logging', {})
        _check_keys(DisplayConfig, display, 'display')
        _check_keys(LoggingConfig, log_cfg, 'logging')
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            display=DisplayConfig(**display),
            logging=LoggingConfig(**log_cfg),
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            try:
                config_dict = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(f"Invalid JSON in {filepath}: {e}") from e
        return cls.from_dict(config_dict)


def _check_types(section, expected: type, *names: str) -> None:
    for name in names:
        value = getattr(section, name)
        if not isinstance(value, expected):
            raise ConfigError(f"{name} must be a {expected.__name__}, got {type(value).__name__}")


def _check_keys(section_cls, values: Any, name: str) -> None:
    if not isinstance(values, dict):
        raise ConfigError(f"Section '{name}' must be an object")
    unknown = set(values) - {f.name for f in fields(section_cls)}
    if unknown:
        raise ConfigError(f"Unknown keys in '{name}': {', '.join(sorted(unknown))}")


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
