"""
Configuration for termsnake.

Values come from the environment (optionally via a .env file loaded with
python-dotenv) and can be overridden by command line flags.

Environment keys:
    SNAKE_HEIGHT          grid rows (default 10, minimum 3)
    SNAKE_WIDTH           grid columns (default 10, minimum 3)
    SNAKE_TICK_SECONDS    pause between ticks (default 0.3)
    SNAKE_SEED            seed for food placement and the random player
    SNAKE_MAX_ROUNDS      stop after this many ticks (default: no limit)
    SNAKE_ALLOW_REVERSAL  whether a 180 degree turn is accepted (default true)
    SNAKE_LOG_LEVEL       logging level name (default WARNING)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .domain.constants import DEFAULT_HEIGHT, DEFAULT_TICK_SECONDS, DEFAULT_WIDTH, MIN_GRID_SIZE

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def load_environment(dotenv_path: Optional[str] = None) -> bool:
    """Load a .env file into os.environ without overriding variables already set."""
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def _get(environ: Mapping[str, str], key: str) -> Optional[str]:
    value = environ.get(key)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _int(environ: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = _get(environ, key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")


def _float(environ: Mapping[str, str], key: str, default: float) -> float:
    raw = _get(environ, key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}")


def _bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = _get(environ, key)
    if raw is None:
        return default
    if raw.lower() in TRUE_VALUES:
        return True
    if raw.lower() in FALSE_VALUES:
        return False
    raise ValueError(f"{key} must be true or false, got {raw!r}")


@dataclass
class GameConfig:
    """Settings for one game."""

    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    tick_seconds: float = DEFAULT_TICK_SECONDS
    seed: Optional[int] = None
    max_rounds: Optional[int] = None
    allow_reversal: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """
        Build a config from environment variables.

        Raises:
            ValueError: If a variable is set but cannot be parsed.
        """
        if environ is None:
            environ = os.environ
        return cls(
            height=_int(environ, "SNAKE_HEIGHT", DEFAULT_HEIGHT),
            width=_int(environ, "SNAKE_WIDTH", DEFAULT_WIDTH),
            tick_seconds=_float(environ, "SNAKE_TICK_SECONDS", DEFAULT_TICK_SECONDS),
            seed=_int(environ, "SNAKE_SEED", None),
            max_rounds=_int(environ, "SNAKE_MAX_ROUNDS", None),
            allow_reversal=_bool(environ, "SNAKE_ALLOW_REVERSAL", True),
            log_level=(_get(environ, "SNAKE_LOG_LEVEL") or "WARNING").upper(),
        )

    def validate(self) -> "GameConfig":
        """
        Check the settings. Returns self so calls can be chained.

        Raises:
            ValueError: If any setting is out of range.
        """
        for name in ("height", "width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < MIN_GRID_SIZE:
                raise ValueError(f"{name} must be at least {MIN_GRID_SIZE}, got {value}")
        if self.tick_seconds < 0:
            raise ValueError(f"tick_seconds must not be negative, got {self.tick_seconds}")
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError(f"max_rounds must be positive, got {self.max_rounds}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")
        return self
