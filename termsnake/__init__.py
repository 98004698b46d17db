"""
termsnake - a terminal snake game.
"""

from .config import GameConfig
from .domain import (
    UP, DOWN, LEFT, RIGHT,
    Board,
    CellKind,
    Direction,
    FoodSet,
    GameStatus,
    Grid,
    InvariantViolation,
    QueuedFoodPolicy,
    RandomFoodPolicy,
    Snake,
    Snapshot,
)
from .engine import GameResult, SnakeGame, run_game

__version__ = "0.1.0"

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT',
    'Board',
    'CellKind',
    'Direction',
    'FoodSet',
    'GameConfig',
    'GameResult',
    'GameStatus',
    'Grid',
    'InvariantViolation',
    'QueuedFoodPolicy',
    'RandomFoodPolicy',
    'Snake',
    'SnakeGame',
    'Snapshot',
    'run_game',
]
