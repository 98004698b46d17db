"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal output, keyboard input, configuration).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    CellKind, Direction, GameStatus,
    DEATH_SELF, DEATH_WALL, END_MAX_ROUNDS,
)
from .errors import InvariantViolation
from .grid import Cell, Grid, step
from .snake import Snake
from .food import FoodPolicy, FoodSet, QueuedFoodPolicy, RandomFoodPolicy
from .game_state import Snapshot
from .board import Board

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'CellKind', 'Direction', 'GameStatus',
    'DEATH_SELF', 'DEATH_WALL', 'END_MAX_ROUNDS',
    'InvariantViolation',
    'Cell', 'Grid', 'step',
    'Snake',
    'FoodPolicy', 'FoodSet', 'QueuedFoodPolicy', 'RandomFoodPolicy',
    'Snapshot',
    'Board',
]
