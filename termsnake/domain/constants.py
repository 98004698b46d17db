"""
Game constants for termsnake.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Heading of the snake. Up/Down move along x (rows), Left/Right along y (columns)."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @classmethod
    def parse(cls, raw: str) -> "Direction":
        """
        Parse a direction from user text.

        Accepts full names ("up") and WASD keys ("w"), ignoring case.

        Raises:
            ValueError: If the text names no direction.
        """
        key = str(raw).strip().upper()
        if key in cls.__members__:
            return cls[key]
        if key in DIRECTION_ALIASES:
            return DIRECTION_ALIASES[key]
        raise ValueError(f"invalid direction: {raw!r}")


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# The only place direction deltas are defined: (dx, dy) with x = row, y = column
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

OPPOSITES: Dict[Direction, Direction] = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

DIRECTION_ALIASES: Dict[str, Direction] = {
    "W": UP,
    "A": LEFT,
    "S": DOWN,
    "D": RIGHT,
}


class CellKind(str, Enum):
    """Per-cell classification used only for rendering."""

    EMPTY = "EMPTY"
    FOOD = "FOOD"
    SNAKE_BODY = "SNAKE_BODY"
    SNAKE_HEAD = "SNAKE_HEAD"


class GameStatus(str, Enum):
    RUNNING = "RUNNING"
    OVER = "OVER"


# End reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
END_MAX_ROUNDS = "max_rounds"

# Game settings
MIN_GRID_SIZE = 3
DEFAULT_HEIGHT = 10
DEFAULT_WIDTH = 10
DEFAULT_TICK_SECONDS = 0.3
