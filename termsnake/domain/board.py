"""
Board - owns the grid, the snake and the food for one game.
"""

from typing import Iterable, List, Optional

from .constants import CellKind, Direction, GameStatus, RIGHT
from .errors import InvariantViolation
from .food import FoodPolicy, FoodSet
from .game_state import Snapshot
from .grid import Cell, Grid
from .snake import Snake


def default_start(height: int, width: int) -> Cell:
    """Start cell of a fresh game; (5, 2) on a 10x10 board."""
    return (height // 2, width // 5)


def default_food(height: int, width: int) -> Cell:
    """First food cell of a fresh game; (3, 3) on a 10x10 board."""
    return (3 * height // 10, 3 * width // 10)


class Board:
    """
    All mutable simulation state of a single game.

    Nothing outside the board holds a reference to its snake or food.
    """

    def __init__(
        self,
        height: int,
        width: int,
        start: Optional[Cell] = None,
        heading: Direction = RIGHT,
        food: Optional[Iterable[Cell]] = None,
        food_policy: Optional[FoodPolicy] = None,
        snake_body: Optional[Iterable[Cell]] = None,
    ):
        self.grid = Grid(height, width)
        if snake_body is None:
            snake_body = [start if start is not None else default_start(height, width)]
        self.snake = Snake(snake_body, heading=heading)
        for cell in self.snake.positions:
            if not self.grid.contains(cell):
                raise ValueError(f"Snake out of bounds at {cell}.")

        self.food = FoodSet(policy=food_policy)
        if food is not None:
            self.set_food(food)
        elif self.snake.contains(default_food(height, width)):
            self.food.spawn(self.grid, self.snake.positions)
        else:
            self.food.add(default_food(height, width))

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    def set_food(self, cells: Iterable[Cell]):
        """
        Replace the food on the board with the given cells.

        Raises:
            ValueError: if a cell is off the grid or under the snake.
        """
        cells = [tuple(c) for c in cells]
        for cell in cells:
            if not self.grid.contains(cell):
                raise ValueError(f"Food out of bounds at {cell}.")
            if self.snake.contains(cell):
                raise ValueError(f"Food placed on the snake at {cell}.")
        self.food.replace(cells)

    def check_invariants(self):
        self.snake.check_invariants()
        outside = [cell for cell in self.food.cells if not self.grid.contains(cell)]
        if outside:
            raise InvariantViolation(f"Food outside the grid at {sorted(outside)}.")
        overlap = [cell for cell in self.food.cells if self.snake.contains(cell)]
        if overlap:
            raise InvariantViolation(f"Food overlaps the snake at {sorted(overlap)}.")

    def snapshot(self, round_number: int, status: GameStatus) -> Snapshot:
        """
        Classify every cell of the grid. Pure: reads state, changes nothing.
        """
        rows: List[List[CellKind]] = [
            [CellKind.EMPTY] * self.width for _ in range(self.height)
        ]
        for x, y in self.food.cells:
            rows[x][y] = CellKind.FOOD
        for idx, (x, y) in enumerate(self.snake.positions):
            rows[x][y] = CellKind.SNAKE_HEAD if idx == 0 else CellKind.SNAKE_BODY

        return Snapshot(
            height=self.height,
            width=self.width,
            rows=tuple(tuple(row) for row in rows),
            score=self.snake.score,
            round_number=round_number,
            status=status,
            snake=tuple(self.snake.positions),
            heading=self.snake.heading,
        )

    def __repr__(self):
        return f"<Board {self.height}x{self.width}, snake={self.snake!r}, food={self.food.as_list()}>"
