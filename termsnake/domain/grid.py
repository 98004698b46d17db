"""
Grid entity - the fixed coordinate space the game is played on.
"""

from typing import Iterator, Tuple

from .constants import Direction

# (x, y): x is the row, y is the column
Cell = Tuple[int, int]


def step(cell: Cell, direction: Direction) -> Cell:
    """Return the cell one step from `cell` in `direction`."""
    dx, dy = direction.delta
    return (cell[0] + dx, cell[1] + dy)


def are_adjacent(a: Cell, b: Cell) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


class Grid:
    """
    Bounded height x width grid. Holds no state beyond its dimensions.
    """

    def __init__(self, height: int, width: int):
        if height <= 0 or width <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {height}x{width}.")
        self.height = height
        self.width = width

    def contains(self, cell: Cell) -> bool:
        """True iff `cell` lies inside the walls (x == height or y == width is outside)."""
        x, y = cell
        return 0 <= x < self.height and 0 <= y < self.width

    def cells(self) -> Iterator[Cell]:
        """Every cell of the grid in row-major order."""
        for x in range(self.height):
            for y in range(self.width):
                yield (x, y)

    @property
    def size(self) -> int:
        return self.height * self.width

    def __repr__(self):
        return f"<Grid {self.height}x{self.width}>"
