"""
Snapshot entity - the per-cell picture of the board handed to renderers.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .constants import CellKind, Direction, GameStatus
from .grid import Cell


@dataclass(frozen=True)
class Snapshot:
    """
    A full classification of the grid at one point in time.

    Attributes:
        height, width: board dimensions
        rows: row-major CellKinds; rows[x][y] is the kind of cell (x, y)
        score: the snake's score
        round_number: ticks completed so far
        status: RUNNING or OVER
        snake: body cells, head first
        heading: the snake's heading when the snapshot was taken
    """

    height: int
    width: int
    rows: Tuple[Tuple[CellKind, ...], ...]
    score: int
    round_number: int
    status: GameStatus
    snake: Tuple[Cell, ...]
    heading: Direction

    def kind_at(self, cell: Cell) -> CellKind:
        x, y = cell
        return self.rows[x][y]

    def items(self) -> Iterator[Tuple[Cell, CellKind]]:
        """Yield (cell, kind) for every cell in row-major order."""
        for x, row in enumerate(self.rows):
            for y, kind in enumerate(row):
                yield (x, y), kind

    def cells_of(self, kind: CellKind) -> Tuple[Cell, ...]:
        return tuple(cell for cell, k in self.items() if k is kind)

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.OVER

    def __repr__(self):
        return (
            f"<Snapshot round={self.round_number}, {self.height}x{self.width}, "
            f"score={self.score}, status={self.status.value}>"
        )
