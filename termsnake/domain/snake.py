"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional

from .constants import Direction, RIGHT
from .errors import InvariantViolation
from .grid import Cell, are_adjacent, step


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        heading: direction applied on the next advance
        grew: whether the last commit kept the tail
        score: number of food cells eaten
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self'
        death_round: the round number when the snake died
    """

    def __init__(self, positions: Iterable[Cell], heading: Direction = RIGHT):
        self.positions = deque(tuple(p) for p in positions)
        self.heading = heading
        self.grew = False
        self.score = 0
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None
        self.check_invariants()

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def set_heading(self, direction: Direction):
        self.heading = direction

    def advance(self) -> Cell:
        """Return where the head would move this tick. Does not move the snake."""
        return step(self.head, self.heading)

    def contains(self, cell: Cell) -> bool:
        return cell in self.positions

    def occupied_after(self, did_eat: bool) -> List[Cell]:
        """
        Segments that will still be occupied once this tick commits.

        The tail vacates its cell on a plain move, so it is excluded unless
        the snake is growing.
        """
        body = list(self.positions)
        if did_eat:
            return body
        return body[:-1]

    def commit(self, next_head: Cell, did_eat: bool):
        """
        Move the snake onto `next_head`. The only mutator of body and score.

        A plain move drops the tail; eating keeps it and scores one point.
        """
        if not self.alive:
            raise InvariantViolation("Cannot move a dead snake.")
        self.positions.appendleft(next_head)
        if did_eat:
            self.score += 1
        else:
            self.positions.pop()
        self.grew = did_eat

    def kill(self, reason: str, round_number: int):
        self.alive = False
        self.death_reason = reason
        self.death_round = round_number

    def check_invariants(self):
        """Raise InvariantViolation if the body is empty, broken or self-overlapping."""
        if not self.positions:
            raise InvariantViolation("Snake body is empty.")
        if len(set(self.positions)) != len(self.positions):
            raise InvariantViolation(f"Snake body overlaps itself: {list(self.positions)}")
        body = list(self.positions)
        for a, b in zip(body, body[1:]):
            if not are_adjacent(a, b):
                raise InvariantViolation(f"Snake body is not contiguous between {a} and {b}.")

    def __repr__(self):
        return (
            f"<Snake head={self.head}, length={len(self.positions)}, "
            f"heading={self.heading.value}, alive={self.alive}>"
        )
