"""
Food placement: the set of uneaten food cells and the policies that
decide where new food appears.
"""

import logging
import random
from collections import deque
from typing import Collection, Iterable, Iterator, List, Optional, Set

from .errors import InvariantViolation
from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodPolicy:
    """
    Base class/interface for choosing where the next food cell goes.
    """

    def choose(self, grid: Grid, occupied: Collection[Cell]) -> Optional[Cell]:
        """
        Return a free cell for new food, or None if nothing can be placed.

        Args:
            grid: the board's grid
            occupied: cells held by the snake or by existing food
        """
        raise NotImplementedError


class RandomFoodPolicy(FoodPolicy):
    """
    Picks uniformly among free cells. Pass a seed for reproducible games.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def choose(self, grid: Grid, occupied: Collection[Cell]) -> Optional[Cell]:
        free = [cell for cell in grid.cells() if cell not in occupied]
        if not free:
            return None
        return self.rng.choice(free)


class QueuedFoodPolicy(FoodPolicy):
    """
    Hands out positions from a fixed queue, skipping entries that are
    occupied or off the grid. Spawns nothing once the queue runs out.
    """

    def __init__(self, positions: Iterable[Cell]):
        self.queue = deque(tuple(p) for p in positions)

    def choose(self, grid: Grid, occupied: Collection[Cell]) -> Optional[Cell]:
        while self.queue:
            cell = self.queue.popleft()
            if grid.contains(cell) and cell not in occupied:
                return cell
            logger.debug(f"Skipping queued food cell {cell}: occupied or off the grid")
        return None


class FoodSet:
    """
    Uneaten food cells. Kept disjoint from the snake body by the engine.
    """

    def __init__(self, cells: Iterable[Cell] = (), policy: Optional[FoodPolicy] = None):
        self.cells: Set[Cell] = set(tuple(c) for c in cells)
        self.policy = policy if policy is not None else RandomFoodPolicy()

    def __contains__(self, cell) -> bool:
        return cell in self.cells

    def __iter__(self) -> Iterator[Cell]:
        return iter(sorted(self.cells))

    def __len__(self) -> int:
        return len(self.cells)

    def add(self, cell: Cell):
        self.cells.add(tuple(cell))

    def replace(self, cells: Iterable[Cell]):
        self.cells = set(tuple(c) for c in cells)

    def pick_if_present(self, cell: Cell) -> bool:
        """Remove `cell` if it holds food. Returns True when something was eaten."""
        if cell in self.cells:
            self.cells.remove(cell)
            return True
        return False

    def spawn(self, grid: Grid, snake_cells: Iterable[Cell]) -> Optional[Cell]:
        """
        Place one new food cell away from the snake and the other food.

        Returns the new cell, or None when the policy finds no free cell.

        Raises:
            InvariantViolation: if the policy returns a cell off the grid or
                one that is already occupied.
        """
        occupied = set(snake_cells) | self.cells
        cell = self.policy.choose(grid, occupied)
        if cell is None:
            logger.info("No free cell left for food")
            return None
        if not grid.contains(cell):
            raise InvariantViolation(f"Food policy chose {cell} outside {grid!r}.")
        if cell in occupied:
            raise InvariantViolation(f"Food policy chose occupied cell {cell}.")
        self.cells.add(cell)
        return cell

    def as_list(self) -> List[Cell]:
        return sorted(self.cells)

    def __repr__(self):
        return f"<FoodSet {self.as_list()}>"
