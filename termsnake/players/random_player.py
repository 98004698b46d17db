"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.constants import VALID_MOVES, Direction
from ..domain.game_state import Snapshot
from ..domain.grid import step
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding walls and its own body.

    With allow_reversal off it never proposes a 180 degree turn for a snake
    longer than one segment, since the engine would ignore it.
    """

    def __init__(self, seed: Optional[int] = None, allow_reversal: bool = True):
        self.rng = random.Random(seed)
        self.allow_reversal = allow_reversal

    def safe_moves(self, snapshot: Snapshot) -> List[Direction]:
        head = snapshot.snake[0]
        # The tail moves away this tick unless the snake eats
        blocked = set(snapshot.snake[:-1])
        reversal = None
        if not self.allow_reversal and len(snapshot.snake) > 1:
            reversal = snapshot.heading.opposite

        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            new_x, new_y = step(head, move)
            # Check wall collisions
            if not (0 <= new_x < snapshot.height and 0 <= new_y < snapshot.width):
                continue
            # Check self collisions
            if (new_x, new_y) in blocked:
                continue
            if move is reversal:
                continue
            valid_moves.append(move)
        return valid_moves

    def get_move(self, snapshot: Snapshot) -> Optional[Direction]:
        valid_moves = self.safe_moves(snapshot)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        return self.rng.choice(valid_moves)
