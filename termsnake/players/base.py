"""
Base player interface for the game engine.
"""

from typing import Optional

from ..domain.constants import Direction
from ..domain.game_state import Snapshot


class Player:
    """
    Base class/interface for input collaborators.

    The engine asks its player for a heading once at the start of every
    tick and never again until the next one.
    """

    def get_move(self, snapshot: Snapshot) -> Optional[Direction]:
        """
        Return the heading for the coming tick given the current board.

        Args:
            snapshot: State of the board before the tick

        Returns:
            A Direction, or None to keep the current heading
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release anything the player holds. Called when the game ends."""
        return None
