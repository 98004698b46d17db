"""
Renderers turn a board Snapshot into a text surface.

The engine never writes to the terminal itself; it hands each finished
snapshot to whatever Renderer it was given.
"""

import logging
import sys
from typing import Dict, List, Optional, TextIO

from ..domain.constants import CellKind
from ..domain.game_state import Snapshot

logger = logging.getLogger(__name__)

TITLE = "RUSTY SNAKE"

# ANSI: clear screen, cursor home
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class CellChars:
    """Characters drawn for each kind of cell"""

    EMPTY = " "
    FOOD = "X"
    SNAKE_BODY = "O"
    SNAKE_HEAD = "@"

    @classmethod
    def mapping(cls) -> Dict[CellKind, str]:
        return {
            CellKind.EMPTY: cls.EMPTY,
            CellKind.FOOD: cls.FOOD,
            CellKind.SNAKE_BODY: cls.SNAKE_BODY,
            CellKind.SNAKE_HEAD: cls.SNAKE_HEAD,
        }


def render_board(snapshot: Snapshot) -> str:
    """
    Returns a string representation of the board with:
    ' ' = empty space
    X = food
    O = snake body
    @ = snake head
    Row x of the grid is line x of the frame, (0, 0) at the top left.
    """
    chars = CellChars.mapping()
    border = "+" + "-" * snapshot.width + "+"

    result: List[str] = [TITLE, border]
    for row in snapshot.rows:
        result.append("|" + "".join(chars[kind] for kind in row) + "|")
    result.append(border)
    result.append(f"Score: {snapshot.score}")

    return "\n".join(result) + "\n"


class Renderer:
    """
    Base class/interface for anything that displays the game.
    """

    def present(self, snapshot: Snapshot) -> None:
        """
        Draw one frame. Must not mutate the snapshot.

        Args:
            snapshot: the board after the latest tick (score included)
        """
        raise NotImplementedError


class NullRenderer(Renderer):
    """Discards every frame. Used for headless runs."""

    def present(self, snapshot: Snapshot) -> None:
        return None


class TerminalRenderer(Renderer):
    """
    Full redraw of the board on a text stream each frame.

    Write errors are not caught: a frame that cannot be drawn ends the game.
    """

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames = 0

    def present(self, snapshot: Snapshot) -> None:
        frame = render_board(snapshot)
        if self.clear:
            frame = CLEAR_SCREEN + frame
        self.stream.write(frame)
        self.stream.flush()
        self.frames += 1
        logger.debug(f"Presented frame {self.frames} (round {snapshot.round_number})")
