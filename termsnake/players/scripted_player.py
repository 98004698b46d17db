"""
Scripted player - replays a fixed schedule of headings.
"""

from typing import Dict, Iterable, Mapping, Optional, Union

from ..domain.constants import Direction
from ..domain.game_state import Snapshot
from .base import Player


class ScriptedPlayer(Player):
    """
    Turns at predetermined rounds.

    `moves` is either a mapping of round number -> heading, or a sequence
    where item N is the heading requested before tick N+1 (round N).
    Rounds with no entry, or a None entry, keep the current heading.
    """

    def __init__(self, moves: Union[Mapping[int, Optional[Direction]], Iterable[Optional[Direction]]]):
        if isinstance(moves, Mapping):
            schedule = dict(moves)
        else:
            schedule = dict(enumerate(moves))
        self.schedule: Dict[int, Optional[Direction]] = {
            round_number: _coerce(move) for round_number, move in schedule.items()
        }

    def get_move(self, snapshot: Snapshot) -> Optional[Direction]:
        return self.schedule.get(snapshot.round_number)


def _coerce(move) -> Optional[Direction]:
    if move is None or isinstance(move, Direction):
        return move
    return Direction.parse(move)
