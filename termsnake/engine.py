"""
Game engine for termsnake.

SnakeGame drives one tick at a time: move the snake, resolve food pickup,
resolve collisions, then hand a snapshot of the board to the renderer.
It owns no I/O of its own; rendering and input are injected collaborators.
"""

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from .config import GameConfig
from .domain.board import Board
from .domain.constants import (
    DEATH_SELF,
    DEATH_WALL,
    DEFAULT_HEIGHT,
    DEFAULT_TICK_SECONDS,
    DEFAULT_WIDTH,
    END_MAX_ROUNDS,
    RIGHT,
    Direction,
    GameStatus,
)
from .domain.food import FoodPolicy, RandomFoodPolicy
from .domain.game_state import Snapshot
from .domain.grid import Cell
from .players.base import Player
from .services.renderer import NullRenderer, Renderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """Summary reported to the caller once the game is over."""

    score: int
    length: int
    rounds: int
    end_reason: Optional[str]

    @property
    def message(self) -> str:
        if self.end_reason == END_MAX_ROUNDS:
            return f"Game over!\tRound limit reached with a score of {self.score}"
        return f"Game over!\tYou died with a score of {self.score}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SnakeGame:
    """
    A single-player game on a bounded grid.

    States: RUNNING -> tick -> RUNNING or OVER. OVER is terminal; ticks after
    it change nothing.
    """

    def __init__(
        self,
        height: int = DEFAULT_HEIGHT,
        width: int = DEFAULT_WIDTH,
        *,
        start: Optional[Cell] = None,
        heading: Direction = RIGHT,
        food: Optional[Iterable[Cell]] = None,
        food_policy: Optional[FoodPolicy] = None,
        snake_body: Optional[Iterable[Cell]] = None,
        renderer: Optional[Renderer] = None,
        player: Optional[Player] = None,
        tick_seconds: float = DEFAULT_TICK_SECONDS,
        max_rounds: Optional[int] = None,
        allow_reversal: bool = True,
        keep_history: bool = False,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.board = Board(
            height,
            width,
            start=start,
            heading=heading,
            food=food,
            food_policy=food_policy,
            snake_body=snake_body,
        )
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.player = player
        self.tick_seconds = tick_seconds
        self.max_rounds = max_rounds
        self.allow_reversal = allow_reversal
        self.sleep = sleep

        self.status = GameStatus.RUNNING
        self.round_number = 0
        self.end_reason: Optional[str] = None

        # Snapshots of every presented frame, for replay or inspection
        self.keep_history = keep_history
        self.history: List[Snapshot] = []

        logger.info(
            f"New game {height}x{width}: snake at {self.board.snake.head} heading "
            f"{self.board.snake.heading.value}, food at {self.board.food.as_list()}"
        )

    @property
    def snake(self):
        return self.board.snake

    @property
    def food(self):
        return self.board.food

    @property
    def score(self) -> int:
        return self.board.snake.score

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.OVER

    def set_food(self, cells: Iterable[Cell]):
        """
        Replace the food on the board with the given positions.
        """
        self.board.set_food(cells)
        logger.debug(f"Food set to {self.board.food.as_list()}")

    def steer(self, direction: Optional[Direction]) -> bool:
        """
        Request a heading for the next tick. None keeps the current heading.

        With allow_reversal off, a 180 degree turn of a snake longer than one
        segment is ignored. Returns True if the heading was applied.
        """
        if direction is None:
            return False
        snake = self.board.snake
        if not self.allow_reversal and len(snake) > 1 and direction is snake.heading.opposite:
            logger.debug(f"Ignoring reversal from {snake.heading.value} to {direction.value}")
            return False
        snake.set_heading(direction)
        return True

    def snapshot(self) -> Snapshot:
        """
        Return the current board as a Snapshot. Changes nothing.
        """
        return self.board.snapshot(self.round_number, self.status)

    def tick(self) -> GameStatus:
        """
        Execute one tick:
          1) Compute the next head from the current heading
          2) Check it against the walls
          3) Eat the food under it, if any
          4) Check it against the cells the body still holds after this tick
          5) On a collision end the game without moving; otherwise move,
             and place new food if some was eaten
          6) Hand the resulting snapshot to the renderer
        """
        if self.game_over:
            logger.info("Game is already over. No more rounds.")
            return self.status

        board = self.board
        snake = board.snake

        next_head = snake.advance()
        out_of_bounds = not board.grid.contains(next_head)
        ate = board.food.pick_if_present(next_head)
        # The tail vacates its cell unless the snake grows
        occupied = snake.occupied_after(ate)
        self_collision = next_head in occupied

        self.round_number += 1

        if out_of_bounds or self_collision:
            reason = DEATH_WALL if out_of_bounds else DEATH_SELF
            snake.kill(reason, self.round_number)
            self.end_game(reason)
        else:
            snake.commit(next_head, ate)
            if ate:
                new_food = board.food.spawn(board.grid, snake.positions)
                logger.info(f"Ate food at {next_head}, score {snake.score}, new food at {new_food}")
            if self.max_rounds is not None and self.round_number >= self.max_rounds:
                self.end_game(END_MAX_ROUNDS)

        board.check_invariants()
        self.present()
        return self.status

    def present(self):
        state = self.snapshot()
        if self.keep_history:
            self.history.append(state)
        self.renderer.present(state)

    def end_game(self, reason: str):
        self.status = GameStatus.OVER
        self.end_reason = reason
        logger.info(f"Game Over: {reason} at round {self.round_number} with score {self.score}")

    def result(self) -> GameResult:
        return GameResult(
            score=self.score,
            length=len(self.board.snake),
            rounds=self.round_number,
            end_reason=self.end_reason,
        )

    def run(self) -> GameResult:
        """
        Play until the game is over and return the result.

        Before each tick the player, if any, is asked for at most one
        heading. Between ticks the loop pauses for tick_seconds. Errors from
        the renderer or the player are not caught.
        """
        self.present()
        try:
            while not self.game_over:
                if self.player is not None:
                    self.steer(self.player.get_move(self.snapshot()))
                self.tick()
                if not self.game_over and self.tick_seconds > 0:
                    self.sleep(self.tick_seconds)
        finally:
            if self.player is not None:
                self.player.close()

        return self.result()


def run_game(
    config: GameConfig,
    renderer: Optional[Renderer] = None,
    player: Optional[Player] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> GameResult:
    """
    Runs a single game with the given settings.

    Args:
        config: validated game settings
        renderer: where frames go (discarded if None)
        player: source of headings (the snake goes straight if None)
        sleep: pause function used between ticks

    Returns:
        The GameResult of the finished game.
    """
    config.validate()
    game = SnakeGame(
        height=config.height,
        width=config.width,
        food_policy=RandomFoodPolicy(config.seed),
        renderer=renderer,
        player=player,
        tick_seconds=config.tick_seconds,
        max_rounds=config.max_rounds,
        allow_reversal=config.allow_reversal,
        sleep=sleep,
    )
    return game.run()
