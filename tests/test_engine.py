"""
Tests for engine.py - the snake game engine.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.config import GameConfig  # noqa: E402
from termsnake.domain import (  # noqa: E402
    UP, DOWN, LEFT, RIGHT,
    FoodPolicy,
    GameStatus,
    InvariantViolation,
    QueuedFoodPolicy,
    step,
)
from termsnake.engine import GameResult, SnakeGame, run_game  # noqa: E402
from termsnake.players import RandomPlayer, ScriptedPlayer  # noqa: E402


def straight_snake(head, length, heading=RIGHT):
    """Body of `length` cells trailing behind `head` opposite to `heading`."""
    body = [head]
    for _ in range(length - 1):
        body.append(step(body[-1], heading.opposite))
    return body


class OffGridFoodPolicy(FoodPolicy):
    def choose(self, grid, occupied):
        return (-1, 0)


class TestSnakeGame:
    """Tests for SnakeGame setup."""

    def test_game_initialization(self):
        """Game initializes with default values."""
        game = SnakeGame()
        assert game.board.height == 10
        assert game.board.width == 10
        assert game.status is GameStatus.RUNNING
        assert game.round_number == 0
        assert game.score == 0
        assert game.snake.head == (5, 2)
        assert game.food.as_list() == [(3, 3)]

    def test_snapshot_is_idempotent(self):
        """Producing the snapshot twice between ticks gives identical snapshots."""
        game = SnakeGame()
        game.tick()
        assert game.snapshot() == game.snapshot()

    def test_snapshot_does_not_change_state(self):
        game = SnakeGame()
        game.snapshot()
        assert game.round_number == 0
        assert list(game.snake.positions) == [(5, 2)]


class TestMovement:
    """Tests for plain movement."""

    @pytest.mark.parametrize("length", [1, 2, 3, 5])
    def test_translation_preserves_length(self, length):
        game = SnakeGame(10, 10, snake_body=straight_snake((5, 5), length), food=[])
        game.tick()
        assert len(game.snake) == length
        assert game.snake.head == (5, 6)

    def test_straight_moves_translate_whole_body(self):
        body = [(5, 5), (5, 4), (5, 3)]
        game = SnakeGame(10, 10, snake_body=body, food=[])
        for _ in range(3):
            game.tick()
        assert list(game.snake.positions) == [(5, 8), (5, 7), (5, 6)]

    def test_heading_sequence_moves_head_by_vector_sum(self):
        """A heading sequence moves a one-segment snake by the sum of its steps."""
        moves = [RIGHT, RIGHT, DOWN, DOWN, LEFT, UP]
        game = SnakeGame(10, 10, food=[])
        start = game.snake.head

        for move in moves:
            game.steer(move)
            assert game.tick() is GameStatus.RUNNING

        dx = sum(m.delta[0] for m in moves)
        dy = sum(m.delta[1] for m in moves)
        assert list(game.snake.positions) == [(start[0] + dx, start[1] + dy)]
        assert game.snake.head == (6, 3)

    def test_none_keeps_heading(self):
        game = SnakeGame(10, 10, food=[])
        assert game.steer(None) is False
        game.tick()
        assert game.snake.head == (5, 3)


class TestCollisionDetection:
    """Tests for wall and self collisions."""

    @pytest.mark.parametrize("start,heading", [
        ((9, 5), DOWN),   # x == height
        ((0, 5), UP),     # x == -1
        ((5, 9), RIGHT),  # y == width
        ((5, 0), LEFT),   # y == -1
    ])
    def test_exact_boundary_ends_game(self, start, heading):
        """Stepping onto the first cell past any wall ends the game."""
        game = SnakeGame(10, 10, start=start, heading=heading, food=[])
        assert game.tick() is GameStatus.OVER
        assert game.end_reason == "wall"
        assert game.snake.alive is False
        assert game.snake.death_reason == "wall"
        assert game.snake.death_round == 1

    @pytest.mark.parametrize("start,heading,expected", [
        ((8, 5), DOWN, (9, 5)),
        ((1, 5), UP, (0, 5)),
        ((5, 8), RIGHT, (5, 9)),
        ((5, 1), LEFT, (5, 0)),
    ])
    def test_last_cell_before_wall_is_safe(self, start, heading, expected):
        game = SnakeGame(10, 10, start=start, heading=heading, food=[])
        assert game.tick() is GameStatus.RUNNING
        assert game.snake.head == expected

    def test_death_does_not_move_snake(self):
        """On death the snake keeps its pre-collision body."""
        game = SnakeGame(10, 10, snake_body=[(5, 9), (5, 8)], food=[])
        game.tick()
        assert list(game.snake.positions) == [(5, 9), (5, 8)]
        assert game.snapshot().snake == ((5, 9), (5, 8))

    def test_moving_onto_vacating_tail_is_safe(self):
        """The tail leaves its cell this tick, so following it is not a collision."""
        body = [(2, 2), (2, 3), (3, 3), (3, 2)]
        game = SnakeGame(10, 10, snake_body=body, heading=DOWN, food=[])
        assert game.tick() is GameStatus.RUNNING
        assert list(game.snake.positions) == [(3, 2), (2, 2), (2, 3), (3, 3)]

    def test_moving_onto_body_ends_game(self):
        body = [(2, 2), (2, 3), (3, 3), (3, 2), (3, 1)]
        game = SnakeGame(10, 10, snake_body=body, heading=DOWN, food=[])
        assert game.tick() is GameStatus.OVER
        assert game.end_reason == "self"
        assert list(game.snake.positions) == body

    def test_reversal_into_neck_ends_game_by_default(self):
        """A 180 degree turn is accepted and kills a snake of length three."""
        game = SnakeGame(10, 10, snake_body=[(5, 5), (5, 4), (5, 3)], food=[])
        assert game.steer(LEFT) is True
        assert game.tick() is GameStatus.OVER
        assert game.end_reason == "self"

    def test_reversal_of_two_segment_snake_follows_tail(self):
        game = SnakeGame(10, 10, snake_body=[(5, 5), (5, 4)], food=[])
        game.steer(LEFT)
        assert game.tick() is GameStatus.RUNNING
        assert list(game.snake.positions) == [(5, 4), (5, 5)]

    def test_reversal_ignored_when_disallowed(self):
        game = SnakeGame(
            10, 10, snake_body=[(5, 5), (5, 4), (5, 3)], food=[], allow_reversal=False
        )
        assert game.steer(LEFT) is False
        assert game.snake.heading is RIGHT
        assert game.tick() is GameStatus.RUNNING
        assert game.snake.head == (5, 6)

    @pytest.mark.parametrize("seed", range(50))
    def test_random_player_without_reversal_avoids_wall(self, seed):
        """The autopilot never picks the ignored reversal and so never drives on into the wall."""
        game = SnakeGame(
            10, 10, snake_body=[(5, 9), (5, 8)], food=[], allow_reversal=False,
            player=RandomPlayer(seed=seed, allow_reversal=False),
        )
        game.steer(game.player.get_move(game.snapshot()))
        assert game.tick() is GameStatus.RUNNING

    def test_single_segment_may_reverse_when_disallowed(self):
        game = SnakeGame(10, 10, food=[], allow_reversal=False)
        assert game.steer(LEFT) is True
        game.tick()
        assert game.snake.head == (5, 1)

    def test_tick_after_game_over_changes_nothing(self):
        renderer = Mock()
        game = SnakeGame(10, 10, start=(5, 9), food=[], renderer=renderer)
        game.tick()
        before = game.snapshot()
        calls = renderer.present.call_count

        assert game.tick() is GameStatus.OVER
        assert game.snapshot() == before
        assert game.round_number == 1
        assert renderer.present.call_count == calls


class TestFoodEating:
    """Tests for food pickup, growth and respawn."""

    def test_eating_grows_scores_and_removes_food(self):
        game = SnakeGame(
            10, 10,
            snake_body=[(5, 5), (5, 4)],
            food=[(5, 6)],
            food_policy=QueuedFoodPolicy([(0, 0)]),
        )
        game.tick()
        assert len(game.snake) == 3
        assert game.score == 1
        assert (5, 6) not in game.food
        assert game.food.as_list() == [(0, 0)]

    def test_respawned_food_is_never_on_snake(self):
        body = straight_snake((5, 5), 4)
        game = SnakeGame(
            10, 10,
            snake_body=body,
            food=[(5, 6)],
            food_policy=QueuedFoodPolicy([(5, 3), (5, 2), (8, 8)]),
        )
        game.tick()
        assert game.food.as_list() == [(8, 8)]
        assert game.snake.contains((5, 2))

    def test_bad_food_policy_aborts_tick(self):
        """A policy that places food off the grid stops the game with an error."""
        renderer = Mock()
        game = SnakeGame(10, 10, food=[(5, 3)], food_policy=OffGridFoodPolicy(), renderer=renderer)
        with pytest.raises(InvariantViolation):
            game.tick()
        assert renderer.present.call_count == 0

    def test_no_respawn_when_queue_is_empty(self):
        game = SnakeGame(10, 10, food=[(5, 3)], food_policy=QueuedFoodPolicy([]))
        game.tick()
        assert game.score == 1
        assert len(game.food) == 0
        assert game.status is GameStatus.RUNNING

    def test_growth_lasts_one_tick(self):
        """The tick after eating is a plain move again."""
        game = SnakeGame(10, 10, snake_body=[(5, 5), (5, 4)], food=[(5, 6)],
                         food_policy=QueuedFoodPolicy([]))
        game.tick()
        assert game.snake.grew is True
        game.tick()
        assert game.snake.grew is False
        assert list(game.snake.positions) == [(5, 7), (5, 6), (5, 5)]


class TestScenarios:
    """End-to-end scenarios on the default 10x10 board."""

    def test_four_ticks_heading_right(self):
        game = SnakeGame(10, 10)
        for _ in range(4):
            game.tick()
        assert game.snake.head == (5, 6)
        assert len(game.snake) == 1
        assert game.score == 0
        assert game.food.as_list() == [(3, 3)]
        assert game.status is GameStatus.RUNNING

    def test_turn_up_and_eat(self):
        """Turning up before tick 3 with food on the new path grows the snake."""
        game = SnakeGame(10, 10, food_policy=QueuedFoodPolicy([(0, 0)]))
        game.tick()
        game.tick()
        game.set_food([(3, 4)])
        game.steer(UP)
        game.tick()
        assert game.snake.head == (4, 4)
        game.tick()

        assert game.snake.head == (3, 4)
        assert len(game.snake) == 2
        assert game.score == 1
        assert game.status is GameStatus.RUNNING

    def test_run_with_scripted_player(self):
        """run() samples the player once per tick and stops at the round limit."""
        renderer = Mock()
        sleep = Mock()
        game = SnakeGame(
            10, 10,
            food_policy=QueuedFoodPolicy([(0, 0)]),
            renderer=renderer,
            player=ScriptedPlayer({2: UP}),
            max_rounds=4,
            sleep=sleep,
        )
        game.set_food([(3, 4)])

        result = game.run()

        assert result == GameResult(score=1, length=2, rounds=4, end_reason="max_rounds")
        assert game.snake.alive is True
        # initial frame + one per tick
        assert renderer.present.call_count == 5
        # no pause after the final tick
        assert sleep.call_count == 3
        sleep.assert_called_with(0.3)

    def test_run_until_wall(self):
        game = SnakeGame(10, 10, food=[], tick_seconds=0, keep_history=True)
        result = game.run()
        assert result.end_reason == "wall"
        assert result.rounds == 8
        assert game.snake.head == (5, 9)
        assert len(game.history) == 9
        assert game.history[-1].status is GameStatus.OVER
        assert result.message == "Game over!\tYou died with a score of 0"

    def test_renderer_failure_propagates(self):
        renderer = Mock()
        renderer.present.side_effect = OSError("terminal gone")
        game = SnakeGame(10, 10, renderer=renderer)
        with pytest.raises(OSError):
            game.tick()

    def test_player_failure_propagates_and_closes_player(self):
        player = Mock()
        player.get_move.side_effect = RuntimeError("input closed")
        game = SnakeGame(10, 10, player=player, tick_seconds=0)
        with pytest.raises(RuntimeError):
            game.run()
        player.close.assert_called_once()


class TestRunGame:
    """Tests for run_game()."""

    def test_run_game_from_config(self):
        config = GameConfig(height=5, width=5, tick_seconds=0, seed=3, max_rounds=2)
        result = run_game(config)
        # start (2, 1) heading right, food at (1, 1) off the path
        assert result == GameResult(score=0, length=1, rounds=2, end_reason="max_rounds")

    def test_run_game_rejects_bad_config(self):
        with pytest.raises(ValueError):
            run_game(GameConfig(height=2, width=5))
