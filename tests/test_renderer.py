"""
Tests for the text renderers.
"""

import io
import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.domain import Board, GameStatus  # noqa: E402
from termsnake.services.renderer import (  # noqa: E402
    CLEAR_SCREEN,
    NullRenderer,
    TerminalRenderer,
    render_board,
)


def make_snapshot(score=0):
    board = Board(3, 4, snake_body=[(1, 1), (1, 0)], food=[(0, 3)])
    board.snake.score = score
    return board.snapshot(round_number=2, status=GameStatus.RUNNING)


def test_render_board_marks_head_body_food():
    out = render_board(make_snapshot())
    assert out.endswith("\n")
    assert out.splitlines() == [
        "RUSTY SNAKE",
        "+----+",
        "|   X|",
        "|O@  |",
        "|    |",
        "+----+",
        "Score: 0",
    ]


def test_render_board_shows_score():
    assert "Score: 7" in render_board(make_snapshot(score=7))


def test_terminal_renderer_clears_and_flushes():
    stream = io.StringIO()
    renderer = TerminalRenderer(stream=stream)
    snapshot = make_snapshot()

    renderer.present(snapshot)

    assert stream.getvalue() == CLEAR_SCREEN + render_board(snapshot)
    assert renderer.frames == 1


def test_terminal_renderer_without_clear():
    stream = io.StringIO()
    renderer = TerminalRenderer(stream=stream, clear=False)
    renderer.present(make_snapshot())
    renderer.present(make_snapshot())
    assert CLEAR_SCREEN not in stream.getvalue()
    assert stream.getvalue().count("RUSTY SNAKE") == 2


def test_renderers_do_not_mutate_snapshot():
    snapshot = make_snapshot()
    copy = make_snapshot()
    TerminalRenderer(stream=io.StringIO()).present(snapshot)
    NullRenderer().present(snapshot)
    assert snapshot == copy
