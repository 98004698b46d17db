"""
Keyboard player - reads headings typed on a text stream.

A background thread reads one line per key press (w/a/s/d or a direction
name followed by Enter) and keeps only the latest heading. The engine
takes that value once per tick, so a heading never changes mid-tick.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from ..domain.constants import Direction
from ..domain.game_state import Snapshot
from .base import Player

logger = logging.getLogger(__name__)


class KeyboardPlayer(Player):
    """
    Single-writer (reader thread) / single-reader (engine) handoff of the
    most recently requested heading.
    """

    def __init__(self, stream: Optional[TextIO] = None, start: bool = True):
        self.stream = stream if stream is not None else sys.stdin
        self._lock = threading.Lock()
        self._pending: Optional[Direction] = None
        self._error: Optional[BaseException] = None
        self._closed = False
        self._thread = threading.Thread(target=self._read_loop, name="keyboard-player", daemon=True)
        if start:
            self._thread.start()

    def _read_loop(self):
        try:
            for line in self.stream:
                self.submit(line)
        except Exception as e:
            logger.error(f"Keyboard input failed: {e}")
            with self._lock:
                self._error = e

    def submit(self, text: str) -> Optional[Direction]:
        """Parse one line of input and make it the pending heading."""
        text = text.strip()
        if not text:
            return None
        try:
            direction = Direction.parse(text)
        except ValueError:
            logger.warning(f"Ignoring unrecognised input: {text!r}")
            return None
        with self._lock:
            if self._closed:
                return None
            self._pending = direction
        return direction

    def get_move(self, snapshot: Snapshot) -> Optional[Direction]:
        """Take the latest heading (or None) and clear it. Re-raises reader errors."""
        with self._lock:
            if self._error is not None:
                raise self._error
            direction, self._pending = self._pending, None
        return direction

    def close(self) -> None:
        """Stop accepting headings and drop any pending one."""
        # The reader thread is a daemon blocked on input; it exits with the process
        with self._lock:
            self._closed = True
            self._pending = None
