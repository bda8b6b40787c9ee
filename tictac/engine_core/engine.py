"""
Game Engine - The authority over the current match.

The engine holds exactly one GameState and is the only thing allowed
to replace it. Every public call takes the lock, so concurrent callers
(e.g. threadpool-served HTTP requests) see whole moves, never half of one.

Snapshots handed out are immutable; callers can't reach engine storage.
"""

from __future__ import annotations
import logging
import threading

from .state import GameState
from .action import Action, ActionResult
from .reducer import Reducer

log = logging.getLogger("tictac.engine")


class GameEngine:
    """
    Owns the board, the current player and the outcome.

    Usage:
        engine = GameEngine()
        state = engine.make_move(4)
        state = engine.reset()
    """

    def __init__(self, reducer: Reducer | None = None):
        self._reducer = reducer or Reducer()
        self._state = GameState.initial()
        self._lock = threading.Lock()

    def get_state(self) -> GameState:
        """Current snapshot. No side effects."""
        with self._lock:
            return self._state

    def apply(self, action: Action) -> ActionResult:
        """Apply an action atomically and keep the resulting state."""
        with self._lock:
            result = self._reducer.apply(self._state, action)
            if result.accepted:
                self._state = result.state
                log.info("%s", "; ".join(result.changes))
            else:
                log.debug(
                    "Rejected %s at %r: %s",
                    action.action_type.value, action.position, result.reason.value,
                )
            return result

    def make_move(self, position: int) -> GameState:
        """
        Place the current player's mark at position (0-8).

        Invalid moves (out of range, occupied, game over) leave the
        state untouched and return it as-is.
        """
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"position must be an int, got {type(position).__name__}")
        return self.apply(Action.move(position)).state

    def reset(self) -> GameState:
        """Start a fresh game. Valid from any state."""
        return self.apply(Action.reset()).state
