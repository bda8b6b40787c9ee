"""
API Service - Business logic layer between API and engine.

The service:
1. Translates commands to engine calls
2. Converts engine snapshots to the wire shape

This layer is framework-agnostic (can be used with FastAPI, a CLI, tests, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import GameStateResponse, Winner
from ..engine_core import GameEngine, GameState


@dataclass
class APIService:
    """
    Command surface for display clients.

    Usage:
        service = APIService()

        state = service.get_game_state()
        state = service.make_move(4)
        state = service.reset_game()
    """
    engine: GameEngine = field(default_factory=GameEngine)

    def get_game_state(self) -> GameStateResponse:
        """Current state; never changes anything."""
        return to_response(self.engine.get_state())

    def make_move(self, position: int) -> GameStateResponse:
        """Play at position. Returns the unchanged state if the move is invalid."""
        return to_response(self.engine.make_move(position))

    def reset_game(self) -> GameStateResponse:
        """Start over with an empty board and X to move."""
        return to_response(self.engine.reset())


def to_response(state: GameState) -> GameStateResponse:
    """Convert an engine snapshot into the API response model."""
    if state.is_draw:
        winner = Winner.DRAW
    elif state.winner is not None:
        winner = Winner(state.winner.value)
    else:
        winner = None

    return GameStateResponse(
        board=list(state.board),
        current_player=state.current_player,
        game_over=state.game_over,
        winner=winner,
    )
