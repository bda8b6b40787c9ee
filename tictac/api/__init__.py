"""
API Module - Display client interface.

Exposes the engine through three commands:
1. get_game_state - read the current snapshot
2. make_move      - place the current player's mark
3. reset_game     - start a fresh game

Every command returns the full game state. The client only renders it;
it never decides wins, draws or whose turn it is.
"""

from .schemas import (
    # Requests
    MoveRequest,
    # Responses
    GameStateResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    Winner,
    Command,
    ErrorCode,
)
from .service import APIService, to_response
from .app import create_app

__all__ = [
    # Requests
    "MoveRequest",
    # Responses
    "GameStateResponse",
    "ErrorResponse",
    "HealthResponse",
    # Enums
    "Winner",
    "Command",
    "ErrorCode",
    # Service
    "APIService",
    "to_response",
    "create_app",
]
