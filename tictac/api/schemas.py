"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a display client and the engine.

Error Codes:
- VALIDATION_ERROR: Request body or arguments are malformed (e.g. non-integer position)
- UNKNOWN_COMMAND: Command name is not one of get_game_state, make_move, reset_game
- INTERNAL_ERROR: Unexpected server failure

An invalid *move* (occupied cell, out of range, game over) is not an error:
the unchanged state is returned with HTTP 200.
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field

from ..engine_core.state import Player


# =============================================================================
# Enums
# =============================================================================

class Winner(str, Enum):
    """Who won. Absent (null) while the game is still in progress."""
    X = "X"
    O = "O"
    DRAW = "draw"


class Command(str, Enum):
    """The command surface exposed to display clients."""
    GET_GAME_STATE = "get_game_state"
    MAKE_MOVE = "make_move"
    RESET_GAME = "reset_game"


class ErrorCode(str, Enum):
    """Structured error codes."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class MoveRequest(BaseModel):
    """Request to place the current player's mark."""
    position: int = Field(
        strict=True,
        description="Cell index 0-8, row-major from the top-left",
    )


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """Full snapshot of the match."""
    board: list[str] = Field(
        min_length=9,
        max_length=9,
        description='9 cells, each "X", "O" or " " (empty)',
    )
    current_player: Player
    game_over: bool
    winner: Optional[Winner] = Field(
        None, description='"X", "O", "draw", or null while in progress'
    )

    api_version: str = "v1"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
    api_version: str = "v1"


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
