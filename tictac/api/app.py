"""
FastAPI Application - REST API for display clients.

Endpoints:
    GET    /api/v1/state                 Get current game state
    POST   /api/v1/move                  Place a mark ({"position": 0-8})
    POST   /api/v1/reset                 Start a new game
    POST   /api/v1/commands/{command}    Invoke a command by name
                                         (get_game_state, make_move, reset_game)

Every game endpoint returns the full GameStateResponse. An invalid move
(occupied cell, out of range, game already over) is not an error: the
unchanged state comes back with HTTP 200. Only malformed requests fail (422).

Handlers are plain `def` so FastAPI runs them in its threadpool; the
engine serializes mutations with its own lock.
"""

from typing import Any, Optional, Union
import logging

from fastapi import FastAPI, Body, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .. import __version__
from ..config import Settings
from .service import APIService
from .schemas import (
    # Request models
    MoveRequest,
    # Response models
    GameStateResponse,
    ErrorResponse,
    HealthResponse,
    # Enums
    Command,
    ErrorCode,
)

log = logging.getLogger("tictac.api")


def create_app(service: Optional[APIService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or Settings.from_env()
    api_service = service or APIService()

    app = FastAPI(
        title="Tictac Engine API",
        description="""
Tic-Tac-Toe game-state engine. The server is the only authority on the
board, turn order and outcome; clients render what they get back.

## Commands

| Command | Input | Output |
|---------|-------|--------|
| `get_game_state` | none | GameState |
| `make_move` | `position` 0-8 | GameState (unchanged if the move is invalid) |
| `reset_game` | none | GameState (fresh game) |

## Error Codes

| Code | Description |
|------|-------------|
| `VALIDATION_ERROR` | Malformed request (e.g. non-integer position) |
| `UNKNOWN_COMMAND` | Command name not recognised |
| `INTERNAL_ERROR` | Unexpected server failure |
        """,
        version=__version__,
        docs_url=None if settings.is_production else "/api/docs",
        redoc_url=None if settings.is_production else "/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        log.warning("Malformed request to %s: %s", request.url.path, exc.errors())
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Malformed request",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        log.exception("Unhandled error on %s", request.url.path)
        return make_error_response(
            ErrorCode.INTERNAL_ERROR,
            "Internal server error",
            status_code=500,
        )

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/state",
        response_model=GameStateResponse,
        tags=["Game"],
        summary="Get current game state",
    )
    def get_game_state() -> GameStateResponse:
        """Get the complete current game state for display."""
        return api_service.get_game_state()

    @app.post(
        "/api/v1/move",
        response_model=GameStateResponse,
        responses={422: {"model": ErrorResponse, "description": "Malformed position"}},
        tags=["Game"],
        summary="Place the current player's mark",
    )
    def make_move(body: MoveRequest) -> GameStateResponse:
        """
        Place the current player's mark at `position`.

        If the cell is taken, the position is outside 0-8, or the game
        is already over, nothing changes and the current state is returned.
        """
        return api_service.make_move(body.position)

    @app.post(
        "/api/v1/reset",
        response_model=GameStateResponse,
        tags=["Game"],
        summary="Start a new game",
    )
    def reset_game() -> GameStateResponse:
        """Clear the board and give the first move to X."""
        return api_service.reset_game()

    @app.post(
        "/api/v1/commands/{command}",
        response_model=GameStateResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Unknown command"},
            422: {"model": ErrorResponse, "description": "Malformed arguments"},
        },
        tags=["Game"],
        summary="Invoke a command by name",
    )
    def invoke_command(
        command: str,
        args: Optional[dict[str, Any]] = Body(None),
    ) -> Union[GameStateResponse, JSONResponse]:
        """
        Invoke one of the engine commands by name.

        **Request Body (make_move):**
        ```json
        {"position": 4}
        ```
        """
        try:
            cmd = Command(command)
        except ValueError:
            return make_error_response(
                ErrorCode.UNKNOWN_COMMAND,
                f"Unknown command: {command}",
                status_code=404,
                details={"valid_commands": [c.value for c in Command]},
            )

        if cmd == Command.GET_GAME_STATE:
            return api_service.get_game_state()
        if cmd == Command.RESET_GAME:
            return api_service.reset_game()

        try:
            request = MoveRequest.model_validate(args or {})
        except ValidationError as e:
            log.warning("Malformed make_move arguments: %s", args)
            return make_error_response(
                ErrorCode.VALIDATION_ERROR,
                "make_move requires an integer 'position'",
                status_code=422,
                details={"errors": jsonable_encoder(e.errors(include_url=False))},
            )
        return api_service.make_move(request.position)

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="tictac-engine",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    async def root():
        """API root - basic info."""
        return {
            "service": "Tictac Engine API",
            "version": __version__,
            "docs": None if settings.is_production else "/api/docs",
        }

    return app


# For running directly: uvicorn tictac.api.app:app
app = create_app()
