"""
Pytest fixtures for Tictac tests.
"""

import pytest

from ..engine_core import GameEngine, GameState, apply_action, Action
from ..api import APIService, create_app
from ..config import Settings


def play(state: GameState, positions) -> GameState:
    """Apply a sequence of moves through the reducer."""
    for position in positions:
        state = apply_action(state, Action.move(position)).state
    return state


@pytest.fixture
def engine() -> GameEngine:
    """A fresh engine."""
    return GameEngine()


@pytest.fixture
def initial_state() -> GameState:
    return GameState.initial()


@pytest.fixture
def x_won_state() -> GameState:
    """X completed the top row (X: 0, 1, 2 / O: 3, 4)."""
    return play(GameState.initial(), [0, 3, 1, 4, 2])


@pytest.fixture
def drawn_state() -> GameState:
    """Full board, no line.

    X | O | X
    X | O | O
    O | X | X
    """
    return play(GameState.initial(), [0, 1, 2, 4, 3, 5, 7, 6, 8])


@pytest.fixture
def service() -> APIService:
    """Create a fresh API service."""
    return APIService()


@pytest.fixture
def client(service):
    """HTTP client bound to a fresh service."""
    from fastapi.testclient import TestClient

    settings = Settings(env="test", allowed_origins=("*",))
    app = create_app(service=service, settings=settings)
    return TestClient(app)
