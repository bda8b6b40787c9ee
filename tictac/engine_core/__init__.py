"""
Engine Core - Deterministic game state management.

The engine is the runtime that:
1. Holds the authoritative GameState
2. Validates moves
3. Applies actions via the reducer
4. Detects wins and draws
"""

from .state import GameState, Player, Outcome, OutcomeKind, BOARD_SIZE, EMPTY
from .action import Action, ActionType, ActionResult, RejectReason
from .reducer import Reducer, apply_action, check_winner, evaluate_outcome, WINNING_LINES
from .engine import GameEngine

__all__ = [
    "GameState",
    "Player",
    "Outcome",
    "OutcomeKind",
    "BOARD_SIZE",
    "EMPTY",
    "Action",
    "ActionType",
    "ActionResult",
    "RejectReason",
    "Reducer",
    "apply_action",
    "check_winner",
    "evaluate_outcome",
    "WINNING_LINES",
    "GameEngine",
]
