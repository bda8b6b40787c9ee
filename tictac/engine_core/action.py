"""
Action System - Actions and results.

Actions represent the two ways a match can change:
1. A player placing a mark (MOVE)
2. Starting over (RESET)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    MOVE = "move"
    RESET = "reset"


class RejectReason(Enum):
    """Why a move was not applied. Rejections are no-ops, not errors."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    The acting player is never part of the action: the state
    decides whose turn it is.
    """
    action_type: ActionType
    position: int | None = None

    @classmethod
    def move(cls, position: int) -> Action:
        """Factory for move action."""
        return cls(action_type=ActionType.MOVE, position=position)

    @classmethod
    def reset(cls) -> Action:
        """Factory for reset action."""
        return cls(action_type=ActionType.RESET)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the action was accepted
    - The resulting state (unchanged state when rejected)
    - The rejection reason (if rejected)
    - Human-readable changes (for logs and UI)
    """
    accepted: bool
    state: Any  # GameState
    reason: RejectReason | None = None
    changes: list[str] = field(default_factory=list)

    @classmethod
    def rejected(cls, state: Any, reason: RejectReason) -> ActionResult:
        """Create a rejection result carrying the unchanged state."""
        return cls(accepted=False, state=state, reason=reason)

    @classmethod
    def accepted_with_state(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create an accepted result with the new state."""
        return cls(accepted=True, state=state, changes=changes or [])
