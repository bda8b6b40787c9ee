"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> ActionResult
- Validates before applying
- Terminal evaluation happens before the turn switches
- Invalid moves are rejections carrying the unchanged state, never exceptions
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import GameState, Outcome, Player, BOARD_SIZE, EMPTY
from .action import Action, ActionType, ActionResult, RejectReason


# 3 rows, 3 columns, 2 diagonals
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def check_winner(board: tuple[str, ...]) -> Player | None:
    """Return the player owning a completed line, if any."""
    for a, b, c in WINNING_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Player(board[a])
    return None


def evaluate_outcome(board: tuple[str, ...]) -> Outcome:
    """Lines first, then a full board means draw."""
    winner = check_winner(board)
    if winner is not None:
        return Outcome.win(winner)
    if EMPTY not in board:
        return Outcome.draw()
    return Outcome.in_progress()


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the new state, or the unchanged
        state plus a reason if the action was rejected.
        """
        reason = self._validate_action(state, action)
        if reason:
            return ActionResult.rejected(state, reason)

        handler = self._get_handler(action.action_type)
        return handler(state, action)

    def _validate_action(self, state: GameState, action: Action) -> RejectReason | None:
        """
        Validate that an action is legal in the current state.

        Returns the reason if invalid, None if valid.
        """
        if action.action_type == ActionType.RESET:
            return None

        if state.game_over:
            return RejectReason.GAME_OVER
        if action.position is None or not 0 <= action.position < BOARD_SIZE:
            return RejectReason.OUT_OF_RANGE
        if state.board[action.position] != EMPTY:
            return RejectReason.CELL_OCCUPIED
        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.MOVE: self._handle_move,
            ActionType.RESET: self._handle_reset,
        }
        return handlers[action_type]

    def _handle_move(self, state: GameState, action: Action) -> ActionResult:
        """Place the mark, evaluate the outcome, then pass the turn."""
        mover = state.current_player
        new_state = state.with_mark(action.position, mover)
        outcome = evaluate_outcome(new_state.board)
        changes = [f"{mover.value} marked cell {action.position}"]

        if outcome.is_terminal:
            new_state = new_state._copy_with(outcome=outcome)
            if outcome.winner is not None:
                changes.append(f"{outcome.winner.value} wins")
            else:
                changes.append("draw")
        else:
            new_state = new_state._copy_with(current_player=mover.other())

        return ActionResult.accepted_with_state(new_state, changes)

    def _handle_reset(self, state: GameState, action: Action) -> ActionResult:
        """Abandon whatever is on the board and start a fresh game."""
        return ActionResult.accepted_with_state(GameState.initial(), ["game reset"])


def apply_action(state: GameState, action: Action) -> ActionResult:
    """Convenience function to apply an action."""
    return Reducer().apply(state, action)
