"""
Game State - Immutable snapshot of a Tic-Tac-Toe match.

Design principles:
- Immutable: every mutation returns a new state (frozen dataclasses, tuple board)
- Snapshot-safe: callers can hold a state without affecting the engine
- Serializable: every field maps directly onto the wire shape
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


BOARD_SIZE = 9
EMPTY = " "


class Player(str, Enum):
    """The two players. X always moves first."""
    X = "X"
    O = "O"

    def other(self) -> Player:
        """Get the opposite player."""
        return Player.O if self is Player.X else Player.X


class OutcomeKind(Enum):
    """High-level match status."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of the match so far.

    `winner` is set only for WIN. DRAW and IN_PROGRESS never carry a player,
    so "game ongoing" and "drawn" can't be confused.
    """
    kind: OutcomeKind = OutcomeKind.IN_PROGRESS
    winner: Player | None = None

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls()

    @classmethod
    def win(cls, player: Player) -> Outcome:
        return cls(kind=OutcomeKind.WIN, winner=player)

    @classmethod
    def draw(cls) -> Outcome:
        return cls(kind=OutcomeKind.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.IN_PROGRESS


def empty_board() -> tuple[str, ...]:
    return (EMPTY,) * BOARD_SIZE


@dataclass(frozen=True)
class GameState:
    """
    Complete match state at a point in time.

    Board cells are indexed 0-8 in row-major order (0 = top-left,
    8 = bottom-right); each holds "X", "O" or EMPTY.

    `current_player` stays fixed once the game is over so the
    display can keep showing who made the final move.
    """
    board: tuple[str, ...] = field(default_factory=empty_board)
    current_player: Player = Player.X
    outcome: Outcome = field(default_factory=Outcome.in_progress)

    def __post_init__(self):
        if len(self.board) != BOARD_SIZE:
            raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(self.board)}")

    @classmethod
    def initial(cls) -> GameState:
        """Fresh game: empty board, X to move."""
        return cls()

    @property
    def game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Player | None:
        return self.outcome.winner

    @property
    def is_draw(self) -> bool:
        return self.outcome.kind is OutcomeKind.DRAW

    @property
    def is_full(self) -> bool:
        return EMPTY not in self.board

    def count(self, player: Player) -> int:
        """Number of marks the player has on the board."""
        return self.board.count(player.value)

    def empty_positions(self) -> list[int]:
        return [i for i, cell in enumerate(self.board) if cell == EMPTY]

    def is_playable(self, position: int) -> bool:
        """True if a move at `position` would be accepted."""
        return (
            not self.game_over
            and 0 <= position < BOARD_SIZE
            and self.board[position] == EMPTY
        )

    def with_mark(self, position: int, player: Player) -> GameState:
        """Return new state with the player's mark placed at position."""
        cells = list(self.board)
        cells[position] = player.value
        return self._copy_with(board=tuple(cells))

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            board=kwargs.get("board", self.board),
            current_player=kwargs.get("current_player", self.current_player),
            outcome=kwargs.get("outcome", self.outcome),
        )

