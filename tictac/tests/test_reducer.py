"""
Tests for the reducer (state transitions).

Tests:
- Move application and turn order
- Win detection on every line
- Draw detection
- Rejections leave state unchanged
- Reset
"""

import pytest

from ..engine_core.state import GameState, Player, Outcome, OutcomeKind, EMPTY
from ..engine_core.action import Action, ActionType, RejectReason
from ..engine_core.reducer import (
    Reducer, apply_action, check_winner, evaluate_outcome, WINNING_LINES,
)
from .conftest import play


class TestMoveAction:
    """Tests for accepted moves."""

    def test_first_move_is_x(self, initial_state):
        """X places the first mark and the turn passes to O."""
        result = apply_action(initial_state, Action.move(4))

        assert result.accepted
        assert result.state.board[4] == "X"
        assert result.state.current_player == Player.O
        assert result.state.outcome == Outcome.in_progress()

    def test_does_not_mutate_input(self, initial_state):
        """The reducer returns a new state and leaves the old one alone."""
        apply_action(initial_state, Action.move(0))

        assert initial_state.board == (EMPTY,) * 9
        assert initial_state.current_player == Player.X

    def test_turn_alternates(self, initial_state):
        """Current player strictly alternates X, O, X, O..."""
        state = initial_state
        seen = []
        for position in [0, 4, 8, 1, 7]:
            seen.append(state.current_player)
            state = apply_action(state, Action.move(position)).state

        assert seen == [Player.X, Player.O, Player.X, Player.O, Player.X]

    def test_records_changes(self, initial_state):
        """Accepted moves describe what happened."""
        result = apply_action(initial_state, Action.move(2))

        assert result.changes == ["X marked cell 2"]


class TestRejections:
    """Invalid moves are no-ops carrying the unchanged state."""

    @pytest.mark.parametrize("position", [-1, 9, 100, -100])
    def test_out_of_range(self, initial_state, position):
        """Positions outside 0-8 are rejected."""
        result = apply_action(initial_state, Action.move(position))

        assert not result.accepted
        assert result.reason == RejectReason.OUT_OF_RANGE
        assert result.state is initial_state

    def test_occupied_cell(self, initial_state):
        """A cell can only be marked once."""
        state = apply_action(initial_state, Action.move(0)).state
        result = apply_action(state, Action.move(0))

        assert not result.accepted
        assert result.reason == RejectReason.CELL_OCCUPIED
        assert result.state is state

    def test_missing_position(self, initial_state):
        """A move without a position is out of range."""
        result = apply_action(initial_state, Action(action_type=ActionType.MOVE))

        assert result.reason == RejectReason.OUT_OF_RANGE

    def test_game_over_checked_first(self, x_won_state):
        """After the game ends every move is rejected as GAME_OVER."""
        for position in [0, 5, 9]:
            result = apply_action(x_won_state, Action.move(position))
            assert not result.accepted
            assert result.reason == RejectReason.GAME_OVER
            assert result.state is x_won_state


class TestWinDetection:
    """Tests for win detection."""

    def test_eight_lines(self):
        """Rows, columns and both diagonals."""
        assert len(WINNING_LINES) == 8
        assert set(WINNING_LINES) == {
            (0, 1, 2), (3, 4, 5), (6, 7, 8),
            (0, 3, 6), (1, 4, 7), (2, 5, 8),
            (0, 4, 8), (2, 4, 6),
        }

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_x_completes_line(self, line):
        """X's third mark on any line wins, and the turn does not pass."""
        o_moves = [p for p in range(9) if p not in line][:2]
        state = play(GameState.initial(), [line[0], o_moves[0], line[1], o_moves[1], line[2]])

        assert state.outcome == Outcome.win(Player.X)
        assert state.winner == Player.X
        assert state.current_player == Player.X
        assert state.game_over

        remaining = state.empty_positions()[0]
        assert not apply_action(state, Action.move(remaining)).accepted

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_o_completes_line(self, line):
        """O can win on any line too."""
        board = [EMPTY] * 9
        for p in line[:2]:
            board[p] = "O"
        # three X marks off the line, never forming one themselves
        x_cells = [p for p in range(9) if p not in line]
        for p in x_cells:
            candidate = board.copy()
            candidate[p] = "X"
            if check_winner(tuple(candidate)) is None:
                board = candidate
            if board.count("X") == 3:
                break
        state = GameState(board=tuple(board), current_player=Player.O)
        assert check_winner(state.board) is None

        result = apply_action(state, Action.move(line[2]))

        assert result.accepted
        assert result.state.outcome == Outcome.win(Player.O)
        assert result.state.current_player == Player.O
        assert result.changes[-1] == "O wins"

    def test_scenario_top_row(self, x_won_state):
        """0,3,1,4,2: X takes the top row."""
        assert x_won_state.outcome.kind == OutcomeKind.WIN
        assert x_won_state.winner == Player.X
        assert list(x_won_state.board) == ["X", "X", "X", "O", "O", " ", " ", " ", " "]

    def test_check_winner_empty_board(self):
        """No marks, no winner."""
        assert check_winner((EMPTY,) * 9) is None


class TestDrawDetection:
    """Tests for draw detection."""

    def test_full_board_no_line(self, drawn_state):
        """0,1,2,4,3,5,7,6,8 fills the board without a line."""
        assert drawn_state.outcome == Outcome.draw()
        assert drawn_state.is_draw
        assert drawn_state.winner is None
        assert drawn_state.is_full
        assert drawn_state.game_over

    def test_draw_keeps_last_mover(self, drawn_state):
        """X made the ninth move and stays current."""
        assert drawn_state.current_player == Player.X

    def test_win_on_last_cell_beats_draw(self):
        """A line completed by the ninth mark is a win, not a draw."""
        # X | O | X
        # O | X | O
        # O | X | .   -> X plays 8 for the 0-4-8 diagonal
        state = GameState(
            board=("X", "O", "X", "O", "X", "O", "O", "X", EMPTY),
            current_player=Player.X,
        )
        result = apply_action(state, Action.move(8))

        assert result.state.is_full
        assert result.state.outcome == Outcome.win(Player.X)

    def test_partial_board_in_progress(self):
        """Empty cells and no line means the game continues."""
        board = ("X", "O", EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
        assert evaluate_outcome(board) == Outcome.in_progress()


class TestResetAction:
    """Tests for reset."""

    @pytest.mark.parametrize("moves", [[], [4], [0, 3, 1, 4, 2], [0, 1, 2, 4, 3, 5, 7, 6, 8]])
    def test_reset_from_any_state(self, moves):
        """Reset always returns the initial state."""
        state = play(GameState.initial(), moves)
        result = Reducer().apply(state, Action.reset())

        assert result.accepted
        assert result.state == GameState.initial()
        assert result.state.current_player == Player.X
        assert result.state.outcome.kind == OutcomeKind.IN_PROGRESS


class TestGameState:
    """Tests for the snapshot type itself."""

    def test_board_length_enforced(self):
        """A board must have exactly 9 cells."""
        with pytest.raises(ValueError):
            GameState(board=(EMPTY,) * 8)

    def test_snapshot_is_frozen(self, initial_state):
        """Snapshots can't be modified in place."""
        with pytest.raises(AttributeError):
            initial_state.current_player = Player.O

    def test_is_playable(self, x_won_state):
        """Playable means blank cell and game not over."""
        fresh = GameState.initial()
        assert fresh.is_playable(0)
        assert not fresh.is_playable(9)
        assert not x_won_state.is_playable(5)

    def test_player_other(self):
        assert Player.X.other() == Player.O
        assert Player.O.other() == Player.X
