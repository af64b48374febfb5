"""Game session — the turn state machine and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from rookwise.core.enums import Color, GameResult, MoveFlag
from rookwise.core.move import Move
from rookwise.core.piece import Piece
from rookwise.core.rules import Rules
from rookwise.core.state import GameState
from rookwise.core.types import Square, file_of, make_square, rank_of
from rookwise.game.interfaces import GameEndReason, GamePhase


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    gave_check: bool = False


@dataclass
class GameSession:
    """Manages game lifecycle: side to move, phase, result, move history.

    This is a pure data/logic class: no I/O, no threading.  It replaces a
    global "current player" with an object the turn loop owns.
    """

    state: GameState = field(default_factory=GameState)
    side_to_move: Color = Color.WHITE
    phase: GamePhase = GamePhase.NOT_STARTED
    result: GameResult = GameResult.IN_PROGRESS
    end_reason: GameEndReason = GameEndReason.NONE
    move_history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self, state: GameState | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        """Initialise (or reset) the game, optionally from a custom position."""
        if state is None:
            self.state.initialize()
        else:
            self.state = state
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = GameEndReason.NONE
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move, pass the turn and return the history record.

        Caller is responsible for the legality check.
        """
        board = self.state.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece to move for {move}")
        captured = board[_captured_square(move)]
        if not self.state.move_piece(move.from_sq, move.to_sq):
            raise ValueError(f"Move {move} was not accepted by the engine")

        self.side_to_move = self.side_to_move.opposite
        record = MoveRecord(
            move=move,
            piece=piece,
            captured=captured,
            gave_check=Rules.is_in_check(self.state, self.side_to_move),
        )
        self.move_history.append(record)
        self._check_game_over()
        return record

    def resign(self, color: Color) -> None:
        self.result = GameResult.win_for(color.opposite)
        self.end_reason = GameEndReason.RESIGNATION
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Color | None:
        if self.result == GameResult.WHITE_WINS:
            return Color.WHITE
        if self.result == GameResult.BLACK_WINS:
            return Color.BLACK
        return None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def fullmove_display(self) -> int:
        """Current full-move number for display."""
        return (self.ply_count // 2) + 1

    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.state, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.state, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.end_reason = GameEndReason.CHECKMATE
            self.phase = GamePhase.GAME_OVER


def _captured_square(move: Move) -> Square:
    if move.flag == MoveFlag.EN_PASSANT:
        return make_square(file_of(move.to_sq), rank_of(move.from_sq))
    return move.to_sq

