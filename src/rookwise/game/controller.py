"""GameController — the orchestrator of a single interactive game.

Coordinates: GameSession, the legality engine, the check analyzer.
Emits events via simple callbacks so the terminal loop / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rookwise.core.enums import Color, GameResult, PieceType
from rookwise.core.legality import classify_move
from rookwise.core.move import Move
from rookwise.core.notation import parse_move
from rookwise.core.rules import Rules
from rookwise.core.state import GameState
from rookwise.core.types import Square, is_valid_square
from rookwise.game.interfaces import GamePhase, MoveOutcome
from rookwise.game.session import GameSession, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameSession], None]
CheckCallback = Callable[[Color], None]  # color now in check
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates submitted moves, applies them, switches turns, notifies listeners.

    Args:
        strict_king_safety: Reject moves that leave the mover's own king in
            check. The legality engine itself never checks this.

    Thread-safety: one controller per game, driven from a single thread.
    Checkmate probes work on copies, so a probe never exposes a half-played
    position, but move submission itself is not re-entrant.
    """

    __slots__ = ("_session", "_strict_king_safety", "events")

    def __init__(self, strict_king_safety: bool = True) -> None:
        self._session = GameSession()
        self._strict_king_safety = strict_king_safety
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> GameState:
        return self._session.state

    @property
    def side_to_move(self) -> Color:
        return self._session.side_to_move

    @property
    def phase(self) -> GamePhase:
        return self._session.phase

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self, state: GameState | None = None, side_to_move: Color = Color.WHITE
    ) -> None:
        self._session = GameSession()
        self._session.setup(state, side_to_move)
        _LOGGER.info("New game, %s to move", side_to_move)
        self._emit_phase(self._session.phase)
        if self._session.is_game_over:
            self._emit_game_over(self._session.result)

    def submit_text(self, text: str) -> MoveOutcome:
        """Parse a ``"e2,e4"`` string and submit it."""
        if self._session.is_game_over:
            return MoveOutcome.GAME_OVER
        parsed = parse_move(text)
        if not parsed.ok:
            _LOGGER.debug("Malformed move input %r", text)
            return MoveOutcome.MALFORMED
        return self.submit_move(parsed.from_sq, parsed.to_sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        session = self._session
        if session.phase == GamePhase.NOT_STARTED:
            return MoveOutcome.NOT_STARTED
        if session.phase != GamePhase.AWAITING_MOVE:
            return MoveOutcome.GAME_OVER

        state = session.state
        color = session.side_to_move
        piece = state.board[from_sq] if is_valid_square(from_sq) else None
        if piece is None or piece.color != color:
            return MoveOutcome.WRONG_COLOR

        flag = classify_move(state, from_sq, to_sq)
        if flag is None:
            return MoveOutcome.ILLEGAL
        target = state.board[to_sq]
        if target is not None and target.piece_type == PieceType.KING:
            _LOGGER.debug("Refused king capture %s", Move(from_sq, to_sq, flag))
            return MoveOutcome.ILLEGAL
        if self._strict_king_safety and Rules.leaves_king_in_check(
            state, from_sq, to_sq
        ):
            return MoveOutcome.KING_EXPOSED

        record = session.apply_move(Move(from_sq, to_sq, flag))
        _LOGGER.info("%s played %s", color, record.move)

        self._emit_move(record)
        if record.gave_check:
            self._emit_check(session.side_to_move)
        if session.is_game_over:
            _LOGGER.info("Checkmate, %s wins", color)
            self._emit_game_over(session.result)
        return MoveOutcome.ACCEPTED

    def resign(self, color: Color) -> None:
        if self._session.is_game_over:
            return
        self._session.resign(color)
        _LOGGER.info("%s resigned", color)
        self._emit_game_over(self._session.result)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._session)

    def _emit_check(self, color: Color) -> None:
        for cb in self.events.on_check:
            cb(color)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
