"""Turn-loop enumerations shared by the controller and its callers."""

from __future__ import annotations

from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game.

    ``NOT_STARTED → AWAITING_MOVE → GAME_OVER``; a rejected move leaves the
    game in ``AWAITING_MOVE`` for the same side.
    """

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    NONE = 0
    CHECKMATE = auto()
    RESIGNATION = auto()


class MoveOutcome(IntEnum):
    """What happened to a submitted move."""

    ACCEPTED = auto()
    MALFORMED = auto()  # input string failed the coordinate grammar
    ILLEGAL = auto()  # piece rules reject it
    WRONG_COLOR = auto()  # source square is empty or holds an opponent piece
    KING_EXPOSED = auto()  # would leave the mover's king in check
    NOT_STARTED = auto()
    GAME_OVER = auto()

    @property
    def accepted(self) -> bool:
        return self == MoveOutcome.ACCEPTED
