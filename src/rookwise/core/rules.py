"""High-level chess rules: check and checkmate detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rookwise.core.enums import Color, GameResult
from rookwise.core.types import Square

if TYPE_CHECKING:
    from rookwise.core.state import GameState

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`GameState`.

    Nothing here mutates the state it is given.  Trial moves are played on
    a copy, so special-move side effects (promotion, en passant, the castling
    rook) never have to be undone by hand.
    """

    @staticmethod
    def find_king(state: GameState, color: Color) -> Square:
        """Square of *color*'s king. Raises ``ValueError`` if there is none."""
        return state.board.king_square(color)

    @staticmethod
    def attackers(state: GameState, color: Color) -> list[Square]:
        """Squares of enemy pieces that could legally move onto *color*'s king."""
        king_sq = Rules.find_king(state, color)
        return [
            sq
            for sq in state.pieces_of(color.opposite)
            if state.is_valid_move(sq, king_sq)
        ]

    @staticmethod
    def is_in_check(state: GameState, color: Color) -> bool:
        king_sq = Rules.find_king(state, color)
        return any(
            state.is_valid_move(sq, king_sq) for sq in state.pieces_of(color.opposite)
        )

    @staticmethod
    def leaves_king_in_check(state: GameState, from_sq: Square, to_sq: Square) -> bool:
        """Whether playing the move would leave the mover's king attacked.

        Returns False for moves the engine would reject anyway.
        """
        piece = state.board[from_sq]
        if piece is None:
            return False
        probe = state.copy()
        if not probe.move_piece(from_sq, to_sq):
            return False
        return Rules.is_in_check(probe, piece.color)

    @staticmethod
    def escapes(state: GameState, color: Color) -> list[tuple[Square, Square]]:
        """Every ``(from, to)`` move of *color* after which its king is safe."""
        return [
            (from_sq, to_sq)
            for from_sq in state.pieces_of(color)
            for to_sq in range(64)
            if _is_escape(state, color, from_sq, to_sq)
        ]

    @staticmethod
    def is_checkmate(state: GameState, color: Color) -> bool:
        if not Rules.is_in_check(state, color):
            return False
        for from_sq in state.pieces_of(color):
            for to_sq in range(64):
                if _is_escape(state, color, from_sq, to_sq):
                    return False
        _LOGGER.debug("%s has no move out of check", color)
        return True

    @staticmethod
    def game_result(state: GameState, side_to_move: Color) -> GameResult:
        """Determine the current game result for the side about to move."""
        if Rules.is_checkmate(state, side_to_move):
            return GameResult.win_for(side_to_move.opposite)
        return GameResult.IN_PROGRESS


def _is_escape(state: GameState, color: Color, from_sq: Square, to_sq: Square) -> bool:
    if not state.is_valid_move(from_sq, to_sq):
        return False
    probe = state.copy()
    probe.move_piece(from_sq, to_sq)
    return not Rules.is_in_check(probe, color)
