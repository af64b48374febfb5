"""GameState — board plus castling rights and en-passant target."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import cast

from rookwise.core.board import Board
from rookwise.core.enums import CastlingRights, Color, MoveFlag, PieceType
from rookwise.core.legality import (
    KING_FILE,
    KINGSIDE_ROOK_FILE,
    QUEENSIDE_ROOK_FILE,
    classify_move,
)
from rookwise.core.piece import Piece
from rookwise.core.types import (
    Square,
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

_LOGGER = logging.getLogger(__name__)


class GameState:
    """Board + castling rights + en passant.

    ``en_passant`` is ``None`` whenever no en-passant capture is available;
    otherwise it is the square a pawn skipped over on the previous move.
    """

    __slots__ = ("board", "castling", "en_passant")

    def __init__(
        self,
        board: Board | None = None,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.castling = castling
        self.en_passant = en_passant

    @classmethod
    def from_placement(
        cls,
        placement: Mapping[str, str],
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: str | None = None,
    ) -> GameState:
        """Build a position from ``{"e1": "KW", ...}`` square → piece codes."""
        board = Board()
        for name, code in placement.items():
            board[parse_square(name)] = Piece.from_code(code)
        ep = parse_square(en_passant) if en_passant is not None else None
        return cls(board, castling, ep)

    def initialize(self) -> None:
        """Reset to the standard starting position with full castling rights."""
        self.board.reset()
        self.castling = CastlingRights.ALL
        self.en_passant = None

    # ── Castling flags ───────────────────────────────────────────────────

    @property
    def white_can_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_KINGSIDE)

    @property
    def white_can_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.WHITE_QUEENSIDE)

    @property
    def black_can_castle_kingside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_KINGSIDE)

    @property
    def black_can_castle_queenside(self) -> bool:
        return bool(self.castling & CastlingRights.BLACK_QUEENSIDE)

    # ── Move operations ──────────────────────────────────────────────────

    def is_valid_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the piece on *from_sq* may move to *to_sq*. Read-only."""
        return classify_move(self, from_sq, to_sq) is not None

    def move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply the move if legal. Returns False and leaves state untouched if not.

        Does not check whether the mover's own king ends up in check.
        """
        flag = classify_move(self, from_sq, to_sq)
        if flag is None:
            _LOGGER.debug("Rejected move %s", _describe(from_sq, to_sq))
            return False

        piece = cast(Piece, self.board[from_sq])

        self.board[from_sq] = None
        if flag == MoveFlag.PROMOTION:
            self.board[to_sq] = piece.promoted(PieceType.QUEEN)
        else:
            self.board[to_sq] = piece

        # En passant: the captured pawn sits beside the origin, not on the target
        if flag == MoveFlag.EN_PASSANT:
            self.board[make_square(file_of(to_sq), rank_of(from_sq))] = None

        if flag == MoveFlag.CASTLE_KINGSIDE:
            self._slide_rook(rank_of(from_sq), KINGSIDE_ROOK_FILE, KING_FILE + 1)
        elif flag == MoveFlag.CASTLE_QUEENSIDE:
            self._slide_rook(rank_of(from_sq), QUEENSIDE_ROOK_FILE, KING_FILE - 1)

        self._update_castling(piece, from_sq, to_sq)

        if flag == MoveFlag.DOUBLE_PAWN:
            self.en_passant = make_square(
                file_of(from_sq), (rank_of(from_sq) + rank_of(to_sq)) // 2
            )
        else:
            self.en_passant = None

        _LOGGER.debug("Applied %s move %s", flag.name, _describe(from_sq, to_sq))
        return True

    def _slide_rook(self, rank: int, from_file: int, to_file: int) -> None:
        rook_from = make_square(from_file, rank)
        self.board[make_square(to_file, rank)] = self.board[rook_from]
        self.board[rook_from] = None

    # ── Castling bookkeeping ─────────────────────────────────────────────

    _ROOK_CORNERS: dict[Square, CastlingRights] = {
        make_square(0, 0): CastlingRights.WHITE_QUEENSIDE,
        make_square(7, 0): CastlingRights.WHITE_KINGSIDE,
        make_square(0, 7): CastlingRights.BLACK_QUEENSIDE,
        make_square(7, 7): CastlingRights.BLACK_KINGSIDE,
    }

    def _update_castling(self, piece: Piece, from_sq: Square, to_sq: Square) -> None:
        if piece.piece_type == PieceType.KING:
            self.castling &= ~CastlingRights.for_color(piece.color)

        # A rook leaving its corner, or being captured there, loses that right
        for sq in (from_sq, to_sq):
            if sq in self._ROOK_CORNERS:
                self.castling &= ~self._ROOK_CORNERS[sq]

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> GameState:
        """Independent deep copy."""
        return GameState(self.board.copy(), self.castling, self.en_passant)

    def pieces_of(self, color: Color) -> list[Square]:
        return self.board.all_pieces(color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.board == other.board
            and self.castling == other.castling
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        ep = square_name(self.en_passant) if self.en_passant is not None else "-"
        return f"GameState(castling={self.castling!r}, en_passant={ep})\n{self.board!r}"


def _describe(from_sq: Square, to_sq: Square) -> str:
    names = [
        square_name(sq) if is_valid_square(sq) else repr(sq) for sq in (from_sq, to_sq)
    ]
    return "-".join(names)
