"""Per-piece move legality: pure predicates over a :class:`GameState`.

Nothing in this module mutates the state.  The predicates only answer
whether a piece may travel from one square to another by its movement
rules; whether the move would leave the mover's own king in check is
decided by :class:`~rookwise.core.rules.Rules`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rookwise.core.enums import CastlingRights, Color, MoveFlag, PieceType
from rookwise.core.piece import Piece
from rookwise.core.types import Square, file_of, is_valid_square, make_square, rank_of

if TYPE_CHECKING:
    from rookwise.core.board import Board
    from rookwise.core.state import GameState


KNIGHT_OFFSETS: frozenset[tuple[int, int]] = frozenset(
    {(-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1)}
)

KING_FILE = 4
KINGSIDE_ROOK_FILE = 7
QUEENSIDE_ROOK_FILE = 0

_PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
_PAWN_LAST_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _deltas(from_sq: Square, to_sq: Square) -> tuple[int, int]:
    """``(file_delta, rank_delta)`` from *from_sq* to *to_sq*."""
    return file_of(to_sq) - file_of(from_sq), rank_of(to_sq) - rank_of(from_sq)


def path_is_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between two aligned squares is empty."""
    df, dr = _deltas(from_sq, to_sq)
    step_f, step_r = _sign(df), _sign(dr)
    f = file_of(from_sq) + step_f
    r = rank_of(from_sq) + step_r
    end = (file_of(to_sq), rank_of(to_sq))
    while (f, r) != end:
        if not board.is_empty(make_square(f, r)):
            return False
        f += step_f
        r += step_r
    return True


# -- Per-piece classifiers ---------------------------------------------------
#
# Each classifier returns the MoveFlag describing the move, or None when the
# piece cannot make it.  Callers have already checked that both squares are on
# the board, the source holds *piece* and the target holds no friendly piece.


def _classify_pawn(
    state: GameState, piece: Piece, from_sq: Square, to_sq: Square
) -> MoveFlag | None:
    board = state.board
    color = piece.color
    step = color.forward
    df, dr = _deltas(from_sq, to_sq)
    target = board[to_sq]
    reaches_last_rank = rank_of(to_sq) == _PAWN_LAST_RANK[color]
    landing = MoveFlag.PROMOTION if reaches_last_rank else MoveFlag.NORMAL

    if df == 0:
        if target is not None:
            return None
        if dr == step:
            return landing
        if (
            dr == 2 * step
            and rank_of(from_sq) == _PAWN_START_RANK[color]
            and board.is_empty(make_square(file_of(from_sq), rank_of(from_sq) + step))
        ):
            return MoveFlag.DOUBLE_PAWN
        return None

    if abs(df) != 1 or dr != step:
        return None

    if target is not None:
        return landing if target.color != color else None

    if to_sq == state.en_passant:
        passed = board[make_square(file_of(to_sq), rank_of(from_sq))]
        if (
            passed is not None
            and passed.color != color
            and passed.piece_type == PieceType.PAWN
        ):
            return MoveFlag.EN_PASSANT
    return None


def _classify_rook(
    state: GameState, piece: Piece, from_sq: Square, to_sq: Square
) -> MoveFlag | None:
    df, dr = _deltas(from_sq, to_sq)
    if (df == 0) == (dr == 0):
        return None
    return MoveFlag.NORMAL if path_is_clear(state.board, from_sq, to_sq) else None


def _classify_knight(
    state: GameState, piece: Piece, from_sq: Square, to_sq: Square
) -> MoveFlag | None:
    return MoveFlag.NORMAL if _deltas(from_sq, to_sq) in KNIGHT_OFFSETS else None


def _classify_bishop(
    state: GameState, piece: Piece, from_sq: Square, to_sq: Square
) -> MoveFlag | None:
    df, dr = _deltas(from_sq, to_sq)
    if df == 0 or abs(df) != abs(dr):
        return None
    return MoveFlag.NORMAL if path_is_clear(state.board, from_sq, to_sq) else None


def _classify_queen(
    state: GameState, piece: Piece, from_sq: Square, to_sq: Square
) -> MoveFlag | None:
    flag = _classify_rook(state, piece, from_sq, to_sq)
    if flag is None:
        flag = _classify_bishop(state, piece, from_sq, to_sq)
    return flag


def _classify_king(
    state: GameState, piece: Piece, from_sq: Square, to_sq: Square
) -> MoveFlag | None:
    df, dr = _deltas(from_sq, to_sq)
    if max(abs(df), abs(dr)) == 1:
        return MoveFlag.NORMAL

    home_rank = piece.color.home_rank
    if dr != 0 or abs(df) != 2 or from_sq != make_square(KING_FILE, home_rank):
        return None

    if df > 0:
        right = CastlingRights.kingside(piece.color)
        rook_sq = make_square(KINGSIDE_ROOK_FILE, home_rank)
        flag = MoveFlag.CASTLE_KINGSIDE
    else:
        right = CastlingRights.queenside(piece.color)
        rook_sq = make_square(QUEENSIDE_ROOK_FILE, home_rank)
        flag = MoveFlag.CASTLE_QUEENSIDE

    if not state.castling & right:
        return None
    if state.board[rook_sq] != Piece(piece.color, PieceType.ROOK):
        return None
    if not path_is_clear(state.board, from_sq, rook_sq):
        return None
    return flag


_CLASSIFIERS: dict[PieceType, Callable[..., MoveFlag | None]] = {
    PieceType.PAWN: _classify_pawn,
    PieceType.KNIGHT: _classify_knight,
    PieceType.BISHOP: _classify_bishop,
    PieceType.ROOK: _classify_rook,
    PieceType.QUEEN: _classify_queen,
    PieceType.KING: _classify_king,
}


# -- Public API ---------------------------------------------------------------


def classify_move(state: GameState, from_sq: Square, to_sq: Square) -> MoveFlag | None:
    """Kind of move *from_sq* → *to_sq* would be, or None if it is illegal.

    Rejects off-board squares, an empty source and a destination occupied
    by a piece of the mover's own color before any piece-specific rule runs.
    """
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return None
    piece = state.board[from_sq]
    if piece is None:
        return None
    target = state.board[to_sq]
    if target is not None and target.color == piece.color:
        return None
    return _CLASSIFIERS[piece.piece_type](state, piece, from_sq, to_sq)


def _matches(
    state: GameState, piece_type: PieceType, from_sq: Square, to_sq: Square
) -> bool:
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)) or from_sq == to_sq:
        return False
    piece = state.board[from_sq]
    if piece is None or piece.piece_type != piece_type:
        return False
    return _CLASSIFIERS[piece_type](state, piece, from_sq, to_sq) is not None


def is_valid_pawn_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    """Single or double advance, diagonal capture, or en passant."""
    return _matches(state, PieceType.PAWN, from_sq, to_sq)


def is_valid_rook_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    return _matches(state, PieceType.ROOK, from_sq, to_sq)


def is_valid_knight_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    return _matches(state, PieceType.KNIGHT, from_sq, to_sq)


def is_valid_bishop_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    return _matches(state, PieceType.BISHOP, from_sq, to_sq)


def is_valid_queen_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    return _matches(state, PieceType.QUEEN, from_sq, to_sq)


def is_valid_king_move(state: GameState, from_sq: Square, to_sq: Square) -> bool:
    """One step in any direction, or a castling move along the home rank."""
    return _matches(state, PieceType.KING, from_sq, to_sq)
