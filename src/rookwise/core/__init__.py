"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookwise.core import GameState, Rules, Color, parse_move

    state = GameState()
    move = parse_move("e2,e4")
    if move.ok and state.move_piece(move.from_sq, move.to_sq):
        print(Rules.is_in_check(state, Color.BLACK))
"""

from rookwise.core.board import Board
from rookwise.core.enums import CastlingRights, Color, GameResult, MoveFlag, PieceType
from rookwise.core.legality import (
    classify_move,
    is_valid_bishop_move,
    is_valid_king_move,
    is_valid_knight_move,
    is_valid_pawn_move,
    is_valid_queen_move,
    is_valid_rook_move,
)
from rookwise.core.move import Move
from rookwise.core.notation import MoveInput, format_move, parse_move, render_board
from rookwise.core.piece import Piece
from rookwise.core.rules import Rules
from rookwise.core.state import GameState
from rookwise.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "GameState",
    "Move",
    "Piece",
    "Rules",
    # Legality
    "classify_move",
    "is_valid_bishop_move",
    "is_valid_king_move",
    "is_valid_knight_move",
    "is_valid_pawn_move",
    "is_valid_queen_move",
    "is_valid_rook_move",
    # Notation
    "MoveInput",
    "format_move",
    "parse_move",
    "render_board",
]
