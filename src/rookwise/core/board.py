"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from rookwise.core.enums import Color, PieceType
from rookwise.core.piece import Piece
from rookwise.core.types import Square, make_square

_COLOR_COUNT = 2

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board that owns every piece placed on it."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square cache (None if king missing).
        self._king_squares: list[Square | None] = [None] * _COLOR_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        old_piece = self._squares[sq]
        if (
            old_piece is not None
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[int(old_piece.color)] == sq
        ):
            self._king_squares[int(old_piece.color)] = None

        self._squares[sq] = piece

        if piece is not None and piece.piece_type == PieceType.KING:
            self._king_squares[int(piece.color)] = sq

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for every occupied square, a1 first."""
        for sq, piece in enumerate(self._squares):
            if piece is not None:
                yield sq, piece

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return [
            sq
            for sq, p in self.occupied()
            if p.color == color and p.piece_type == piece_type
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, p in self.occupied() if p.color == color]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[int(color)]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None] * _COLOR_COUNT

    def reset(self) -> None:
        """Clear the board and lay out the standard starting position."""
        self.clear()
        for f in range(8):
            self[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            self[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(BACK_RANK):
            self[make_square(f, 0)] = Piece(Color.WHITE, pt)
            self[make_square(f, 7)] = Piece(Color.BLACK, pt)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else "..")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a  b  c  d  e  f  g  h")
        return "\n".join(rows)
