"""Coordinate move notation (``e2,e4``) and the text board view."""

from __future__ import annotations

from typing import NamedTuple

from rookwise.core.board import Board
from rookwise.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

MOVE_SEPARATOR = ","


class MoveInput(NamedTuple):
    """Result of parsing a move string.

    Compares equal to a plain ``(from_rank, from_file, to_rank, to_file, ok)``
    tuple. When ``ok`` is False the coordinates are meaningless zeros.
    """

    from_rank: int
    from_file: int
    to_rank: int
    to_file: int
    ok: bool

    @property
    def from_sq(self) -> Square:
        return make_square(self.from_file, self.from_rank)

    @property
    def to_sq(self) -> Square:
        return make_square(self.to_file, self.to_rank)


_MALFORMED = MoveInput(0, 0, 0, 0, False)


def parse_move(text: str) -> MoveInput:
    """Parse ``"e2,e4"`` into board coordinates.

    Malformed input (wrong length, missing or extra separator, characters
    outside ``a``–``h`` / ``1``–``8``) yields ``ok=False``; it never raises.
    """
    parts = text.strip().split(MOVE_SEPARATOR)
    if len(parts) != 2:
        return _MALFORMED
    try:
        from_sq, to_sq = (parse_square(part) for part in parts)
    except ValueError:
        return _MALFORMED
    return MoveInput(
        rank_of(from_sq), file_of(from_sq), rank_of(to_sq), file_of(to_sq), True
    )


def format_move(from_sq: Square, to_sq: Square) -> str:
    """Inverse of :func:`parse_move`, e.g. ``(12, 28)`` → ``'e2,e4'``."""
    return f"{square_name(from_sq)}{MOVE_SEPARATOR}{square_name(to_sq)}"


def render_board(board: Board, placeholder: str = "..") -> str:
    """Board as text, rank 8 at the top, one two-character cell per square."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        cells = []
        for file in range(8):
            piece = board[make_square(file, rank)]
            cells.append(str(piece) if piece is not None else placeholder)
        rows.append(" ".join(cells))
    return "\n".join(rows)
