"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from rookwise.core.enums import Color, PieceType

# Two-character board code ↔ (Color, PieceType), e.g. "NW" = white knight
_CODE_MAP: dict[str, tuple[Color, PieceType]] = {
    pt.letter + color.letter: (color, pt) for color in Color for pt in PieceType
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Board code: piece letter followed by color letter."""
        return self.piece_type.letter + self.color.letter

    @classmethod
    def from_code(cls, code: str) -> Piece:
        """Create piece from a board code, e.g. 'NW' → white knight."""
        try:
            color, ptype = _CODE_MAP[code]
        except KeyError:
            raise ValueError(f"Invalid piece code: {code!r}") from None
        return cls(color, ptype)

    def promoted(self, piece_type: PieceType = PieceType.QUEEN) -> Piece:
        """A new piece of the same color, replacing this one on promotion."""
        return Piece(self.color, piece_type)
