"""Move value object (coordinate-pair representation)."""

from __future__ import annotations

from dataclasses import dataclass

from rookwise.core.enums import MoveFlag
from rookwise.core.notation import format_move
from rookwise.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single played move."""

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return format_move(self.from_sq, self.to_sq)

    @property
    def is_castle(self) -> bool:
        return self.flag in (MoveFlag.CASTLE_KINGSIDE, MoveFlag.CASTLE_QUEENSIDE)
