"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rookwise.core.enums import CastlingRights
from rookwise.core.state import GameState

PlacementFactory = Callable[..., GameState]


@pytest.fixture
def state() -> GameState:
    """A fresh game in the standard starting position."""
    return GameState()


@pytest.fixture
def place() -> PlacementFactory:
    """Build a custom position from ``{"e1": "KW", ...}``.

    Castling rights default to none so that kings on their home squares do
    not unexpectedly castle in tests that are not about castling.
    """

    def _place(
        pieces: dict[str, str],
        castling: CastlingRights = CastlingRights.NONE,
        en_passant: str | None = None,
    ) -> GameState:
        return GameState.from_placement(
            pieces, castling=castling, en_passant=en_passant
        )

    return _place
