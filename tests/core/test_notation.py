"""Tests for coordinate move parsing and board rendering."""

import pytest

from rookwise.core.board import Board
from rookwise.core.move import Move
from rookwise.core.enums import MoveFlag
from rookwise.core.notation import MoveInput, format_move, parse_move, render_board
from rookwise.core.types import (
    A1, E2, E4, G1, H8,
    parse_square,
    square_name,
)


class TestParseMove:
    def test_basic(self) -> None:
        assert parse_move("e2,e4") == (1, 4, 3, 4, True)

    def test_squares(self) -> None:
        move = parse_move("e2,e4")
        assert isinstance(move, MoveInput)
        assert move.from_sq == E2
        assert move.to_sq == E4

    def test_corners(self) -> None:
        assert parse_move("a1,h8") == (0, 0, 7, 7, True)
        assert parse_move("h8,a1").to_sq == A1

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_move("  e2,e4\n").ok

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "e2e4",
            "i2,e4",
            "e9,e4",
            "e0,e4",
            "E2,E4",
            "e2,e4,e5",
            "e2, e4",
            "e2;e4",
            "e,e4",
            "e22,e4",
            ",",
        ],
    )
    def test_malformed(self, text: str) -> None:
        result = parse_move(text)
        assert not result.ok
        assert result == (0, 0, 0, 0, False)


class TestFormatMove:
    def test_inverse_of_parse(self) -> None:
        assert format_move(E2, E4) == "e2,e4"
        parsed = parse_move(format_move(G1, H8))
        assert (parsed.from_sq, parsed.to_sq) == (G1, H8)

    def test_move_str(self) -> None:
        assert str(Move(E2, E4, MoveFlag.DOUBLE_PAWN)) == "e2,e4"


class TestSquareNames:
    def test_parse_square(self) -> None:
        assert parse_square("e4") == E4
        assert square_name(H8) == "h8"

    @pytest.mark.parametrize("name", ["", "e", "z1", "a9", "A1", "e44"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)


class TestRenderBoard:
    def test_initial_position(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert len(lines) == 8
        assert lines[0] == "RB NB BB QB KB BB NB RB"
        assert lines[1] == "PB PB PB PB PB PB PB PB"
        assert lines[2] == ".. .. .. .. .. .. .. .."
        assert lines[7] == "RW NW BW QW KW BW NW RW"

    def test_custom_placeholder(self) -> None:
        text = render_board(Board(), placeholder="--")
        assert text.splitlines()[3] == " ".join(["--"] * 8)
