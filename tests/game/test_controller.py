"""Tests for GameController — the turn state machine."""

from rookwise.core.enums import Color, GameResult, MoveFlag, PieceType
from rookwise.core.piece import Piece
from rookwise.core.state import GameState
from rookwise.core.types import E2, E4, parse_square
from rookwise.game.controller import GameController
from rookwise.game.interfaces import GameEndReason, GamePhase, MoveOutcome

FOOLS_MATE = ("f2,f3", "e7,e5", "g2,g4", "d8,h4")
PINNED_BISHOP = {"e1": "KW", "e2": "BW", "e8": "RB", "a8": "KB"}


def _make_controller(strict_king_safety: bool = True) -> GameController:
    ctrl = GameController(strict_king_safety=strict_king_safety)
    ctrl.new_game()
    return ctrl


class TestNewGame:
    def test_phase_awaiting(self) -> None:
        ctrl = _make_controller()
        assert ctrl.phase == GamePhase.AWAITING_MOVE

    def test_white_moves_first(self) -> None:
        ctrl = _make_controller()
        assert ctrl.side_to_move == Color.WHITE

    def test_submit_before_start(self) -> None:
        ctrl = GameController()
        assert ctrl.phase == GamePhase.NOT_STARTED
        assert ctrl.submit_move(E2, E4) == MoveOutcome.NOT_STARTED

    def test_new_game_resets(self) -> None:
        ctrl = _make_controller()
        ctrl.submit_text("e2,e4")
        ctrl.new_game()
        assert ctrl.state == GameState()
        assert ctrl.session.ply_count == 0
        assert ctrl.side_to_move == Color.WHITE

    def test_custom_position(self) -> None:
        ctrl = GameController()
        ctrl.new_game(
            GameState.from_placement({"e1": "KW", "e8": "KB", "a2": "PB"}),
            side_to_move=Color.BLACK,
        )
        assert ctrl.side_to_move == Color.BLACK
        assert ctrl.submit_text("a2,a1") == MoveOutcome.ACCEPTED
        promoted = ctrl.state.board[parse_square("a1")]
        assert promoted == Piece(Color.BLACK, PieceType.QUEEN)

    def test_custom_position_already_mated(self) -> None:
        results: list[GameResult] = []
        ctrl = GameController()
        ctrl.events.on_game_over.append(results.append)
        ctrl.new_game(
            GameState.from_placement({"d8": "KB", "a8": "RW", "d6": "KW"}),
            side_to_move=Color.BLACK,
        )
        assert ctrl.session.is_game_over
        assert results == [GameResult.WHITE_WINS]


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_move(E2, E4) == MoveOutcome.ACCEPTED
        assert ctrl.side_to_move == Color.BLACK
        assert ctrl.state.en_passant == parse_square("e3")

    def test_malformed_text(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_text("e2e4") == MoveOutcome.MALFORMED
        assert ctrl.side_to_move == Color.WHITE

    def test_illegal_move_rejected(self) -> None:
        ctrl = _make_controller()
        before = ctrl.state.copy()
        assert ctrl.submit_text("e2,e5") == MoveOutcome.ILLEGAL
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.state == before

    def test_wrong_color_rejected(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_text("e7,e5") == MoveOutcome.WRONG_COLOR
        assert ctrl.submit_text("e4,e5") == MoveOutcome.WRONG_COLOR

    def test_turns_alternate(self) -> None:
        ctrl = _make_controller()
        assert ctrl.submit_text("e2,e4").accepted
        assert ctrl.submit_text("d2,d4") == MoveOutcome.WRONG_COLOR
        assert ctrl.submit_text("e7,e5").accepted
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.session.fullmove_display == 2

    def test_self_check_rejected_when_strict(self) -> None:
        state = GameState.from_placement(PINNED_BISHOP)
        ctrl = GameController()
        ctrl.new_game(state)
        assert ctrl.submit_text("e2,d3") == MoveOutcome.KING_EXPOSED
        assert ctrl.submit_text("e1,d1") == MoveOutcome.ACCEPTED

    def test_self_check_allowed_when_lenient(self) -> None:
        state = GameState.from_placement(PINNED_BISHOP)
        ctrl = GameController(strict_king_safety=False)
        ctrl.new_game(state)
        assert ctrl.submit_text("e2,d3") == MoveOutcome.ACCEPTED

    def test_history_records_capture(self) -> None:
        ctrl = _make_controller()
        for move in ("e2,e4", "d7,d5", "e4,d5"):
            assert ctrl.submit_text(move).accepted
        record = ctrl.session.move_history[-1]
        assert str(record.move) == "e4,d5"
        assert record.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)

    def test_history_records_en_passant_capture(self) -> None:
        ctrl = _make_controller()
        for move in ("e2,e4", "a7,a6", "e4,e5", "d7,d5", "e5,d6"):
            assert ctrl.submit_text(move).accepted
        record = ctrl.session.move_history[-1]
        assert record.move.flag == MoveFlag.EN_PASSANT
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert ctrl.state.board[parse_square("d5")] is None

    def test_king_capture_refused_when_lenient(self) -> None:
        ctrl = _make_controller(strict_king_safety=False)
        for move in ("e2,e4", "f7,f5", "d1,h5", "a7,a6"):
            assert ctrl.submit_text(move).accepted
        assert ctrl.submit_text("h5,e8") == MoveOutcome.ILLEGAL
        king = ctrl.state.board[parse_square("e8")]
        assert king == Piece(Color.BLACK, PieceType.KING)
        assert ctrl.side_to_move == Color.WHITE
        assert ctrl.phase == GamePhase.AWAITING_MOVE


class TestEvents:
    def test_move_event_fires(self) -> None:
        ctrl = _make_controller()
        played: list[str] = []
        ctrl.events.on_move.append(
            lambda record, session: played.append(str(record.move))
        )
        ctrl.submit_text("e2,e4")
        ctrl.submit_text("e2,e4")  # rejected: no event
        assert played == ["e2,e4"]

    def test_check_event(self) -> None:
        ctrl = _make_controller()
        checked: list[Color] = []
        ctrl.events.on_check.append(checked.append)
        for move in ("e2,e4", "f7,f6", "d1,h5"):
            ctrl.submit_text(move)
        assert checked == [Color.BLACK]

    def test_game_over_on_checkmate(self) -> None:
        ctrl = _make_controller()
        results: list[GameResult] = []
        phases: list[GamePhase] = []
        ctrl.events.on_game_over.append(results.append)
        ctrl.events.on_phase_changed.append(phases.append)
        for move in FOOLS_MATE:
            assert ctrl.submit_text(move).accepted
        assert results == [GameResult.BLACK_WINS]
        assert phases[-1] == GamePhase.GAME_OVER
        assert ctrl.session.end_reason == GameEndReason.CHECKMATE
        assert ctrl.session.winner == Color.BLACK

    def test_no_moves_after_game_over(self) -> None:
        ctrl = _make_controller()
        for move in FOOLS_MATE:
            ctrl.submit_text(move)
        assert ctrl.submit_text("a2,a3") == MoveOutcome.GAME_OVER
        outcome = ctrl.submit_move(parse_square("a2"), parse_square("a3"))
        assert outcome == MoveOutcome.GAME_OVER


class TestResign:
    def test_resign(self) -> None:
        ctrl = _make_controller()
        ctrl.resign(Color.WHITE)
        assert ctrl.session.result == GameResult.BLACK_WINS
        assert ctrl.session.end_reason == GameEndReason.RESIGNATION
        assert ctrl.session.is_game_over

    def test_resign_after_game_over_ignored(self) -> None:
        ctrl = _make_controller()
        for move in FOOLS_MATE:
            ctrl.submit_text(move)
        ctrl.resign(Color.BLACK)
        assert ctrl.session.result == GameResult.BLACK_WINS
