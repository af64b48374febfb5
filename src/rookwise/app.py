"""Application entry point — the terminal turn loop."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import TextIO

from rookwise.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PLACEHOLDER,
    LOG_LEVELS,
    Settings,
)
from rookwise.core.notation import render_board
from rookwise.game.controller import GameController
from rookwise.game.interfaces import GameEndReason, MoveOutcome

_LOGGER = logging.getLogger(__name__)

RESIGN_COMMANDS = frozenset({"resign"})
QUIT_COMMANDS = frozenset({"quit", "exit"})

_OUTCOME_MESSAGES: dict[MoveOutcome, str] = {
    MoveOutcome.MALFORMED: "Invalid move format. Try again.",
    MoveOutcome.ILLEGAL: "Invalid move. Try again.",
    MoveOutcome.WRONG_COLOR: "Invalid move: that is not your piece. Try again.",
    MoveOutcome.KING_EXPOSED: "Invalid move: your king would be in check. Try again.",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rookwise",
        description="Play a two-player game of chess in the terminal.",
    )
    parser.add_argument(
        "--placeholder",
        default=DEFAULT_PLACEHOLDER,
        help="two characters drawn for an empty square (default: %(default)r)",
    )
    parser.add_argument(
        "--allow-self-check",
        action="store_true",
        help="accept moves that leave your own king in check",
    )
    parser.add_argument(
        "--quiet-check",
        action="store_true",
        help="do not announce when the side to move is in check",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def play(
    settings: Settings,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Run one game until checkmate, resignation, quit or end of input.

    *read_line* defaults to :func:`input` and *out* to ``sys.stdout``.
    Returns the process exit code.
    """
    if read_line is None:
        read_line = input
    if out is None:
        out = sys.stdout
    ctrl = GameController(strict_king_safety=settings.strict_king_safety)
    ctrl.new_game()

    def say(text: str) -> None:
        print(text, file=out)

    while not ctrl.session.is_game_over:
        color = ctrl.side_to_move
        say(render_board(ctrl.state.board, settings.placeholder))
        if settings.show_check and ctrl.session.is_in_check():
            say(f"{color} is in check.")

        try:
            line = _prompt(
                read_line, out, f"{color}'s turn. Enter your move (e.g., e2,e4): "
            )
        except EOFError:
            say("")
            _LOGGER.info("Input closed, leaving game")
            return 0

        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            return 0
        if command in RESIGN_COMMANDS:
            ctrl.resign(color)
            break

        outcome = ctrl.submit_text(line)
        if not outcome.accepted:
            say(_OUTCOME_MESSAGES.get(outcome, "Invalid move. Try again."))

    session = ctrl.session
    winner = session.winner
    if winner is None:
        _LOGGER.warning("Game ended without a winner: %s", session.result)
        return 1
    if session.end_reason == GameEndReason.CHECKMATE:
        say(render_board(ctrl.state.board, settings.placeholder))
        say(f"{winner.opposite} is in checkmate. {winner} wins!")
    else:
        say(f"{winner.opposite} resigns. {winner} wins!")
    return 0


def _prompt(read_line: Callable[[], str], out: TextIO, prompt: str) -> str:
    out.write(prompt)
    out.flush()
    return read_line()


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_args(args)
    except ValueError as exc:
        print(f"rookwise: {exc}", file=sys.stderr)
        return 2
    configure_logging(settings)
    return play(settings)


if __name__ == "__main__":
    sys.exit(main())
