"""Runtime settings for the terminal game."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_PLACEHOLDER = ".."
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Display and rule options.

    Args:
        placeholder: Two-character cell drawn for an empty square.
        strict_king_safety: Reject moves that leave the mover's king in check.
        show_check: Announce when the side to move is in check.
        log_level: Name of the ``logging`` level for the ``rookwise`` logger.
    """

    placeholder: str = DEFAULT_PLACEHOLDER
    strict_king_safety: bool = True
    show_check: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        if len(self.placeholder) != 2:
            raise ValueError(
                f"Placeholder must be exactly two characters: {self.placeholder!r}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Settings:
        return cls(
            placeholder=args.placeholder,
            strict_king_safety=not args.allow_self_check,
            show_check=not args.quiet_check,
            log_level=args.log_level,
        )
