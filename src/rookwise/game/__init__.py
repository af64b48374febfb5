"""Game management layer — turn state machine, history, controller.

Quick start::

    from rookwise.game import GameController, MoveOutcome

    ctrl = GameController()
    ctrl.new_game()
    assert ctrl.submit_text("e2,e4") is MoveOutcome.ACCEPTED
"""

from rookwise.game.controller import GameController, GameEvents
from rookwise.game.interfaces import GameEndReason, GamePhase, MoveOutcome
from rookwise.game.session import GameSession, MoveRecord

__all__ = [
    "GameController",
    "GameEndReason",
    "GameEvents",
    "GamePhase",
    "GameSession",
    "MoveOutcome",
    "MoveRecord",
]
