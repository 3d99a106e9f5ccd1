"""Game management layer — turn, resolver, controller, frame steps.

Quick start::

    from chesscore.game import GameController
    from chesscore.core.types import E2, E4

    ctrl = GameController()
    ctrl.new_game()
    ctrl.click(E2)
    outcome = ctrl.click(E4)
"""

from chesscore.game.controller import GameController, GameEvents
from chesscore.game.interfaces import GamePhase, IGameController, MoveStatus
from chesscore.game.ledger import CapturedLedger
from chesscore.game.resolver import MoveOutcome, MoveResolver
from chesscore.game.selection import Selection
from chesscore.game.settle import settle_pieces
from chesscore.game.state import GameState, MoveRecord
from chesscore.game.turn import Turn

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "MoveStatus",
    # Concrete
    "CapturedLedger",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveOutcome",
    "MoveRecord",
    "MoveResolver",
    "Selection",
    "Turn",
    "settle_pieces",
]
