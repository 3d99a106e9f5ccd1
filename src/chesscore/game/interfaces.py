"""Abstract interfaces and states for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesscore.core.types import Square
    from chesscore.game.resolver import MoveOutcome


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class MoveStatus(IntEnum):
    """How the resolver dealt with a move attempt."""

    COMMITTED = auto()
    INVALID = auto()  # piece cannot go there
    WRONG_TURN = auto()  # piece belongs to the side not on move
    REJECTED = auto()  # game over, or piece no longer on the board


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(self, placement: str | None = None) -> None:
        """Set up a new game from a placement string (default: start)."""

    @abstractmethod
    def select_square(self, square: Square) -> None:
        """Record the square the player picked."""

    @abstractmethod
    def update(self) -> MoveOutcome | None:
        """Run one frame: react to a new selection, settle, drain markers."""

    @abstractmethod
    def submit_move(self, origin: Square, destination: Square) -> MoveOutcome:
        """Attempt to move the piece on *origin* to *destination*."""

    @abstractmethod
    def export_position(self) -> str:
        """Notation of the current position."""
