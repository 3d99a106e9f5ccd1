"""Qt bridge that re-emits controller events as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from chesscore.core.enums import Color
from chesscore.core.piece import Piece
from chesscore.game.controller import GameController
from chesscore.game.resolver import MoveOutcome
from chesscore.game.turn import Turn


class GameSignals(QObject):
    """Signal source for a Qt view driven by a :class:`GameController`.

    ``move_committed`` carries the :class:`MoveOutcome`; its ``was_capture``
    picks the move or capture sound. ``piece_captured`` and
    ``piece_promoted`` are one-shot per piece. ``game_over`` carries the
    winning :class:`Color` as an int.
    """

    move_committed = pyqtSignal(object)
    move_rejected = pyqtSignal(object)
    turn_changed = pyqtSignal(int, int)
    piece_captured = pyqtSignal(object)
    piece_promoted = pyqtSignal(object)
    game_over = pyqtSignal(int)

    def __init__(self, controller: GameController, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._controller: GameController | None = None
        self.attach(controller)

    @property
    def controller(self) -> GameController | None:
        return self._controller

    def attach(self, controller: GameController) -> None:
        """Subscribe to *controller*, replacing any previous one."""
        self.detach()
        events = controller.events
        events.on_move.append(self._on_move)
        events.on_invalid_move.append(self._on_invalid_move)
        events.on_turn_changed.append(self._on_turn_changed)
        events.on_capture.append(self._on_capture)
        events.on_promotion.append(self._on_promotion)
        events.on_game_over.append(self._on_game_over)
        self._controller = controller

    def detach(self) -> None:
        if self._controller is None:
            return
        events = self._controller.events
        for callbacks, handler in (
            (events.on_move, self._on_move),
            (events.on_invalid_move, self._on_invalid_move),
            (events.on_turn_changed, self._on_turn_changed),
            (events.on_capture, self._on_capture),
            (events.on_promotion, self._on_promotion),
            (events.on_game_over, self._on_game_over),
        ):
            if handler in callbacks:
                callbacks.remove(handler)
        self._controller = None

    # ── Event handlers ───────────────────────────────────────────────────

    def _on_move(self, outcome: MoveOutcome) -> None:
        self.move_committed.emit(outcome)

    def _on_invalid_move(self, outcome: MoveOutcome) -> None:
        self.move_rejected.emit(outcome)

    def _on_turn_changed(self, turn: Turn) -> None:
        self.turn_changed.emit(int(turn.color), turn.number)

    def _on_capture(self, piece: Piece) -> None:
        self.piece_captured.emit(piece)

    def _on_promotion(self, piece: Piece) -> None:
        self.piece_promoted.emit(piece)

    def _on_game_over(self, winner: Color) -> None:
        self.game_over.emit(int(winner))
