"""GameController — the per-frame orchestrator of a chess game.

Runs the steps of one frame in a fixed order over state it owns::

    select square -> select piece -> resolve move -> settle
        -> process captures -> process promotions

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesscore.config import GameConfig
from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece
from chesscore.core.types import Square
from chesscore.game.interfaces import GamePhase, IGameController, MoveStatus
from chesscore.game.resolver import MoveOutcome, MoveResolver
from chesscore.game.selection import Selection
from chesscore.game.settle import settle_pieces
from chesscore.game.state import GameState
from chesscore.game.turn import Turn

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveOutcome], None]
TurnCallback = Callable[[Turn], None]
PieceCallback = Callable[[Piece], None]
GameOverCallback = Callable[[Color], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_invalid_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_capture: list[PieceCallback] = field(default_factory=list)
    on_promotion: list[PieceCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Turns square selections into moves and keeps the board consistent.

    ``on_capture`` and ``on_game_over`` fire from :meth:`update` when the
    captured pieces are processed, not at the moment of the move, so a view
    can finish animating the capturing piece first.
    """

    __slots__ = (
        "_config",
        "_state",
        "_resolver",
        "_selection",
        "events",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self._state = GameState()
        self._resolver = MoveResolver(self._state)
        self._selection = Selection()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def turn(self) -> Turn:
        return self._state.turn

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, placement: str | None = None) -> None:
        self._state.setup(placement or self._config.placement)
        self._selection = Selection()
        _LOGGER.info("New game: %s", self._state.export())
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._emit_turn()

    def select_square(self, square: Square) -> None:
        _LOGGER.info("Square selected: %s", square)
        self._selection.choose_square(square)

    def update(self) -> MoveOutcome | None:
        outcome: MoveOutcome | None = None
        if self._selection.take_change():
            outcome = self._handle_selection()
        settle_pieces(self._state.pieces)
        self._process_captures()
        self._process_promotions()
        return outcome

    def click(self, square: Square) -> MoveOutcome | None:
        """Select *square* and run one frame."""
        self.select_square(square)
        return self.update()

    def submit_move(self, origin: Square, destination: Square) -> MoveOutcome:
        """Resolve a move directly, bypassing selection.

        A committed move is settled at once so the next call sees the
        moved piece on its new square.
        """
        piece = self._state.piece_at(origin)
        if piece is None:
            raise ValueError(f"No piece on {origin}")
        outcome = self._resolver.resolve(piece, destination)
        if outcome.committed:
            settle_pieces(self._state.pieces)
        self._after_resolve(outcome)
        return outcome

    def export_position(self) -> str:
        return self._state.export()

    # ── Frame steps ──────────────────────────────────────────────────────

    def _handle_selection(self) -> MoveOutcome | None:
        square = self._selection.square
        if square is None or self._state.is_game_over:
            return None

        # Clicking one of your own pieces (re)selects it.
        occupant = self._state.piece_at(square)
        if occupant is not None and occupant.color == self._state.side_to_move:
            _LOGGER.info("Piece selected: %r", occupant)
            self._selection.choose_piece(occupant)
            return None

        piece = self._selection.piece
        if piece is None:
            return None

        outcome = self._resolver.resolve(piece, square)
        self._after_resolve(outcome)
        return outcome

    def _after_resolve(self, outcome: MoveOutcome) -> None:
        if outcome.clears_selection or (
            outcome.status == MoveStatus.INVALID
            and self._config.clear_selection_on_invalid
        ):
            self._selection.clear()

        if not outcome.committed:
            for cb in self.events.on_invalid_move:
                cb(outcome)
            return

        for cb in self.events.on_move:
            cb(outcome)
        self._emit_turn()

    def _process_captures(self) -> None:
        captured = self._state.captures.drain()
        if not captured:
            return
        self._state.remove_pieces(captured)
        for piece in captured:
            _LOGGER.info("Removing captured piece %r", piece)
            for cb in self.events.on_capture:
                cb(piece)
        for piece in captured:
            if piece.piece_type == PieceType.KING:
                winner = piece.color.opposite
                _LOGGER.info("Thanks for playing! %s won!", winner.name.capitalize())
                self._emit_phase(GamePhase.GAME_OVER)
                for cb in self.events.on_game_over:
                    cb(winner)

    def _process_promotions(self) -> None:
        promoted, self._state.promotions = self._state.promotions, []
        for piece in promoted:
            for cb in self.events.on_promotion:
                cb(piece)
            piece.promoted = False

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_turn(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._state.turn)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
