"""Game state — pieces, turn, markers and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesscore.core.board import BoardGrid, grid_from_pieces, piece_at, pieces_from_grid
from chesscore.core.enums import Color, GameResult, PieceKind
from chesscore.core.notation import STARTING_PLACEMENT, export_position, grid_from_placement
from chesscore.core.piece import Piece, live_pieces
from chesscore.core.types import Square
from chesscore.game.interfaces import GamePhase
from chesscore.game.ledger import CapturedLedger
from chesscore.game.turn import Turn


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    kind: PieceKind
    origin: Square
    destination: Square
    turn_number: int
    position_after: str
    captured: PieceKind | None = None
    promoted: bool = False

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Everything the resolver and the frame steps share.

    This is a pure data/logic class — no threading, no UI.
    """

    pieces: list[Piece] = field(default_factory=list, init=False)
    turn: Turn = field(default_factory=Turn, init=False)
    captures: CapturedLedger = field(default_factory=CapturedLedger, init=False)
    promotions: list[Piece] = field(default_factory=list, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_placement: str = field(default=STARTING_PLACEMENT, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, placement: str | None = None) -> None:
        """Initialise (or reset) the game with White to move."""
        self.start_placement = placement or STARTING_PLACEMENT
        grid = grid_from_placement(self.start_placement)
        self.pieces = pieces_from_grid(grid)
        self.turn.reset()
        self.captures.clear()
        self.promotions.clear()
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()

    # ── Mutation helpers ─────────────────────────────────────────────────

    def remove_pieces(self, removed: list[Piece]) -> None:
        """Drop *removed* entities from the board."""
        gone = {id(p) for p in removed}
        self.pieces = [p for p in self.pieces if id(p) not in gone]

    def declare_winner(self, color: Color) -> None:
        self.result = GameResult.win_for(color)
        self.phase = GamePhase.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Color:
        return self.turn.color

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def live_pieces(self) -> list[Piece]:
        return live_pieces(self.pieces)

    def piece_at(self, square: Square) -> Piece | None:
        return piece_at(square, self.pieces)

    def grid(self) -> BoardGrid:
        """Where pieces are heading, as a grid.

        Uses ``target`` so a committed move shows up before the settle step.
        """
        return grid_from_pieces(self.pieces, at_target=True)

    def export(self) -> str:
        return export_position(self.grid(), self.turn.color)

