"""Captured-piece ledger owned by the game state."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesscore.core.enums import Color, PieceType
from chesscore.core.piece import Piece

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 0,
}


@dataclass
class CapturedLedger:
    """Records every capture of the game.

    ``pending`` holds captures the view has not removed yet; ``history``
    keeps every captured piece in capture order.
    """

    pending: list[Piece] = field(default_factory=list)
    history: list[Piece] = field(default_factory=list)

    def record(self, piece: Piece) -> None:
        """Mark *piece* captured and queue it for removal."""
        piece.captured = True
        self.pending.append(piece)
        self.history.append(piece)

    def drain(self) -> list[Piece]:
        """Return and forget the captures not yet processed."""
        drained, self.pending = self.pending, []
        return drained

    def clear(self) -> None:
        self.pending.clear()
        self.history.clear()

    def captured_from(self, color: Color) -> list[Piece]:
        """Pieces of *color* that have been captured."""
        return [p for p in self.history if p.color == color]

    def material_lost(self, color: Color) -> int:
        return sum(PIECE_VALUES[p.piece_type] for p in self.captured_from(color))

    def material_advantage(self, color: Color) -> int:
        """Material *color* is ahead by, from captures alone."""
        return self.material_lost(color.opposite) - self.material_lost(color)
