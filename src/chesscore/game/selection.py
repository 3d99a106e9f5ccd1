"""Selected square / piece with change tracking."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesscore.core.piece import Piece
from chesscore.core.types import Square


@dataclass
class Selection:
    """The square and piece the player has currently chosen.

    Choosing a square raises a change flag that :meth:`take_change` consumes,
    so the controller reacts once per click rather than once per frame.
    """

    square: Square | None = None
    piece: Piece | None = None
    _changed: bool = field(default=False, repr=False)

    def choose_square(self, square: Square) -> None:
        self.square = square
        self._changed = True

    def choose_piece(self, piece: Piece) -> None:
        self.piece = piece

    def take_change(self) -> bool:
        """Whether the square changed since the last call."""
        changed, self._changed = self._changed, False
        return changed

    def clear(self) -> None:
        self.square = None
        self.piece = None
