"""Live piece entity."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.errors import ModelInvariantError
from chesscore.core.types import Square


@dataclass(eq=False, slots=True)
class Piece:
    """One piece on the board.

    Identity matters, not value: two white pawns on different squares are
    different entities, and the same entity keeps its identity while it moves,
    gets promoted or captured.

    ``target`` is where the piece is travelling to. The resolver writes it, the
    settle step copies it into ``position``.
    """

    kind: PieceKind
    color: Color
    position: Square
    target: Square = field(default=None)  # type: ignore[assignment]
    captured: bool = False
    promoted: bool = False

    def __post_init__(self) -> None:
        if self.kind.is_empty:
            raise ModelInvariantError(f"Live piece at {self.position} has kind EMPTY")
        if self.kind.color != self.color:
            raise ModelInvariantError(
                f"Piece kind {self.kind.name} does not match color {self.color.name}"
            )
        if self.target is None:
            self.target = self.position

    @classmethod
    def from_kind(cls, kind: PieceKind, position: Square) -> Piece:
        """Create a settled piece whose color is taken from *kind*."""
        return cls(kind, kind.color, position)

    @property
    def piece_type(self) -> PieceType:
        return self.kind.piece_type

    @property
    def is_settled(self) -> bool:
        return self.position == self.target

    def __repr__(self) -> str:
        flags = "".join(
            (" captured" if self.captured else "", " promoted" if self.promoted else "")
        )
        return f"<Piece {self.kind.fen_char} {self.position}->{self.target}{flags}>"


def live_pieces(pieces: Iterable[Piece]) -> list[Piece]:
    """Pieces that still take part in board queries (not captured)."""
    return [p for p in pieces if not p.captured]
