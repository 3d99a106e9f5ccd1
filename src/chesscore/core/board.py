"""Board grid - piece placement as an 8x8 array of kinds.

The grid is indexed ``grid[file][rank]`` with ``grid[0][0]`` the bottom-left
square (a1). It is the setup/export view of the board; during play the list of
live :class:`Piece` entities is authoritative.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.errors import ModelInvariantError
from chesscore.core.piece import Piece
from chesscore.core.types import Square

BoardGrid: TypeAlias = list[list[PieceKind]]

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def empty_grid() -> BoardGrid:
    return [[PieceKind.EMPTY] * 8 for _ in range(8)]


def starting_grid() -> BoardGrid:
    """Standard starting arrangement."""
    grid = empty_grid()
    for f, pt in enumerate(_BACK_RANK):
        grid[f][0] = PieceKind.of(Color.WHITE, pt)
        grid[f][1] = PieceKind.of(Color.WHITE, PieceType.PAWN)
        grid[f][6] = PieceKind.of(Color.BLACK, PieceType.PAWN)
        grid[f][7] = PieceKind.of(Color.BLACK, pt)
    return grid


def pieces_from_grid(grid: BoardGrid) -> list[Piece]:
    """Spawn one settled piece per occupied cell, file by file."""
    _check_shape(grid)
    pieces: list[Piece] = []
    for file, column in enumerate(grid):
        for rank, kind in enumerate(column):
            if kind.is_empty:
                continue
            pieces.append(Piece.from_kind(kind, Square(file, rank)))
    return pieces


def grid_from_pieces(pieces: Iterable[Piece], *, at_target: bool = False) -> BoardGrid:
    """Project the live pieces onto a grid.

    Captured pieces are skipped. With *at_target* each piece is placed where
    it is heading instead of where it stands. Two live pieces on one square
    is a model violation.
    """
    grid = empty_grid()
    for piece in pieces:
        if piece.captured:
            continue
        sq = piece.target if at_target else piece.position
        if not grid[sq.file][sq.rank].is_empty:
            raise ModelInvariantError(f"Two live pieces share square {sq}")
        grid[sq.file][sq.rank] = piece.kind
    return grid


def color_of_piece(square: Square, pieces: Iterable[Piece]) -> Color | None:
    """Color of the live piece on *square*, or ``None`` if it is empty."""
    piece = piece_at(square, pieces)
    return piece.color if piece is not None else None


def piece_at(square: Square, pieces: Iterable[Piece]) -> Piece | None:
    for piece in pieces:
        if not piece.captured and piece.position == square:
            return piece
    return None


def render_grid(grid: BoardGrid) -> str:
    """Multi-line text diagram, rank 8 on top."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        row = []
        for file in range(8):
            kind = grid[file][rank]
            row.append("." if kind.is_empty else kind.fen_char)
        rows.append(f"{rank + 1} {' '.join(row)}")
    rows.append("  a b c d e f g h")
    return "\n".join(rows)


def _check_shape(grid: BoardGrid) -> None:
    if len(grid) != 8 or any(len(column) != 8 for column in grid):
        raise ValueError("Board grid must be 8 files of 8 ranks")
