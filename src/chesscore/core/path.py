"""Path-obstruction checks for sliding moves."""

from __future__ import annotations

from collections.abc import Iterable

from chesscore.core.board import color_of_piece
from chesscore.core.piece import Piece, live_pieces
from chesscore.core.types import Square


def is_path_empty(start: Square, end: Square, pieces: Iterable[Piece]) -> bool:
    """Whether every square strictly between *start* and *end* is empty.

    Only file, rank and diagonal lines are walked. Any other pair of squares
    reports an empty path, so callers must check the move shape first.
    Neither endpoint is inspected.
    """
    board = live_pieces(pieces)

    # Same file
    if start.file == end.file:
        low, high = sorted((start.rank, end.rank))
        for piece in board:
            if piece.position.file == start.file and low < piece.position.rank < high:
                return False

    # Same rank
    if start.rank == end.rank:
        low, high = sorted((start.file, end.file))
        for piece in board:
            if piece.position.rank == start.rank and low < piece.position.file < high:
                return False

    # Diagonals
    d_file = end.file - start.file
    d_rank = end.rank - start.rank
    if abs(d_file) == abs(d_rank):
        step_file = 1 if d_file > 0 else -1
        step_rank = 1 if d_rank > 0 else -1
        for i in range(1, abs(d_file)):
            between = Square(start.file + i * step_file, start.rank + i * step_rank)
            if color_of_piece(between, board) is not None:
                return False

    return True
