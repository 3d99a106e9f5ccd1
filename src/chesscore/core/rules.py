"""Move legality for a single piece.

The rule set is deliberately partial: it checks piece geometry, blocking
pieces and capture targets, but never king safety. Castling and en passant
are not moves this engine knows about.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chesscore.core.board import color_of_piece
from chesscore.core.enums import Color, PieceType
from chesscore.core.errors import ModelInvariantError
from chesscore.core.path import is_path_empty
from chesscore.core.piece import Piece, live_pieces
from chesscore.core.types import Square

_LOGGER = logging.getLogger(__name__)

# color -> (forward rank step, home rank)
_PAWN_GEOMETRY: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 1),
    Color.BLACK: (-1, 6),
}

_KNIGHT_DELTAS = frozenset({(1, 2), (2, 1)})


def is_move_valid(piece: Piece, destination: Square, pieces: Iterable[Piece]) -> bool:
    """Whether *piece* may move to *destination* given the other pieces.

    Captured pieces in *pieces* are ignored. Raises
    :class:`ModelInvariantError` if *piece* carries the ``EMPTY`` kind.
    """
    if piece.kind.is_empty:
        raise ModelInvariantError("Legality queried for a piece of kind EMPTY")

    if destination == piece.position:
        return False

    board = live_pieces(pieces)
    occupant = color_of_piece(destination, board)
    _LOGGER.debug(
        "Checking %s %s -> %s (occupant: %s)",
        piece.kind.name,
        piece.position,
        destination,
        occupant,
    )
    if occupant == piece.color:
        return False

    start = piece.position
    d_file = destination.file - start.file
    d_rank = destination.rank - start.rank
    ptype = piece.piece_type

    if ptype == PieceType.KING:
        return max(abs(d_file), abs(d_rank)) == 1

    if ptype == PieceType.QUEEN:
        return (
            _is_straight(d_file, d_rank) or _is_diagonal(d_file, d_rank)
        ) and is_path_empty(start, destination, board)

    if ptype == PieceType.ROOK:
        return _is_straight(d_file, d_rank) and is_path_empty(start, destination, board)

    if ptype == PieceType.BISHOP:
        return _is_diagonal(d_file, d_rank) and is_path_empty(start, destination, board)

    if ptype == PieceType.KNIGHT:
        return (abs(d_file), abs(d_rank)) in _KNIGHT_DELTAS

    if ptype == PieceType.PAWN:
        return _is_pawn_move_valid(piece, destination, occupant, board)

    raise ModelInvariantError(f"Unhandled piece type: {ptype!r}")


def _is_straight(d_file: int, d_rank: int) -> bool:
    """Same file xor same rank."""
    return (d_file == 0) != (d_rank == 0)


def _is_diagonal(d_file: int, d_rank: int) -> bool:
    return d_file != 0 and abs(d_file) == abs(d_rank)


def _is_pawn_move_valid(
    piece: Piece,
    destination: Square,
    occupant: Color | None,
    board: list[Piece],
) -> bool:
    forward, home_rank = _PAWN_GEOMETRY[piece.color]
    start = piece.position
    d_file = destination.file - start.file
    d_rank = destination.rank - start.rank

    # One square forward
    if d_file == 0 and d_rank == forward and occupant is None:
        return True

    # Two squares forward from the home rank
    if (
        d_file == 0
        and start.rank == home_rank
        and d_rank == 2 * forward
        and occupant is None
        and is_path_empty(start, destination, board)
    ):
        return True

    # Diagonal capture
    return abs(d_file) == 1 and d_rank == forward and occupant == piece.color.opposite
