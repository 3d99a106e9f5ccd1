"""FEN-style position export and placement parsing.

Only the piece placement and the side to move carry information. Castling,
en passant and the move clocks are fixed placeholders because the engine does
not implement those rules.
"""

from __future__ import annotations

from collections.abc import Iterable

from chesscore.core.board import BoardGrid, empty_grid, grid_from_pieces
from chesscore.core.enums import Color, PieceKind
from chesscore.core.piece import Piece

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

# castling, en passant, halfmove clock, fullmove number
INERT_FIELDS = "---- - 0 0"


def export_position(grid: BoardGrid, side_to_move: Color) -> str:
    """Serialise *grid* and the side to move, rank 8 first."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            kind = grid[file][rank]
            if kind.is_empty:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += kind.fen_char
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if side_to_move == Color.WHITE else "b"

    return f"{board_str} {side_str} {INERT_FIELDS}"


def export_pieces(pieces: Iterable[Piece], side_to_move: Color) -> str:
    """Export the live pieces directly."""
    return export_position(grid_from_pieces(pieces), side_to_move)


def grid_from_placement(placement: str) -> BoardGrid:
    """Parse a FEN placement field (``rnbq.../...``) into a grid."""
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")
    grid = empty_grid()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                grid[file][rank] = PieceKind.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return grid
