"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chesscore.core import is_move_valid, pieces_from_grid, starting_grid
    from chesscore.core.types import B1, C3

    pieces = pieces_from_grid(starting_grid())
    knight = next(p for p in pieces if p.position == B1)
    is_move_valid(knight, C3, pieces)  # True
"""

from chesscore.core.board import (
    BoardGrid,
    color_of_piece,
    empty_grid,
    grid_from_pieces,
    piece_at,
    pieces_from_grid,
    render_grid,
    starting_grid,
)
from chesscore.core.enums import Color, GameResult, PieceKind, PieceType
from chesscore.core.errors import ModelInvariantError
from chesscore.core.notation import (
    STARTING_PLACEMENT,
    export_pieces,
    export_position,
    grid_from_placement,
)
from chesscore.core.path import is_path_empty
from chesscore.core.piece import Piece, live_pieces
from chesscore.core.rules import is_move_valid
from chesscore.core.types import Square, parse_square

__all__ = [
    # Enums / errors
    "Color",
    "GameResult",
    "ModelInvariantError",
    "PieceKind",
    "PieceType",
    # Types
    "BoardGrid",
    "Piece",
    "Square",
    "parse_square",
    # Board helpers
    "color_of_piece",
    "empty_grid",
    "grid_from_pieces",
    "live_pieces",
    "piece_at",
    "pieces_from_grid",
    "render_grid",
    "starting_grid",
    # Rules
    "is_move_valid",
    "is_path_empty",
    # Notation
    "STARTING_PLACEMENT",
    "export_pieces",
    "export_position",
    "grid_from_placement",
]
