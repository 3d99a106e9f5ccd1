"""Notation package: position export and placement parsing."""

from chesscore.core.notation.fen import (
    INERT_FIELDS,
    STARTING_PLACEMENT,
    export_pieces,
    export_position,
    grid_from_placement,
)

__all__ = [
    "INERT_FIELDS",
    "STARTING_PLACEMENT",
    "export_pieces",
    "export_position",
    "grid_from_placement",
]
