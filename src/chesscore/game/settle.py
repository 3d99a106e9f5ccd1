"""Per-tick settle step: move pieces onto their target squares."""

from __future__ import annotations

from collections.abc import Iterable

from chesscore.core.piece import Piece


def settle_pieces(pieces: Iterable[Piece]) -> list[Piece]:
    """Move every unsettled piece onto its target; return the ones that moved.

    Safe to run every frame: settled pieces are left alone.
    """
    moved: list[Piece] = []
    for piece in pieces:
        if piece.is_settled:
            continue
        piece.position = piece.target
        moved.append(piece)
    return moved
