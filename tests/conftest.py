"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from chesscore.core.board import pieces_from_grid
from chesscore.core.notation import grid_from_placement
from chesscore.core.piece import Piece
from chesscore.core.types import Square

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


def _board(placement: str) -> list[Piece]:
    return pieces_from_grid(grid_from_placement(placement))


def _at(pieces: list[Piece], square: Square) -> Piece:
    for piece in pieces:
        if piece.position == square:
            return piece
    raise AssertionError(f"No piece on {square}")


@pytest.fixture
def board() -> Callable[[str], list[Piece]]:
    """Spawn pieces from a FEN placement field."""
    return _board


@pytest.fixture
def at() -> Callable[[list[Piece], Square], Piece]:
    """Look up the piece standing on a square."""
    return _at
