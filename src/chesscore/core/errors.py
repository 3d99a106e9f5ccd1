"""Exceptions raised by the core domain layer."""

from __future__ import annotations


class ModelInvariantError(RuntimeError):
    """The board model is in a state that upstream code must never produce.

    Raised for bugs, not for user mistakes: an ``EMPTY`` kind on a live piece,
    two live pieces on one square, a color lookup on an empty grid cell.
    """
