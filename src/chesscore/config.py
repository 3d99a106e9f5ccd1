"""Game configuration and logging setup for host applications."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from chesscore.core.notation import STARTING_PLACEMENT, grid_from_placement

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Settings consumed by :class:`~chesscore.game.controller.GameController`.

    Args:
        placement: Starting arrangement as a FEN placement field.
        clear_selection_on_invalid: Drop the selected piece after an
            invalid move instead of keeping it for another attempt.
        log_level: Level name applied by :meth:`apply_logging`.
    """

    placement: str = STARTING_PLACEMENT
    clear_selection_on_invalid: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        grid_from_placement(self.placement)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GameConfig:
        """Build a config from plain key/value settings."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def apply_logging(self) -> None:
        """Set up the ``chesscore`` logger at :attr:`log_level`.

        Hosts call this once at startup; the controller never does.
        """
        configure_logging(self.log_level)


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a stream handler to the ``chesscore`` logger.

    The library never calls this itself; hosts opt in.
    """
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("chesscore")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
