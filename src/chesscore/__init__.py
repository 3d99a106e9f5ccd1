"""Rules engine for a two-player chess game."""

__version__ = "0.1.0"
