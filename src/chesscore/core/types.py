"""Square value type and coordinate helpers.

Board layout (origin bottom-left from White's side):
    a1 = Square(0, 0), h1 = Square(7, 0)
    a8 = Square(0, 7), h8 = Square(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """A (file, rank) coordinate, both in 0-7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Square out of range: ({self.file}, {self.rank})")

    @property
    def name(self) -> str:
        """Human-readable name, e.g. Square(4, 3) -> 'e4'."""
        return _FILES[self.file] + _RANKS[self.rank]

    def offset(self, d_file: int, d_rank: int) -> Square | None:
        """Square shifted by the given deltas, or ``None`` when off-board."""
        file, rank = self.file + d_file, self.rank + d_rank
        if is_on_board(file, rank):
            return Square(file, rank)
        return None

    def __str__(self) -> str:
        return self.name


def is_on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> Square(4, 3)."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILES.index(name[0]), _RANKS.index(name[1]))


def all_squares() -> list[Square]:
    """All 64 squares, rank by rank from a1."""
    return [Square(f, r) for r in range(8) for f in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
