"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

from chesscore.core.errors import ModelInvariantError


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class PieceKind(IntEnum):
    """Closed set of concrete piece kinds, plus an ``EMPTY`` grid marker.

    ``EMPTY`` only ever fills unoccupied cells of a :data:`BoardGrid`; a live
    piece never carries it.
    """

    EMPTY = 0
    WHITE_PAWN = 1
    WHITE_KNIGHT = 2
    WHITE_BISHOP = 3
    WHITE_ROOK = 4
    WHITE_QUEEN = 5
    WHITE_KING = 6
    BLACK_PAWN = 7
    BLACK_KNIGHT = 8
    BLACK_BISHOP = 9
    BLACK_ROOK = 10
    BLACK_QUEEN = 11
    BLACK_KING = 12

    @property
    def is_empty(self) -> bool:
        return self is PieceKind.EMPTY

    @property
    def color(self) -> Color:
        if self.is_empty:
            raise ModelInvariantError("PieceKind.EMPTY has no color")
        return Color.WHITE if self.value <= 6 else Color.BLACK

    @property
    def piece_type(self) -> PieceType:
        if self.is_empty:
            raise ModelInvariantError("PieceKind.EMPTY has no piece type")
        return PieceType((self.value - 1) % 6 + 1)

    @property
    def fen_char(self) -> str:
        """FEN letter (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[self.color][self.piece_type]

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> PieceKind:
        return cls(int(piece_type) + 6 * int(color))

    @classmethod
    def queen_of(cls, color: Color) -> PieceKind:
        return cls.of(color, PieceType.QUEEN)

    @classmethod
    def from_char(cls, char: str) -> PieceKind:
        """Create kind from FEN character, e.g. 'N' -> white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls.of(color, ptype)


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS


_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[Color, dict[PieceType, str]] = {Color.WHITE: {}, Color.BLACK: {}}
for _char, (_color, _ptype) in _CHAR_MAP.items():
    _FEN_CHARS[_color][_ptype] = _char
del _char, _color, _ptype
