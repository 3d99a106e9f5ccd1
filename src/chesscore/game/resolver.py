"""Move resolution — the only writer of targets, markers and the turn."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesscore.core.board import grid_from_pieces
from chesscore.core.enums import Color, PieceKind, PieceType
from chesscore.core.notation import export_position
from chesscore.core.piece import Piece
from chesscore.core.rules import is_move_valid
from chesscore.core.types import Square
from chesscore.game.interfaces import MoveStatus
from chesscore.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

_PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened to a move attempt."""

    status: MoveStatus
    piece: Piece
    destination: Square
    captured: Piece | None = None
    promoted: bool = False
    winner: Color | None = None

    @property
    def committed(self) -> bool:
        return self.status == MoveStatus.COMMITTED

    @property
    def was_capture(self) -> bool:
        return self.captured is not None

    @property
    def clears_selection(self) -> bool:
        """Whether the pending selection should be dropped."""
        return self.status in (MoveStatus.COMMITTED, MoveStatus.WRONG_TURN)


class MoveResolver:
    """Validates a move and applies its effects to a :class:`GameState`.

    Rejected moves leave the state untouched; every check runs before the
    first write.
    """

    __slots__ = ("_state",)

    def __init__(self, state: GameState) -> None:
        self._state = state

    @property
    def state(self) -> GameState:
        return self._state

    def resolve(self, piece: Piece, destination: Square) -> MoveOutcome:
        state = self._state

        if state.is_game_over or piece.captured:
            _LOGGER.warning("Move of %r ignored: game over or piece captured", piece)
            return MoveOutcome(MoveStatus.REJECTED, piece, destination)

        if not is_move_valid(piece, destination, state.pieces):
            _LOGGER.warning(
                "Move not valid: %s %s -> %s", piece.kind.name, piece.position, destination
            )
            return MoveOutcome(MoveStatus.INVALID, piece, destination)

        if piece.color != state.turn.color:
            _LOGGER.warning("It's not %s's turn", piece.color.name.capitalize())
            return MoveOutcome(MoveStatus.WRONG_TURN, piece, destination)

        if any(not p.is_settled for p in state.live_pieces()):
            _LOGGER.warning("Move of %r ignored: previous move not settled", piece)
            return MoveOutcome(MoveStatus.REJECTED, piece, destination)

        origin = piece.position
        moved_kind = piece.kind

        promoted = (
            piece.piece_type == PieceType.PAWN
            and destination.rank == _PROMOTION_RANK[piece.color]
        )
        new_kind = PieceKind.queen_of(piece.color) if promoted else moved_kind

        captured: Piece | None = None
        for other in state.pieces:
            if (
                other is not piece
                and not other.captured
                and other.position == destination
                and other.color != piece.color
            ):
                captured = other
                break

        # Everything that can fail runs before the first write.
        grid = grid_from_pieces(p for p in state.pieces if p is not captured)
        grid[origin.file][origin.rank] = PieceKind.EMPTY
        grid[destination.file][destination.rank] = new_kind
        position_after = export_position(grid, state.turn.color.opposite)

        if promoted:
            piece.kind = new_kind
            piece.promoted = True
            state.promotions.append(piece)
            _LOGGER.info("%s promoted to %s", moved_kind.name, new_kind.name)

        if captured is not None:
            state.captures.record(captured)
            _LOGGER.info("Captured %s on %s", captured.kind.name, destination)

        piece.target = destination
        state.turn.advance()

        state.move_history.append(
            MoveRecord(
                kind=moved_kind,
                origin=origin,
                destination=destination,
                turn_number=state.turn.number - 1,
                position_after=position_after,
                captured=captured.kind if captured is not None else None,
                promoted=promoted,
            )
        )

        winner: Color | None = None
        if captured is not None and captured.piece_type == PieceType.KING:
            winner = piece.color
            state.declare_winner(winner)
            _LOGGER.info("%s king captured, %s wins", captured.color.name, winner.name)

        _LOGGER.info(
            "It's %s's turn and it's %s turn",
            state.turn.color.name.capitalize(),
            state.turn.ordinal,
        )
        return MoveOutcome(
            MoveStatus.COMMITTED,
            piece,
            destination,
            captured=captured,
            promoted=promoted,
            winner=winner,
        )
