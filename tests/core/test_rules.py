"""Tests for move legality."""

import pytest

from chesscore.core.board import pieces_from_grid, starting_grid
from chesscore.core.enums import Color, PieceKind
from chesscore.core.errors import ModelInvariantError
from chesscore.core.piece import Piece
from chesscore.core.rules import is_move_valid
from chesscore.core.types import (
    A1, B1, C1, C3, D1, D4, D5, D6, D8, E1, E2, E3, E4, E5, E6, E7, E8,
    F5, F6, G7, H8,
    Square,
    all_squares,
)

def _knight_offsets() -> set[tuple[int, int]]:
    return {(df, dr) for df in (-2, -1, 1, 2) for dr in (-2, -1, 1, 2) if abs(df) != abs(dr)}


class TestGeneralRejections:
    def test_own_square_never_valid(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        for piece in pieces:
            assert not is_move_valid(piece, piece.position, pieces)

    def test_same_color_destination_never_valid(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        for piece in pieces:
            for other in pieces:
                if other.color == piece.color:
                    assert not is_move_valid(piece, other.position, pieces)

    def test_empty_kind_is_fatal(self) -> None:
        piece = Piece.from_kind(PieceKind.WHITE_ROOK, D4)
        piece.kind = PieceKind.EMPTY
        with pytest.raises(ModelInvariantError):
            is_move_valid(piece, D5, [piece])

    def test_captured_pieces_are_ignored(self, board, at) -> None:
        pieces = board("8/8/3p4/8/3R4/8/8/8")
        at(pieces, D6).captured = True
        assert is_move_valid(at(pieces, D4), D8, pieces)


class TestKnight:
    def test_all_l_offsets_on_empty_board(self, board, at) -> None:
        pieces = board("8/8/8/8/3N4/8/8/8")
        knight = at(pieces, D4)
        for sq in all_squares():
            offset = (sq.file - D4.file, sq.rank - D4.rank)
            assert is_move_valid(knight, sq, pieces) == (offset in _knight_offsets()), sq

    def test_jumps_over_pieces(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        knight = next(p for p in pieces if p.position == B1)
        assert is_move_valid(knight, C3, pieces)


class TestRook:
    def test_lines_on_empty_board(self, board, at) -> None:
        pieces = board("8/8/8/8/3R4/8/8/8")
        rook = at(pieces, D4)
        for sq in all_squares():
            expected = (sq.file == D4.file) != (sq.rank == D4.rank)
            assert is_move_valid(rook, sq, pieces) == expected, sq

    def test_blocked_beyond_piece(self, board, at) -> None:
        pieces = board("8/8/3P4/8/3R4/8/8/8")
        rook = at(pieces, D4)
        assert is_move_valid(rook, D5, pieces)
        assert not is_move_valid(rook, D6, pieces)
        assert not is_move_valid(rook, D8, pieces)

    def test_captures_blocking_enemy(self, board, at) -> None:
        pieces = board("8/8/3p4/8/3R4/8/8/8")
        rook = at(pieces, D4)
        assert is_move_valid(rook, D6, pieces)
        assert not is_move_valid(rook, D8, pieces)


class TestBishop:
    def test_diagonals_on_empty_board(self, board, at) -> None:
        pieces = board("8/8/8/8/3B4/8/8/8")
        bishop = at(pieces, D4)
        for sq in all_squares():
            d_file, d_rank = sq.file - D4.file, sq.rank - D4.rank
            expected = d_file != 0 and abs(d_file) == abs(d_rank)
            assert is_move_valid(bishop, sq, pieces) == expected, sq

    def test_blocked_on_diagonal(self, board, at) -> None:
        pieces = board("8/8/5p2/8/3B4/8/8/8")
        bishop = at(pieces, D4)
        assert is_move_valid(bishop, F6, pieces)
        assert not is_move_valid(bishop, G7, pieces)
        assert not is_move_valid(bishop, H8, pieces)

    def test_starting_bishop_is_boxed_in(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        bishop = next(p for p in pieces if p.position == C1)
        assert not any(is_move_valid(bishop, sq, pieces) for sq in all_squares())


class TestQueen:
    def test_lines_and_diagonals(self, board, at) -> None:
        pieces = board("8/8/8/8/3Q4/8/8/8")
        queen = at(pieces, D4)
        assert is_move_valid(queen, D8, pieces)
        assert is_move_valid(queen, A1, pieces)
        assert is_move_valid(queen, H8, pieces)
        assert not is_move_valid(queen, E6, pieces)
        assert not is_move_valid(queen, E7, pieces)

    def test_starting_queen_cannot_move(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        queen = next(p for p in pieces if p.position == D1)
        assert not any(is_move_valid(queen, sq, pieces) for sq in all_squares())


class TestKing:
    def test_adjacent_only(self, board, at) -> None:
        pieces = board("8/8/8/8/3K4/8/8/8")
        king = at(pieces, D4)
        for sq in all_squares():
            adjacent = max(abs(sq.file - D4.file), abs(sq.rank - D4.rank)) == 1
            assert is_move_valid(king, sq, pieces) == adjacent, sq

    def test_may_step_into_attack(self, board, at) -> None:
        # No king-safety rules: e1 king steps next to the enemy rook's file.
        pieces = board("4r3/8/8/8/8/8/8/3K4")
        assert is_move_valid(at(pieces, D1), E1, pieces)


class TestWhitePawn:
    def test_single_and_double_step_from_home(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        pawn = next(p for p in pieces if p.position == E2)
        assert is_move_valid(pawn, E3, pieces)
        assert is_move_valid(pawn, E4, pieces)
        assert not is_move_valid(pawn, E5, pieces)

    def test_no_double_step_off_home_rank(self, board, at) -> None:
        pieces = board("8/8/8/8/8/4P3/8/8")
        pawn = at(pieces, E3)
        assert is_move_valid(pawn, E4, pieces)
        assert not is_move_valid(pawn, E5, pieces)

    def test_double_step_blocked_by_intervening_piece(self, board, at) -> None:
        pieces = board("8/8/8/8/8/4n3/4P3/8")
        pawn = at(pieces, E2)
        assert not is_move_valid(pawn, E3, pieces)
        assert not is_move_valid(pawn, E4, pieces)

    def test_cannot_capture_straight_ahead(self, board, at) -> None:
        pieces = board("8/8/8/4p3/4P3/8/8/8")
        assert not is_move_valid(at(pieces, E4), E5, pieces)

    def test_diagonal_capture_needs_enemy(self, board, at) -> None:
        pieces = board("8/8/8/3p4/4P3/8/8/8")
        pawn = at(pieces, E4)
        assert is_move_valid(pawn, D5, pieces)
        assert not is_move_valid(pawn, F5, pieces)

    def test_no_backward_move(self, board, at) -> None:
        pieces = board("8/8/8/8/4P3/8/8/8")
        pawn = at(pieces, E4)
        assert not is_move_valid(pawn, E3, pieces)

    def test_no_sideways_move(self, board, at) -> None:
        pieces = board("8/8/8/8/4P3/8/8/8")
        pawn = at(pieces, E4)
        assert not is_move_valid(pawn, Square(5, 3), pieces)


class TestBlackPawn:
    def test_moves_toward_rank_one(self) -> None:
        pieces = pieces_from_grid(starting_grid())
        pawn = next(p for p in pieces if p.position == E7)
        assert pawn.color == Color.BLACK
        assert is_move_valid(pawn, E6, pieces)
        assert is_move_valid(pawn, E5, pieces)
        assert not is_move_valid(pawn, E8, pieces)

    def test_diagonal_capture_downward(self, board, at) -> None:
        pieces = board("8/8/8/4p3/3P1P2/8/8/8")
        pawn = at(pieces, E5)
        assert is_move_valid(pawn, D4, pieces)
        assert is_move_valid(pawn, Square(5, 3), pieces)
        assert not is_move_valid(pawn, D6, pieces)

    def test_cannot_capture_own_color(self, board, at) -> None:
        pieces = board("8/8/8/4p3/3p4/8/8/8")
        assert not is_move_valid(at(pieces, E5), D4, pieces)

    def test_no_double_step_off_home_rank(self, board, at) -> None:
        pieces = board("8/8/4p3/8/8/8/8/8")
        pawn = at(pieces, E6)
        assert is_move_valid(pawn, E5, pieces)
        assert not is_move_valid(pawn, E4, pieces)
