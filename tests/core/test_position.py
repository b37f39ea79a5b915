"""Tests for Position and Piece value objects."""

import pytest

from kingtake.core.enums import Color, PieceType
from kingtake.core.piece import Piece
from kingtake.core.position import Position


class TestPosition:
    def test_equality_is_componentwise(self) -> None:
        assert Position(1, 4) == Position(1, 4)
        assert Position(1, 4) != Position(4, 1)

    def test_hashable(self) -> None:
        assert len({Position(0, 0), Position(0, 0), Position(7, 7)}) == 2

    def test_offset(self) -> None:
        assert Position(3, 3).offset(-1, 2) == Position(2, 5)

    def test_not_validated_on_construction(self) -> None:
        pos = Position(-1, 9)
        assert not pos.is_on_board

    def test_all_covers_board(self) -> None:
        positions = list(Position.all())
        assert len(positions) == 64
        assert positions[0] == Position(0, 0)
        assert positions[-1] == Position(7, 7)
        assert all(p.is_on_board for p in positions)

    def test_immutable(self) -> None:
        pos = Position(0, 0)
        with pytest.raises(AttributeError):
            pos.row = 3  # type: ignore[misc]


class TestPiece:
    def test_symbol_case_follows_color(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "N"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "n"
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_name(self) -> None:
        assert Piece(Color.WHITE, PieceType.BISHOP).name == "Bishop"
        assert Piece(Color.BLACK, PieceType.PAWN).name == "Pawn"

    def test_figurine(self) -> None:
        assert Piece(Color.WHITE, PieceType.QUEEN).figurine == "♕"
        assert Piece(Color.BLACK, PieceType.QUEEN).figurine == "♛"

    def test_from_char(self) -> None:
        assert Piece.from_char("r") == Piece(Color.BLACK, PieceType.ROOK)
        assert Piece.from_char("P") == Piece(Color.WHITE, PieceType.PAWN)

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert str(Color.WHITE) == "white"
