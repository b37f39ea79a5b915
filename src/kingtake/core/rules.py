"""Terminal-condition rule: a game ends when a king leaves the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kingtake.core.enums import Color, GameResult, PieceType
from kingtake.core.position import Position

if TYPE_CHECKING:
    from kingtake.core.board import BoardReader


class Rules:
    """Static rule-checker that operates on a board."""

    @staticmethod
    def kings_present(board: BoardReader) -> set[Color]:
        """Colors that still have a king somewhere among the 64 cells."""
        present: set[Color] = set()
        for pos in Position.all():
            piece = board.get_piece(pos)
            if piece is not None and piece.piece_type == PieceType.KING:
                present.add(piece.color)
        return present

    @staticmethod
    def game_result(board: BoardReader) -> GameResult:
        """Determine the result from king presence alone.

        A missing White king is checked first, so a board without either
        king reads as a Black win.
        """
        present = Rules.kings_present(board)
        if Color.WHITE not in present:
            return GameResult.BLACK_WINS
        if Color.BLACK not in present:
            return GameResult.WHITE_WINS
        return GameResult.IN_PROGRESS
