"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from kingtake.core import Board, Position

    board = Board.initial()
    pawn = board.get_piece(Position(1, 4))
    for target in pawn.candidate_moves(Position(1, 4), board):
        print(target)
"""

from kingtake.core.board import Board, BoardReader
from kingtake.core.enums import Color, GameResult, MoveRejection, PieceType
from kingtake.core.move_generator import candidate_moves
from kingtake.core.notation import (
    INVALID_SQUARE,
    NotationError,
    algebraic_to_position,
    parse_move_input,
    position_to_algebraic,
)
from kingtake.core.piece import Piece
from kingtake.core.position import Position
from kingtake.core.rules import Rules

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "MoveRejection",
    "PieceType",
    # Domain objects
    "Board",
    "BoardReader",
    "Piece",
    "Position",
    "Rules",
    "candidate_moves",
    # Notation
    "INVALID_SQUARE",
    "NotationError",
    "algebraic_to_position",
    "parse_move_input",
    "position_to_algebraic",
]
