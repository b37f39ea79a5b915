"""Candidate move generation for each piece type.

Every generator is a pure function ``(at, color, board) -> list[Position]``
that only reads the board. Check is never considered: a candidate is any
square the piece can physically reach and occupy.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kingtake.core.enums import Color, PieceType
from kingtake.core.position import Position

if TYPE_CHECKING:
    from kingtake.core.board import BoardReader
    from kingtake.core.piece import Piece

Offsets = tuple[tuple[int, int], ...]
Generator = Callable[[Position, Color, "BoardReader"], list[Position]]

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

QUEEN_DIRS: Offsets = KING_OFFSETS
ROOK_DIRS: Offsets = ((-1, 0), (0, -1), (0, 1), (1, 0))
BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))

# Per color: (forward row step, starting row)
_PAWN_RULES: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 1),
    Color.BLACK: (-1, 6),
}


# -- Shared move shapes -----------------------------------------------------


def _gen_steps(
    at: Position, color: Color, board: BoardReader, offsets: Offsets
) -> list[Position]:
    """Single hops onto empty or enemy-occupied squares."""
    moves: list[Position] = []
    for dr, dc in offsets:
        target_pos = at.offset(dr, dc)
        if not board.is_within_bounds(target_pos.row, target_pos.col):
            continue
        target = board.get_piece(target_pos)
        if target is None or target.color != color:
            moves.append(target_pos)
    return moves


def _gen_sliding(
    at: Position, color: Color, board: BoardReader, directions: Offsets
) -> list[Position]:
    """Rays that stop at the first occupied square (included if enemy)."""
    moves: list[Position] = []
    for dr, dc in directions:
        row, col = at.row + dr, at.col + dc
        while board.is_within_bounds(row, col):
            target_pos = Position(row, col)
            target = board.get_piece(target_pos)
            if target is None:
                moves.append(target_pos)
                row += dr
                col += dc
                continue
            if target.color != color:
                moves.append(target_pos)
            break
    return moves


# -- Piece-specific generators ---------------------------------------------


def king_moves(at: Position, color: Color, board: BoardReader) -> list[Position]:
    return _gen_steps(at, color, board, KING_OFFSETS)


def queen_moves(at: Position, color: Color, board: BoardReader) -> list[Position]:
    return _gen_sliding(at, color, board, QUEEN_DIRS)


def rook_moves(at: Position, color: Color, board: BoardReader) -> list[Position]:
    return _gen_sliding(at, color, board, ROOK_DIRS)


def bishop_moves(at: Position, color: Color, board: BoardReader) -> list[Position]:
    return _gen_sliding(at, color, board, BISHOP_DIRS)


def knight_moves(at: Position, color: Color, board: BoardReader) -> list[Position]:
    return _gen_steps(at, color, board, KNIGHT_OFFSETS)


def pawn_moves(at: Position, color: Color, board: BoardReader) -> list[Position]:
    """Forward pushes onto empty squares plus diagonal captures.

    Diagonals are only ever examined on the forward row; a pawn never
    captures sideways. There is no en passant and no promotion.
    """
    moves: list[Position] = []
    step, start_row = _PAWN_RULES[color]
    forward_row = at.row + step

    one_step = Position(forward_row, at.col)
    if board.is_within_bounds(forward_row, at.col) and board.get_piece(one_step) is None:
        moves.append(one_step)
        if at.row == start_row:
            two_step = Position(forward_row + step, at.col)
            if board.get_piece(two_step) is None:
                moves.append(two_step)

    for dc in (-1, 1):
        cap_col = at.col + dc
        if not board.is_within_bounds(forward_row, cap_col):
            continue
        cap_pos = Position(forward_row, cap_col)
        target = board.get_piece(cap_pos)
        if target is not None and target.color != color:
            moves.append(cap_pos)
    return moves


_GENERATORS: dict[PieceType, Generator] = {
    PieceType.KING: king_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.ROOK: rook_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.PAWN: pawn_moves,
}


def candidate_moves(piece: Piece, at: Position, board: BoardReader) -> list[Position]:
    """Dispatch to the generator for *piece*'s type."""
    return _GENERATORS[piece.piece_type](at, piece.color, board)
