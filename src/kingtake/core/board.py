"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from kingtake.core.enums import Color, PieceType
from kingtake.core.piece import Piece
from kingtake.core.position import BOARD_SIZE, Position

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class BoardReader(Protocol):
    """Read-only view handed to move generators."""

    def get_piece(self, pos: Position) -> Piece | None: ...

    def is_within_bounds(self, row: int, col: int) -> bool: ...


class Board:
    """Mutable 8x8 grid of optional pieces.

    Every accessor is total: out-of-bounds positions read as empty and
    writes to them are ignored. No legality checking happens here.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_within_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get_piece(self, pos: Position) -> Piece | None:
        if not self.is_within_bounds(pos.row, pos.col):
            return None
        return self._grid[pos.row][pos.col]

    def set_piece(self, pos: Position, piece: Piece | None) -> None:
        if not self.is_within_bounds(pos.row, pos.col):
            return
        self._grid[pos.row][pos.col] = piece

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.get_piece(pos)

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        self.set_piece(pos, piece)

    def is_empty(self, pos: Position) -> bool:
        return self.get_piece(pos) is None

    # -- Mutation -----------------------------------------------------------

    def move_piece(self, start: Position, end: Position) -> Piece | None:
        """Relocate the piece on *start* to *end*; return what was captured."""
        piece = self.get_piece(start)
        if piece is None:
            return None
        captured = self.get_piece(end)
        self.set_piece(end, piece)
        self.set_piece(start, None)
        return captured

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def initialize(self) -> None:
        """Reset to the standard starting position."""
        self.clear()
        for col in range(BOARD_SIZE):
            self._grid[1][col] = Piece(Color.WHITE, PieceType.PAWN)
            self._grid[6][col] = Piece(Color.BLACK, PieceType.PAWN)
        for col, pt in enumerate(_BACK_RANK):
            self._grid[0][col] = Piece(Color.WHITE, pt)
            self._grid[7][col] = Piece(Color.BLACK, pt)

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Occupied cells in row-major order, optionally filtered by *color*."""
        for pos in Position.all():
            piece = self._grid[pos.row][pos.col]
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield pos, piece

    def has_king(self, color: Color) -> bool:
        return any(
            piece.piece_type == PieceType.KING for _, piece in self.pieces(color)
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.initialize()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
