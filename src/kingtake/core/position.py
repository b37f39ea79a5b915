"""Position value type - the (row, col) address of a board cell.

Rows and columns are zero-indexed:
    row 0 = rank 1 (White's back rank), row 7 = rank 8
    col 0 = file a, col 7 = file h
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable board coordinate.

    A position is not validated on construction; bounds are the board's
    concern, so off-board positions are legal values that simply address
    nothing.
    """

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> Position:
        return Position(self.row + drow, self.col + dcol)

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @staticmethod
    def all() -> Iterator[Position]:
        """All 64 on-board positions, row-major from (0, 0)."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield Position(row, col)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
