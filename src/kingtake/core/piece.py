"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kingtake.core.enums import Color, PieceType
from kingtake.core.move_generator import candidate_moves

if TYPE_CHECKING:
    from kingtake.core.board import BoardReader
    from kingtake.core.position import Position

# Glyph character ↔ (Color, PieceType)
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

_FIGURINES: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_SYMBOLS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Moving a piece never changes it; the board relocates it.
    """

    color: Color
    piece_type: PieceType

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.symbol

    @property
    def name(self) -> str:
        """Display name, e.g. 'Knight'."""
        return self.piece_type.name.capitalize()

    @property
    def symbol(self) -> str:
        """Board glyph (uppercase = white, lowercase = black)."""
        return _SYMBOLS[(self.color, self.piece_type)]

    @property
    def figurine(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _FIGURINES[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its glyph, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    # ── Movement ─────────────────────────────────────────────────────────

    def candidate_moves(self, at: Position, board: BoardReader) -> list[Position]:
        """Destinations this piece may reach from *at*, ignoring check."""
        return candidate_moves(self, at, board)
