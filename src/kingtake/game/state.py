"""Game state: the board, the side to move and the terminal flag."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kingtake.core.board import Board
from kingtake.core.enums import Color, GameResult, MoveRejection
from kingtake.core.piece import Piece
from kingtake.core.position import Position
from kingtake.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """What happened when a move was applied."""

    start: Position
    end: Position
    piece: Piece
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Owns the board and enforces the move rules.

    This is a pure data/logic class with no I/O and no threading. Once
    ``game_over`` becomes True it stays True; callers must stop
    submitting moves (``GameController`` does this for them).
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    game_over: bool = field(default=False, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)

    # ── Validation ───────────────────────────────────────────────────────

    def validate_move(self, start: Position, end: Position) -> MoveRejection | None:
        """Return why the move is illegal, or None if it is legal."""
        piece = self.board.get_piece(start)
        if piece is None:
            return MoveRejection.NO_PIECE
        if piece.color != self.side_to_move:
            return MoveRejection.WRONG_TURN
        if end not in piece.candidate_moves(start, self.board):
            return MoveRejection.ILLEGAL_DESTINATION
        return None

    def is_valid_move(self, start: Position, end: Position) -> bool:
        reason = self.validate_move(start, end)
        if reason is not None:
            _LOGGER.debug("Rejected %s -> %s: %s", start, end, reason.name)
        return reason is None

    def candidate_moves(self, start: Position) -> list[Position]:
        """Destinations for the piece on *start* if it belongs to the side to move."""
        piece = self.board.get_piece(start)
        if piece is None or piece.color != self.side_to_move:
            return []
        return piece.candidate_moves(start, self.board)

    # ── Mutation ─────────────────────────────────────────────────────────

    def switch_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    def apply_move(self, start: Position, end: Position) -> MoveRecord:
        """Apply a validated move and return its record.

        Caller is responsible for the legality check.
        """
        piece = self.board.get_piece(start)
        if piece is None:
            raise ValueError(f"No piece at {start}")
        captured = self.board.move_piece(start, end)
        _LOGGER.debug("%s %s %s -> %s", self.side_to_move, piece.name, start, end)

        self.check_game_over()
        if not self.game_over:
            self.switch_turn()
        return MoveRecord(start=start, end=end, piece=piece, captured=captured)

    def check_game_over(self) -> None:
        """Mark the game finished if a king is missing from the board."""
        if self.game_over:
            return
        result = Rules.game_result(self.board)
        if result == GameResult.IN_PROGRESS:
            return
        self.result = result
        self.game_over = True
        _LOGGER.info("Game over: %s", result.name)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def winner(self) -> Color | None:
        return self.result.winner
