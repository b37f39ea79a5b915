"""GameController: drives the turn sequence for a front end.

Coordinates: GameState and an IReporter.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from kingtake.core.enums import Color, GameResult, MoveRejection
from kingtake.core.notation import NotationError, parse_move_input
from kingtake.core.position import Position
from kingtake.game.interfaces import IReporter, NullReporter
from kingtake.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
RejectCallback = Callable[[Position, Position, MoveRejection], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_move_rejected: list[RejectCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates and applies moves, reports outcomes, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "_reporter", "events")

    def __init__(self, reporter: IReporter | None = None) -> None:
        self._state = GameState()
        self._reporter = reporter or NullReporter()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def is_game_over(self) -> bool:
        return self._state.game_over

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, state: GameState | None = None) -> None:
        """Start over from the standard position (or from *state*)."""
        self._state = state if state is not None else GameState()

    def submit_move(self, start: Position, end: Position) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if self._state.game_over:
            _LOGGER.debug("Move %s -> %s ignored: game is over", start, end)
            return False

        reason = self._state.validate_move(start, end)
        if reason is not None:
            _LOGGER.debug("Rejected %s -> %s: %s", start, end, reason.name)
            self._reporter.move_rejected(start, end, reason, self._state.side_to_move)
            self._emit_rejected(start, end, reason)
            return False

        record = self._state.apply_move(start, end)
        self._reporter.move_applied(record)
        self._emit_move(record)

        if self._state.game_over:
            self._reporter.game_over(self._state.result)
            self._emit_game_over(self._state.result)
        return True

    def submit_text(self, text: str) -> bool:
        """Parse *text* as a move and submit it.

        Parse failures are reported and never reach the engine.
        """
        try:
            start, end = parse_move_input(text)
        except NotationError as exc:
            _LOGGER.debug("Unparseable move text %r: %s", text, exc)
            self._reporter.input_error(text, exc)
            return False
        return self.submit_move(start, end)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_rejected(
        self, start: Position, end: Position, reason: MoveRejection
    ) -> None:
        for cb in self.events.on_move_rejected:
            cb(start, end, reason)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)
