"""Abstract interfaces for the game layer.

The rules engine never writes user-facing text itself; front ends
implement :class:`IReporter` and hand it to the controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kingtake.core.enums import Color, GameResult, MoveRejection
    from kingtake.core.notation import NotationError
    from kingtake.core.position import Position
    from kingtake.game.state import MoveRecord


class IReporter(ABC):
    """Receives every user-visible outcome of a turn."""

    @abstractmethod
    def move_rejected(
        self,
        start: Position,
        end: Position,
        reason: MoveRejection,
        side_to_move: Color,
    ) -> None:
        """A submitted move was refused; the turn does not advance."""

    @abstractmethod
    def move_applied(self, record: MoveRecord) -> None:
        """A move was played (and possibly captured a piece)."""

    @abstractmethod
    def game_over(self, result: GameResult) -> None:
        """A king has been captured."""

    @abstractmethod
    def input_error(self, text: str, error: NotationError) -> None:
        """Move text could not be parsed; the engine was not consulted."""


class NullReporter(IReporter):
    """Reporter that discards everything."""

    def move_rejected(
        self,
        start: Position,
        end: Position,
        reason: MoveRejection,
        side_to_move: Color,
    ) -> None:
        pass

    def move_applied(self, record: MoveRecord) -> None:
        pass

    def game_over(self, result: GameResult) -> None:
        pass

    def input_error(self, text: str, error: NotationError) -> None:
        pass
