"""Game management layer: state, controller, reporting and the console loop.

Quick start::

    from kingtake.game import GameController
    from kingtake.core import Position

    ctrl = GameController()
    ctrl.submit_move(Position(1, 4), Position(3, 4))
"""

from kingtake.game.console import ConsoleReporter, ConsoleSession, render_board
from kingtake.game.controller import GameController, GameEvents
from kingtake.game.interfaces import IReporter, NullReporter
from kingtake.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "IReporter",
    "NullReporter",
    # Concrete
    "ConsoleReporter",
    "ConsoleSession",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "render_board",
]
