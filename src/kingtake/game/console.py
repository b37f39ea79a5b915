"""Console front end: the interactive read loop."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from kingtake.core.enums import Color, GameResult, MoveRejection
from kingtake.core.notation import FILES, position_to_algebraic
from kingtake.core.position import BOARD_SIZE, Position
from kingtake.game.controller import GameController
from kingtake.game.interfaces import IReporter
from kingtake.settings import AppSettings

if TYPE_CHECKING:
    from kingtake.core.board import BoardReader
    from kingtake.core.notation import NotationError
    from kingtake.game.state import MoveRecord

_LOGGER = logging.getLogger(__name__)

PROMPT = "Enter your move (e.g., e2,e4 or 2,5 4,5): "


def render_board(board: BoardReader, empty_marker: str = ".") -> str:
    """Text diagram with rank 8 on top and rank labels on both sides."""
    header = "  " + " ".join(FILES)
    lines = [header]
    for row in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board.get_piece(Position(row, col))
            cells.append(piece.symbol if piece is not None else empty_marker)
        lines.append(f"{row + 1} {' '.join(cells)} {row + 1}")
    lines.append(header)
    return "\n".join(lines)


class ConsoleReporter(IReporter):
    """Writes turn outcomes as plain lines of text."""

    def __init__(self, output: TextIO) -> None:
        self._out = output

    def _say(self, text: str) -> None:
        print(text, file=self._out)

    def move_rejected(
        self,
        start: Position,
        end: Position,
        reason: MoveRejection,
        side_to_move: Color,
    ) -> None:
        if reason == MoveRejection.NO_PIECE:
            self._say("No piece at the starting position.")
        elif reason == MoveRejection.WRONG_TURN:
            self._say(f"It's {side_to_move}'s turn.")
        else:
            self._say("Invalid move for the selected piece.")

    def move_applied(self, record: MoveRecord) -> None:
        start = position_to_algebraic(record.start)
        end = position_to_algebraic(record.end)
        self._say(f"Moved from {start} to {end}")
        if record.captured is not None:
            self._say(f"Captured {record.captured.name} at {end}")

    def game_over(self, result: GameResult) -> None:
        if result == GameResult.BLACK_WINS:
            self._say("Black wins! White king has been captured.")
        elif result == GameResult.WHITE_WINS:
            self._say("White wins! Black king has been captured.")

    def input_error(self, text: str, error: NotationError) -> None:
        self._say(f"Invalid input: {error}")


class ConsoleSession:
    """Plays one game over a pair of text streams.

    Args:
        input_stream: Where move lines are read from (stdin by default).
        output_stream: Where the board and messages go (stdout by default).
        settings: Display options; only ``empty_marker`` is used here.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self._settings = settings or AppSettings()
        self._controller = GameController(ConsoleReporter(self._out))

    @property
    def controller(self) -> GameController:
        return self._controller

    def play_turn(self) -> bool:
        """Run one prompt/move cycle. Returns False once input is exhausted."""
        state = self._controller.state
        print(render_board(state.board, self._settings.empty_marker), file=self._out)
        print(f"{str(state.side_to_move).capitalize()}'s move:", file=self._out)
        print(PROMPT, end="", file=self._out)

        line = self._in.readline()
        if not line:
            print("Error reading input.", file=self._out)
            _LOGGER.info("Input closed before the game finished")
            return False
        self._controller.submit_text(line)
        return True

    def run(self) -> GameResult:
        """Loop until a king is captured or input runs out."""
        print("Welcome to kingtake!", file=self._out)
        while not self._controller.is_game_over:
            if not self.play_turn():
                break
        print("Game Over.", file=self._out)
        return self._controller.state.result
