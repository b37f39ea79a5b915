"""Tests for the console read loop."""

from __future__ import annotations

import io

from kingtake.core.board import Board
from kingtake.core.enums import Color, GameResult
from kingtake.game.console import ConsoleSession, render_board
from kingtake.settings import AppSettings


def _session(lines: list[str]) -> tuple[ConsoleSession, io.StringIO]:
    out = io.StringIO()
    session = ConsoleSession(io.StringIO("".join(f"{ln}\n" for ln in lines)), out)
    return session, out


class TestRenderBoard:
    def test_rank_eight_on_top(self) -> None:
        lines = render_board(Board.initial()).splitlines()
        assert lines[0] == "  a b c d e f g h"
        assert lines[1] == "8 r n b q k b n r 8"
        assert lines[2] == "7 p p p p p p p p 7"
        assert lines[5] == "4 . . . . . . . . 4"
        assert lines[8] == "1 R N B Q K B N R 1"
        assert lines[9] == "  a b c d e f g h"

    def test_custom_empty_marker(self) -> None:
        text = render_board(Board(), empty_marker="-")
        assert "5 - - - - - - - - 5" in text


class TestConsoleSession:
    def test_move_and_eof(self) -> None:
        session, out = _session(["e2,e4"])
        result = session.run()
        text = out.getvalue()
        assert result == GameResult.IN_PROGRESS
        assert "Welcome to kingtake!" in text
        assert "White's move:" in text
        assert "Moved from e2 to e4" in text
        assert "Black's move:" in text
        assert "Error reading input." in text
        assert text.rstrip().endswith("Game Over.")

    def test_bad_input_does_not_advance(self) -> None:
        session, out = _session(["invalid_input"])
        session.run()
        text = out.getvalue()
        assert "Invalid input:" in text
        assert session.controller.side_to_move == Color.WHITE

    def test_rejection_messages(self) -> None:
        session, out = _session(["e4 to e5", "e7 to e5", "a2 to b3"])
        session.run()
        text = out.getvalue()
        assert "No piece at the starting position." in text
        assert "It's white's turn." in text
        assert "Invalid move for the selected piece." in text

    def test_capture_message(self) -> None:
        session, out = _session(["a2 to a4", "b7 to b5", "a4 to b5"])
        session.run()
        assert "Captured Pawn at b5" in out.getvalue()

    def test_plays_to_king_capture(self) -> None:
        # Fool's-mate style walk where White's queen takes the black king.
        session, out = _session(
            [
                "e2 to e4",
                "f7 to f6",
                "d1 to h5",
                "a7 to a6",
                "h5 to e8",
                "e2 to e4",  # never read
            ]
        )
        result = session.run()
        text = out.getvalue()
        assert result == GameResult.WHITE_WINS
        assert "Captured King at e8" in text
        assert "White wins! Black king has been captured." in text
        assert "Error reading input." not in text

    def test_settings_marker_used(self) -> None:
        out = io.StringIO()
        session = ConsoleSession(io.StringIO(""), out, AppSettings(empty_marker="_"))
        session.run()
        assert "4 _ _ _ _ _ _ _ _ 4" in out.getvalue()
