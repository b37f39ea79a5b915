"""Tests for GameState."""

from collections.abc import Callable

import pytest

from kingtake.core.board import Board
from kingtake.core.enums import Color, GameResult, MoveRejection, PieceType
from kingtake.core.piece import Piece
from kingtake.core.position import Position
from kingtake.game.state import GameState

Place = Callable[[Board, str], Board]


class TestGameStateSetup:
    def test_defaults(self) -> None:
        gs = GameState()
        assert gs.side_to_move == Color.WHITE
        assert not gs.game_over
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.winner is None
        assert gs.board == Board.initial()

    def test_custom_board(self, empty_board: Board, place: Place) -> None:
        gs = GameState(board=place(empty_board, "K e1, k e8"), side_to_move=Color.BLACK)
        assert gs.side_to_move == Color.BLACK
        assert gs.board.get_piece(Position(0, 4)) == Piece(Color.WHITE, PieceType.KING)


class TestIsValidMove:
    def test_pawn_double_step_opening(self) -> None:
        gs = GameState()
        assert gs.is_valid_move(Position(1, 0), Position(3, 0))

    def test_pawn_diagonal_without_capture(self) -> None:
        gs = GameState()
        assert not gs.is_valid_move(Position(1, 0), Position(2, 1))
        assert gs.validate_move(Position(1, 0), Position(2, 1)) == (
            MoveRejection.ILLEGAL_DESTINATION
        )

    def test_empty_start(self) -> None:
        gs = GameState()
        assert not gs.is_valid_move(Position(4, 4), Position(5, 4))
        assert gs.validate_move(Position(4, 4), Position(5, 4)) == MoveRejection.NO_PIECE

    def test_off_board_start(self) -> None:
        gs = GameState()
        assert gs.validate_move(Position(-1, 0), Position(0, 0)) == MoveRejection.NO_PIECE

    def test_wrong_side_rejected_regardless_of_destination(self) -> None:
        gs = GameState()
        for end in Position.all():
            assert not gs.is_valid_move(Position(6, 4), end)
        assert gs.validate_move(Position(6, 4), Position(4, 4)) == (
            MoveRejection.WRONG_TURN
        )

    def test_query_does_not_mutate(self) -> None:
        gs = GameState()
        before = gs.board.copy()
        gs.is_valid_move(Position(1, 4), Position(3, 4))
        gs.is_valid_move(Position(6, 4), Position(4, 4))
        assert gs.board == before
        assert gs.side_to_move == Color.WHITE

    def test_candidate_moves_for_side_to_move_only(self) -> None:
        gs = GameState()
        assert gs.candidate_moves(Position(0, 1)) == [Position(2, 0), Position(2, 2)]
        assert gs.candidate_moves(Position(7, 1)) == []
        assert gs.candidate_moves(Position(4, 4)) == []


class TestApplyMove:
    def test_apply_switches_turn(self) -> None:
        gs = GameState()
        record = gs.apply_move(Position(1, 4), Position(3, 4))
        assert gs.side_to_move == Color.BLACK
        assert record.piece == Piece(Color.WHITE, PieceType.PAWN)
        assert record.captured is None
        assert not record.was_capture

    def test_switch_turn_toggles(self) -> None:
        gs = GameState()
        gs.switch_turn()
        assert gs.side_to_move == Color.BLACK
        gs.switch_turn()
        assert gs.side_to_move == Color.WHITE

    def test_pawn_capture_scenario(self) -> None:
        gs = GameState()
        gs.apply_move(Position(1, 0), Position(3, 0))
        gs.apply_move(Position(6, 1), Position(4, 1))
        assert gs.is_valid_move(Position(3, 0), Position(4, 1))
        record = gs.apply_move(Position(3, 0), Position(4, 1))
        assert record.captured == Piece(Color.BLACK, PieceType.PAWN)
        assert record.was_capture
        assert gs.board.get_piece(Position(4, 1)) == Piece(Color.WHITE, PieceType.PAWN)
        assert gs.side_to_move == Color.BLACK

    def test_apply_from_empty_raises(self) -> None:
        gs = GameState()
        with pytest.raises(ValueError, match="No piece"):
            gs.apply_move(Position(4, 4), Position(5, 4))


class TestGameOver:
    def test_extra_king_capture_does_not_end_game(self, place: Place) -> None:
        gs = GameState()
        place(gs.board, "K e5, k f5")
        assert gs.is_valid_move(Position(4, 4), Position(4, 5))
        record = gs.apply_move(Position(4, 4), Position(4, 5))

        # The black king on e8 is still on the board.
        assert record.captured == Piece(Color.BLACK, PieceType.KING)
        assert not gs.game_over

    def test_last_king_capture_sets_winner(
        self, empty_board: Board, place: Place
    ) -> None:
        gs = GameState(board=place(empty_board, "K e5, k f5"))
        assert gs.is_valid_move(Position(4, 4), Position(4, 5))
        gs.apply_move(Position(4, 4), Position(4, 5))
        assert gs.game_over
        assert gs.result == GameResult.WHITE_WINS
        assert gs.winner == Color.WHITE
        # Turn does not pass after the final move
        assert gs.side_to_move == Color.WHITE

    def test_black_wins(self, empty_board: Board, place: Place) -> None:
        gs = GameState(
            board=place(empty_board, "K a1, q a8, k h8"), side_to_move=Color.BLACK
        )
        gs.apply_move(Position(7, 0), Position(0, 0))
        assert gs.game_over
        assert gs.winner == Color.BLACK

    def test_both_kings_missing_reads_black_win(self, empty_board: Board) -> None:
        gs = GameState(board=empty_board)
        gs.check_game_over()
        assert gs.game_over
        assert gs.result == GameResult.BLACK_WINS

    def test_terminal_flag_is_permanent(
        self, empty_board: Board, place: Place
    ) -> None:
        gs = GameState(board=place(empty_board, "K e5, k f5"))
        gs.apply_move(Position(4, 4), Position(4, 5))
        gs.board.set_piece(Position(7, 7), Piece(Color.BLACK, PieceType.KING))
        gs.check_game_over()
        assert gs.game_over
        assert gs.result == GameResult.WHITE_WINS

    def test_no_game_over_with_both_kings(self) -> None:
        gs = GameState()
        gs.check_game_over()
        assert not gs.game_over
