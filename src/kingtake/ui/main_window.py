"""MainWindow: top-level window hosting the board and a status line."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from kingtake.core.enums import GameResult, MoveRejection
from kingtake.core.position import Position
from kingtake.game.controller import GameController
from kingtake.game.state import GameState, MoveRecord
from kingtake.settings import AppSettings
from kingtake.ui.board_view import BoardView
from kingtake.ui.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)

_REJECTION_TEXT: dict[MoveRejection, str] = {
    MoveRejection.NO_PIECE: "No piece at the starting position.",
    MoveRejection.WRONG_TURN: "That piece belongs to the other side.",
    MoveRejection.ILLEGAL_DESTINATION: "Invalid move for the selected piece.",
}


class MainWindow(QMainWindow):
    """Main application window for kingtake."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("kingtake")
        self.setMinimumSize(480, 520)

        self._controller = GameController()
        self._settings = settings or AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView()
        root.addWidget(self._board_view)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("&New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new_game)

        act_quit = QAction("&Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

    def _connect_signals(self) -> None:
        self._board_view.move_made.connect(self._on_move_made)
        events = self._controller.events
        events.on_move.append(self._on_move_applied)
        events.on_move_rejected.append(self._on_move_rejected)
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_candidates(s.show_candidates)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    def new_game(self) -> None:
        self._controller.new_game()
        scene = self._board_view.board_scene
        scene.set_state(self._controller.state)
        scene.highlight_last_move(None, None)
        scene.set_interactive(True)
        self._show_turn()

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_made(self, start: Position, end: Position) -> None:
        self._controller.submit_move(start, end)

    def _on_move_applied(self, record: MoveRecord, state: GameState) -> None:
        scene = self._board_view.board_scene
        scene.refresh()
        scene.highlight_last_move(record.start, record.end)
        if not state.game_over:
            self._show_turn()

    def _on_move_rejected(
        self, start: Position, end: Position, reason: MoveRejection
    ) -> None:
        self._status_label.setText(_REJECTION_TEXT[reason])

    def _on_game_over(self, result: GameResult) -> None:
        self._board_view.board_scene.set_interactive(False)
        winner = result.winner
        if winner is None:
            return
        loser = str(winner.opposite).capitalize()
        self._status_label.setText(
            f"{str(winner).capitalize()} wins! {loser} king has been captured."
        )
        _LOGGER.info("Game finished: %s", result.name)

    def _show_turn(self) -> None:
        side = str(self._controller.side_to_move).capitalize()
        self._status_label.setText(f"{side} to move")
