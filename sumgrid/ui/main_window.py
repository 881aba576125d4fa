from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QEventLoop, Qt, QTimer
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from sumgrid.core.errors import LevelNotFoundError
from sumgrid.core.hints import HintUnavailable
from sumgrid.core.levels import LevelRepository
from sumgrid.core.session import PuzzleSession
from sumgrid.core.settings import GameSettings
from sumgrid.ui.board_widget import BoardWidget
from sumgrid.ui.colors import BoardColors
from sumgrid.ui.models import build_snapshot
from sumgrid.ui.overlays import ResetConfirmOverlay, primary_button_style, secondary_button_style

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-board window: header with level and lives, the board, and the action buttons.

    All game rules live in :class:`PuzzleSession`; this window forwards taps
    and button presses to it and redraws from its snapshot.
    """

    def __init__(self, levels: LevelRepository, settings: Optional[GameSettings] = None) -> None:
        super().__init__()
        self._levels_repo = levels
        self._settings = settings or GameSettings()
        self._session: Optional[PuzzleSession] = None
        self._suspend_redraw = False

        self._board: Optional[BoardWidget] = None
        self._level_label: Optional[QLabel] = None
        self._hearts_label: Optional[QLabel] = None
        self._message_label: Optional[QLabel] = None
        self._check_button: Optional[QPushButton] = None
        self._reset_button: Optional[QPushButton] = None
        self._hint_button: Optional[QPushButton] = None
        self._reset_overlay: Optional[ResetConfirmOverlay] = None

        self.setWindowTitle("Sumgrid")
        self._build_ui()
        self.init_game(self._settings.start_level)

    def _build_ui(self) -> None:
        root = QWidget()
        root.setStyleSheet(
            f"""
            QWidget#root {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {BoardColors.BG_TOP}, stop:1 {BoardColors.BG_BOTTOM});
            }}
            """
        )
        root.setObjectName("root")
        self.setCentralWidget(root)

        layout = QVBoxLayout(root)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        header = QFrame()
        header.setStyleSheet(f"QFrame {{ background: {BoardColors.CARD_BG}; border-radius: 14px; }}")
        header_row = QHBoxLayout(header)
        header_row.setContentsMargins(16, 10, 16, 10)
        self._level_label = QLabel()
        self._level_label.setStyleSheet(f"color: {BoardColors.PRIMARY}; font-size: 18px; font-weight: 800;")
        header_row.addWidget(self._level_label, 0)
        header_row.addStretch(1)
        self._hearts_label = QLabel()
        self._hearts_label.setStyleSheet(f"color: {BoardColors.HEART}; font-size: 18px;")
        header_row.addWidget(self._hearts_label, 0)
        layout.addWidget(header, 0)

        self._board = BoardWidget()
        self._board.cellTapped.connect(self._on_cell_tapped)
        layout.addWidget(self._board, 1)

        self._message_label = QLabel()
        self._message_label.setAlignment(Qt.AlignCenter)
        self._message_label.setWordWrap(True)
        self._message_label.setMinimumHeight(28)
        layout.addWidget(self._message_label, 0)

        buttons = QHBoxLayout()
        buttons.setSpacing(10)
        self._check_button = QPushButton("✓ Check")
        self._check_button.setStyleSheet(primary_button_style())
        self._check_button.clicked.connect(self._on_check_requested)
        self._reset_button = QPushButton("↻ Reset")
        self._reset_button.setStyleSheet(secondary_button_style())
        self._reset_button.clicked.connect(self._on_reset_requested)
        self._hint_button = QPushButton()
        self._hint_button.setStyleSheet(secondary_button_style())
        self._hint_button.clicked.connect(self._on_hint_requested)
        for button in (self._check_button, self._reset_button, self._hint_button):
            button.setCursor(Qt.CursorShape.PointingHandCursor)
            buttons.addWidget(button, 1)
        layout.addLayout(buttons)

        self._reset_overlay = ResetConfirmOverlay(root)
        self._reset_overlay.hide()

    def init_game(self, level_id: int) -> None:
        """Load *level_id* into a fresh session, or show an error if it does not exist."""
        try:
            level = self._levels_repo.find(level_id)
        except LevelNotFoundError as e:
            logger.error("%s", e)
            self._session = None
            self._board.set_snapshot(None)
            self._level_label.setText("Level ?")
            self._hearts_label.setText("")
            self._show_message(str(e), ok=False)
            self._set_controls_enabled(False)
            return

        if self._session is None:
            self._session = PuzzleSession(level, self._settings)
            self._session.subscribe(self._on_session_changed)
        else:
            self._session.load_level(level)
        self._set_controls_enabled(True)
        self._refresh()
        self._clear_message()

    def _on_session_changed(self, session: PuzzleSession) -> None:
        if not self._suspend_redraw:
            self._refresh()

    def _refresh(self) -> None:
        session = self._session
        if session is None:
            return
        snapshot = build_snapshot(session)
        self._board.set_snapshot(snapshot)
        self._level_label.setText(f"Level {snapshot.level_id}")
        self._hearts_label.setText("❤️" * snapshot.lives)
        self._hint_button.setText(f"💡 Hint ({snapshot.hints_remaining})")
        self._hint_button.setEnabled(snapshot.hints_remaining > 0)

    def _on_cell_tapped(self, row: int, col: int) -> None:
        if self._session is None:
            return
        self._session.tap(row, col)
        self._clear_message()

    def _on_check_requested(self) -> None:
        if self._session is None:
            return
        self._suspend_redraw = True
        try:
            outcome = self._session.check()
        finally:
            self._suspend_redraw = False

        self._show_message(outcome.message, ok=outcome.is_correct)
        if not outcome.game_over:
            self._refresh()
            return

        # The session has already restarted; keep the old board up until the delay passes.
        self._hearts_label.setText("")
        self._set_controls_enabled(False)
        QTimer.singleShot(self._settings.game_over_delay_ms, self._finish_game_over)

    def _finish_game_over(self) -> None:
        self._set_controls_enabled(True)
        self._refresh()
        self._clear_message()

    def _on_reset_requested(self) -> None:
        """Show the confirmation overlay and, if confirmed, clear the marks."""
        if self._session is None:
            return
        overlay = self._reset_overlay
        overlay.setGeometry(self.centralWidget().rect())
        overlay.raise_()
        overlay.show()
        confirmed = [False]

        def on_closed(ok: bool) -> None:
            confirmed[0] = ok
            loop.quit()

        loop = QEventLoop()
        overlay.closed.connect(on_closed)
        loop.exec()
        overlay.closed.disconnect(on_closed)

        if confirmed[0]:
            self._session.reset_board()
            self._clear_message()

    def _on_hint_requested(self) -> None:
        if self._session is None:
            return
        outcome = self._session.request_hint()
        self._show_message(outcome.message, ok=outcome.result is not HintUnavailable.EXHAUSTED)
        self._hint_button.setText(outcome.button_label)
        self._hint_button.setEnabled(outcome.button_enabled)

    def _set_controls_enabled(self, enabled: bool) -> None:
        self._board.setEnabled(enabled)
        self._check_button.setEnabled(enabled)
        self._reset_button.setEnabled(enabled)
        has_hints = self._session is not None and self._session.hints_remaining > 0
        self._hint_button.setEnabled(enabled and has_hints)

    def _show_message(self, text: str, ok: bool) -> None:
        color = BoardColors.MESSAGE_SUCCESS if ok else BoardColors.MESSAGE_ERROR
        self._message_label.setStyleSheet(f"color: {color}; font-size: 15px; font-weight: 700;")
        self._message_label.setText(text)

    def _clear_message(self) -> None:
        self._message_label.setText("")
