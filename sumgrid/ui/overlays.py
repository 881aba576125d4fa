"""In-window overlays (board reset confirm)."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from sumgrid.ui.colors import BoardColors


def _card_container(object_name: str, radius: int = 20) -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(360)
    container.setMaximumWidth(440)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: #ffffff;
            border: 1px solid rgba(0, 131, 143, 0.12);
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 80, 100, 25))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.2);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def secondary_button_style() -> str:
    return f"""
        QPushButton {{
            background: #fafafa;
            color: {BoardColors.TEXT_PRIMARY};
            padding: 10px 16px;
            border: 1px solid #e0e0e0;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background: #f0f0f0;
            border-color: {BoardColors.PRIMARY};
            color: {BoardColors.PRIMARY};
        }}
        QPushButton:disabled {{
            color: {BoardColors.TEXT_MUTED};
            background: #eeeeee;
        }}
    """


def primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {BoardColors.PRIMARY_LIGHT}, stop:1 {BoardColors.PRIMARY});
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {BoardColors.PRIMARY}; }}
    """


class ResetConfirmOverlay(QWidget):
    """In-window overlay to confirm clearing the board."""

    closed = Signal(bool)  # True if user confirmed reset

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, lambda: self._close(False))
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _card_container("resetContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        header = QHBoxLayout()
        header.setSpacing(12)
        icon_label = QLabel("↻")
        icon_label.setFixedSize(44, 44)
        icon_label.setAlignment(Qt.AlignCenter)
        icon_label.setStyleSheet(
            f"""
            QLabel {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {BoardColors.BG_TOP}, stop:1 #b2ebf2);
                border-radius: 12px;
                color: {BoardColors.PRIMARY};
                font-size: 22px;
                font-weight: 900;
            }}
            """
        )
        header.addWidget(icon_label, 0)

        title = QLabel("Reset board")
        title.setStyleSheet(f"color: {BoardColors.PRIMARY}; font-size: 18px; font-weight: 800;")
        header.addWidget(title, 0)
        header.addStretch(1)
        content.addLayout(header)

        msg = QLabel("Are you sure you want to reset the board?")
        msg.setStyleSheet(f"color: {BoardColors.TEXT_PRIMARY}; font-size: 14px; font-weight: 500;")
        msg.setWordWrap(True)
        content.addWidget(msg, 0)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setStyleSheet(secondary_button_style())
        cancel_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        cancel_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        cancel_btn.clicked.connect(lambda: self._close(False))
        btn_row.addWidget(cancel_btn, 1)

        confirm_btn = QPushButton("Reset")
        confirm_btn.setStyleSheet(primary_button_style())
        confirm_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        confirm_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        confirm_btn.clicked.connect(lambda: self._close(True))
        btn_row.addWidget(confirm_btn, 1)

        content.addLayout(btn_row)
        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)

    def _close(self, confirmed: bool) -> None:
        self.hide()
        self.closed.emit(confirmed)

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
