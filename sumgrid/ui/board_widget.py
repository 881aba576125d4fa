"""Puzzle board UI: the colored number grid with its row and column targets."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QLineF, QRectF, Qt, Signal
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from sumgrid.core.board import CellMark
from sumgrid.ui.colors import BoardColors, ignored_fill
from sumgrid.ui.models import BoardSnapshot


class BoardWidget(QWidget):
    """Paints a :class:`BoardSnapshot` and reports taps as ``cellTapped(row, col)``.

    Column targets run along the top edge and row targets along the right
    edge, each one cell wide.
    """

    cellTapped = Signal(int, int)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._snapshot: Optional[BoardSnapshot] = None
        self.setMinimumSize(360, 360)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.PointingHandCursor)

    def set_snapshot(self, snapshot: Optional[BoardSnapshot]) -> None:
        self._snapshot = snapshot
        self.update()

    def _geometry(self) -> tuple[float, float, float, int]:
        """Return (cell size, board x, board y, board size in cells)."""
        size = len(self._snapshot.cells) if self._snapshot else 8
        # one extra cell each for the column strip and the row strip
        cell = min(self.width(), self.height()) / (size + 1)
        x = (self.width() - cell * (size + 1)) / 2
        y = (self.height() - cell * (size + 1)) / 2 + cell
        return cell, x, y, size

    def paintEvent(self, event) -> None:
        """Paint target strips, cells (fill, badge, number, mark) and grid lines."""
        super().paintEvent(event)
        if self._snapshot is None:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        cell, x0, y0, size = self._geometry()

        font = painter.font()
        target_font = painter.font()
        target_font.setPointSize(max(9, int(cell * 0.28)))
        target_font.setBold(True)
        painter.setFont(target_font)
        painter.setPen(QColor(BoardColors.PRIMARY_DARK))
        for col, target in enumerate(self._snapshot.column_targets):
            painter.drawText(QRectF(x0 + col * cell, y0 - cell, cell, cell), Qt.AlignCenter, str(target))
        for row, target in enumerate(self._snapshot.row_targets):
            painter.drawText(QRectF(x0 + size * cell, y0 + row * cell, cell, cell), Qt.AlignCenter, str(target))

        for row_cells in self._snapshot.cells:
            for view in row_cells:
                rect = QRectF(x0 + view.col * cell, y0 + view.row * cell, cell, cell)
                base = QColor(view.color_key).name()
                fill = ignored_fill(base) if view.mark is CellMark.IGNORED else base
                painter.setPen(Qt.NoPen)
                painter.setBrush(QColor(fill))
                painter.drawRect(rect)

                if view.badge is not None:
                    badge_font = painter.font()
                    badge_font.setPointSize(max(7, int(cell * 0.16)))
                    badge_font.setBold(True)
                    painter.setFont(badge_font)
                    painter.setPen(QColor(BoardColors.TEXT_PRIMARY))
                    painter.drawText(rect.adjusted(4, 2, -4, -2), Qt.AlignLeft | Qt.AlignTop, str(view.badge))

                number_font = painter.font()
                number_font.setPointSize(max(10, int(cell * 0.32)))
                number_font.setBold(view.mark is not CellMark.IGNORED)
                painter.setFont(number_font)
                text_color = BoardColors.TEXT_MUTED if view.mark is CellMark.IGNORED else BoardColors.TEXT_PRIMARY
                painter.setPen(QColor(text_color))
                painter.drawText(rect, Qt.AlignCenter, str(view.number))

                if view.mark is CellMark.CIRCLED:
                    painter.setBrush(Qt.NoBrush)
                    painter.setPen(QPen(QColor(BoardColors.CIRCLE_RING), max(2.0, cell * 0.05)))
                    inset = cell * 0.18
                    painter.drawEllipse(rect.adjusted(inset, inset, -inset, -inset))

        painter.setFont(font)
        painter.setBrush(Qt.NoBrush)
        painter.setPen(QPen(QColor(BoardColors.GRID_LINE), 1))
        for i in range(size + 1):
            painter.drawLine(QLineF(x0 + i * cell, y0, x0 + i * cell, y0 + size * cell))
            painter.drawLine(QLineF(x0, y0 + i * cell, x0 + size * cell, y0 + i * cell))
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if self._snapshot is None or event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        cell, x0, y0, size = self._geometry()
        pos = event.position()
        col = int((pos.x() - x0) // cell)
        row = int((pos.y() - y0) // cell)
        if 0 <= row < size and 0 <= col < size:
            self.cellTapped.emit(row, col)
        else:
            super().mousePressEvent(event)
