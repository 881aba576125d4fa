"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from sumgrid.core.board import CellMark
from sumgrid.core.session import PuzzleSession


@dataclass(frozen=True)
class CellView:
    """Everything needed to draw one cell."""

    row: int
    col: int
    number: int
    color_key: str
    mark: CellMark
    badge: Optional[int] = None


@dataclass(frozen=True)
class BoardSnapshot:
    level_id: int
    cells: Tuple[Tuple[CellView, ...], ...]
    row_targets: Tuple[int, ...]
    column_targets: Tuple[int, ...]
    lives: int
    hints_remaining: int

    def cell(self, row: int, col: int) -> CellView:
        return self.cells[row][col]


def build_snapshot(session: PuzzleSession) -> BoardSnapshot:
    """Capture the session for drawing.

    The first cell of each color, scanning row by row, carries that color's
    target sum as its badge.
    """
    level = session.level
    palette = session.palette
    seen: set[str] = set()
    rows = []
    for row, numbers in enumerate(level.numbers):
        cells = []
        for col, number in enumerate(numbers):
            color_key = palette.key_for(level.color_ids[row][col])
            badge = None
            if color_key not in seen:
                seen.add(color_key)
                badge = palette.target_for(color_key)
            cells.append(
                CellView(
                    row=row,
                    col=col,
                    number=number,
                    color_key=color_key,
                    mark=session.marks.mark_at(row, col),
                    badge=badge,
                )
            )
        rows.append(tuple(cells))
    return BoardSnapshot(
        level_id=level.level_id,
        cells=tuple(rows),
        row_targets=level.row_targets,
        column_targets=level.column_targets,
        lives=session.lives,
        hints_remaining=session.hints_remaining,
    )
