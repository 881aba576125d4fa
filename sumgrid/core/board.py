"""Per-cell player marks for a single board."""

from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

BOARD_SIZE = 8


class CellMark(IntEnum):
    DEFAULT = 0
    IGNORED = 1
    CIRCLED = 2

    def next(self) -> CellMark:
        return CellMark((self.value + 1) % len(CellMark))


class BoardMarks:
    """Mutable 8×8 grid of :class:`CellMark` values.

    Only ``IGNORED`` removes a cell from the sums; ``CIRCLED`` is a player
    annotation and counts like ``DEFAULT``.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._size = size
        self._marks: List[List[CellMark]] = []
        self.reset()

    @property
    def size(self) -> int:
        return self._size

    def reset(self) -> None:
        """Set every cell back to ``DEFAULT``."""
        self._marks = [[CellMark.DEFAULT] * self._size for _ in range(self._size)]

    def cycle_mark(self, row: int, col: int) -> CellMark:
        """Advance the cell DEFAULT → IGNORED → CIRCLED → DEFAULT and return the new mark."""
        self._check_bounds(row, col)
        mark = self._marks[row][col].next()
        self._marks[row][col] = mark
        return mark

    def mark_at(self, row: int, col: int) -> CellMark:
        self._check_bounds(row, col)
        return self._marks[row][col]

    def is_active(self, row: int, col: int) -> bool:
        return self.mark_at(row, col) is not CellMark.IGNORED

    def rows(self) -> Tuple[Tuple[CellMark, ...], ...]:
        return tuple(tuple(row) for row in self._marks)

    def _check_bounds(self, row: int, col: int) -> None:
        for name, value in (("row", row), ("col", col)):
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < self._size:
                raise IndexError(f"{name} {value!r} is outside the {self._size}x{self._size} board")
