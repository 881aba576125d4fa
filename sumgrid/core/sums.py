from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from sumgrid.core.board import BoardMarks, CellMark
from sumgrid.core.levels import Level
from sumgrid.core.palette import ColorPalette, build_palette


@dataclass(frozen=True)
class ComputedSums:
    """Totals of the active (non-ignored) cells of a board."""

    row_sums: Tuple[int, ...]
    col_sums: Tuple[int, ...]
    color_sums: Mapping[str, int]

    def color_sum(self, color_key: str) -> int:
        """Total for *color_key*; colors without an active cell count as 0."""
        return self.color_sums.get(color_key, 0)


def compute_sums(level: Level, marks: BoardMarks, palette: Optional[ColorPalette] = None) -> ComputedSums:
    if palette is None:
        palette = build_palette(level)
    size = len(level.numbers)
    row_sums: List[int] = [0] * size
    col_sums: List[int] = [0] * size
    color_sums: Dict[str, int] = {}

    for row in range(size):
        for col in range(size):
            if marks.mark_at(row, col) is CellMark.IGNORED:
                continue
            value = level.numbers[row][col]
            color_key = palette.key_for(level.color_ids[row][col])
            row_sums[row] += value
            col_sums[col] += value
            color_sums[color_key] = color_sums.get(color_key, 0) + value

    return ComputedSums(
        row_sums=tuple(row_sums),
        col_sums=tuple(col_sums),
        color_sums=MappingProxyType(color_sums),
    )
