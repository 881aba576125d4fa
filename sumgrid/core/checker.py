from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from sumgrid.core.levels import Level
from sumgrid.core.palette import ColorPalette, build_palette
from sumgrid.core.sums import ComputedSums


class Axis(str, Enum):
    ROW = "row"
    COLUMN = "column"
    COLOR = "color"


@dataclass(frozen=True)
class Mismatch:
    """One unmet constraint: ``index`` is the 0-based line for rows/columns, the color key for colors."""

    axis: Axis
    index: Union[int, str]
    expected: int
    actual: int

    def describe(self) -> str:
        if self.axis is Axis.COLOR:
            label = f"Color {self.index}"
        else:
            label = f"{self.axis.value.capitalize()} {int(self.index) + 1}"
        return f"{label}: Expected {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class CheckResult:
    is_correct: bool
    mismatches: Tuple[Mismatch, ...]

    def describe(self) -> List[str]:
        return [m.describe() for m in self.mismatches]


def check_solution(level: Level, sums: ComputedSums, palette: Optional[ColorPalette] = None) -> CheckResult:
    """Compare *sums* against every row, column and color target of *level*.

    All mismatches are collected in order: rows, then columns, then colors
    in ``level.color_targets`` order.
    """
    if palette is None:
        palette = build_palette(level)
    mismatches: List[Mismatch] = []

    for i, target in enumerate(level.row_targets):
        if sums.row_sums[i] != target:
            mismatches.append(Mismatch(Axis.ROW, i, target, sums.row_sums[i]))

    for i, target in enumerate(level.column_targets):
        if sums.col_sums[i] != target:
            mismatches.append(Mismatch(Axis.COLUMN, i, target, sums.col_sums[i]))

    for color_key in palette:
        target = palette.target_for(color_key)
        actual = sums.color_sum(color_key)
        if actual != target:
            mismatches.append(Mismatch(Axis.COLOR, color_key, target, actual))

    return CheckResult(is_correct=not mismatches, mismatches=tuple(mismatches))
