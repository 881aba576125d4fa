"""Hints point the player at the first row or column whose sum is off.

Color groups are never hinted; a board whose rows and columns all match is
reported as satisfied even when a color total is still wrong.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from sumgrid.core.checker import Axis
from sumgrid.core.levels import Level
from sumgrid.core.sums import ComputedSums


@dataclass(frozen=True)
class Hint:
    axis: Axis
    index: int
    actual: int
    target: int

    def describe(self) -> str:
        return (
            f"Check {self.axis.value} {self.index + 1} - "
            f"current sum is {self.actual}, should be {self.target}"
        )


class HintUnavailable(Enum):
    EXHAUSTED = "exhausted"
    ALL_SATISFIED = "all_satisfied"


HintResult = Union[Hint, HintUnavailable]


def find_first_mismatch(level: Level, sums: ComputedSums) -> Optional[Hint]:
    for row, target in enumerate(level.row_targets):
        if sums.row_sums[row] != target:
            return Hint(Axis.ROW, row, sums.row_sums[row], target)
    for col, target in enumerate(level.column_targets):
        if sums.col_sums[col] != target:
            return Hint(Axis.COLUMN, col, sums.col_sums[col], target)
    return None


class HintAdvisor:
    """Hands out hints from a limited budget."""

    def __init__(self, hints: int = 1) -> None:
        self._initial = hints
        self._remaining = hints

    @property
    def hints_remaining(self) -> int:
        return self._remaining

    def restore(self) -> None:
        """Refill the budget; used only on a full level restart."""
        self._remaining = self._initial

    def next_hint(self, level: Level, sums: ComputedSums) -> HintResult:
        if self._remaining <= 0:
            return HintUnavailable.EXHAUSTED
        hint = find_first_mismatch(level, sums)
        if hint is None:
            return HintUnavailable.ALL_SATISFIED
        self._remaining -= 1
        return hint
