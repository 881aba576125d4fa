from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from sumgrid.core.board import BoardMarks, CellMark
from sumgrid.core.checker import CheckResult, check_solution
from sumgrid.core.hints import Hint, HintAdvisor, HintResult, HintUnavailable
from sumgrid.core.levels import Level, LevelRepository
from sumgrid.core.palette import ColorPalette, build_palette
from sumgrid.core.settings import GameSettings
from sumgrid.core.sums import ComputedSums, compute_sums

logger = logging.getLogger(__name__)

SessionListener = Callable[["PuzzleSession"], None]


@dataclass(frozen=True)
class CheckOutcome:
    """Result of a check request as seen by the player."""

    result: CheckResult
    lives: int
    game_over: bool = False

    @property
    def is_correct(self) -> bool:
        return self.result.is_correct

    @property
    def message(self) -> str:
        if self.result.is_correct:
            return "🎉 Congratulations! You solved it!"
        if self.game_over:
            return "💔 Game Over! Resetting..."
        noun = "life" if self.lives == 1 else "lives"
        return f"❌ Not quite right. {self.lives} {noun} remaining. Keep trying!"


@dataclass(frozen=True)
class HintOutcome:
    result: HintResult
    hints_remaining: int

    @property
    def message(self) -> str:
        if isinstance(self.result, Hint):
            return f"💡 Hint: {self.result.describe()}"
        if self.result is HintUnavailable.EXHAUSTED:
            return "No hints remaining!"
        return "💡 Everything looks good so far!"

    @property
    def button_label(self) -> str:
        return f"💡 Hint ({self.hints_remaining})"

    @property
    def button_enabled(self) -> bool:
        return self.hints_remaining > 0


class PuzzleSession:
    """Owns the state of one level being played: marks, lives and hints.

    Every player action goes through a method here. Listeners registered
    with :meth:`subscribe` are called after each change so a view can redraw.
    """

    def __init__(self, level: Level, settings: Optional[GameSettings] = None) -> None:
        self._settings = settings or GameSettings()
        self._listeners: List[SessionListener] = []
        self._marks = BoardMarks()
        self._hints = HintAdvisor(self._settings.hints)
        self._level = level
        self._palette = build_palette(level)
        self._lives = self._settings.lives
        logger.info("Started level %s", level.level_id)

    @classmethod
    def start(
        cls,
        repository: LevelRepository,
        level_id: int,
        settings: Optional[GameSettings] = None,
    ) -> PuzzleSession:
        """Look up *level_id* and begin a fresh session; raises ``LevelNotFoundError``."""
        return cls(repository.find(level_id), settings)

    @property
    def level(self) -> Level:
        return self._level

    @property
    def palette(self) -> ColorPalette:
        return self._palette

    @property
    def marks(self) -> BoardMarks:
        return self._marks

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def hints_remaining(self) -> int:
        return self._hints.hints_remaining

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        self._listeners.remove(listener)

    def load_level(self, level: Level) -> None:
        self._level = level
        self._palette = build_palette(level)
        self.restart()

    def restart(self) -> None:
        """Full restart: clear marks, restore lives and hints."""
        self._marks.reset()
        self._lives = self._settings.lives
        self._hints.restore()
        logger.info("Restarted level %s", self._level.level_id)
        self._notify()

    def tap(self, row: int, col: int) -> CellMark:
        mark = self._marks.cycle_mark(row, col)
        self._notify()
        return mark

    def reset_board(self) -> None:
        """Clear all marks; lives and hints are kept."""
        self._marks.reset()
        self._notify()

    def sums(self) -> ComputedSums:
        return compute_sums(self._level, self._marks, self._palette)

    def check(self) -> CheckOutcome:
        result = check_solution(self._level, self.sums(), self._palette)
        if result.is_correct:
            logger.info("Level %s solved", self._level.level_id)
            outcome = CheckOutcome(result=result, lives=self._lives)
            self._notify()
            return outcome

        for line in result.describe():
            logger.debug("Mismatch: %s", line)
        self._lives -= 1
        if self._lives > 0:
            outcome = CheckOutcome(result=result, lives=self._lives)
            self._notify()
            return outcome

        logger.info("Out of lives on level %s", self._level.level_id)
        outcome = CheckOutcome(result=result, lives=0, game_over=True)
        self.restart()
        return outcome

    def request_hint(self) -> HintOutcome:
        result = self._hints.next_hint(self._level, self.sums())
        outcome = HintOutcome(result=result, hints_remaining=self._hints.hints_remaining)
        self._notify()
        return outcome

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
