"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class LevelNotFoundError(KeyError):
    """No level with the requested identifier exists."""

    def __init__(self, level_id: int) -> None:
        super().__init__(level_id)
        self.level_id = level_id

    def __str__(self) -> str:
        return f"Level not found: {self.level_id}"


class DataIntegrityError(ValueError):
    """A level definition is internally inconsistent (bad shape, duplicate color key, unknown color id)."""
