"""Shared fixtures: the shipped level 10 and a builder for levels solved by construction."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Set, Tuple

import pytest
import yaml

from sumgrid.core.board import BoardMarks, CellMark
from sumgrid.core.levels import Level, LevelRepository

NUMBERS_10 = [
    [3, 7, 5, 4, 1, 6, 3, 3],
    [2, 3, 6, 9, 6, 3, 1, 3],
    [1, 5, 2, 5, 5, 6, 2, 7],
    [2, 1, 8, 1, 4, 5, 4, 6],
    [9, 2, 8, 5, 5, 4, 3, 3],
    [8, 4, 1, 6, 4, 7, 6, 3],
    [7, 7, 4, 4, 3, 2, 5, 2],
    [6, 7, 3, 4, 9, 4, 4, 3],
]

COLORS_10 = [
    [8, 8, 8, 8, 2, 2, 2, 2],
    [8, 8, 5, 8, 1, 2, 2, 2],
    [5, 5, 5, 8, 1, 1, 1, 2],
    [5, 5, 5, 1, 1, 1, 1, 7],
    [5, 3, 3, 3, 3, 7, 7, 7],
    [4, 3, 3, 3, 6, 7, 7, 7],
    [4, 4, 4, 3, 6, 7, 6, 6],
    [4, 4, 4, 4, 6, 6, 6, 6],
]

KEYS_10 = ["violet", "#a3abe4", "#baffc9", "orange", "yellow", "#eecec1", "#c0ddff", "#ffb1b1"]

Cell = Tuple[int, int]


def level_data(**overrides) -> dict:
    """A valid YAML-shaped level mapping (level 10) with optional field overrides."""
    data = {
        "id": 10,
        "title": "Level 10",
        "numbers": [list(r) for r in NUMBERS_10],
        "colors": [list(r) for r in COLORS_10],
        "column_targets": [24, 2, 11, 14, 16, 23, 17, 3],
        "row_targets": [7, 15, 13, 16, 14, 18, 14, 13],
        "color_targets": [
            ["violet", 27],
            ["#a3abe4", 4],
            ["#baffc9", 7],
            ["orange", 24],
            ["yellow", 8],
            ["#eecec1", 9],
            ["#c0ddff", 19],
            ["#ffb1b1", 12],
        ],
    }
    data.update(overrides)
    return data


def write_level(directory: Path, name: str, data: dict) -> Path:
    path = directory / name
    path.write_text(yaml.dump(data, default_flow_style=None), encoding="utf-8")
    return path


def solved_level(
    ignored: Iterable[Cell],
    numbers: Sequence[Sequence[int]] = NUMBERS_10,
    colors: Sequence[Sequence[int]] = COLORS_10,
    keys: Sequence[str] = KEYS_10,
    level_id: int = 1,
) -> Level:
    """Build a level whose targets are exactly the sums left after ignoring *ignored*."""
    ignored_set: Set[Cell] = set(ignored)
    rows = [0] * 8
    cols = [0] * 8
    by_key = {key: 0 for key in keys}
    for r in range(8):
        for c in range(8):
            if (r, c) in ignored_set:
                continue
            rows[r] += numbers[r][c]
            cols[c] += numbers[r][c]
            by_key[keys[colors[r][c] - 1]] += numbers[r][c]
    return Level(
        level_id=level_id,
        numbers=tuple(tuple(r) for r in numbers),
        color_ids=tuple(tuple(r) for r in colors),
        column_targets=tuple(cols),
        row_targets=tuple(rows),
        color_targets=tuple((key, by_key[key]) for key in keys),
        title=f"Level {level_id}",
    )


def marks_with(ignored: Iterable[Cell] = (), circled: Iterable[Cell] = ()) -> BoardMarks:
    marks = BoardMarks()
    for r, c in ignored:
        marks.cycle_mark(r, c)
    for r, c in circled:
        marks.cycle_mark(r, c)
        marks.cycle_mark(r, c)
    assert all(marks.mark_at(r, c) is CellMark.CIRCLED for r, c in circled)
    return marks


# A diagonal-ish pattern: two ignored cells in every row and column.
SOLUTION_MASK = [(r, (r + shift) % 8) for r in range(8) for shift in (1, 4)]


@pytest.fixture(scope="session")
def repository() -> LevelRepository:
    return LevelRepository()


@pytest.fixture()
def level10(repository: LevelRepository) -> Level:
    return repository.find(10)


@pytest.fixture()
def built_level() -> Level:
    return solved_level(SOLUTION_MASK)
