from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from sumgrid.core.board import BOARD_SIZE
from sumgrid.core.errors import DataIntegrityError, LevelNotFoundError
from sumgrid.core.palette import build_palette, validate_color_ids

logger = logging.getLogger(__name__)

Grid = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Level:
    level_id: int
    numbers: Grid
    color_ids: Grid
    column_targets: Tuple[int, ...]
    row_targets: Tuple[int, ...]
    color_targets: Tuple[Tuple[str, int], ...]
    title: str = ""


def default_levels_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "levels"


class LevelRepository:
    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else default_levels_dir()
        self._levels = self._load_levels()

    def all(self) -> List[Level]:
        return list(self._levels.values())

    def ids(self) -> List[int]:
        return list(self._levels.keys())

    def find(self, level_id: int) -> Level:
        try:
            return self._levels[level_id]
        except KeyError:
            raise LevelNotFoundError(level_id) from None

    def _load_levels(self) -> Dict[int, Level]:
        base_dir = self._base_dir
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        levels: Dict[int, Level] = {}

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            level = parse_level(raw, source=level_path.name)
            if level.level_id in levels:
                raise DataIntegrityError(f"{level_path.name}: duplicate level id {level.level_id}")
            levels[level.level_id] = level

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        logger.info("Loaded %d level(s) from %s", len(levels), base_dir)
        return levels


def parse_level(raw: Any, source: str = "<level>") -> Level:
    """Build a validated :class:`Level` from a decoded YAML mapping.

    Raises :class:`DataIntegrityError` naming *source* for any malformed field,
    duplicate color key, or color id outside the level's palette.
    """
    if not raw or not isinstance(raw, dict):
        raise DataIntegrityError(f"{source}: expected a YAML mapping describing the level")

    level_id = raw.get("id")
    if not isinstance(level_id, int) or isinstance(level_id, bool):
        raise DataIntegrityError(f"{source}: missing or invalid 'id'")

    title = raw.get("title") or f"Level {level_id}"
    if not isinstance(title, str):
        raise DataIntegrityError(f"{source}: invalid 'title'")

    numbers = _grid(raw, "numbers", source)
    for row in numbers:
        if any(value <= 0 for value in row):
            raise DataIntegrityError(f"{source}: 'numbers' must be positive integers")
    color_ids = _grid(raw, "colors", source)
    column_targets = _line(raw.get("column_targets"), "column_targets", source)
    row_targets = _line(raw.get("row_targets"), "row_targets", source)
    color_targets = _color_targets(raw.get("color_targets"), source)

    level = Level(
        level_id=level_id,
        numbers=numbers,
        color_ids=color_ids,
        column_targets=column_targets,
        row_targets=row_targets,
        color_targets=color_targets,
        title=title.strip(),
    )
    try:
        validate_color_ids(level, build_palette(level))
    except DataIntegrityError as e:
        raise DataIntegrityError(f"{source}: {e}") from e
    return level


def _grid(raw: Dict[str, Any], field: str, source: str) -> Grid:
    rows = raw.get(field)
    if not isinstance(rows, list) or len(rows) != BOARD_SIZE:
        raise DataIntegrityError(f"{source}: '{field}' must have {BOARD_SIZE} rows")
    return tuple(_line(row, field, source) for row in rows)


def _line(values: Any, field: str, source: str) -> Tuple[int, ...]:
    if not isinstance(values, list) or len(values) != BOARD_SIZE:
        raise DataIntegrityError(f"{source}: '{field}' must have {BOARD_SIZE} entries")
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        raise DataIntegrityError(f"{source}: '{field}' must contain integers only")
    return tuple(values)


def _color_targets(values: Any, source: str) -> Tuple[Tuple[str, int], ...]:
    if not isinstance(values, list) or not values:
        raise DataIntegrityError(f"{source}: missing or empty 'color_targets'")
    pairs: List[Tuple[str, int]] = []
    for item in values:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise DataIntegrityError(f"{source}: each color target must be a [key, sum] pair")
        key, target = item
        if not isinstance(key, str) or not key.strip():
            raise DataIntegrityError(f"{source}: invalid color key {key!r}")
        if not isinstance(target, int) or isinstance(target, bool):
            raise DataIntegrityError(f"{source}: invalid target for color {key!r}")
        pairs.append((key.strip(), target))
    return tuple(pairs)
