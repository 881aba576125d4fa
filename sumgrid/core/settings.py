"""Runtime settings, read from ``SUMGRID_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "SUMGRID_"


@dataclass(frozen=True)
class GameSettings:
    start_level: int = 10
    lives: int = 3
    hints: int = 1
    game_over_delay_ms: int = 2000
    levels_dir: Optional[Path] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GameSettings:
        env = os.environ if environ is None else environ
        defaults = cls()
        levels_dir = env.get(f"{ENV_PREFIX}LEVELS_DIR")
        return cls(
            start_level=_int_var(env, "LEVEL", defaults.start_level),
            lives=_int_var(env, "LIVES", defaults.lives, minimum=1),
            hints=_int_var(env, "HINTS", defaults.hints, minimum=0),
            game_over_delay_ms=_int_var(env, "GAME_OVER_DELAY_MS", defaults.game_over_delay_ms, minimum=0),
            levels_dir=Path(levels_dir) if levels_dir else None,
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
        )


def _int_var(env: Mapping[str, str], name: str, default: int, minimum: Optional[int] = None) -> int:
    key = f"{ENV_PREFIX}{name}"
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{key} must be >= {minimum}, got {value}")
    return value
