"""Color palette for a level: color ids on the board to color keys and their target sums."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterator, Mapping

from sumgrid.core.errors import DataIntegrityError

if TYPE_CHECKING:
    from sumgrid.core.levels import Level


@dataclass(frozen=True)
class ColorPalette:
    """Read-only view of a level's colors.

    ``colors`` maps the 1-based color id used in ``Level.color_ids`` to its
    color key; ``targets`` maps each color key to the sum its active cells
    must reach. Both keep the order of ``Level.color_targets``.
    """

    colors: Mapping[int, str]
    targets: Mapping[str, int]

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.targets)

    def key_for(self, color_id: int) -> str:
        """Return the color key for *color_id*, rejecting ids outside the palette."""
        try:
            return self.colors[color_id]
        except KeyError:
            raise DataIntegrityError(
                f"color id {color_id} is outside the palette (1..{len(self.colors)})"
            ) from None

    def target_for(self, color_key: str) -> int:
        return self.targets[color_key]


def build_palette(level: Level) -> ColorPalette:
    """Derive the palette from ``level.color_targets``: entry *i* becomes color id ``i + 1``."""
    colors: Dict[int, str] = {}
    targets: Dict[str, int] = {}
    for index, (color_key, target) in enumerate(level.color_targets):
        if color_key in targets:
            raise DataIntegrityError(f"duplicate color key {color_key!r} in color targets")
        colors[index + 1] = color_key
        targets[color_key] = target
    return ColorPalette(colors=MappingProxyType(colors), targets=MappingProxyType(targets))


def validate_color_ids(level: Level, palette: ColorPalette) -> None:
    for row_index, row in enumerate(level.color_ids):
        for col_index, color_id in enumerate(row):
            if color_id not in palette.colors:
                raise DataIntegrityError(
                    f"cell ({row_index}, {col_index}) uses color id {color_id}, "
                    f"palette has {len(palette)} color(s)"
                )
