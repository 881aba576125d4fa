"""Tests for sumgrid.core.levels – YAML-based level loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import level_data, write_level
from sumgrid.core.errors import DataIntegrityError, LevelNotFoundError
from sumgrid.core.levels import Level, LevelRepository, parse_level


@pytest.fixture()
def levels_dir(tmp_path: Path) -> Path:
    d = tmp_path / "levels"
    d.mkdir()
    return d


# ---------------------------------------------------------------------------
# Shipped levels
# ---------------------------------------------------------------------------

class TestShippedLevels:
    def test_level_10_is_available(self, repository: LevelRepository):
        assert 10 in repository.ids()

    def test_level_10_contents(self, level10: Level):
        assert level10.level_id == 10
        assert level10.numbers[0] == (3, 7, 5, 4, 1, 6, 3, 3)
        assert level10.color_ids[7] == (4, 4, 4, 4, 6, 6, 6, 6)
        assert level10.column_targets == (24, 2, 11, 14, 16, 23, 17, 3)
        assert level10.row_targets == (7, 15, 13, 16, 14, 18, 14, 13)
        assert level10.color_targets[0] == ("violet", 27)
        assert level10.color_targets[-1] == ("#ffb1b1", 12)

    def test_targets_agree_on_total(self, level10: Level):
        total = sum(level10.row_targets)
        assert sum(level10.column_targets) == total
        assert sum(t for _, t in level10.color_targets) == total

    def test_find_unknown_level(self, repository: LevelRepository):
        with pytest.raises(LevelNotFoundError) as excinfo:
            repository.find(999)
        assert excinfo.value.level_id == 999
        assert "999" in str(excinfo.value)

    def test_not_found_is_a_key_error(self, repository: LevelRepository):
        with pytest.raises(KeyError):
            repository.find(-1)


# ---------------------------------------------------------------------------
# Level dataclass
# ---------------------------------------------------------------------------

class TestLevelDataclass:
    def test_frozen(self, level10: Level):
        with pytest.raises(AttributeError):
            level10.level_id = 11  # type: ignore[misc]

    def test_grids_are_tuples(self, level10: Level):
        assert isinstance(level10.numbers, tuple)
        assert all(isinstance(row, tuple) for row in level10.numbers)


# ---------------------------------------------------------------------------
# LevelRepository – custom directory
# ---------------------------------------------------------------------------

class TestLevelRepositoryDirectory:
    def test_multiple_levels_sorted(self, levels_dir: Path):
        write_level(levels_dir, "level12.yaml", level_data(id=12))
        write_level(levels_dir, "level2.yaml", level_data(id=2))
        write_level(levels_dir, "level7.yaml", level_data(id=7))
        repo = LevelRepository(levels_dir)
        assert repo.ids() == [2, 7, 12]
        assert [lv.level_id for lv in repo.all()] == [2, 7, 12]

    def test_title_defaults_from_id(self, levels_dir: Path):
        data = level_data(id=3)
        del data["title"]
        write_level(levels_dir, "level3.yaml", data)
        assert LevelRepository(levels_dir).find(3).title == "Level 3"

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            LevelRepository(tmp_path / "nope")

    def test_no_yaml_files(self, levels_dir: Path):
        with pytest.raises(ValueError, match="No level files"):
            LevelRepository(levels_dir)

    def test_duplicate_level_ids(self, levels_dir: Path):
        write_level(levels_dir, "level1.yaml", level_data(id=5))
        write_level(levels_dir, "level2.yaml", level_data(id=5))
        with pytest.raises(DataIntegrityError, match="duplicate level id 5"):
            LevelRepository(levels_dir)


# ---------------------------------------------------------------------------
# Validation – error paths
# ---------------------------------------------------------------------------

class TestParseLevelErrors:
    def test_empty_yaml(self, levels_dir: Path):
        (levels_dir / "level0.yaml").write_text("", encoding="utf-8")
        with pytest.raises(DataIntegrityError, match="level0.yaml"):
            LevelRepository(levels_dir)

    def test_yaml_not_dict(self):
        with pytest.raises(DataIntegrityError, match="expected a YAML mapping"):
            parse_level(["item"])

    def test_missing_id(self):
        data = level_data()
        del data["id"]
        with pytest.raises(DataIntegrityError, match="'id'"):
            parse_level(data)

    def test_short_numbers_grid(self):
        data = level_data()
        data["numbers"] = data["numbers"][:7]
        with pytest.raises(DataIntegrityError, match="'numbers' must have 8 rows"):
            parse_level(data)

    def test_ragged_row(self):
        data = level_data()
        data["numbers"][3] = [1, 2, 3]
        with pytest.raises(DataIntegrityError, match="'numbers' must have 8 entries"):
            parse_level(data)

    def test_non_positive_number(self):
        data = level_data()
        data["numbers"][0][0] = 0
        with pytest.raises(DataIntegrityError, match="positive"):
            parse_level(data)

    def test_non_integer_target(self):
        data = level_data(row_targets=[7, 15, 13, 16, 14, 18, 14, "x"])
        with pytest.raises(DataIntegrityError, match="row_targets"):
            parse_level(data)

    def test_duplicate_color_key_is_rejected(self):
        data = level_data()
        data["color_targets"][1] = ["violet", 4]
        with pytest.raises(DataIntegrityError, match="duplicate color key 'violet'"):
            parse_level(data, source="level10.yaml")

    def test_color_id_out_of_range(self):
        data = level_data()
        data["colors"][2][5] = 9
        with pytest.raises(DataIntegrityError, match=r"cell \(2, 5\) uses color id 9"):
            parse_level(data)

    def test_color_id_zero(self):
        data = level_data()
        data["colors"][0][0] = 0
        with pytest.raises(DataIntegrityError, match="color id 0"):
            parse_level(data)

    def test_bad_color_target_pair(self):
        data = level_data()
        data["color_targets"][0] = ["violet"]
        with pytest.raises(DataIntegrityError, match=r"\[key, sum\] pair"):
            parse_level(data)

    def test_source_in_message(self):
        with pytest.raises(DataIntegrityError, match="^broken.yaml:"):
            parse_level({"id": "ten"}, source="broken.yaml")
