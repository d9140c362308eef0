"""Tests for skyhop.core.levels – YAML level table loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from skyhop.core.levels import DEFAULT_SAFE_COUNT, DEFAULT_SKY, Level, LevelRepository


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def table_path(tmp_path: Path) -> Path:
    return tmp_path / "levels.yaml"


def _write_yaml(path: Path, data: object) -> None:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")


def _entry(safe_count: int, title: str = "T", **extra) -> dict:
    return {"title": title, "safe_count": safe_count, **extra}


# ---------------------------------------------------------------------------
# Level dataclass
# ---------------------------------------------------------------------------

class TestLevelDataclass:
    def test_creation(self):
        lv = Level(number=1, safe_count=20, title="Morning")
        assert lv.number == 1
        assert lv.safe_count == 20
        assert lv.sky == DEFAULT_SKY

    def test_frozen(self):
        lv = Level(number=1, safe_count=20, title="Morning")
        with pytest.raises(AttributeError):
            lv.safe_count = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Shipped level table
# ---------------------------------------------------------------------------

class TestShippedTable:
    def test_safe_counts(self):
        repo = LevelRepository()
        assert [lv.safe_count for lv in repo.all()] == [20, 15, 5, 1]
        assert [lv.number for lv in repo.all()] == [1, 2, 3, 4]

    def test_final_level(self):
        assert LevelRepository().final_level == 4

    def test_beyond_table_defaults_to_one(self):
        repo = LevelRepository()
        assert repo.safe_count(5) == DEFAULT_SAFE_COUNT == 1
        assert repo.safe_count(99) == 1

    def test_fallen_plus_safe_fits_board(self):
        repo = LevelRepository()
        fallen = 0
        for lv in repo.all():
            assert lv.safe_count + fallen <= 25
            fallen = 25 - lv.safe_count

    def test_caption_shows_title(self):
        repo = LevelRepository()
        assert repo.caption(2) == "Level: 2 · Noon breeze"
        assert repo.title(4) == "Among the stars"

    def test_caption_beyond_table(self):
        assert LevelRepository().caption(7) == "Level: 7"

    def test_skies(self):
        repo = LevelRepository()
        assert repo.sky(1) == ("#87CEEB", "#E0F7FA")
        assert repo.sky(4) == ("#0A0A2E", "#1A237E")
        assert repo.sky(9) == DEFAULT_SKY


# ---------------------------------------------------------------------------
# LevelRepository – happy paths
# ---------------------------------------------------------------------------

class TestLevelRepositoryHappy:
    def test_custom_table(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry(10, "A"), _entry(2, "B")]})
        repo = LevelRepository(table_path)
        assert repo.final_level == 2
        assert repo.get(1).title == "A"
        assert repo.safe_count(2) == 2

    def test_equal_counts_allowed(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry(5), _entry(5)]})
        assert LevelRepository(table_path).safe_count(2) == 5

    def test_title_stripped(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry(3, "  Padded  ")]})
        assert LevelRepository(table_path).get(1).title == "Padded"

    def test_titles_optional(self, table_path: Path):
        _write_yaml(table_path, {"levels": [{"safe_count": 20}, {"safe_count": 1}]})
        repo = LevelRepository(table_path)
        assert repo.final_level == 2
        assert repo.get(1).title == ""
        assert repo.caption(1) == "Level: 1"

    def test_custom_sky(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry(3, sky=["#000000", "#FFFFFF"])]})
        assert LevelRepository(table_path).sky(1) == ("#000000", "#FFFFFF")


# ---------------------------------------------------------------------------
# LevelRepository – error paths
# ---------------------------------------------------------------------------

class TestLevelRepositoryErrors:
    def test_missing_file(self, table_path: Path):
        with pytest.raises(FileNotFoundError):
            LevelRepository(table_path)

    def test_empty_yaml(self, table_path: Path):
        table_path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="expected YAML"):
            LevelRepository(table_path)

    def test_empty_levels(self, table_path: Path):
        _write_yaml(table_path, {"levels": []})
        with pytest.raises(ValueError, match="non-empty list"):
            LevelRepository(table_path)

    def test_entry_not_mapping(self, table_path: Path):
        _write_yaml(table_path, {"levels": ["oops"]})
        with pytest.raises(ValueError, match="expected a mapping"):
            LevelRepository(table_path)

    def test_title_not_string(self, table_path: Path):
        _write_yaml(table_path, {"levels": [{"safe_count": 3, "title": 42}]})
        with pytest.raises(ValueError, match="invalid 'title'"):
            LevelRepository(table_path)

    def test_safe_count_not_int(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry("many")]})  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="invalid 'safe_count'"):
            LevelRepository(table_path)

    @pytest.mark.parametrize("count", [0, 26])
    def test_safe_count_out_of_range(self, table_path: Path, count: int):
        _write_yaml(table_path, {"levels": [_entry(count)]})
        with pytest.raises(ValueError, match="between 1 and 25"):
            LevelRepository(table_path)

    def test_increasing_safe_count_rejected(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry(5), _entry(6)]})
        with pytest.raises(ValueError, match="exceeds the 5 clouds"):
            LevelRepository(table_path)

    def test_bad_sky(self, table_path: Path):
        _write_yaml(table_path, {"levels": [_entry(3, sky=["blue", "#FFFFFF"])]})
        with pytest.raises(ValueError, match="'sky'"):
            LevelRepository(table_path)

    def test_get_missing_level(self):
        with pytest.raises(KeyError):
            LevelRepository().get(5)
