"""Tests for skyhop.config – environment configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from skyhop.config import levels_path_from_env, log_level_from_env, seed_from_env


# ---------------------------------------------------------------------------
# SKYHOP_LOG_LEVEL
# ---------------------------------------------------------------------------

class TestLogLevel:
    def test_default_is_info(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SKYHOP_LOG_LEVEL", raising=False)
        assert log_level_from_env() == logging.INFO

    def test_lowercase_name(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SKYHOP_LOG_LEVEL", "debug")
        assert log_level_from_env() == logging.DEBUG

    def test_unknown_name_falls_back(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SKYHOP_LOG_LEVEL", "chatty")
        assert log_level_from_env() == logging.INFO

    @pytest.mark.parametrize("name", ["getLogger", "basicConfig", "Logger"])
    def test_logging_attribute_names_fall_back(self, monkeypatch: pytest.MonkeyPatch, name: str):
        monkeypatch.setenv("SKYHOP_LOG_LEVEL", name)
        level = log_level_from_env()
        assert isinstance(level, int)
        assert level == logging.INFO


# ---------------------------------------------------------------------------
# SKYHOP_SEED
# ---------------------------------------------------------------------------

class TestSeed:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SKYHOP_SEED", raising=False)
        assert seed_from_env() is None

    def test_blank(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SKYHOP_SEED", "  ")
        assert seed_from_env() is None

    def test_integer(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SKYHOP_SEED", "42")
        assert seed_from_env() == 42

    def test_not_integer(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SKYHOP_SEED", "abc")
        with pytest.raises(ValueError, match="SKYHOP_SEED"):
            seed_from_env()


# ---------------------------------------------------------------------------
# SKYHOP_LEVELS
# ---------------------------------------------------------------------------

class TestLevelsPath:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SKYHOP_LEVELS", raising=False)
        assert levels_path_from_env() is None

    def test_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        target = tmp_path / "levels.yaml"
        monkeypatch.setenv("SKYHOP_LEVELS", str(target))
        assert levels_path_from_env() == target
