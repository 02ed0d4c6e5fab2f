"""Tests for environment-driven configuration."""

from __future__ import annotations

import inspect

import pytest

from happify.config import BaseConfig, TestConfig
from happify.domain.daily_log import DEFAULT_HISTORY_DAYS, DEFAULT_WINDOW_DAYS
from happify.domain.repositories import HabitRepository
from happify.infra.repositories import SQLModelHabitRepository


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in (
        "HAPPIFY_DATABASE_URL",
        "HAPPIFY_DEV_MODE",
        "HAPPIFY_STREAK_WINDOW_DAYS",
        "HAPPIFY_MOOD_WINDOW_DAYS",
        "HAPPIFY_HISTORY_DAYS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HAPPIFY_DATA_DIR", str(tmp_path / "data"))
    return tmp_path


def test_defaults(clean_env):
    config = BaseConfig()

    assert config.DATA_DIR == (clean_env / "data").resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DATABASE_URL == f"sqlite:///{config.DATA_DIR / 'happify.db'}"
    assert config.DEV_MODE is True
    assert (config.STREAK_WINDOW_DAYS, config.MOOD_WINDOW_DAYS, config.HISTORY_DAYS) == (7, 14, 30)


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("HAPPIFY_STREAK_WINDOW_DAYS", "14")
    monkeypatch.setenv("HAPPIFY_DEV_MODE", "off")
    monkeypatch.setenv("HAPPIFY_DATABASE_URL", "sqlite:///elsewhere.db")

    config = BaseConfig()

    assert config.STREAK_WINDOW_DAYS == 14
    assert config.DEV_MODE is False
    assert config.DATABASE_URL == "sqlite:///elsewhere.db"


@pytest.mark.parametrize("raw", ["0", "-2", "seven"])
def test_invalid_window_rejected(clean_env, monkeypatch, raw):
    monkeypatch.setenv("HAPPIFY_STREAK_WINDOW_DAYS", raw)

    with pytest.raises(ValueError, match="HAPPIFY_STREAK_WINDOW_DAYS"):
        BaseConfig()


def test_sqlite_engine_options(clean_env):
    assert BaseConfig().sqlalchemy_engine_options() == {"connect_args": {"check_same_thread": False}}


def test_test_config_uses_memory_database(tmp_path):
    config = TestConfig(data_dir=tmp_path)

    assert config.DATABASE_URL == "sqlite://"
    assert config.DATA_DIR == tmp_path
    assert "poolclass" in config.sqlalchemy_engine_options()


def test_history_and_window_defaults_shared(clean_env):
    """Config, repository protocol and implementation agree on one default."""
    config = BaseConfig()

    for repo_class in (HabitRepository, SQLModelHabitRepository):
        params = inspect.signature(repo_class.get_streak_summary).parameters
        assert params["history_days"].default == DEFAULT_HISTORY_DAYS == config.HISTORY_DAYS
        assert params["window_days"].default == DEFAULT_WINDOW_DAYS == config.STREAK_WINDOW_DAYS
