"""Tests for environment-driven settings and app composition."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.app import create_app
from src.config.settings import load_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("LOG_LEVEL", "LOAD_SAMPLE_DATA", "CLI_PROMPT"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local `.env` out of the tests.
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.load_sample_data is True
    assert settings.prompt == "> "


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOAD_SAMPLE_DATA", "false")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.load_sample_data is False


def test_invalid_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()


def test_create_app_respects_sample_data_flag() -> None:
    assert len(create_app(load_settings()).address_book) > 0
    assert len(create_app(load_settings(LOAD_SAMPLE_DATA=False)).address_book) == 0
