"""Tests for settings loading."""

import dataclasses
from pathlib import Path

import pytest

from storefront.infrastructure.config import load_settings


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STOREFRONT_CURRENCY", "eur")
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "debug")
    settings = load_settings(env_file=tmp_path / "missing.env")
    assert settings.data_dir == tmp_path
    assert settings.currency == "EUR"
    assert settings.log_level == "DEBUG"


def test_defaults(monkeypatch, tmp_path):
    for name in ("STOREFRONT_DATA_DIR", "STOREFRONT_CURRENCY", "STOREFRONT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings(env_file=tmp_path / "missing.env")
    assert settings.currency == "USD"
    assert settings.log_level == "WARNING"
    assert settings.data_dir.name == "data"


def test_dotenv_file_loaded(monkeypatch, tmp_path):
    # Registered with monkeypatch so the value loaded below is undone afterwards
    monkeypatch.setenv("STOREFRONT_CURRENCY", "unset")
    monkeypatch.delenv("STOREFRONT_CURRENCY")
    env_file = tmp_path / ".env"
    env_file.write_text("STOREFRONT_CURRENCY=GBP\n")
    settings = load_settings(env_file=env_file)
    assert settings.currency == "GBP"


def test_settings_are_immutable(tmp_path):
    settings = load_settings(env_file=tmp_path / "missing.env")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.currency = "JPY"  # type: ignore[misc]
    assert isinstance(settings.data_dir, Path)
