"""Shared fixtures for unit tests."""

import pytest

from verdict.config import ENV_PREFIX, Settings, reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no stray ``.env`` file."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"{ENV_PREFIX}{name.upper()}", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def plain_settings() -> Settings:
    """Settings with the location prefix turned off."""
    return Settings(line_info=False)
