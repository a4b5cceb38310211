"""Tests for settings loading and validation."""

import textwrap

import pytest
from pydantic import ValidationError

from verdict import Location, equal
from verdict.config import Settings, get_settings, reset_settings


def test_defaults():
    settings = Settings()

    assert settings.line_info is True
    assert settings.repr_limit is None


def test_from_env_without_variables_uses_defaults():
    assert Settings.from_env() == Settings()


@pytest.mark.parametrize("raw,expected", [("false", False), ("0", False), ("no", False), ("true", True), ("1", True)])
def test_line_info_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("VERDICT_LINE_INFO", raw)

    assert Settings.from_env().line_info is expected


def test_repr_limit_from_env(monkeypatch):
    monkeypatch.setenv("VERDICT_REPR_LIMIT", " 40 ")

    assert Settings.from_env().repr_limit == 40


def test_blank_variable_is_ignored(monkeypatch):
    monkeypatch.setenv("VERDICT_REPR_LIMIT", "")

    assert Settings.from_env().repr_limit is None


def test_reads_dotenv_file(tmp_path):
    dotenv = tmp_path / "custom.env"
    dotenv.write_text(textwrap.dedent("""\
        VERDICT_LINE_INFO=false
        VERDICT_REPR_LIMIT=12
        """))

    settings = Settings.from_env(dotenv)

    assert settings.line_info is False
    assert settings.repr_limit == 12


def test_finds_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("VERDICT_REPR_LIMIT=25\n")

    assert Settings.from_env().repr_limit == 25


def test_environment_wins_over_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("VERDICT_LINE_INFO=false\n")
    monkeypatch.setenv("VERDICT_LINE_INFO", "true")

    assert Settings.from_env().line_info is True


def test_repr_limit_must_leave_room_for_suffix():
    assert Settings(repr_limit=4).repr_limit == 4

    for limit in (0, 1, 3):
        with pytest.raises(ValidationError, match="greater than 3"):
            Settings(repr_limit=limit)


@pytest.mark.parametrize("raw", ["2", "-5", "lots"])
def test_invalid_repr_limit_rejected(monkeypatch, raw):
    monkeypatch.setenv("VERDICT_REPR_LIMIT", raw)

    with pytest.raises(ValidationError):
        Settings.from_env()


def test_invalid_line_info_rejected(monkeypatch):
    monkeypatch.setenv("VERDICT_LINE_INFO", "maybe")

    with pytest.raises(ValidationError):
        Settings.from_env()


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        Settings(colour=True)


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("VERDICT_LINE_INFO", "false")

    assert get_settings() is first

    reset_settings()

    assert get_settings().line_info is False


def test_disabling_line_info_drops_location_prefix(monkeypatch):
    location = Location("src/main.py", 5, 1)
    assert equal(1, 2, location=location).message == "[src/main.py:5:1]: Test failed: 1 != 2"

    monkeypatch.setenv("VERDICT_LINE_INFO", "off")
    reset_settings()

    assert equal(1, 2, location=location).message == "Test failed: 1 != 2"
