import pytest
from pydantic import ValidationError

from semverlite.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SEMVERLITE_LOG_LEVEL", "SEMVERLITE_CONSOLE_WIDTH", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults():
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.console_width is None
    assert settings.no_color is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SEMVERLITE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SEMVERLITE_CONSOLE_WIDTH", "72")
    monkeypatch.setenv("NO_COLOR", "anything")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.console_width == 72
    assert settings.no_color is True


def test_empty_values_use_defaults(monkeypatch):
    monkeypatch.setenv("SEMVERLITE_CONSOLE_WIDTH", "")
    monkeypatch.setenv("NO_COLOR", "")
    settings = Settings()
    assert settings.console_width is None
    assert settings.no_color is False


def test_settings_by_field_name():
    settings = Settings(log_level="error", console_width=40, no_color=True)
    assert (settings.log_level, settings.console_width, settings.no_color) == ("ERROR", 40, True)


@pytest.mark.parametrize(
    "name, value",
    [
        ("SEMVERLITE_LOG_LEVEL", "loud"),
        ("SEMVERLITE_CONSOLE_WIDTH", "0"),
        ("SEMVERLITE_CONSOLE_WIDTH", "wide"),
    ],
)
def test_settings_reject_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
