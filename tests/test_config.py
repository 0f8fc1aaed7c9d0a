"""Tests for environment-driven settings."""

import pytest

from orrery import bodies
from orrery.config import ConfigError, load_settings, load_settings_with_fallback


def test_defaults():
    settings = load_settings()
    assert settings.body is bodies.earth
    assert settings.style == "display"
    assert settings.longitude is None


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("ORRERY_BODY", "Mars")
    monkeypatch.setenv("ORRERY_STYLE", "FULL")
    monkeypatch.setenv("ORRERY_LONGITUDE", "-74")
    settings = load_settings()
    assert settings.body is bodies.mars
    assert settings.style == "full"
    assert settings.longitude == -74.0


def test_blank_longitude_is_absent(monkeypatch):
    monkeypatch.setenv("ORRERY_LONGITUDE", "   ")
    assert load_settings().longitude is None


def test_dotenv_is_loaded(monkeypatch):
    calls = []
    monkeypatch.setattr("orrery.config.load_dotenv", lambda: calls.append(True))
    load_settings()
    assert calls == [True]
    load_settings(dotenv=False)
    assert calls == [True]


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("ORRERY_BODY", "vulcan", "ORRERY_BODY"),
        ("ORRERY_STYLE", "short", "ORRERY_STYLE"),
        ("ORRERY_LONGITUDE", "east", "ORRERY_LONGITUDE"),
    ],
)
def test_invalid_values(monkeypatch, name, value, message):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError, match=message):
        load_settings()


def test_fallback_without_error(monkeypatch):
    monkeypatch.setenv("ORRERY_BODY", "mars")
    settings, error = load_settings_with_fallback()
    assert settings.body is bodies.mars
    assert error is None


def test_fallback_on_invalid_value(monkeypatch):
    monkeypatch.setenv("ORRERY_BODY", "mars")
    monkeypatch.setenv("ORRERY_STYLE", "short")
    settings, error = load_settings_with_fallback()
    assert settings.body is bodies.earth
    assert settings.style == "display"
    assert settings.longitude is None
    assert "ORRERY_STYLE" in error
