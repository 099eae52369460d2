"""Tests for environment-driven settings."""

import pytest

from suncalc.config import DEFAULT_OBSERVER, ConfigError, load_settings


def test_defaults() -> None:
    settings = load_settings()
    assert settings.observer == DEFAULT_OBSERVER
    assert settings.timezone is None
    assert settings.user_agent is None


def test_observer_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SUNCALC_LATITUDE", "55")
    monkeypatch.setenv("SUNCALC_LONGITUDE", "-3.5")
    monkeypatch.setenv("SUNCALC_TIMEZONE", "auto")
    monkeypatch.setenv("SUNCALC_USER_AGENT", "me/1.0")

    settings = load_settings()

    assert (settings.observer.lat, settings.observer.lng) == (55.0, -3.5)
    assert settings.timezone == "auto"
    assert settings.user_agent == "me/1.0"


def test_half_configured_observer(monkeypatch) -> None:
    monkeypatch.setenv("SUNCALC_LATITUDE", "55")
    with pytest.raises(ConfigError, match="together"):
        load_settings()


def test_malformed_coordinate(monkeypatch) -> None:
    monkeypatch.setenv("SUNCALC_LATITUDE", "north")
    monkeypatch.setenv("SUNCALC_LONGITUDE", "3")
    with pytest.raises(ConfigError, match="SUNCALC_LATITUDE"):
        load_settings()
