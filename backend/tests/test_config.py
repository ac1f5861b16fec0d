"""Tests for environment-driven settings."""

from raid_planner.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("CUSTOM_KEY", raising=False)
    settings = Settings(_env_file=None)

    assert settings.custom_key is None
    assert settings.timezone == "Europe/Paris"
    assert settings.strict_status_transitions is True
    assert settings.raid_creation_delay_seconds == 1.0


def test_custom_key_from_environment(monkeypatch):
    monkeypatch.setenv("CUSTOM_KEY", "guild-eu-1")
    monkeypatch.setenv("STRICT_STATUS_TRANSITIONS", "false")

    settings = Settings(_env_file=None)

    assert settings.custom_key == "guild-eu-1"
    assert settings.strict_status_transitions is False


def test_cors_origins_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://guild.example, http://localhost:5173,")
    settings = Settings(_env_file=None)
    assert settings.cors_origins_list == ["https://guild.example", "http://localhost:5173"]
