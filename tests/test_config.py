"""Tests for application settings."""

from app.config import Settings


def test_default_settings():
    """Defaults describe the example account."""
    settings = Settings(_env_file=None)
    assert settings.example_email == "demo@blogify.test"
    assert settings.example_password == "password123"
    assert settings.example_display_name == "Demo User"
    assert settings.model_config["env_file"] == ".env"


def test_settings_from_environment(monkeypatch):
    """Environment variables override the defaults."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("EXAMPLE_DISPLAY_NAME", "Blog Owner")
    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.example_display_name == "Blog Owner"
