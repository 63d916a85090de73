import os

import pytest

from dreamteller.core.config import DreamSettings


@pytest.fixture(autouse=True)
def _restore_env():
    original = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original)


def test_settings_read_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
    monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "45")

    settings = DreamSettings(_env_file=None)

    assert settings.gemini_api_key.get_secret_value() == "gemini-key"
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.gemini_timeout_seconds == 45.0


def test_api_key_is_optional_at_startup(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_TIMEOUT_SECONDS", raising=False)

    settings = DreamSettings(_env_file=None)

    assert settings.gemini_api_key is None
    assert settings.gemini_timeout_seconds is None
    assert str(settings.gemini_api_base).startswith("https://generativelanguage.googleapis.com")


def test_api_key_is_not_rendered(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "super-secret")

    settings = DreamSettings(_env_file=None)

    assert "super-secret" not in repr(settings)
