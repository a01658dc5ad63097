from __future__ import annotations

import pytest

from devblog.shared.config import AppConfig


def test_production_without_secret_refuses_to_start(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SESSION_SECRET", "dev-session-secret")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_cookies_are_secure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SESSION_SECRET", "a-long-and-random-production-secret")
    monkeypatch.setenv("COOKIE_SECURE", "false")

    config = AppConfig()

    assert config.is_production()
    assert config.session_cookie_secure() is True


def test_nested_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///elsewhere.db")
    monkeypatch.setenv("BCRYPT_ROUNDS", "6")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("COOKIE_SECURE", "yes")

    config = AppConfig()

    assert config.database.url == "sqlite:///elsewhere.db"
    assert config.auth.bcrypt_rounds == 6
    assert config.auth.session_ttl_days == 7
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.session_cookie_secure() is True
    assert config.is_production() is False
