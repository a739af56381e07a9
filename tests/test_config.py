"""Tests for settings loading."""

from __future__ import annotations

from forkful.config import get_settings


def test_defaults():
    settings = get_settings()
    assert settings.api_base_url == "http://localhost:5001"
    assert settings.page_size == 3
    assert settings.suggestion_limit == 8
    assert settings.session_token is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FORKFUL_API_BASE_URL", "http://recipes.test/")
    monkeypatch.setenv("FORKFUL_PAGE_SIZE", "6")
    monkeypatch.setenv("FORKFUL_SUGGESTION_LIMIT", "not-a-number")
    monkeypatch.setenv("FORKFUL_SESSION_TOKEN", "s3cret")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.api_base_url == "http://recipes.test"
    assert settings.page_size == 6
    assert settings.suggestion_limit == 8
    assert settings.session_token == "s3cret"


def test_env_file_fallback(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("# local\nFORKFUL_REQUEST_TIMEOUT=2.5\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    assert get_settings().request_timeout == 2.5
