"""Tests de `AppSettings` (pydantic-settings)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults(settings):
    assert settings.api_base_url == "https://api.spacexdata.com"
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LAUNCHES_API_BASE_URL", "http://localhost:9000")
    monkeypatch.setenv("LAUNCHES_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("LAUNCHES_USER_AGENT", "ci-runner/1.0")

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "http://localhost:9000"
    assert settings.http_timeout_seconds == 2.5
    assert settings.user_agent == "ci-runner/1.0"


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LAUNCHES_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    settings = AppSettings(_env_file=env_file)

    assert settings.log_level == "DEBUG"


def test_page_settings_are_not_configurable(monkeypatch):
    monkeypatch.setenv("LAUNCHES_PAGE_LIMIT", "5")
    monkeypatch.setenv("LAUNCHES_PAGE_SPAN", "500")

    settings = AppSettings(_env_file=None)

    assert not hasattr(settings, "page_limit")
    assert not hasattr(settings, "page_span")


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LAUNCHES_LOG_LEVEL", " debug ")

    assert AppSettings(_env_file=None).log_level == "DEBUG"


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LAUNCHES_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("LAUNCHES_HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_user_config_dir() == tmp_path / "spacex-launches"
