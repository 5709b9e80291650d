"""Tests for settings and the user .env helpers."""

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.service_domain == "gravatar.com"
    assert settings.default_image == "404"
    assert settings.default_size == 200
    assert settings.require_type is False
    assert settings.secure is None


def test_env_vars_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AVATAR_LINK_DEFAULT_SIZE", "80")
    monkeypatch.setenv("AVATAR_LINK_SECURE", "true")
    settings = AppSettings(_env_file=None)
    assert settings.default_size == 80
    assert settings.secure is True


def test_invalid_size_fails_validation(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AVATAR_LINK_DEFAULT_SIZE", "0")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_env_name() -> None:
    assert AppSettings.env_name("default_size") == "AVATAR_LINK_DEFAULT_SIZE"


def test_write_user_env_vars_merges_existing(user_config_home) -> None:
    assert get_user_env_file() == user_config_home / ".env"
    assert read_user_env_vars() == {}

    write_user_env_vars({"AVATAR_LINK_DEFAULT_SIZE": "64"})
    path = write_user_env_vars({"AVATAR_LINK_SECURE": "true"})

    assert path == user_config_home / ".env"
    assert read_user_env_vars() == {
        "AVATAR_LINK_DEFAULT_SIZE": "64",
        "AVATAR_LINK_SECURE": "true",
    }
    assert path.read_text(encoding="utf-8").startswith("# avatar-link user config")
