"""Tests for logging configuration."""

import logging

import pytest

from core.logging_config import APP_LOGGER, configure_logging, get_logger


def test_get_logger_is_child_of_app_logger() -> None:
    assert get_logger("core.services").name == f"{APP_LOGGER}.core.services"


def test_configure_logging_debug() -> None:
    assert configure_logging(debug=True) == logging.DEBUG
    app_logger = logging.getLogger(APP_LOGGER)
    assert app_logger.level == logging.DEBUG
    assert len(app_logger.handlers) == 1


def test_configure_logging_is_idempotent_and_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AVATAR_LINK_LOG_LEVEL", "warning")
    assert configure_logging() == logging.WARNING
    configure_logging()
    assert len(logging.getLogger(APP_LOGGER).handlers) == 1


@pytest.mark.parametrize(("name", "expected"), [("10", 10), ("error", logging.ERROR), ("bogus", logging.INFO)])
def test_configure_logging_level_names(name: str, expected: int) -> None:
    assert configure_logging(level_name=name) == expected
