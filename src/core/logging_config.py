"""Logging configuration helpers for avatar-link."""

from __future__ import annotations

import logging
import os
from typing import Final

APP_LOGGER: Final[str] = "avatar_link"

_DEFAULT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger (`avatar_link.<name>`)."""

    return logging.getLogger(APP_LOGGER).getChild(name)


def _resolve_level(level_name: str) -> int:
    """Translate a log level string or number into a logging level."""

    value = level_name.strip()
    if value.isdigit():
        return int(value)

    numeric = getattr(logging, value.upper(), None)
    if isinstance(numeric, int):
        return numeric

    return logging.INFO


def configure_logging(*, debug: bool = False, level_name: str | None = None) -> int:
    """Ensure the avatar-link logger streams to stderr and return the level used."""

    env_level = os.getenv("AVATAR_LINK_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if debug:
        level = logging.DEBUG
    else:
        level = _resolve_level(level_name or env_level or "INFO")

    app_logger = logging.getLogger(APP_LOGGER)
    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, _DEFAULT_DATEFMT))
        app_logger.addHandler(handler)
    app_logger.setLevel(level)
    app_logger.propagate = False
    return level
