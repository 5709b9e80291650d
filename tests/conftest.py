import logging
import os
import tempfile

import pytest

from core.logging_config import APP_LOGGER


def pytest_configure(config: pytest.Config) -> None:
    # The user .env path is resolved when core.config is imported.
    os.environ["XDG_CONFIG_HOME"] = tempfile.mkdtemp(prefix="avatar-link-tests-")
    for key in list(os.environ):
        if key.startswith("AVATAR_LINK_"):
            del os.environ[key]


@pytest.fixture
def user_config_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    return tmp_path / "avatar-link"


@pytest.fixture(autouse=True)
def reset_app_logger():
    yield
    app_logger = logging.getLogger(APP_LOGGER)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True
