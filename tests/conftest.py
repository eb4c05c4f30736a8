import logging
import os

import pytest

from limace.utils.logger import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the user's limace settings out of every test."""
    monkeypatch.setenv("LIMACE_CONFIG", os.path.join(str(tmp_path), "missing_settings.ini"))
    monkeypatch.delenv("LIMACE_SEPARATOR", raising=False)
    monkeypatch.delenv("LIMACE_LOG_LEVEL", raising=False)
    yield str(tmp_path)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any setup_logger() call made by a test (the CLI group makes one)."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
