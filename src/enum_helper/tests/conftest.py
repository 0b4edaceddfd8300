"""Pytest configuration for enum helper tests."""
import logging

import pytest
import structlog

from enum_helper import set_config
from enum_helper.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_config():
    """Reload configuration from the environment for every test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def clean_logger():
    """Give a test the package logger and strip anything it installs."""
    logger = logging.getLogger(LOGGER_NAME)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
