"""Shared fixtures."""

import logging
import os

import pytest

from numsort.core.config import Settings, reset_settings
from numsort.core.logging import LOGGER_NAMESPACE


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from NUMSORT_* variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("NUMSORT_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def settings(tmp_path):
    """Settings writing into a temporary directory."""
    return Settings(output_dir=tmp_path)
