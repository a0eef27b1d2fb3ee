# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Root conftest — clean settings per test and a loguru capture fixture."""

import os
from unittest.mock import patch

import pytest
from loguru import logger

from gridcommand.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings so env patches in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Default settings, ignoring the caller's environment and .env."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="TRACE")
    yield records
    logger.remove(handler_id)
