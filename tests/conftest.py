"""Shared fixtures for anyhow tests."""

from __future__ import annotations

import logging

import pytest

from anyhow import AnyhowError, Err, Ok, clear_log_hooks, reset_config


@pytest.fixture
def fresh_config():
    """Start and end the test without a cached configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def restore_logging():
    """Restore root logger state and hooks changed by configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_ok():
    return Ok(42)


@pytest.fixture
def sample_err():
    return Err('error')


@pytest.fixture
def sample_anyhow_err():
    return Err(AnyhowError('base failure').context('loading'))
