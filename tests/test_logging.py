"""Tests for logging configuration and hooks."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from anyhow import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook


@pytest.fixture(autouse=True)
def cleanup(restore_logging) -> None:
    """Restore logging state around each test."""
    yield


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'
        assert entries[0]['logger'] == 'test'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG')
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_clear_hooks(self) -> None:
        """clear_log_hooks() removes all hooks."""
        calls: list[str] = []

        configure_logging(level='DEBUG')
        add_log_hook(lambda e: calls.append('hook1'))
        add_log_hook(lambda e: calls.append('hook2'))

        logger = get_logger('test')
        logger.info('First')
        assert calls == ['hook1', 'hook2']

        clear_log_hooks()
        logger.info('Second')
        assert len(calls) == 2

    def test_hook_exception_does_not_break_logging(self) -> None:
        """Exceptions in hooks don't prevent other hooks."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        configure_logging(level='DEBUG')
        add_log_hook(bad_hook)
        add_log_hook(lambda e: calls.append('good'))

        get_logger('test').info('Test')
        assert calls == ['good']


class TestLevelFiltering:
    """Tests for level handling."""

    def test_below_level_is_dropped(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='WARNING')
        add_log_hook(received.append)

        logger = get_logger('test')
        logger.debug('hidden')
        logger.warning('shown')

        assert [e['event'] for e in received] == ['shown']

    def test_configure_sets_root_level(self) -> None:
        configure_logging(level='error')
        assert logging.getLogger().level == logging.ERROR

    def test_console_output(self, capsys) -> None:
        configure_logging(level='INFO', json_output=False)
        get_logger('test').info('console line')
        assert 'console line' in capsys.readouterr().err
