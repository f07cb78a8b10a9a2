"""Tests for logging configuration, hooks and captured-exception reporting."""

from __future__ import annotations

from typing import Any

import pytest
from ellefe_core import (
    add_log_hook,
    configure_logging,
    get_logger,
    init,
    remove_log_hook,
    safe,
    wrap,
    wrap_async,
    wrap_opt,
)

pytestmark = pytest.mark.usefixtures('isolated_config')


def _events(received: list[dict[str, Any]], name: str) -> list[dict[str, Any]]:
    return [e for e in received if e.get('event') == name]


def _boom() -> int:
    raise ValueError('boom')


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, log_events) -> None:
        """Registered hooks receive log entry dicts."""
        get_logger('test').info('Test message', extra_field='extra_value')

        entries = _events(log_events, 'Test message')
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'

    def test_removed_hook_not_called(self) -> None:
        """Removed hooks no longer receive events."""
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)
        remove_log_hook(received.append)

        get_logger('test').info('After removal')
        assert _events(received, 'After removal') == []

    def test_failing_hook_does_not_break_logging(self, log_events) -> None:
        """An exception in one hook does not stop the others."""

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        add_log_hook(broken)
        get_logger('test').warning('Still logged')
        assert len(_events(log_events, 'Still logged')) == 1

    def test_console_output_keeps_hooks(self) -> None:
        """Console rendering can be selected instead of JSON; hooks still fire."""
        received: list[dict[str, Any]] = []
        configure_logging(level='INFO', json_output=False)
        add_log_hook(received.append)

        get_logger('test').info('console line')
        assert len(_events(received, 'console line')) == 1


class TestCapturedExceptions:
    """The wrap family reports captured exceptions only when enabled."""

    def test_disabled_by_default(self, log_events) -> None:
        assert wrap(_boom).is_err()
        assert _events(log_events, 'exception_captured') == []

    def test_wrap_reports_when_enabled(self, log_events) -> None:
        init(log_captured=True)
        assert wrap(_boom).is_err()

        entries = _events(log_events, 'exception_captured')
        assert len(entries) == 1
        assert entries[0]['exc_type'] == 'ValueError'
        assert entries[0]['exc'] == 'boom'
        assert entries[0]['function'] == '_boom'
        assert entries[0]['level'] == 'debug'

    def test_wrap_opt_and_safe_report(self, log_events) -> None:
        init(log_captured=True)
        wrap_opt(_boom)
        safe(_boom)()
        assert len(_events(log_events, 'exception_captured')) == 2

    @pytest.mark.asyncio
    async def test_wrap_async_reports(self, log_events) -> None:
        init(log_captured=True)

        async def failing() -> int:
            raise KeyError('missing')

        assert (await wrap_async(failing)).is_err()
        entries = _events(log_events, 'exception_captured')
        assert [e['exc_type'] for e in entries] == ['KeyError']
