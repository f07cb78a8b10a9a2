"""Shared pytest fixtures for ellefe-core tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from ellefe_core import add_log_hook, clear_log_hooks, configure_logging, reset_config

_ENV_VARS = ('ELLEFE_LOG_LEVEL', 'ELLEFE_LOG_JSON', 'ELLEFE_LOG_CAPTURED')


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run a test from an unset configuration, without ELLEFE_* variables or log hooks."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def log_events(isolated_config: None) -> Generator[list[dict[str, Any]]]:
    """Configure DEBUG logging and collect every emitted event dict."""
    events: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(events.append)
    yield events
    clear_log_hooks()


class CallCounter:
    """Callable recording how many times, and with what, it was called."""

    def __init__(self, fn: Any = None) -> None:
        self.calls: list[Any] = []
        self._fn = fn if fn is not None else (lambda x: x)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self._fn(*args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counter() -> type[CallCounter]:
    """Factory for call-recording functions."""
    return CallCounter
