"""Tests for CoreConfig, init() and environment detection."""

from __future__ import annotations

import dataclasses

import pytest
from ellefe_core import CoreConfig, get_config, init, reset_config

pytestmark = pytest.mark.usefixtures('isolated_config')


class TestCoreConfig:
    def test_defaults(self):
        config = CoreConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.log_captured is False

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CoreConfig().log_level = 'DEBUG'  # type: ignore[misc]


class TestGetConfig:
    def test_lazy_defaults_without_environment(self):
        assert get_config() == CoreConfig()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('ELLEFE_LOG_LEVEL', 'debug')
        monkeypatch.setenv('ELLEFE_LOG_JSON', 'false')
        monkeypatch.setenv('ELLEFE_LOG_CAPTURED', 'yes')
        assert get_config() == CoreConfig(log_level='DEBUG', json_output=False, log_captured=True)

    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch):
        first = get_config()
        monkeypatch.setenv('ELLEFE_LOG_CAPTURED', '1')
        assert get_config() is first
        reset_config()
        assert get_config().log_captured is True

    def test_unknown_flag_value_uses_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('ELLEFE_LOG_JSON', 'maybe')
        assert get_config().json_output is True


class TestInit:
    def test_explicit_arguments(self):
        config = init(log_level='warning', json_output=False, log_captured=True)
        assert config == CoreConfig(log_level='WARNING', json_output=False, log_captured=True)
        assert get_config() is config

    def test_missing_arguments_come_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('ELLEFE_LOG_CAPTURED', 'on')
        config = init()
        assert config.log_captured is True
        assert config.log_level is None

    def test_explicit_argument_overrides_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('ELLEFE_LOG_CAPTURED', 'true')
        assert init(log_captured=False).log_captured is False
