"""Tests for configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest
from klaw_adt import Config, get_config, init
from klaw_adt import _config
from klaw_adt._config import _detect_json_output, _detect_log_level


@pytest.fixture(autouse=True)
def reset_config() -> None:
    """Reset the global config and root logger level around each test."""
    root = logging.getLogger()
    level = root.level
    _config._config = None
    yield
    _config._config = None
    root.setLevel(level)


class TestConfig:
    """Tests for the Config dataclass."""

    def test_default_values(self) -> None:
        config = Config()
        assert config.log_level is None
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectLogLevel:
    """Tests for _detect_log_level()."""

    def test_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_empty(self) -> None:
        with patch.dict(os.environ, {'KLAW_ADT_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None

    def test_normalized(self) -> None:
        with patch.dict(os.environ, {'KLAW_ADT_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'


class TestDetectJsonOutput:
    """Tests for _detect_json_output()."""

    def test_unset_defaults_to_json(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_json_output() is True

    def test_console(self) -> None:
        with patch.dict(os.environ, {'KLAW_ADT_LOG_FORMAT': 'Console'}):
            assert _detect_json_output() is False

    def test_json(self) -> None:
        with patch.dict(os.environ, {'KLAW_ADT_LOG_FORMAT': 'json'}):
            assert _detect_json_output() is True

    def test_unknown_warns_and_defaults(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_ADT_LOG_FORMAT': 'xml'}), caplog.at_level(logging.WARNING):
            assert _detect_json_output() is True
        assert 'KLAW_ADT_LOG_FORMAT' in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_silent_by_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True), patch('klaw_adt._config.configure_logging') as configure:
            config = init()
        assert config == Config(log_level=None, json_output=True)
        configure.assert_not_called()
        assert get_config() is config

    def test_init_explicit_configures_logging(self) -> None:
        with patch('klaw_adt._config.configure_logging') as configure:
            config = init(log_level='DEBUG', json_output=False)
        assert config.log_level == 'DEBUG'
        assert config.json_output is False
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_init_reads_environment(self) -> None:
        env = {'KLAW_ADT_LOG_LEVEL': 'info', 'KLAW_ADT_LOG_FORMAT': 'console'}
        with patch.dict(os.environ, env, clear=True), patch('klaw_adt._config.configure_logging') as configure:
            config = init()
        assert config == Config(log_level='INFO', json_output=False)
        configure.assert_called_once_with('INFO', json_output=False)

    def test_explicit_overrides_environment(self) -> None:
        with (
            patch.dict(os.environ, {'KLAW_ADT_LOG_LEVEL': 'info'}),
            patch('klaw_adt._config.configure_logging'),
        ):
            config = init(log_level='ERROR')
        assert config.log_level == 'ERROR'
