"""Tests for library configuration and initialization."""

from __future__ import annotations

import dataclasses
import logging
import os
from unittest.mock import patch

import pytest

import rslike._config as config_module
import rslike._logging as logging_module
from rslike import Config, get_config, init
from rslike._config import _detect_json_output, _detect_log_level
from rslike._logging import LIBRARY_LOGGER


@pytest.fixture(autouse=True)
def reset_config() -> None:
    """Reset global config and the rslike logger around each test."""
    config_module._config = None
    yield
    config_module._config = None
    library_logger = logging.getLogger(LIBRARY_LOGGER)
    if logging_module._handler is not None:
        library_logger.removeHandler(logging_module._handler)
        logging_module._handler = None
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True


class TestConfig:
    """Tests for the Config dataclass."""

    def test_default_values(self) -> None:
        config = Config()
        assert config.log_level is None
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetection:
    """Tests for environment variable detection."""

    def test_log_level_from_env(self) -> None:
        with patch.dict(os.environ, {'RSLIKE_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    def test_log_level_empty_is_unset(self) -> None:
        with patch.dict(os.environ, {'RSLIKE_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None

    def test_log_level_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_console_format(self) -> None:
        with patch.dict(os.environ, {'RSLIKE_LOG_FORMAT': 'console'}):
            assert _detect_json_output() is False

    def test_json_format(self) -> None:
        with patch.dict(os.environ, {'RSLIKE_LOG_FORMAT': 'JSON'}):
            assert _detect_json_output() is True

    def test_unknown_format_defaults_to_json(self) -> None:
        with patch.dict(os.environ, {'RSLIKE_LOG_FORMAT': 'xml'}):
            assert _detect_json_output() is True


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        """get_config() raises RuntimeError before init()."""
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_defaults_silent(self) -> None:
        """init() without a level leaves logging untouched."""
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config.log_level is None
        assert logging.getLogger(LIBRARY_LOGGER).handlers == []
        assert get_config() is config

    def test_init_with_level_configures_logging(self) -> None:
        """init(log_level=...) installs a handler at that level."""
        config = init(log_level='DEBUG', json_output=False)
        assert config == Config(log_level='DEBUG', json_output=False)
        library_logger = logging.getLogger(LIBRARY_LOGGER)
        assert library_logger.level == logging.DEBUG
        assert library_logger.handlers == [logging_module._handler]

    def test_explicit_arguments_override_env(self) -> None:
        """Explicit arguments win over environment variables."""
        with patch.dict(os.environ, {'RSLIKE_LOG_LEVEL': 'ERROR', 'RSLIKE_LOG_FORMAT': 'console'}):
            config = init(log_level='INFO', json_output=True)
        assert config.log_level == 'INFO'
        assert config.json_output is True

    def test_env_used_when_arguments_missing(self) -> None:
        """Environment variables fill in missing arguments."""
        with patch.dict(os.environ, {'RSLIKE_LOG_LEVEL': 'warning', 'RSLIKE_LOG_FORMAT': 'console'}):
            config = init()
        assert config.log_level == 'WARNING'
        assert config.json_output is False
