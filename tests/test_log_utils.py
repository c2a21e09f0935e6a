"""Tests for log_utils configuration and diagnostics."""

import sys
import logging
from unittest.mock import patch

from log_utils import LOG_PATH, log_level, setup_logging


class TestLogLevel:
    """Test LOG_LEVEL parsing."""

    def test_default_is_info(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert log_level() == logging.INFO

    def test_reads_level_name(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert log_level() == logging.DEBUG

    def test_invalid_name_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "nonsense")
        assert log_level() == logging.INFO

    def test_non_level_attribute_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "basicConfig")
        assert log_level() == logging.INFO


class TestSetupLogging:
    """Test diagnostic logging configuration."""

    def test_handler_writes_to_stderr(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        with patch("log_utils.logging.basicConfig") as basic_config:
            setup_logging()
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        (handler,) = kwargs["handlers"]
        assert handler.stream is sys.stderr


class TestConstants:
    """Test fixed settings."""

    def test_log_path_is_fixed(self):
        assert LOG_PATH == "my_log.txt"
