"""Tests for pyterraform.lib.logger."""

import json
import logging

import pytest

from pyterraform.lib import logger


@pytest.fixture(autouse=True)
def clean_test_logger():
    yield
    test_logger = logging.getLogger("test-component")
    test_logger.handlers.clear()
    test_logger.propagate = True


@pytest.mark.unit
class TestSetupLogger:
    """Tests for setup_logger() function."""

    def test_console_format(self, monkeypatch, capsys):
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        test_logger = logger.setup_logger("test-component", log_format="console")
        test_logger.info("Test message")

        captured = capsys.readouterr()
        assert "test-component" in captured.err
        assert "INFO" in captured.err
        assert "Test message" in captured.err
        assert captured.out == ""

    def test_json_format(self, monkeypatch, capsys):
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        test_logger = logger.setup_logger("test-component", log_format="json")
        test_logger.warning("Test message")

        log_data = json.loads(capsys.readouterr().err.strip())
        assert log_data["component"] == "test-component"
        assert log_data["severity"] == "WARNING"
        assert log_data["message"] == "Test message"
        assert "levelname" not in log_data

    def test_format_from_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("PYTERRAFORM_LOG_FORMAT", "json")

        logger.setup_logger("test-component", level="INFO").info("hello")

        assert json.loads(capsys.readouterr().err.strip())["message"] == "hello"

    def test_respects_log_level_env(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        test_logger = logger.setup_logger("test-component", log_format="console")

        test_logger.info("Info message")
        assert "Info message" not in capsys.readouterr().err

        test_logger.warning("Warning message")
        assert "Warning message" in capsys.readouterr().err

    def test_explicit_level_wins(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        test_logger = logger.setup_logger("test-component", level="DEBUG", log_format="console")
        test_logger.debug("Debug message")

        assert "Debug message" in capsys.readouterr().err

    def test_repeat_calls_do_not_duplicate_handlers(self):
        logger.setup_logger("test-component")
        test_logger = logger.setup_logger("test-component")

        assert len(test_logger.handlers) == 1
        assert test_logger.propagate is False
