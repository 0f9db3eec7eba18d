"""Tests for logging configuration utilities."""

import json
import logging
import sys

import pytest

from tweenease.core.curves.registry import resolve_by_name
from tweenease.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
)


def _make_record(level=logging.INFO, msg="Test message", exc_info=None):
    record = logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "test_function"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_make_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["context"] == {
            "logger_name": "test.logger",
            "function": "test_function",
            "line": 42,
        }

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _make_record(level=logging.DEBUG)
        record.curve = "in_cubic"
        record.samples = {"n": 64}

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["curve"] == "in_cubic"
        assert data["context"]["samples"] == {"n": 64}

    def test_log_with_exception(self):
        """Test that the formatted traceback is captured in context."""
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = _make_record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info)
        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError: Test error" in data["context"]["exception"]

    def test_log_levels(self):
        """Test different log levels are captured correctly."""
        formatter = StructuredJSONFormatter()
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            record = _make_record(level=getattr(logging, level))
            assert json.loads(formatter.format(record))["level"] == level


class TestConfigureLogging:
    """Test suite for configure_logging."""

    def test_sets_root_level(self, restore_root_logging):
        configure_logging(level="debug")
        assert restore_root_logging.level == logging.DEBUG

    def test_unknown_level_raises(self, restore_root_logging):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="verbose")

    def test_text_format_to_file(self, tmp_path, restore_root_logging):
        log_file = tmp_path / "ease.log"
        configure_logging(
            level="INFO", format_string="%(levelname)s|%(message)s", filename=str(log_file)
        )

        logging.getLogger("tweenease.test").info("hello")

        assert log_file.read_text().strip().endswith("INFO|hello")

    def test_structured_lookup_miss(self, tmp_path, restore_root_logging):
        """Lookup misses show up as structured DEBUG records."""
        log_file = tmp_path / "ease.jsonl"
        configure_logging(level="DEBUG", filename=str(log_file), structured=True)

        assert resolve_by_name("inside") is None

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        registry_name = "tweenease.core.curves.registry"
        miss = [e for e in entries if e["context"]["logger_name"] == registry_name]
        assert miss[-1]["level"] == "DEBUG"
        assert miss[-1]["message"] == "No easing curve named 'inside'"
        assert miss[-1]["context"]["function"] == "resolve_by_name"
        assert miss[-1]["context"]["curve"] == "inside"


class TestGetLogger:
    """Test suite for get_logger."""

    def test_plain_logger(self):
        logger = get_logger("tweenease.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "tweenease.test"

    def test_adapter_with_context(self):
        logger = get_logger("tweenease.test", curve="out_bounce")
        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra == {"curve": "out_bounce"}
