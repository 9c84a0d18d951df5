"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from blendr.core.utils.logging import StructuredJSONFormatter, configure_logging


def _record(
    level: int = logging.INFO, msg: str = "Tick applied", exc_info=None
) -> logging.LogRecord:
    record = logging.LogRecord(
        name="blendr.core.playback.controller",
        level=level,
        pathname="/path/to/controller.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    record.funcName = "update"
    record.module = "controller"
    return record


class TestStructuredJSONFormatter:
    """Test suite for StructuredJSONFormatter."""

    def test_basic_log_format(self):
        """Test basic log record formatting to JSON."""
        data = json.loads(StructuredJSONFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Tick applied"
        assert "timestamp" in data
        context = data["context"]
        assert context["logger_name"] == "blendr.core.playback.controller"
        assert context["module"] == "controller"
        assert context["function"] == "update"
        assert context["line"] == 42
        assert "thread" not in context
        assert "process" not in context

    def test_log_with_extra_fields(self):
        """Test that extra fields are included in context."""
        record = _record(logging.DEBUG)
        record.tick = 7
        record.sequence = {"size": 4}

        data = json.loads(StructuredJSONFormatter().format(record))

        assert data["context"]["tick"] == 7
        assert data["context"]["sequence"] == {"size": 4}

    def test_private_attributes_are_skipped(self):
        """Attributes starting with an underscore stay out of the context."""
        record = _record()
        record._internal = "hidden"

        data = json.loads(StructuredJSONFormatter().format(record))

        assert "_internal" not in data["context"]

    def test_log_with_exception(self):
        """Test that exception info is captured in context."""
        try:
            raise ValueError("Continuity broken")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            StructuredJSONFormatter().format(_record(logging.ERROR, "Failed", exc_info))
        )

        assert data["level"] == "ERROR"
        assert data["context"]["error_type"] == "ValueError"
        assert data["context"]["error_message"] == "Continuity broken"
        assert "ValueError: Continuity broken" in data["context"]["stack_trace"]

    @pytest.mark.parametrize("level_name", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_log_levels(self, level_name):
        """Test different log levels are captured correctly."""
        level = getattr(logging, level_name)
        data = json.loads(StructuredJSONFormatter().format(_record(level, f"{level_name} message")))

        assert data["level"] == level_name
        assert data["message"] == f"{level_name} message"


@pytest.mark.usefixtures("restore_root_logging")
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_standard_logging(self, capsys):
        """Test standard text logging configuration."""
        configure_logging(level="INFO", structured=False)

        logging.getLogger("test.standard").info("Test message")

        captured = capsys.readouterr()
        assert "Test message" in captured.out
        assert "test.standard" in captured.out
        assert "INFO" in captured.out

    def test_level_is_case_insensitive(self):
        """Lowercase level names are accepted."""
        configure_logging(level="warning")

        assert logging.getLogger().level == logging.WARNING

    def test_configure_structured_logging_to_stdout(self, capsys):
        """Test structured JSON logging to stdout."""
        configure_logging(level="INFO", structured=True)

        logging.getLogger("test.structured").info("Structured test message")

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        data = json.loads(lines[-1])
        assert data["level"] == "INFO"
        assert data["message"] == "Structured test message"
        assert data["context"]["logger_name"] == "test.structured"

    def test_configure_structured_logging_to_file(self, tmp_path):
        """Test structured JSON logging to file."""
        log_file = tmp_path / "blendr.jsonl"
        configure_logging(level="DEBUG", structured=True, filename=str(log_file))

        logger = logging.getLogger("test.file")
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warning("Warning message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines() if line]
        assert [line["level"] for line in lines[-3:]] == ["DEBUG", "INFO", "WARNING"]
        for line in lines[-3:]:
            assert {"level", "message", "timestamp", "context"} <= set(line)

    def test_configure_custom_format_string(self, capsys):
        """Test custom format string for standard logging."""
        configure_logging(level="INFO", format_string="%(levelname)s | %(message)s")

        logging.getLogger("test.custom").info("Custom format test")

        assert "INFO | Custom format test" in capsys.readouterr().out

    def test_reconfigure_logging(self, capsys):
        """Test that logging can be reconfigured multiple times."""
        configure_logging(level="INFO", structured=False)
        configure_logging(level="DEBUG", structured=True)

        logging.getLogger("test.reconfig").debug("Reconfigured debug message")

        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        data = json.loads(lines[-1])
        assert data["level"] == "DEBUG"
        assert data["message"] == "Reconfigured debug message"
        assert len(logging.getLogger().handlers) == 1

