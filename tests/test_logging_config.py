"""Tests for structured logging configuration."""

import json
import logging

from ingreedy.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    configure_logging,
    get_logger,
    line_number_ctx,
    request_id_ctx,
    source_ctx,
)


def _record(message: str = "parsed line") -> logging.LogRecord:
    return logging.LogRecord(
        name="ingreedy.parse.driver",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestFormatters:
    """Tests for the JSON and contextual formatters."""

    def test_json_includes_context(self):
        """Test context variables are added to JSON records."""
        with LoggingContext(source="recipe.txt", line_number=3):
            data = json.loads(StructuredJsonFormatter().format(_record()))

        assert data["message"] == "parsed line"
        assert data["level"] == "INFO"
        assert data["source"] == "recipe.txt"
        assert data["line_number"] == 3

    def test_json_without_context(self):
        """Test unset context variables are left out."""
        data = json.loads(StructuredJsonFormatter().format(_record()))
        assert "source" not in data
        assert "request_id" not in data

    def test_contextual_format(self):
        """Test the human-readable format shows the context."""
        with LoggingContext(request_id="abcdef1234567890", line_number=0):
            formatted = ContextualFormatter().format(_record())

        assert "req=abcdef12" in formatted
        assert "line=0" in formatted
        assert formatted.endswith("| ingreedy.parse.driver [req=abcdef12, line=0] | parsed line")


class TestContext:
    """Tests for the logging context helpers."""

    def test_context_manager_restores(self):
        """Test LoggingContext resets the variables on exit."""
        with LoggingContext(source="a.txt"):
            with LoggingContext(source="b.txt", line_number=2):
                assert source_ctx.get() == "b.txt"
            assert source_ctx.get() == "a.txt"
            assert line_number_ctx.get() is None
        assert source_ctx.get() is None

    def test_request_id(self):
        """Test the request id is set only inside its context."""
        with LoggingContext(request_id="req-1"):
            assert request_id_ctx.get() == "req-1"
        assert request_id_ctx.get() is None


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_handler(self, monkeypatch):
        """Test json_format installs the JSON formatter at the given level."""
        monkeypatch.delenv("INGREEDY_LOG_LEVEL", raising=False)

        configure_logging(log_level="DEBUG", json_format=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, StructuredJsonFormatter)

    def test_level_from_environment(self, monkeypatch):
        """Test INGREEDY_LOG_LEVEL overrides the argument."""
        monkeypatch.setenv("INGREEDY_LOG_LEVEL", "warning")

        configure_logging(log_level="DEBUG", json_format=False)

        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("ingreedy").level == logging.WARNING

    def test_log_file(self, monkeypatch, tmp_path):
        """Test log_file adds a file handler next to stderr."""
        monkeypatch.delenv("INGREEDY_LOG_LEVEL", raising=False)
        log_file = tmp_path / "ingreedy.log"

        configure_logging(log_level="INFO", json_format=True, log_file=str(log_file))
        with LoggingContext(source="recipe.txt"):
            get_logger("ingreedy.cli").info("Parsed 3 ingredient lines")

        assert len(logging.getLogger().handlers) == 2
        data = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert data["message"] == "Parsed 3 ingredient lines"
        assert data["source"] == "recipe.txt"
