"""Tests for config and logging."""

import io
import json
import logging
import sys

import pytest

from payments_engine.config import EngineConfig, IngestionConfig, LoggingConfig
from payments_engine.exceptions import ConfigurationError
from payments_engine.logging import JsonFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_default_values(self) -> None:
        config = LoggingConfig()

        assert config.level == "WARNING"
        assert config.format_type == "standard"

    def test_level_normalized(self) -> None:
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log level"):
            LoggingConfig(level="LOUD")

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log format"):
            LoggingConfig(format_type="xml")


class TestIngestionConfig:
    """Tests for IngestionConfig."""

    def test_default_scale(self) -> None:
        assert IngestionConfig().amount_scale == 4

    def test_negative_scale(self) -> None:
        with pytest.raises(ConfigurationError):
            IngestionConfig(amount_scale=-1)


class TestEngineConfig:
    """Tests for EngineConfig."""

    def test_defaults(self) -> None:
        config = EngineConfig()

        assert config.logging == LoggingConfig()
        assert config.ingestion == IngestionConfig()

    def test_from_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("LOG_LEVEL", "LOG_FORMAT", "AMOUNT_SCALE"):
            monkeypatch.delenv(name, raising=False)

        assert EngineConfig.from_env() == EngineConfig()

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("AMOUNT_SCALE", "2")

        config = EngineConfig.from_env()

        assert config.logging.level == "DEBUG"
        assert config.logging.format_type == "json"
        assert config.ingestion.amount_scale == 2

    def test_from_env_bad_scale(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AMOUNT_SCALE", "four")

        with pytest.raises(ConfigurationError, match="AMOUNT_SCALE"):
            EngineConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_standard_format(self) -> None:
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        get_logger("payments_engine.test").info("hello %s", "world")

        assert "INFO" in stream.getvalue()
        assert "payments_engine.test | hello world" in stream.getvalue()

    def test_level_filters(self) -> None:
        stream = io.StringIO()
        setup_logging("ERROR", stream=stream)

        get_logger("payments_engine.test").warning("quiet")

        assert stream.getvalue() == ""

    def test_replaces_existing_handlers(self) -> None:
        setup_logging("INFO", stream=io.StringIO())
        setup_logging("INFO", stream=io.StringIO())

        assert len(logging.getLogger().handlers) == 1

    def test_invalid_level_falls_back_to_warning(self) -> None:
        setup_logging("NOPE", stream=io.StringIO())

        assert logging.getLogger().level == logging.WARNING

    def test_json_format(self) -> None:
        stream = io.StringIO()
        setup_logging("INFO", format_type="json", stream=stream)

        get_logger("payments_engine.test").info("processed")

        data = json.loads(stream.getvalue())
        assert data["level"] == "INFO"
        assert data["logger"] == "payments_engine.test"
        assert data["message"] == "processed"
        assert "timestamp" in data


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        return logging.LogRecord("test", logging.ERROR, __file__, 1, "boom", None, **kwargs)

    def test_exception_included(self) -> None:
        try:
            raise ValueError("bad")
        except ValueError:
            record = self._record(exc_info=sys.exc_info())

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad" in data["exception"]

    def test_extra_merged(self) -> None:
        record = self._record(exc_info=None)
        record.extra = {"client": 7}

        data = json.loads(JsonFormatter().format(record))

        assert data["client"] == 7
