"""Tests for correlation-aware logging."""

import logging

import pytest

from charset_validator.shared.logging import (
    DEFAULT_LOG_FORMAT,
    CorrelationLogger,
    configure_logging,
    get_logger,
)


class TestCorrelationLogger:
    """Test structured logging extras."""

    def test_component_defaults_to_module_name(self):
        logger = get_logger("charset_validator.character.scanner")
        assert isinstance(logger, CorrelationLogger)
        assert logger.component == "scanner"

    def test_records_carry_correlation_info(self, caplog):
        logger = get_logger("charset_validator.test", "run-42", "validator")

        with caplog.at_level(logging.INFO, logger="charset_validator.test"):
            logger.info("Starting validation", extra={"input_size": 12})

        record = caplog.records[-1]
        assert record.getMessage() == "Starting validation"
        assert record.component == "validator"
        assert record.correlation_id == "run-42"
        assert record.input_size == 12

    def test_is_enabled_for(self):
        logger = get_logger("charset_validator.test.level")
        logger.logger.setLevel(logging.ERROR)
        assert not logger.is_enabled_for(logging.DEBUG)
        assert logger.is_enabled_for(logging.ERROR)


@pytest.fixture
def bare_root_logger(monkeypatch):
    """Give the root logger no handlers and restore it afterwards."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    root.setLevel(level)


class TestConfigureLogging:
    """Test command-line logging setup."""

    def test_installs_one_stderr_handler(self, bare_root_logger):
        configure_logging("INFO")

        assert len(bare_root_logger.handlers) == 1
        handler = bare_root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.formatter._fmt == DEFAULT_LOG_FORMAT
        assert bare_root_logger.level == logging.INFO

    def test_repeated_calls_do_not_stack_handlers_or_filters(self, bare_root_logger):
        configure_logging()
        configure_logging()
        configure_logging("DEBUG")

        assert len(bare_root_logger.handlers) == 1
        assert len(bare_root_logger.handlers[0].filters) == 1
        assert bare_root_logger.level == logging.DEBUG

    def test_existing_handlers_left_untouched(self, bare_root_logger):
        host_handler = logging.NullHandler()
        bare_root_logger.addHandler(host_handler)

        configure_logging("ERROR")

        assert bare_root_logger.handlers == [host_handler]
        assert host_handler.filters == []
        assert bare_root_logger.level == logging.ERROR

    def test_plain_records_get_component_defaults(self, bare_root_logger):
        configure_logging()
        record = logging.LogRecord(
            "charset_validator.api.input", logging.WARNING, "", 0, "msg", None, None
        )

        bare_root_logger.handlers[0].filters[0].filter(record)

        assert record.component == "input"
        assert record.correlation_id is None
