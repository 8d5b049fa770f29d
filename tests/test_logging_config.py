"""Tests for logging configuration."""

import json
import logging
import sys

import pytest

from trip_planner.config import ObservabilityConfig
from trip_planner.logging_config import StructuredFormatter, configure_logging


def make_record(**extra) -> logging.LogRecord:
    logger = logging.getLogger("trip_planner.tests")
    return logger.makeRecord(
        logger.name, logging.INFO, __file__, 1, "Screen changed", None, None, extra=extra
    )


class TestStructuredFormatter:
    """Test suite for StructuredFormatter."""

    def test_includes_core_fields(self):
        entry = json.loads(StructuredFormatter().format(make_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "trip_planner.tests"
        assert entry["message"] == "Screen changed"
        assert "timestamp" in entry
        assert "extra" not in entry

    def test_collects_extra_fields(self):
        record = make_record(**{"from": "form", "to": "loading", "reason": "SUBMIT_ACCEPTED"})

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["extra"] == {"from": "form", "to": "loading", "reason": "SUBMIT_ACCEPTED"}

    def test_includes_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.getLogger("trip_planner.tests").makeRecord(
                "trip_planner.tests", logging.ERROR, __file__, 1, "failed", None,
                sys.exc_info(),
            )

        entry = json.loads(StructuredFormatter().format(record))

        assert "RuntimeError: boom" in entry["exception"]


class TestConfigureLogging:
    """Test suite for configure_logging."""

    @pytest.fixture
    def logger_name(self):
        name = "trip_planner_test_logger"
        yield name
        logging.getLogger(name).handlers = []

    def test_structured(self, logger_name):
        logger = configure_logging(
            ObservabilityConfig(level="debug", structured=True), logger_name=logger_name
        )

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_plain_text_replaces_handlers(self, logger_name):
        configure_logging(ObservabilityConfig(), logger_name=logger_name)
        logger = configure_logging(ObservabilityConfig(), logger_name=logger_name)

        assert len(logger.handlers) == 1
        assert not isinstance(logger.handlers[0].formatter, StructuredFormatter)
