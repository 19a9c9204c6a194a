"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from agecalc.config.logging import PACKAGE_LOGGER, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("agecalc.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "agecalc.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_goes_through_structlog(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("agecalc.infrastructure.clock").debug("Clock tick %s", "12:30")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Clock tick 12:30"
        assert parsed["level"] == "debug"

    def test_debug_suppressed_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("agecalc.test").debug("hidden")
        assert capfd.readouterr().err == ""
