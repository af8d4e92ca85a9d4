"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from typefmt.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("typefmt").level == logging.DEBUG

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger("typefmt").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("typefmt.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "typefmt.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("typefmt.services.naming").debug("Formatted 1 argument(s)")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Formatted 1 argument(s)"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "typefmt.services.naming"

    def test_debug_suppressed_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("typefmt.infrastructure.loader").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
