"""Tests for structlog-based logging setup."""

from __future__ import annotations

import logging

import pytest
import structlog

from kisan_ai.core.config import ObservabilityConfig
from kisan_ai.core.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()


class TestSetupLogging:
    def test_installs_single_structlog_handler(self) -> None:
        setup_logging(ObservabilityConfig(log_level="DEBUG"))
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_level_applied(self) -> None:
        setup_logging(ObservabilityConfig(log_level="warning"))
        assert logging.getLogger().level == logging.WARNING
        assert logging.getLogger("kisan_ai").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(ObservabilityConfig(log_level="chatty"))
        assert logging.getLogger().level == logging.INFO

    def test_service_name_bound(self) -> None:
        setup_logging(ObservabilityConfig(service_name="kisan-test"))
        assert structlog.contextvars.get_contextvars()["service"] == "kisan-test"
