"""Tests for CLI logging setup."""

from __future__ import annotations

import logging

from layout_analytics.logging_config import StderrHandler, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_verbose_sets_debug(self):
        configure_logging(verbose=True)
        assert logging.getLogger("layout_analytics").level == logging.DEBUG
        configure_logging()

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("LAYOUT_ANALYTICS_LOG_LEVEL", "info")
        configure_logging()
        assert logging.getLogger("layout_analytics").level == logging.INFO
        monkeypatch.delenv("LAYOUT_ANALYTICS_LOG_LEVEL")
        configure_logging()
        assert logging.getLogger("layout_analytics").level == logging.WARNING

    def test_single_handler(self):
        configure_logging()
        configure_logging()
        handlers = [
            h for h in logging.getLogger("layout_analytics").handlers
            if isinstance(h, StderrHandler)
        ]
        assert len(handlers) == 1
