"""Tests for the logging setup helper."""

import logging

from fitcoach.core.logging import configure_logging


class TestConfigureLogging:

    def test_sets_level_by_name(self):
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_handler_added_once(self):
        configure_logging("INFO")
        count = len(logging.getLogger().handlers)
        configure_logging("INFO")
        assert len(logging.getLogger().handlers) == count
