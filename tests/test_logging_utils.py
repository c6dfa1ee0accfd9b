#!/usr/bin/env python3
"""Tests for console logging setup."""

import logging
import unittest

from konami_cardmap.logging_utils import CLI_FORMAT, setup_cli_logging


class TestSetupCliLogging(unittest.TestCase):
    """Test setup_cli_logging."""

    def setUp(self):
        """Remember the root logger state so it can be restored."""
        root_logger = logging.getLogger()
        self.saved_handlers = root_logger.handlers[:]
        self.saved_level = root_logger.level

    def tearDown(self):
        """Restore the root logger state."""
        root_logger = logging.getLogger()
        root_logger.handlers[:] = self.saved_handlers
        root_logger.setLevel(self.saved_level)

    def test_repeated_setup_keeps_one_handler(self):
        """Test calling setup twice does not duplicate output."""
        setup_cli_logging()
        setup_cli_logging()
        self.assertEqual(len(logging.getLogger().handlers), 1)

    def test_short_format(self):
        """Test records are formatted as LEVEL: message."""
        setup_cli_logging()
        handler = logging.getLogger().handlers[0]
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "Sorting...", None, None)
        self.assertEqual(handler.format(record), "INFO: Sorting...")
        self.assertEqual(handler.formatter._fmt, CLI_FORMAT)

    def test_verbose_level(self):
        """Test verbose mode enables DEBUG on the root logger."""
        setup_cli_logging(verbose=True)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)
        setup_cli_logging()
        self.assertEqual(logging.getLogger().level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
