"""Tests for utils/logging.py."""

import logging
import os
import unittest
from unittest.mock import patch

from utils.logging import get_logger, set_log_level


class TestGetLogger(unittest.TestCase):
    """Tests for get_logger and set_log_level."""

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            logger = get_logger("tests.logging.env")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
        self.assertIsInstance(logger.handlers[0], logging.StreamHandler)

    def test_invalid_level_falls_back_to_info(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "loud"}):
            logger = get_logger("tests.logging.invalid")
        self.assertEqual(logger.level, logging.INFO)

    def test_handler_attached_once(self):
        first = get_logger("tests.logging.once")
        second = get_logger("tests.logging.once")
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)

    def test_set_log_level(self):
        set_log_level("error", "tests.logging.a", "tests.logging.b")
        self.assertEqual(logging.getLogger("tests.logging.a").level, logging.ERROR)
        self.assertEqual(logging.getLogger("tests.logging.b").level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
