"""
Tests for the package logger helper.
"""

import logging

from wordsearch.logging_utils import LOGGER_NAME, get_logger


class TestGetLogger:

    def test_single_handler(self):
        first = get_logger()
        second = get_logger()
        assert first is second
        assert first.name == LOGGER_NAME
        assert len(first.handlers) == 1

    def test_keeps_caller_configuration(self):
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        try:
            assert get_logger().level == logging.DEBUG
        finally:
            logger.setLevel(logging.INFO)
