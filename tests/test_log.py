"""
Unit tests for logging utilities.
"""

import io
import logging

import pytest
from pyfmincg.core import DenseMatrix
from pyfmincg.optimization import fmincg
from pyfmincg.utils.log import get_logger, set_log_level, configure_logging


@pytest.fixture
def restore_logging():
    yield
    configure_logging(logging.WARNING)


class TestGetLogger:
    """Tests for get_logger."""

    def test_namespaced(self):
        """Test that names are placed under the package namespace."""
        assert get_logger("custom").name == "pyfmincg.custom"
        assert get_logger("pyfmincg.optimization").name == "pyfmincg.optimization"
        assert get_logger().name == "pyfmincg"

    def test_cached(self):
        """Test that the same logger object is returned twice."""
        assert get_logger("cached") is get_logger("cached")

    def test_single_handler(self):
        """Test that repeated calls do not stack handlers."""
        logger = get_logger("handlers")
        get_logger("handlers")
        assert len(logger.handlers) == 1


class TestConfigureLogging:
    """Tests for set_log_level and configure_logging."""

    def test_debug_output_shows_iterations(self, restore_logging):
        """Test that DEBUG level prints one line per accepted line search."""
        stream = io.StringIO()
        configure_logging(logging.DEBUG, format_string="%(message)s", stream=stream)

        _, costs, _ = fmincg(lambda x: (x.dot(x), 2 * x),
                             DenseMatrix.from_rows([[3.0], [4.0]]), 10)

        lines = [line for line in stream.getvalue().splitlines()
                 if line.startswith("iteration")]
        assert len(lines) == len(costs)

    def test_silent_by_default(self, restore_logging):
        """Test that nothing is written at WARNING level."""
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)

        fmincg(lambda x: (x.dot(x), 2 * x), DenseMatrix.from_rows([[3.0]]), 10)

        assert stream.getvalue() == ""

    def test_set_log_level_by_name(self, restore_logging):
        """Test that level names are accepted."""
        logger = get_logger("levels")
        set_log_level("INFO")
        assert logger.level == logging.INFO
        set_log_level(logging.ERROR)
        assert logger.level == logging.ERROR
