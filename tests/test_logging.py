"""Tests for logging setup."""

import io
import logging

from sonar_gate.utils import get_logger, setup_logging
from sonar_gate.utils.logging import LOGGER_NAME


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_cli_format_at_info(self):
        """At INFO, records should use the short CLI format."""
        # Given
        stream = io.StringIO()

        # When
        logger = setup_logging(level=logging.INFO, stream=stream)
        get_logger().info("Gate stats: {}")
        get_logger().debug("hidden")

        # Then
        assert logger.name == LOGGER_NAME
        assert stream.getvalue() == "sonar-gate: INFO Gate stats: {}\n"

    def test_debug_format_includes_logger_name(self):
        """At DEBUG, records should carry the timestamp and logger name."""
        stream = io.StringIO()

        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger().debug("Recorded major issue")

        assert "DEBUG sonar_gate - Recorded major issue" in stream.getvalue()

    def test_repeated_setup_replaces_handler(self):
        """Calling setup twice should not duplicate output."""
        first = io.StringIO()
        second = io.StringIO()

        setup_logging(stream=first)
        logger = setup_logging(stream=second)
        logger.warning("once")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1
        assert len(logger.handlers) == 1
