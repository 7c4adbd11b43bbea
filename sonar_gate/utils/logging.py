"""Logging utilities."""

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "sonar_gate"

# Gate results go to stdout; diagnostics stay on stderr
CLI_FORMAT = "sonar-gate: %(levelname)s %(message)s"
DEBUG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    format_str: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a handler to the sonar_gate logger.

    Only the CLI calls this; library modules just ask for loggers.

    Args:
        level: Logging level (default: INFO)
        format_str: Custom format string, defaults to CLI_FORMAT, or
            DEBUG_FORMAT at DEBUG level
        stream: Output stream (default: stderr)

    Returns:
        Configured logger
    """
    if format_str is None:
        format_str = DEBUG_FORMAT if level <= logging.DEBUG else CLI_FORMAT

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))
    logger.handlers = [handler]
    logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
