"""Utility functions."""

from .logging import setup_logging, get_logger
from .summary import format_summary, summary_stats

__all__ = [
    "setup_logging",
    "get_logger",
    "format_summary",
    "summary_stats",
]
