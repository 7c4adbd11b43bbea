"""Data models for gate evaluation."""

from .issue import Severity, SEVERITIES, Issue, ReportIssue

__all__ = [
    "Severity",
    "SEVERITIES",
    "Issue",
    "ReportIssue",
]
