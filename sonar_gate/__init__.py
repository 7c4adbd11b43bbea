"""SonarQube issue aggregation and quality gate evaluation."""

from .config import GateConfig, NO_LIMIT, DEFAULT_GATE_CONFIG
from .models import Severity, SEVERITIES, Issue, ReportIssue
from .reporter import Reporter

__all__ = [
    "GateConfig",
    "NO_LIMIT",
    "DEFAULT_GATE_CONFIG",
    "Severity",
    "SEVERITIES",
    "Issue",
    "ReportIssue",
    "Reporter",
]
