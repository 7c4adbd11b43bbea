"""Issue aggregation and quality gate evaluation."""

from typing import Dict, List, Optional, Tuple

from .config import GateConfig, NO_LIMIT, DEFAULT_GATE_CONFIG
from .models import Severity, SEVERITIES, ReportIssue
from .utils import get_logger


class Reporter:
    """
    Accumulates analysis issues and decides whether they pass the gates.

    Responsibilities:
    1. Bucket ingested issues by severity, keeping insertion order
    2. Track issues that are not visible on the reviewed diff
    3. Compare per-severity counts with the configured gates
    4. Describe the outcome in one sentence

    One instance is created per evaluation run. It is not thread-safe.
    """

    def __init__(self, config: Optional[GateConfig] = None):
        self.config = config or DEFAULT_GATE_CONFIG
        self.logger = get_logger()

        self._issue_counts: Dict[Severity, int] = {s: 0 for s in SEVERITIES}
        self._report_issues: Dict[Severity, List[ReportIssue]] = {}
        self._not_reported_on_diff: Dict[Severity, List[ReportIssue]] = {}
        self._not_reported_issue_count = 0

    def process(self, issue, url: Optional[str] = None, reported_on_diff: bool = True):
        """
        Record one issue.

        Args:
            issue: Issue exposing a `severity` attribute
            url: Link to the issue, None if there is none
            reported_on_diff: Whether the issue is visible on the reviewed diff

        Raises:
            ValueError: If the issue severity is not a Severity member
        """
        severity = getattr(issue, "severity", None)
        if not isinstance(severity, Severity):
            raise ValueError(f"Issue has unknown severity: {severity!r}")

        report_issue = ReportIssue(issue=issue, url=url, reported_on_diff=reported_on_diff)
        self._report_issues.setdefault(severity, []).append(report_issue)
        self._issue_counts[severity] += 1

        if not reported_on_diff:
            self._not_reported_issue_count += 1
            self._not_reported_on_diff.setdefault(severity, []).append(report_issue)

        self.logger.debug(
            f"Recorded {severity.name.lower()} issue "
            f"({'on diff' if reported_on_diff else 'outside diff'})"
        )

    def has_issues(self) -> bool:
        return self.issue_count() > 0

    def issue_count(self) -> int:
        """Total number of ingested issues."""
        return sum(self._issue_counts[s] for s in SEVERITIES)

    def issue_count_for_severity(self, severity: Severity) -> int:
        return self._issue_counts.get(severity, 0)

    def not_reported_issue_count(self) -> int:
        """Number of issues outside the reviewed diff."""
        return self._not_reported_issue_count

    def report_issues(self) -> Tuple[ReportIssue, ...]:
        """All issues, most severe first, in ingestion order within a severity."""
        return self._flatten(self._report_issues)

    def report_issues_for_severity(self, severity: Severity) -> Tuple[ReportIssue, ...]:
        return tuple(self._report_issues.get(severity, ()))

    def not_reported_on_diff_issues(self) -> Tuple[ReportIssue, ...]:
        """Issues outside the reviewed diff, ordered like report_issues()."""
        return self._flatten(self._not_reported_on_diff)

    def not_reported_on_diff_issues_for_severity(self, severity: Severity) -> Tuple[ReportIssue, ...]:
        return tuple(self._not_reported_on_diff.get(severity, ()))

    def is_above_gate_for_severity(self, severity: Severity) -> bool:
        """True if the severity has a gate and its count strictly exceeds it."""
        gate = self.config.gate_for(severity)
        return gate != NO_LIMIT and self.issue_count_for_severity(severity) > gate

    def is_above_gates(self) -> bool:
        """True if any severity is above its gate."""
        return self._above_important_gates() or self._above_other_gates()

    def gate_violations(self) -> List[Severity]:
        """Severities above their gate, most severe first."""
        return [s for s in SEVERITIES if self.is_above_gate_for_severity(s)]

    def status(self) -> str:
        return "failed" if self.is_above_gates() else "success"

    def status_description(self) -> str:
        """
        Summarize the run in one sentence.

        Example:
            "SonarQube reported 4 issues, with 3 blocker (fail) and 1 minor"
        """
        parts = ["SonarQube reported "]
        total = self.issue_count()
        if total == 0:
            parts.append("no issues")
            return "".join(parts)

        parts.append(f"{total} issue{'s' if total != 1 else ''},")
        for severity in SEVERITIES:
            count = self.issue_count_for_severity(severity)
            if count == 0:
                continue
            parts.append(" with " if parts[-1].endswith(",") else " and ")
            detail = f"{count} {severity.name.lower()}"
            if self.is_above_gate_for_severity(severity):
                detail += " (fail)"
            parts.append(detail)

        return "".join(parts)

    def _above_important_gates(self) -> bool:
        return any(
            self.is_above_gate_for_severity(s)
            for s in (Severity.BLOCKER, Severity.CRITICAL)
        )

    def _above_other_gates(self) -> bool:
        return any(
            self.is_above_gate_for_severity(s)
            for s in (Severity.MAJOR, Severity.MINOR, Severity.INFO)
        )

    @staticmethod
    def _flatten(buckets: Dict[Severity, List[ReportIssue]]) -> Tuple[ReportIssue, ...]:
        return tuple(
            report_issue
            for severity in SEVERITIES
            for report_issue in buckets.get(severity, ())
        )
