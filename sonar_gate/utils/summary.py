"""Summary rendering for gate results."""

from typing import List

from ..models import SEVERITIES, ReportIssue


def summary_stats(reporter) -> dict:
    """
    Collect gate results into a plain dictionary.

    Args:
        reporter: Reporter holding the ingested issues

    Returns:
        Dictionary with status, totals and per-severity counts
    """
    stats = {
        "status": reporter.status(),
        "total": reporter.issue_count(),
        "not_reported": reporter.not_reported_issue_count(),
    }
    for severity in SEVERITIES:
        stats[severity.name.lower()] = reporter.issue_count_for_severity(severity)
    return stats


def format_summary(reporter) -> str:
    """
    Format gate results as a Markdown comment body.

    Args:
        reporter: Reporter holding the ingested issues

    Returns:
        Markdown report string
    """
    lines = [
        "## SonarQube Analysis Summary",
        "",
        reporter.status_description(),
    ]

    if reporter.has_issues():
        lines.append("")
        lines.append("### Severity Breakdown")
        for severity in SEVERITIES:
            count = reporter.issue_count_for_severity(severity)
            if count == 0:
                continue
            marker = " (fail)" if reporter.is_above_gate_for_severity(severity) else ""
            lines.append(f"- {severity.name.capitalize()}: {count}{marker}")

    not_reported = reporter.not_reported_on_diff_issues()
    if not_reported:
        lines.append("")
        lines.append(f"### Issues outside the diff ({len(not_reported)})")
        lines.extend(_format_issue_line(report_issue) for report_issue in not_reported)

    lines.append("")
    lines.append("---")
    lines.append(f"*Quality gate: {reporter.status()}*")

    return "\n".join(lines)


def _format_issue_line(report_issue: ReportIssue) -> str:
    issue = report_issue.issue
    parts: List[str] = [f"- **{issue.severity.name}**"]

    component = getattr(issue, "component", None)
    if component:
        line = getattr(issue, "line", None)
        location = f"{component}:{line}" if line is not None else component
        parts.append(f" `{location}`")

    message = getattr(issue, "message", None)
    if message:
        parts.append(f" - {message}")

    if report_issue.url is not None:
        parts.append(f" ([link]({report_issue.url}))")

    return "".join(parts)
