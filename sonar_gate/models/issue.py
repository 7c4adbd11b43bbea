"""Data models for analysis issues."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class Severity(Enum):
    """Issue severity levels reported by the analysis engine."""
    BLOCKER = "BLOCKER"     # Must be fixed before release
    CRITICAL = "CRITICAL"   # Bugs, security hotspots
    MAJOR = "MAJOR"         # Code quality
    MINOR = "MINOR"         # Minor code smells
    INFO = "INFO"           # Informational

    @property
    def rank(self) -> int:
        """Position in SEVERITIES, 0 being the most severe."""
        return SEVERITIES.index(self)

    @classmethod
    def parse(cls, value: Union[str, "Severity"]) -> "Severity":
        """
        Convert a raw severity value into a Severity member.

        Args:
            value: Severity member or its name, case-insensitive

        Returns:
            Matching Severity

        Raises:
            ValueError: If the value is not one of the five known severities
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown severity: {value!r}")


# Most to least severe
SEVERITIES = (
    Severity.BLOCKER,
    Severity.CRITICAL,
    Severity.MAJOR,
    Severity.MINOR,
    Severity.INFO,
)


@dataclass
class Issue:
    """Issue found by the analysis engine."""
    severity: Severity
    message: str
    rule_key: Optional[str] = None
    component: Optional[str] = None  # File path
    line: Optional[int] = None


@dataclass(frozen=True)
class ReportIssue:
    """An ingested issue with its link and diff visibility."""
    issue: Any  # Anything exposing a `severity` attribute
    url: Optional[str]
    reported_on_diff: bool
