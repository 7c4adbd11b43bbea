"""Configuration for quality gate evaluation."""

from dataclasses import dataclass
import os

from .models import Severity

# Threshold value meaning "no limit" for a severity
NO_LIMIT = -1


@dataclass(frozen=True)
class GateConfig:
    """Maximum number of issues allowed per severity."""

    max_blocker_issues_gate: int = 0
    max_critical_issues_gate: int = NO_LIMIT
    max_major_issues_gate: int = NO_LIMIT
    max_minor_issues_gate: int = NO_LIMIT
    max_info_issues_gate: int = NO_LIMIT

    def __post_init__(self):
        for severity in Severity:
            gate = self.gate_for(severity)
            if gate < NO_LIMIT:
                raise ValueError(
                    f"Invalid gate for {severity.name.lower()}: {gate} "
                    f"(use {NO_LIMIT} for no limit)"
                )

    def gate_for(self, severity: Severity) -> int:
        """Get the threshold configured for a severity."""
        return getattr(self, f"max_{severity.name.lower()}_issues_gate")

    @classmethod
    def no_limits(cls) -> "GateConfig":
        """Create a config where no severity can fail the gate."""
        return cls(max_blocker_issues_gate=NO_LIMIT)

    @classmethod
    def from_env(cls) -> "GateConfig":
        """Create config from environment variables."""
        defaults = cls()
        return cls(**{
            f"max_{severity.name.lower()}_issues_gate": int(os.environ.get(
                f"SONAR_GATE_MAX_{severity.name}_ISSUES",
                str(defaults.gate_for(severity)),
            ))
            for severity in Severity
        })


# Default configuration
DEFAULT_GATE_CONFIG = GateConfig()
