#!/usr/bin/env python3
"""
SonarQube Quality Gate - Main Entry Point

Evaluates analysis issues against per-severity gates.

Usage:
    python -m sonar_gate.main evaluate --issues issues.json --max-critical 0

Gates default to SONAR_GATE_MAX_<SEVERITY>_ISSUES env vars.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .config import GateConfig
from .models import Issue, Severity
from .reporter import Reporter
from .utils import setup_logging, get_logger, format_summary, summary_stats

EXIT_SUCCESS = 0
EXIT_FAILED = 1
EXIT_INVALID_INPUT = 2


def load_issues(path: Path) -> List[dict]:
    """
    Load raw issue entries from a JSON file.

    Args:
        path: File holding a JSON list of issue objects

    Returns:
        List of issue dictionaries
    """
    data = json.loads(path.read_text())
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of issues")
    return data


def build_reporter(entries: List[dict], config: GateConfig) -> Reporter:
    """Feed raw issue entries into a new Reporter."""
    reporter = Reporter(config)

    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Issue entry must be an object, got {entry!r}")
        issue = Issue(
            severity=Severity.parse(entry.get("severity")),
            message=entry.get("message", ""),
            rule_key=entry.get("rule_key"),
            component=entry.get("component"),
            line=entry.get("line"),
        )
        reported_on_diff = entry.get("reported_on_diff", True)
        if not isinstance(reported_on_diff, bool):
            raise ValueError(f"reported_on_diff must be a boolean, got {reported_on_diff!r}")
        reporter.process(issue, url=entry.get("url"), reported_on_diff=reported_on_diff)

    return reporter


def resolve_config(args) -> GateConfig:
    """Apply CLI gate overrides on top of the environment config."""
    config = GateConfig.from_env()
    overrides = {
        f"max_{severity.name.lower()}_issues_gate": getattr(args, f"max_{severity.name.lower()}")
        for severity in Severity
        if getattr(args, f"max_{severity.name.lower()}") is not None
    }
    if not overrides:
        return config

    values = {
        f"max_{severity.name.lower()}_issues_gate": config.gate_for(severity)
        for severity in Severity
    }
    values.update(overrides)
    return GateConfig(**values)


def cmd_evaluate(args) -> int:
    """Handle 'evaluate' subcommand."""
    import logging
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO)
    logger = get_logger()

    try:
        config = resolve_config(args)
        entries = load_issues(Path(args.issues))
        reporter = build_reporter(entries, config)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Invalid input: {e}")
        return EXIT_INVALID_INPUT

    logger.info(f"Gate stats: {summary_stats(reporter)}")

    if args.markdown:
        print(format_summary(reporter))
    else:
        print(reporter.status_description())

    return EXIT_FAILED if reporter.is_above_gates() else EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Evaluate SonarQube issues against quality gates"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    evaluate_parser = subparsers.add_parser("evaluate", help="Evaluate issues against gates")
    evaluate_parser.add_argument(
        "--issues",
        type=str,
        required=True,
        help="JSON file with the list of issues"
    )
    for severity in Severity:
        name = severity.name.lower()
        evaluate_parser.add_argument(
            f"--max-{name}",
            type=int,
            default=None,
            help=f"Maximum {name} issues allowed, -1 for no limit"
        )
    evaluate_parser.add_argument(
        "--markdown",
        action="store_true",
        help="Print the full Markdown summary"
    )
    evaluate_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.command == "evaluate":
        return cmd_evaluate(args)

    # No subcommand - show help
    parser.print_help()
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
