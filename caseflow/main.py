"""Command-line entry point: screen an intake record from a JSON file.

Usage:
    python -m caseflow.main intake.json
    python -m caseflow.main --all < intake.json

Prints the surfaced programs (or all 22 with --all) as a camelCase JSON
array on stdout. Logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from caseflow.config import settings
from caseflow.eligibility import calculate_benefits, eligible_program_ids, evaluate_eligibility

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def configure_logging(level: str | None = None) -> None:
    """stdlib logging + structlog, both to stderr so stdout stays pure JSON."""
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Screen a client intake record for benefit programs")
    parser.add_argument("path", nargs="?", type=Path, help="Intake JSON file (default: stdin)")
    parser.add_argument("--all", action="store_true", help="Print all 22 programs, not only matches")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override LOG_LEVEL",
    )
    return parser.parse_args(argv)


def _read_intake(path: Path | None) -> Any:
    text = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    return json.loads(text)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    log = structlog.get_logger(__name__)

    try:
        intake = _read_intake(args.path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Could not read intake record: %s", e)
        return EXIT_BAD_INPUT

    if args.all:
        results = evaluate_eligibility(intake)
    else:
        results = calculate_benefits(intake)

    json.dump([r.model_dump(mode="json", by_alias=True) for r in results], sys.stdout, indent=2)
    sys.stdout.write("\n")

    log.info("eligibility_screened", shown=len(results), eligible=eligible_program_ids(results))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
