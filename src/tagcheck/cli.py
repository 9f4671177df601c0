"""Command-line entry point: ``tagcheck -path ./pkg``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from tagcheck.models.errors import TagCheckError
from tagcheck.service.runner import TagCheckRunner
from tagcheck.settings import LOG_LEVELS, Settings

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagcheck",
        description="Report Go struct fields that have no tag.",
    )
    parser.add_argument("-path", "--path", default=".", help="directory name")
    parser.add_argument(
        "-r", "--recursive", action="store_true", default=settings.recursive,
        help="also check subdirectories (skips vendor, testdata, hidden and _-prefixed dirs)",
    )
    parser.add_argument("--marker", default=settings.marker,
                        help="comment token that introduces an exemption list")
    parser.add_argument("--workers", type=int, default=settings.workers,
                        help="number of files checked in parallel")
    parser.add_argument("--format", choices=["text", "json"], default="text",
                        help="report format")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        default=settings.log_level, help="logging level")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"tagcheck: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    logging.basicConfig(level=args.log_level)
    logger = logging.getLogger("tagcheck.cli")

    runner = TagCheckRunner(marker=args.marker, workers=args.workers)
    try:
        report = runner.run(Path(args.path), recursive=args.recursive)
    except TagCheckError as exc:
        logger.debug("Run aborted", exc_info=True)
        print(f"tagcheck: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.format == "json":
        print(report.model_dump_json(indent=2))
    else:
        for block in report.render_lines():
            print(block, file=sys.stderr)

    return EXIT_VIOLATIONS if report.failed else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
