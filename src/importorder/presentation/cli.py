"""Command line interface.

Exit status: 0 when clean, 1 when violations remain, 2 on parse errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from importorder.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from importorder.application.reporters._base import BaseReporter
from importorder.application.services.checker import ImportOrderChecker
from importorder.application.services.parser import collect_files
from importorder.domain.exceptions import ParseError
from importorder.domain.model.configuration import ImportOrderConfig

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_PARSE_ERROR = 2

REPORTERS: dict[str, type[BaseReporter]] = {
    "text": PlainTextReporter,
    "json": JSONReporter,
    "console": ConsoleReporter,
}


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the importorder command."""
    parser = argparse.ArgumentParser(
        prog="importorder",
        description="Check and fix the order of leading import statements",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories to check")
    parser.add_argument("--fix", action="store_true", help="Rewrite files in place")
    parser.add_argument(
        "--no-sort-members",
        dest="sort_members",
        action="store_false",
        help="Do not check the order of names in from-imports",
    )
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Compare imported names without lower-casing",
    )
    parser.add_argument(
        "--format",
        choices=sorted(REPORTERS),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ImportOrderConfig(sort_members=args.sort_members, case_sensitive=args.case_sensitive)
    checker = ImportOrderChecker(config, reporter=REPORTERS[args.format]())

    try:
        if args.fix:
            fixed = sum(checker.fix_file(path) for path in collect_files(args.paths))
            logger.info("rewrote %d file(s)", fixed)
        results = checker.check_paths(args.paths)
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    return EXIT_OK if all(r.passed for r in results) else EXIT_VIOLATIONS


if __name__ == "__main__":
    sys.exit(main())
