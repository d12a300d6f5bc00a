"""Command-line entry point for when-present."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence

from when_present.builder import build_forest_from_file
from when_present.config import EXIT_DIRECTIVE_ERROR, EXIT_OK, EXIT_USAGE_ERROR
from when_present.exceptions import DirectiveError, SourceReadError, UsageError
from when_present.output_formatter import format_forest, format_reports
from when_present.query import report_lines
from when_present.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_DESCRIPTION = (
    "Calculates and displays the circumstances under which particular line "
    "number(s) are present when compiling the specified source file with respect "
    "to preprocessor definitions."
)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise UsageError instead of exiting with argparse's status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


class _SingleValueAction(argparse.Action):
    def __call__(self, parser, namespace, values, option_string=None):  # type: ignore[override]
        if getattr(namespace, self.dest, None) is not None:
            parser.error("Path specified more than once")
        setattr(namespace, self.dest, values)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Invalid line number '{value}'")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="when-present",
        allow_abbrev=False,
        usage="%(prog)s --lines <value>... --file <path>",
        description=_DESCRIPTION,
    )
    parser.add_argument(
        "--file",
        action=_SingleValueAction,
        metavar="<path>",
        help="Path to the file to read from",
    )
    parser.add_argument(
        "--lines",
        action="extend",
        nargs="+",
        type=_positive_int,
        metavar="<value>",
        help="The line number(s) to calculate",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the conditional tree of the file before any line reports",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Raises:
        UsageError: On any argument problem.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.file:
        parser.error("Must specify file path")
    if not args.lines and not args.tree:
        parser.error("Must specify line number(s)")
    args.lines = args.lines or []
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool and return the process exit status."""
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        # --help
        return exc.code if isinstance(exc.code, int) else EXIT_OK
    except UsageError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        build_parser().print_usage(sys.stderr)
        return EXIT_USAGE_ERROR

    configure_logging("DEBUG" if args.verbose else None)

    try:
        forest = build_forest_from_file(args.file)
    except SourceReadError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except DirectiveError as exc:
        logger.debug(
            "Conditional structure is malformed",
            extra={"path": exc.path, "line": exc.line},
        )
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_DIRECTIVE_ERROR

    logger.info(
        "Built %d top-level conditional(s) from %s", len(forest.conditionals), args.file
    )

    if args.tree:
        sys.stdout.write(format_forest(forest))
    if args.lines:
        reports = report_lines(forest, args.lines)
        sys.stdout.write(format_reports(reports, output_format=args.format))
    return EXIT_OK
