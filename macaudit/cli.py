"""Command-line entry point.

Usage:
    macaudit            # display audit on screen only
    macaudit --file     # also save audit to a timestamped file
"""

from __future__ import annotations

import argparse
import logging
import sys

from macaudit.config import settings
from macaudit.engine import AuditReporter
from macaudit.errors import InvalidArgument, OutputSinkFailure
from macaudit.models import AuditOptions

logger = logging.getLogger(__name__)

PROG = "macaudit"
FILE_FLAGS = ("-f", "--file")
HELP_FLAGS = ("-h", "--help")
FLAGS = FILE_FLAGS + HELP_FLAGS

USAGE = f"""Usage: {PROG} [OPTIONS]

Options:
  -f, --file    Save output to file (default: display only)
  -h, --help    Show this help message

Example:
  {PROG}           # Display audit on screen only
  {PROG} --file    # Save audit to timestamped file
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        # never print argparse usage or exit 2
        raise argparse.ArgumentError(None, message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, add_help=False, allow_abbrev=False, exit_on_error=False)
    parser.add_argument(*FILE_FLAGS, action="store_true", dest="save_to_file")
    parser.add_argument(*HELP_FLAGS, action="store_true", dest="show_help")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse ``argv``; any unrecognized argument raises ``InvalidArgument``."""
    parser = build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        # flags given a value (--file=yes) or glued to unknown letters (-fx)
        raise InvalidArgument(_offending(argv)) from e
    if unknown:
        raise InvalidArgument(unknown[0])
    return args


def _offending(argv: list[str]) -> str:
    return next((arg for arg in argv if arg not in FLAGS), argv[0] if argv else "")


def configure_logging() -> None:
    # stdout carries the report; diagnostics go to stderr
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None, reporter: AuditReporter | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        args = parse_args(argv)
    except InvalidArgument as e:
        print(e, file=sys.stderr)
        print("Use -h or --help for usage information", file=sys.stderr)
        return 1

    if args.show_help:
        print(USAGE, end="")
        return 0

    configure_logging()
    reporter = reporter or AuditReporter()
    try:
        reporter.run(AuditOptions(save_to_file=args.save_to_file))
    except OutputSinkFailure as e:
        logger.error("Report output failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
