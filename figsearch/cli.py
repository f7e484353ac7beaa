from __future__ import annotations

import argparse
import enum
import logging
import sys
from typing import Any, NoReturn, Optional

from .bitmap import Bitmap
from .errors import FigsearchError
from .format import INVALID, VALID, format_result
from .io import load_bitmap
from .lines import Orientation, longest_run
from .squares import largest_square


USAGE = """Usage: figsearch <operation> [...].
Operations:
  --help    Show help message.
  test      Checking the input file for correct bitmap image content.
  hline     Find the longest horizontal line in the image.
  vline     Find the longest vertical line in the image.
  square    Find the biggest square in the image.
Example: figsearch hline image.txt
"""


class Command(enum.Enum):
    TEST = "test"
    HLINE = "hline"
    VLINE = "vline"
    SQUARE = "square"


def run_command(command: Command, bitmap: Bitmap) -> str:
    """Run one search command on a loaded bitmap and return its output text."""
    if command is Command.TEST:
        return VALID
    if command is Command.HLINE:
        return format_result(longest_run(bitmap, Orientation.HORIZONTAL))
    if command is Command.VLINE:
        return format_result(longest_run(bitmap, Orientation.VERTICAL))
    if command is Command.SQUARE:
        return format_result(largest_square(bitmap))
    raise ValueError(f"unknown command {command!r}")


class _UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    # report bad arguments through main's banner instead of exiting with status 2
    def error(self, message: str) -> NoReturn:
        raise _UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="figsearch", add_help=False)
    parser.add_argument("command", nargs="?", help="Operation to run")
    parser.add_argument("file", nargs="?", help="Path to the bitmap file")
    parser.add_argument("-h", "--help", action="store_true", help="Show help message")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (logs go to stderr)",
    )
    return parser


def main(argv: Any = None) -> int:
    try:
        args = _build_parser().parse_args(argv)
    except _UsageError:
        sys.stdout.write(USAGE)
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if args.help:
        sys.stdout.write(USAGE)
        return 0

    command: Optional[Command] = None
    if args.command is not None:
        try:
            command = Command(args.command)
        except ValueError:
            logging.info("Unknown command %r", args.command)
    if command is None:
        sys.stdout.write(USAGE)
        return 1
    if args.file is None:
        sys.stdout.write("Invalid argument count\n")
        sys.stdout.write(USAGE)
        return 1

    try:
        bitmap = load_bitmap(args.file)
        output = run_command(command, bitmap)
    except FigsearchError as exc:
        logging.info("%s %s failed: %s", command.value, args.file, exc)
        sys.stderr.write(INVALID)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
