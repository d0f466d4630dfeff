"""
Command-line interface for linesort
"""

import argparse
import logging
import sys

import yaml

from linesort.config import load_config
from linesort.errors import ArgumentError, LineSortError
from linesort.pipeline import run
from linesort.writer import format_records

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2"""

    def error(self, message):
        raise ArgumentError(message, arity=_is_arity_error(message))


def _is_arity_error(message: str) -> bool:
    if message.startswith("the following arguments are required"):
        return True
    if message.startswith("unrecognized arguments:"):
        extras = message.split(":", 1)[1].split()
        return not any(arg.startswith("-") for arg in extras)
    return False


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="linesort",
        description="Sort the lines of a counted text file with bubble sort",
    )

    parser.add_argument("input_file", help="File whose first line is the number of lines to sort")

    parser.add_argument("output_file", help="File to write the sorted lines to")

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=LOG_LEVELS,
        default=None,
    )

    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the sorted lines after writing them",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail if the input has more lines than its header declares",
    )

    parser.add_argument(
        "--line-buffer",
        type=int,
        help="Read lines through a fixed buffer of this many characters (legacy: 128)",
        default=None,
    )

    return parser


def configure_logging(level: str | None) -> None:
    """Configure the root logger; log records go to stderr"""
    logging.basicConfig(
        level=getattr(logging, level or "WARNING", logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def print_usage(parser: argparse.ArgumentParser) -> None:
    print("Wrong number of arguments! Correct usage: ")
    print(f"  {parser.format_usage().strip()}")


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as e:
        if e.arity:
            print_usage(parser)
        else:
            print(parser.format_usage().strip(), file=sys.stderr)
            print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return e.exit_code

    try:
        config = load_config(args.config)

        # Command-line flags win over the config file
        if args.log_level:
            config.log_level = args.log_level
        if args.strict:
            config.strict = True
        if args.show:
            config.show_records = True
        if args.line_buffer is not None:
            config.line_buffer_size = args.line_buffer
            config.__post_init__()
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return ArgumentError.exit_code

    configure_logging(config.log_level)

    try:
        result = run(args.input_file, args.output_file, config, report=print)
    except LineSortError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    if config.show_records:
        print(format_records(result.records))

    return 0


if __name__ == "__main__":
    sys.exit(main())
