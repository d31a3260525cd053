"""Command-line interface for csvpart."""

import argparse
import logging
import os
import sys

from csvpart.errors import CsvPartError
from csvpart.split import main_split

logger = logging.getLogger(__name__)

# Environment variable to override the default log level.
CSVPART_LOG_LEVEL_ENV = "CSVPART_LOG_LEVEL"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
DEFAULT_LOG_LEVEL = "WARNING"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def default_log_level() -> str:
    """Log level from CSVPART_LOG_LEVEL, falling back to WARNING."""
    override = os.environ.get(CSVPART_LOG_LEVEL_ENV, "").upper()
    if override in LOG_LEVELS:
        return override
    return DEFAULT_LOG_LEVEL


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="csvpart",
        description="Separate a CSV file into smaller ones based on percentage.",
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="File to partition (unless --filename is given), then the percentage "
        "of data lines for each output file, in order",
    )

    parser.add_argument(
        "--filename",
        default=None,
        help="Name of file to be partitioned",
    )

    parser.add_argument(
        "--headers",
        type=int,
        required=True,
        help="Number of header lines to duplicate into every output file",
    )

    parser.add_argument(
        "--whole",
        action="store_true",
        help="Assume provided percentages are part of a whole, and fill the remainder",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the output files (default: current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL}, or ${CSVPART_LOG_LEVEL_ENV})",
    )

    return parser


def resolve_inputs(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> tuple[str, list[str]]:
    """Split positional inputs into the source filename and its percentages."""
    if args.filename is not None:
        return args.filename, args.inputs

    filename, *percentages = args.inputs
    if not percentages:
        parser.error("at least one percentage is required after FILENAME")
    return filename, percentages


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.headers < 0:
        parser.error(f"--headers cannot be negative, got {args.headers}")

    filename, percentages = resolve_inputs(parser, args)

    try:
        main_split(
            input_path=filename,
            percentages=percentages,
            header_lines=args.headers,
            whole=args.whole,
            output_dir=args.output_dir,
        )
    except (CsvPartError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
