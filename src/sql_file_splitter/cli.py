"""Command-line interface for the SQL file splitter."""

import argparse
import logging
import sys

from sql_file_splitter.notify import LoggingNotifier
from sql_file_splitter.options import (
    DEFAULT_LINES_PER_FILE,
    DEFAULT_MAX_OUTPUT_FILES,
    OptionsError,
    SplitterOptions,
)
from sql_file_splitter.splitter import SqlFileSplitter

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sql-file-splitter",
        description=(
            "Split a PostgreSQL DDL file with CREATE object commands, COPY commands and "
            "INSERT INTO commands into a series of output files, each with roughly the same "
            "number of lines. A new file is only started on a line with a CREATE object "
            "statement, COPY command or INSERT INTO command. Once the maximum number of "
            "files is reached, the remaining lines are written to the final output file."
        ),
        epilog="Example: sql-file-splitter Database_schema_and_data.sql --lines-per-file 500000 --max-files 25",
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        default="",
        help="SQL script file to process",
    )

    parser.add_argument(
        "--lines-per-file",
        "--lines",
        "-l",
        dest="lines_per_file",
        type=int,
        default=DEFAULT_LINES_PER_FILE,
        help=f"Target number of lines to write to each output file (default: {DEFAULT_LINES_PER_FILE})",
    )

    parser.add_argument(
        "--max-files",
        "--max-output-files",
        "-m",
        dest="max_output_files",
        type=int,
        default=DEFAULT_MAX_OUTPUT_FILES,
        help=(
            "Maximum number of output files to create; once reached, the remaining lines "
            f"are written to the final output file (default: {DEFAULT_MAX_OUTPUT_FILES})"
        ),
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show additional status messages while processing the input file",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # --verbose implies debug output
    log_level = logging.DEBUG if args.verbose else getattr(logging, args.log_level)
    configure_logging(log_level)

    notifier = LoggingNotifier()
    options = SplitterOptions(
        input_file_path=args.input_file,
        lines_per_file=args.lines_per_file,
        max_output_files=args.max_output_files,
        verbose=args.verbose,
    )

    try:
        options.validate()
    except OptionsError as exc:
        parser.print_help(sys.stderr)
        notifier.warning("Validation error:")
        notifier.warning(str(exc))
        return 1

    for line in options.describe():
        logger.info(line)

    splitter = SqlFileSplitter(options, notifier)
    if not splitter.process_input_file():
        notifier.warning("Processing error")
        return 1

    notifier.status("Processing complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
