"""Split a SQL dump into numbered files at statement boundaries."""

import time
from pathlib import Path

from sql_file_splitter.notify import LoggingNotifier, Notifier
from sql_file_splitter.options import SplitterOptions
from sql_file_splitter.paths import compact_path
from sql_file_splitter.splitter.patterns import classify_boundary
from sql_file_splitter.splitter.segment import SegmentWriter
from sql_file_splitter.splitter.types import (
    BUFFER_SIZE,
    PROGRESS_INTERVAL_LINES,
    PROGRESS_MIN_SECONDS,
    RunState,
    SplitStats,
)


class SqlFileSplitter:
    """
    Splits a PostgreSQL dump file into a series of output files.

    A new output file is only started on a line holding a CREATE object
    statement, a COPY command or an INSERT INTO command, and only once the
    current file has reached ``lines_per_file`` lines. After
    ``max_output_files`` files exist, the remaining input is copied to the
    last one.
    """

    def __init__(self, options: SplitterOptions, notifier: Notifier | None = None):
        self.options = options
        self.notifier: Notifier = notifier or LoggingNotifier()
        self.stats = SplitStats()

    def process_input_file(self) -> bool:
        """
        Process the input file.

        Returns True if successful, False if the input is missing or an I/O
        error occurred. Errors are reported through the notifier.
        """
        self.stats = SplitStats()

        try:
            input_file = Path(self.options.input_file_path)

            if not input_file.is_file():
                self.notifier.error(f"Input file not found: {input_file.absolute()}")
                return False

            if not input_file.parent.is_dir():
                self.notifier.error(
                    f"Unable to determine the parent directory of the input file: {input_file.absolute()}"
                )
                return False

            self.notifier.status(f"Reading {compact_path(input_file.absolute())}")

            with (
                open(input_file, "rb", buffering=BUFFER_SIZE) as reader,
                SegmentWriter(input_file) as segments,
            ):
                self.stats.output_paths = segments.paths
                state = RunState(segments)
                self._open_next_segment(state)

                for line in reader:
                    state.total_lines += 1

                    if state.overflow:
                        segments.write(line)
                        self._report_overflow_progress(state)
                        continue

                    self._scan_line(state, line)

                    if segments.sequence >= self.options.max_output_files:
                        self._enter_overflow(state)

            self.stats.lines_read = state.total_lines
            self.stats.overflow = state.overflow
            self.notifier.status(f"Processed {state.total_lines:,} lines in the input file")
            return True

        except OSError as exc:
            self.notifier.error("Error in process_input_file", exc)
            return False

    def _scan_line(self, state: RunState, line: bytes) -> None:
        """Write one line, starting a new segment first if it is a valid cut point."""
        state.segment_line_count += 1
        boundary = classify_boundary(line)

        if (
            boundary is not None
            and state.segment_line_count >= self.options.lines_per_file
            and state.segments.current.lines_written > 0
        ):
            if self.options.verbose:
                self.notifier.debug(f" Wrote {state.segments.current.lines_written:,} lines")
            self._open_next_segment(state)
            # The boundary line is the first line of the new segment.
            state.segment_line_count = 1

        if boundary is not None and self.options.verbose:
            self.notifier.debug(boundary.text)

        state.segments.write(line)

    def _open_next_segment(self, state: RunState) -> None:
        segment = state.segments.open_next()
        self.notifier.status(f"Writing data to {segment.path.name}")

    def _enter_overflow(self, state: RunState) -> None:
        state.overflow = True
        state.last_progress = time.monotonic()
        self.notifier.debug("Writing the remaining data from the input file to the current output file")

    def _report_overflow_progress(self, state: RunState) -> None:
        if not self.options.verbose or state.total_lines % PROGRESS_INTERVAL_LINES != 0:
            return

        now = time.monotonic()
        if now - state.last_progress >= PROGRESS_MIN_SECONDS:
            self.notifier.debug(f"{state.total_lines:,} lines written")
            state.last_progress = now
