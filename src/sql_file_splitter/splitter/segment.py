"""Output segment lifecycle: one writable file at a time."""

from pathlib import Path
from typing import BinaryIO

from sql_file_splitter.paths import segment_path
from sql_file_splitter.splitter.types import BUFFER_SIZE


class OutputSegment:
    """A single numbered output file opened with create/truncate semantics."""

    def __init__(self, input_file: Path, sequence: int):
        self.sequence = sequence
        self.path = segment_path(input_file, sequence)
        self.lines_written = 0
        self._handle: BinaryIO | None = open(self.path, "wb", buffering=BUFFER_SIZE)  # noqa: SIM115

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write(self, line: bytes) -> None:
        """Append one raw line, terminator included."""
        if self._handle is None:
            raise ValueError(f"Segment {self.path.name} is already finalized")
        self._handle.write(line)
        self.lines_written += 1

    def close(self) -> None:
        """Flush and close the file. Safe to call more than once."""
        if self._handle is not None:
            handle, self._handle = self._handle, None
            handle.close()


class SegmentWriter:
    """
    Owns the current output segment for one run.

    Opening the next segment finalizes the previous one first, so at most one
    output handle is open at any time. Use as a context manager to guarantee
    the last segment is closed on every exit path.
    """

    def __init__(self, input_file: Path):
        self._input_file = input_file
        self._current: OutputSegment | None = None
        self.paths: list[Path] = []

    @property
    def current(self) -> OutputSegment:
        if self._current is None:
            raise RuntimeError("No output segment is open")
        return self._current

    @property
    def sequence(self) -> int:
        """Sequence number of the current segment, 0 before the first one."""
        return 0 if self._current is None else self._current.sequence

    def open_next(self) -> OutputSegment:
        """Finalize the current segment and make the next one current."""
        next_sequence = self.sequence + 1
        self.close()
        self._current = OutputSegment(self._input_file, next_sequence)
        self.paths.append(self._current.path)
        return self._current

    def write(self, line: bytes) -> None:
        self.current.write(line)

    def close(self) -> None:
        if self._current is not None:
            self._current.close()

    def __enter__(self) -> "SegmentWriter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
