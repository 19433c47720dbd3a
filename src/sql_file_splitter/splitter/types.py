"""Shared constants and state structures for splitting."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

if TYPE_CHECKING:
    from sql_file_splitter.splitter.segment import SegmentWriter

BoundaryKind: TypeAlias = Literal["create_object", "load_data"]

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Overflow progress is considered every this many input lines...
PROGRESS_INTERVAL_LINES = 100_000

# ...and only reported if this many seconds passed since the last report.
PROGRESS_MIN_SECONDS = 15.0


@dataclass(frozen=True, slots=True)
class BoundaryMatch:
    """A line recognized as a safe place to start a new output file."""

    kind: BoundaryKind
    text: str


@dataclass
class RunState:
    """Mutable state for a single pass over the input file."""

    segments: "SegmentWriter"
    segment_line_count: int = 0
    total_lines: int = 0
    overflow: bool = False
    last_progress: float = 0.0


@dataclass
class SplitStats:
    """Statistics from the most recent process_input_file run."""

    lines_read: int = 0
    output_paths: list[Path] = field(default_factory=list)
    overflow: bool = False
