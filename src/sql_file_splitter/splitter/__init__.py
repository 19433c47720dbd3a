"""Line scanning, boundary detection and output rollover."""

from sql_file_splitter.splitter.patterns import classify_boundary, is_boundary
from sql_file_splitter.splitter.segment import OutputSegment, SegmentWriter
from sql_file_splitter.splitter.split import SqlFileSplitter
from sql_file_splitter.splitter.types import BoundaryMatch, SplitStats

__all__ = [
    "BoundaryMatch",
    "OutputSegment",
    "SegmentWriter",
    "SplitStats",
    "SqlFileSplitter",
    "classify_boundary",
    "is_boundary",
]
