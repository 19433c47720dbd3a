"""SQL File Splitter - Split large SQL dumps at statement boundaries."""

from sql_file_splitter.options import SplitterOptions
from sql_file_splitter.splitter import SqlFileSplitter

__all__ = ["SplitterOptions", "SqlFileSplitter"]
