"""Statement boundary detection for SQL dump lines."""

import re

from sql_file_splitter.splitter.types import BoundaryMatch

# Line terminators are excluded from the name token so the match never
# swallows the end of the line.
CREATE_OBJECT_PATTERN = re.compile(
    rb"^CREATE (TABLE|VIEW|FUNCTION|PROCEDURE) [^ (\r\n]+", re.IGNORECASE
)
LOAD_DATA_PATTERN = re.compile(rb"^(COPY|INSERT INTO) [^ (\r\n]+", re.IGNORECASE)


def _decode(text: bytes) -> str:
    return text.decode("utf-8", errors="replace")


def classify_boundary(line: bytes) -> BoundaryMatch | None:
    """
    Classify a raw input line as a statement boundary.

    CREATE TABLE/VIEW/FUNCTION/PROCEDURE is checked first, then
    COPY / INSERT INTO. Returns None if the line starts neither.
    """
    match = CREATE_OBJECT_PATTERN.match(line)
    if match is not None:
        return BoundaryMatch("create_object", _decode(match.group(0)))

    match = LOAD_DATA_PATTERN.match(line)
    if match is not None:
        return BoundaryMatch("load_data", _decode(match.group(0)))

    return None


def is_boundary(line: bytes) -> bool:
    """Return True if the line starts a CREATE object or data-load statement."""
    return classify_boundary(line) is not None
