"""Tests for path helpers."""

from pathlib import Path

from sql_file_splitter.paths import compact_path, segment_path


def test_segment_path_naming() -> None:
    base = Path("/data/dumps/Database_schema_and_data.sql")
    assert segment_path(base, 1) == Path("/data/dumps/Database_schema_and_data_part001.sql")
    assert segment_path(base, 25).name == "Database_schema_and_data_part025.sql"
    assert segment_path(base, 1234).name == "Database_schema_and_data_part1234.sql"


def test_segment_path_without_extension() -> None:
    assert segment_path(Path("/tmp/dump"), 7) == Path("/tmp/dump_part007")


def test_compact_path() -> None:
    short = "/data/dump.sql"
    assert compact_path(short) == short

    long_path = "/very" + "/nested" * 30 + "/dump.sql"
    compacted = compact_path(long_path, 60)
    assert len(compacted) <= 60
    assert compacted.endswith("/dump.sql")
    assert "..." in compacted
