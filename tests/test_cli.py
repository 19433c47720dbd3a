"""Tests for the command-line interface."""

import logging
from pathlib import Path

from sql_file_splitter import cli


def test_parser_defaults() -> None:
    args = cli.create_parser().parse_args(["dump.sql"])
    assert args.input_file == "dump.sql"
    assert args.lines_per_file == 500_000
    assert args.max_output_files == 25
    assert args.verbose is False


def test_parser_aliases() -> None:
    args = cli.create_parser().parse_args(["dump.sql", "--lines", "10", "-m", "3", "-v"])
    assert args.lines_per_file == 10
    assert args.max_output_files == 3
    assert args.verbose is True


def test_main_splits_file(tmp_path: Path, caplog) -> None:
    caplog.set_level(logging.INFO)
    input_path = tmp_path / "dump.sql"
    input_path.write_text("CREATE TABLE a (x int);\nrow\nCREATE TABLE b (x int);\nrow\n")

    exit_code = cli.main([str(input_path), "--lines-per-file", "2", "--max-files", "5"])

    assert exit_code == 0
    assert (tmp_path / "dump_part001.sql").read_text() == "CREATE TABLE a (x int);\nrow\n"
    assert (tmp_path / "dump_part002.sql").read_text() == "CREATE TABLE b (x int);\nrow\n"
    assert "Processing complete" in caplog.messages


def test_main_rejects_missing_input_argument(caplog) -> None:
    exit_code = cli.main([])

    assert exit_code == 1
    assert "Validation error:" in caplog.messages


def test_main_reports_processing_error(tmp_path: Path, caplog) -> None:
    exit_code = cli.main([str(tmp_path / "missing.sql")])

    assert exit_code == 1
    assert "Processing error" in caplog.messages
    assert any(message.startswith("Input file not found") for message in caplog.messages)
