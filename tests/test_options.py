"""Tests for splitter options."""

import pytest

from sql_file_splitter.options import OptionsError, SplitterOptions


class TestSplitterOptions:
    """Test cases for SplitterOptions."""

    def test_defaults(self) -> None:
        options = SplitterOptions(input_file_path="dump.sql")
        assert options.lines_per_file == 500_000
        assert options.max_output_files == 25
        assert options.verbose is False
        options.validate()

    @pytest.mark.parametrize("path", ["", "   "])
    def test_blank_input_path_rejected(self, path: str) -> None:
        with pytest.raises(OptionsError, match="input file is required"):
            SplitterOptions(input_file_path=path).validate()

    def test_non_positive_counts_rejected(self) -> None:
        with pytest.raises(OptionsError, match="Lines per file"):
            SplitterOptions(input_file_path="dump.sql", lines_per_file=0).validate()
        with pytest.raises(OptionsError, match="Maximum output files"):
            SplitterOptions(input_file_path="dump.sql", max_output_files=-1).validate()

    def test_describe(self) -> None:
        """The summary lists every setting."""
        lines = SplitterOptions(input_file_path="dump.sql", lines_per_file=1000).describe()
        assert lines[0] == "Options:"
        assert any("dump.sql" in line for line in lines)
        assert any("1,000" in line for line in lines)
        assert len(lines) == 5
